[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bitbench"
version = "0.1.0"
description = "Small systems-programming exercises: Caesar decoding, Sudoku checks, magic squares, a simulated heap allocator, a cache simulator and signal tools."
requires-python = ">=3.10"
dependencies = []
keywords = ["caesar", "sudoku", "magic-square", "allocator", "cache-simulator", "signals"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
bitbench-decode = "bitbench.caesar:main"
bitbench-sequence = "bitbench.sequence:main"
bitbench-check-board = "bitbench.sudoku:main"
bitbench-magic-square = "bitbench.magic_square:main"
bitbench-csim = "bitbench.cachesim:main"
bitbench-division = "bitbench.division:main"
bitbench-sighandler = "bitbench.sighandler:main"
bitbench-sendsig = "bitbench.sendsig:main"

[tool.hatch.build.targets.wheel]
packages = ["bitbench"]

[tool.pytest.ini_options]
addopts = "-ra"
