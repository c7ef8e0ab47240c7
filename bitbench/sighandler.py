"""Print the time periodically and count user signals until interrupted."""

from __future__ import annotations

import os
import signal
import sys
import time
from types import FrameType
from typing import TextIO

DEFAULT_INTERVAL = 4


class SignalMonitor:
    """Handlers for SIGALRM, SIGUSR1 and SIGINT."""

    def __init__(self, interval: int = DEFAULT_INTERVAL, out: TextIO | None = None):
        self.interval = interval
        self.out = out
        self.count = 0

    def _write(self, text: str) -> None:
        sink = sys.stdout if self.out is None else self.out
        sink.write(text)
        sink.flush()

    def on_alarm(self, signum: int | None = None, frame: FrameType | None = None) -> None:
        """Print the process id and current time, then rearm the alarm."""
        self._write(f"PID: {os.getpid()} CURRENT TIME: {time.ctime()}\n")
        signal.alarm(self.interval)

    def on_usr1(self, signum: int | None = None, frame: FrameType | None = None) -> None:
        """Count one SIGUSR1."""
        self.count += 1
        self._write("SIGUSR1 handled and counted!\n")

    def on_interrupt(
        self, signum: int | None = None, frame: FrameType | None = None
    ) -> None:
        """Report the SIGUSR1 count and exit."""
        self._write("\nSIGINT handled.\n")
        self._write(f"SIGUSR1 was handled {self.count} times. Exiting now.\n")
        raise SystemExit(0)

    def install(self) -> None:
        """Register the handlers and start the alarm."""
        signal.signal(signal.SIGUSR1, self.on_usr1)
        signal.alarm(self.interval)
        signal.signal(signal.SIGALRM, self.on_alarm)
        signal.signal(signal.SIGINT, self.on_interrupt)


def main(argv: list[str] | None = None) -> int:
    """Install the handlers and wait for signals forever."""
    monitor = SignalMonitor()
    try:
        monitor.install()
    except (OSError, ValueError):
        print("Error binding signal handlers.")
        return 1
    while True:
        signal.pause()


if __name__ == "__main__":
    raise SystemExit(main())