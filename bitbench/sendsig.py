"""Send SIGUSR1 or SIGINT to a process."""

from __future__ import annotations

import os
import re
import signal
import sys

_OPTIONS = {"-u": signal.SIGUSR1, "-i": signal.SIGINT}
_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")


def _atoi(text: str) -> int:
    match = _INT_PREFIX.match(text)
    return int(match.group(1)) if match else 0


def signal_for_option(option: str) -> signal.Signals | None:
    """Return the signal for ``-u`` (SIGUSR1) or ``-i`` (SIGINT), else None."""
    return _OPTIONS.get(option)


def send_signal(option: str, pid: int) -> signal.Signals | None:
    """Send the signal chosen by *option* to *pid*; return it, or None if none applies.

    Raises OSError if the signal cannot be sent.
    """
    sig = signal_for_option(option)
    if sig is not None:
        os.kill(pid, sig)
    return sig


def main(argv: list[str] | None = None) -> int:
    """Parse ``<signal type> <pid>`` and send the signal."""
    args = sys.argv[1:] if argv is None else argv
    if len(args) != 2:
        print("Usage: sendsig <signal type> <pid>")
        return 0
    option, pid_text = args
    try:
        send_signal(option, _atoi(pid_text))
    except OSError:
        print(f"Error sending {signal_for_option(option).name}.")
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())