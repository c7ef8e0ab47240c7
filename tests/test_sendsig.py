import os
import signal

import pytest

from bitbench.sendsig import main, send_signal, signal_for_option

_MISSING_PID = 999_999_999


@pytest.mark.parametrize(
    "option,expected",
    [("-u", signal.SIGUSR1), ("-i", signal.SIGINT), ("-x", None), ("u", None)],
)
def test_signal_for_option(option, expected):
    assert signal_for_option(option) == expected


def test_send_signal_delivers_to_process():
    received = []
    previous = signal.signal(signal.SIGUSR1, lambda signum, frame: received.append(signum))
    try:
        sent = send_signal("-u", os.getpid())
        assert sent == signal.SIGUSR1
        assert received == [signal.SIGUSR1]
    finally:
        signal.signal(signal.SIGUSR1, previous)


def test_send_signal_unknown_option_sends_nothing():
    assert send_signal("-z", _MISSING_PID) is None


def test_send_signal_missing_process_raises():
    with pytest.raises(ProcessLookupError):
        send_signal("-u", _MISSING_PID)


def test_main_wrong_argument_count(capsys):
    assert main(["-u"]) == 0
    assert capsys.readouterr().out == "Usage: sendsig <signal type> <pid>\n"


def test_main_reports_send_failure(capsys):
    assert main(["-i", str(_MISSING_PID)]) == 1
    assert capsys.readouterr().out == "Error sending SIGINT.\n"


def test_main_unknown_option_succeeds(capsys):
    assert main(["-q", str(_MISSING_PID)]) == 0
    assert capsys.readouterr().out == ""