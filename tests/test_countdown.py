import io
from unittest import mock

from pocbox.tdd.countdown import ConfigurableSleeper, Sleeper, countdown, main

WRITE = "write"
SLEEP = "sleep"


class SpyCountdownOperations(Sleeper):
    def __init__(self):
        self.calls = []

    def sleep(self):
        self.calls.append(SLEEP)

    def write(self, text):
        self.calls.append(WRITE)
        return len(text)


class SpyTime:
    def __init__(self):
        self.duration_slept = None

    def sleep(self, duration):
        self.duration_slept = duration


def test_countdown_prints_3_to_go():
    buffer = io.StringIO()
    countdown(buffer, SpyCountdownOperations())
    assert buffer.getvalue() == "3\n2\n1\nGo!"


def test_countdown_sleeps_before_every_print():
    spy = SpyCountdownOperations()
    countdown(spy, spy)
    assert spy.calls == [WRITE, SLEEP, WRITE, SLEEP, WRITE, SLEEP, WRITE]


def test_configurable_sleeper():
    spy_time = SpyTime()
    sleeper = ConfigurableSleeper(5.0, spy_time.sleep)
    sleeper.sleep()
    assert spy_time.duration_slept == 5.0


@mock.patch("time.sleep")
def test_main_counts_down_on_stdout(fake_sleep, capsys):
    main([])
    assert capsys.readouterr().out == "3\n2\n1\nGo!"
    assert fake_sleep.call_args_list == [mock.call(1.0)] * 3