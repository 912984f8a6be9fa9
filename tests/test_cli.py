"""Tests for argument handling and the plain countdown loop."""
import pytest

import pomo
from pomo_timer import Timer


@pytest.fixture
def launched(monkeypatch):
    """Capture the timer handed to the full-screen app instead of running it."""
    seen = {"result": True, "sent": []}

    class FakeApp:
        def __init__(self, timer):
            seen["timer"] = timer

        def run(self):
            seen["ran"] = True
            return seen["result"]

    monkeypatch.setattr(pomo, "PomodoroApp", FakeApp)
    monkeypatch.setattr(
        pomo, "notify", lambda title, message: seen["sent"].append((title, message))
    )
    return seen


class TestArguments:
    def test_default_is_45_minute_work_timer(self, launched):
        pomo.main([])
        timer = launched["timer"]
        assert timer.total == 45 * 60
        assert not timer.is_rest
        assert launched["ran"]

    def test_rest_defaults_to_15_minutes(self, launched):
        pomo.main(["rest"])
        assert launched["timer"].total == 15 * 60
        assert launched["timer"].is_rest

    def test_rest_with_duration(self, launched):
        pomo.main(["rest", "5m"])
        assert launched["timer"].total == 5 * 60
        assert launched["timer"].is_rest

    def test_options_between_rest_and_duration(self, launched):
        pomo.main(["rest", "--no-notify", "5m"])
        assert launched["timer"].total == 5 * 60
        assert launched["timer"].is_rest
        assert launched["sent"] == []

    def test_work_duration_in_seconds(self, launched):
        pomo.main(["30s"])
        assert launched["timer"].total == 30

    def test_notifies_after_app_completes(self, launched):
        pomo.main(["rest", "1m"])
        assert launched["sent"] == [("☕ Break Timer", "Your break is complete!")]

    def test_quitting_app_does_not_notify(self, launched):
        launched["result"] = False
        pomo.main(["25"])
        assert launched["ran"]
        assert launched["sent"] == []

    def test_no_notify(self, launched):
        pomo.main(["--no-notify", "25"])
        assert launched["timer"].total == 25 * 60
        assert launched["sent"] == []

    def test_help_exits_zero(self, capsys):
        with pytest.raises(SystemExit) as excinfo:
            pomo.main(["-h"])
        assert excinfo.value.code == 0
        out = capsys.readouterr().out
        assert "pomo rest 5m" in out

    @pytest.mark.parametrize("argv", [["abc"], ["rest", "xyz"], ["5ms"]])
    def test_invalid_duration_exits_one(self, argv, capsys, launched):
        with pytest.raises(SystemExit) as excinfo:
            pomo.main(argv)
        assert excinfo.value.code == 1
        assert f"Error: invalid duration: {argv[-1]}" in capsys.readouterr().out
        assert "timer" not in launched

    @pytest.mark.parametrize("token", ["0s", "0", "-5"])
    def test_non_positive_duration_exits_one(self, token, capsys, launched):
        with pytest.raises(SystemExit) as excinfo:
            pomo.main([token])
        assert excinfo.value.code == 1
        assert f"Error: duration must be positive: {token}" in capsys.readouterr().out

    def test_too_many_words_is_a_usage_error(self, launched):
        with pytest.raises(SystemExit) as excinfo:
            pomo.main(["rest", "5m", "10m"])
        assert excinfo.value.code == 2

    def test_plain_mode(self, monkeypatch, launched):
        seen = {}

        def fake_run_plain(timer, bar_width, notifier=None):
            seen.update(timer=timer, bar_width=bar_width, notifier=notifier)
            return True

        monkeypatch.setattr(pomo, "run_plain", fake_run_plain)
        pomo.main(["rest", "--plain", "-w", "12", "2s"])
        assert seen["timer"].total == 2
        assert seen["timer"].is_rest
        assert seen["bar_width"] == 12
        assert seen["notifier"] is pomo.notify
        assert "timer" not in launched


class TestRunPlain:
    def test_counts_down_and_notifies(self, capsys):
        sent = []
        sleeps = []
        timer = Timer.start(3)

        done = pomo.run_plain(
            timer,
            10,
            notifier=lambda title, message: sent.append((title, message)),
            sleep=sleeps.append,
        )

        assert done is True
        assert timer.remaining == 0
        assert len(sleeps) == 3
        assert sent == [("🍅 Pomodoro Timer", "Your Pomodoro session is complete!")]
        out = capsys.readouterr().out
        assert "🍅 Pomodoro Timer: 3 seconds" in out
        assert "⏰ 00:03 ░░░░░░░░░░ 0.0%" in out
        assert "⏰ 00:01 ██████░░░░ 66.7%" in out
        assert "🎉 Pomodoro completed!" in out

    def test_keyboard_interrupt_cancels(self, capsys):
        sent = []
        timer = Timer.start(10, is_rest=True)

        def interrupt(_seconds):
            raise KeyboardInterrupt

        done = pomo.run_plain(
            timer,
            10,
            notifier=lambda title, message: sent.append((title, message)),
            sleep=interrupt,
        )

        assert done is False
        assert sent == []
        assert timer.remaining == 10
        assert "Timer cancelled." in capsys.readouterr().out
