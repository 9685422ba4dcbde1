"""Tests for the console front end."""

import pytest
from rich.console import Console

import run
from page_sim import CommandLineInterface, SimulatorConfig


@pytest.fixture
def console():
    return Console(record=True, width=120, color_system=None)


@pytest.fixture
def cli(console):
    return CommandLineInterface(console=console, chart_width=20)


class TestExecute:
    """Verify the rendered views."""

    def test_summary(self, cli, console) -> None:
        """The summary lists each policy with its fault count."""
        results = cli.execute(SimulatorConfig())
        assert len(results) == 4
        text = console.export_text()
        for name in ("FIFO", "LRU", "Clock", "Optimal"):
            assert name in text
        assert "76.9%" in text

    def test_verbose_tables(self, cli, console) -> None:
        """Step tables show frame columns, empty slots and the total."""
        cli.execute(SimulatorConfig(sequence="1,2", frames=3, policies=("fifo",), verbose=True))
        text = console.export_text()
        assert "FIFO step by step" in text
        assert "F0" in text and "F2" in text
        assert "-" in text
        assert "Total faults: 2" in text

    def test_chart_scales_to_peak(self, cli, console) -> None:
        """The policy with the most faults gets a full width bar."""
        cli.execute(SimulatorConfig(chart=True))
        text = console.export_text()
        assert "Page fault comparison" in text
        assert "█" * 20 + " 10" in text

    def test_timeline(self, cli, console) -> None:
        """The event timeline is rendered on request."""
        cli.execute(SimulatorConfig(timeline=True))
        assert "POLICY" in console.export_text()

    def test_error_panel(self, cli, console) -> None:
        """Input errors are shown instead of raised."""
        assert cli.execute(SimulatorConfig(sequence="1,a")) is None
        assert "Invalid page reference: 'a'" in console.export_text()

    def test_zero_frames_chart(self, cli, console) -> None:
        """Zero frames still renders a table with no frame columns."""
        results = cli.execute(SimulatorConfig(sequence="1,1", frames=0, verbose=True, chart=True))
        assert [r.total_faults for r in results] == [2, 2, 2, 2]


class TestInteractive:
    """Verify prompting."""

    def test_prompts(self, cli, console, monkeypatch) -> None:
        """Answers to the four prompts drive one run."""
        answers = iter(["1 2 1", "", "y", "n"])
        monkeypatch.setattr("builtins.input", lambda prompt="": next(answers))
        results = cli.run()
        assert [r.total_faults for r in results] == [2, 2, 2, 2]
        assert "step by step" in console.export_text()

    def test_bad_frames_reprompts(self, cli, console, monkeypatch) -> None:
        """An invalid frame count asks again."""
        answers = iter(["1", "two", "n", "n", "1", "1", "n", "n"])
        monkeypatch.setattr("builtins.input", lambda prompt="": next(answers))
        results = cli.run()
        assert len(results) == 4
        assert "Invalid frame count" in console.export_text()

    def test_exit(self, cli, monkeypatch) -> None:
        """Typing exit leaves without running."""
        monkeypatch.setattr("builtins.input", lambda prompt="": "exit")
        assert cli.run() is None

    def test_interrupt(self, cli, monkeypatch) -> None:
        """Ctrl-C leaves cleanly."""
        def interrupt(prompt=""):
            raise KeyboardInterrupt
        monkeypatch.setattr("builtins.input", interrupt)
        assert cli.run() is None


class TestMain:
    """Verify the command line entry point."""

    def test_success(self) -> None:
        """A valid invocation exits with status 0."""
        assert run.main(["7,0,1,2", "3", "--chart", "--policies", "fifo,opt"]) == 0

    def test_bad_sequence(self) -> None:
        """A malformed sequence exits with status 2."""
        assert run.main(["1,x", "3"]) == 2

    def test_negative_frames(self) -> None:
        """A negative frame count exits with status 2."""
        assert run.main(["1,2", "-1"]) == 2

    def test_missing_frames(self) -> None:
        """A sequence without a frame count is a usage error."""
        with pytest.raises(SystemExit):
            run.main(["1,2"])

    def test_log_level_choices(self) -> None:
        """Log levels are case-insensitive and unknown ones are a usage error."""
        assert run.main(["1,2", "2", "--log-level", "info"]) == 0
        with pytest.raises(SystemExit):
            run.main(["1,2", "2", "--log-level", "foo"])
