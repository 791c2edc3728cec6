"""Unit tests for prompt helpers."""

from unittest.mock import MagicMock, patch

import pytest

from shlink_installer.errors import WizardCancelledError
from shlink_installer.wizard.prompts import (
    EMPTY_VALUE_ERROR,
    QuestionaryPromptDevice,
    ask,
    choose,
    print_title,
)


class TestAsk:
    """Test suite for the free-text prompt loop."""

    def test_returns_first_answer(self, make_prompts, console) -> None:
        prompts = make_prompts(["value"])

        assert ask(prompts, console, "Name") == "value"
        assert prompts.calls == [("text", "Name:", "")]

    def test_default_shown_in_label(self, make_prompts, console) -> None:
        prompts = make_prompts(["x"])

        ask(prompts, console, "Database host", "localhost")

        assert prompts.calls == [("text", "Database host (defaults to localhost):", "localhost")]

    def test_empty_answer_uses_default(self, make_prompts, console, read_output) -> None:
        prompts = make_prompts([""])

        assert ask(prompts, console, "Database name", "shlink") == "shlink"
        assert len(prompts.calls) == 1
        assert EMPTY_VALUE_ERROR not in read_output(console)

    def test_empty_answer_repeats_until_non_empty(
        self, make_prompts, console, read_output
    ) -> None:
        """Test a required prompt re-asks and takes the first non-empty value."""
        prompts = make_prompts(["", "   ", "admin", "ignored"])

        result = ask(prompts, console, "Database username")

        assert result == "admin"
        assert len(prompts.calls) == 3
        assert read_output(console).count(EMPTY_VALUE_ERROR) == 2
        assert prompts.answers == ["ignored"]

    def test_allow_empty_accepts_empty(self, make_prompts, console, read_output) -> None:
        prompts = make_prompts([""])

        assert ask(prompts, console, "Secret", allow_empty=True) == ""
        assert len(prompts.calls) == 1
        assert EMPTY_VALUE_ERROR not in read_output(console)

    def test_whitespace_is_empty_when_allowed(self, make_prompts, console) -> None:
        prompts = make_prompts(["  "])

        assert ask(prompts, console, "Secret", allow_empty=True) == ""

    def test_value_keeps_inner_whitespace(self, make_prompts, console) -> None:
        prompts = make_prompts([" pass word "])

        assert ask(prompts, console, "Database password") == " pass word "

    def test_cancelled(self, make_prompts, console) -> None:
        prompts = make_prompts([None])

        with pytest.raises(WizardCancelledError, match="Wizard cancelled"):
            ask(prompts, console, "Name")

    def test_cancelled_is_value_error(self, make_prompts, console) -> None:
        """Cancellation keeps ValueError semantics for callers."""
        with pytest.raises(ValueError):
            ask(make_prompts([None]), console, "Name")


class TestChoose:
    """Test suite for choice prompts."""

    def test_returns_selected_label(self, make_prompts) -> None:
        prompts = make_prompts(["https"])

        assert choose(prompts, "Select schema", ["http", "https"]) == "https"
        assert prompts.calls == [
            ("select", "Select schema (defaults to http):", ["http", "https"])
        ]

    def test_default_index(self, make_prompts) -> None:
        prompts = make_prompts(["es"])

        choose(prompts, "Select language", ["en", "es"], default_index=1)

        assert prompts.calls[0][1] == "Select language (defaults to es):"

    def test_cancelled(self, make_prompts) -> None:
        with pytest.raises(WizardCancelledError):
            choose(make_prompts([None]), "Select", ["a"])

    def test_unknown_label(self, make_prompts) -> None:
        with pytest.raises(ValueError, match="Invalid choice"):
            choose(make_prompts(["c"]), "Select", ["a", "b"])


class TestPrintTitle:
    """Test suite for section headers."""

    def test_title_frame(self, console, read_output) -> None:
        print_title(console, "database")

        lines = read_output(console).splitlines()
        assert lines == ["", "************", "* DATABASE *", "************"]

    def test_title_is_stripped(self, console, read_output) -> None:
        print_title(console, "  url shortener ")

        lines = read_output(console).splitlines()
        assert lines[2] == "* URL SHORTENER *"
        assert len(lines[1]) == len("URL SHORTENER") + 4


class TestQuestionaryPromptDevice:
    """Test suite for the questionary-backed device."""

    @patch("shlink_installer.wizard.prompts.questionary.select")
    def test_select(self, mock_select: MagicMock) -> None:
        mock_select.return_value.ask.return_value = "SQLite"

        result = QuestionaryPromptDevice().select(
            "Select database type:", ["MySQL", "SQLite"], "MySQL"
        )

        assert result == "SQLite"
        mock_select.assert_called_once_with(
            "Select database type:", choices=["MySQL", "SQLite"], default="MySQL"
        )

    @patch("shlink_installer.wizard.prompts.questionary.text")
    def test_text(self, mock_text: MagicMock) -> None:
        mock_text.return_value.ask.return_value = "localhost"

        result = QuestionaryPromptDevice().text("Database host:", default="localhost")

        assert result == "localhost"
        mock_text.assert_called_once_with("Database host:", default="localhost")

    @patch("shlink_installer.wizard.prompts.questionary.text")
    def test_text_cancelled(self, mock_text: MagicMock) -> None:
        """questionary returns None on Ctrl-C."""
        mock_text.return_value.ask.return_value = None

        assert QuestionaryPromptDevice().text("Name:") is None
