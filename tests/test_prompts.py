"""Tests for the interactive init questions."""

from __future__ import annotations

from unittest.mock import MagicMock, patch

import pytest

from starter_cli import (
    DEFAULT_VERSION,
    InitAnswers,
    PromptError,
    collect_answers,
    prompt_version,
    select_with_arrows,
    validate_version,
)


class TestValidateVersion:
    @pytest.mark.parametrize("value", ["1.2.3", "0.0.1", "10.20.30", "1.0.0"])
    def test_accepts(self, value: str) -> None:
        assert validate_version(value)

    @pytest.mark.parametrize("value", ["1.2", "v1.2.3", "1.2.3-beta", "100.0.0", "", "1.2.3.4"])
    def test_rejects(self, value: str) -> None:
        assert not validate_version(value)


class TestPromptVersion:
    def test_reprompts_until_valid(self) -> None:
        ask = MagicMock(side_effect=["1.2", "v1.2.3", "1.2.3"])
        with patch("starter_cli.Prompt.ask", ask):
            assert prompt_version() == "1.2.3"
        assert ask.call_count == 3

    def test_blank_uses_default(self) -> None:
        with patch("starter_cli.Prompt.ask", return_value="   "):
            assert prompt_version() == DEFAULT_VERSION


class TestSelectWithArrows:
    OPTIONS = {"JavaScript": "js", "TypeScript": "ts"}

    def test_enter_picks_default(self) -> None:
        with patch("starter_cli.get_key", side_effect=["enter"]):
            assert select_with_arrows(self.OPTIONS, "Pick", "JavaScript") == "JavaScript"

    def test_arrow_navigation_wraps(self) -> None:
        with patch("starter_cli.get_key", side_effect=["down", "enter"]):
            assert select_with_arrows(self.OPTIONS, "Pick", "JavaScript") == "TypeScript"
        with patch("starter_cli.get_key", side_effect=["up", "enter"]):
            assert select_with_arrows(self.OPTIONS, "Pick", "JavaScript") == "TypeScript"

    def test_escape_cancels(self) -> None:
        with patch("starter_cli.get_key", side_effect=["escape"]):
            with pytest.raises(PromptError):
                select_with_arrows(self.OPTIONS)

    def test_ctrl_c_cancels(self) -> None:
        with patch("starter_cli.get_key", side_effect=KeyboardInterrupt):
            with pytest.raises(PromptError):
                select_with_arrows(self.OPTIONS)


class TestCollectAnswers:
    def test_requires_tty(self) -> None:
        with patch("starter_cli.sys.stdin") as stdin:
            stdin.isatty.return_value = False
            with pytest.raises(PromptError):
                collect_answers()

    def test_asks_in_order(self) -> None:
        with patch("starter_cli.sys.stdin") as stdin, \
                patch("starter_cli.select_with_arrows", return_value="TypeScript") as select, \
                patch("starter_cli.Prompt.ask", side_effect=["Jane Doe", "", "2.0.0"]) as ask:
            stdin.isatty.return_value = True
            answers = collect_answers()

        assert answers == InitAnswers(template="TypeScript", author="Jane Doe", description="", version="2.0.0")
        select.assert_called_once()
        labels = [c.args[0] for c in ask.call_args_list]
        assert "Author" in labels[0]
        assert "Description" in labels[1]
        assert "Version" in labels[2]

    def test_interrupt_becomes_prompt_error(self) -> None:
        with patch("starter_cli.sys.stdin") as stdin, \
                patch("starter_cli.select_with_arrows", return_value="JavaScript"), \
                patch("starter_cli.Prompt.ask", side_effect=KeyboardInterrupt):
            stdin.isatty.return_value = True
            with pytest.raises(PromptError):
                collect_answers()

    def test_eof_becomes_prompt_error(self) -> None:
        with patch("starter_cli.sys.stdin") as stdin, \
                patch("starter_cli.select_with_arrows", return_value="JavaScript"), \
                patch("starter_cli.Prompt.ask", side_effect=EOFError):
            stdin.isatty.return_value = True
            with pytest.raises(PromptError):
                collect_answers()

    def test_prompt_library_error_becomes_prompt_error(self) -> None:
        with patch("starter_cli.sys.stdin") as stdin, \
                patch("starter_cli.select_with_arrows", side_effect=RuntimeError("terminal too small")):
            stdin.isatty.return_value = True
            with pytest.raises(PromptError, match="terminal too small"):
                collect_answers()
