"""Unit tests for CLI output and error rendering helpers."""

from __future__ import annotations

import json

import pytest
import typer

from wordmatch.cli_rendering import echo_boundaries, echo_normalized, exit_with_command_error
from wordmatch.errors import CommandStageError
from wordmatch.sentence import Sentence


def test_exit_with_command_error_renders_stage_error_with_hint(
    capsys: pytest.CaptureFixture[str],
) -> None:
    """Renderer should print stage diagnostics and hint before exiting with code 1."""

    error = CommandStageError(
        stage="config",
        detail="Config file not found: `missing.yml`.",
        hint="Provide an existing path via `--config <path.yaml>`.",
    )

    with pytest.raises(typer.Exit) as exc_info:
        exit_with_command_error("scan", error)

    captured = capsys.readouterr()
    assert exc_info.value.exit_code == 1
    assert "scan failed at stage `config`" in captured.err
    assert "Hint: Provide an existing path via `--config <path.yaml>`." in captured.err


def test_exit_with_command_error_renders_non_stage_fallback(
    capsys: pytest.CaptureFixture[str],
) -> None:
    """Renderer should print fallback exception text for non-stage failures."""

    with pytest.raises(typer.Exit) as exc_info:
        exit_with_command_error("normalize", RuntimeError("unexpected table error"))

    captured = capsys.readouterr()
    assert exc_info.value.exit_code == 1
    assert "normalize failed: unexpected table error" in captured.err


def test_echo_boundaries_text_rows(capsys: pytest.CaptureFixture[str]) -> None:
    """Text rendering should list index, character, and boundary per row."""

    echo_boundaries(Sentence("Hi x"), "text")

    lines = capsys.readouterr().out.splitlines()
    assert lines == [
        "0\t'h'\tstart",
        "1\t'i'\tend",
        "2\t' '\tno_content",
        "3\t'x'\tmixed",
        "Words: 2",
        "Word markers: 0:0 3:3",
    ]


def test_echo_boundaries_text_without_words(capsys: pytest.CaptureFixture[str]) -> None:
    """Filler-only text should render a placeholder marker list."""

    echo_boundaries(Sentence("\t"), "text")

    lines = capsys.readouterr().out.splitlines()
    assert lines == ["0\t'\\t'\tno_content", "Words: 0", "Word markers: -"]


def test_echo_boundaries_json_payload(capsys: pytest.CaptureFixture[str]) -> None:
    """JSON rendering should expose boundaries, markers, and word extents."""

    echo_boundaries(Sentence("a bc"), "json")

    payload = json.loads(capsys.readouterr().out)
    assert payload == {
        "normalized": "a bc",
        "boundaries": ["mixed", "no_content", "start", "end"],
        "word_markers": [[0, 0], [2, 2]],
        "words": [[0, 1], [2, 4]],
    }


def test_echo_normalized_json_keeps_input_and_length(
    capsys: pytest.CaptureFixture[str],
) -> None:
    """JSON normalization output should keep the raw input alongside the result."""

    echo_normalized("ΗΙ", Sentence("ΗΙ"), "json")

    payload = json.loads(capsys.readouterr().out)
    assert payload == {"input": "ΗΙ", "normalized": "hl", "length": 2}
