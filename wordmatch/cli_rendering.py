"""CLI output and error rendering helpers.

This module centralizes user-facing CLI presentation for command diagnostics,
normalized text, and boundary tables.
"""

from __future__ import annotations

import json
from typing import NoReturn

import typer

from .errors import CommandStageError
from .sentence import Sentence


def exit_with_command_error(command_name: str, exc: Exception) -> NoReturn:
    """Print concise diagnostics for command failures and exit with code 1."""

    if isinstance(exc, CommandStageError):
        typer.secho(
            f"{command_name} failed at stage `{exc.stage}`: {exc.detail}",
            fg=typer.colors.RED,
            err=True,
        )
        if exc.hint:
            typer.secho(f"Hint: {exc.hint}", fg=typer.colors.YELLOW, err=True)
    else:
        typer.secho(f"{command_name} failed: {exc}", fg=typer.colors.RED, err=True)
    raise typer.Exit(code=1) from exc


def echo_normalized(text: str, sentence: Sentence, output_format: str) -> None:
    """Print the normalized form of `text`."""

    if output_format == "json":
        typer.echo(
            json.dumps(
                {"input": text, "normalized": sentence.render(), "length": sentence.length},
                ensure_ascii=False,
            )
        )
        return
    typer.echo(sentence.render())


def echo_boundaries(sentence: Sentence, output_format: str) -> None:
    """Print one row per canonical character plus the recorded word markers."""

    markers = [list(marker) for marker in sentence._word_markers]
    if output_format == "json":
        typer.echo(
            json.dumps(
                {
                    "normalized": sentence.render(),
                    "boundaries": [boundary.value for boundary in sentence.boundaries],
                    "word_markers": markers,
                    "words": [list(extent) for extent in sentence.words()],
                },
                ensure_ascii=False,
            )
        )
        return

    for index, (character, boundary) in enumerate(
        zip(sentence.contents, sentence.boundaries)
    ):
        typer.echo(f"{index}\t{character!r}\t{boundary.value}")
    typer.echo(f"Words: {len(markers)}")
    typer.echo(f"Word markers: {' '.join(f'{start}:{end}' for start, end in markers) or '-'}")
