"""Command-line interface for wordmatch.

Responsibilities:
- Expose commands for inspecting normalization and word boundaries.
- Convert CLI arguments and YAML/env settings into a `WordmatchConfig`.

Key public functions:
- `app`: Typer application instance.
- `main`: invoke the Typer application.
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

from .cli_rendering import echo_boundaries, echo_normalized, exit_with_command_error
from .config import OUTPUT_FORMATS, ConfigLoader, WordmatchConfig
from .errors import CommandStageError
from .sentence import Sentence
from .telemetry.logger import RunLogger

app = typer.Typer(
    name="wordmatch",
    no_args_is_help=True,
    help="wordmatch CLI.",
)

ConfigOption = Annotated[
    Path | None,
    typer.Option("--config", help="Path to YAML config file with command defaults."),
]
FormatOption = Annotated[
    str | None,
    typer.Option("--format", help="Output format: `text` or `json`."),
]
TextArgument = Annotated[str, typer.Argument(help="Raw text to process.")]


def _load_config(
    config_path: Path | None, output_format: str | None = None
) -> WordmatchConfig:
    """Load config from YAML when requested, else from environment, mapping failures."""

    if config_path is None:
        try:
            return ConfigLoader.from_env(output_format=output_format)
        except ValueError as exc:
            raise CommandStageError(
                stage="config",
                detail=f"Invalid environment configuration: {exc}",
                hint="Fix or unset the `WORDMATCH_*` environment variables.",
            ) from exc

    try:
        return ConfigLoader.from_yaml(config_path, output_format=output_format)
    except FileNotFoundError as exc:
        raise CommandStageError(
            stage="config",
            detail=f"Config file not found: `{config_path}`.",
            hint="Provide an existing path via `--config <path.yaml>`.",
        ) from exc
    except ValueError as exc:
        raise CommandStageError(
            stage="config",
            detail=f"Invalid config file `{config_path}`: {exc}",
            hint="Fix config schema/values and rerun.",
        ) from exc
    except Exception as exc:
        raise CommandStageError(
            stage="config",
            detail=f"Failed to load config file `{config_path}`: {exc}",
            hint="Verify YAML syntax and file permissions.",
        ) from exc


def _resolve_config(config_file: Path | None, output_format: str | None) -> WordmatchConfig:
    """Resolve effective config from file/env defaults and explicit CLI overrides."""

    resolved = None
    if output_format is not None:
        resolved = output_format.strip().lower()
        if resolved not in OUTPUT_FORMATS:
            raise CommandStageError(
                stage="config",
                detail=f"Unsupported output format `{output_format}`.",
                hint=f"Use one of: {', '.join(OUTPUT_FORMATS)}.",
            )
    return _load_config(config_file, resolved)


def _build_sentence(text: str, config: WordmatchConfig, run_logger: RunLogger) -> Sentence:
    """Normalize and scan `text`, logging the stages it passes through."""

    run_logger.log_stage_start("confusables")
    normalizer = config.build_normalizer()
    run_logger.log_stage_complete("confusables")

    run_logger.log_stage_start("scan")
    sentence = Sentence(text, normalizer=normalizer)
    run_logger.log_stage_complete(
        "scan",
        characters=sentence.length,
        words=len(sentence._word_markers),
    )
    return sentence


@app.command("normalize")
def normalize_command(
    text: TextArgument,
    config_file: ConfigOption = None,
    output_format: FormatOption = None,
) -> None:
    """Print the canonical (confusable-free, lowercase) form of TEXT."""

    run_logger = RunLogger()
    try:
        run_logger.log_stage_start("config")
        config = _resolve_config(config_file, output_format)
        run_logger.log_stage_complete("config")
        sentence = _build_sentence(text, config, run_logger)
    except Exception as exc:
        stage = exc.stage if isinstance(exc, CommandStageError) else "normalize"
        run_logger.log_stage_failure(stage, type(exc).__name__)
        exit_with_command_error("normalize", exc)

    echo_normalized(text, sentence, config.output_format)


@app.command("scan")
def scan_command(
    text: TextArgument,
    config_file: ConfigOption = None,
    output_format: FormatOption = None,
) -> None:
    """Print per-character word boundaries and word markers for TEXT."""

    run_logger = RunLogger()
    try:
        run_logger.log_stage_start("config")
        config = _resolve_config(config_file, output_format)
        run_logger.log_stage_complete("config")
        sentence = _build_sentence(text, config, run_logger)
    except Exception as exc:
        stage = exc.stage if isinstance(exc, CommandStageError) else "scan"
        run_logger.log_stage_failure(stage, type(exc).__name__)
        exit_with_command_error("scan", exc)

    echo_boundaries(sentence, config.output_format)


def main() -> None:
    """Run the wordmatch CLI."""

    app()
