"""Command-line interface for namesplit.

Responsibilities:
- Read pasted text from a file or stdin and print one name per line.
- Resolve switches from CLI flags, an optional YAML file, and the environment.

Key public functions:
- `app`: Typer application instance.
- `main`: invoke the Typer application.
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

from .cli_rendering import echo_split_summary, exit_with_command_error, split_status
from .clipboard import copy_to_clipboard
from .config import ConfigLoader, SplitterConfig
from .errors import PipelineStageError
from .pipeline import NameSplitPipeline, to_multiline
from .telemetry.logger import RunLogger
from .text.rules import default_preprocess_rules

app = typer.Typer(
    name="namesplit",
    no_args_is_help=True,
    help="Split pasted name lists into one clean name per line.",
)


def _load_config(config_file: Path | None) -> SplitterConfig:
    """Load env defaults, then a YAML file over them when requested."""

    try:
        env_config = ConfigLoader.from_env()
    except ValueError as exc:
        raise PipelineStageError(
            stage="config",
            detail=f"Invalid environment value: {exc}",
            hint="Check `NAMESPLIT_*` environment variables.",
        ) from exc

    if config_file is None:
        return env_config

    try:
        return ConfigLoader.from_yaml(config_file, defaults=env_config)
    except FileNotFoundError as exc:
        raise PipelineStageError(
            stage="config",
            detail=f"Config file not found: `{config_file}`.",
            hint="Provide an existing path via `--config <path.yaml>`.",
        ) from exc
    except ValueError as exc:
        raise PipelineStageError(
            stage="config",
            detail=f"Invalid config file `{config_file}`: {exc}",
            hint="Fix config keys/values and rerun.",
        ) from exc
    except Exception as exc:
        raise PipelineStageError(
            stage="config",
            detail=f"Failed to load config file `{config_file}`: {exc}",
            hint="Verify YAML syntax and file permissions.",
        ) from exc


def _read_input(input_path: Path | None) -> str:
    """Read raw text from a file, or from stdin when no path (or `-`) is given."""

    if input_path is None or str(input_path) == "-":
        return typer.get_text_stream("stdin").read()
    try:
        return input_path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise PipelineStageError(
            stage="input",
            detail=f"Input file not found: `{input_path}`.",
            hint="Pass an existing text file, or pipe text on stdin.",
        ) from exc
    except (OSError, UnicodeDecodeError) as exc:
        raise PipelineStageError(
            stage="input",
            detail=f"Could not read input file `{input_path}`: {exc}",
            hint="Input must be a UTF-8 text file.",
        ) from exc


def _write_output(out: Path, text: str) -> None:
    try:
        out.parent.mkdir(parents=True, exist_ok=True)
        out.write_text(f"{text}\n" if text else "", encoding="utf-8")
    except OSError as exc:
        raise PipelineStageError(
            stage="output",
            detail=f"Could not write output file `{out}`: {exc}",
        ) from exc


@app.command("split")
def split_command(
    input_path: Annotated[
        Path | None,
        typer.Argument(help="Text file with pasted names. Reads stdin when omitted or `-`."),
    ] = None,
    out: Annotated[
        Path | None,
        typer.Option("--out", help="Write names to this file instead of stdout."),
    ] = None,
    config_file: Annotated[
        Path | None,
        typer.Option("--config", help="Path to YAML config file with switch defaults."),
    ] = None,
    dedupe: Annotated[
        bool | None,
        typer.Option(
            "--dedupe/--no-dedupe",
            help="Drop repeated names (ASCII case-insensitive).",
        ),
    ] = None,
    trim: Annotated[
        bool | None,
        typer.Option("--trim/--no-trim", help="Normalize whitespace inside chunks."),
    ] = None,
    copy: Annotated[
        bool | None,
        typer.Option("--copy/--no-copy", help="Copy the result to the system clipboard."),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", help="Log stage events on stderr."),
    ] = False,
) -> None:
    """Split pasted text into one normalized name per line."""

    run_logger = RunLogger() if verbose else None
    try:
        config = _load_config(config_file)
        if dedupe is not None:
            config.deduplicate = dedupe
        if trim is not None:
            config.trim_whitespace = trim
        if copy is not None:
            config.copy_to_clipboard = copy

        raw = _read_input(input_path)
        result = NameSplitPipeline(run_logger=run_logger).run(raw, config.to_options())
        text = to_multiline(result.names)
        if out is not None:
            _write_output(out, text)
    except Exception as exc:
        if run_logger is not None:
            stage = exc.stage if isinstance(exc, PipelineStageError) else "split"
            run_logger.log_stage_failure(stage, type(exc.__cause__ or exc).__name__)
        exit_with_command_error("split", exc)
    else:
        if out is None and text:
            typer.echo(text)
        copy_requested = config.copy_to_clipboard and bool(text)
        copied = copy_requested and copy_to_clipboard(text)
        echo_split_summary(result, split_status(copy_requested, copied))


@app.command("rules")
def rules_command() -> None:
    """List preprocessing rules in application order."""

    for index, rule in enumerate(default_preprocess_rules(), start=1):
        typer.echo(f"{index}. {type(rule).__name__}")


def main() -> None:
    """CLI entrypoint for console scripts."""
    app()


if __name__ == "__main__":
    main()
