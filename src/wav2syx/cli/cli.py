#!/usr/bin/env python3
"""
wav2syx.cli.cli

Typer-based CLI that mirrors a tree of WAV samples into SYX files for
hardware samplers, using ``sox`` for the actual conversion.

Examples
--------
Convert a sample library:

    wav2syx convert --src-dir ./samples --dst-dir ./sysex

Fail the process when any file could not be converted:

    wav2syx convert -s ./samples -d ./sysex --strict
"""

from __future__ import annotations

import sys
import traceback
from pathlib import Path

import typer

from wav2syx import __version__
from wav2syx.adapters.sox import DEFAULT_SOX_BINARY, SoxConverter, locate_sox
from wav2syx.application.options import DEFAULT_CHANNELS, DEFAULT_SAMPLE_RATE
from wav2syx.application.results import BatchReport, ItemResult
from wav2syx.errors import Wav2SyxError
from wav2syx.logging_utils import configure_logging, new_run_logger

app = typer.Typer(
    name="wav2syx",
    help="Convert WAV sample trees into SYX files for hardware samplers.",
    no_args_is_help=True,
)


def _print_conversion_error(exc: Exception, debug: bool) -> int:
    """Print a user-friendly error.

    Parameters
    ----------
    exc : Exception
        Exception raised while running a command.
    debug : bool
        Whether to include traceback details.

    Returns
    -------
    int
        Process exit code.
    """
    typer.secho(f"✗ {type(exc).__name__}: {exc}", fg=typer.colors.RED, err=True)
    if debug:
        typer.echo("\nTraceback:", err=True)
        typer.echo("".join(traceback.format_exception(type(exc), exc, exc.__traceback__)), err=True)
    code = getattr(exc, "exit_code", None)
    if isinstance(code, int) and code > 0:
        return code
    return 1


def _echo_result(result: ItemResult) -> None:
    """Print one finished item."""
    if result.ok:
        typer.secho(f"✓ {result.item.source_path} => {result.output_path}", fg=typer.colors.GREEN)
    else:
        typer.secho(
            f"✗ {result.item.source_path} ({result.status.value})",
            fg=typer.colors.RED,
            err=True,
        )


def _summary(report: BatchReport) -> str:
    summary = (
        f"converted {report.converted} of {report.discovered} file(s), "
        f"{report.failed} failed"
    )
    if report.discovery_errors:
        summary += f", {report.discovery_errors} unreadable path(s)"
    return summary


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"wav2syx {__version__}")
        raise typer.Exit()


# -----------------------------
# Global options
# -----------------------------
@app.callback()
def _main(
    ctx: typer.Context,
    debug: bool = typer.Option(False, "--debug", help="Show full tracebacks on error."),
    log_level: str = typer.Option(
        "INFO",
        "--log-level",
        envvar="WAV2SYX_LOG_LEVEL",
        help="Logging level (DEBUG, INFO, WARNING, ERROR).",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit.",
    ),
) -> None:
    """Initialize logging and shared CLI state.

    Parameters
    ----------
    ctx : typer.Context
        Typer context object used to store shared state.
    debug : bool, default=False
        Whether to enable debug error output.
    log_level : str, default="INFO"
        Root logging level.
    """
    del version
    try:
        configure_logging(log_level)
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="--log-level") from exc
    ctx.obj = {"debug": debug}


# -----------------------------
# Commands
# -----------------------------
@app.command("convert")
def convert_cmd(
    ctx: typer.Context,
    src_dir: Path = typer.Option(
        ...,
        "--src-dir",
        "-s",
        help="Directory which contains WAVs to convert.",
    ),
    dst_dir: Path = typer.Option(
        ...,
        "--dst-dir",
        "-d",
        help="Directory to place SYX files in. Keeps the structure of --src-dir.",
    ),
    sox_binary: str = typer.Option(
        DEFAULT_SOX_BINARY,
        "--sox-binary",
        envvar="WAV2SYX_SOX_BINARY",
        help="sox executable name or path.",
    ),
    sample_rate: int = typer.Option(
        DEFAULT_SAMPLE_RATE, "--sample-rate", help="Target sample rate in Hz."
    ),
    channels: int = typer.Option(
        DEFAULT_CHANNELS, "--channels", help="Target channel count."
    ),
    jobs: int = typer.Option(
        1, "--jobs", "-j", help="Number of files converted concurrently."
    ),
    strict: bool = typer.Option(
        False,
        "--strict",
        help="Exit with status 1 when any file fails to convert.",
    ),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Only print the summary."),
) -> None:
    """Convert every .wav under --src-dir into a .syx under --dst-dir.

    Parameters
    ----------
    ctx : typer.Context
        Typer context containing global options.
    src_dir : Path
        Source tree. An unreadable or missing tree is logged, not fatal.
    dst_dir : Path
        Destination root; missing directories are created.
    strict : bool, default=False
        Turn per-file failures into a non-zero exit status.

    Notes
    -----
    - Without ``--strict`` the command exits 0 even when files fail; failures
      are reported in the log and the summary line.
    """
    debug: bool = bool((ctx.obj or {}).get("debug", False))

    try:
        from wav2syx.application.use_cases import (
            build_conversion_options,
            convert_tree,
        )

        options = build_conversion_options(
            sample_rate=sample_rate,
            channels=channels,
            jobs=jobs,
        )
        report = convert_tree(
            source_root=src_dir,
            destination_root=dst_dir,
            options=options,
            converter=SoxConverter(sox_binary),
            log=new_run_logger(),
            on_result=None if quiet else _echo_result,
        )
    except Wav2SyxError as exc:
        raise typer.Exit(code=_print_conversion_error(exc, debug))
    except Exception as exc:
        # Unexpected crash: still show a clean message; debug prints traceback.
        raise typer.Exit(code=_print_conversion_error(exc, debug))

    typer.echo(_summary(report))
    if strict and not report.ok:
        raise typer.Exit(code=1)


@app.command("doctor")
def doctor_cmd(
    sox_binary: str = typer.Option(
        DEFAULT_SOX_BINARY,
        "--sox-binary",
        envvar="WAV2SYX_SOX_BINARY",
        help="sox executable name or path.",
    ),
) -> None:
    """Print installed toolchain versions and the resolved sox location."""
    import importlib.metadata as metadata

    typer.echo(f"Python: {sys.version.split()[0]}")
    typer.echo(f"wav2syx: {__version__}")
    for module in ("typer", "pydantic"):
        try:
            typer.echo(f"{module}: {metadata.version(module)}")
        except metadata.PackageNotFoundError:
            typer.echo(f"{module}: <not installed>")

    location = locate_sox(sox_binary)
    typer.echo(f"sox: {location if location is not None else '<not found>'}")


if __name__ == "__main__":
    app()
