"""Top-level API for batch WAV to SYX conversion."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

from wav2syx.application.models import ConvertibleFile
from wav2syx.application.options import ConversionOptions
from wav2syx.application.ports import AudioConverter, ProgressReporter
from wav2syx.application.results import BatchReport
from wav2syx.types import LogLike, PathLike

__version__ = "0.1.0"


def discover_files(
    source_root: PathLike,
    destination_root: PathLike,
    *,
    extension: str = "wav",
    log: LogLike | None = None,
) -> Iterator[ConvertibleFile]:
    """Lazily discover files under ``source_root`` with the given extension.

    Parameters
    ----------
    source_root : str | os.PathLike
        Directory walked recursively.
    destination_root : str | os.PathLike
        Root the discovered files will be mirrored into.
    extension : str, default="wav"
        Extension without the leading dot, matched case-sensitively.
    log : logging.Logger | logging.LoggerAdapter, optional
        Where traversal errors are reported.
    """
    from .application.discovery import discover_files as _impl

    return _impl(
        Path(source_root), Path(destination_root), extension=extension, log=log
    )


def convert_tree(
    source_root: PathLike,
    destination_root: PathLike,
    *,
    options: ConversionOptions | None = None,
    converter: AudioConverter | None = None,
    log: LogLike | None = None,
    on_result: ProgressReporter | None = None,
) -> BatchReport:
    """Convert every source file under ``source_root`` into ``destination_root``.

    Parameters
    ----------
    source_root : str | os.PathLike
        Directory holding the ``.wav`` files.
    destination_root : str | os.PathLike
        Directory that receives the mirrored ``.syx`` files.
    options : ConversionOptions, optional
        Extensions, sample rate, channel count and worker count.
    converter : AudioConverter, optional
        Conversion capability. Defaults to :class:`SoxConverter`.
    log : logging.Logger | logging.LoggerAdapter, optional
        Run logger. A fresh run-scoped logger is created when omitted.
    on_result : callable, optional
        Called with each :class:`ItemResult` as items finish.

    Returns
    -------
    BatchReport
        Per-item outcomes. Item failures are reported here and in the log,
        never raised.
    """
    from .application.use_cases import convert_tree as _impl

    return _impl(
        source_root=Path(source_root),
        destination_root=Path(destination_root),
        options=options,
        converter=converter,
        log=log,
        on_result=on_result,
    )


__all__ = [
    "BatchReport",
    "ConversionOptions",
    "ConvertibleFile",
    "convert_tree",
    "discover_files",
]
