"""Application-layer use-cases and option objects."""

from __future__ import annotations

from pathlib import Path

from wav2syx.application.models import ConvertibleFile
from wav2syx.application.options import ConversionOptions
from wav2syx.application.ports import AudioConverter, ProgressReporter
from wav2syx.application.results import BatchReport, ItemResult, ItemStatus
from wav2syx.types import LogLike


def build_conversion_options(
    *,
    source_extension: str = "wav",
    intermediate_extension: str = "sds",
    final_extension: str = "syx",
    sample_rate: int = 44100,
    channels: int = 1,
    jobs: int = 1,
) -> ConversionOptions:
    """Build typed conversion options via lazy use-case import."""
    from wav2syx.application.use_cases import build_conversion_options as _impl

    return _impl(
        source_extension=source_extension,
        intermediate_extension=intermediate_extension,
        final_extension=final_extension,
        sample_rate=sample_rate,
        channels=channels,
        jobs=jobs,
    )


def convert_tree(
    *,
    source_root: Path,
    destination_root: Path,
    options: ConversionOptions | None = None,
    converter: AudioConverter | None = None,
    log: LogLike | None = None,
    on_result: ProgressReporter | None = None,
) -> BatchReport:
    """Convert a directory tree via lazy use-case import."""
    from wav2syx.application.use_cases import convert_tree as _impl

    return _impl(
        source_root=source_root,
        destination_root=destination_root,
        options=options,
        converter=converter,
        log=log,
        on_result=on_result,
    )


__all__ = [
    "AudioConverter",
    "BatchReport",
    "ConversionOptions",
    "ConvertibleFile",
    "ItemResult",
    "ItemStatus",
    "build_conversion_options",
    "convert_tree",
]
