"""Application ports for clean architecture boundaries."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol

from wav2syx.application.results import ItemResult


class ConverterRun(Protocol):
    """Completed external converter invocation."""

    returncode: int
    stderr: str


class AudioConverter(Protocol):
    """Convert one audio file into the intermediate sample format."""

    def convert(
        self,
        source_path: Path,
        sample_rate: int,
        channels: int,
        output_path: Path,
    ) -> ConverterRun:
        """Run the conversion to completion.

        Raises ``ConversionInvocationError`` when the process cannot be spawned.
        """


class ProgressReporter(Protocol):
    """Receive per-item results as a batch progresses."""

    def __call__(self, result: ItemResult) -> None:
        """Handle one finished item."""
