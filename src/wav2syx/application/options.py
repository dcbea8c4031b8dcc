"""Typed option objects shared across conversion use-cases."""

from __future__ import annotations

from dataclasses import dataclass

SOURCE_EXTENSION = "wav"
INTERMEDIATE_EXTENSION = "sds"
FINAL_EXTENSION = "syx"
DEFAULT_SAMPLE_RATE = 44100
DEFAULT_CHANNELS = 1


@dataclass(frozen=True)
class ConversionOptions:
    """Shared conversion options passed through use-cases."""

    source_extension: str = SOURCE_EXTENSION
    intermediate_extension: str = INTERMEDIATE_EXTENSION
    final_extension: str = FINAL_EXTENSION
    sample_rate: int = DEFAULT_SAMPLE_RATE
    channels: int = DEFAULT_CHANNELS
    jobs: int = 1
