"""Application-layer result objects."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from wav2syx.application.models import ConvertibleFile


class ItemStatus(str, Enum):
    """Outcome of a single conversion attempt."""

    CONVERTED = "converted"
    DIRECTORY_FAILED = "directory_failed"
    INVOCATION_FAILED = "invocation_failed"
    RENAME_FAILED = "rename_failed"


@dataclass(frozen=True)
class ItemResult:
    """Structured per-file conversion outcome."""

    item: ConvertibleFile
    status: ItemStatus
    output_path: Path
    error: str | None = None
    returncode: int | None = None

    @property
    def ok(self) -> bool:
        return self.status is ItemStatus.CONVERTED


@dataclass(frozen=True)
class BatchReport:
    """Aggregated outcome of a conversion run."""

    discovered: int
    results: tuple[ItemResult, ...]
    discovery_errors: int = 0

    @property
    def converted(self) -> int:
        return sum(1 for result in self.results if result.ok)

    @property
    def failed(self) -> int:
        return len(self.results) - self.converted

    @property
    def ok(self) -> bool:
        """``True`` when every item converted and the walk saw no errors."""
        return self.failed == 0 and self.discovery_errors == 0
