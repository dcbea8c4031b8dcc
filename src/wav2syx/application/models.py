"""Domain entities for batch conversion."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class ConvertibleFile:
    """A discovered source file and the roots it is mirrored between.

    Parameters
    ----------
    source_root : Path
        Root directory the file was discovered under.
    destination_root : Path
        Root directory the converted output is written under.
    relative_path : Path
        Path of the file relative to ``source_root``.
    """

    source_root: Path
    destination_root: Path
    relative_path: Path

    @property
    def source_path(self) -> Path:
        return self.source_root / self.relative_path

    def destination_path(self, extension: str) -> Path:
        """Mirrored destination path carrying ``extension`` as its suffix."""
        return (self.destination_root / self.relative_path).with_suffix(f".{extension}")
