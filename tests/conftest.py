"""Shared pytest configuration, marker assignment, and fixtures."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

import pytest

from wav2syx.errors import ConversionInvocationError


def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Attach suite markers based on test file path."""
    del config
    for item in items:
        path = Path(str(item.fspath))
        parts = set(path.parts)
        if "e2e_tests" in parts:
            item.add_marker(pytest.mark.e2e)
        elif "integration_tests" in parts:
            item.add_marker(pytest.mark.integration)
        elif "unit_tests" in parts:
            item.add_marker(pytest.mark.unit)


@dataclass(frozen=True)
class FakeRun:
    returncode: int = 0
    stderr: str = ""


@dataclass
class FakeConverter:
    """In-process stand-in for sox.

    Writes ``<source name>|<rate>|<channels>`` to the output path. Sources whose
    name is in ``spawn_failures`` raise as if the binary could not be started;
    sources in ``exit_failures`` return a non-zero status without output.
    """

    spawn_failures: set[str] = field(default_factory=set)
    exit_failures: set[str] = field(default_factory=set)
    calls: list[tuple[Path, int, int, Path]] = field(default_factory=list)

    def convert(
        self, source_path: Path, sample_rate: int, channels: int, output_path: Path
    ) -> FakeRun:
        self.calls.append((source_path, sample_rate, channels, output_path))
        if source_path.name in self.spawn_failures:
            raise ConversionInvocationError(
                source_path, output_path, "No such file or directory"
            )
        if source_path.name in self.exit_failures:
            return FakeRun(returncode=2, stderr="sox FAIL formats: can't open input")
        output_path.write_text(f"{source_path.name}|{sample_rate}|{channels}")
        return FakeRun()


@pytest.fixture
def fake_converter() -> FakeConverter:
    """Converter that succeeds for every file."""
    return FakeConverter()


@pytest.fixture
def sample_tree(tmp_path: Path) -> Path:
    """Source tree with two WAVs and a few entries that must be ignored.

    Layout::

        src/kick.wav
        src/snare/snare.wav
        src/notes.txt
        src/README
        src/KICK.WAV
        src/loops.wav/          (a directory)
    """
    src = tmp_path / "src"
    (src / "snare").mkdir(parents=True)
    (src / "loops.wav").mkdir()
    (src / "kick.wav").write_bytes(b"RIFFkick")
    (src / "snare" / "snare.wav").write_bytes(b"RIFFsnare")
    (src / "notes.txt").write_text("not audio")
    (src / "README").write_text("no extension")
    (src / "KICK.WAV").write_bytes(b"RIFFupper")
    return src


@pytest.fixture(autouse=True)
def _restore_root_logging():
    """Undo handler changes made by the CLI's logging setup."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
