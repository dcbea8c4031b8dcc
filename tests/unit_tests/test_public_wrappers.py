"""Unit tests for top-level public wrappers."""

from __future__ import annotations

from pathlib import Path

import wav2syx
from wav2syx import application


def test_convert_tree_accepts_strings(sample_tree: Path, tmp_path: Path, fake_converter) -> None:
    """Accept plain string paths at the package level."""
    report = wav2syx.convert_tree(
        str(sample_tree), str(tmp_path / "dst"), converter=fake_converter
    )
    assert report.converted == 2
    assert (tmp_path / "dst" / "kick.syx").is_file()


def test_discover_files_wrapper(sample_tree: Path, tmp_path: Path) -> None:
    """Forward discovery to the application layer."""
    names = sorted(
        item.relative_path.name for item in wav2syx.discover_files(sample_tree, tmp_path)
    )
    assert names == ["kick.wav", "snare.wav"]


def test_application_wrappers_forward(
    sample_tree: Path, tmp_path: Path, fake_converter
) -> None:
    """Build options and convert through the application package facade."""
    options = application.build_conversion_options(sample_rate=48000)
    report = application.convert_tree(
        source_root=sample_tree,
        destination_root=tmp_path / "dst",
        options=options,
        converter=fake_converter,
    )
    assert report.ok
    assert {call[1] for call in fake_converter.calls} == {48000}
