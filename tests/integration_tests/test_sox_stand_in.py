"""Integration tests running SoxConverter against a stand-in sox script."""

from __future__ import annotations

import os
from pathlib import Path

import pytest

from wav2syx import convert_tree
from wav2syx.adapters.sox import SoxConverter
from wav2syx.application.results import ItemStatus

pytestmark = pytest.mark.skipif(os.name != "posix", reason="needs a POSIX shell")

STAND_IN = """#!/bin/sh
case "$1" in
  *bad.wav) printf "sox FAIL formats: can't open input file \\351\\n" >&2; exit 2;;
esac
cp "$1" "$6"
"""


@pytest.fixture
def stand_in_sox(tmp_path: Path) -> Path:
    """Executable that copies its input, or fails with non-UTF-8 stderr."""
    script = tmp_path / "fake-sox"
    script.write_text(STAND_IN)
    script.chmod(0o755)
    return script


def test_non_utf8_stderr_does_not_abort_batch(
    tmp_path: Path, stand_in_sox: Path
) -> None:
    """Convert the remaining files when one failure prints undecodable bytes."""
    src = tmp_path / "src"
    (src / "kit").mkdir(parents=True)
    for name in ("kick.wav", "bad.wav", "kit/hat.wav"):
        (src / name).write_bytes(b"RIFF" + name.encode())
    dst = tmp_path / "dst"

    report = convert_tree(src, dst, converter=SoxConverter(str(stand_in_sox)))

    statuses = {r.item.relative_path.as_posix(): r for r in report.results}
    assert statuses["bad.wav"].status is ItemStatus.RENAME_FAILED
    assert statuses["bad.wav"].returncode == 2
    assert (dst / "kick.syx").read_bytes() == b"RIFFkick.wav"
    assert (dst / "kit" / "hat.syx").read_bytes() == b"RIFFkit/hat.wav"
    assert report.converted == 2


def test_undecodable_stderr_is_replaced(tmp_path: Path, stand_in_sox: Path) -> None:
    """Decode stderr with replacement characters instead of raising."""
    src = tmp_path / "bad.wav"
    src.write_bytes(b"RIFF")

    run = SoxConverter(str(stand_in_sox)).convert(src, 44100, 1, tmp_path / "bad.sds")

    assert run.returncode == 2
    assert "�" in run.stderr
