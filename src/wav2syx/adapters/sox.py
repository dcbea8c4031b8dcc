"""SoX-backed converter implementing the ``AudioConverter`` port."""

from __future__ import annotations

import shutil
import subprocess
from dataclasses import dataclass
from pathlib import Path

from wav2syx.errors import ConversionInvocationError

DEFAULT_SOX_BINARY = "sox"


@dataclass(frozen=True)
class SoxRun:
    """Completed sox invocation."""

    args: tuple[str, ...]
    returncode: int
    stdout: str = ""
    stderr: str = ""


class SoxConverter:
    """Resample and downmix audio by shelling out to ``sox``.

    Parameters
    ----------
    binary : str, default="sox"
        Executable name or path.
    """

    def __init__(self, binary: str = DEFAULT_SOX_BINARY) -> None:
        self.binary = binary

    def build_args(
        self,
        source_path: Path,
        sample_rate: int,
        channels: int,
        output_path: Path,
    ) -> list[str]:
        """Build the sox command line; output format follows the output suffix."""
        return [
            self.binary,
            str(source_path),
            "-r",
            str(sample_rate),
            "-c",
            str(channels),
            str(output_path),
        ]

    def convert(
        self,
        source_path: Path,
        sample_rate: int,
        channels: int,
        output_path: Path,
    ) -> SoxRun:
        """Run sox to completion.

        Parameters
        ----------
        source_path : Path
            Input audio file.
        sample_rate : int
            Target sample rate in Hz.
        channels : int
            Target channel count.
        output_path : Path
            Where sox writes the converted file.

        Returns
        -------
        SoxRun
            Exit status and captured output. A non-zero exit is not raised.

        Raises
        ------
        ConversionInvocationError
            If the process cannot be spawned.
        """
        args = self.build_args(source_path, sample_rate, channels, output_path)
        try:
            completed = subprocess.run(
                args,
                capture_output=True,
                encoding="utf-8",
                errors="replace",
                check=False,
            )
        except OSError as exc:
            raise ConversionInvocationError(source_path, output_path, str(exc)) from exc
        return SoxRun(
            args=tuple(args),
            returncode=completed.returncode,
            stdout=completed.stdout,
            stderr=completed.stderr,
        )


def locate_sox(binary: str = DEFAULT_SOX_BINARY) -> Path | None:
    """Resolve ``binary`` on ``PATH``."""
    found = shutil.which(binary)
    return Path(found) if found else None
