"""Error taxonomy for batch WAV to SYX conversion."""

from __future__ import annotations

from pathlib import Path


class Wav2SyxError(Exception):
    """Base error for the conversion pipeline."""

    exit_code = 1


class ConfigurationError(Wav2SyxError):
    """Raised when run configuration is invalid."""

    exit_code = 2


class DiscoveryTraversalError(Wav2SyxError):
    """A filesystem entry could not be read during the directory walk."""

    def __init__(self, path: Path | None, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"error retrieving path {path}: {reason}")


class DestinationDirectoryCreationError(Wav2SyxError):
    """Ancestor directories for an output file could not be created."""

    def __init__(self, directory: Path, source_path: Path, reason: str) -> None:
        self.directory = directory
        self.source_path = source_path
        self.reason = reason
        super().__init__(
            f"failed to create directory at {directory}: {reason}, "
            f"skipping converting {source_path}"
        )


class ConversionInvocationError(Wav2SyxError):
    """The external converter process could not be spawned."""

    def __init__(self, source_path: Path, output_path: Path, reason: str) -> None:
        self.source_path = source_path
        self.output_path = output_path
        self.reason = reason
        super().__init__(
            f"failed sox conversion {source_path} => {output_path}: {reason}"
        )


class RenameError(Wav2SyxError):
    """The intermediate output could not be relabeled to its final extension."""

    def __init__(self, intermediate_path: Path, target_path: Path, reason: str) -> None:
        self.intermediate_path = intermediate_path
        self.target_path = target_path
        self.reason = reason
        super().__init__(
            f"failed to create {target_path.suffix} file {target_path} by renaming "
            f"its {intermediate_path.suffix} counterpart: {reason}"
        )
