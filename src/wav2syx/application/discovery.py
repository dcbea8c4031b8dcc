"""Recursive discovery of convertible source files."""

from __future__ import annotations

import logging
import os
from collections.abc import Callable, Iterator
from pathlib import Path

from wav2syx.application.models import ConvertibleFile
from wav2syx.application.options import SOURCE_EXTENSION
from wav2syx.errors import DiscoveryTraversalError
from wav2syx.types import LogLike

logger = logging.getLogger(__name__)


def _describe(exc: OSError) -> str:
    return exc.strerror or str(exc)


def discover_files(
    source_root: Path,
    destination_root: Path,
    *,
    extension: str = SOURCE_EXTENSION,
    log: LogLike | None = None,
    on_error: Callable[[DiscoveryTraversalError], None] | None = None,
) -> Iterator[ConvertibleFile]:
    """Yield every file under ``source_root`` whose extension is ``extension``.

    Parameters
    ----------
    source_root : Path
        Directory walked recursively. Symlinked directories are not followed.
    destination_root : Path
        Root recorded on each item for later path mirroring.
    extension : str, default="wav"
        Extension without the leading dot, compared case-sensitively.
    log : logging.Logger | logging.LoggerAdapter | None
        Where traversal errors are reported. Defaults to the module logger.
    on_error : Callable, optional
        Called with each traversal error after it is logged.

    Yields
    ------
    ConvertibleFile
        One item per matching file, in directory walk order.

    Notes
    -----
    An entry that cannot be read is logged and skipped; the walk continues
    with its siblings.
    """
    log = log or logger
    suffix = f".{extension}"
    root = Path(source_root)

    def _report(exc: OSError) -> None:
        filename = getattr(exc, "filename", None)
        error = DiscoveryTraversalError(
            Path(filename) if filename else None, _describe(exc)
        )
        log.error(str(error), extra={"source": filename, "destination": None})
        if on_error is not None:
            on_error(error)

    for dirpath, _dirnames, filenames in os.walk(root, onerror=_report):
        current = Path(dirpath)
        for name in filenames:
            if Path(name).suffix != suffix:
                continue
            yield ConvertibleFile(
                source_root=root,
                destination_root=Path(destination_root),
                relative_path=(current / name).relative_to(root),
            )


def collect_files(
    source_root: Path,
    destination_root: Path,
    *,
    extension: str = SOURCE_EXTENSION,
    log: LogLike | None = None,
) -> tuple[list[ConvertibleFile], int]:
    """Run discovery to completion.

    Returns
    -------
    tuple[list[ConvertibleFile], int]
        Discovered items and the number of traversal errors encountered.
    """
    errors: list[DiscoveryTraversalError] = []
    items = list(
        discover_files(
            source_root,
            destination_root,
            extension=extension,
            log=log,
            on_error=errors.append,
        )
    )
    return items, len(errors)
