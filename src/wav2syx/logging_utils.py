"""Run-scoped logging helpers.

Library code never installs handlers; the CLI calls :func:`configure_logging`
once and every conversion run gets its own :class:`RunLogger`.
"""

from __future__ import annotations

import logging
import uuid
from collections.abc import Mapping, MutableMapping
from typing import Any

LOG_FORMAT = "%(asctime)s %(levelname)s [%(run_id)s] %(name)s: %(message)s"

_RECORD_DEFAULTS = {"run_id": "-", "source": None, "destination": None}


class _RecordDefaultsFilter(logging.Filter):
    """Fill structured fields on records that did not come through a RunLogger."""

    def filter(self, record: logging.LogRecord) -> bool:
        for key, value in _RECORD_DEFAULTS.items():
            if not hasattr(record, key):
                setattr(record, key, value)
        return True


class RunLogger(logging.LoggerAdapter):
    """Logger adapter bound to a single conversion run.

    Parameters
    ----------
    logger : logging.Logger
        Underlying logger records are emitted through.
    run_id : str
        Identifier attached to every record as ``run_id``.
    """

    def __init__(self, logger: logging.Logger, run_id: str) -> None:
        super().__init__(logger, {"run_id": run_id})
        self.run_id = run_id

    def process(
        self, msg: Any, kwargs: MutableMapping[str, Any]
    ) -> tuple[Any, MutableMapping[str, Any]]:
        """Merge run fields with per-call ``extra`` fields."""
        extra: dict[str, Any] = dict(self.extra or {})
        call_extra = kwargs.get("extra")
        if isinstance(call_extra, Mapping):
            extra.update(call_extra)
        kwargs["extra"] = extra
        return msg, kwargs


def new_run_logger(name: str = "wav2syx", run_id: str | None = None) -> RunLogger:
    """Create a logger scoped to one conversion run."""
    return RunLogger(logging.getLogger(name), run_id or uuid.uuid4().hex[:8])


def configure_logging(level: str = "INFO") -> None:
    """Install a stderr handler on the root logger.

    Parameters
    ----------
    level : str, default="INFO"
        Level name understood by :mod:`logging`.

    Raises
    ------
    ValueError
        If ``level`` is not a known level name.
    """
    numeric = logging.getLevelName(level.upper())
    if not isinstance(numeric, int):
        raise ValueError(f"Unknown log level '{level}'.")
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler.addFilter(_RecordDefaultsFilter())
    logging.basicConfig(level=numeric, handlers=[handler], force=True)
