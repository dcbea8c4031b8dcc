"""Shared type aliases for conversion modules."""

from __future__ import annotations

import logging
import os
from typing import TypeAlias

PathLike: TypeAlias = "str | os.PathLike[str]"
LogLike: TypeAlias = "logging.Logger | logging.LoggerAdapter"
