"""Shared helpers for Bracket Forge: logging setup and id generation."""

# Bracket Forge
# Copyright (C) 2025  Bracket Forge developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

import itertools
import logging
import sys
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%H:%M:%S"

_id_counter = itertools.count(1)


def setup_logger(name: str, level: Optional[int] = None) -> logging.Logger:
    """Return a module logger, installing a console handler on first use.

    The handler lives on the package root logger (``bracketforge``) so every
    module logger shares one stream and one format.

    Args:
        name: Logger name, normally ``__name__`` of the calling module
        level: Optional level for this logger

    Returns:
        The configured logger
    """
    root = logging.getLogger("bracketforge")
    if not root.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, DATE_FORMAT))
        root.addHandler(handler)
        root.setLevel(logging.WARNING)

    logger = logging.getLogger(name)
    if level is not None:
        logger.setLevel(level)
    return logger


def set_verbosity(verbose: bool) -> None:
    """Switch package logging between WARNING and DEBUG."""
    logging.getLogger("bracketforge").setLevel(
        logging.DEBUG if verbose else logging.WARNING
    )


def generate_id(prefix: str) -> str:
    """Generate a process-unique identifier such as ``t1``, ``t2``."""
    return f"{prefix}{next(_id_counter)}"
