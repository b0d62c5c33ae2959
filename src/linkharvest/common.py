#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Time-stamp: <2026-10-17 14:02:11 krylon>
#
# /data/code/python/linkharvest/src/linkharvest/common.py
# created on 17. 10. 2026
# (c) 2026 Benjamin Walkenhorst
#
# This file is part of the linkharvest link collector. It is distributed under the
# terms of the GNU General Public License 3. See the file LICENSE for details
# or find a copy online at https://www.gnu.org/licenses/gpl-3.0

"""
linkharvest.common

(c) 2026 Benjamin Walkenhorst

Constants, paths and logging shared by the whole application.
"""


import logging
import os
import sys
from datetime import datetime, timezone
from pathlib import Path
from threading import Lock
from typing import Final, Optional, Union

AppName: Final[str] = "LinkHarvest"
AppVersion: Final[str] = "0.1.0"
Debug: bool = False
TimeFmt: Final[str] = "%Y-%m-%d %H:%M:%S"

# The zero value for timestamps: Items without a date sort last.
Epoch: Final[datetime] = datetime.fromtimestamp(0, timezone.utc)

timepat: Final[str] = "%Y-%m-%dT%H:%M:%S%z"


class HarvestError(Exception):
    """Base class for application-specific exceptions."""


class AppPath:
    """AppPath provides the locations of the files the application uses."""

    __slots__ = ["__base"]

    __base: Path

    def __init__(self, root: Union[str, Path]) -> None:
        self.__base = Path(root)

    def base(self, path: Optional[Union[str, Path]] = None) -> Path:
        """Get or set the base directory."""
        if path is not None:
            self.__base = Path(path)
        return self.__base

    @property
    def state(self) -> Path:
        """Return the path of the LMDB environment holding article and link state."""
        return self.__base.joinpath("state.lmdb")

    @property
    def log(self) -> Path:
        """Return the path to the log file."""
        return self.__base.joinpath(f"{AppName.lower()}.log")

    @property
    def feeds(self) -> Path:
        """Return the path of the feed list."""
        return self.__base.joinpath("feeds.yaml")


path: AppPath = AppPath(os.path.expanduser(f"~/.{AppName.lower()}.d"))

_lock: Final[Lock] = Lock()
_loggers: dict[str, logging.Logger] = {}


def set_basedir(folder: Union[str, Path]) -> None:
    """Set the base directory and make sure it exists."""
    with _lock:
        path.base(folder)
        os.makedirs(path.base(), exist_ok=True)
        # Loggers created before now write to the old location.
        for log in _loggers.values():
            for handler in list(log.handlers):
                if isinstance(handler, logging.FileHandler):
                    log.removeHandler(handler)
                    handler.close()
                    log.addHandler(_file_handler())


def _file_handler() -> logging.Handler:
    fmt: Final[logging.Formatter] = logging.Formatter(
        "%(asctime)s (%(name)-16s / line %(lineno)-4d) - %(levelname)-8s %(message)s")
    handler = logging.FileHandler(path.log, "a", encoding="utf-8")
    handler.setFormatter(fmt)
    return handler


def get_logger(name: str, terminal: bool = True) -> logging.Logger:
    """Create and return a logger with the given name."""
    with _lock:
        if name in _loggers:
            return _loggers[name]

        os.makedirs(path.base(), exist_ok=True)

        log = logging.getLogger(f"{AppName.lower()}.{name}")
        log.setLevel(logging.DEBUG if Debug else logging.INFO)
        log.propagate = False
        log.addHandler(_file_handler())

        if terminal:
            console = logging.StreamHandler(sys.stderr)
            console.setFormatter(logging.Formatter(
                "%(asctime)s (%(name)-16s) - %(levelname)-8s %(message)s"))
            log.addHandler(console)

        _loggers[name] = log
        return log


def set_debug(flag: bool) -> None:
    """Toggle debug mode, adjusting the level of existing loggers."""
    global Debug  # pylint: disable-msg=W0603
    Debug = flag
    with _lock:
        for log in _loggers.values():
            log.setLevel(logging.DEBUG if flag else logging.INFO)


def parse_iso_date(txt: Optional[str]) -> Optional[datetime]:
    """Parse an ISO 8601 timestamp as fastfeedparser emits them.

    Naive timestamps are taken to be UTC. Return None if txt is empty
    or cannot be parsed.
    """
    if txt is None or txt == "":
        return None

    stamp: Optional[datetime] = None
    try:
        stamp = datetime.strptime(txt, timepat)
    except ValueError:
        try:
            stamp = datetime.fromisoformat(txt)
        except ValueError:
            return None

    if stamp.tzinfo is None:
        stamp = stamp.replace(tzinfo=timezone.utc)
    return stamp

# Local Variables: #
# python-indent: 4 #
# End: #
