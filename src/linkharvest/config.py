#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Time-stamp: <2026-10-17 18:02:16 krylon>
#
# /data/code/python/linkharvest/src/linkharvest/config.py
# created on 17. 10. 2026
# (c) 2026 Benjamin Walkenhorst
#
# This file is part of the linkharvest link collector. It is distributed under the
# terms of the GNU General Public License 3. See the file LICENSE for details
# or find a copy online at https://www.gnu.org/licenses/gpl-3.0

"""
linkharvest.config

(c) 2026 Benjamin Walkenhorst

The list of feeds we poll is read from a YAML file that looks like this:

    - name: Marginal Revolution
      url: http://feeds.feedburner.com/marginalrevolution?fmt=xml
      filter: link

If the file does not exist, we fall back to the feeds we started out with.
"""


import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Final, Optional, Union

import yaml

from linkharvest import common
from linkharvest.common import HarvestError
from linkharvest.model import FeedConfig

token_var: Final[str] = "LINKHARVEST_BUFFER_TOKEN"
default_port: Final[int] = 19870


class ConfigError(HarvestError):
    """ConfigError indicates an invalid configuration."""


def default_feeds() -> list[FeedConfig]:
    """Return the built-in list of feeds."""
    return [
        FeedConfig(name="Marginal Revolution",
                   url="http://feeds.feedburner.com/marginalrevolution?fmt=xml",
                   title_filter="link"),
        FeedConfig(name="Slate Star Codex",
                   url="http://slatestarcodex.com/feed/",
                   title_filter="link"),
        FeedConfig(name="foreXiv",
                   url="http://blog.jessriedel.com/feed/",
                   title_filter="link"),
    ]


def load_feeds(path: Optional[Union[str, Path]] = None) -> list[FeedConfig]:
    """Load the feed list from <path>, the default feeds.yaml if path is None."""
    log = common.get_logger("config")
    fpath: Final[Path] = common.path.feeds if path is None else Path(path)

    if not fpath.exists():
        if path is not None:
            raise ConfigError(f"Feed list {fpath} does not exist")
        log.info("No feed list found at %s, using the built-in feeds.", fpath)
        return default_feeds()

    try:
        with open(fpath, "r", encoding="utf-8") as fh:
            data = yaml.safe_load(fh)
    except (OSError, yaml.YAMLError) as err:
        cname: Final[str] = err.__class__.__name__
        msg: Final[str] = f"{cname} trying to read feed list {fpath}: {err}"
        log.error(msg)
        raise ConfigError(msg) from err

    if not isinstance(data, list):
        raise ConfigError(f"Feed list {fpath} must be a list of feeds")

    feeds: list[FeedConfig] = []
    for idx, entry in enumerate(data):
        if not isinstance(entry, dict) or "url" not in entry:
            raise ConfigError(f"Feed #{idx+1} in {fpath} has no URL")
        feeds.append(FeedConfig(
            name=str(entry.get("name", entry["url"])),
            url=str(entry["url"]),
            title_filter=str(entry.get("filter") or ""),
        ))

    log.debug("Loaded %d feeds from %s", len(feeds), fpath)
    return feeds


@dataclass(kw_only=True, slots=True)
class Config:
    """Config holds the settings the application runs with."""

    feeds: list[FeedConfig] = field(default_factory=default_feeds)
    token: str = ""
    service: str = "facebook"
    address: str = "localhost"
    port: int = default_port
    timeout: float = 30.0

    @classmethod
    def port_from_env(cls) -> int:
        """Return the port given in the PORT environment variable, or the default."""
        val: Final[str] = os.environ.get("PORT", "").lstrip(":")
        if val == "":
            return default_port
        try:
            return int(val)
        except ValueError as err:
            raise ConfigError(f"Invalid PORT {val!r}") from err

    @classmethod
    def token_from_env(cls) -> str:
        """Return the Buffer access token from the environment."""
        return os.environ.get(token_var, "")

# Local Variables: #
# python-indent: 4 #
# End: #
