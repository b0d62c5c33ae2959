#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Time-stamp: <2026-10-17 17:05:19 krylon>
#
# /data/code/python/linkharvest/src/linkharvest/store.py
# created on 17. 10. 2026
# (c) 2026 Benjamin Walkenhorst
#
# This file is part of the linkharvest link collector. It is distributed under the
# terms of the GNU General Public License 3. See the file LICENSE for details
# or find a copy online at https://www.gnu.org/licenses/gpl-3.0

"""
linkharvest.store

(c) 2026 Benjamin Walkenhorst

Store persists the little state we keep about Articles and Links: which
Articles the user has dismissed, and which Links have been sent to Buffer.
Both are keyed by URL, verbatim.
"""


import json
import logging
from collections.abc import Callable
from datetime import datetime, timezone
from enum import Enum
from pathlib import Path
from typing import Any, Final, Optional, Union

import lmdb

from linkharvest import common
from linkharvest.common import HarvestError
from linkharvest.model import ArticleState, LinkState


class StoreError(HarvestError):
    """StoreError indicates a failure to read from or write to the Store."""


class Bucket(Enum):
    """Bucket identifies the databases within the LMDB environment."""

    Articles = "articles"
    Links = "links"

    @property
    def key(self) -> bytes:
        """Return the database name as LMDB expects it."""
        return self.value.encode()


def utcnow() -> datetime:
    """Return the current time."""
    return datetime.now(timezone.utc)


class Store:
    """Store wraps the LMDB environment and the operations we perform on it."""

    __slots__ = [
        "log",
        "path",
        "env",
        "dbs",
        "clock",
    ]

    log: logging.Logger
    path: Path
    env: lmdb.Environment
    dbs: dict[Bucket, Any]
    clock: Callable[[], datetime]

    def __init__(self,
                 path: Optional[Union[Path, str]] = None,
                 clock: Callable[[], datetime] = utcnow) -> None:
        self.path = common.path.state if path is None else Path(path)
        self.clock = clock
        self.log = common.get_logger("store")
        self.log.debug("Open state store at %s", self.path)

        try:
            self.env = lmdb.Environment(str(self.path),
                                        subdir=True,
                                        map_size=(1 << 30),  # 1 GiB
                                        create=True,
                                        max_dbs=len(Bucket))
            self.dbs = {b: self.env.open_db(b.key) for b in Bucket}
        except lmdb.Error as err:
            cname: Final[str] = err.__class__.__name__
            msg: Final[str] = f"{cname} trying to open state store at {self.path}: {err}"
            self.log.error(msg)
            raise StoreError(msg) from err

    def close(self) -> None:
        """Close the LMDB environment."""
        self.env.close()

    def __enter__(self) -> 'Store':
        return self

    def __exit__(self, ex_type, ex_val, tb) -> None:
        self.close()

    def _get(self, bucket: Bucket, url: str) -> Optional[dict[str, Any]]:
        key: Final[bytes] = url.encode()
        if not 0 < len(key) <= self.env.max_key_size():
            # LMDB cannot store keys like that, so there is nothing to find.
            return None
        try:
            with self.env.begin(db=self.dbs[bucket]) as tx:
                raw = tx.get(key)
                if raw is None:
                    return None
                return json.loads(raw)
        except (lmdb.Error, ValueError) as err:
            cname: Final[str] = err.__class__.__name__
            msg: Final[str] = f"{cname} trying to look up {url} in {bucket.value}: {err}"
            self.log.error(msg)
            raise StoreError(msg) from err

    def _put(self, bucket: Bucket, url: str, rec: dict[str, Any]) -> None:
        try:
            with self.env.begin(write=True, db=self.dbs[bucket]) as tx:
                tx.put(url.encode(), json.dumps(rec).encode(), overwrite=True)
        except lmdb.Error as err:
            cname: Final[str] = err.__class__.__name__
            msg: Final[str] = f"{cname} trying to store {url} in {bucket.value}: {err}"
            self.log.error(msg)
            raise StoreError(msg) from err

    def find_article(self, url: str) -> Optional[ArticleState]:
        """Look up the state of the Article at <url>. Return None if there is none."""
        rec = self._get(Bucket.Articles, url)
        if rec is None:
            return None
        try:
            return ArticleState.from_record(rec)
        except (KeyError, TypeError, ValueError) as err:
            raise StoreError(f"Invalid state record for Article {url}: {err}") from err

    def mark_article_dismissed(self, url: str) -> None:
        """Remember that the Article at <url> has been dismissed."""
        state: Final[ArticleState] = ArticleState(url=url, dismissed_at=self.clock())
        self._put(Bucket.Articles, url, state.to_record())
        self.log.debug("Article %s dismissed", url)

    def find_link(self, url: str) -> Optional[LinkState]:
        """Look up the state of the Link to <url>. Return None if there is none."""
        rec = self._get(Bucket.Links, url)
        if rec is None:
            return None
        try:
            return LinkState.from_record(rec)
        except (KeyError, TypeError, ValueError) as err:
            raise StoreError(f"Invalid state record for Link {url}: {err}") from err

    def mark_link_queued(self, url: str, article_url: str = "") -> None:
        """Remember that the Link to <url> has been put in the posting queue."""
        state: Final[LinkState] = LinkState(url=url,
                                            article_url=article_url,
                                            queued_at=self.clock())
        self._put(Bucket.Links, url, state.to_record())
        self.log.debug("Link %s queued", url)

# Local Variables: #
# python-indent: 4 #
# End: #
