#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Time-stamp: <2026-10-17 19:22:07 krylon>
#
# /data/code/python/linkharvest/src/linkharvest/engine.py
# created on 17. 10. 2026
# (c) 2026 Benjamin Walkenhorst
#
# This file is part of the linkharvest link collector. It is distributed under the
# terms of the GNU General Public License 3. See the file LICENSE for details
# or find a copy online at https://www.gnu.org/licenses/gpl-3.0

"""
linkharvest.engine

(c) 2026 Benjamin Walkenhorst

Engine polls the configured feeds and keeps the most recent batch of Articles
in memory. Each refresh replaces the batch as a whole.
"""


import logging
from threading import Lock, Thread
from typing import Final, Optional

from linkharvest import common
from linkharvest.buffer import Client, UpdateOptions
from linkharvest.fetcher import Fetcher
from linkharvest.model import Article, FeedConfig
from linkharvest.store import Store
from linkharvest.view import build_view


class Engine:
    """Engine ties together the Fetcher, the Store and the Buffer client."""

    __slots__ = [
        "log",
        "feeds",
        "fetcher",
        "store",
        "buffer",
        "profiles",
        "lock",
        "refresh_lock",
        "_last_fetch",
    ]

    log: logging.Logger
    feeds: list[FeedConfig]
    fetcher: Fetcher
    store: Store
    buffer: Optional[Client]
    profiles: list[str]
    lock: Lock
    refresh_lock: Lock
    _last_fetch: list[Article]

    def __init__(self,
                 feeds: list[FeedConfig],
                 store: Store,
                 fetcher: Optional[Fetcher] = None,
                 buffer: Optional[Client] = None,
                 profiles: Optional[list[str]] = None) -> None:
        self.log = common.get_logger("engine")
        self.feeds = feeds
        self.store = store
        self.fetcher = fetcher if fetcher is not None else Fetcher()
        self.buffer = buffer
        self.profiles = profiles if profiles is not None else []
        self.lock = Lock()
        self.refresh_lock = Lock()
        self._last_fetch = []

    @property
    def last_fetch(self) -> list[Article]:
        """Return the Articles from the most recent refresh."""
        with self.lock:
            return self._last_fetch

    @last_fetch.setter
    def last_fetch(self, articles: list[Article]) -> None:
        """Replace the current batch of Articles."""
        with self.lock:
            self._last_fetch = articles

    def start(self) -> Thread:
        """Refresh the feeds in the background."""
        t: Thread = Thread(name="Refresh", target=self._refresh_loop, daemon=True)
        t.start()
        return t

    def _refresh_loop(self) -> None:
        try:
            self.refresh_feeds()
        except common.HarvestError as err:
            self.log.error("Initial refresh failed: %s", err)
        else:
            self.log.info("Fetched %d articles", len(self.last_fetch))

    def refresh_feeds(self) -> None:
        """Poll all feeds, one after the other, and publish the Articles we found.

        If any feed fails, the error is raised and the previous batch of
        Articles stays in place.
        """
        with self.refresh_lock:
            articles: list[Article] = []
            for feed in self.feeds:
                self.log.info("polling %s...", feed.name)
                for art in self.fetcher.fetch(feed.url):
                    if feed.accepts(art.title):
                        articles.append(art)

            self.last_fetch = articles

    def articles(self) -> list[Article]:
        """Return the current Articles, minus the dismissed ones, most recent first."""
        return build_view(self.last_fetch, self.store)

    def dismiss(self, url: str) -> None:
        """Hide the Article at <url> from now on."""
        self.store.mark_article_dismissed(url)

    def commit(self, opts: UpdateOptions, article_url: str = "") -> None:
        """Post a Link to Buffer and remember it has been queued.

        If posting fails, the error propagates and nothing is recorded.
        """
        if self.buffer is None:
            raise common.HarvestError("No Buffer client is configured")
        self.buffer.create_update(self.profiles, opts)
        self.store.mark_link_queued(opts.link_url, article_url)
        self.log.info("Queued %s", opts.link_url)


def pick_profiles(client: Client, service: str) -> list[str]:
    """Return the IDs of all of the account's Profiles on <service>."""
    wanted: Final[str] = service.lower()
    return [p.pid for p in client.profiles() if p.service.lower() == wanted]

# Local Variables: #
# python-indent: 4 #
# End: #
