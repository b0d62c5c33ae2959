#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Time-stamp: <2026-10-17 16:28:53 krylon>
#
# /data/code/python/linkharvest/src/linkharvest/fetcher.py
# created on 17. 10. 2026
# (c) 2026 Benjamin Walkenhorst
#
# This file is part of the linkharvest link collector. It is distributed under the
# terms of the GNU General Public License 3. See the file LICENSE for details
# or find a copy online at https://www.gnu.org/licenses/gpl-3.0

"""
linkharvest.fetcher

(c) 2026 Benjamin Walkenhorst

Fetcher downloads an RSS feed and turns its items into Articles.
"""


import logging
from datetime import datetime
from typing import Any, Final, Optional

import fastfeedparser as ffp  # type: ignore # pylint: disable-msg=E0401
import requests

from linkharvest import common
from linkharvest.common import HarvestError
from linkharvest.extract import ExtractError, find_links, host_of
from linkharvest.model import Article, Link

user_agent: Final[str] = f"{common.AppName}/{common.AppVersion} (RSS reader)"
default_timeout: Final[float] = 30.0


class FetchError(HarvestError):
    """FetchError indicates a failure to download or parse a feed."""


class Fetcher:
    """Fetcher downloads RSS feeds and extracts the outbound Links of their items."""

    __slots__ = [
        "log",
        "session",
        "timeout",
    ]

    log: logging.Logger
    session: requests.Session
    timeout: float

    def __init__(self,
                 session: Optional[requests.Session] = None,
                 timeout: float = default_timeout) -> None:
        self.log = common.get_logger("fetcher")
        self.timeout = timeout
        if session is None:
            session = requests.Session()
            session.headers["User-Agent"] = user_agent
        self.session = session

    def fetch(self, url: str) -> list[Article]:
        """Fetch the feed at <url>.

        Items whose bodies contain no links at all are skipped. Links pointing
        back to the feed's own site are removed from the remaining Articles.
        Any failure to get or parse the feed raises a FetchError, there are no
        partial results.
        """
        rss = self._download(url)

        feed_title: Final[str] = rss.feed.get("title") or url
        site: Final[Optional[str]] = host_of(rss.feed.get("link") or "")
        if site is None:
            msg = f"Cannot parse site URL of feed {url}: {rss.feed.get('link')}"
            self.log.error(msg)
            raise FetchError(msg)

        self.log.debug("Got %d items from %s",
                       len(rss.entries),
                       feed_title)

        articles: list[Article] = []
        for item in rss.entries:
            title: str = item.get("title") or ""
            try:
                links: list[Link] = find_links(self._item_body(item))
            except ExtractError as err:
                self.log.error("%s: %s", title, err)
                links = []

            filtered: list[Link] = []
            for lnk in links:
                # A Link we cannot parse is kept, it certainly is not ours.
                if host_of(lnk.url) == site:
                    continue
                filtered.append(lnk)

            # Only Articles without any links are dropped, even if all of them
            # pointed back to the feed's site.
            if len(links) > 0:
                articles.append(Article(
                    url=item.get("link") or "",
                    title=title,
                    links=filtered,
                    feed=feed_title,
                    date=self._item_timestamp(item),
                ))

        return articles

    def _download(self, url: str) -> Any:
        """Get the feed at <url> and parse it."""
        msg: str
        try:
            res = self.session.get(url, timeout=self.timeout)
            res.raise_for_status()
        except requests.RequestException as err:
            msg = f"{err.__class__.__name__} trying to fetch feed {url}: {err}"
            self.log.error(msg)
            raise FetchError(msg) from err

        try:
            return ffp.parse(res.content)
        except Exception as err:  # pylint: disable-msg=W0718
            msg = f"{err.__class__.__name__} trying to parse feed {url}: {err}"
            self.log.error(msg)
            raise FetchError(msg) from err

    def _item_body(self, item) -> str:
        """Try to get the HTML content or, failing that, the description of an RSS item."""
        content = item.get("content")
        if content:
            return content[0].get("value") or ""
        desc = item.get("description")
        if desc:
            return desc
        self.log.info("Did not find content or description in item \"%s\"",
                      item.get("title"))
        return ""

    def _item_timestamp(self, item) -> datetime:
        """Try to get a timestamp from an RSS item."""
        timestr: str = item.get("published") or item.get("updated") or ""
        stamp: Optional[datetime] = common.parse_iso_date(timestr)
        if stamp is None:
            self.log.info("Did not find a usable timestamp in item \"%s\" (%s)",
                          item.get("title"),
                          timestr)
            return common.Epoch
        return stamp

# Local Variables: #
# python-indent: 4 #
# End: #
