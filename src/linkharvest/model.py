#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Time-stamp: <2026-10-17 14:20:37 krylon>
#
# /data/code/python/linkharvest/src/linkharvest/model.py
# created on 17. 10. 2026
# (c) 2026 Benjamin Walkenhorst
#
# This file is part of the linkharvest link collector. It is distributed under the
# terms of the GNU General Public License 3. See the file LICENSE for details
# or find a copy online at https://www.gnu.org/licenses/gpl-3.0

"""
linkharvest.model

(c) 2026 Benjamin Walkenhorst
"""


from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Optional

from linkharvest import common


@dataclass(kw_only=True, slots=True)
class FeedConfig:
    """FeedConfig is an RSS feed we poll for Articles."""

    name: str
    url: str
    title_filter: str = ""

    def accepts(self, title: str) -> bool:
        """Return True if an Article with the given title passes the Feed's filter."""
        return self.title_filter.lower() in title.lower()


@dataclass(kw_only=True, slots=True)
class Link:
    """Link is an outbound hyperlink found in the body of an Article."""

    url: str
    domain: str = ""
    context: str = ""
    queued: bool = False
    queued_at: Optional[datetime] = None

    @property
    def queued_str(self) -> str:
        """Return the time the Link was queued, or an empty string."""
        if self.queued_at is None:
            return ""
        return self.queued_at.strftime(common.TimeFmt)


@dataclass(kw_only=True, slots=True)
class Article:
    """Article is a feed item along with the Links extracted from its body."""

    url: str
    title: str
    feed: str = ""
    date: datetime = common.Epoch
    links: list[Link] = field(default_factory=list)

    @property
    def date_str(self) -> str:
        """Return the Article's publication date as a human-readable string."""
        if self.date == common.Epoch:
            return ""
        return self.date.strftime(common.TimeFmt)


def _stamp(val: Optional[datetime]) -> Optional[str]:
    return None if val is None else val.isoformat()


def _unstamp(val: Optional[str]) -> Optional[datetime]:
    return None if val is None else datetime.fromisoformat(val)


@dataclass(kw_only=True, slots=True)
class ArticleState:
    """ArticleState is what we remember about an Article across refreshes."""

    url: str
    dismissed_at: Optional[datetime] = None

    @property
    def dismissed(self) -> bool:
        """Return True if the operator has dismissed the Article."""
        return self.dismissed_at is not None

    def to_record(self) -> dict[str, Any]:
        """Return a JSON-serializable dict of the state."""
        return {
            "url": self.url,
            "dismissed_at": _stamp(self.dismissed_at),
        }

    @classmethod
    def from_record(cls, rec: dict[str, Any]) -> 'ArticleState':
        """Re-create an ArticleState from a dict created by to_record."""
        return cls(url=rec["url"], dismissed_at=_unstamp(rec.get("dismissed_at")))


@dataclass(kw_only=True, slots=True)
class LinkState:
    """LinkState records that a Link has been committed to the posting queue."""

    url: str
    queued_at: datetime
    article_url: str = ""

    def to_record(self) -> dict[str, Any]:
        """Return a JSON-serializable dict of the state."""
        return {
            "url": self.url,
            "article_url": self.article_url,
            "queued_at": _stamp(self.queued_at),
        }

    @classmethod
    def from_record(cls, rec: dict[str, Any]) -> 'LinkState':
        """Re-create a LinkState from a dict created by to_record."""
        return cls(url=rec["url"],
                   article_url=rec.get("article_url", ""),
                   queued_at=datetime.fromisoformat(rec["queued_at"]))

# Local Variables: #
# python-indent: 4 #
# End: #
