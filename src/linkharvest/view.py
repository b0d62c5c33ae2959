#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Time-stamp: <2026-10-17 17:31:40 krylon>
#
# /data/code/python/linkharvest/src/linkharvest/view.py
# created on 17. 10. 2026
# (c) 2026 Benjamin Walkenhorst
#
# This file is part of the linkharvest link collector. It is distributed under the
# terms of the GNU General Public License 3. See the file LICENSE for details
# or find a copy online at https://www.gnu.org/licenses/gpl-3.0

"""
linkharvest.view

(c) 2026 Benjamin Walkenhorst
"""


from dataclasses import replace
from typing import Iterable, Optional, Protocol

from linkharvest import common
from linkharvest.common import HarvestError
from linkharvest.model import Article, ArticleState, Link, LinkState
from linkharvest.store import StoreError


class ViewError(HarvestError):
    """ViewError indicates the list of Articles could not be put together."""


class StateLookup(Protocol):
    """The part of the Store build_view needs."""

    def find_article(self, url: str) -> Optional[ArticleState]:
        ...

    def find_link(self, url: str) -> Optional[LinkState]:
        ...


def build_view(articles: Iterable[Article], store: StateLookup) -> list[Article]:
    """Merge freshly fetched Articles with what the Store knows about them.

    Dismissed Articles are left out, Links that have been queued are marked as
    such. The result is sorted by date, most recent Articles first. The Articles
    passed in are not modified.
    """
    log = common.get_logger("view")
    result: list[Article] = []
    for art in articles:
        try:
            state: Optional[ArticleState] = store.find_article(art.url)
        except StoreError as err:
            raise ViewError(
                f"Error while looking up Article {art.url} in state store: {err}") from err
        if state is not None and state.dismissed:
            log.debug("%s is dismissed", art.title)
            continue

        links: list[Link] = []
        for lnk in art.links:
            try:
                lstate: Optional[LinkState] = store.find_link(lnk.url)
            except StoreError as err:
                raise ViewError(
                    f"Error while looking up Link from {art.url} in state store: {err}") from err
            if lstate is not None:
                links.append(replace(lnk, queued=True, queued_at=lstate.queued_at))
            else:
                links.append(replace(lnk, queued=False, queued_at=None))

        result.append(replace(art, links=links))

    result.sort(key=lambda a: a.date, reverse=True)
    return result

# Local Variables: #
# python-indent: 4 #
# End: #
