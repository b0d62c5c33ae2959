#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Time-stamp: <2026-10-17 15:40:02 krylon>
#
# /data/code/python/linkharvest/src/linkharvest/extract.py
# created on 17. 10. 2026
# (c) 2026 Benjamin Walkenhorst
#
# This file is part of the linkharvest link collector. It is distributed under the
# terms of the GNU General Public License 3. See the file LICENSE for details
# or find a copy online at https://www.gnu.org/licenses/gpl-3.0

"""
linkharvest.extract

(c) 2026 Benjamin Walkenhorst

Find the hyperlinks in the HTML body of a feed item.
"""


import re
from typing import Final, Optional
from urllib.parse import SplitResult, urlsplit

from bs4 import BeautifulSoup, ParserRejectedMarkup
from bs4.element import PageElement, Tag

from linkharvest.common import HarvestError
from linkharvest.model import Link
from linkharvest.walker import Mark, Node, Visitor, flatten, walk

parser: Final[str] = "html.parser"

# Characters host_of rejects.
ctl_pat: Final[re.Pattern] = re.compile(r"[\x00-\x1f\x7f]")
escape_pat: Final[re.Pattern] = re.compile("%(?![0-9A-Fa-f]{2})")
bad_host_pat: Final[re.Pattern] = re.compile(r"[ \\^`{|}]")


class ExtractError(HarvestError):
    """ExtractError indicates markup the HTML parser could not deal with."""


def attr(node: Tag, name: str) -> str:
    """Return the value of the attribute <name> of <node>, ignoring case.

    Return an empty string if the node has no such attribute.
    """
    for key, val in node.attrs.items():
        if key.lower() == name:
            return val if isinstance(val, str) else " ".join(val)
    return ""


def host_of(url: str) -> Optional[str]:
    """Return the host part of <url>, or None if <url> cannot be parsed.

    Besides what urlsplit rejects, URLs with control characters, broken
    percent escapes outside the query, or stray characters in the host
    count as unparseable.
    """
    if ctl_pat.search(url) is not None:
        return None
    try:
        parts: SplitResult = urlsplit(url)
        # netloc is not validated until a component is looked at.
        _ = parts.port
    except ValueError:
        return None
    for part in (parts.netloc, parts.path, parts.fragment):
        if escape_pat.search(part) is not None:
            return None
    host: Final[str] = parts.netloc.rpartition("@")[2]
    if bad_host_pat.search(host) is not None:
        return None
    return host


class LinkCollector(Visitor):
    """LinkCollector gathers the anchor elements of a tree as Links."""

    __slots__ = ["links"]

    links: list[Link]

    def __init__(self) -> None:
        self.links = []

    def visit(self, node: Node) -> Optional[Visitor]:
        if node is Mark.End:
            return None
        if isinstance(node, Tag) and node.name == "a":
            href: Final[str] = attr(node, "href")
            if href != "":
                host = host_of(href)
                if host is not None:
                    self.links.append(Link(url=href,
                                           domain=host,
                                           context=flatten(node.parent)))
        return self


def find_links(body: str) -> list[Link]:
    """Return all Links in the HTML fragment <body>, in document order."""
    v: LinkCollector = LinkCollector()
    try:
        soup: PageElement = BeautifulSoup(body, parser)
        walk(soup, v)
    except ParserRejectedMarkup as err:
        raise ExtractError(f"Cannot parse HTML: {err}") from err
    except Exception as err:  # pylint: disable-msg=W0718
        raise ExtractError(
            f"{err.__class__.__name__} trying to extract links: {err}") from err
    return v.links

# Local Variables: #
# python-indent: 4 #
# End: #
