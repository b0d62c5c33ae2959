#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Time-stamp: <2026-10-17 15:11:48 krylon>
#
# /data/code/python/linkharvest/src/linkharvest/walker.py
# created on 17. 10. 2026
# (c) 2026 Benjamin Walkenhorst
#
# This file is part of the linkharvest link collector. It is distributed under the
# terms of the GNU General Public License 3. See the file LICENSE for details
# or find a copy online at https://www.gnu.org/licenses/gpl-3.0

"""
linkharvest.walker

(c) 2026 Benjamin Walkenhorst

Depth-first traversal of BeautifulSoup trees. A Visitor is handed every node
in document order and decides which Visitor, if any, handles the node's
children. Once a node's children are done, the Visitor that accepted the node
receives Mark.End, so it may finish whatever it accumulated for the subtree.
"""


from abc import ABC, abstractmethod
from enum import Enum, auto
from typing import Optional, Union

from bs4.element import NavigableString, PageElement, PreformattedString, Tag


class Mark(Enum):
    """Mark is passed to a Visitor in place of a node."""

    End = auto()


Node = Union[PageElement, Mark]


class Visitor(ABC):
    """Visitor is the behaviour plugged into walk()."""

    @abstractmethod
    def visit(self, node: Node) -> Optional['Visitor']:
        """Process <node>.

        Return the Visitor to use for the node's children, or None to skip them.
        The return value is ignored for Mark.End.
        """


def is_text(node: PageElement) -> bool:
    """Return True if <node> carries document text.

    Comments, CDATA sections, doctypes and the like are strings to BeautifulSoup,
    but they are not text.
    """
    return isinstance(node, NavigableString) and not isinstance(node, PreformattedString)


def walk(node: PageElement, v: Visitor) -> None:
    """Walk the tree rooted at <node> in pre-order.

    The walk keeps its own stack, so the depth of the tree is not limited by
    the interpreter's recursion limit.
    """
    stack: list[tuple[Node, Visitor]] = [(node, v)]
    while len(stack) > 0:
        cur, cv = stack.pop()
        if cur is Mark.End:
            cv.visit(Mark.End)
            continue

        vv: Optional[Visitor] = cv.visit(cur)
        if vv is None:
            continue
        # The End mark sits below the children, so it comes up once they
        # are all done.
        stack.append((Mark.End, cv))
        if isinstance(cur, Tag):
            for child in reversed(list(cur.children)):
                stack.append((child, vv))


class Flattener(Visitor):
    """Flattener gathers the text of a subtree."""

    __slots__ = ["parts"]

    parts: list[str]

    def __init__(self) -> None:
        self.parts = []

    def visit(self, node: Node) -> Optional[Visitor]:
        if node is Mark.End:
            return None
        if is_text(node):
            self.parts.append(str(node) + " ")
        return self

    @property
    def text(self) -> str:
        """Return the text collected so far."""
        return "".join(self.parts)


def flatten(node: Optional[PageElement]) -> str:
    """Return the text of all text nodes below <node>, each followed by a space."""
    if node is None:
        return ""
    v: Flattener = Flattener()
    walk(node, v)
    return v.text

# Local Variables: #
# python-indent: 4 #
# End: #
