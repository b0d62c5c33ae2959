#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Time-stamp: <2026-10-17 21:30:18 krylon>
#
# /data/code/python/linkharvest/tests/test_walker.py
# created on 17. 10. 2026
# (c) 2026 Benjamin Walkenhorst
#
# This file is part of the linkharvest link collector. It is distributed under the
# terms of the GNU General Public License 3. See the file LICENSE for details
# or find a copy online at https://www.gnu.org/licenses/gpl-3.0

"""
linkharvest.test_walker

(c) 2026 Benjamin Walkenhorst
"""

import unittest
from typing import Final, NamedTuple, Optional

from bs4 import BeautifulSoup
from bs4.element import Tag

from linkharvest.walker import Mark, Node, Visitor, flatten, walk


class FlattenTestCase(NamedTuple):
    """A test case for flatten()."""

    html: str
    words: list[str]


flatten_cases: Final[list[FlattenTestCase]] = [
    FlattenTestCase("<p>Hello <b>brave</b> new <i>world</i></p>",
                    ["Hello", "brave", "new", "world"]),
    FlattenTestCase("<div><p>one</p><p>two <span>three</span></p>four</div>",
                    ["one", "two", "three", "four"]),
    FlattenTestCase("<p>visible<!-- hidden --> text</p>",
                    ["visible", "text"]),
    FlattenTestCase("<br/>", []),
]


class Recorder(Visitor):
    """Recorder remembers what it was handed."""

    def __init__(self, skip: str = "") -> None:
        self.events: list[str] = []
        self.skip = skip

    def visit(self, node: Node) -> Optional[Visitor]:
        if node is Mark.End:
            self.events.append("/")
            return None
        if isinstance(node, Tag):
            self.events.append(node.name)
            if node.name == self.skip:
                return None
        return self


class Counter(Visitor):
    """Counter counts tags, handing off to a Recorder below <ul> elements."""

    def __init__(self) -> None:
        self.cnt = 0
        self.inner = Recorder()

    def visit(self, node: Node) -> Optional[Visitor]:
        if node is Mark.End:
            return None
        if isinstance(node, Tag):
            self.cnt += 1
            if node.name == "ul":
                return self.inner
        return self


class TestWalker(unittest.TestCase):
    """Test the tree walker and the Flattener."""

    def test_01_flatten(self) -> None:
        """Test flattening a few simple fragments."""
        for i, c in enumerate(flatten_cases):
            with self.subTest(i=i):
                soup = BeautifulSoup(c.html, "html.parser")
                txt: str = flatten(soup)
                self.assertEqual(txt.split(), c.words)

    def test_02_flatten_separator(self) -> None:
        """Test that each text node is followed by a single space."""
        soup = BeautifulSoup("<p>a<b>b</b>c</p>", "html.parser")
        self.assertEqual(flatten(soup), "a b c ")

    def test_03_flatten_none(self) -> None:
        """Test flattening nothing."""
        self.assertEqual(flatten(None), "")

    def test_04_order_and_end_marks(self) -> None:
        """Test the walker visits in pre-order and closes every subtree it entered."""
        soup = BeautifulSoup("<div><p><b>x</b></p><p>y</p></div>", "html.parser")
        rec: Recorder = Recorder()
        walk(soup.div, rec)
        # The text nodes are visited, too, and their (empty) subtrees closed.
        self.assertEqual(rec.events,
                         ["div", "p", "b", "/", "/", "/", "p", "/", "/", "/"])

    def test_05_skip_subtree(self) -> None:
        """Test that returning None keeps the walker out of a subtree."""
        soup = BeautifulSoup("<div><p><b>x</b></p><i>y</i></div>", "html.parser")
        rec: Recorder = Recorder(skip="p")
        walk(soup.div, rec)
        self.assertNotIn("b", rec.events)
        self.assertIn("i", rec.events)

    def test_06_switch_visitor(self) -> None:
        """Test that a Visitor can hand the children of a node to another Visitor."""
        soup = BeautifulSoup("<div><ul><li>a</li><li>b</li></ul><p>c</p></div>",
                             "html.parser")
        v: Counter = Counter()
        walk(soup.div, v)
        self.assertEqual(v.cnt, 3)  # div, ul, p
        self.assertEqual([e for e in v.inner.events if e != "/"], ["li", "li"])

    def test_07_deep_tree(self) -> None:
        """Test walking a tree nested deeper than the recursion limit."""
        depth: Final[int] = 1500
        soup = BeautifulSoup("<i>" * depth + "x", "html.parser")
        rec: Recorder = Recorder()
        walk(soup, rec)
        self.assertEqual(rec.events[:depth + 1], ["[document]"] + ["i"] * depth)
        # One End for the text node, one per tag, one for the document.
        self.assertEqual(rec.events[depth + 1:], ["/"] * (depth + 2))
        self.assertEqual(flatten(soup).split(), ["x"])


# Local Variables: #
# python-indent: 4 #
# End: #
