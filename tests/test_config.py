#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Time-stamp: <2026-10-18 00:20:48 krylon>
#
# /data/code/python/linkharvest/tests/test_config.py
# created on 17. 10. 2026
# (c) 2026 Benjamin Walkenhorst
#
# This file is part of the linkharvest link collector. It is distributed under the
# terms of the GNU General Public License 3. See the file LICENSE for details
# or find a copy online at https://www.gnu.org/licenses/gpl-3.0

"""
linkharvest.test_config

(c) 2026 Benjamin Walkenhorst
"""

import os
import shutil
import unittest
from datetime import datetime
from typing import Final
from unittest import mock

from linkharvest import common
from linkharvest.config import (Config, ConfigError, default_feeds,
                                load_feeds, token_var)
from linkharvest.model import FeedConfig

test_dir: Final[str] = os.path.join(
    "/tmp",
    datetime.now().strftime(f"{common.AppName.lower()}_test_config_%Y%m%d_%H%M%S"))

sample: Final[str] = """
- name: Marginal Revolution
  url: http://feeds.feedburner.com/marginalrevolution?fmt=xml
  filter: link
- url: https://example.com/feed/
"""


class TestConfig(unittest.TestCase):
    """Test loading the configuration."""

    @classmethod
    def setUpClass(cls) -> None:
        """Prepare the testing environment."""
        common.set_basedir(test_dir)

    @classmethod
    def tearDownClass(cls) -> None:
        """Clean up afterwards."""
        shutil.rmtree(test_dir, ignore_errors=True)

    def write(self, name: str, content: str) -> str:
        """Write a file to the test directory."""
        fpath: str = os.path.join(test_dir, name)
        with open(fpath, "w", encoding="utf-8") as fh:
            fh.write(content)
        return fpath

    def test_01_defaults(self) -> None:
        """Test that the built-in feeds are used if there is no feed list."""
        feeds: list[FeedConfig] = load_feeds()
        self.assertEqual(feeds, default_feeds())
        self.assertEqual(len(feeds), 3)
        for f in feeds:
            self.assertEqual(f.title_filter, "link")

    def test_02_load(self) -> None:
        """Test loading a feed list."""
        feeds: list[FeedConfig] = load_feeds(self.write("sample.yaml", sample))
        self.assertEqual(len(feeds), 2)
        self.assertEqual(feeds[0].name, "Marginal Revolution")
        self.assertEqual(feeds[0].title_filter, "link")
        self.assertEqual(feeds[1].name, "https://example.com/feed/")
        self.assertEqual(feeds[1].title_filter, "")
        self.assertTrue(feeds[1].accepts("Anything at all"))
        self.assertTrue(feeds[0].accepts("Assorted LINKS"))
        self.assertFalse(feeds[0].accepts("An essay"))

    def test_03_invalid(self) -> None:
        """Test that broken feed lists are rejected."""
        cases: Final[list[str]] = [
            "name: not a list\n",
            "- name: no url\n",
            "- [unbalanced\n",
        ]
        for i, c in enumerate(cases):
            with self.subTest(i=i):
                with self.assertRaises(ConfigError):
                    load_feeds(self.write(f"bad{i}.yaml", c))

    def test_04_missing(self) -> None:
        """Test that an explicitly given feed list must exist."""
        with self.assertRaises(ConfigError):
            load_feeds(os.path.join(test_dir, "does-not-exist.yaml"))

    def test_05_environment(self) -> None:
        """Test reading settings from the environment."""
        with mock.patch.dict(os.environ, {"PORT": ":8080", token_var: "t0ken"}):
            self.assertEqual(Config.port_from_env(), 8080)
            self.assertEqual(Config.token_from_env(), "t0ken")
        with mock.patch.dict(os.environ, {"PORT": "many"}):
            with self.assertRaises(ConfigError):
                Config.port_from_env()
        with mock.patch.dict(os.environ, {}, clear=True):
            self.assertEqual(Config.port_from_env(), 19870)
            self.assertEqual(Config.token_from_env(), "")


# Local Variables: #
# python-indent: 4 #
# End: #
