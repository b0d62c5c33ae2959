#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Time-stamp: <2026-10-17 14:00:52 krylon>
#
# /data/code/python/linkharvest/src/linkharvest/__init__.py
# created on 17. 10. 2026
# (c) 2026 Benjamin Walkenhorst
#
# This file is part of the linkharvest link collector. It is distributed under the
# terms of the GNU General Public License 3. See the file LICENSE for details
# or find a copy online at https://www.gnu.org/licenses/gpl-3.0

"""
linkharvest

(c) 2026 Benjamin Walkenhorst

Collect the outbound links from a handful of RSS feeds, so the interesting
ones can be queued for posting on Buffer.
"""

# Local Variables: #
# python-indent: 4 #
# End: #
