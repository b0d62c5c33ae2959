#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Time-stamp: <2026-10-17 18:40:55 krylon>
#
# /data/code/python/linkharvest/src/linkharvest/buffer.py
# created on 17. 10. 2026
# (c) 2026 Benjamin Walkenhorst
#
# This file is part of the linkharvest link collector. It is distributed under the
# terms of the GNU General Public License 3. See the file LICENSE for details
# or find a copy online at https://www.gnu.org/licenses/gpl-3.0

"""
linkharvest.buffer

(c) 2026 Benjamin Walkenhorst

A minimal client for the Buffer API, just enough to list the profiles of an
account and to put a post in their queues.
"""


import logging
from dataclasses import dataclass
from typing import Any, Final, Optional

import requests

from linkharvest import common
from linkharvest.common import HarvestError

buffer_url: Final[str] = "https://api.bufferapp.com/1"


class BufferError(HarvestError):
    """BufferError indicates a failed call to the Buffer API."""


@dataclass(kw_only=True, slots=True)
class Profile:
    """Profile is a social media account connected to Buffer."""

    pid: str
    service: str
    service_username: str = ""
    formatted_username: str = ""
    default: bool = False
    timezone: str = ""

    @classmethod
    def from_json(cls, rec: dict[str, Any]) -> 'Profile':
        """Create a Profile from the API's representation."""
        return cls(
            pid=rec["id"],
            service=rec.get("service", ""),
            service_username=rec.get("service_username", ""),
            formatted_username=rec.get("formatted_username", ""),
            default=bool(rec.get("default", False)),
            timezone=rec.get("timezone", ""),
        )


@dataclass(kw_only=True, slots=True)
class Update:
    """Update is a post in a Profile's queue."""

    uid: str
    text: str = ""
    profile_id: str = ""


@dataclass(kw_only=True, slots=True)
class UpdateOptions:
    """UpdateOptions describes the post to create."""

    content: str
    link_url: str = ""
    link_title: str = ""
    link_description: str = ""


class Client:
    """Client talks to the Buffer API on behalf of one account."""

    __slots__ = [
        "log",
        "token",
        "session",
        "timeout",
    ]

    log: logging.Logger
    token: str
    session: requests.Session
    timeout: float

    def __init__(self,
                 token: str,
                 session: Optional[requests.Session] = None,
                 timeout: float = 30.0) -> None:
        self.log = common.get_logger("buffer")
        self.token = token
        self.session = session if session is not None else requests.Session()
        self.timeout = timeout

    def profiles(self) -> list[Profile]:
        """Return all Profiles of the account."""
        data = self._request("GET", "profiles")
        if not isinstance(data, list):
            raise BufferError(f"Unexpected response to profiles request: {data!r}")
        return [Profile.from_json(p) for p in data]

    def create_update(self, profile_ids: list[str], opts: UpdateOptions) -> list[Update]:
        """Queue a post for all of the given Profiles."""
        params: list[tuple[str, str]] = [("text", opts.content)]
        for pid in profile_ids:
            params.append(("profile_ids[]", pid))
        if opts.link_url != "":
            params.append(("media[link]", opts.link_url))
            if opts.link_title != "":
                params.append(("media[title]", opts.link_title))
            if opts.link_description != "":
                params.append(("media[description]", opts.link_description))

        data = self._request("POST", "updates/create", params)
        if not isinstance(data, dict) or not data.get("success"):
            raise BufferError(f"Buffer returned success=false: {data!r}")

        updates: list[Update] = [
            Update(uid=u.get("id", ""),
                   text=u.get("text", ""),
                   profile_id=u.get("profile_id", ""))
            for u in data.get("updates", [])
        ]
        self.log.info("Created %d updates for %s", len(updates), opts.link_url)
        return updates

    def _request(self,
                 method: str,
                 resource: str,
                 params: Optional[list[tuple[str, str]]] = None) -> Any:
        url: Final[str] = f"{buffer_url}/{resource}.json"
        msg: str
        try:
            res = self.session.request(method,
                                       url,
                                       params={"access_token": self.token},
                                       data=params,
                                       timeout=self.timeout)
        except requests.RequestException as err:
            msg = f"{err.__class__.__name__} trying to {method} {resource}: {err}"
            self.log.error(msg)
            raise BufferError(msg) from err

        if res.status_code != 200:
            msg = f"Buffer API said: {res.status_code} {res.reason}"
            self.log.error(msg)
            raise BufferError(msg)

        try:
            return res.json()
        except ValueError as err:
            msg = f"Cannot decode response to {method} {resource}: {err}"
            self.log.error(msg)
            raise BufferError(msg) from err

# Local Variables: #
# python-indent: 4 #
# End: #
