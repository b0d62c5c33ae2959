#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Time-stamp: <2026-10-17 20:14:36 krylon>
#
# /data/code/python/linkharvest/src/linkharvest/web.py
# created on 17. 10. 2026
# (c) 2026 Benjamin Walkenhorst
#
# This file is part of the linkharvest link collector. It is distributed under the
# terms of the GNU General Public License 3. See the file LICENSE for details
# or find a copy online at https://www.gnu.org/licenses/gpl-3.0

"""
linkharvest.web

(c) 2026 Benjamin Walkenhorst
"""


import json
import logging
import os
import pathlib
import re
import socket
from datetime import datetime
from typing import Any, Final, Optional, Union

import bottle
from bottle import request, response
from jinja2 import Environment, FileSystemLoader

from linkharvest import common
from linkharvest.buffer import UpdateOptions
from linkharvest.engine import Engine
from linkharvest.fetcher import FetchError
from linkharvest.model import Article
from linkharvest.store import StoreError
from linkharvest.view import ViewError

mime_types: Final[dict[str, str]] = {
    ".css":  "text/css",
    ".map":  "application/json",
    ".js":   "text/javascript",
    ".png":  "image/png",
    ".ico":  "image/vnd.microsoft.icon",
    ".json": "application/json",
    ".html": "text/html",
}

suffix_pat: Final[re.Pattern] = re.compile("([.][^.]+)$")

default_root: Final[pathlib.Path] = pathlib.Path(__file__).parent.joinpath("web")


def find_mime_type(path: str) -> str:
    """Attempt to determine the MIME type for a file."""
    m = suffix_pat.search(path)
    if m is None:
        return "application/octet-stream"
    return mime_types.get(m[1], "application/octet-stream")


class WebUI:
    """Present the harvested links to the user."""

    __slots__ = [
        "log",
        "root",
        "tmpl_root",
        "env",
        "host",
        "port",
        "engine",
        "app",
    ]

    log: logging.Logger
    root: pathlib.Path
    tmpl_root: pathlib.Path
    env: Environment
    host: str
    port: int
    engine: Engine
    app: bottle.Bottle

    def __init__(self,
                 engine: Engine,
                 root: Union[str, pathlib.Path] = "",
                 host: str = "localhost",
                 port: int = 19870) -> None:
        self.log = common.get_logger("web")
        self.log.info("Web interface is coming up...")

        self.engine = engine
        self.host = host
        self.port = port

        match root:
            case "":
                self.root = default_root
            case str() as x:
                self.root = pathlib.Path(x)
            case _ if isinstance(root, pathlib.Path):
                self.root = root
            case _:
                raise TypeError("Invalid type for root (must be str or pathlib.Path)")

        self.tmpl_root = self.root.joinpath("templates")
        # Jinja2 checks the template files for changes, so in debug mode
        # editing them takes effect without restarting.
        self.env = Environment(loader=FileSystemLoader(str(self.tmpl_root)),
                               auto_reload=common.Debug,
                               autoescape=True)
        self.env.globals = {
            "dbg": common.Debug,
            "app_string": f"{common.AppName} {common.AppVersion}",
            "hostname": socket.gethostname(),
        }

        bottle.debug(common.Debug)
        self.app = bottle.Bottle()
        self.app.route("/", callback=self._handle_index)
        self.app.route("/refresh", callback=self._handle_refresh)
        self.app.route("/enqueue", callback=self._handle_enqueue)
        self.app.route("/commit", method="POST", callback=self._handle_commit)

        self.app.route("/ajax/dismiss",
                       method="POST",
                       callback=self._handle_dismiss)

        self.app.route("/static/<path>", callback=self._handle_static)
        self.app.route("/favicon.ico", callback=self._handle_favicon)

    def _tmpl_vars(self) -> dict:
        """Return a dict with a few default variables filled in already."""
        default: dict = {
            "now": datetime.now().strftime(common.TimeFmt),
            "year": datetime.now().year,
            "time_fmt": common.TimeFmt,
        }

        return default

    def run(self) -> None:
        """Run the web server."""
        self.log.info("listening on %s:%d", self.host, self.port)
        self.app.run(host=self.host, port=self.port, debug=common.Debug)

    def _render_error(self, status: int, message: str) -> str:
        response.status = status
        response.set_header("Cache-Control", "no-store, max-age=0")
        tmpl = self.env.get_template("error.jinja")
        tmpl_vars = self._tmpl_vars()
        tmpl_vars["title"] = f"{common.AppName} {common.AppVersion} - Error"
        tmpl_vars["message"] = message
        tmpl_vars["url"] = request.get_header("Referer", "/")
        return tmpl.render(tmpl_vars)

    def _handle_index(self) -> str:
        """Present the current Articles with their Links."""
        try:
            articles: list[Article] = self.engine.articles()
        except ViewError as err:
            self.log.error("Cannot assemble list of Articles: %s", err)
            return self._render_error(500, str(err))

        response.set_header("Cache-Control", "no-store, max-age=0")
        tmpl = self.env.get_template("index.jinja")
        tmpl_vars = self._tmpl_vars()
        tmpl_vars["title"] = f"{common.AppName} {common.AppVersion} - Articles"
        tmpl_vars["articles"] = articles
        return tmpl.render(tmpl_vars)

    def _handle_refresh(self) -> Optional[str]:
        """Poll the feeds again, then go back to the main page."""
        try:
            self.engine.refresh_feeds()
        except FetchError as err:
            return self._render_error(500, str(err))

        bottle.redirect("/", 307)
        return None

    def _handle_enqueue(self) -> str:
        """Display the form to compose a post for a Link."""
        url: Final[str] = request.query.getunicode("url", default="")
        if url == "":
            response.status = 400
            return "url not provided"

        response.set_header("Cache-Control", "no-store, max-age=0")
        tmpl = self.env.get_template("enqueue.jinja")
        tmpl_vars = self._tmpl_vars()
        tmpl_vars["title"] = f"{common.AppName} {common.AppVersion} - Enqueue"
        tmpl_vars["url"] = url
        tmpl_vars["article_url"] = request.query.getunicode("article", default="")
        return tmpl.render(tmpl_vars)

    def _handle_commit(self) -> str:
        """Post a Link to Buffer."""
        opts: Final[UpdateOptions] = UpdateOptions(
            content=request.forms.getunicode("content", default=""),
            link_url=request.forms.getunicode("url", default=""),
            link_title=request.forms.getunicode("link_title", default=""),
            link_description=request.forms.getunicode("link_descr", default=""),
        )
        article_url: Final[str] = request.forms.getunicode("article_url", default="")

        response.set_header("Content-Type", "text/plain; charset=UTF-8")
        if opts.link_url == "":
            response.status = 400
            return "url not provided"

        try:
            self.engine.commit(opts, article_url)
        except common.HarvestError as err:
            cname: Final[str] = err.__class__.__name__
            self.log.error("%s trying to queue %s: %s", cname, opts.link_url, err)
            response.status = 500
            return f"{cname} trying to queue {opts.link_url}: {err}"

        return "pushed post to buffer"

    # AJAX Handlers

    def _handle_dismiss(self) -> str:
        """Mark an Article as dismissed."""
        url: Final[str] = request.forms.getunicode("url", default="")
        res: dict[str, Any] = {"timestamp": datetime.now().strftime(common.TimeFmt)}

        if url == "":
            res["status"] = False
            res["message"] = "No URL was given"
        else:
            try:
                self.engine.dismiss(url)
                res["status"] = True
                res["message"] = "ACK"
            except StoreError as err:
                cname: Final[str] = err.__class__.__name__
                res["status"] = False
                res["message"] = f"{cname} trying to dismiss Article {url}: {err}"
                self.log.error(res["message"])

        response.set_header("Cache-Control", "no-store, max-age=0")
        response.set_header("Content-Type", "application/json")
        return json.dumps(res)

    # Static files

    def _handle_favicon(self) -> bytes:
        """Handle the request for the favicon."""
        return self._handle_static("favicon.ico")

    def _handle_static(self, path) -> bytes:
        """Return one of the static files."""
        mtype = find_mime_type(path)
        response.set_header("Content-Type", mtype)
        response.set_header("Cache-Control",
                            "no-store, max-age=0" if common.Debug else "max-age=7200")

        static_root: Final[str] = os.path.join(self.root, "static")
        full_path = os.path.normpath(os.path.join(static_root, path))
        if not full_path.startswith(static_root) or not os.path.isfile(full_path):
            self.log.error("Static file %s was not found", path)
            response.status = 404
            return bytes()
        with open(full_path, "rb") as fh:
            return fh.read()

# Local Variables: #
# python-indent: 4 #
# End: #
