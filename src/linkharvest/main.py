#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Time-stamp: <2026-10-17 21:03:44 krylon>
#
# /data/code/python/linkharvest/src/linkharvest/main.py
# created on 17. 10. 2026
# (c) 2026 Benjamin Walkenhorst
#
# This file is part of the linkharvest link collector. It is distributed under the
# terms of the GNU General Public License 3. See the file LICENSE for details
# or find a copy online at https://www.gnu.org/licenses/gpl-3.0

"""
linkharvest.main

(c) 2026 Benjamin Walkenhorst
"""


import argparse
import logging
import pathlib
import sys

from linkharvest import common
from linkharvest.buffer import BufferError, Client
from linkharvest.config import Config, ConfigError, load_feeds
from linkharvest.engine import Engine, pick_profiles
from linkharvest.fetcher import Fetcher
from linkharvest.store import Store, StoreError
from linkharvest.web import WebUI


def parse_args(argv=None) -> argparse.Namespace:
    """Parse the command line."""
    argp: argparse.ArgumentParser = argparse.ArgumentParser(
        prog=common.AppName.lower(),
        description="Collect the links from a few RSS feeds and queue them on Buffer")
    argp.add_argument("-d", "--debug",
                      action="store_true",
                      help="Emit more log messages, reload templates when they change")
    argp.add_argument("-b", "--basedir",
                      type=pathlib.Path,
                      default=common.path.base(),
                      help="The directory to store application-specific files in")
    argp.add_argument("--db",
                      type=pathlib.Path,
                      default=None,
                      help="The LMDB environment to keep state in (default: BASEDIR/state.lmdb)")
    argp.add_argument("-f", "--feeds",
                      type=pathlib.Path,
                      default=None,
                      help="YAML file listing the feeds to poll (default: BASEDIR/feeds.yaml)")
    argp.add_argument("-a", "--address",
                      default="localhost",
                      help="The IP address(es) or hostname to listen on")
    argp.add_argument("-p", "--port",
                      type=int,
                      default=None,
                      help="The port for the web interface to listen on (default: $PORT or 19870)")
    argp.add_argument("-t", "--token",
                      default=None,
                      help="The Buffer access token (default: $LINKHARVEST_BUFFER_TOKEN)")
    argp.add_argument("-s", "--service",
                      default="facebook",
                      help="Post to all Buffer profiles on this service")

    return argp.parse_args(argv)


def main(argv=None) -> None:
    """Run the linkharvest application."""
    args = parse_args(argv)

    common.set_basedir(args.basedir)
    common.set_debug(args.debug)
    lg: logging.Logger = common.get_logger("main")

    try:
        cfg: Config = Config(
            feeds=load_feeds(args.feeds),
            token=args.token if args.token is not None else Config.token_from_env(),
            service=args.service,
            address=args.address,
            port=args.port if args.port is not None else Config.port_from_env(),
        )
    except ConfigError as err:
        lg.critical("Invalid configuration: %s", err)
        sys.exit(1)

    try:
        store: Store = Store(args.db)
    except StoreError as err:
        lg.critical("Cannot open state store: %s", err)
        sys.exit(1)

    client: Client = Client(cfg.token, timeout=cfg.timeout)
    try:
        profiles: list[str] = pick_profiles(client, cfg.service)
    except BufferError as err:
        lg.critical("Error getting profiles: %s", err)
        sys.exit(1)
    lg.info("Posting to %d %s profiles", len(profiles), cfg.service)

    eng: Engine = Engine(cfg.feeds,
                         store,
                         fetcher=Fetcher(timeout=cfg.timeout),
                         buffer=client,
                         profiles=profiles)
    eng.start()

    srv: WebUI = WebUI(eng, host=cfg.address, port=cfg.port)
    try:
        srv.run()
    except KeyboardInterrupt:
        print("Quitting now, bye!")
    finally:
        store.close()


if __name__ == '__main__':
    main()


# Local Variables: #
# python-indent: 4 #
# End: #
