# SPDX-License-Identifier: AGPL-3.0-only
#
# Copyright (c) 2026 Ordrec Contributors
#
# This file is part of Ordrec.
#
# Ordrec is free software: you can redistribute it and/or modify
# it under the terms of the GNU Affero General Public License as published by
# the Free Software Foundation, version 3 only.
#
# Ordrec is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.
# See the GNU Affero General Public License for more details.

import argparse
import logging
import sys

from ordrec._version import __version__
from ordrec.cli import records
from ordrec.cli._io import resolve_config
from ordrec.cli.exitcodes import EXIT_DATA_ERROR, exit_code_for_error
from ordrec.core.factory import OrderRecordDAOFactory
from ordrec.records.errors import OrderRecordDataError


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="ordrec", description="Ordrec — XML-backed order record store")
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    p.add_argument("--config", default=None, help="Config file (default: ordrec.yaml in the current directory).")
    p.add_argument("--data-file", dest="data_file", default=None, help="Override the backing XML file.")
    p.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")

    sub = p.add_subparsers(dest="cmd", required=True)

    # init
    init_p = sub.add_parser("init", help="Create an empty record list file.")
    init_p.add_argument("--force", action="store_true", help="Overwrite an existing file.")

    # list
    list_p = sub.add_parser("list", help="List all order records.")
    list_p.add_argument("--format", choices=["text", "json"], default="text", help="Output format.")

    # get
    get_p = sub.add_parser("get", help="Show one order record.")
    get_p.add_argument("order_number", help="Order number.")
    get_p.add_argument("--format", choices=["text", "json"], default="text", help="Output format.")

    # add
    add_p = sub.add_parser("add", help="Add an order record.")
    add_p.add_argument("order_number", help="Order number.")
    add_p.add_argument("order_date", help="Order date (MM/dd/yyyy or yyyy-mm-dd).")
    add_p.add_argument("vendor_id", type=int, help="Vendor id.")

    # update
    upd = sub.add_parser("update", help="Update an order record (optimistic check).")
    upd.add_argument("order_number", help="Order number.")
    upd.add_argument("--date", dest="order_date", required=True, help="Currently stored order date.")
    upd.add_argument("--vendor", dest="vendor_id", type=int, required=True, help="Currently stored vendor id.")
    upd.add_argument("--new-date", dest="new_date", default=None, help="New order date.")
    upd.add_argument("--new-vendor", dest="new_vendor", type=int, default=None, help="New vendor id.")

    # delete
    del_p = sub.add_parser("delete", help="Delete an order record.")
    del_p.add_argument("order_number", help="Order number.")

    return p


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        cfg = resolve_config(args.config, args.data_file)

        dao = OrderRecordDAOFactory(cfg).get_dao()

        if args.cmd == "init":
            return records.init(dao, force=args.force)

        if args.cmd == "list":
            return records.list_records(dao, fmt=args.format)

        if args.cmd == "get":
            return records.get(dao, args.order_number, fmt=args.format)

        if args.cmd == "add":
            return records.add(dao, args.order_number, args.order_date, args.vendor_id)

        if args.cmd == "update":
            return records.update(
                dao,
                args.order_number,
                order_date=args.order_date,
                vendor_id=args.vendor_id,
                new_date=args.new_date,
                new_vendor=args.new_vendor,
            )

        if args.cmd == "delete":
            return records.delete(dao, args.order_number)

        print("Unknown command.", file=sys.stderr)
        return EXIT_DATA_ERROR

    except OrderRecordDataError as e:
        print(f"ordrec: error: {e}", file=sys.stderr)
        return exit_code_for_error(e.kind)
    except Exception as e:
        print(f"ordrec: error: {e}", file=sys.stderr)
        return EXIT_DATA_ERROR
