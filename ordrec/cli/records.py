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

import sys
from datetime import date

from ordrec.cli._io import parse_cli_date, render_records
from ordrec.cli.exitcodes import EXIT_DATA_ERROR, EXIT_OK, EXIT_REJECTED
from ordrec.records.dao import OrderRecordDAO
from ordrec.records.store import XmlOrderRecordDAO
from ordrec.records.types import OrderRecord


def init(dao: XmlOrderRecordDAO, *, force: bool = False) -> int:
    """
    Create an empty record list file.

    Refuses to overwrite an existing file unless ``force`` is set.
    """
    if dao.path.exists() and not force:
        print(f"ordrec: error: {dao.path} already exists (use --force to overwrite)", file=sys.stderr)
        return EXIT_DATA_ERROR
    dao.reset()
    print(f"Initialized empty record list: {dao.path}")
    return EXIT_OK


def list_records(dao: OrderRecordDAO, *, fmt: str = "text") -> int:
    records = dao.get_all_order_records()
    out = render_records(records, fmt)
    if out:
        print(out)
    return EXIT_OK


def get(dao: OrderRecordDAO, order_number: str, *, fmt: str = "text") -> int:
    record = dao.get_order_record(order_number)
    if record is None:
        print(f"Order record not found: {order_number}")
        return EXIT_REJECTED
    print(render_records([record], fmt))
    return EXIT_OK


def add(dao: OrderRecordDAO, order_number: str, order_date: str, vendor_id: int) -> int:
    record = OrderRecord(order_number=order_number, order_date=parse_cli_date(order_date), vendor_id=vendor_id)
    dao.create_order_record(record)
    print(f"Added order record: {order_number}")
    return EXIT_OK


def update(
    dao: OrderRecordDAO,
    order_number: str,
    *,
    order_date: str,
    vendor_id: int,
    new_date: str | None,
    new_vendor: int | None,
) -> int:
    """
    Apply an optimistic update.

    ``order_date`` and ``vendor_id`` are the values the caller believes are
    stored; fields without a new value keep the believed value.
    """
    original = OrderRecord(order_number=order_number, order_date=parse_cli_date(order_date), vendor_id=vendor_id)
    updated = original.with_changes(
        order_date=parse_cli_date(new_date) if new_date is not None else None,
        vendor_id=new_vendor,
    )
    dao.update_order_record(original, updated)
    print(f"Updated order record: {order_number}")
    return EXIT_OK


def delete(dao: OrderRecordDAO, order_number: str) -> int:
    existing = dao.get_order_record(order_number)
    if existing is None:
        # Only the order number takes part in matching
        dao.delete_order_record(OrderRecord(order_number=order_number, order_date=date.min, vendor_id=0))
        print(f"Order record not found, nothing deleted: {order_number}")
        return EXIT_OK
    dao.delete_order_record(existing)
    print(f"Deleted order record: {order_number}")
    return EXIT_OK
