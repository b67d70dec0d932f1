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

import re
from collections.abc import Mapping
from dataclasses import dataclass, replace
from datetime import date, datetime
from typing import Any

DATE_FORMAT = "%m/%d/%Y"
"""Date pattern used in the backing file (two-digit month/day, four-digit year)."""

# Vendor ids are signed 32-bit integers in the backing file
VENDOR_ID_MIN = -(2**31)
VENDOR_ID_MAX = 2**31 - 1

_VENDOR_ID_RE = re.compile(r"[+-]?[0-9]+")

# Characters outside the XML 1.0 Char production
_XML_INVALID_RE = re.compile("[^\t\n\r\x20-\ud7ff\ue000-\ufffd\U00010000-\U0010ffff]")


def format_order_date(value: date) -> str:
    # Year is always written with four digits
    return f"{value.month:02d}/{value.day:02d}/{value.year:04d}"


def parse_order_date(text: str) -> date:
    """
    Parse a ``MM/dd/yyyy`` date.

    Raises ValueError when the text does not match the pattern exactly.
    """
    text = text.strip()
    parts = text.split("/")
    if (
        len(parts) != 3
        or [len(p) for p in parts] != [2, 2, 4]
        or not all(p.isascii() and p.isdigit() for p in parts)
    ):
        raise ValueError(f"Order date {text!r} does not match MM/dd/yyyy")
    return datetime.strptime(text, DATE_FORMAT).date()


def parse_vendor_id(text: str) -> int:
    """
    Parse a plain decimal vendor id with an optional sign.

    Raises ValueError for anything else (underscores, non-ASCII digits) and
    for values outside the signed 32-bit range.
    """
    text = text.strip()
    if not _VENDOR_ID_RE.fullmatch(text):
        raise ValueError(f"Vendor id {text!r} is not a decimal integer")
    value = int(text)
    if not VENDOR_ID_MIN <= value <= VENDOR_ID_MAX:
        raise ValueError(f"Vendor id {text!r} is out of range")
    return value


@dataclass(frozen=True, slots=True)
class OrderRecord:
    """
    A single persisted order.

    OrderRecord is a value: it is immutable and compares by content. The
    order number is the record's identity inside a store.
    """

    order_number: str
    order_date: date
    vendor_id: int

    def __post_init__(self) -> None:
        if not isinstance(self.order_number, str) or not self.order_number:
            raise ValueError("order_number must be a non-empty string")
        if _XML_INVALID_RE.search(self.order_number):
            raise ValueError(f"order_number {self.order_number!r} contains characters not allowed in XML")
        if isinstance(self.order_date, datetime) or not isinstance(self.order_date, date):
            raise TypeError("order_date must be a datetime.date")
        if isinstance(self.vendor_id, bool) or not isinstance(self.vendor_id, int):
            raise TypeError("vendor_id must be an int")
        if not VENDOR_ID_MIN <= self.vendor_id <= VENDOR_ID_MAX:
            raise ValueError(f"vendor_id {self.vendor_id} is outside the 32-bit range")

    def copy(self) -> "OrderRecord":
        return replace(self)

    def with_changes(self, *, order_date: date | None = None, vendor_id: int | None = None) -> "OrderRecord":
        """
        Return a new record with the same order number and the given fields replaced.
        """
        return OrderRecord(
            order_number=self.order_number,
            order_date=self.order_date if order_date is None else order_date,
            vendor_id=self.vendor_id if vendor_id is None else vendor_id,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "order_number": self.order_number,
            "order_date": self.order_date.isoformat(),
            "vendor_id": self.vendor_id,
        }

    @staticmethod
    def from_dict(data: Mapping[str, Any]) -> "OrderRecord":
        raw_date = data["order_date"]
        order_date = raw_date if isinstance(raw_date, date) else date.fromisoformat(str(raw_date))
        return OrderRecord(
            order_number=str(data["order_number"]),
            order_date=order_date,
            vendor_id=int(data["vendor_id"]),
        )
