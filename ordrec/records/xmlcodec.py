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

"""
Marshalling between order records and the XML record list format.

Document layout:

  <recordList>
    <record order-number="A100">
      <orderDate>01/15/2024</orderDate>
      <vendorId>42</vendorId>
    </record>
    ...
  </recordList>
"""

import logging
import xml.etree.ElementTree as ET
from collections.abc import Iterable

from ordrec.records.errors import OrderRecordParseError
from ordrec.records.types import OrderRecord, format_order_date, parse_order_date, parse_vendor_id

logger = logging.getLogger(__name__)

ROOT_TAG = "recordList"
RECORD_TAG = "record"
ORDER_NUMBER_ATTR = "order-number"
ORDER_DATE_TAG = "orderDate"
VENDOR_ID_TAG = "vendorId"


def record_from_element(element: ET.Element) -> OrderRecord:
    """
    Build an OrderRecord from a ``record`` element.

    Unknown child elements are ignored. When a known child appears more than
    once, the last one wins.
    """
    order_number = element.get(ORDER_NUMBER_ATTR)
    if order_number is None:
        raise OrderRecordParseError(f"<{RECORD_TAG}> element is missing the '{ORDER_NUMBER_ATTR}' attribute.")
    if not order_number:
        raise OrderRecordParseError(f"<{RECORD_TAG}> element has an empty '{ORDER_NUMBER_ATTR}' attribute.")

    order_date = None
    vendor_id = None
    for child in element:
        text = (child.text or "").strip()
        if child.tag == ORDER_DATE_TAG:
            try:
                order_date = parse_order_date(text)
            except ValueError as e:
                raise OrderRecordParseError(
                    f"Record {order_number!r}: invalid order date {text!r}.",
                    details={"order_number": order_number, "value": text},
                ) from e
        elif child.tag == VENDOR_ID_TAG:
            try:
                vendor_id = parse_vendor_id(text)
            except ValueError as e:
                raise OrderRecordParseError(
                    f"Record {order_number!r}: invalid vendor id {text!r}.",
                    details={"order_number": order_number, "value": text},
                ) from e

    if order_date is None:
        raise OrderRecordParseError(f"Record {order_number!r}: missing <{ORDER_DATE_TAG}> element.")
    if vendor_id is None:
        raise OrderRecordParseError(f"Record {order_number!r}: missing <{VENDOR_ID_TAG}> element.")

    return OrderRecord(order_number=order_number, order_date=order_date, vendor_id=vendor_id)


def loads(text: str | bytes) -> list[OrderRecord]:
    """
    Parse an XML document and return every record in document order.

    Any failure aborts the whole parse; there is no partial result.
    """
    try:
        root = ET.fromstring(text)
    except ET.ParseError as e:
        raise OrderRecordParseError(f"Malformed XML: {e}") from e

    records: list[OrderRecord] = []
    seen: set[str] = set()
    for element in root.iter(RECORD_TAG):
        record = record_from_element(element)
        if record.order_number in seen:
            raise OrderRecordParseError(
                f"Duplicate order number {record.order_number!r} in record list.",
                details={"order_number": record.order_number},
            )
        seen.add(record.order_number)
        records.append(record)

    if root.tag != ROOT_TAG:
        logger.debug("Unexpected root tag <%s>, expected <%s>", root.tag, ROOT_TAG)
    return records


def record_to_element(record: OrderRecord) -> ET.Element:
    element = ET.Element(RECORD_TAG, {ORDER_NUMBER_ATTR: record.order_number})
    ET.SubElement(element, ORDER_DATE_TAG).text = format_order_date(record.order_date)
    ET.SubElement(element, VENDOR_ID_TAG).text = str(record.vendor_id)
    return element


def build_document(records: Iterable[OrderRecord]) -> ET.ElementTree:
    root = ET.Element(ROOT_TAG)
    for record in records:
        root.append(record_to_element(record))
    return ET.ElementTree(root)


def dumps(records: Iterable[OrderRecord]) -> str:
    """
    Serialize records into a complete XML document (with declaration).
    """
    tree = build_document(records)
    ET.indent(tree, space="  ")
    body = ET.tostring(tree.getroot(), encoding="unicode")
    return '<?xml version="1.0" encoding="UTF-8"?>\n' + body + "\n"
