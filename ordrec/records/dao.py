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

from typing import Protocol

from ordrec.records.types import OrderRecord


class OrderRecordDAO(Protocol):
    """
    Data access contract for order records.

    Every operation may raise OrderRecordDataError (or a subclass) wrapping
    the underlying I/O or parsing failure. Records handed out are
    independent of the store's internal state.
    """

    def create_order_record(self, record: OrderRecord) -> None:
        """
        Add a new record.

        Raises DuplicateOrderRecordError if the order number is already stored.
        """
        raise NotImplementedError()

    def get_order_record(self, order_number: str) -> OrderRecord | None:
        """
        Return the record with the given order number, or None if there is none.
        """
        raise NotImplementedError()

    def get_all_order_records(self) -> list[OrderRecord]:
        """
        Return all records in store order.
        """
        raise NotImplementedError()

    def update_order_record(self, original: OrderRecord, updated: OrderRecord) -> None:
        """
        Replace the order date and vendor id of a stored record.

        ``original`` is the caller's view of the current record and must match
        the stored one on every field. The order number cannot be changed.
        """
        raise NotImplementedError()

    def delete_order_record(self, record: OrderRecord) -> None:
        """
        Remove the record with the same order number. Absent records are ignored.
        """
        raise NotImplementedError()
