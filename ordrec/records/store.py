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
XML file backed order record store.

The whole record list is read from the backing file on first use and kept in
memory. Every mutating call rewrites the entire file:

  order_records.xml
  └── <recordList>
      ├── <record order-number="A100"> ... </record>
      └── ...

Each public operation holds the store lock for its whole duration, so the
lazy load and the read-modify-write cycle are never interleaved between
threads of one process.
"""

import logging
import os
import tempfile
import threading
from collections.abc import Sequence
from pathlib import Path

from ordrec.records import xmlcodec
from ordrec.records.errors import (
    DuplicateOrderRecordError,
    OrderRecordIOError,
    OrderRecordMismatchError,
    OrderRecordNotFoundError,
)
from ordrec.records.types import OrderRecord

logger = logging.getLogger(__name__)

DEFAULT_FILE_NAME = "order_records.xml"


class XmlOrderRecordDAO:
    """
    OrderRecordDAO implementation backed by a single XML file.

    The in-memory list mirrors the file at all times outside a call. A
    mutation is only applied in memory once the file has been written, so a
    failed save leaves both sides as they were.
    """

    def __init__(
        self,
        path: str | os.PathLike[str] = DEFAULT_FILE_NAME,
        *,
        atomic_write: bool = True,
        create_if_missing: bool = False,
    ) -> None:
        self._path = Path(path)
        self._atomic_write = atomic_write
        self._create_if_missing = create_if_missing
        self._records: list[OrderRecord] | None = None
        self._lock = threading.RLock()

    @property
    def path(self) -> Path:
        return self._path

    @property
    def is_loaded(self) -> bool:
        return self._records is not None

    def reload(self) -> None:
        """Forget the in-memory state; the next call reads the file again."""
        with self._lock:
            self._records = None

    def reset(self) -> None:
        """Replace the backing file with an empty record list."""
        with self._lock:
            self._commit([])

    # Loading / saving

    def _verify_data(self) -> list[OrderRecord]:
        if self._records is None:
            self._records = self._read_from_file()
        return self._records

    def _read_from_file(self) -> list[OrderRecord]:
        try:
            raw = self._path.read_bytes()
        except FileNotFoundError as e:
            if self._create_if_missing:
                logger.debug("Backing file %s does not exist, starting empty", self._path)
                return []
            raise OrderRecordIOError(
                f"Order record file does not exist: {self._path}",
                details={"path": str(self._path)},
            ) from e
        except OSError as e:
            raise OrderRecordIOError(
                f"Cannot read order record file {self._path}: {e}",
                details={"path": str(self._path)},
            ) from e

        records = xmlcodec.loads(raw)
        logger.debug("Loaded %d order record(s) from %s", len(records), self._path)
        return records

    def _save_to_file(self, records: Sequence[OrderRecord]) -> None:
        content = xmlcodec.dumps(records).encode("utf-8")
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            if self._atomic_write:
                self._replace_file(content)
            else:
                self._path.write_bytes(content)
        except OSError as e:
            raise OrderRecordIOError(
                f"Cannot write order record file {self._path}: {e}",
                details={"path": str(self._path)},
            ) from e
        logger.debug("Saved %d order record(s) to %s", len(records), self._path)

    def _replace_file(self, content: bytes) -> None:
        tmp = tempfile.NamedTemporaryFile(
            dir=self._path.parent,
            prefix=f".{self._path.name}.",
            suffix=".tmp",
            delete=False,
        )
        try:
            with tmp:
                tmp.write(content)
                tmp.flush()
                os.fsync(tmp.fileno())
            os.replace(tmp.name, self._path)
        except OSError:
            Path(tmp.name).unlink(missing_ok=True)
            raise

    def _commit(self, records: list[OrderRecord]) -> None:
        self._save_to_file(records)
        self._records = records

    @staticmethod
    def _index_of(records: Sequence[OrderRecord], order_number: str) -> int | None:
        for i, record in enumerate(records):
            if record.order_number == order_number:
                return i
        return None

    # DAO operations

    def create_order_record(self, record: OrderRecord) -> None:
        with self._lock:
            records = self._verify_data()
            if self._index_of(records, record.order_number) is not None:
                raise DuplicateOrderRecordError(record.order_number)
            self._commit([*records, record.copy()])

    def get_order_record(self, order_number: str) -> OrderRecord | None:
        with self._lock:
            records = self._verify_data()
            idx = self._index_of(records, order_number)
            return None if idx is None else records[idx].copy()

    def get_all_order_records(self) -> list[OrderRecord]:
        with self._lock:
            return [record.copy() for record in self._verify_data()]

    def update_order_record(self, original: OrderRecord, updated: OrderRecord) -> None:
        with self._lock:
            records = self._verify_data()
            idx = self._index_of(records, original.order_number)
            if idx is None:
                raise OrderRecordNotFoundError(original.order_number)

            existing = records[idx]
            if existing.order_date != original.order_date:
                raise OrderRecordMismatchError(
                    "order_date",
                    expected=original.order_date.isoformat(),
                    actual=existing.order_date.isoformat(),
                )
            if existing.vendor_id != original.vendor_id:
                raise OrderRecordMismatchError(
                    "vendor_id",
                    expected=original.vendor_id,
                    actual=existing.vendor_id,
                )

            new_records = list(records)
            new_records[idx] = existing.with_changes(order_date=updated.order_date, vendor_id=updated.vendor_id)
            self._commit(new_records)

    def delete_order_record(self, record: OrderRecord) -> None:
        with self._lock:
            records = self._verify_data()
            idx = self._index_of(records, record.order_number)
            if idx is None:
                logger.debug("No order record %r to delete", record.order_number)
                new_records = list(records)
            else:
                new_records = records[:idx] + records[idx + 1 :]
            self._commit(new_records)
