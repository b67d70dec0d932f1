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

from ordrec.records.dao import OrderRecordDAO
from ordrec.records.errors import (
    DuplicateOrderRecordError,
    ErrorKind,
    OrderRecordConfigError,
    OrderRecordDataError,
    OrderRecordIOError,
    OrderRecordMismatchError,
    OrderRecordNotFoundError,
    OrderRecordParseError,
)
from ordrec.records.store import XmlOrderRecordDAO
from ordrec.records.types import OrderRecord

__all__ = [
    "OrderRecord",
    "OrderRecordDAO",
    "XmlOrderRecordDAO",
    "ErrorKind",
    "OrderRecordDataError",
    "DuplicateOrderRecordError",
    "OrderRecordNotFoundError",
    "OrderRecordMismatchError",
    "OrderRecordIOError",
    "OrderRecordParseError",
    "OrderRecordConfigError",
]
