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

from collections.abc import Mapping
from enum import StrEnum
from typing import Any


class ErrorKind(StrEnum):
    """
    Category of an order record data failure.

    Kinds are string-based so they can be shown on the CLI and in JSON
    output without translation.
    """

    NOT_FOUND = "not_found"
    DUPLICATE = "duplicate"
    MISMATCH = "mismatch"
    IO = "io"
    PARSE = "parse"
    CONFIG = "config"


class OrderRecordDataError(Exception):
    """
    Base class for all order record data errors.

    Wraps both domain-rule violations (duplicate order number, failed
    optimistic update) and underlying I/O or parsing failures. The original
    exception, if any, is available as ``__cause__``.
    """

    kind: ErrorKind
    message: str
    field: str | None = None
    details: Mapping[str, Any] | None = None

    def __init__(
        self,
        message: str,
        kind: ErrorKind = ErrorKind.IO,
        field: str | None = None,
        details: Mapping[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.kind = kind
        self.message = message
        self.field = field
        self.details = details

    def __str__(self) -> str:
        return self.message


class DuplicateOrderRecordError(OrderRecordDataError):
    """Raised when creating a record whose order number is already stored."""

    def __init__(self, order_number: str) -> None:
        super().__init__(
            f"An order record with order number {order_number!r} already exists.",
            kind=ErrorKind.DUPLICATE,
            details={"order_number": order_number},
        )


class OrderRecordNotFoundError(OrderRecordDataError):
    """Raised when an update targets a record that is not stored."""

    def __init__(self, order_number: str) -> None:
        super().__init__(
            "The original record does not exist.",
            kind=ErrorKind.NOT_FOUND,
            details={"order_number": order_number},
        )


class OrderRecordMismatchError(OrderRecordDataError):
    """Raised when the caller's view of a record differs from the stored one."""

    def __init__(self, field: str, *, expected: Any, actual: Any) -> None:
        label = field.replace("_", " ").replace("vendor id", "vendor ID")
        super().__init__(
            f"The original record {label} does not match the data store.",
            kind=ErrorKind.MISMATCH,
            field=field,
            details={"expected": expected, "actual": actual},
        )


class OrderRecordIOError(OrderRecordDataError):
    """Raised when the backing file cannot be read or written."""

    def __init__(self, message: str, details: Mapping[str, Any] | None = None) -> None:
        super().__init__(message, kind=ErrorKind.IO, details=details)


class OrderRecordParseError(OrderRecordDataError):
    """Raised when the backing file content is not a valid record list."""

    def __init__(self, message: str, details: Mapping[str, Any] | None = None) -> None:
        super().__init__(message, kind=ErrorKind.PARSE, details=details)


class OrderRecordConfigError(OrderRecordDataError):
    """Raised for invalid store configuration."""

    def __init__(self, message: str, details: Mapping[str, Any] | None = None) -> None:
        super().__init__(message, kind=ErrorKind.CONFIG, details=details)
