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

EXIT_OK = 0
EXIT_REJECTED = 1  # Record not found, duplicate, or optimistic update mismatch
EXIT_DATA_ERROR = 2  # I/O, parse, or configuration failure


def exit_code_for_error(kind: str) -> int:
    """
    Map an ErrorKind value to a process exit code.
    """
    if kind in ("not_found", "duplicate", "mismatch"):
        return EXIT_REJECTED
    return EXIT_DATA_ERROR
