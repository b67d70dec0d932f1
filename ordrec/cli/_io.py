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

import json
from collections.abc import Sequence
from dataclasses import replace
from datetime import date
from pathlib import Path

from ordrec.core.config import StoreConfig, load_config
from ordrec.records.types import OrderRecord, format_order_date, parse_order_date


def parse_cli_date(text: str) -> date:
    """
    Accept either MM/dd/yyyy or ISO yyyy-mm-dd.
    """
    try:
        return parse_order_date(text)
    except ValueError:
        pass
    try:
        return date.fromisoformat(text.strip())
    except ValueError as e:
        raise ValueError(f"Invalid date {text!r} (expected MM/dd/yyyy or yyyy-mm-dd)") from e


def resolve_config(config: str | None, data_file: str | None) -> StoreConfig:
    cfg = load_config(config)
    if data_file:
        return replace(cfg, data_file=Path(data_file))
    return cfg


def format_record_line(record: OrderRecord) -> str:
    return f"{record.order_number}\t{format_order_date(record.order_date)}\t{record.vendor_id}"


def render_records(records: Sequence[OrderRecord], fmt: str) -> str:
    if fmt == "json":
        return json.dumps([r.to_dict() for r in records], indent=2)
    return "\n".join(format_record_line(r) for r in records)
