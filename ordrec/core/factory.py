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

from ordrec.core.config import StoreConfig
from ordrec.records.dao import OrderRecordDAO
from ordrec.records.errors import OrderRecordConfigError
from ordrec.records.store import XmlOrderRecordDAO


class OrderRecordDAOFactory:
    """
    Hands out the OrderRecordDAO implementation selected by a StoreConfig.

    Only the "xml" backend exists. The factory is an ordinary object: callers
    construct it with their config and pass the DAO it returns to whatever
    needs it.
    """

    def __init__(self, config: StoreConfig | None = None) -> None:
        self._config = config or StoreConfig()

    @property
    def config(self) -> StoreConfig:
        return self._config

    def get_dao(self) -> OrderRecordDAO:
        cfg = self._config
        if cfg.backend == "xml":
            return XmlOrderRecordDAO(
                cfg.data_file,
                atomic_write=cfg.atomic_write,
                create_if_missing=cfg.create_if_missing,
            )
        raise OrderRecordConfigError(f"Unsupported backend: {cfg.backend!r}", details={"supported": ["xml"]})
