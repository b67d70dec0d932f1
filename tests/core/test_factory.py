from datetime import date
from pathlib import Path

import pytest
from ordrec.core.config import StoreConfig
from ordrec.core.factory import OrderRecordDAOFactory
from ordrec.records.errors import OrderRecordConfigError
from ordrec.records.store import XmlOrderRecordDAO
from ordrec.records.types import OrderRecord


def test_factory_returns_xml_dao_for_config(tmp_path: Path):
    cfg = StoreConfig(data_file=tmp_path / "orders.xml", atomic_write=False, create_if_missing=True)
    dao = OrderRecordDAOFactory(cfg).get_dao()

    assert isinstance(dao, XmlOrderRecordDAO)
    assert dao.path == tmp_path / "orders.xml"

    dao.create_order_record(OrderRecord("A100", date(2024, 1, 15), 42))
    assert (tmp_path / "orders.xml").exists()


def test_factory_defaults():
    factory = OrderRecordDAOFactory()
    assert factory.config == StoreConfig()
    assert factory.get_dao().path == Path("order_records.xml")


def test_factories_are_independent(tmp_path: Path):
    a = OrderRecordDAOFactory(StoreConfig(data_file=tmp_path / "a.xml"))
    b = OrderRecordDAOFactory(StoreConfig(data_file=tmp_path / "b.xml"))
    assert a.get_dao().path != b.get_dao().path
    assert a.get_dao() is not a.get_dao()


def test_unknown_backend():
    with pytest.raises(OrderRecordConfigError, match="Unsupported backend"):
        OrderRecordDAOFactory(StoreConfig(backend="mysql")).get_dao()
