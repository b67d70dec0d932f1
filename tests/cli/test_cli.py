"""Tests for the ordrec command line interface."""

import json
from datetime import date
from pathlib import Path

import pytest
from ordrec.cli.main import main
from ordrec.records import xmlcodec
from ordrec.records.types import OrderRecord


@pytest.fixture(autouse=True)
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    monkeypatch.chdir(tmp_path)


def seed(path: Path, *records: OrderRecord) -> Path:
    path.write_text(xmlcodec.dumps(records), encoding="utf-8")
    return path


class TestInit:
    def test_init_creates_empty_file(self, tmp_path: Path, capsys):
        exit_code = main(["--data-file", "orders.xml", "init"])

        assert exit_code == 0
        assert xmlcodec.loads((tmp_path / "orders.xml").read_bytes()) == []
        assert "Initialized" in capsys.readouterr().out

    def test_init_refuses_to_overwrite(self, tmp_path: Path, capsys):
        seed(tmp_path / "orders.xml", OrderRecord("A100", date(2024, 1, 15), 42))

        assert main(["--data-file", "orders.xml", "init"]) == 2
        assert "already exists" in capsys.readouterr().err
        assert len(xmlcodec.loads((tmp_path / "orders.xml").read_bytes())) == 1

        assert main(["--data-file", "orders.xml", "init", "--force"]) == 0
        assert xmlcodec.loads((tmp_path / "orders.xml").read_bytes()) == []

    def test_init_uses_configured_store(self, tmp_path: Path):
        (tmp_path / "ordrec.yaml").write_text("data_file: nested/orders.xml\n", encoding="utf-8")

        assert main(["init"]) == 0
        assert xmlcodec.loads((tmp_path / "nested" / "orders.xml").read_bytes()) == []
        assert sorted(p.name for p in (tmp_path / "nested").iterdir()) == ["orders.xml"]


class TestRecordCommands:
    def test_add_and_list(self, tmp_path: Path, capsys):
        seed(tmp_path / "order_records.xml")

        assert main(["add", "A100", "01/15/2024", "42"]) == 0
        assert main(["add", "B200", "2023-12-01", "7"]) == 0
        capsys.readouterr()

        assert main(["list"]) == 0
        out = capsys.readouterr().out.splitlines()
        assert out == ["A100\t01/15/2024\t42", "B200\t12/01/2023\t7"]

    def test_list_json(self, tmp_path: Path, capsys):
        seed(tmp_path / "order_records.xml", OrderRecord("A100", date(2024, 1, 15), 42))

        assert main(["list", "--format", "json"]) == 0
        data = json.loads(capsys.readouterr().out)
        assert data == [{"order_number": "A100", "order_date": "2024-01-15", "vendor_id": 42}]

    def test_get_found_and_missing(self, tmp_path: Path, capsys):
        seed(tmp_path / "order_records.xml", OrderRecord("A100", date(2024, 1, 15), 42))

        assert main(["get", "A100"]) == 0
        assert "A100\t01/15/2024\t42" in capsys.readouterr().out

        assert main(["get", "Z999"]) == 1
        assert "not found" in capsys.readouterr().out

    def test_add_duplicate(self, tmp_path: Path, capsys):
        seed(tmp_path / "order_records.xml", OrderRecord("A100", date(2024, 1, 15), 42))

        assert main(["add", "A100", "02/01/2024", "1"]) == 1
        assert "already exists" in capsys.readouterr().err

    def test_update_with_matching_original(self, tmp_path: Path):
        path = seed(tmp_path / "order_records.xml", OrderRecord("A100", date(2024, 1, 15), 42))

        exit_code = main(
            ["update", "A100", "--date", "01/15/2024", "--vendor", "42", "--new-date", "02/01/2024", "--new-vendor", "99"]
        )

        assert exit_code == 0
        assert xmlcodec.loads(path.read_bytes()) == [OrderRecord("A100", date(2024, 2, 1), 99)]

    def test_update_only_vendor(self, tmp_path: Path):
        path = seed(tmp_path / "order_records.xml", OrderRecord("A100", date(2024, 1, 15), 42))

        assert main(["update", "A100", "--date", "2024-01-15", "--vendor", "42", "--new-vendor", "5"]) == 0
        assert xmlcodec.loads(path.read_bytes()) == [OrderRecord("A100", date(2024, 1, 15), 5)]

    def test_update_mismatch(self, tmp_path: Path, capsys):
        seed(tmp_path / "order_records.xml", OrderRecord("A100", date(2024, 1, 15), 42))

        assert main(["update", "A100", "--date", "01/15/2024", "--vendor", "41", "--new-vendor", "5"]) == 1
        assert "vendor ID does not match" in capsys.readouterr().err

    def test_delete(self, tmp_path: Path, capsys):
        path = seed(
            tmp_path / "order_records.xml",
            OrderRecord("A100", date(2024, 1, 15), 42),
            OrderRecord("B200", date(2023, 12, 1), 7),
        )

        assert main(["delete", "A100"]) == 0
        assert main(["delete", "A100"]) == 0
        assert "nothing deleted" in capsys.readouterr().out
        assert [r.order_number for r in xmlcodec.loads(path.read_bytes())] == ["B200"]

    def test_delete_absent_record_rewrites_file(self, tmp_path: Path):
        path = tmp_path / "order_records.xml"
        path.write_text(
            '<recordList><record order-number="A100"><orderDate>01/15/2024</orderDate>'
            "<vendorId>42</vendorId></record></recordList>",
            encoding="utf-8",
        )

        assert main(["delete", "Z999"]) == 0
        assert path.read_text(encoding="utf-8") == xmlcodec.dumps([OrderRecord("A100", date(2024, 1, 15), 42)])


class TestErrors:
    def test_missing_data_file(self, capsys):
        assert main(["list"]) == 2
        assert "does not exist" in capsys.readouterr().err

    def test_config_file_is_used(self, tmp_path: Path, capsys):
        (tmp_path / "ordrec.yaml").write_text("data_file: store/orders.xml\ncreate_if_missing: true\n", encoding="utf-8")

        assert main(["add", "A100", "01/15/2024", "42"]) == 0
        assert (tmp_path / "store" / "orders.xml").exists()

    def test_bad_date_argument(self, tmp_path: Path, capsys):
        seed(tmp_path / "order_records.xml")

        assert main(["add", "A100", "15.01.2024", "42"]) == 2
        assert "Invalid date" in capsys.readouterr().err

    def test_version_flag(self, capsys):
        with pytest.raises(SystemExit) as exc:
            main(["--version"])
        assert exc.value.code == 0
        assert capsys.readouterr().out.startswith("ordrec ")
