"""Tests for loading the sales JSON document."""

import logging

import pytest
import requests

from dashboard_components import loader
from dashboard_components.loader import (
    PayloadShapeError,
    TransportError,
    fetch_sales_payload,
    is_remote_source,
    load_sales_records,
)


class FakeResponse:
    def __init__(self, payload=None, status_code=200, invalid_json=False):
        self._payload = payload
        self.status_code = status_code
        self._invalid_json = invalid_json

    @property
    def ok(self):
        return 200 <= self.status_code < 400

    def json(self):
        if self._invalid_json:
            raise ValueError("Expecting value")
        return self._payload


def test_load_sales_records_from_file(write_json, sample_payload):
    result = load_sales_records(write_json(sample_payload))

    assert result.ok
    assert len(result.records) == len(sample_payload)
    assert result.years == [2022, 2023, 2024]


def test_missing_file_yields_empty_result(tmp_path, caplog):
    source = str(tmp_path / "missing.json")
    with caplog.at_level(logging.ERROR):
        result = load_sales_records(source)

    assert not result.ok
    assert result.records.empty
    assert result.years == []
    assert "missing.json" in caplog.text


@pytest.mark.parametrize("document", [[], {"yil": 2024}, "text", 42])
def test_payload_that_is_not_a_non_empty_list(write_json, document):
    with pytest.raises(PayloadShapeError):
        fetch_sales_payload(write_json(document))

    result = load_sales_records(write_json(document))
    assert result.records.empty
    assert result.error == "Loaded data is not a valid array or is empty"


def test_invalid_json_file(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("[{", encoding="utf-8")

    with pytest.raises(PayloadShapeError):
        fetch_sales_payload(str(path))
    assert load_sales_records(str(path)).records.empty


def test_list_with_non_object_entries(write_json):
    with pytest.raises(PayloadShapeError):
        fetch_sales_payload(write_json([1, 2, 3]))


def test_record_missing_field_is_reported(write_json, caplog):
    document = [{"yil": 2024, "ay": 1, "hafta": 1, "toplam_tutar": "1,000.00"}]
    with caplog.at_level(logging.ERROR):
        result = load_sales_records(write_json(document))

    assert result.records.empty
    assert "ay_adi" in result.error
    assert "Error while loading sales data" in caplog.text


def test_record_with_invalid_year(write_json):
    document = [{"yil": "yirmi", "ay": 1, "ay_adi": "Ocak", "hafta": 1, "toplam_tutar": "1"}]
    result = load_sales_records(write_json(document))
    assert result.records.empty
    assert result.error is not None


def test_unparseable_amount_does_not_fail_load(write_json):
    document = [{"yil": 2024, "ay": 1, "ay_adi": "Ocak", "hafta": 1, "toplam_tutar": "?"}]
    result = load_sales_records(write_json(document))

    assert result.ok
    assert result.records.loc[0, "amount"] == 0.0


def test_is_remote_source():
    assert is_remote_source("https://example.com/satis_verileri.json")
    assert is_remote_source("HTTP://example.com/data.json")
    assert not is_remote_source("data/satis_verileri.json")


def test_remote_source(monkeypatch, scenario_payload):
    calls = []

    def fake_get(url, timeout):
        calls.append((url, timeout))
        return FakeResponse(scenario_payload)

    monkeypatch.setattr(loader.requests, "get", fake_get)
    result = load_sales_records("https://example.com/satis_verileri.json", timeout=3.0)

    assert calls == [("https://example.com/satis_verileri.json", 3.0)]
    assert result.ok
    assert result.years == [2023, 2024]


def test_remote_non_success_status(monkeypatch):
    monkeypatch.setattr(loader.requests, "get", lambda url, timeout: FakeResponse([], status_code=404))

    with pytest.raises(TransportError, match="404"):
        fetch_sales_payload("https://example.com/satis_verileri.json")
    assert load_sales_records("https://example.com/satis_verileri.json").records.empty


def test_remote_connection_error(monkeypatch):
    def fake_get(url, timeout):
        raise requests.ConnectionError("connection refused")

    monkeypatch.setattr(loader.requests, "get", fake_get)

    with pytest.raises(TransportError):
        fetch_sales_payload("https://example.com/satis_verileri.json")
    result = load_sales_records("https://example.com/satis_verileri.json")
    assert not result.ok


def test_remote_invalid_json(monkeypatch):
    monkeypatch.setattr(loader.requests, "get", lambda url, timeout: FakeResponse(invalid_json=True))

    with pytest.raises(PayloadShapeError):
        fetch_sales_payload("https://example.com/satis_verileri.json")
