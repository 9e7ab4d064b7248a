"""Test configuration and shared fixtures."""

import json

import pytest

from dashboard_components.records import records_to_dataframe


@pytest.fixture
def scenario_payload():
    """Three weekly records spread over two years."""
    return [
        {"yil": 2023, "ay": 1, "ay_adi": "Ocak", "hafta": 1, "toplam_tutar": "100,00"},
        {"yil": 2023, "ay": 1, "ay_adi": "Ocak", "hafta": 2, "toplam_tutar": "50,00"},
        {"yil": 2024, "ay": 1, "ay_adi": "Ocak", "hafta": 1, "toplam_tutar": "200,00"},
    ]


@pytest.fixture
def sample_payload():
    """Unordered records with grouping separators and several months."""
    return [
        {"yil": 2024, "ay": 3, "ay_adi": "Mart", "hafta": 2, "toplam_tutar": "2,500.00"},
        {"yil": 2023, "ay": 2, "ay_adi": "Şubat", "hafta": 1, "toplam_tutar": "1,000.50"},
        {"yil": 2024, "ay": 1, "ay_adi": "Ocak", "hafta": 4, "toplam_tutar": "1,250.25"},
        {"yil": 2023, "ay": 1, "ay_adi": "Ocak", "hafta": 1, "toplam_tutar": "12,345.67"},
        {"yil": 2024, "ay": 3, "ay_adi": "Mart", "hafta": 1, "toplam_tutar": "750.75"},
        {"yil": 2024, "ay": 1, "ay_adi": "Ocak", "hafta": 2, "toplam_tutar": "1,000.00"},
        {"yil": 2022, "ay": 12, "ay_adi": "Aralık", "hafta": 3, "toplam_tutar": "9,999.99"},
    ]


@pytest.fixture
def scenario_records(scenario_payload):
    return records_to_dataframe(scenario_payload)


@pytest.fixture
def sample_records(sample_payload):
    return records_to_dataframe(sample_payload)


@pytest.fixture
def write_json(tmp_path):
    """Write a JSON document to a temporary file and return its path as a string."""

    def _write(document, name="satis_verileri.json"):
        path = tmp_path / name
        path.write_text(json.dumps(document, ensure_ascii=False), encoding="utf-8")
        return str(path)

    return _write
