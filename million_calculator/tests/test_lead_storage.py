from __future__ import annotations

from unittest import mock

import pytest
import requests

from million_calculator.config import Settings
from million_calculator.core.calculator import evaluate
from million_calculator.schemas.calculation import CalculationRequest, RiskProfile
from million_calculator.storage import (
    InMemoryLeadStore,
    LeadRecord,
    SqliteLeadStore,
    StorageError,
    SupabaseLeadStore,
    build_lead_store,
)


def make_record(**overrides) -> LeadRecord:
    payload = {
        "name": "Carla",
        "age": 41,
        "currentInvestment": "80.000",
        "monthlyInvestment": "3.500",
        "profile": "aggressive",
    }
    payload.update(overrides)
    request = CalculationRequest.model_validate(payload)
    result = evaluate(request.name, request.starting_capital, request.monthly_contribution, request.profile)
    return LeadRecord.from_result(request, result)


def test_record_from_result():
    record = make_record()

    assert record.id
    assert record.created_at.tzinfo is not None
    assert record.profile == RiskProfile.AGGRESSIVE
    assert record.current_investment == 80_000
    assert record.years_optimized < record.years_real


def test_unreachable_years_are_stored_as_null():
    record = make_record(currentInvestment="0", monthlyInvestment="0")

    assert record.years_real is None
    assert record.years_optimized is None


def test_records_get_distinct_ids():
    assert make_record().id != make_record().id


def test_memory_store_appends():
    store = InMemoryLeadStore()
    record = make_record()

    assert store.save(record) == record.id
    assert store.records == [record]


def test_sqlite_store_roundtrip(tmp_path):
    store = SqliteLeadStore(tmp_path / "leads.db")
    assert store.fetch_latest() is None

    store.save(make_record(name="Primeira"))
    record = make_record(name="Segunda", currentInvestment="0", monthlyInvestment="0")
    store.save(record)

    latest = store.fetch_latest()
    assert latest["id"] == record.id
    assert latest["name"] == "Segunda"
    assert latest["profile"] == "aggressive"
    assert latest["scenario"] == "iniciante"
    assert latest["years_real"] is None


def test_sqlite_duplicate_id_raises_storage_error(tmp_path):
    store = SqliteLeadStore(tmp_path / "leads.db")
    record = make_record()
    store.save(record)

    with pytest.raises(StorageError):
        store.save(record)


def _response(status_code: int) -> requests.Response:
    response = requests.Response()
    response.status_code = status_code
    response._content = b'{"message": "nope"}'
    return response


def test_supabase_store_posts_record():
    store = SupabaseLeadStore("https://example.supabase.co/", "anon-key")
    record = make_record()

    with mock.patch("million_calculator.storage.supabase_store.requests.post", return_value=_response(201)) as post:
        assert store.save(record) == record.id

    args, kwargs = post.call_args
    assert args[0] == "https://example.supabase.co/rest/v1/calculations"
    assert kwargs["headers"]["apikey"] == "anon-key"
    assert kwargs["headers"]["Authorization"] == "Bearer anon-key"
    assert kwargs["json"]["id"] == record.id
    assert kwargs["json"]["scenario"] == "investidor"
    assert kwargs["timeout"] == 10.0


def test_supabase_http_error_raises_storage_error():
    store = SupabaseLeadStore("https://example.supabase.co", "anon-key")

    with mock.patch("million_calculator.storage.supabase_store.requests.post", return_value=_response(401)):
        with pytest.raises(StorageError):
            store.save(make_record())


def test_supabase_network_error_raises_storage_error():
    store = SupabaseLeadStore("https://example.supabase.co", "anon-key")

    with mock.patch(
        "million_calculator.storage.supabase_store.requests.post",
        side_effect=requests.exceptions.ConnectionError("down"),
    ):
        with pytest.raises(StorageError):
            store.save(make_record())


def test_build_lead_store(tmp_path):
    assert build_lead_store(Settings(LEAD_STORE="none")) is None
    assert isinstance(build_lead_store(Settings(LEAD_STORE="memory")), InMemoryLeadStore)
    assert isinstance(
        build_lead_store(Settings(LEAD_STORE="sqlite", SQLITE_PATH=str(tmp_path / "x.db"))),
        SqliteLeadStore,
    )
    store = build_lead_store(
        Settings(LEAD_STORE="supabase", SUPABASE_URL="https://example.supabase.co", SUPABASE_ANON_KEY="k")
    )
    assert isinstance(store, SupabaseLeadStore)


def test_supabase_without_credentials_fails_fast():
    with pytest.raises(ValueError):
        build_lead_store(Settings(LEAD_STORE="supabase", SUPABASE_URL=None, SUPABASE_ANON_KEY=None))


def test_cors_origins_are_split():
    settings = Settings(CORS_ORIGINS="http://a.test, http://b.test,")
    assert settings.cors_origins == ["http://a.test", "http://b.test"]
