from __future__ import annotations

import pytest
from flask import Flask
from flask.testing import FlaskClient

from million_calculator.app import create_app
from million_calculator.config import Settings
from million_calculator.storage import InMemoryLeadStore


@pytest.fixture()
def lead_store() -> InMemoryLeadStore:
    return InMemoryLeadStore()


@pytest.fixture()
def flask_app(lead_store: InMemoryLeadStore) -> Flask:
    return create_app(Settings(LEAD_STORE="none", LOG_LEVEL="WARNING"), lead_store=lead_store)


@pytest.fixture()
def client(flask_app: Flask) -> FlaskClient:
    with flask_app.test_client() as test_client:
        yield test_client


@pytest.fixture()
def form_payload():
    def build(**overrides) -> dict:
        payload = {
            "name": "Marina",
            "age": 32,
            "currentInvestment": "10.000",
            "monthlyInvestment": "2.000",
            "profile": "aggressive",
        }
        payload.update(overrides)
        return payload

    return build
