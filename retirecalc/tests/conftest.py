from __future__ import annotations

import pytest
from flask.testing import FlaskClient

from retirecalc.app import create_app
from retirecalc.core.config import Settings
from retirecalc.presentation.currency import DEFAULT_CURRENCY_SYMBOLS


@pytest.fixture()
def settings() -> Settings:
    return Settings(
        env="test",
        log_level="WARNING",
        default_currency="USD",
        currency_symbols=dict(DEFAULT_CURRENCY_SYMBOLS),
        cors_origins=["http://localhost:5173"],
    )


@pytest.fixture()
def client(settings: Settings) -> FlaskClient:
    flask_app = create_app(settings)
    flask_app.config["TESTING"] = True
    with flask_app.test_client() as test_client:
        yield test_client


@pytest.fixture()
def usd_params() -> dict:
    return {
        "currentAge": 25,
        "retirementAge": 65,
        "monthlyContribution": 500,
        "initialBalance": 1000,
        "goalAmount": 500000,
        "annualRate": 0.07,
        "currencyLabel": "USD",
        "rateVariationBand": 0.01,
        "compoundingFrequency": "daily",
    }


@pytest.fixture()
def gbp_params() -> dict:
    return {
        "currentAge": 20,
        "retirementAge": 60,
        "monthlyContribution": 50,
        "initialBalance": 100,
        "goalAmount": 50000,
        "annualRate": 0.03,
        "currencyLabel": "GBP",
        "rateVariationBand": 0,
        "compoundingFrequency": "monthly",
    }
