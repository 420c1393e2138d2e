"""Shared fixtures and builders for the morning report test suite."""

from datetime import datetime
from unittest.mock import MagicMock

import pytest

from morning_report.models.datatypes import Headline, Quote


def make_quote(symbol="AAPL", previous_close=100.0, current_price=101.0, volume=1_000, name=None):
    """Build a Quote with derived change fields."""
    return Quote.from_prices(
        symbol=symbol,
        name=name if name is not None else f"{symbol} Inc.",
        previous_close=previous_close,
        current_price=current_price,
        volume=volume,
    )


def make_headline(title="Markets open", score=0, **overrides):
    """Build a Headline with sensible defaults."""
    fields = {
        "title": title,
        "description": "Stocks moved overnight.",
        "source": "Reuters",
        "published_at": "2026-10-19T06:30:00Z",
        "url": "https://example.com/story",
        "relevance_score": score,
    }
    fields.update(overrides)
    return Headline(**fields)


def fake_response(status_code=200, payload=None, json_error=None, text=""):
    """Build a stand-in for ``requests.Response``.

    Args:
        status_code: HTTP status to report.
        payload: Value returned by ``.json()``.
        json_error: Exception raised by ``.json()`` instead, if given.
        text: Body text used in error logs.
    """
    resp = MagicMock()
    resp.status_code = status_code
    resp.text = text
    if json_error is not None:
        resp.json.side_effect = json_error
    else:
        resp.json.return_value = payload
    return resp


def chart_payload(price=101.0, previous_close=100.0, **meta_extra):
    """Build a Yahoo chart response body with the given meta fields."""
    meta = {"regularMarketPrice": price, "previousClose": previous_close}
    meta.update(meta_extra)
    return {"chart": {"result": [{"meta": meta}], "error": None}}


@pytest.fixture
def generated_at():
    """A fixed generation timestamp.

    Returns:
        datetime for 2026-10-19 06:30:15.
    """
    return datetime(2026, 10, 19, 6, 30, 15)


@pytest.fixture
def session():
    """A mocked ``requests.Session`` with a real ``headers`` dict."""
    mock_session = MagicMock()
    mock_session.headers = {}
    return mock_session
