"""Tests for the HTML report renderer and its formatting helpers."""

import pytest

from conftest import make_headline, make_quote
from morning_report.reporting.renderer import (
    DISCLAIMER,
    analyze_market_sentiment,
    format_publish_time,
    format_volume,
    get_top_mover,
    render_report,
    truncate,
)


@pytest.mark.parametrize("volume, expected", [
    (0, "0"),
    (500, "500"),
    (999, "999"),
    (1500, "1.5K"),
    (2_500_000, "2.5M"),
    (1_200_000_000, "1.2B"),
])
def test_format_volume(volume, expected):
    assert format_volume(volume) == expected


def _quotes_with_changes(*changes):
    return [make_quote(f"S{i}", 100.0, 100.0 + c) for i, c in enumerate(changes)]


@pytest.mark.parametrize("changes, expected", [
    ((1, 1, 1, -1), "Positive"),
    ((1, -1, -1, -1), "Negative"),
    ((1, 1, -1, -1), "Mixed"),
    ((), "Neutral"),
    ((0, 0, 1, 1), "Mixed"),
    ((0, 0, 0, 1), "Negative"),
])
def test_market_sentiment(changes, expected):
    assert analyze_market_sentiment(_quotes_with_changes(*changes)) == expected


def test_top_mover_uses_absolute_percent_change():
    quotes = [make_quote("AAPL", 100.0, 101.0), make_quote("TSLA", 100.0, 95.5), make_quote("MSFT", 100.0, 104.0)]
    assert get_top_mover(quotes) == "TSLA (-4.50%)"


def test_top_mover_ties_go_to_first():
    quotes = [make_quote("AAPL", 100.0, 102.0), make_quote("MSFT", 100.0, 98.0)]
    assert get_top_mover(quotes) == "AAPL (+2.00%)"


def test_top_mover_empty():
    assert get_top_mover([]) == "N/A"


def test_truncate_long_name():
    name = "A" * 45
    assert truncate(name, 40) == "A" * 40 + "..."


def test_truncate_exact_length_unchanged():
    name = "B" * 40
    assert truncate(name, 40) == name


def test_truncate_counts_characters_not_bytes():
    name = "é" * 41
    assert truncate(name, 40) == "é" * 40 + "..."


@pytest.mark.parametrize("raw, expected", [
    ("2026-10-19T06:30:00Z", "06:30"),
    ("2026-10-19T23:05:59", "23:05"),
    ("2026-10-19T14:45:00+00:00", "14:45"),
    ("yesterday", "yesterday"),
    ("2026-10-19", "2026-10-19"),
    ("2026-10-19T25:00:00", "2026-10-19T25:00:00"),
    ("", ""),
])
def test_format_publish_time(raw, expected):
    assert format_publish_time(raw) == expected


def test_render_sections_in_order(generated_at):
    html = render_report([make_quote()], [make_headline()], generated_at)

    order = [
        html.index('<div class="header">'),
        html.index('<div class="summary-box">'),
        html.index('<table class="data-table">'),
        html.index('<div class="news-item">'),
        html.index('<div class="footer">'),
    ]
    assert order == sorted(order)
    assert html.startswith("<!DOCTYPE html>")
    assert "Generated: 2026-10-19 06:30:15 EST" in html
    assert "<title>Morning Market Report - 2026-10-19</title>" in html
    assert DISCLAIMER in html
    assert "9:30 AM EST" in html


def test_render_is_deterministic(generated_at):
    quotes = [make_quote("AAPL", 100.0, 102.0), make_quote("^VIX", 20.0, 18.0)]
    headlines = [make_headline("Fed holds", score=6), make_headline("Quiet day", score=1)]

    assert render_report(quotes, headlines, generated_at) == render_report(quotes, headlines, generated_at)


def test_render_quote_row_formatting(generated_at):
    quotes = [
        make_quote("AAPL", 100.0, 101.5, volume=2_500_000),
        make_quote("TSLA", 200.0, 197.0, volume=1500),
    ]
    html = render_report(quotes, [], generated_at)

    assert "<td>$100.00</td>" in html
    assert "<td>$101.50</td>" in html
    assert '<td class="positive">+$1.50</td>' in html
    assert '<td class="positive">+1.50%</td>' in html
    assert '<td class="negative">$-3.00</td>' in html
    assert '<td class="negative">-1.50%</td>' in html
    assert "<td>2.5M</td>" in html
    assert "<td>1.5K</td>" in html


def test_zero_change_is_styled_positive(generated_at):
    html = render_report([make_quote("PG", 150.0, 150.0)], [], generated_at)
    assert '<td class="positive">+$0.00</td>' in html
    assert "negative" not in html.split("<tbody>")[1]


def test_render_truncates_long_names(generated_at):
    long_name = "X" * 45
    html = render_report([make_quote("JNJ", name=long_name)], [], generated_at)
    assert f"<td>{'X' * 40}...</td>" in html
    assert long_name not in html


def test_summary_values(generated_at):
    quotes = [make_quote("AAPL", 100.0, 103.0), make_quote("MSFT", 100.0, 101.0), make_quote("JPM", 100.0, 99.0)]
    headlines = [make_headline(f"h{i}") for i in range(4)]

    html = render_report(quotes, headlines, generated_at)

    assert "<strong>Market Sentiment:</strong> Positive" in html
    assert "<strong>Top Mover:</strong> AAPL (+3.00%)" in html
    assert "<strong>Headlines Tracked:</strong> 4 relevant stories" in html


def test_empty_inputs_render(generated_at):
    html = render_report([], [], generated_at)

    assert "<strong>Market Sentiment:</strong> Neutral" in html
    assert "<strong>Top Mover:</strong> N/A" in html
    assert "0 relevant stories" in html
    assert '<div class="news-item">' not in html


def test_headline_markers_and_meta(generated_at):
    headlines = [
        make_headline("Hot story", score=6, published_at="2026-10-19T04:15:00Z"),
        make_headline("Mild story", score=5, published_at="not a date"),
    ]
    html = render_report([], headlines, generated_at)

    assert "🔥 Hot story" in html
    assert "📊 Mild story" in html
    assert "<strong>Published:</strong> 04:15" in html
    assert "<strong>Published:</strong> not a date" in html
    assert '<a href="https://example.com/story" target="_blank">Read More</a>' in html
    assert html.index("Hot story") < html.index("Mild story")


def test_upstream_text_is_escaped(generated_at):
    headline = make_headline("S&P <b>record</b>", description="a < b")
    html = render_report([], [headline], generated_at)

    assert "S&amp;P &lt;b&gt;record&lt;/b&gt;" in html
    assert "a &lt; b" in html
