"""HTML rendering for the morning market report.

Layout, top to bottom:
  1. Header: title and generation timestamp
  2. Summary: sentiment, top mover, headline count, market open time
  3. Table: one row per quote, classed by sign of change
  4. Headlines: one block per ranked headline
  5. Footer: attribution and disclaimer

``render_report`` is a pure function of its arguments: the same quotes,
headlines and timestamp always produce the same string. All styling is
inline so the document can be emailed as-is.
"""

from datetime import datetime
from html import escape
from typing import List, Sequence

from morning_report.models.datatypes import Headline, Quote

MARKET_OPEN = "9:30 AM EST"
TIMEZONE_LABEL = "EST"
NAME_MAX_LENGTH = 40
HIGH_RELEVANCE_THRESHOLD = 5

ATTRIBUTION = "Generated automatically by GitHub Actions | Data from Yahoo Finance &amp; NewsAPI"
DISCLAIMER = (
    "Disclaimer: This report is for informational purposes only "
    "and should not be considered investment advice."
)

_STYLE = """\
        body { font-family: Arial, sans-serif; margin: 20px; line-height: 1.6; }
        .header { background-color: #1f4e79; color: white; padding: 20px; text-align: center; border-radius: 8px; }
        .section { margin: 20px 0; }
        .data-table { border-collapse: collapse; width: 100%; margin: 10px 0; }
        .data-table th, .data-table td { border: 1px solid #ddd; padding: 12px; text-align: left; }
        .data-table th { background-color: #f2f2f2; font-weight: bold; }
        .positive { color: #28a745; font-weight: bold; }
        .negative { color: #dc3545; font-weight: bold; }
        .news-item { border-left: 4px solid #1f4e79; padding: 15px; margin: 15px 0; background-color: #f8f9fa; border-radius: 4px; }
        .news-title { font-size: 1.1em; font-weight: bold; margin-bottom: 8px; }
        .news-meta { color: #666; font-size: 0.9em; }
        .footer { color: #666; font-size: 0.9em; margin-top: 30px; text-align: center; }
        .summary-box { background-color: #e9ecef; padding: 15px; border-radius: 8px; margin: 15px 0; }
"""

_TABLE_COLUMNS = (
    "Symbol", "Name", "Previous Close", "Current Price",
    "Change ($)", "Change (%)", "Volume",
)


def render_report(
    quotes: Sequence[Quote],
    headlines: Sequence[Headline],
    generated_at: datetime,
) -> str:
    """Render the full report document.

    Args:
        quotes: Snapshots in report order.
        headlines: Headlines already ranked by relevance.
        generated_at: Generation time shown in the header and title.

    Returns:
        Self-contained HTML document.
    """
    parts: List[str] = [
        "<!DOCTYPE html>\n",
        "<html>\n",
        "<head>\n",
        '    <meta charset="utf-8">\n',
        f"    <title>Morning Market Report - {generated_at:%Y-%m-%d}</title>\n",
        "    <style>\n",
        _STYLE,
        "    </style>\n",
        "</head>\n",
        "<body>\n",
    ]
    parts.append(_render_header(generated_at))
    parts.append(_render_summary(quotes, headlines))
    parts.append(_render_table(quotes))
    parts.append(_render_headlines(headlines))
    parts.append(_render_footer())
    parts.append("</body>\n</html>")
    return "".join(parts)


# ── sections ──────────────────────────────────────────────────────────────────

def _render_header(generated_at: datetime) -> str:
    return (
        '    <div class="header">\n'
        "        <h1>🌅 Morning Market Report</h1>\n"
        f"        <p>Generated: {generated_at:%Y-%m-%d %H:%M:%S} {TIMEZONE_LABEL}</p>\n"
        "    </div>\n"
    )


def _render_summary(quotes: Sequence[Quote], headlines: Sequence[Headline]) -> str:
    return (
        '    <div class="section">\n'
        "        <h2>📊 Market Summary</h2>\n"
        '        <div class="summary-box">\n'
        f"            <p><strong>Market Sentiment:</strong> {analyze_market_sentiment(quotes)}</p>\n"
        f"            <p><strong>Top Mover:</strong> {escape(get_top_mover(quotes))}</p>\n"
        f"            <p><strong>Headlines Tracked:</strong> {len(headlines)} relevant stories</p>\n"
        f"            <p><strong>Market Opens:</strong> {MARKET_OPEN}</p>\n"
        "        </div>\n"
        "    </div>\n"
    )


def _render_table(quotes: Sequence[Quote]) -> str:
    header_cells = "".join(
        f"                    <th>{col}</th>\n" for col in _TABLE_COLUMNS
    )
    rows = "".join(_render_quote_row(q) for q in quotes)
    return (
        '    <div class="section">\n'
        "        <h2>📈 Pre-Market Movements</h2>\n"
        '        <table class="data-table">\n'
        "            <thead>\n"
        "                <tr>\n"
        f"{header_cells}"
        "                </tr>\n"
        "            </thead>\n"
        "            <tbody>\n"
        f"{rows}"
        "            </tbody>\n"
        "        </table>\n"
        "    </div>\n"
    )


def _render_quote_row(quote: Quote) -> str:
    # Zero change is styled as positive
    change_class = "positive" if quote.change >= 0 else "negative"
    sign = "+" if quote.change >= 0 else ""
    return (
        f'                <tr class="{change_class}-row">\n'
        f"                    <td><strong>{escape(quote.symbol)}</strong></td>\n"
        f"                    <td>{escape(truncate(quote.name, NAME_MAX_LENGTH))}</td>\n"
        f"                    <td>${quote.previous_close:.2f}</td>\n"
        f"                    <td>${quote.current_price:.2f}</td>\n"
        f'                    <td class="{change_class}">{sign}${quote.change:.2f}</td>\n'
        f'                    <td class="{change_class}">{sign}{quote.change_percent:.2f}%</td>\n'
        f"                    <td>{format_volume(quote.volume)}</td>\n"
        "                </tr>\n"
    )


def _render_headlines(headlines: Sequence[Headline]) -> str:
    blocks = "".join(_render_headline(h) for h in headlines)
    return (
        '    <div class="section">\n'
        "        <h2>📰 Overnight Headlines</h2>\n"
        f"{blocks}"
        "    </div>\n"
    )


def _render_headline(headline: Headline) -> str:
    icon = "🔥" if headline.relevance_score > HIGH_RELEVANCE_THRESHOLD else "📊"
    return (
        '        <div class="news-item">\n'
        f'            <div class="news-title">{icon} {escape(headline.title)}</div>\n'
        f"            <p>{escape(headline.description)}</p>\n"
        '            <div class="news-meta">\n'
        f"                <strong>Source:</strong> {escape(headline.source)} | \n"
        f"                <strong>Published:</strong> {escape(format_publish_time(headline.published_at))} | \n"
        f'                <a href="{escape(headline.url, quote=True)}" target="_blank">Read More</a>\n'
        "            </div>\n"
        "        </div>\n"
    )


def _render_footer() -> str:
    return (
        '    <div class="footer">\n'
        f"        <p><em>{ATTRIBUTION}</em></p>\n"
        f"        <p><em>{DISCLAIMER}</em></p>\n"
        "    </div>\n"
    )


# ── helpers ───────────────────────────────────────────────────────────────────

def analyze_market_sentiment(quotes: Sequence[Quote]) -> str:
    """Classify the quote set as Positive / Negative / Mixed / Neutral.

    Only strictly positive changes count as up; the ratio thresholds are
    ``> 0.6`` for Positive and ``< 0.4`` for Negative.
    """
    if not quotes:
        return "Neutral"
    positive = sum(1 for q in quotes if q.change > 0)
    ratio = positive / len(quotes)
    if ratio > 0.6:
        return "Positive"
    if ratio < 0.4:
        return "Negative"
    return "Mixed"


def get_top_mover(quotes: Sequence[Quote]) -> str:
    """Return ``"SYM (+x.xx%)"`` for the largest absolute % move, or ``"N/A"``.

    ``max`` returns the first of equal candidates, so ties go to input order.
    """
    if not quotes:
        return "N/A"
    top = max(quotes, key=lambda q: abs(q.change_percent))
    return f"{top.symbol} ({top.change_percent:+.2f}%)"


def truncate(text: str, max_length: int = NAME_MAX_LENGTH) -> str:
    """Cut ``text`` to ``max_length`` characters and append ``"..."`` if it was longer.

    Length is counted in characters (code points), so multi-byte text is
    never split mid-character.
    """
    return text[:max_length] + "..." if len(text) > max_length else text


def format_volume(volume: int) -> str:
    """Scale a share volume into B / M / K units.

    Examples:
        ``500`` → ``"500"``, ``1500`` → ``"1.5K"``,
        ``2_500_000`` → ``"2.5M"``, ``1_200_000_000`` → ``"1.2B"``
    """
    if volume >= 1_000_000_000:
        return f"{volume / 1_000_000_000:.1f}B"
    if volume >= 1_000_000:
        return f"{volume / 1_000_000:.1f}M"
    if volume >= 1_000:
        return f"{volume / 1_000:.1f}K"
    return str(volume)


def format_publish_time(published_at: str) -> str:
    """Return ``HH:MM`` from an ISO timestamp, or the raw string if it does not parse.

    A trailing ``Z`` is stripped first; the clock time is kept as published,
    with no zone conversion. A bare date has no clock time and is returned raw.
    """
    raw = published_at or ""
    if "T" not in raw:
        return raw
    try:
        value = raw[:-1] if raw.endswith("Z") else raw
        return datetime.fromisoformat(value).strftime("%H:%M")
    except ValueError:
        return raw
