"""Report validator: sanity checks on a saved morning report.

Checks:
  1. Every section is present (header, summary, table, headlines, footer)
  2. Sections appear in layout order
  3. Summary sentiment is one of Positive / Negative / Mixed / Neutral
  4. At most 10 headline blocks

Usage:
    python -m morning_report.reporting.validator reports/morning_report_20261019_063000.html
"""

import re
import sys
from typing import List, Tuple

from morning_report.reporting.renderer import DISCLAIMER

_SECTION_MARKERS = [
    ("header", '<div class="header">'),
    ("summary", '<div class="summary-box">'),
    ("table", '<table class="data-table">'),
    ("headlines", "Overnight Headlines"),
    ("footer", '<div class="footer">'),
]

_SENTIMENT_RE = re.compile(r"<strong>Market Sentiment:</strong>\s*(\w+)")
_VALID_SENTIMENTS = {"Positive", "Negative", "Mixed", "Neutral"}
_MAX_HEADLINES = 10


def validate(html_path: str) -> Tuple[bool, List[str]]:
    """Run all validation checks against html_path.

    Args:
        html_path: Path to a saved ``morning_report_*.html`` file.

    Returns:
        Tuple of ``(passed: bool, messages: list[str])``.
        ``messages`` contains PASS/FAIL lines for each check.
    """
    messages: List[str] = []
    passed = True

    # ── load ──────────────────────────────────────────────────────────────────
    try:
        with open(html_path, encoding="utf-8") as f:
            html = f.read()
    except FileNotFoundError:
        return False, [f"FAIL  file not found: {html_path}"]
    except (OSError, UnicodeDecodeError) as exc:
        return False, [f"FAIL  could not read report: {exc}"]

    if not html.strip():
        return False, ["FAIL  report is empty"]

    # ── check 1: section presence ─────────────────────────────────────────────
    positions = {}
    for name, marker in _SECTION_MARKERS:
        idx = html.find(marker)
        if idx == -1:
            messages.append(f"FAIL  missing section: {name}")
            passed = False
        else:
            positions[name] = idx
            messages.append(f"PASS  section present: {name}")

    if DISCLAIMER in html:
        messages.append("PASS  disclaimer present")
    else:
        messages.append("FAIL  disclaimer missing")
        passed = False

    # ── check 2: section order ────────────────────────────────────────────────
    found = [positions[name] for name, _ in _SECTION_MARKERS if name in positions]
    if found == sorted(found):
        messages.append("PASS  sections in layout order")
    else:
        messages.append("FAIL  sections out of order")
        passed = False

    # ── check 3: sentiment label ──────────────────────────────────────────────
    match = _SENTIMENT_RE.search(html)
    if match and match.group(1) in _VALID_SENTIMENTS:
        messages.append(f"PASS  sentiment = {match.group(1)}")
    else:
        label = match.group(1) if match else None
        messages.append(f"FAIL  unexpected sentiment label: {label!r}")
        passed = False

    # ── check 4: headline count ───────────────────────────────────────────────
    n_news = html.count('<div class="news-item">')
    if n_news <= _MAX_HEADLINES:
        messages.append(f"PASS  headline blocks = {n_news} (≤{_MAX_HEADLINES})")
    else:
        messages.append(f"FAIL  headline blocks = {n_news} (>{_MAX_HEADLINES})")
        passed = False

    return passed, messages


def main() -> int:
    if len(sys.argv) < 2:
        print("Usage: python -m morning_report.reporting.validator <path_to_report>")
        return 1
    html_path = sys.argv[1]
    passed, messages = validate(html_path)
    for msg in messages:
        print(msg)
    if passed:
        print("\nVALIDATION PASSED ✓")
        return 0
    else:
        print("\nVALIDATION FAILED ✗")
        return 1


if __name__ == "__main__":
    sys.exit(main())
