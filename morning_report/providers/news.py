"""NewsAPI provider for overnight market headlines.

Pipeline:
  1. GET /v2/everything with a fixed topical query over the last 16 hours.
  2. Normalise each article into a Headline, scored by RelevanceScorer.
  3. Stable sort by score (descending) and keep the top 10.

News is optional context for the report: a missing API key or any upstream
failure yields an empty list, never an exception.
"""

from datetime import datetime, timedelta
from typing import Any, Dict, List, Optional

import requests

from morning_report.core.logger import logger
from morning_report.models.datatypes import Headline
from morning_report.providers.base import NewsProvider
from morning_report.providers.relevance import RelevanceScorer

_NEWSAPI_URL = "https://newsapi.org/v2/everything"
_FROM_FMT = "%Y-%m-%dT%H:%M:%S"

DEFAULT_QUERY = (
    "(stock market OR economy OR federal reserve OR inflation OR earnings) "
    "AND (US OR America)"
)
DEFAULT_LOOKBACK_HOURS = 16
DEFAULT_PAGE_SIZE = 15
MAX_HEADLINES = 10


class NewsApiProvider(NewsProvider):
    """NewsAPI.org ``/v2/everything`` provider.

    Args:
        api_key: NewsAPI key. ``None`` or empty disables fetching.
        scorer: Relevance scorer (default keyword tables if not provided).
        query: Topical search query.
        lookback_hours: Window before ``now`` passed as ``from``.
        page_size: Articles requested per call.
        max_headlines: Length cap applied after ranking.
        timeout: Request timeout in seconds.
        session: Optional ``requests.Session`` (created if not provided).
    """

    def __init__(
        self,
        api_key: Optional[str],
        scorer: Optional[RelevanceScorer] = None,
        query: str = DEFAULT_QUERY,
        lookback_hours: int = DEFAULT_LOOKBACK_HOURS,
        page_size: int = DEFAULT_PAGE_SIZE,
        max_headlines: int = MAX_HEADLINES,
        timeout: float = 30.0,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.api_key = api_key
        self.scorer = scorer or RelevanceScorer()
        self.query = query
        self.lookback_hours = lookback_hours
        self.page_size = page_size
        self.max_headlines = max_headlines
        self.timeout = timeout
        self.session = session or requests.Session()

    # ── public ────────────────────────────────────────────────────────────────

    def fetch_top_headlines(self, now: Optional[datetime] = None) -> List[Headline]:
        """Return up to ``max_headlines`` headlines, most relevant first.

        Args:
            now: Reference time for the lookback window (defaults to ``datetime.now()``).

        Returns:
            Ranked headlines; empty when unconfigured or on upstream failure.
        """
        logger.info("Fetching news headlines...")
        if not self.api_key:
            logger.warning("NEWS_API_KEY not provided, skipping news fetch")
            return []

        articles = self._call_api(now or datetime.now())
        if articles is None:
            return []

        headlines = [self._to_headline(a) for a in articles if isinstance(a, dict)]
        ranked = rank_headlines(headlines, self.max_headlines)
        logger.info(f"Fetched {len(headlines)} news headlines, kept {len(ranked)}")
        return ranked

    def close(self) -> None:
        """Close the underlying HTTP session."""
        self.session.close()

    # ── internal ──────────────────────────────────────────────────────────────

    def _call_api(self, now: datetime) -> Optional[List[Any]]:
        """Call /v2/everything. Returns the ``articles`` list or None on failure."""
        from_ts = (now - timedelta(hours=self.lookback_hours)).strftime(_FROM_FMT)
        params = {
            "q": self.query,
            "from": from_ts,
            "sortBy": "relevancy",
            "language": "en",
            "pageSize": self.page_size,
            "apiKey": self.api_key,
        }
        try:
            resp = self.session.get(_NEWSAPI_URL, params=params, timeout=self.timeout)
        except requests.RequestException as exc:
            logger.warning(f"Failed to fetch news: {exc}")
            return None

        if resp.status_code != 200:
            logger.warning(f"Failed to fetch news: HTTP {resp.status_code}: {resp.text[:200]}")
            return None

        try:
            payload = resp.json()
        except ValueError as exc:
            logger.warning(f"Failed to parse news response: {exc}")
            return None

        articles = payload.get("articles") if isinstance(payload, dict) else None
        if not isinstance(articles, list):
            logger.warning("News response has no 'articles' list")
            return None
        return articles

    def _to_headline(self, article: Dict[str, Any]) -> Headline:
        """Normalise one NewsAPI article, scoring title + description."""
        title = _text(article.get("title"))
        description = _text(article.get("description"))
        source = article.get("source")
        source_name = _text(source.get("name")) if isinstance(source, dict) else ""
        return Headline(
            title=title,
            description=description,
            source=source_name,
            published_at=_text(article.get("publishedAt")),
            url=_text(article.get("url")),
            relevance_score=self.scorer.score_article(title, description),
        )


# ── helpers ───────────────────────────────────────────────────────────────────

def rank_headlines(headlines: List[Headline], limit: int = MAX_HEADLINES) -> List[Headline]:
    """Sort by relevance score (descending) and keep the first ``limit``.

    ``sorted`` is stable, so equal scores keep their upstream order.
    """
    ranked = sorted(headlines, key=lambda h: h.relevance_score, reverse=True)
    return ranked[:max(limit, 0)]


def _text(value: Any) -> str:
    """Return a string field, mapping null/missing to ``""``."""
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)
