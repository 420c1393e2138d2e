"""Pipeline engine: orchestrates one morning report run.

Flow:
  1. Market: YahooChartProvider.fetch_quotes over the configured symbols
  2. News: NewsApiProvider.fetch_top_headlines (ranked, top 10)
  3. Render: render_report(quotes, headlines, generated_at)
  4. Persist: save_report → reports/morning_report_<ts>.html
  5. Deliver: EmailDispatcher.send

Steps 1–2 absorb their own failures (a missing symbol or an empty news list
just shrinks the report). Steps 4–5 raise: a report that cannot be saved or
delivered aborts the run.
"""

from datetime import datetime
from pathlib import Path
from typing import Any, Callable, Dict, Optional

from morning_report.core.config import Settings, get_symbols
from morning_report.core.logger import logger
from morning_report.notifications.email_dispatcher import EmailDispatcher
from morning_report.providers.base import MarketDataProvider, NewsProvider
from morning_report.providers.market import YahooChartProvider
from morning_report.providers.news import (
    DEFAULT_LOOKBACK_HOURS, DEFAULT_PAGE_SIZE, DEFAULT_QUERY, MAX_HEADLINES,
    NewsApiProvider,
)
from morning_report.providers.relevance import RelevanceScorer
from morning_report.reporting.persister import save_report
from morning_report.reporting.renderer import render_report


class ReportPipeline:
    """Runs fetch → render → persist → deliver for one report.

    Args:
        config: Parsed config.yaml dict (passed in; not re-loaded internally).
        settings: Credentials and recipients from the environment.
        market: Quote provider (built from config if not provided).
        news: Headline provider (built from config if not provided).
        dispatcher: Email dispatcher (built from settings if not provided).
        clock: Returns the generation time (``datetime.now`` by default).
    """

    def __init__(
        self,
        config: Dict[str, Any],
        settings: Settings,
        market: Optional[MarketDataProvider] = None,
        news: Optional[NewsProvider] = None,
        dispatcher: Optional[EmailDispatcher] = None,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self.config = config
        self.settings = settings
        self.clock = clock
        self.reports_dir = config.get("reports_dir", "reports")

        timeout = float(config.get("http_timeout_seconds", 30))
        self.market = market or YahooChartProvider(
            timeout=timeout,
            request_delay=float(config.get("request_delay_seconds", 0.1)),
        )

        news_cfg = config.get("news") or {}
        self.news = news or NewsApiProvider(
            api_key=settings.news_api_key,
            scorer=RelevanceScorer.from_config(config.get("relevance")),
            query=news_cfg.get("query", DEFAULT_QUERY),
            lookback_hours=int(news_cfg.get("lookback_hours", DEFAULT_LOOKBACK_HOURS)),
            page_size=int(news_cfg.get("page_size", DEFAULT_PAGE_SIZE)),
            max_headlines=int(news_cfg.get("max_headlines", MAX_HEADLINES)),
            timeout=timeout,
        )

        email_cfg = config.get("email") or {}
        self.dispatcher = dispatcher or EmailDispatcher(
            credentials=settings.mail_credentials,
            recipients=settings.recipients,
            smtp_host=email_cfg.get("smtp_host", "smtp.gmail.com"),
            smtp_port=int(email_cfg.get("smtp_port", 587)),
            timeout=timeout,
        )

    # ── public ────────────────────────────────────────────────────────────────

    def run(self) -> Path:
        """Generate, save and send the report.

        Returns:
            Path of the saved HTML report.

        Raises:
            OSError: If the report cannot be written.
            ReportDeliveryError: If email delivery fails.
        """
        logger.info("Starting morning report generation...")
        symbols = get_symbols(self.config)
        generated_at = self.clock()

        try:
            quotes = self.market.fetch_quotes(symbols)
            headlines = self.news.fetch_top_headlines(now=generated_at)
        finally:
            self._close_providers()

        logger.info("Generating HTML report...")
        html = render_report(quotes, headlines, generated_at)

        path = save_report(html, generated_at, self.reports_dir)
        self.dispatcher.send(html, sent_at=generated_at)

        logger.info(
            f"Morning report complete: {len(quotes)} quotes, "
            f"{len(headlines)} headlines → {path}"
        )
        return path

    # ── internal ──────────────────────────────────────────────────────────────

    def _close_providers(self) -> None:
        """Release HTTP sessions on providers that hold one."""
        for provider in (self.market, self.news):
            close = getattr(provider, "close", None)
            if callable(close):
                close()
