"""Abstract base classes for data providers."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional

from morning_report.models.datatypes import Headline, Quote


class MarketDataProvider(ABC):
    """Abstract interface for fetching per-symbol market snapshots."""

    @abstractmethod
    def fetch_quote(self, symbol: str) -> Optional[Quote]:
        """
        Fetch the latest snapshot for one symbol.

        Args:
            symbol (str): The ticker or index symbol, e.g. ``"AAPL"`` or ``"^GSPC"``.

        Returns:
            Optional[Quote]: The snapshot, or None if it could not be fetched.
        """
        pass

    @abstractmethod
    def fetch_quotes(self, symbols: List[str]) -> List[Quote]:
        """
        Fetch snapshots for every symbol, in order, skipping failures.

        Args:
            symbols (List[str]): Symbols in report order.

        Returns:
            List[Quote]: Successful snapshots in the order of ``symbols``.
        """
        pass


class NewsProvider(ABC):
    """Abstract interface for fetching ranked market headlines."""

    @abstractmethod
    def fetch_top_headlines(self, now: Optional[datetime] = None) -> List[Headline]:
        """
        Fetch recent market news ranked by relevance.

        Args:
            now (Optional[datetime]): Reference time for the lookback window.

        Returns:
            List[Headline]: Headlines, highest relevance first.
        """
        pass
