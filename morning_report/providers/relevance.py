"""Keyword-based relevance scoring for market headlines.

Pipeline:
    title + " " + description → RelevanceScorer.score() → int

Weights:
    high-impact keyword present   → +3
    medium-impact keyword present → +1

Each keyword counts once no matter how often it appears. Matching is a
case-insensitive substring test, so ``"fed"`` also matches ``"federal"``;
there is no upper bound and no normalisation.
"""

from typing import Iterable, Optional, Tuple

HIGH_IMPACT_KEYWORDS: Tuple[str, ...] = (
    "federal reserve", "fed", "interest rate", "inflation", "recession",
    "earnings", "gdp", "unemployment", "market crash", "rally",
    "stimulus", "trade war", "geopolitical",
)

MEDIUM_IMPACT_KEYWORDS: Tuple[str, ...] = (
    "stock market", "dow jones", "nasdaq", "s&p 500", "wall street",
    "investor", "trading", "economic", "financial",
)

HIGH_IMPACT_WEIGHT = 3
MEDIUM_IMPACT_WEIGHT = 1


def _normalise(keywords: Iterable[str]) -> Tuple[str, ...]:
    """Lower-case keywords and drop blanks and duplicates, keeping order."""
    seen = []
    for kw in keywords:
        kw = (kw or "").strip().lower()
        if kw and kw not in seen:
            seen.append(kw)
    return tuple(seen)


class RelevanceScorer:
    """Scores article text by the presence of weighted keywords.

    Args:
        high_impact: Keywords worth ``high_weight`` each.
        medium_impact: Keywords worth ``medium_weight`` each.
        high_weight: Points per high-impact keyword found.
        medium_weight: Points per medium-impact keyword found.
    """

    def __init__(
        self,
        high_impact: Iterable[str] = HIGH_IMPACT_KEYWORDS,
        medium_impact: Iterable[str] = MEDIUM_IMPACT_KEYWORDS,
        high_weight: int = HIGH_IMPACT_WEIGHT,
        medium_weight: int = MEDIUM_IMPACT_WEIGHT,
    ) -> None:
        self.high_impact = _normalise(high_impact)
        self.medium_impact = _normalise(medium_impact)
        self.high_weight = high_weight
        self.medium_weight = medium_weight

    @classmethod
    def from_config(cls, relevance_cfg: Optional[dict]) -> "RelevanceScorer":
        """Build a scorer from the ``relevance`` block of config.yaml."""
        relevance_cfg = relevance_cfg or {}
        return cls(
            high_impact=relevance_cfg.get("high_impact", HIGH_IMPACT_KEYWORDS),
            medium_impact=relevance_cfg.get("medium_impact", MEDIUM_IMPACT_KEYWORDS),
        )

    def score(self, text: Optional[str]) -> int:
        """Return the relevance score of ``text`` (``None`` scores as empty).

        Args:
            text: Combined title and description.

        Returns:
            int ``>= 0``.
        """
        text_lower = (text or "").lower()
        total = 0
        for keyword in self.high_impact:
            if keyword in text_lower:
                total += self.high_weight
        for keyword in self.medium_impact:
            if keyword in text_lower:
                total += self.medium_weight
        return total

    def score_article(self, title: Optional[str], description: Optional[str]) -> int:
        """Score the ``title + " " + description`` concatenation."""
        return self.score(f"{title or ''} {description or ''}")


_DEFAULT_SCORER = RelevanceScorer()


def score_relevance(text: Optional[str]) -> int:
    """Score ``text`` against the built-in keyword tables."""
    return _DEFAULT_SCORER.score(text)
