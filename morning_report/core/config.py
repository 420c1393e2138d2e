"""Configuration module for loading project settings and environment variables."""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional

import yaml
from dotenv import load_dotenv

from morning_report.core.errors import ConfigurationError

# Load environment variables from .env file
load_dotenv()

DEFAULT_INDICES = ["^GSPC", "^DJI", "^IXIC", "^RUT", "^VIX"]
DEFAULT_STOCKS = [
    "AAPL", "MSFT", "GOOGL", "AMZN", "TSLA",
    "META", "NVDA", "JPM", "JNJ", "PG",
]


def load_config(config_path: str | Path = "config.yaml") -> Dict[str, Any]:
    """
    Load configuration from the specified YAML file.

    Args:
        config_path (str | Path): Path to the configuration file. Defaults to "config.yaml".

    Returns:
        Dict[str, Any]: A dictionary containing the configuration settings.
    """
    config_file = Path(config_path)
    if not config_file.exists():
        raise FileNotFoundError(f"Configuration file not found at {config_path}")

    with open(config_file, "r", encoding="utf-8") as file:
        config_data = yaml.safe_load(file)

    if not config_data:
        raise ValueError(f"Configuration file {config_path} is empty or invalid.")

    if not isinstance(config_data, dict):
        raise ValueError(f"Configuration file {config_path} must contain a mapping at the top level.")

    return config_data


def get_symbols(config: Mapping[str, Any]) -> List[str]:
    """Return the configured indices followed by the configured stocks.

    Falls back to the built-in lists when ``symbols`` is absent.

    Raises:
        ConfigurationError: If ``symbols`` is not a mapping, or either list is
            not a list of non-empty strings.
    """
    symbols_cfg = config.get("symbols") or {}
    if not isinstance(symbols_cfg, dict):
        raise ConfigurationError(
            "'symbols' must be a mapping with 'indices' and 'stocks' lists.",
            details={"value": symbols_cfg},
        )
    indices = symbols_cfg.get("indices", DEFAULT_INDICES)
    stocks = symbols_cfg.get("stocks", DEFAULT_STOCKS)

    symbols: List[str] = []
    for group_name, group in (("indices", indices), ("stocks", stocks)):
        if not isinstance(group, list):
            raise ConfigurationError(f"'symbols.{group_name}' must be a list.")
        for sym in group:
            if not isinstance(sym, str) or not sym.strip():
                raise ConfigurationError(
                    f"All entries of 'symbols.{group_name}' must be non-empty strings.",
                    details={"value": sym},
                )
            symbols.append(sym.strip().upper())
    return symbols


def parse_recipients(raw: Optional[str]) -> List[str]:
    """Split a comma-separated recipient string, trimming whitespace.

    Examples:
        ``"a@x.com, b@y.com"`` → ``["a@x.com", "b@y.com"]``
        ``None`` → ``[]``
    """
    if not raw:
        return []
    return [part.strip() for part in raw.split(",") if part.strip()]


@dataclass(frozen=True)
class MailCredentials:
    """Static SMTP login for the outbound mail relay."""
    username: str
    password: str


@dataclass(frozen=True)
class Settings:
    """
    Secrets and recipients sourced from the environment.

    Every field is optional; an absent value disables the feature that
    needs it (news fetching or email delivery) instead of failing the run.
    """
    mail_credentials: Optional[MailCredentials] = None
    recipients: List[str] = field(default_factory=list)
    news_api_key: Optional[str] = None


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """
    Read ``GMAIL_USER``, ``GMAIL_PASSWORD``, ``WORK_EMAIL_LIST`` and
    ``NEWS_API_KEY`` into a :class:`Settings` value.

    Args:
        environ (Optional[Mapping[str, str]]): Source mapping. Defaults to ``os.environ``.

    Returns:
        Settings: The parsed settings.
    """
    env = os.environ if environ is None else environ

    user = (env.get("GMAIL_USER") or "").strip()
    password = env.get("GMAIL_PASSWORD") or ""
    credentials = MailCredentials(user, password) if user and password else None

    news_api_key = (env.get("NEWS_API_KEY") or "").strip() or None

    return Settings(
        mail_credentials=credentials,
        recipients=parse_recipients(env.get("WORK_EMAIL_LIST")),
        news_api_key=news_api_key,
    )
