"""Shared configuration for the Rediffmail UI suite.

Values come from environment variables first, then from ``.env.defaults``
at the repository root. Relative paths are resolved against the repository
root so the suite behaves the same from any working directory.
"""
from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional
from urllib.parse import urljoin

from rediff_ui.env_defaults import REPO_ROOT, get_env_default

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


def _raw(key: str, fallback: str | None = None) -> str | None:
    """Environment value, then .env.defaults value; blank counts as unset."""
    value = os.getenv(key)
    if value is None or not value.strip():
        value = get_env_default(key)
    if value is None or not value.strip():
        return fallback
    return value


def _bool(key: str, fallback: bool) -> bool:
    value = _raw(key)
    if value is None:
        return fallback
    lowered = value.strip().lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    raise ValueError(f"{key} must be a boolean flag, got {value!r}")


def _float(key: str, fallback: float) -> float:
    value = _raw(key)
    if value is None:
        return fallback
    try:
        parsed = float(value)
    except ValueError:
        raise ValueError(f"{key} must be a number of seconds, got {value!r}") from None
    if parsed < 0:
        raise ValueError(f"{key} must not be negative, got {value!r}")
    return parsed


def _int(key: str, fallback: int) -> int:
    value = _raw(key)
    if value is None:
        return fallback
    try:
        return int(value)
    except ValueError:
        raise ValueError(f"{key} must be an integer, got {value!r}") from None


def _path(key: str, fallback: str | None) -> Optional[Path]:
    raw = _raw(key, fallback)
    if raw is None:
        return None
    path = Path(raw)
    return path if path.is_absolute() else REPO_ROOT / path


@dataclass
class UiTestConfig:
    """Concrete settings for one run of the suite.

    Timeouts and delays are in seconds; ``playwright_timeout_ms`` is handed to
    Playwright as-is. The two settle delays are kept separate because the
    terms and privacy pages have historically needed different amounts.
    """

    base_url: str = "https://www.rediff.com/"
    playwright_headless: bool = True
    playwright_browser: str = "chromium"
    playwright_timeout_ms: int = 30000
    create_account_link_timeout: float = 15.0
    check_availability_timeout: float = 10.0
    new_window_body_timeout: float = 10.0
    terms_settle_delay: float = 5.0
    privacy_settle_delay: float = 1.0
    account_inputs_path: Path = REPO_ROOT / "inputs" / "createAccountInputs.json"
    link_inventory_path: Path = REPO_ROOT / "outputs" / "create_acc_links.json"
    screenshot_dir: Optional[Path] = None
    live_tests_enabled: bool = False

    @classmethod
    def from_env(cls) -> "UiTestConfig":
        browser = (_raw("PLAYWRIGHT_BROWSER", "chromium") or "chromium").lower()
        if browser not in {"chromium", "firefox", "webkit"}:
            raise ValueError(f"PLAYWRIGHT_BROWSER must be chromium, firefox or webkit, got {browser!r}")

        return cls(
            base_url=_raw("REDIFF_BASE_URL", cls.base_url),
            playwright_headless=_bool("PLAYWRIGHT_HEADLESS", True),
            playwright_browser=browser,
            playwright_timeout_ms=_int("PLAYWRIGHT_TIMEOUT_MS", 30000),
            create_account_link_timeout=_float("CREATE_ACCOUNT_LINK_TIMEOUT", 15.0),
            check_availability_timeout=_float("CHECK_AVAILABILITY_TIMEOUT", 10.0),
            new_window_body_timeout=_float("NEW_WINDOW_BODY_TIMEOUT", 10.0),
            terms_settle_delay=_float("TERMS_SETTLE_DELAY", 5.0),
            privacy_settle_delay=_float("PRIVACY_SETTLE_DELAY", 1.0),
            account_inputs_path=_path("ACCOUNT_INPUTS_PATH", "inputs/createAccountInputs.json"),
            link_inventory_path=_path("LINK_INVENTORY_PATH", "outputs/create_acc_links.json"),
            screenshot_dir=_path("SCREENSHOT_DIR", None),
            live_tests_enabled=_bool("UI_LIVE_TESTS", False),
        )

    def url(self, path: str) -> str:
        """Return an absolute URL for the provided path."""
        return urljoin(self.base_url.rstrip("/") + "/", path.lstrip("/"))


# Singleton instance - initialized on first import
settings = UiTestConfig.from_env()
