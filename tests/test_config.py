from pathlib import Path

import pytest

from rediff_ui.config import UiTestConfig
from rediff_ui.env_defaults import REPO_ROOT


def test_environment_overrides(monkeypatch, tmp_path):
    monkeypatch.setenv("REDIFF_BASE_URL", "https://staging.rediff.test")
    monkeypatch.setenv("PLAYWRIGHT_HEADLESS", "false")
    monkeypatch.setenv("PLAYWRIGHT_BROWSER", "Firefox")
    monkeypatch.setenv("TERMS_SETTLE_DELAY", "0")
    monkeypatch.setenv("PRIVACY_SETTLE_DELAY", "2.5")
    monkeypatch.setenv("LINK_INVENTORY_PATH", str(tmp_path / "links.json"))
    monkeypatch.setenv("SCREENSHOT_DIR", str(tmp_path / "shots"))

    config = UiTestConfig.from_env()

    assert config.base_url == "https://staging.rediff.test"
    assert config.playwright_headless is False
    assert config.playwright_browser == "firefox"
    assert config.terms_settle_delay == 0
    assert config.privacy_settle_delay == 2.5
    assert config.link_inventory_path == tmp_path / "links.json"
    assert config.screenshot_dir == tmp_path / "shots"


def test_relative_paths_resolve_against_repo_root(monkeypatch):
    monkeypatch.setenv("ACCOUNT_INPUTS_PATH", "inputs/other.json")

    assert UiTestConfig.from_env().account_inputs_path == REPO_ROOT / "inputs" / "other.json"


@pytest.mark.parametrize(
    "key, value",
    [
        ("PLAYWRIGHT_HEADLESS", "maybe"),
        ("CHECK_AVAILABILITY_TIMEOUT", "ten"),
        ("NEW_WINDOW_BODY_TIMEOUT", "-1"),
        ("PLAYWRIGHT_TIMEOUT_MS", "30s"),
        ("PLAYWRIGHT_BROWSER", "opera"),
    ],
)
def test_invalid_values_fail_fast(monkeypatch, key, value):
    monkeypatch.setenv(key, value)

    with pytest.raises(ValueError, match=key):
        UiTestConfig.from_env()


def test_url_joins_paths():
    config = UiTestConfig(base_url="https://www.rediff.com")

    assert config.url("/register") == "https://www.rediff.com/register"
    assert config.url("mail/login") == "https://www.rediff.com/mail/login"


def test_defaults_without_environment(monkeypatch):
    for key in ("TERMS_SETTLE_DELAY", "PRIVACY_SETTLE_DELAY", "SCREENSHOT_DIR"):
        monkeypatch.delenv(key, raising=False)

    config = UiTestConfig.from_env()

    assert config.terms_settle_delay == 5.0
    assert config.privacy_settle_delay == 1.0
    assert config.screenshot_dir is None
    assert isinstance(config.link_inventory_path, Path)


def test_blank_headless_keeps_headless_default(monkeypatch):
    monkeypatch.setenv("PLAYWRIGHT_HEADLESS", "")

    assert UiTestConfig.from_env().playwright_headless is True


def test_relative_screenshot_dir_resolves_against_repo_root(monkeypatch):
    monkeypatch.setenv("SCREENSHOT_DIR", "outputs/shots")

    assert UiTestConfig.from_env().screenshot_dir == REPO_ROOT / "outputs" / "shots"


@pytest.mark.parametrize("value", ["", "   "])
def test_blank_paths_fall_back_to_defaults(monkeypatch, value):
    monkeypatch.setenv("LINK_INVENTORY_PATH", value)
    monkeypatch.setenv("SCREENSHOT_DIR", value)

    config = UiTestConfig.from_env()

    assert config.link_inventory_path == REPO_ROOT / "outputs" / "create_acc_links.json"
    assert config.link_inventory_path != REPO_ROOT
    assert config.screenshot_dir is None
