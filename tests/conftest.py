"""Fixtures for page-object tests against the in-process Playwright fakes."""
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from rediff_ui.artifacts import ArtifactRecorder
from rediff_ui.config import UiTestConfig
from rediff_ui.pages import CreateAccountPage, HomePage
from tests.fakes import FakePage


@pytest.fixture
def ui_config(tmp_path):
    """Short bounds and no settle delays so failures show up quickly."""
    return UiTestConfig(
        base_url="https://rediff.test/",
        create_account_link_timeout=0.3,
        check_availability_timeout=0.5,
        new_window_body_timeout=1.0,
        terms_settle_delay=0,
        privacy_settle_delay=0,
        link_inventory_path=tmp_path / "outputs" / "create_acc_links.json",
    )


@pytest.fixture
def fake_page():
    return FakePage(title="Rediffmail Free Unlimited Storage - Create Account")


@pytest.fixture
def recorder():
    return ArtifactRecorder()


@pytest.fixture
def home_page(fake_page, recorder, ui_config):
    return HomePage(fake_page, recorder, ui_config)


@pytest.fixture
def create_page(fake_page, recorder, ui_config):
    return CreateAccountPage(fake_page, recorder, ui_config)
