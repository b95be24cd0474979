"""Fixtures for the live journeys against rediff.com."""
import re
import sys
from pathlib import Path

import pytest
import pytest_asyncio

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from rediff_ui.account_inputs import load_account_inputs
from rediff_ui.artifacts import ArtifactRecorder
from rediff_ui.config import settings
from rediff_ui.pages import CreateAccountPage, HomePage
from rediff_ui.playwright_client import PlaywrightClient
from rediff_ui.workflows import open_create_account


def pytest_collection_modifyitems(config, items):
    if settings.live_tests_enabled:
        return
    skip_live = pytest.mark.skip(reason="live journey - set UI_LIVE_TESTS=1 to run against rediff.com")
    for item in items:
        if "live" in item.keywords:
            item.add_marker(skip_live)


@pytest_asyncio.fixture()
async def playwright_client():
    """Browser, context and default page for one journey."""
    async with PlaywrightClient() as client:
        yield client


@pytest_asyncio.fixture()
async def page(playwright_client):
    return playwright_client.page


@pytest.fixture()
def artifacts(request):
    """Screenshots attached by the page objects during the test.

    When SCREENSHOT_DIR is set they are written to
    ``SCREENSHOT_DIR/<test-name>/NN-<label>.png`` after the test.
    """
    recorder = ArtifactRecorder()
    yield recorder

    if settings.screenshot_dir and recorder.artifacts:
        directory = settings.screenshot_dir / re.sub(r"[^\w.-]+", "_", request.node.name)
        for path in recorder.save_to(directory):
            print(f"📸 {path}")


@pytest.fixture()
def home_page(page, artifacts):
    return HomePage(page, artifacts)


@pytest.fixture()
def create_account_page(page, artifacts):
    return CreateAccountPage(page, artifacts)


@pytest_asyncio.fixture()
async def on_create_account(home_page, create_account_page, page):
    """Start every journey on the create-account form."""
    await open_create_account(home_page, page)
    return create_account_page


@pytest.fixture()
def account_inputs():
    path = settings.account_inputs_path
    print(f"[CONFIG] Account inputs from {path}")
    return load_account_inputs(path)
