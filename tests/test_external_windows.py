"""Terms and privacy links open a second window that is checked and closed."""
import dataclasses

import pytest
from playwright.async_api import TimeoutError as PlaywrightTimeout

from rediff_ui.errors import TitleMismatchError
from rediff_ui.pages import CreateAccountPage
from rediff_ui.pages.bindings import PRIVACY_POLICY_LINK, TERMS_AND_CONDITIONS_LINK
from tests.fakes import FakePage


def link_opening(fake_page, spec, title):
    window = FakePage(title=title)
    spec.resolve(fake_page).opens = window
    return window


class TestTermsAndConditions:
    @pytest.mark.asyncio
    async def test_matching_title(self, create_page, fake_page, recorder):
        window = link_opening(fake_page, TERMS_AND_CONDITIONS_LINK, "Rediffmail: Terms and Conditions of use")

        title = await create_page.handle_terms_and_conditions()

        assert title == "Rediffmail: Terms and Conditions of use"
        assert window.closed
        assert fake_page.context.pages == [fake_page]
        assert fake_page.context.front is fake_page
        assert recorder.labels() == ["Terms and Conditions Screenshot"]
        assert window.screenshots == [True]

    @pytest.mark.asyncio
    async def test_window_is_ready_before_snapshot(self, create_page, fake_page):
        window = link_opening(fake_page, TERMS_AND_CONDITIONS_LINK, "Rediffmail: Terms and Conditions")

        await create_page.handle_terms_and_conditions()

        kinds = [kind for kind, _ in window.waits]
        assert kinds == ["load_state", "selector", "function"]
        assert ("selector", "body") in window.waits

    @pytest.mark.asyncio
    async def test_wrong_title_still_closes_window(self, create_page, fake_page):
        window = link_opening(fake_page, TERMS_AND_CONDITIONS_LINK, "Page not found")

        with pytest.raises(TitleMismatchError) as excinfo:
            await create_page.handle_terms_and_conditions()

        assert excinfo.value.payload["title"] == "Page not found"
        assert window.closed
        assert fake_page.context.front is None

    @pytest.mark.asyncio
    async def test_no_window_opened(self, create_page, fake_page):
        with pytest.raises(PlaywrightTimeout):
            await create_page.handle_terms_and_conditions()

        assert TERMS_AND_CONDITIONS_LINK.resolve(fake_page).clicks == 1
        assert fake_page.context.waiters == []

    @pytest.mark.asyncio
    async def test_configured_settle_delay(self, fake_page, recorder, ui_config):
        config = dataclasses.replace(ui_config, terms_settle_delay=1.5)
        page = CreateAccountPage(fake_page, recorder, config)
        window = link_opening(fake_page, TERMS_AND_CONDITIONS_LINK, "Rediffmail: Terms and Conditions")

        await page.handle_terms_and_conditions()

        assert window.waits[-1] == ("timeout", 1500.0)


class TestPrivacyPolicy:
    @pytest.mark.asyncio
    async def test_matching_title_scrolls_to_end(self, create_page, fake_page, recorder):
        window = link_opening(fake_page, PRIVACY_POLICY_LINK, "Welcome to rediff.com - Privacy Policy")

        await create_page.handle_privacy_policy()

        assert window.keyboard.pressed == ["End"]
        assert window.closed
        assert recorder.labels() == ["Privacy Policy Screenshot"]

    @pytest.mark.asyncio
    async def test_wrong_title(self, create_page, fake_page):
        window = link_opening(fake_page, PRIVACY_POLICY_LINK, "Rediffmail: Terms and Conditions")

        with pytest.raises(TitleMismatchError):
            await create_page.handle_privacy_policy()

        assert window.keyboard.pressed == []
        assert window.closed
