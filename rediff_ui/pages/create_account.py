"""Rediffmail "Create Account" form.

Every field is set through ``set_field``, which applies the action for the
control kind, reads the control back once and compares, then attaches a
screenshot labelled after the field. A successful return therefore means the
value is on the page, not merely that a keystroke was sent.
"""
from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from dataclasses import dataclass
from typing import AsyncIterator, Union

from playwright.async_api import Error as PlaywrightError
from playwright.async_api import Page

from rediff_ui.errors import FieldInteractionError, TitleMismatchError, UiOperationError
from rediff_ui.pages.base import BasePage
from rediff_ui.pages.bindings import (
    CHECK_AVAILABILITY_BUTTON,
    CREATE_ACCOUNT_BUTTON,
    CREATE_ACCOUNT_FIELDS,
    PRIVACY_POLICY_LINK,
    TERMS_AND_CONDITIONS_LINK,
    FieldBinding,
    FieldKind,
    LocatorSpec,
)

logger = logging.getLogger(__name__)

FieldValue = Union[str, bool]

TERMS_TITLE = "Rediffmail: Terms and Conditions"
PRIVACY_TITLE = "Welcome to rediff.com"

_SECRET_FIELDS = {"password", "retypePassword"}
_READY_STATE_COMPLETE = "() => document.readyState === 'complete'"
_SELECTED_OPTION_LABEL = "el => el.selectedIndex >= 0 ? el.options[el.selectedIndex].label : ''"


@dataclass(frozen=True)
class ExternalLink:
    """A link that opens a second window which must be checked and closed."""

    name: str
    locator: LocatorSpec
    expected_title: str
    label: str
    settle_delay: float
    press_end: bool = False


def _shown(binding: FieldBinding, value: FieldValue) -> str:
    return "***" if binding.name in _SECRET_FIELDS else repr(value)


class CreateAccountPage(BasePage):
    # ---- field operations ----------------------------------------------------
    async def set_field(self, name: str, value: FieldValue) -> None:
        """Set form field ``name`` to ``value`` and verify it took effect."""
        binding = CREATE_ACCOUNT_FIELDS.get(name)
        if binding is None:
            raise KeyError(f"Unknown form field: {name}")

        try:
            await self._apply(binding, value)
            await self._verify(binding, value)
            logger.info("Set %s to %s", binding.name, _shown(binding, value))
            await self.recorder.capture(self.page, binding.label)
        except FieldInteractionError as exc:
            logger.error("Error setting %s: %s", binding.name, exc.message)
            raise
        except (PlaywrightError, ValueError, TypeError) as exc:
            logger.error("Error setting %s: %s", binding.name, exc)
            raise FieldInteractionError(
                name=binding.name,
                message=str(exc),
                payload={"kind": binding.kind.value, "value": _shown(binding, value)},
            ) from exc

    async def _apply(self, binding: FieldBinding, value: FieldValue) -> None:
        if binding.kind is FieldKind.RADIO:
            await self.locate(binding.choice(_require_str(binding, value))).check()
            return
        if binding.kind is FieldKind.CHECKBOX:
            if not isinstance(value, bool):
                raise TypeError(f"{binding.name} expects a bool, got {type(value).__name__}")
            await self.locate(binding.locator).set_checked(value)
            return

        text = _require_str(binding, value)
        locator = self.locate(binding.locator)
        if binding.kind is FieldKind.TEXT:
            await locator.fill(text)
        elif binding.kind is FieldKind.SELECT_VALUE:
            await locator.select_option(text)
        elif binding.kind is FieldKind.SELECT_LABEL:
            await locator.select_option(label=text)

    async def _verify(self, binding: FieldBinding, value: FieldValue) -> None:
        if binding.kind is FieldKind.RADIO:
            spec = binding.choice(str(value))
            actual: FieldValue = await self.locate(spec).is_checked()
            expected: FieldValue = True
        elif binding.kind is FieldKind.CHECKBOX:
            actual = await self.locate(binding.locator).is_checked()
            expected = value
        elif binding.kind is FieldKind.SELECT_LABEL:
            actual = await self.locate(binding.locator).evaluate(_SELECTED_OPTION_LABEL)
            expected = value
        else:
            actual = await self.locate(binding.locator).input_value()
            expected = value

        if actual != expected:
            shown_actual = "***" if binding.name in _SECRET_FIELDS else repr(actual)
            raise FieldInteractionError(
                name=binding.name,
                message=f"expected {_shown(binding, expected)}, read back {shown_actual}",
                payload={"kind": binding.kind.value},
            )

    async def is_field_visible(self, name: str) -> bool:
        binding = CREATE_ACCOUNT_FIELDS[name]
        if binding.locator is None:
            return all([await self.locate(spec).is_visible() for _, spec in binding.choices])
        return await self.locate(binding.locator).is_visible()

    async def enter_full_name(self, full_name: str) -> None:
        await self.set_field("fullName", full_name)

    async def enter_rediffmail_id(self, rediffmail_id: str) -> None:
        await self.set_field("rediffmailId", rediffmail_id)

    async def enter_password(self, password: str) -> None:
        await self.set_field("password", password)

    async def enter_retype_password(self, password: str) -> None:
        await self.set_field("retypePassword", password)

    async def select_dob_day(self, day: str) -> None:
        await self.set_field("dobDay", day)

    async def select_dob_month(self, month: str) -> None:
        await self.set_field("dobMonth", month)

    async def select_dob_year(self, year: str) -> None:
        await self.set_field("dobYear", year)

    async def select_gender(self, gender: str) -> None:
        """``gender`` is ``male`` or ``female``, case-insensitive."""
        await self.set_field("gender", gender)

    async def select_country(self, country: str) -> None:
        await self.set_field("country", country)

    async def select_city(self, city: str) -> None:
        await self.set_field("city", city)

    async def select_security_question(self, question: str) -> None:
        # Selected by visible label; option values are opaque ids.
        await self.set_field("securityQuestion", question)

    async def enter_security_answer(self, answer: str) -> None:
        await self.set_field("securityAnswer", answer)

    async def enter_mothers_maiden_name(self, name: str) -> None:
        await self.set_field("mothersMaidenName", name)

    async def enter_mobile_number(self, mobile_number: str) -> None:
        await self.set_field("mobileNumber", mobile_number)

    async def check_alternate_id(self, checked: bool = True) -> None:
        await self.set_field("alternateId", checked)

    # ---- buttons -------------------------------------------------------------
    async def check_availability(self) -> None:
        button = await self.wait_visible_and_enabled(
            CHECK_AVAILABILITY_BUTTON, self.config.check_availability_timeout, "check_availability"
        )
        await self.click(button, "check_availability")
        logger.info("Clicked Check Availability")

    async def submit(self) -> None:
        """Click "Create my account". The outcome is the server's business."""
        await self.click(self.locate(CREATE_ACCOUNT_BUTTON), "submit")

    click_create_account = submit

    # ---- external windows ----------------------------------------------------
    async def handle_terms_and_conditions(self) -> str:
        return await self.verify_external_link(
            ExternalLink(
                name="terms_and_conditions",
                locator=TERMS_AND_CONDITIONS_LINK,
                expected_title=TERMS_TITLE,
                label="Terms and Conditions Screenshot",
                settle_delay=self.config.terms_settle_delay,
            )
        )

    async def handle_privacy_policy(self) -> str:
        return await self.verify_external_link(
            ExternalLink(
                name="privacy_policy",
                locator=PRIVACY_POLICY_LINK,
                expected_title=PRIVACY_TITLE,
                label="Privacy Policy Screenshot",
                settle_delay=self.config.privacy_settle_delay,
                press_end=True,
            )
        )

    async def verify_external_link(self, link: ExternalLink) -> str:
        """Open ``link`` in its new window, check the title, close the window.

        Returns the title of the opened window. The window is closed whether
        or not the check passes; focus returns to this page only on success.
        """
        try:
            async with self._opened_window(link) as window:
                await self._settle(window, link.settle_delay)
                await self.recorder.capture(window, link.label, full_page=True)

                title = await window.title()
                logger.info("Title of %s window: %s", link.name, title)
                if link.expected_title not in title:
                    raise TitleMismatchError(
                        name=link.name,
                        message=f"title {title!r} does not contain {link.expected_title!r}",
                        payload={"title": title, "expected": link.expected_title},
                    )
                if link.press_end:
                    await window.keyboard.press("End")
        except (UiOperationError, PlaywrightError) as exc:
            logger.error("Error handling %s window: %s", link.name, exc)
            raise

        await self.page.bring_to_front()
        return title

    @asynccontextmanager
    async def _opened_window(self, link: ExternalLink) -> AsyncIterator[Page]:
        async with self.page.context.expect_page() as window_info:
            await self.locate(link.locator).click()
        window = await window_info.value
        try:
            yield window
        finally:
            await window.close()

    async def _settle(self, window: Page, delay: float) -> None:
        timeout_ms = self.config.new_window_body_timeout * 1000
        await window.wait_for_load_state("load")
        await window.wait_for_selector("body", timeout=timeout_ms)
        await window.wait_for_function(_READY_STATE_COMPLETE, timeout=timeout_ms)
        # Late widgets on these pages render after readyState; no marker to wait on.
        if delay:
            await window.wait_for_timeout(delay * 1000)


def _require_str(binding: FieldBinding, value: FieldValue) -> str:
    if not isinstance(value, str):
        raise TypeError(f"{binding.name} expects a string, got {type(value).__name__}")
    return value
