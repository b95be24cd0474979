"""Reusable journeys across the home and create-account pages.

Steps run strictly in order; the first failure propagates and the rest of
the journey does not run.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import List

from playwright.async_api import Page

from rediff_ui.account_inputs import AccountFormData
from rediff_ui.links import LinkRecord, collect_link_records, write_link_inventory
from rediff_ui.pages.create_account import CreateAccountPage
from rediff_ui.pages.home import HomePage

logger = logging.getLogger(__name__)


async def open_create_account(home: HomePage, page: Page) -> None:
    """Land on the create-account form from the home page."""
    await home.navigate()
    await home.go_to_create_account()
    await page.wait_for_load_state("domcontentloaded")


async def store_create_account_links(create_page: CreateAccountPage, path: Path) -> List[LinkRecord]:
    records = await collect_link_records(create_page.list_links())
    logger.info("Total number of links on Create Account page: %d", len(records))
    write_link_inventory(path, records)
    return records


async def fill_account_form(create_page: CreateAccountPage, data: AccountFormData) -> None:
    """Fill every field from ``data`` in on-screen order. Does not submit."""
    await create_page.enter_full_name(data.full_name)
    await create_page.enter_rediffmail_id(data.rediffmail_id)
    await create_page.check_availability()
    await create_page.enter_password(data.password)
    await create_page.enter_retype_password(data.password)
    await create_page.select_dob_day(data.dob_day)
    await create_page.select_dob_month(data.dob_month)
    await create_page.select_dob_year(data.dob_year)
    await create_page.select_gender(data.gender)
    await create_page.select_country(data.country)

    # City is only offered for some countries.
    if await create_page.is_field_visible("city"):
        await create_page.select_city(data.city)
    else:
        logger.info("City selector hidden for country %s; skipping", data.country)

    await create_page.check_alternate_id()
    await create_page.select_security_question(data.security_question)
    await create_page.enter_security_answer(data.security_answer)
    await create_page.enter_mothers_maiden_name(data.mothers_maiden_name)
    await create_page.enter_mobile_number(data.mobile_number)


async def visit_policy_windows(create_page: CreateAccountPage) -> List[str]:
    """Open, check and close the terms and privacy windows; return their titles."""
    return [
        await create_page.handle_terms_and_conditions(),
        await create_page.handle_privacy_policy(),
    ]
