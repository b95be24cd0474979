"""Declarative locator bindings for the Rediff pages."""
from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional, Pattern, Tuple, Union

from playwright.async_api import Locator, Page


@dataclass(frozen=True)
class LocatorSpec:
    """How to find one control: by placeholder, ARIA role or CSS selector."""

    by: str
    value: str
    name: Optional[Union[str, Pattern[str]]] = None
    exact: Optional[bool] = None
    has_text: Optional[str] = None

    def resolve(self, page: Page) -> Locator:
        if self.by == "placeholder":
            return page.get_by_placeholder(self.value, exact=self.exact)
        if self.by == "role":
            return page.get_by_role(self.value, name=self.name, exact=self.exact)
        if self.by == "css":
            if self.has_text is not None:
                return page.locator(self.value, has_text=self.has_text)
            return page.locator(self.value)
        raise ValueError(f"Unknown locator strategy: {self.by}")

    def describe(self) -> str:
        if self.by == "role":
            name = self.name.pattern if isinstance(self.name, re.Pattern) else self.name
            return f"role={self.value}[name={name!r}]"
        if self.has_text is not None:
            return f"{self.by}={self.value}[has_text={self.has_text!r}]"
        return f"{self.by}={self.value}"


def placeholder(text: str) -> LocatorSpec:
    return LocatorSpec("placeholder", text)


def css(selector: str, has_text: Optional[str] = None) -> LocatorSpec:
    return LocatorSpec("css", selector, has_text=has_text)


def role(role_name: str, name: Union[str, Pattern[str]], exact: Optional[bool] = None) -> LocatorSpec:
    return LocatorSpec("role", role_name, name=name, exact=exact)


class FieldKind(str, Enum):
    TEXT = "text"
    SELECT_VALUE = "select_value"
    SELECT_LABEL = "select_label"
    RADIO = "radio"
    CHECKBOX = "checkbox"


@dataclass(frozen=True)
class FieldBinding:
    """One semantic form field: where it is and how it is set.

    Radio groups carry ``choices`` (token -> locator) instead of ``locator``.
    """

    name: str
    label: str
    kind: FieldKind
    locator: Optional[LocatorSpec] = None
    choices: Tuple[Tuple[str, LocatorSpec], ...] = ()

    def choice(self, token: str) -> LocatorSpec:
        wanted = token.strip().lower()
        for key, spec in self.choices:
            if key == wanted:
                return spec
        allowed = ", ".join(key for key, _ in self.choices)
        raise ValueError(f"'{token}' is not one of: {allowed}")


def _table(*bindings: FieldBinding) -> Mapping[str, FieldBinding]:
    table = {}
    for binding in bindings:
        if binding.name in table:
            raise ValueError(f"Duplicate binding for field '{binding.name}'")
        table[binding.name] = binding
    return MappingProxyType(table)


CREATE_ACCOUNT_FIELDS: Mapping[str, FieldBinding] = _table(
    FieldBinding("fullName", "Enter Full Name", FieldKind.TEXT, placeholder("Enter your full name")),
    FieldBinding("rediffmailId", "Enter Rediffmail ID", FieldKind.TEXT, placeholder("Enter Rediffmail ID")),
    FieldBinding("password", "Enter Password", FieldKind.TEXT, placeholder("Enter password")),
    FieldBinding("retypePassword", "Retype Password", FieldKind.TEXT, placeholder("Retype password")),
    FieldBinding("dobDay", "Select DOB Day", FieldKind.SELECT_VALUE, css('select[name^="DOB_Day"]')),
    FieldBinding("dobMonth", "Select DOB Month", FieldKind.SELECT_VALUE, css('select[name^="DOB_Month"]')),
    FieldBinding("dobYear", "Select DOB Year", FieldKind.SELECT_VALUE, css('select[name^="DOB_Year"]')),
    FieldBinding(
        "gender",
        "Select Gender",
        FieldKind.RADIO,
        choices=(
            ("male", role("radio", "Male", exact=True)),
            ("female", role("radio", "Female", exact=True)),
        ),
    ),
    FieldBinding("country", "Select Country", FieldKind.SELECT_VALUE, css("#country")),
    FieldBinding("city", "Select City", FieldKind.SELECT_VALUE, css('select[name^="city"]')),
    FieldBinding(
        "securityQuestion", "Select Security Question", FieldKind.SELECT_LABEL, css('select[name^="hintq"]')
    ),
    FieldBinding("securityAnswer", "Enter Security Answer", FieldKind.TEXT, css('input[name^="hinta"]')),
    FieldBinding(
        "mothersMaidenName", "Enter Mother's Maiden Name", FieldKind.TEXT, css('input[name^="mothername"]')
    ),
    FieldBinding("mobileNumber", "Enter Mobile Number", FieldKind.TEXT, css("#mobno")),
    FieldBinding("alternateId", "Check Alternate ID Checkbox", FieldKind.CHECKBOX, css(".nomargin")),
)

# Non-field controls
ALL_LINKS = css("a")
CREATE_ACCOUNT_LINK = css("a", has_text="Create Account")
CHECK_AVAILABILITY_BUTTON = role("button", re.compile("Check Availability", re.IGNORECASE))
CREATE_ACCOUNT_BUTTON = css('input[name^="Register"]')
TERMS_AND_CONDITIONS_LINK = css('a:has-text("terms and conditions")')
PRIVACY_POLICY_LINK = css('a:has-text("privacy policy")')
