"""Form data that drives the account-creation scenario."""
from __future__ import annotations

import json
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict

# JSON key -> attribute name
_JSON_KEYS = {
    "fullName": "full_name",
    "rediffmailId": "rediffmail_id",
    "password": "password",
    "dobDay": "dob_day",
    "dobMonth": "dob_month",
    "dobYear": "dob_year",
    "gender": "gender",
    "country": "country",
    "city": "city",
    "securityQuestion": "security_question",
    "securityAnswer": "security_answer",
    "mothersMaidenName": "mothers_maiden_name",
    "mobileNumber": "mobile_number",
}


@dataclass(frozen=True)
class AccountFormData:
    full_name: str
    rediffmail_id: str
    password: str
    dob_day: str
    dob_month: str
    dob_year: str
    gender: str
    country: str
    city: str
    security_question: str
    security_answer: str
    mothers_maiden_name: str
    mobile_number: str

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AccountFormData":
        """Build from the camelCase fixture mapping; extra keys are ignored."""
        missing = [key for key in _JSON_KEYS if key not in data]
        if missing:
            raise ValueError(f"Account inputs missing keys: {', '.join(missing)}")

        values = {}
        for key, attribute in _JSON_KEYS.items():
            value = data[key]
            if not isinstance(value, str):
                raise ValueError(f"Account input '{key}' must be a string, got {type(value).__name__}")
            values[attribute] = value
        return cls(**values)

    def to_dict(self) -> Dict[str, str]:
        by_attribute = {attribute: key for key, attribute in _JSON_KEYS.items()}
        return {by_attribute[f.name]: getattr(self, f.name) for f in fields(self)}


def load_account_inputs(path: Path) -> AccountFormData:
    """Read the fixture JSON at ``path``."""
    data = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise ValueError(f"{path} must contain a JSON object, got {type(data).__name__}")
    return AccountFormData.from_dict(data)
