"""
Placeholder substitution for generated and templated emails.

Recognized placeholders: {user}, {appName}, {ctaLink}.
Anything else in braces (inline CSS, unknown tokens) is left untouched.
"""

import re
from dataclasses import dataclass
from typing import Mapping, Optional

PLACEHOLDER_RE = re.compile(r"\{(user|appName|ctaLink)\}")


@dataclass(frozen=True)
class VariableDefaults:
    """Values used when the caller leaves a variable unset."""
    app_name: str
    cta_link: str
    user: str = "there"

    def as_placeholders(self) -> dict:
        return {"user": self.user, "appName": self.app_name, "ctaLink": self.cta_link}


def replace_variables(
    text: str,
    variables: Optional[Mapping[str, Optional[str]]],
    defaults: VariableDefaults,
) -> str:
    """
    Replace every recognized placeholder in a single pass.

    Substituted values are not re-scanned, so a user name that happens to
    contain "{appName}" is inserted literally.

    Args:
        text: Subject or body pattern
        variables: Placeholder name -> value; None or missing means default
        defaults: Fallback values

    Returns:
        The substituted text
    """
    values = defaults.as_placeholders()
    for key, value in (variables or {}).items():
        if value is not None and key in values:
            values[key] = value

    return PLACEHOLDER_RE.sub(lambda m: values[m.group(1)], text)
