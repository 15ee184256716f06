"""
Naming helpers shared by every generated module.

Generated files never coordinate with each other, so these functions must
always spell the same raw name the same way.
"""

import re

# A run of separators, optionally followed by the character to upper-case
_SEPARATOR_PATTERN = re.compile(r"[-_]+(.)?")

# Single lowercase -> uppercase boundary; runs of capitals are not split
_LOWER_UPPER_PATTERN = re.compile(r"([a-z])([A-Z])")


def to_camel_case(text: str) -> str:
    """Collapse ``-``/``_`` separated segments into camelCase.

    Examples:
        "full_name" -> "fullName"
        "full-name" -> "fullName"
        "FullName" -> "FullName"
        "trailing_" -> "trailing"
    """
    return _SEPARATOR_PATTERN.sub(lambda m: m.group(1).upper() if m.group(1) else "", text)


def to_snake_case(text: str) -> str:
    """Convert camelCase or PascalCase text to snake_case.

    Examples:
        "FullName" -> "full_name"
        "fullName" -> "full_name"
        "HTTPCode" -> "httpcode"
    """
    return _LOWER_UPPER_PATTERN.sub(r"\1_\2", text).lower()


def to_kebab_case(text: str) -> str:
    """Same boundary rule as :func:`to_snake_case`, joined with ``-``."""
    return _LOWER_UPPER_PATTERN.sub(r"\1-\2", text).lower()


def to_camel_case_with_first_lower(text: str) -> str:
    """camelCase with the first character forced to lowercase.

    Examples:
        "FullName" -> "fullName"
        "full_name" -> "fullName"
        "ID" -> "iD"
    """
    if not text:
        return ""
    return text[0].lower() + to_camel_case(text)[1:]


def to_pascal_case(text: str) -> str:
    """camelCase with the first character upper-cased, used for method suffixes.

    Examples:
        "owner" -> "Owner"
        "owner_team" -> "OwnerTeam"
    """
    camel = to_camel_case_with_first_lower(text)
    if not camel:
        return ""
    return camel[0].upper() + camel[1:]
