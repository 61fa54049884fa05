"""
Pet Directory - Slug helpers
"""
import re

_NON_ALNUM = re.compile(r"[^a-z0-9]+")


def slugify(name: str) -> str:
    """
    Turn a display name into a lowercase, hyphen-delimited URL slug.

    Every run of characters outside [a-z0-9] becomes a single hyphen and
    leading/trailing hyphens are stripped, so "'s-Hertogenbosch" becomes
    "s-hertogenbosch". Names without any ASCII letters or digits give "".
    """
    return _NON_ALNUM.sub("-", name.lower()).strip("-")
