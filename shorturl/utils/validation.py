import re

URL_PATTERN = re.compile(
    r"((https?|ftp|smtp)://)?(www\.)?[a-zA-Z0-9]+(\.[a-z]{2,}){1,3}(\?[a-zA-Z0-9-_%]+=[a-zA-Z0-9-_%]+&?)*$"
)
CANONICAL_PREFIX = "http://"


def is_valid_url(url: str) -> bool:
    """Whole-string match against URL_PATTERN."""
    return URL_PATTERN.fullmatch(url) is not None


def canonicalize_url(url: str) -> str:
    # Prefix is added even when the input already carries a scheme.
    return CANONICAL_PREFIX + url
