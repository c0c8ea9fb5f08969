from dataclasses import dataclass


@dataclass(frozen=True)
class URLEntry:
    # id: short code the entry is addressed by; url: canonicalized destination
    id: str
    url: str
