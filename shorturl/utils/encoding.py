import uuid

SHORT_ID_LENGTH = 6


def generate_short_id() -> str:
    """Return the first six characters of a fresh UUID4 (lowercase hex).

    No collision check is made here; an empty string means generation failed.
    """
    return str(uuid.uuid4())[:SHORT_ID_LENGTH]
