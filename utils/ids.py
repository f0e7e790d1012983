from typing import Optional


def parse_id(raw: str) -> Optional[int]:
    """
    Parse a record id taken from a URL path
    :return: the id, or None unless raw is made of ASCII digits only
    """
    if not (raw.isascii() and raw.isdigit()):
        return None
    return int(raw)
