# backend/estate_board/utils/standard.py
"""The free-text `standard` field: leading predefined finish levels, then an optional note."""
from typing import List, Optional, Sequence, Tuple

STANDARD_OPTIONS = (
    "COMFORT", "COMFORT +", "COMFORT + GLASS",
    "SMART 1", "SMART 2", "SMART 3",
    "PRESTIGE 4", "PRESTIGE 5", "PRESTIGE 6",
)


def split_standard(value: Optional[str]) -> Tuple[List[str], str]:
    """Split off the leading known options (upper-cased, de-duplicated).

    Everything from the first part that is not a known option onwards is the note,
    returned as written apart from surrounding whitespace.
    """
    tokens: List[str] = []
    rest = value or ""
    while rest:
        head, separator, tail = rest.partition(",")
        upper = " ".join(head.upper().split())
        if upper in STANDARD_OPTIONS:
            if upper not in tokens:
                tokens.append(upper)
        elif upper or not separator:
            break
        rest = tail
    return tokens, rest.strip()


def join_standard(tokens: Sequence[str], note: str = "") -> Optional[str]:
    parts = list(tokens)
    if note and note.strip():
        parts.append(note.strip())
    return ", ".join(parts) or None


def normalize_standard(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    return join_standard(*split_standard(value))
