# backend/estate_board/utils/filenames.py
"""Filename helpers for uploaded attachments.

Browsers and multipart parsers sometimes hand us a UTF-8 filename that was decoded as
Latin-1, so a Hebrew name such as "חוזה.pdf" arrives as "×\x97×\x95×\x96×\x94.pdf".
`recover_filename` undoes that when it can tell the re-decoded text is the better one.
"""
import re
from urllib.parse import quote

# Hebrew block
TARGET_SCRIPT_RANGE = ("\u0590", "\u05ff")

TARGET_CHAR_WEIGHT = 2
REPLACEMENT_CHAR_PENALTY = 3
MOJIBAKE_CHAR_PENALTY = 1
MOJIBAKE_SEQUENCE_PENALTY = 2

# Lead characters left behind when UTF-8 multi-byte text is read as Latin-1
_MOJIBAKE_CHARS = set("ÃÂ×Ðâ")
# "×" followed by a C1/Latin-1 continuation byte is a UTF-8 encoded Hebrew letter read as Latin-1
_MOJIBAKE_SEQUENCE = re.compile("[×ÃÂ][\u0080-\u00bf]")


def score_filename(name: str) -> int:
    """Higher is more plausible: target-script letters count up, corruption markers count down"""
    low, high = TARGET_SCRIPT_RANGE
    target = sum(1 for ch in name if low <= ch <= high)
    replacements = name.count("\ufffd")
    markers = sum(1 for ch in name if ch in _MOJIBAKE_CHARS)
    sequences = len(_MOJIBAKE_SEQUENCE.findall(name))
    return (
        TARGET_CHAR_WEIGHT * target
        - REPLACEMENT_CHAR_PENALTY * replacements
        - MOJIBAKE_CHAR_PENALTY * markers
        - MOJIBAKE_SEQUENCE_PENALTY * sequences
    )


def recover_filename(name: str) -> str:
    """Return whichever of `name` and its Latin-1 -> UTF-8 re-decoding scores higher.

    Names that cannot be Latin-1 encoded are already real Unicode and are returned as is.
    Ties keep the original.
    """
    if not name:
        return name
    try:
        candidate = name.encode("latin-1").decode("utf-8", errors="replace")
    except UnicodeEncodeError:
        return name

    if candidate == name:
        return name
    return candidate if score_filename(candidate) > score_filename(name) else name


def ascii_fallback(name: str) -> str:
    cleaned = "".join(ch if " " <= ch <= "~" and ch not in '"\\' else "_" for ch in name)
    return cleaned or "download"


def content_disposition(name: str, disposition: str = "attachment") -> str:
    """Header value with an ASCII fallback plus an RFC 5987 UTF-8 filename*"""
    return f"{disposition}; filename=\"{ascii_fallback(name)}\"; filename*=UTF-8''{quote(name, safe='')}"
