# backend/estate_board/services/remaining.py
"""Derived "remaining" budget: what is left of the scope after the executed share."""
import math
import re
from typing import Optional

_NON_DIGITS = re.compile(r"[^0-9]")


def numeric_scope(scope_value: Optional[str]) -> Optional[int]:
    """Strip everything but ASCII digits from a scope description, e.g. '₪1,000,000' -> 1000000.

    Returns None when the text holds no digits at all.
    """
    if scope_value is None:
        return None
    digits = _NON_DIGITS.sub("", scope_value)
    if not digits:
        return None
    return int(digits)


def derive_remaining(scope_value: Optional[str], execution: Optional[int]) -> Optional[str]:
    """Return round(numeric(scope) * (100 - execution) / 100) as a string, or None if not computable."""
    if execution is None:
        return None
    scope = numeric_scope(scope_value)
    if scope is None:
        return None

    execution = min(100, max(0, int(execution)))
    # round half up, matching how the amounts are shown in the UI
    value = math.floor(scope * (100 - execution) / 100 + 0.5)
    return str(max(0, value))


def remaining_for_create(data: dict) -> Optional[str]:
    if data.get("remaining") is not None:
        return data["remaining"]
    return derive_remaining(data.get("scope_value"), data.get("execution"))


def remaining_for_patch(patch: dict, scope_value: Optional[str], execution: Optional[int]) -> Optional[str]:
    """Recomputed remaining for a sparse patch, or None when the stored value should stay as is.

    Only applies when the patch touches scope or execution and leaves remaining alone;
    whichever input is missing from the patch is taken from the stored project.
    """
    if "remaining" in patch:
        return None
    if "scope_value" not in patch and "execution" not in patch:
        return None
    effective_scope = patch["scope_value"] if "scope_value" in patch else scope_value
    effective_execution = patch["execution"] if "execution" in patch else execution
    return derive_remaining(effective_scope, effective_execution)
