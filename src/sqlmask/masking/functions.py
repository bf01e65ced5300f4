"""Masking functions and the user-facing tokens that select them."""
from __future__ import annotations

from enum import Enum

from sqlmask.observability.logging import get_logger

log = get_logger(__name__)


class MaskingFunction(str, Enum):
    """Transformation the service applies to a masked value."""

    CREDIT_CARD_NUMBER = "CreditCardNumber"
    NO_MASKING = "NoMasking"
    NUMBER = "Number"
    TEXT = "Text"
    EMAIL = "Email"
    SOCIAL_SECURITY_NUMBER = "SocialSecurityNumber"
    DEFAULT = "Default"


CCN = "CCN"
NO_MASKING = "NoMasking"
NUMBER = "Number"
TEXT = "Text"
EMAIL = "Email"
SSN = "SSN"

# Exact, case-sensitive match.
MASKING_FUNCTION_TOKENS: dict[str, MaskingFunction] = {
    CCN: MaskingFunction.CREDIT_CARD_NUMBER,
    NO_MASKING: MaskingFunction.NO_MASKING,
    NUMBER: MaskingFunction.NUMBER,
    TEXT: MaskingFunction.TEXT,
    EMAIL: MaskingFunction.EMAIL,
    SSN: MaskingFunction.SOCIAL_SECURITY_NUMBER,
}


def resolve_masking_function(token: str | None) -> MaskingFunction:
    """Map a user token to its :class:`MaskingFunction`.

    Unrecognised or absent tokens resolve to ``MaskingFunction.DEFAULT``
    without raising, so a typo such as ``"ccn"`` silently selects the
    default function.
    """
    if token is None:
        return MaskingFunction.DEFAULT
    function = MASKING_FUNCTION_TOKENS.get(token)
    if function is None:
        log.debug("masking_function.unrecognised_token", token=token)
        return MaskingFunction.DEFAULT
    return function


__all__ = [
    "CCN",
    "EMAIL",
    "MASKING_FUNCTION_TOKENS",
    "NO_MASKING",
    "NUMBER",
    "SSN",
    "TEXT",
    "MaskingFunction",
    "resolve_masking_function",
]
