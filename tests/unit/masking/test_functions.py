"""Unit tests for masking function token resolution."""

from __future__ import annotations

import pytest
from structlog.testing import capture_logs

from sqlmask.masking import MaskingFunction, resolve_masking_function


class TestResolveMaskingFunction:
    @pytest.mark.parametrize(
        "token, expected",
        [
            ("CCN", MaskingFunction.CREDIT_CARD_NUMBER),
            ("NoMasking", MaskingFunction.NO_MASKING),
            ("Number", MaskingFunction.NUMBER),
            ("Text", MaskingFunction.TEXT),
            ("Email", MaskingFunction.EMAIL),
            ("SSN", MaskingFunction.SOCIAL_SECURITY_NUMBER),
        ],
    )
    def test_recognised_tokens(self, token: str, expected: MaskingFunction) -> None:
        assert resolve_masking_function(token) is expected

    @pytest.mark.parametrize("token", ["Bogus", "ccn", "text", "", " Text", "Default"])
    def test_unrecognised_token_falls_back_to_default(self, token: str) -> None:
        assert resolve_masking_function(token) is MaskingFunction.DEFAULT

    def test_absent_token_is_default(self) -> None:
        assert resolve_masking_function(None) is MaskingFunction.DEFAULT

    def test_fallback_is_logged(self) -> None:
        with capture_logs() as logs:
            resolve_masking_function("Bogus")
        assert logs[0]["event"] == "masking_function.unrecognised_token"
        assert logs[0]["token"] == "Bogus"

    def test_enum_values_are_wire_names(self) -> None:
        assert MaskingFunction.SOCIAL_SECURITY_NUMBER.value == "SocialSecurityNumber"
        assert MaskingFunction("CreditCardNumber") is MaskingFunction.CREDIT_CARD_NUMBER
