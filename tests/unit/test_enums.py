"""
Enum count and property assertions.

Count assertions catch silent additions/removals.
"""

import pytest

from core.errors import ErrorCode
from core.models.enums import CheckOutcome, EngineVariant, OperatingMode


class TestEngineVariantEnum:
    def test_has_exactly_3_values(self):
        assert len(EngineVariant) == 3

    def test_all_values_are_lowercase(self):
        for variant in EngineVariant:
            assert variant.value == variant.value.lower()

    def test_is_str_enum(self):
        assert isinstance(EngineVariant.MARIADB, str)

    def test_rejects_invalid_string(self):
        with pytest.raises(ValueError):
            EngineVariant("postgres")


class TestOperatingModeEnum:
    def test_has_exactly_4_values(self):
        assert len(OperatingMode) == 4

    def test_expected_members(self):
        names = {m.name for m in OperatingMode}
        assert names == {"UNCHECKED", "NORMAL", "SETUP", "BAD_CONFIGURATION"}


class TestCheckOutcomeEnum:
    def test_has_exactly_3_values(self):
        assert len(CheckOutcome) == 3

    def test_expected_members(self):
        names = {o.name for o in CheckOutcome}
        assert names == {"PASS", "FAIL", "SETUP"}


class TestErrorCodeEnum:
    def test_has_exactly_10_values(self):
        assert len(ErrorCode) == 10

    def test_value_equals_name(self):
        for code in ErrorCode:
            assert code.value == code.name
