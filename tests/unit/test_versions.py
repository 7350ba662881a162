"""
Server version parsing and gating.
"""

import pytest

from core.logic.versions import deficient_component, gate_version, parse_version
from core.models import EngineVariant, VersionTuple, minimum_version_for
from exceptions import VersionFormatError


class TestParseVersion:
    @pytest.mark.parametrize("raw,expected", [
        ("5.7.10", (5, 7, 10)),
        ("8.0.36-0ubuntu0.22.04.1", (8, 0, 36)),
        ("10.6.16-MariaDB-log", (10, 6, 16)),
        ("5.7.44-48-log", (5, 7, 44)),
        ("8.0.36.1", (8, 0, 36)),
    ])
    def test_parses_major_minor_patch(self, raw, expected):
        assert parse_version(raw) == VersionTuple(*expected)

    def test_str_is_dotted(self):
        assert str(parse_version("8.0.36-log")) == "8.0.36"

    @pytest.mark.parametrize("raw", ["5.7", "8", "", "8-0-36"])
    def test_fewer_than_three_parts_raises(self, raw):
        with pytest.raises(VersionFormatError) as exc_info:
            parse_version(raw)
        assert exc_info.value.version_string == raw

    @pytest.mark.parametrize("raw", ["5.x.10", "a.b.c", "5.7.10a", "5..10", "5.7.¹⁰", "8.0.²"])
    def test_non_numeric_component_raises(self, raw):
        with pytest.raises(VersionFormatError):
            parse_version(raw)


class TestDeficientComponent:
    def test_higher_major_passes_regardless_of_minor_patch(self):
        assert deficient_component(VersionTuple(8, 0, 0), VersionTuple(5, 7, 10)) is None

    def test_minor_below_minimum_names_component_2(self):
        assert deficient_component(VersionTuple(5, 6, 99), VersionTuple(5, 7, 10)) == 2

    def test_major_below_minimum_names_component_1(self):
        assert deficient_component(VersionTuple(4, 9, 9), VersionTuple(5, 7, 10)) == 1

    def test_patch_below_minimum_names_component_3(self):
        assert deficient_component(VersionTuple(5, 7, 9), VersionTuple(5, 7, 10)) == 3

    def test_exact_minimum_passes(self):
        assert deficient_component(VersionTuple(5, 7, 10), VersionTuple(5, 7, 10)) is None

    def test_components_compared_individually_within_same_major(self):
        # 5.8.0 has a patch below 10
        assert deficient_component(VersionTuple(5, 8, 0), VersionTuple(5, 7, 10)) == 3

    def test_zero_version_fails_on_first_component(self):
        assert deficient_component(VersionTuple(0, 0, 0), VersionTuple(10, 3, 0)) == 1


class TestGateVersion:
    @pytest.mark.parametrize("variant,version,ok", [
        (EngineVariant.MYSQL, (8, 0, 36), True),
        (EngineVariant.MYSQL, (5, 7, 10), True),
        (EngineVariant.MYSQL, (5, 6, 51), False),
        (EngineVariant.PERCONA, (5, 7, 44), True),
        (EngineVariant.MARIADB, (10, 3, 0), True),
        (EngineVariant.MARIADB, (10, 2, 44), False),
        (EngineVariant.MARIADB, (11, 2, 0), True),
    ])
    def test_against_family_minimum(self, variant, version, ok):
        assert gate_version(VersionTuple(*version), minimum_version_for(variant)) is ok
