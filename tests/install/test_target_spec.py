"""
Tests for target spec parsing — ``name[:version]``.
"""

import pytest

from qbit.core.services.install.domain.target import TargetSpec, parse_target_spec
from qbit.core.services.install.errors import InvalidInput


class TestParseTargetSpec:
    @pytest.mark.parametrize("raw", ["python", "  python  ", "Vendor.App", "git\t"])
    def test_name_without_colon(self, raw):
        assert parse_target_spec(raw) == TargetSpec(raw.strip(), None)

    def test_name_and_version(self):
        spec = parse_target_spec("python:3.12")
        assert spec.logical_name == "python"
        assert spec.inline_version == "3.12"

    def test_parts_are_trimmed(self):
        spec = parse_target_spec(" python : 3.12 ")
        assert spec == TargetSpec("python", "3.12")

    def test_splits_on_first_colon_only(self):
        spec = parse_target_spec("pkg:1:2")
        assert spec == TargetSpec("pkg", "1:2")

    @pytest.mark.parametrize("raw", ["a:", ":b", ":", "", "   ", "a:  "])
    def test_empty_parts_rejected(self, raw):
        with pytest.raises(InvalidInput):
            parse_target_spec(raw)

    def test_str_roundtrip_form(self):
        assert str(TargetSpec("python", "3.12")) == "python:3.12"
        assert str(TargetSpec("git")) == "git"
