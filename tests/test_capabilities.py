"""
Tests for sugarscan.capabilities and sugarscan.config modules.

Tests name resolution, fatal capability errors and scan options.
"""

import collections.abc
import os.path

import pytest

import matcherlib
from sugarscan.capabilities import CapabilityError, CapabilityResolver
from sugarscan.config import (
    DEFAULT_MARKER_TYPE,
    DEFAULT_MATCHER_TYPE,
    ScanOptions,
)


@pytest.fixture
def resolver():
    return CapabilityResolver()


class TestResolve:
    """Tests for CapabilityResolver.resolve."""

    def test_colon_form(self, resolver):
        assert resolver.resolve("matcherlib:Factory") is matcherlib.Factory

    def test_dotted_form(self, resolver):
        assert resolver.resolve("matcherlib.Factory") is matcherlib.Factory

    def test_longest_module_prefix(self, resolver):
        assert resolver.resolve("collections.abc.Sized") is collections.abc.Sized

    def test_module(self, resolver):
        assert resolver.resolve("os.path") is os.path

    def test_nested_attribute(self, resolver):
        assert resolver.resolve("sample_matchers:SampleMatchers.anything") is not None

    def test_missing_module(self, resolver):
        with pytest.raises(ValueError):
            resolver.resolve("no_such_module_for_sugarscan.Thing")

    def test_module_failing_at_import_dotted(self, resolver):
        with pytest.raises(ValueError, match="ImportError"):
            resolver.resolve("broken_import.Unreachable")

    def test_module_failing_at_import_colon(self, resolver):
        with pytest.raises(ValueError, match="ImportError"):
            resolver.resolve("broken_import:Unreachable")

    def test_missing_attribute(self, resolver):
        with pytest.raises(ValueError, match="no attribute"):
            resolver.resolve("matcherlib:NoSuchThing")

    def test_empty_name(self, resolver):
        with pytest.raises(ValueError):
            resolver.resolve("")


class TestResolveType:
    """Tests for class-only resolution and member lookup."""

    def test_resolves_class(self, resolver):
        assert resolver.resolve_type("matcherlib:Matcher") is matcherlib.Matcher

    def test_non_class_is_fatal(self, resolver):
        with pytest.raises(CapabilityError, match="not a class"):
            resolver.resolve_type("matcherlib:factory")

    def test_missing_is_fatal_and_chained(self, resolver):
        with pytest.raises(CapabilityError) as excinfo:
            resolver.resolve_type("matcherlib:Missing")
        assert isinstance(excinfo.value.__cause__, ValueError)

    def test_resolve_member(self, resolver):
        assert resolver.resolve_member(matcherlib.Factory, "excludes") is matcherlib.Factory.excludes

    def test_missing_member_is_fatal(self, resolver):
        with pytest.raises(CapabilityError, match="excludes"):
            resolver.resolve_member(matcherlib.MarkerWithoutExcludes, "excludes")


class TestResolveCapabilities:
    """Tests for resolving everything a scan needs."""

    def test_happy_path(self, resolver, options):
        capabilities = resolver.resolve_capabilities(options)
        assert capabilities.marker_type is matcherlib.Factory
        assert capabilities.matcher_type is matcherlib.Matcher
        assert capabilities.excludes_accessor == "excludes"

    def test_missing_marker(self, resolver, options):
        bad = ScanOptions(marker_type="matcherlib:Nope", matcher_type=options.matcher_type)
        with pytest.raises(CapabilityError, match="Cannot load matcher core"):
            resolver.resolve_capabilities(bad)

    def test_missing_matcher(self, resolver, options):
        bad = ScanOptions(marker_type=options.marker_type, matcher_type="no_such_lib_xyz.Matcher")
        with pytest.raises(CapabilityError):
            resolver.resolve_capabilities(bad)

    def test_marker_without_accessor(self, resolver, options):
        bad = ScanOptions(
            marker_type="matcherlib:MarkerWithoutExcludes",
            matcher_type=options.matcher_type,
        )
        with pytest.raises(CapabilityError, match="excludes"):
            resolver.resolve_capabilities(bad)


class TestScanOptions:
    """Tests for ScanOptions defaults and environment overrides."""

    def test_defaults(self):
        options = ScanOptions()
        assert options.marker_type == DEFAULT_MARKER_TYPE
        assert options.matcher_type == DEFAULT_MATCHER_TYPE
        assert options.excludes_accessor == "excludes"
        assert options.bound_separator == " & "

    def test_from_env_without_environment(self, monkeypatch):
        monkeypatch.delenv("SUGARSCAN_MARKER_TYPE", raising=False)
        monkeypatch.delenv("SUGARSCAN_MATCHER_TYPE", raising=False)
        assert ScanOptions.from_env() == ScanOptions()

    def test_from_env_reads_environment(self, scan_env):
        options = ScanOptions.from_env()
        assert options.marker_type == "matcherlib:Factory"
        assert options.matcher_type == "matcherlib:Matcher"

    def test_explicit_values_win(self, scan_env):
        options = ScanOptions.from_env(marker_type="other:Marker")
        assert options.marker_type == "other:Marker"
        assert options.matcher_type == "matcherlib:Matcher"
