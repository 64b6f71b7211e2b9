from __future__ import annotations

from aboutinfo.domain.about import build_mappings, substitute


def test_build_mappings_stops_at_first_gap() -> None:
    assert build_mappings({"0": "a", "1": "b", "3": "d"}) == ("a", "b")


def test_build_mappings_requires_zero_key() -> None:
    assert build_mappings({"1": "b"}) == ()
    assert build_mappings(None) == ()
    assert build_mappings({}) == ()


def test_substitute_none_returns_none() -> None:
    assert substitute(None, {"x": "y"}, ("a",)) is None


def test_substitute_uses_bundle_value_keyed_by_raw_value() -> None:
    bundle = {"%aboutText": "Build {0}"}
    assert substitute("%aboutText", bundle, ("20240101",)) == "Build 20240101"


def test_substitute_passes_through_unknown_values() -> None:
    assert substitute("Plain text", {"other": "x"}, ()) == "Plain text"
    assert substitute("Plain text", None, ()) == "Plain text"


def test_substitute_keeps_out_of_range_placeholders() -> None:
    assert substitute("v{0} ({1}) {7}", None, ("1.0", "beta")) == "v1.0 (beta) {7}"


def test_substitute_without_mappings_leaves_placeholders() -> None:
    assert substitute("Build {0}", None, ()) == "Build {0}"


def test_substitute_ignores_non_numeric_braces() -> None:
    assert substitute("{name} {0} {-1}", None, ("x",)) == "{name} x {-1}"


def test_substitute_does_not_rescan_mapped_values() -> None:
    assert substitute("{0}", None, ("{1}", "nested")) == "{1}"
