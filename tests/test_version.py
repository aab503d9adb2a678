import logging

from fix_decoder.fix_tags import FixVersion
from fix_decoder.fix_version import available_versions, resolve_version


def test_available_versions_in_protocol_order():
    assert available_versions() == [
        "FIX.4.0", "FIX.4.1", "FIX.4.2", "FIX.4.3", "FIX.4.4",
        "FIX.5.0", "FIX.5.0SP1", "FIX.5.0SP2", "FIXT.1.1",
    ]


def test_each_version_resolves_to_itself():
    for version in available_versions():
        assert resolve_version([("8", version), ("35", "0")]) == version


def test_first_begin_string_wins():
    pairs = [("8", "FIX.4.2"), ("9", "5"), ("8", "FIX.4.4")]
    assert resolve_version(pairs) == FixVersion.FIX42


def test_empty_begin_string_is_skipped():
    assert resolve_version([("8", ""), ("8", "FIX.4.1")]) == FixVersion.FIX41


def test_begin_string_is_trimmed():
    assert resolve_version([("8", " FIX.5.0SP2 ")]) == FixVersion.FIX50SP2


def test_missing_begin_string_defaults_to_fix44():
    assert resolve_version([("35", "0"), ("49", "A")]) == FixVersion.FIX44
    assert resolve_version([]) == FixVersion.FIX44


def test_unknown_begin_string_defaults_and_warns(caplog):
    caplog.set_level(logging.WARNING, logger="fix_decoder.version")
    assert resolve_version([("8", "FIX.9.9"), ("8", "FIX.4.2")]) == FixVersion.FIX44
    assert "Unrecognised BeginString" in caplog.text


def test_custom_default():
    assert resolve_version([("35", "0")], default=FixVersion.FIX50) == FixVersion.FIX50
