import pytest

from fix_decoder.fix_parser import (
    MISSING_EQUALS_SKIP,
    EmptyInputError,
    delimiter_label,
    extract_tag,
    parse_delimiter,
    resolve_delimiter,
    swap_delimiter,
    tokenize,
)
from fix_decoder.fix_tags import Delimiter


@pytest.mark.parametrize("raw", ["", "   ", "\n\t  "])
def test_tokenize_rejects_empty_input(raw):
    with pytest.raises(EmptyInputError):
        tokenize(raw, Delimiter.PIPE)


def test_empty_input_error_is_a_value_error_with_message():
    with pytest.raises(ValueError, match="FIX message"):
        tokenize("  ", Delimiter.SOH)


def test_tokenize_splits_on_first_equals_only():
    assert tokenize("58=a=b|35=0", Delimiter.PIPE) == [("58", "a=b"), ("35", "0")]


def test_tokenize_strips_whitespace_and_trailing_delimiters():
    assert tokenize("  8=FIX.4.2|35=A|||  ", Delimiter.PIPE) == [("8", "FIX.4.2"), ("35", "A")]


def test_tokenize_drops_empty_segments():
    assert tokenize("8=FIX.4.2||35=A", Delimiter.PIPE) == [("8", "FIX.4.2"), ("35", "A")]


def test_tokenize_soh(new_order_single_soh):
    pairs = tokenize(new_order_single_soh, Delimiter.SOH)
    assert len(pairs) == 10
    assert pairs[0] == ("8", "FIX.4.4")
    assert pairs[-1] == ("10", "092")


def test_tokenize_keeps_duplicate_tags_in_order():
    pairs = tokenize("8=FIX.4.4|587=0|555=2|587=1", Delimiter.PIPE)
    assert [tag for tag, _ in pairs] == ["8", "587", "555", "587"]
    assert [value for tag, value in pairs if tag == "587"] == ["0", "1"]


def test_segment_without_equals_kept_with_empty_value_by_default():
    assert tokenize("8=FIX.4.4|garbage|35=0", Delimiter.PIPE) == [
        ("8", "FIX.4.4"),
        ("garbage", ""),
        ("35", "0"),
    ]


def test_segment_without_equals_can_be_skipped():
    pairs = tokenize("8=FIX.4.4|garbage|35=0", Delimiter.PIPE, on_missing_equals=MISSING_EQUALS_SKIP)
    assert pairs == [("8", "FIX.4.4"), ("35", "0")]


def test_unknown_missing_equals_policy_rejected():
    with pytest.raises(ValueError):
        tokenize("8=FIX.4.4", Delimiter.PIPE, on_missing_equals="guess")


def test_only_delimiters_gives_no_fields():
    assert tokenize("|||", Delimiter.PIPE) == []


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("8=FIX.4.4\x0135=0", Delimiter.SOH),
        ("8=FIX.4.4|35=0", Delimiter.PIPE),
        ("8=FIX.4.4|58=a\x0135=0", Delimiter.SOH),
        ("8=FIX.4.4", Delimiter.SOH),
    ],
)
def test_resolve_delimiter_inference(raw, expected):
    assert resolve_delimiter(raw) == expected


def test_explicit_delimiter_overrides_inference():
    assert resolve_delimiter("8=FIX.4.4\x0158=a|b", Delimiter.PIPE) == Delimiter.PIPE
    assert resolve_delimiter("8=FIX.4.4|35=0", "soh") == Delimiter.SOH


@pytest.mark.parametrize(
    "name, expected",
    [
        ("|", Delimiter.PIPE),
        ("pipe", Delimiter.PIPE),
        ("PIPE", Delimiter.PIPE),
        ("soh", Delimiter.SOH),
        ("^A", Delimiter.SOH),
        ("\\x01", Delimiter.SOH),
        ("\x01", Delimiter.SOH),
        (None, None),
    ],
)
def test_parse_delimiter(name, expected):
    assert parse_delimiter(name) == expected


@pytest.mark.parametrize("name", [",", "tab", " ", ""])
def test_parse_delimiter_rejects_others(name):
    with pytest.raises(ValueError):
        parse_delimiter(name)


def test_extract_tag_returns_first_occurrence():
    pairs = [("8", "FIX.4.2"), ("35", "D"), ("8", "FIX.4.4")]
    assert extract_tag(pairs, "8") == "FIX.4.2"
    assert extract_tag(pairs, "55") is None


def test_swap_delimiter_both_ways(new_order_single):
    delimiter, soh_text = swap_delimiter(new_order_single, Delimiter.PIPE)
    assert delimiter == Delimiter.SOH
    assert "|" not in soh_text
    assert soh_text.count("\x01") == new_order_single.count("|")

    delimiter, pipe_text = swap_delimiter(soh_text, delimiter)
    assert delimiter == Delimiter.PIPE
    assert pipe_text == new_order_single


def test_delimiter_labels():
    assert delimiter_label(Delimiter.PIPE) == "Pipe (|)"
    assert delimiter_label(Delimiter.SOH) == "SOH (ASCII 0x01)"
