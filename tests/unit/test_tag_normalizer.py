import pytest

from domain.taxonomy import (
    DEFAULT_TAG_ALIASES,
    TagNormalizer,
    default_normalizer,
    is_valid_tag,
    normalize_tag,
    normalize_tags,
    suggest_tags,
    to_screaming_snake_case,
)


def test_every_alias_resolves_to_its_tag_regardless_of_case_and_padding() -> None:
    normalizer = TagNormalizer()
    for alias, tag in DEFAULT_TAG_ALIASES:
        assert normalizer.normalize_tag(alias) == tag
        assert normalizer.normalize_tag(f"  {alias.upper()}  ") == tag


def test_padded_mixed_case_phrase() -> None:
    assert normalize_tag("  Two Pointers  ") == "TWO_POINTERS"


@pytest.mark.parametrize("raw", ["", "   ", "\t\n", None, 42, 3.5, ["loops"], {"loops": 1}])
def test_blank_or_non_string_input_yields_none(raw) -> None:
    assert normalize_tag(raw) is None


def test_fallback_strips_punctuation() -> None:
    assert normalize_tag("xyz123!!") == "XYZ123"


def test_fallback_splits_camel_case() -> None:
    assert normalize_tag("fooBarBaz") == "FOO_BAR_BAZ"


def test_fallback_for_unknown_phrase_is_not_recognized() -> None:
    tag = normalize_tag("xyz123!!")
    assert tag is not None
    assert not is_valid_tag(tag)


def test_canonical_tag_that_is_also_an_alias_is_idempotent() -> None:
    assert normalize_tag("LOOPS") == "LOOPS"
    assert normalize_tag("STACK") == "STACK"
    assert normalize_tag("SET") == "SET"


def test_snake_case_fallback_is_stable() -> None:
    assert to_screaming_snake_case("BINARY_SEARCH") == "BINARY_SEARCH"
    assert normalize_tag("BINARY_SEARCH") == "BINARY_SEARCH"
    assert normalize_tag("ZZ_QQ_9") == "ZZ_QQ_9"


def test_to_screaming_snake_case_examples() -> None:
    assert to_screaming_snake_case("  prefix   sum ") == "PREFIX_SUM"
    assert to_screaming_snake_case("key-value/pair") == "KEY_VALUE_PAIR"
    assert to_screaming_snake_case("slidingWindow") == "SLIDING_WINDOW"
    assert to_screaming_snake_case("!!!") == ""


def test_substring_scan_uses_declaration_order() -> None:
    # "array" (LIST_AND_STRING) is declared before "1d array" (1D_ARRAYS)
    assert normalize_tag("arrays of numbers") == "LIST_AND_STRING"
    # phrase contains "sliding window"
    assert normalize_tag("sliding window problems") == "SLIDING_WINDOWS"
    # exact match beats the earlier substring hit on "array"
    assert normalize_tag("array problem") == "1D_ARRAYS"


def test_short_phrase_contained_in_alias_matches_first_such_alias() -> None:
    # "oop" is a substring of "loop", the first alias containing it
    assert normalize_tag("oop") == "LOOPS"


def test_alias_inside_longer_phrase() -> None:
    normalizer = TagNormalizer(aliases=[("stack", "STACK"), ("dp", "DYNAMIC_PROGRAMMING")])
    assert normalizer.normalize_tag("classic dp") == "DYNAMIC_PROGRAMMING"


def test_custom_table_order_decides_substring_ties() -> None:
    a_first = TagNormalizer(aliases=[("tree", "BINARY_TREE"), ("bst", "BINARY_SEARCH_TREE")])
    b_first = TagNormalizer(aliases=[("bst", "BINARY_SEARCH_TREE"), ("tree", "BINARY_TREE")])
    assert a_first.normalize_tag("bst tree") == "BINARY_TREE"
    assert b_first.normalize_tag("bst tree") == "BINARY_SEARCH_TREE"


def test_exact_lookup_prefers_first_declaration_of_duplicate_key() -> None:
    normalizer = TagNormalizer(aliases=[("queue", "STACK"), ("queue", "QUEUE")])
    assert normalizer.normalize_tag("queue") == "STACK"


def test_normalize_tags_collapses_duplicates() -> None:
    assert normalize_tags(["loop", "loops", "for loop"]) == {"LOOPS"}


def test_normalize_tags_empty_and_malformed() -> None:
    assert normalize_tags([]) == set()
    assert normalize_tags(None) == set()
    assert normalize_tags("loops") == set()
    assert normalize_tags({"loops": 1}) == set()


def test_normalize_tags_drops_invalid_members() -> None:
    assert normalize_tags(("dp", None, "", 7, "stack")) == {"DYNAMIC_PROGRAMMING", "STACK"}


def test_suggest_array_covers_both_array_tags_without_duplicates() -> None:
    suggestions = suggest_tags("array")
    assert "LIST_AND_STRING" in suggestions
    assert "1D_ARRAYS" in suggestions
    assert len(suggestions) == len(set(suggestions))
    # first seen during the scan comes first
    assert suggestions.index("LIST_AND_STRING") < suggestions.index("1D_ARRAYS")


@pytest.mark.parametrize("raw", ["", "  ", None, 1, ["array"]])
def test_suggest_invalid_input_is_empty(raw) -> None:
    assert suggest_tags(raw) == []


def test_is_valid_tag() -> None:
    assert is_valid_tag("LOOPS")
    assert not is_valid_tag("NOT_A_REAL_TAG")
    assert not is_valid_tag("loops")
    assert not is_valid_tag(None)
    assert not is_valid_tag(["LOOPS"])


def test_available_tags_are_distinct_and_ordered() -> None:
    tags = default_normalizer().available_tags()
    assert tags[0] == "IF_ELSE"
    assert len(tags) == len(set(tags))
    assert set(tags) == {tag for _, tag in DEFAULT_TAG_ALIASES}


def test_default_normalizer_is_shared() -> None:
    assert default_normalizer() is default_normalizer()
