import re

import pytest

from sqlbridge.utils.naming import (
    ALIAS_POOL_SIZE,
    ALIAS_SUFFIXES,
    alias_suffix,
    clean_alias,
    generate_alias,
    unqualify_entity_name,
)

ALIAS_RE = re.compile(r"^[a-z][a-z0-9_]*$")


def test_alias_from_qualified_entity_name():
    assert generate_alias("com.example.Order", 0) == "order0_"
    assert generate_alias("com.example.Order", 3) == "order3_"


def test_alias_truncates_long_roots():
    assert generate_alias("com.example.CustomerAddress", 1) == "customerad1_"


def test_alias_without_unique_ends_with_underscore():
    assert generate_alias("Order") == "order_"


def test_root_ending_in_digit_gets_x():
    assert generate_alias("Table1", 2) == "table1x2_"
    assert generate_alias("Table1", 2) != generate_alias("Table12", None)


def test_leading_non_letters_are_dropped():
    assert generate_alias("_1user", 0) == "user0_"


def test_root_without_letters_is_prefixed():
    assert clean_alias("123") == "x123"
    assert generate_alias("123", 0) == "x123x0_"


def test_illegal_characters_are_replaced():
    assert generate_alias("my-table", 0) == "my_table0_"
    assert generate_alias("Odd$Name", 0) == "odd_name0_"


def test_slash_cuts_entity_name():
    assert unqualify_entity_name("pkg.Entity/role") == "Entit"
    assert unqualify_entity_name("/leading") == "/leading"


@pytest.mark.parametrize(
    "description",
    ["Order", "com.example.Order", "Table1", "123", "my-table", "Ünïcode", "$tmp", "a.b.c/d"],
)
def test_aliases_are_legal_and_unique(description):
    aliases = [generate_alias(description, index) for index in range(60)]
    assert len(set(aliases)) == len(aliases)
    for alias in aliases:
        assert ALIAS_RE.match(alias), alias


def test_pool_and_computed_suffixes_share_format():
    assert len(ALIAS_SUFFIXES) == ALIAS_POOL_SIZE == 40
    assert alias_suffix(39) == "39_"
    assert alias_suffix(39) is ALIAS_SUFFIXES[39]
    assert alias_suffix(40) == "40_"
    assert generate_alias("Order", 39) == "order39_"
    assert generate_alias("Order", 40) == "order40_"


def test_negative_index_is_rejected():
    with pytest.raises(ValueError):
        generate_alias("Order", -1)
