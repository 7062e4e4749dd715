import pytest

from chainbot.game.errors import ConfigurationError
from chainbot.game.link_sources import LINK_SOURCES, get_link_source
from chainbot.game.links import (
    KeyIndex, Link, build_pool, check_playable, get_link_ends, get_link_starts, to_id,
)


def _links(*names):
    return [Link.from_name(name) for name in names]


def test_to_id_normalizes_names():
    assert to_id("Mr. Mime") == "mrmime"
    assert to_id("Farfetch'd") == "farfetchd"
    assert to_id("  Will-O-Wisp ") == "willowisp"
    assert to_id(None) == ""


def test_link_keys_use_first_and_last_characters():
    link = Link.from_name("Pikachu")
    assert get_link_starts(link) == ["p"]
    assert get_link_ends(link) == ["u"]
    assert get_link_starts(link, 2) == ["pi"]
    assert get_link_ends(link, 2) == ["hu"]


def test_keys_leading_with_a_digit_are_absent():
    porygon2 = Link.from_name("Porygon2")
    assert get_link_starts(porygon2) == ["p"]
    assert get_link_ends(porygon2) == []
    assert get_link_starts(Link.from_name("10,000,000 Volt Thunderbolt")) == []
    # Too short for the key length
    assert get_link_ends(Link.from_name("Mew"), 4) == []


def test_build_pool_filters_letter_based_candidates():
    candidates = _links("Porygon2", "Pikachu", "Hidden Power", "Hydro Pump")
    candidates.append(Link.from_name("Rotom-Wash", forme=True))
    candidates.append(Link.from_name("Pikachu"))

    pool = build_pool(candidates, excluded=["hiddenpower"])
    assert list(pool) == ["pikachu", "hydropump"]

    with_formes = build_pool(candidates, accepts_formes=True, excluded=["hiddenpower"])
    assert "rotomwash" in with_formes

    not_letter_based = build_pool(candidates, letter_based=False, excluded=["hiddenpower"])
    assert "porygon2" in not_letter_based
    assert "hiddenpower" in not_letter_based


def test_build_pool_rejects_empty_pool():
    with pytest.raises(ConfigurationError):
        build_pool(_links("Porygon2", "123"))


@pytest.mark.parametrize("variant", sorted(LINK_SOURCES))
def test_every_pooled_candidate_has_both_keys(variant):
    source = get_link_source(variant)
    pool = build_pool(source.get_links(), excluded=source.excluded)
    for link in pool.values():
        assert get_link_starts(link)
        assert get_link_ends(link)


def test_key_index_counts_distinct_links():
    pool = build_pool(_links("Cat", "Cot", "Top", "Cat"))
    index = KeyIndex.from_pool(pool)
    assert index.starts == {"c": 2, "t": 1}
    assert index.ends == {}

    reverse = KeyIndex.from_pool(pool, reverse_links=True)
    assert reverse.ends == {"t": 2, "p": 1}


def test_check_playable_requires_two_viable_links():
    pool = build_pool(_links("Cat", "Top", "Pen"))
    index = KeyIndex.from_pool(pool)
    assert check_playable(pool, index) == ["cat", "top"]

    dead_end = build_pool(_links("Cat", "Dog"))
    with pytest.raises(ConfigurationError):
        check_playable(dead_end, KeyIndex.from_pool(dead_end))


def test_self_linking_key_is_not_viable():
    # "tot" consumes the only "t" start itself
    pool = build_pool(_links("Tot", "Cat"))
    index = KeyIndex.from_pool(pool)
    assert not index.is_viable(pool["tot"])
    assert index.is_viable(pool["cat"])


def test_unknown_variant_has_no_pool():
    with pytest.raises(ConfigurationError):
        get_link_source("berries")
    assert get_link_source("move").name == "moves"
    assert get_link_source(None).name == "pokemon"
