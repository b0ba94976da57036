import pytest

from Cores import Taxonomy
from Cores.FilterCore import filter_sections, is_search_active
from Cores.Operators import Operator

T = Taxonomy.categories()
QUERIES = ["de", "merge", "MERGE", "take", "with", "x", "zzz", "e", "flatMap", "Index"]


def _by_name(result):
    return {s.name: list(s.rows) for s in result}


def test_de_groups_matches_under_original_categories():
    r = _by_name(filter_sections(T, "de"))
    assert Operator.DEBOUNCE in r["Filtering"]
    assert Operator.DELAY_SUBSCRIPTION in r["Transforming"]
    assert "Mathematical" not in r
    assert "Utility" not in r


def test_case_insensitive():
    assert filter_sections(T, "MERGE") == filter_sections(T, "merge")
    assert _by_name(filter_sections(T, "merge")) == {"Combining": [Operator.MERGE]}
    assert _by_name(filter_sections(T, "FlatMapL")) == {"Transforming": [Operator.FLAT_MAP_LATEST]}


@pytest.mark.parametrize("q", QUERIES)
def test_no_empty_categories(q):
    assert all(len(s.rows) > 0 for s in filter_sections(T, q))


@pytest.mark.parametrize("q", QUERIES)
def test_order_is_preserved(q):
    result = filter_sections(T, q)
    order = [s.name for s in T]
    idx = [order.index(s.name) for s in result]
    assert idx == sorted(idx)
    original = _by_name(T)
    for s in result:
        pos = [original[s.name].index(op) for op in s.rows]
        assert pos == sorted(pos)


@pytest.mark.parametrize("q", QUERIES)
def test_every_match_contains_query(q):
    result = filter_sections(T, q)
    kept = {op for s in result for op in s.rows}
    expected = {op for op in Operator if q.lower() in op.description.lower()}
    assert kept == expected


def test_idempotent_and_leaves_taxonomy_untouched():
    before = tuple(T)
    assert filter_sections(T, "take") == filter_sections(T, "take")
    assert T == before


def test_no_match_is_empty():
    assert filter_sections(T, "nothing-like-this") == ()


def test_substring_only_no_trimming():
    assert filter_sections(T, " merge") == ()
    assert filter_sections(T, "skipwhile") != ()


def test_empty_text_keeps_everything():
    assert filter_sections(T, "") == T


def test_search_active_needs_session_and_text():
    assert is_search_active(True, "de")
    assert not is_search_active(True, "")
    assert not is_search_active(False, "de")
    assert not is_search_active(True, None)
