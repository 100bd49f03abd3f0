"""
Grid Pipeline Tests

derive() is a pure function: same inputs, same window, every time.

Covers:
  - Determinism / idempotence
  - Filter correctness against a brute-force oracle
  - Sort stability on ties (both directions)
  - Pagination math: ceil(N/P), slice bounds, out-of-range pages
  - Stage switches (search off, sort off, pagination off)
  - Column filters composed with search
  - The 25-record NATO scenario
"""

import pytest

from engine.grid.pipeline import derive, filter_rows, page_count, page_window
from engine.grid.types import GridWindow, to_text


def run(source, query="", field=None, direction="asc", page=1, page_size=10, **kw):
    kw.setdefault("sortable", True)
    kw.setdefault("searchable", True)
    return derive(source, query, field, direction, page, page_size, **kw)


# ============================================================================
# Determinism
# ============================================================================


class TestDeterminism:
    def test_same_inputs_same_window(self, nato_rows):
        first = run(nato_rows, "o", "name", "desc", 2, 3)
        for _ in range(20):
            again = run(nato_rows, "o", "name", "desc", 2, 3)
            assert again.rows == first.rows
            assert again.total_pages == first.total_pages

    def test_source_not_modified(self, nato_rows):
        before = [dict(r) for r in nato_rows]
        run(nato_rows, "a", "name", "desc", 1, 5)
        assert nato_rows == before


# ============================================================================
# Filtering
# ============================================================================


class TestFiltering:
    @pytest.mark.parametrize("query", ["", "a", "AL", "ie", "1", "zz", "o"])
    def test_filter_matches_oracle(self, nato_rows, query):
        expected = [
            r for r in nato_rows if any(query.lower() in to_text(v).lower() for v in r.values())
        ]
        window = run(nato_rows, query, paginate=False)
        assert window.rows == expected

    def test_filter_preserves_source_order(self, nato_rows):
        window = run(nato_rows, "ie", paginate=False)
        assert [r["name"] for r in window.rows] == ["Sierra", "Charlie", "Juliett"]

    def test_search_disabled_ignores_query(self, nato_rows):
        window = run(nato_rows, "zzz", searchable=False, paginate=False)
        assert len(window.rows) == 25

    def test_column_filters_after_search(self, staff_rows):
        rows = filter_rows(staff_rows, "e", {"role": "chef"})
        assert [r["id"] for r in rows] == ["u1", "u3", "u5"]

    def test_empty_column_filters_ignored(self, staff_rows):
        assert filter_rows(staff_rows, "", {"role": ""}) == staff_rows


# ============================================================================
# Sorting
# ============================================================================


class TestSorting:
    def test_sort_disabled_keeps_order(self, nato_rows):
        window = run(nato_rows, field="name", sortable=False, paginate=False)
        assert window.rows == nato_rows

    def test_no_field_keeps_order(self, nato_rows):
        window = run(nato_rows, field=None, paginate=False)
        assert window.rows == nato_rows

    def test_stable_on_ties(self):
        source = [{"g": "b", "i": 0}, {"g": "a", "i": 1}, {"g": "b", "i": 2}, {"g": "a", "i": 3}]
        asc = run(source, field="g", paginate=False)
        desc = run(source, field="g", direction="desc", paginate=False)
        assert [r["i"] for r in asc.rows] == [1, 3, 0, 2]
        assert [r["i"] for r in desc.rows] == [0, 2, 1, 3]

    def test_sort_applies_to_filtered_rows_only(self, nato_rows):
        window = run(nato_rows, "ie", "name", paginate=False)
        assert [r["name"] for r in window.rows] == ["Charlie", "Juliett", "Sierra"]

    def test_value_compare_passed_through(self):
        source = [{"n": 10}, {"n": 2}, {"n": 33}]
        window = run(source, field="n", paginate=False, value_compare=lambda a, b: a - b)
        assert [r["n"] for r in window.rows] == [2, 10, 33]


# ============================================================================
# Pagination
# ============================================================================


class TestPagination:
    @pytest.mark.parametrize(
        "count,size,pages",
        [(0, 10, 0), (1, 10, 1), (10, 10, 1), (11, 10, 2), (25, 10, 3), (25, 1, 25), (3, 7, 1)],
    )
    def test_page_count(self, count, size, pages):
        assert page_count(count, size) == pages

    def test_slices_are_contiguous(self, nato_rows, nato_names):
        pages = [run(nato_rows, field="name", page=k, page_size=10).rows for k in (1, 2, 3)]
        assert [len(p) for p in pages] == [10, 10, 5]
        flat = [r["name"] for p in pages for r in p]
        assert flat == nato_names

    def test_page_beyond_total_is_empty(self, nato_rows):
        window = run(nato_rows, page=4, page_size=10)
        assert window.rows == []
        assert window.total_pages == 3
        assert window.page == 4

    def test_page_zero_and_negative_are_empty(self, nato_rows):
        assert page_window(nato_rows, 0, 10) == []
        assert page_window(nato_rows, -1, 10) == []

    def test_empty_match_has_zero_pages(self, nato_rows):
        window = run(nato_rows, "no-such-thing")
        assert window.rows == []
        assert window.total_pages == 0
        assert window.total_count == 0

    def test_pagination_disabled(self, nato_rows):
        window = run(nato_rows, page=3, page_size=10, paginate=False)
        assert len(window.rows) == 25
        assert window.total_pages == 1
        assert window.total_count == 25


# ============================================================================
# Pager figures
# ============================================================================


class TestGridWindow:
    def test_showing_range(self, nato_rows):
        window = run(nato_rows, page=3, page_size=10)
        assert (window.start_index, window.end_index) == (21, 25)
        assert window.has_prev
        assert not window.has_next

    def test_first_page(self, nato_rows):
        window = run(nato_rows, page=1, page_size=10)
        assert (window.start_index, window.end_index) == (1, 10)
        assert window.has_next
        assert not window.has_prev

    def test_empty_window_range(self):
        window = GridWindow()
        assert (window.start_index, window.end_index) == (0, 0)
        assert not window.has_next


# ============================================================================
# Scenario
# ============================================================================


class TestNatoScenario:
    def test_first_page_sorted(self, nato_rows, nato_names):
        window = run(nato_rows, field="name", page=1, page_size=10)
        assert [r["name"] for r in window.rows] == nato_names[:10]
        assert window.total_pages == 3

    def test_search_narrows_to_one_page(self, nato_rows):
        window = run(nato_rows, "ie", "name", page=1, page_size=10)
        assert window.total_pages == 1
        assert [r["name"] for r in window.rows] == ["Charlie", "Juliett", "Sierra"]
