"""
Grid Matcher Tests

Covers:
  - Empty query matches everything
  - Case-insensitive substring over every field (not just displayed columns)
  - Text form of numbers, booleans, None and nested values
  - Column filters (AND across fields, empty filters ignored)
"""

from engine.grid.matcher import matches, matches_filters
from engine.grid.types import to_text


class TestToText:
    def test_string_unchanged(self):
        assert to_text("Alpha") == "Alpha"

    def test_booleans_lowercase(self):
        assert to_text(True) == "true"
        assert to_text(False) == "false"

    def test_integral_float_has_no_fraction(self):
        assert to_text(3.0) == "3"
        assert to_text(2.5) == "2.5"

    def test_int(self):
        assert to_text(15670) == "15670"

    def test_none_is_empty(self):
        assert to_text(None) == ""

    def test_nested_mapping_is_compact_json(self):
        assert to_text({"name": "Ann"}) == '{"name":"Ann"}'
        assert to_text(["a", 1]) == '["a",1]'

    def test_unserializable_nesting_falls_back_to_str(self):
        assert to_text({(1, 2): "x"}) == "{(1, 2): 'x'}"
        loop: list = []
        loop.append(loop)
        assert to_text(loop) == "[[...]]"


class TestMatches:
    def test_empty_query_matches_everything(self):
        assert matches({"name": "Alpha"}, "")
        assert matches({}, "")

    def test_case_insensitive_substring(self):
        assert matches({"name": "Alpha"}, "ALP")
        assert matches({"name": "ALPHA"}, "lph")

    def test_no_match(self):
        assert not matches({"name": "Alpha"}, "zz")

    def test_any_field_matches(self):
        row = {"name": "Sarah Chen", "role": "editor"}
        assert matches(row, "edit")
        assert matches(row, "chen")

    def test_numbers_match_as_text(self):
        assert matches({"views": 15670}, "567")

    def test_booleans_match_as_text(self):
        assert matches({"active": True}, "tru")
        assert not matches({"active": False}, "tru")

    def test_none_values_do_not_match_text(self):
        assert not matches({"name": None}, "none")

    def test_fields_without_columns_are_searched(self):
        """Search is not limited to displayed columns."""
        row = {"name": "Alpha", "internal_note": "secret-code"}
        assert matches(row, "secret")

    def test_record_without_fields_never_matches_non_empty_query(self):
        assert not matches({}, "a")

    def test_odd_nested_keys_do_not_break_search(self):
        row = {"meta": {(1, 2): "x"}, "name": "a"}
        assert matches(row, "a")
        assert matches(row, "(1, 2)")
        assert not matches(row, "zzz")


class TestMatchesFilters:
    def test_no_filters(self):
        assert matches_filters({"name": "Alpha"}, {})

    def test_single_filter(self):
        assert matches_filters({"role": "editor"}, {"role": "EDIT"})
        assert not matches_filters({"role": "chef"}, {"role": "edit"})

    def test_filters_are_anded(self):
        row = {"role": "chef", "name": "Marco"}
        assert matches_filters(row, {"role": "chef", "name": "mar"})
        assert not matches_filters(row, {"role": "chef", "name": "sarah"})

    def test_empty_filter_text_ignored(self):
        assert matches_filters({"role": "chef"}, {"role": "", "name": ""})

    def test_filter_only_looks_at_its_own_field(self):
        assert not matches_filters({"name": "chef anna", "role": "editor"}, {"role": "chef"})

    def test_missing_field_fails_non_empty_filter(self):
        assert not matches_filters({"name": "Alpha"}, {"role": "a"})
