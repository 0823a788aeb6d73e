"""Tests for hour counting and the per-category breakdown."""
import pytest

from daysheet.errors import EmptySheetError
from daysheet.service.hours import (
    breakdown,
    clean_label,
    count_hours,
    parse_rows,
    sort_rows,
)


class TestCountHours:
    @pytest.mark.parametrize("groups", [1, 3, 10])
    def test_all_marked(self, groups):
        assert count_hours("|work|" + "xxxx|" * groups) == groups

    def test_all_empty(self):
        assert count_hours("|work|----|----|----|") == 0

    def test_partial_quarters(self):
        assert count_hours("|work|x---|xx--|-x-x|") == 1.25

    def test_cells_may_be_padded(self):
        assert count_hours("| work | xxxx | xx-- |") == 1.5

    def test_wrong_width_cells_are_ignored(self):
        assert count_hours("|work|xxxxx|xxx|xxxx|") == 1.0

    @pytest.mark.parametrize("text", ["", "\n", "just some notes", "|Name|9|"])
    def test_no_cells_is_an_error(self, text):
        with pytest.raises(EmptySheetError):
            count_hours(text)


class TestRows:
    def test_parse_rows(self, sample_sheet):
        rows = parse_rows(sample_sheet)
        assert [row["name"] for row in rows] == ["spread", "work", "admin"]
        assert [row["hours"] for row in rows] == [0.5, 2.25, 0.5]
        assert rows[1]["cells"] == ["xxxx", "xxxx", "x---"]

    @pytest.mark.parametrize(
        "label,expected",
        [("**work**", "work"), ("_admin_", "admin"), ("  plain  ", "plain"), ("~~old~~", "old")],
    )
    def test_clean_label(self, label, expected):
        assert clean_label(label) == expected

    def test_row_without_cells_is_an_error(self):
        text = "|Name|9   |\n|----|----|\n|work|nope|\n"
        with pytest.raises(EmptySheetError, match="work"):
            parse_rows(text)

    def test_label_is_never_counted(self):
        text = "|Name|9   |\n|----|----|\n|xxxx|----|\n"
        assert count_hours(text) == 0
        assert breakdown(text) == ["- xxxx..0.00"]

    def test_header_only(self):
        assert parse_rows("|Name|9   |\n|----|----|\n") == []


class TestBreakdown:
    def test_format(self, sample_sheet):
        assert breakdown(sample_sheet) == [
            "- work....2.25",
            "- admin...0.50",
            "- spread..0.50",
        ]

    def test_spread_last_regardless_of_order(self):
        rows = [
            {"name": "spread", "cells": [], "hours": 1.0},
            {"name": "b", "cells": [], "hours": 1.0},
            {"name": "a", "cells": [], "hours": 1.0},
        ]
        assert [row["name"] for row in sort_rows(rows)] == ["b", "a", "spread"]

    def test_spread_already_last(self):
        text = (
            "|Name  |9   |\n"
            "|------|----|\n"
            "|work  |xxxx|\n"
            "|spread|x---|\n"
        )
        assert breakdown(text) == ["- work....1.00", "- spread..0.25"]

    def test_without_trailing_newline(self):
        text = "|Name|9   |\n|----|----|\n|work|xx--|"
        assert breakdown(text) == ["- work..0.50"]
