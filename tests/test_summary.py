"""Tests for the daily summary and the quarter-hour projection."""
import pendulum
import pytest

from daysheet.errors import EmptySheetError, SheetNotFoundError
from daysheet.service.summary import project_end_of_day, summarize, summarize_sheet
from daysheet.time import round_up_to_quarter
from daysheet.view.summary import summary_lines


def at(hour: int, minute: int, second: int = 0) -> pendulum.DateTime:
    return pendulum.datetime(2024, 1, 5, hour, minute, second, tz="local")


class TestRoundUpToQuarter:
    @pytest.mark.parametrize(
        "value,expected",
        [
            (at(10, 0), at(10, 0)),
            (at(10, 15), at(10, 15)),
            (at(10, 1), at(10, 15)),
            (at(10, 0, 1), at(10, 15)),
            (at(10, 44), at(10, 45)),
            (at(10, 59), at(11, 0)),
        ],
    )
    def test_round_up(self, value, expected):
        assert round_up_to_quarter(value) == expected

    def test_rolls_over_midnight(self):
        assert round_up_to_quarter(at(23, 50)) == pendulum.datetime(
            2024, 1, 6, 0, 0, tz="local"
        )


class TestProjection:
    def test_remaining_hours_added_and_rounded(self):
        assert project_end_of_day(2.0, 8.0, at(13, 7)) == at(19, 15)

    def test_fractional_remaining(self):
        assert project_end_of_day(7.25, 8.0, at(16, 0)) == at(16, 45)

    @pytest.mark.parametrize("total", [8.0, 9.5])
    def test_target_reached(self, total):
        assert project_end_of_day(total, 8.0, at(16, 0)) is None


class TestSummarize:
    def test_totals_and_breakdown(self, sample_sheet):
        summary = summarize(sample_sheet, 8.0, at(12, 0))
        assert summary["total_hours"] == 3.25
        assert summary["target_hours"] == 8.0
        assert summary["end_of_day"] == at(16, 45)
        assert summary["breakdown"][-1] == "- spread..0.50"

    def test_full_day_has_no_end_of_day(self, full_template):
        summary = summarize(full_template, 3.0, at(12, 0))
        assert summary["total_hours"] == 3.0
        assert summary["end_of_day"] is None

    def test_malformed_document(self):
        with pytest.raises(EmptySheetError):
            summarize("nothing to see here\n", 8.0, at(12, 0))

    def test_summarize_sheet_reads_file(self, tmp_path, sample_sheet):
        path = tmp_path / "2024-01-05.md"
        path.write_text(sample_sheet)
        assert summarize_sheet(path, 8.0, at(9, 0))["total_hours"] == 3.25

    def test_summarize_missing_sheet(self, tmp_path):
        with pytest.raises(SheetNotFoundError):
            summarize_sheet(tmp_path / "missing.md", 8.0)


class TestSummaryLines:
    def test_with_end_of_day(self, sample_sheet):
        lines = summary_lines(summarize(sample_sheet, 8.0, at(12, 0)))
        assert lines == [
            "Worked 3.25 of 8.00 hours",
            "Done at 16:45",
            "",
            "- work....2.25",
            "- admin...0.50",
            "- spread..0.50",
        ]

    def test_without_end_of_day(self, full_template):
        lines = summary_lines(summarize(full_template, 2.0, at(12, 0)))
        assert lines == ["Worked 3.00 of 2.00 hours", "", "- work..3.00"]
