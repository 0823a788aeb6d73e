# SPDX-License-Identifier: MIT

from pathlib import Path

from rich.console import Console
from rich.text import Text

from daysheet.model.sheet import Summary
from daysheet.time import datetime_to_display_local_time_str


def format_hours(hours: float) -> str:
    return f"{hours:.2f}"


def summary_lines(summary: Summary) -> list[str]:
    lines = [
        f"Worked {format_hours(summary['total_hours'])} "
        f"of {format_hours(summary['target_hours'])} hours"
    ]
    if summary["end_of_day"] is not None:
        lines.append(
            "Done at "
            + datetime_to_display_local_time_str(summary["end_of_day"])
        )
    lines.append("")
    lines.extend(summary["breakdown"])
    return lines


def summary_report(path: Path, summary: Summary) -> None:
    console = Console(highlight=False)
    console.print(Text(path.name, style="bold"), soft_wrap=True)
    for line in summary_lines(summary):
        console.print(Text(line), soft_wrap=True)
