"""Rich console rendering of loaded meetings."""

from collections.abc import Sized

from rich.console import Console
from rich.rule import Rule
from rich.table import Table
from rich.text import Text

from voting_data.models import MeetingDocument, MeetingOutcome

console = Console(legacy_windows=False)

_STATUS_STYLES = {
    "completed": "green",
    "upcoming": "cyan",
    "cancelled": "red",
}


def _attendance_label(attendance: object) -> str:
    """Summarise the opaque attendance field for display."""
    if isinstance(attendance, dict):
        present = attendance.get("present")
        if isinstance(present, list):
            return str(len(present))
        return str(len(attendance))
    if isinstance(attendance, Sized) and not isinstance(attendance, str):
        return str(len(attendance))
    return "-" if attendance is None else str(attendance)


def build_meetings_table(meetings: list[MeetingDocument]) -> Table:
    """Build a table with one row per meeting, in the given order."""
    table = Table(title="Council Meetings", show_lines=False)
    table.add_column("Date", style="bold")
    table.add_column("Status")
    table.add_column("Motions", justify="right")
    table.add_column("Attendance", justify="right")

    for meeting in meetings:
        status = str(meeting.get("status", ""))
        motions = meeting.get("motions")
        table.add_row(
            str(meeting.get("date", "")),
            Text(status, style=_STATUS_STYLES.get(status, "yellow")),
            str(len(motions)) if isinstance(motions, list) else "-",
            _attendance_label(meeting.get("attendance")),
        )
    return table


def print_meetings(meetings: list[MeetingDocument]) -> None:
    console.print(build_meetings_table(meetings))
    console.print(Text(f"Loaded {len(meetings)} meeting(s)", style="dim"))


def print_failures(failures: list[MeetingOutcome]) -> None:
    """List files that were skipped and why. Prints nothing when none failed."""
    if not failures:
        return
    console.print(Rule(f"[bold yellow]{len(failures)} file(s) skipped[/bold yellow]"))
    for outcome in failures:
        console.print(Text.assemble("  ", ("FAIL", "red"), f" {outcome.path}: {outcome.error}"))
