"""Summary reports over the entry log."""

from collections import Counter
from dataclasses import dataclass
from datetime import date, timedelta

from calorie_tracker.domain.entries import Entry
from calorie_tracker.domain.summary import ReportKind
from calorie_tracker.services.entries import EntryLog

UNIT_PER_SQUARE = 100
SQUARE = "#"
WEEK_DAYS = 7
NO_ENTRIES_MESSAGE = "No entries found!"


class Summary:
    """Week and month reports for a snapshot of the entry log.

    The log is sorted on construction and the window is clipped so that a
    report never covers days before the first recorded entry.
    """

    def __init__(
        self, entry_log: EntryLog, days: int, today: date | None = None
    ) -> None:
        entry_log.sort_database()
        self._entries = entry_log.entries
        self._today = today or date.today()
        self.days = resolve_window(self._entries, days, self._today)

    def generate_week_summary_report(self) -> str:
        """Return the calorie trend graph, daily average and food frequencies."""
        if not self._entries:
            return NO_ENTRIES_MESSAGE
        average = self.average_calories()
        return (
            self._week_calorie_trend_graph()
            + f"Average Daily Calorie Intake: {_draw_squares(average)} {average}\n"
            + self._most_and_least_eaten_food()
        )

    def generate_month_summary_report(self) -> str:
        """Return the daily average and food frequencies for the month."""
        if not self._entries:
            return NO_ENTRIES_MESSAGE
        return (
            f"Average Daily Calorie Intake: {self.average_calories()}\n"
            + self._most_and_least_eaten_food()
        )

    def generate_report(self, kind: ReportKind) -> str:
        """Return the report for a report kind."""
        if kind is ReportKind.WEEK:
            return self.generate_week_summary_report()
        return self.generate_month_summary_report()

    def average_calories(self) -> int:
        """Return calories over the whole log divided by the window length."""
        total = sum(entry.food.calories for entry in self._entries)
        return total // self.days

    def _week_calorie_trend_graph(self) -> str:
        day = self._today - timedelta(days=min(self.days, WEEK_DAYS) - 1)
        entries = self._entries
        cursor = 0
        while cursor < len(entries) and entries[cursor].day < day:
            cursor += 1

        lines = []
        while day <= self._today:
            calories = 0
            while cursor < len(entries) and entries[cursor].day == day:
                calories += entries[cursor].food.calories
                cursor += 1
            lines.append(f"{day.isoformat()}: {_draw_squares(calories)} {calories}\n")
            day += timedelta(days=1)
        return "".join(lines)

    def _most_and_least_eaten_food(self) -> str:
        occurrence = Counter(entry.food.name for entry in self._entries)
        most = max(occurrence.values())
        least = min(occurrence.values())
        # Tie groups are sorted so output never depends on tally order.
        most_eaten = sorted(name for name, count in occurrence.items() if count == most)
        least_eaten = sorted(
            name for name, count in occurrence.items() if count == least
        )
        return (
            f"Food eaten most: {_format_names(most_eaten)} [{most} time(s)]\n"
            f"Food eaten least: {_format_names(least_eaten)} [{least} time(s)]"
        )


@dataclass
class SummaryService:
    """Builds reports for the command layer."""

    entry_log: EntryLog

    def report(self, kind: ReportKind, today: date | None = None) -> str:
        """Return the formatted report for a week or month timeframe."""
        resolved_today = today or date.today()
        summary = Summary(
            self.entry_log, report_window(kind, resolved_today), resolved_today
        )
        return summary.generate_report(kind)


def report_window(kind: ReportKind, today: date) -> int:
    """Return the requested window: a week, or the days elapsed this month."""
    if kind is ReportKind.WEEK:
        return WEEK_DAYS
    return today.day


def resolve_window(entries: list[Entry], days: int, today: date) -> int:
    """Clip the requested window to the days since the first entry."""
    if not entries:
        return 1
    first_day = min(entry.day for entry in entries)
    period = (today - first_day).days + 1
    return max(min(days, period), 1)


def _draw_squares(calories: int) -> str:
    return SQUARE * (calories // UNIT_PER_SQUARE)


def _format_names(names: list[str]) -> str:
    return "[" + ", ".join(names) + "]"
