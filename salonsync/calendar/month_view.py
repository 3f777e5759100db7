"""Month view: Monday-first grid with a per-day booking density."""

import calendar
from dataclasses import dataclass
from datetime import date, datetime, time
from enum import Enum

from ..constants.defaults import Scheduling
from ..domain.appointment import Appointment


class Density(str, Enum):
    EMPTY = "empty"
    LIGHT = "light"
    MODERATE = "moderate"
    BUSY = "busy"


@dataclass(frozen=True)
class DayCell:
    day: date
    count: int
    density: Density


@dataclass(frozen=True)
class MonthGrid:
    year: int
    month: int
    blanks: int
    cells: list[DayCell]

    def cell(self, day_number: int) -> DayCell:
        return self.cells[day_number - 1]

    def weeks(self) -> list[list[DayCell | None]]:
        """Rows of seven, with None for the leading and trailing blanks."""
        padded: list[DayCell | None] = [None] * self.blanks + list(self.cells)
        padded += [None] * (-len(padded) % 7)
        return [padded[i : i + 7] for i in range(0, len(padded), 7)]


def days_in_month(year: int, month: int) -> int:
    return calendar.monthrange(year, month)[1]


def first_weekday_offset(year: int, month: int) -> int:
    """Number of blank cells before the 1st in a Monday-first week."""
    return date(year, month, 1).weekday()


def density_for(count: int) -> Density:
    if count == 0:
        return Density.EMPTY
    if count < Scheduling.LIGHT_DAY_LIMIT:
        return Density.LIGHT
    if count < Scheduling.MODERATE_DAY_LIMIT:
        return Density.MODERATE
    return Density.BUSY


def count_on(appointments: list[Appointment], day: date) -> int:
    """Counts appointments starting between 00:00:00 and 23:59:59 of day."""
    day_start = datetime.combine(day, time(0, 0, 0))
    day_end = datetime.combine(day, time(23, 59, 59))
    return sum(1 for a in appointments if day_start <= a.start_time <= day_end)


def build_month(year: int, month: int, appointments: list[Appointment]) -> MonthGrid:
    cells = []
    for day_number in range(1, days_in_month(year, month) + 1):
        day = date(year, month, day_number)
        count = count_on(appointments, day)
        cells.append(DayCell(day=day, count=count, density=density_for(count)))
    return MonthGrid(year=year, month=month, blanks=first_weekday_offset(year, month), cells=cells)


def shift_month(current: date, delta: int) -> date:
    """First day of the month delta months away from current."""
    index = current.year * 12 + (current.month - 1) + delta
    return date(index // 12, index % 12 + 1, 1)
