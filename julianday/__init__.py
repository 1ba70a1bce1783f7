"""
Exact integer conversion between proleptic Gregorian dates, julian day
numbers and modified julian days.

    >>> from julianday import JulianDay, ModifiedJulianDay, CalendarDate
    >>> JulianDay.from_date(CalendarDate(2020, 2, 18))
    JulianDay(2458898)
    >>> ModifiedJulianDay(0).to_date()
    CalendarDate(year=1858, month=11, day=17)
"""

import logging

from .constants import MJD0, MINYEAR, MAXYEAR
from .calendar import CalendarDate
from .dtmath import JD, RJD, MJD, RMJD, MINJD, MAXJD, MINMJD, MAXMJD
from .days import JulianDay, ModifiedJulianDay

logger = logging.getLogger(__name__)

__version__ = "0.1.0"

__all__ = ["CalendarDate", "JulianDay", "ModifiedJulianDay",
           "JD", "RJD", "MJD", "RMJD",
           "MJD0", "MINYEAR", "MAXYEAR", "MINJD", "MAXJD", "MINMJD", "MAXMJD"]
