#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Created on Tue Jan 14 13:13:23 2025

@author: Marcel Hesselberth
"""

import logging
from functools import total_ordering
from operator import index as _index
from julianday.constants import MJD0
from julianday.calendar import CalendarDate
from julianday.dtmath import (JD, RJD, MINJD, MAXJD, MINMJD, MAXMJD,
                              weekday_nr, isoweekday_nr)

log = logging.getLogger(__name__)

"""
Julian day and modified julian day as immutable integer values.

JulianDay(0) is the proleptic Gregorian date -4713-11-24 and
ModifiedJulianDay(0) is 1858-11-17. Both count whole days, so
MJD = JD - 2400001. Note that the astronomical MJD is defined as
JD - 2400000.5 with a julian day starting at noon. Exchanging these values
with systems that count MJD from a noon based JD requires care.

Values of the two types never compare equal to each other. There is no
day arithmetic, a new day number is made by construction.
"""


@total_ordering
class DayNumber:
    """
    Base of the integer day number types. Holds the day count, provides
    value semantics and immutability.
    """

    __slots__ = ("_day",)

    min = None
    max = None

    def __init__(self, day):
        day = _index(day)
        if not self.min <= day <= self.max:
            log.debug("%s %d rejected", self.__class__.__name__, day)
            raise OverflowError(f"{self.__class__.__name__} must be in "
                                f"{self.min}..{self.max}, not {day}")
        object.__setattr__(self, "_day", day)

    def __setattr__(self, name, value):
        raise AttributeError(f"{self.__class__.__name__} is immutable")

    def __delattr__(self, name):
        raise AttributeError(f"{self.__class__.__name__} is immutable")

    def __reduce__(self):
        return (self.__class__, (self._day,))

    def inner(self):
        """The day count as int."""
        return self._day

    def __int__(self):
        return self._day

    def __eq__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self._day == other._day

    def __lt__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self._day < other._day

    def __hash__(self):
        return hash((self.__class__.__name__, self._day))

    def __repr__(self):
        return f"{self.__class__.__name__}({self._day})"


class JulianDay(DayNumber):
    """
    Julian day number of a proleptic Gregorian date.

    JulianDay(n) trusts n to be a meaningful day count. It is only checked
    to be an integer in the supported range.

    Parameters
    ----------
    day : int
        Day count from MINJD to MAXJD.

    Raises
    ------
    TypeError
        day is not an integer.
    OverflowError
        day is outside the supported range.
    """

    __slots__ = ()

    min = MINJD
    max = MAXJD

    @classmethod
    def from_date(cls, date):
        """
        The julian day of a date.

        Parameters
        ----------
        date : CalendarDate, datetime.date or an object with integer
               year, month and day attributes.

        Returns
        -------
        JulianDay
        """
        date = CalendarDate.from_date(date)
        return cls(JD(date.year, date.month, date.day))

    def to_date(self):
        """
        The proleptic Gregorian date of this julian day.

        Returns
        -------
        CalendarDate
        """
        return CalendarDate(*RJD(self._day))

    def to_modified(self):
        return ModifiedJulianDay(self._day - MJD0)

    def weekday(self):
        """Day of the week, 0 is Sunday, 6 is Saturday."""
        return weekday_nr(self._day)

    def isoweekday(self):
        """ISO day of the week, 1 is Monday, 7 is Sunday."""
        return isoweekday_nr(self._day)


class ModifiedJulianDay(DayNumber):
    """
    Modified julian day, the julian day number minus MJD0 (2400001).

    Both conversions go through JulianDay, only the offset is applied here.

    Parameters
    ----------
    day : int
        Day count from MINMJD to MAXMJD.

    Raises
    ------
    TypeError
        day is not an integer.
    OverflowError
        day is outside the supported range.
    """

    __slots__ = ()

    min = MINMJD
    max = MAXMJD

    @classmethod
    def from_date(cls, date):
        return cls.from_julian(JulianDay.from_date(date))

    @classmethod
    def from_julian(cls, jd):
        if not isinstance(jd, JulianDay):
            raise TypeError(f"expected JulianDay, not {jd.__class__.__name__}")
        return cls(jd.inner() - MJD0)

    def to_julian(self):
        return JulianDay(self._day + MJD0)

    def to_date(self):
        return self.to_julian().to_date()

    def weekday(self):
        return self.to_julian().weekday()

    def isoweekday(self):
        return self.to_julian().isoweekday()
