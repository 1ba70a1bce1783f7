#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Created on Sat Jan 11 20:57:17 2025

@author: Marcel Hesselberth
"""

import datetime
import logging
from collections import namedtuple
from operator import index as _index
from julianday.constants import MINYEAR, MAXYEAR
from julianday.dtmath import days_in_month

log = logging.getLogger(__name__)

DateTuple = namedtuple("datetuple", ["year", "month", "day"])

"""
Calendar dates for the day number conversions.

Python's datetime.date is limited to the years 1..9999. CalendarDate is a
validated (year, month, day) tuple in the proleptic Gregorian calendar for
the full supported range MINYEAR..MAXYEAR. The year before +1 is year 0.
Because the fields are ordered year, month, day, tuple comparison is
chronological.
"""


def _check_date_fields(year, month, day):
    year = _index(year)
    month = _index(month)
    day = _index(day)
    if not MINYEAR <= year <= MAXYEAR:
        raise OverflowError('year must be in %d..%d' %
                            (MINYEAR, MAXYEAR), year)
    if not 1 <= month <= 12:
        raise ValueError('month must be in 1..12', month)
    dmax = days_in_month(year, month)
    if not 1 <= day <= dmax:
        raise ValueError('day must be in 1..%d' % dmax, day)
    return year, month, day


class CalendarDate(DateTuple):
    """
    An immutable, valid proleptic Gregorian date.

    Parameters
    ----------
    year : int
        Year from MINYEAR to MAXYEAR.
    month : int
        Month (1-12).
    day : int
        Day of the month, February 29 only in leap years.

    Raises
    ------
    TypeError
        A field is not an integer.
    ValueError
        The month or day does not exist.
    OverflowError
        The year is outside the supported range.
    """

    __slots__ = ()

    def __new__(cls, year, month, day):
        year, month, day = _check_date_fields(year, month, day)
        return super().__new__(cls, year, month, day)

    @classmethod
    def _make(cls, iterable):
        return cls(*iterable)

    @classmethod
    def from_date(cls, date):
        """
        Convert an object with year, month and day attributes, such as
        datetime.date or datetime.datetime. A time of day is ignored.
        """
        if isinstance(date, cls):
            return date
        try:
            year, month, day = date.year, date.month, date.day
        except AttributeError:
            raise TypeError(
                f"expected a date, not {date.__class__.__name__}") from None
        return cls(year, month, day)

    def to_pydate(self):
        """
        The equivalent datetime.date.

        Raises
        ------
        ValueError
            If the year is outside datetime's range (1..9999).
        """
        return datetime.date(self.year, self.month, self.day)

    def isoformat(self):
        sign = "-" if self.year < 0 else ""
        return f"{sign}{abs(self.year):04d}-{self.month:02d}-{self.day:02d}"

    __str__ = isoformat
