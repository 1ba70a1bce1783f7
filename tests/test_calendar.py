#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Created on Sat Jan 11 22:26:04 2025

@author: Marcel Hesselberth
"""


from julianday.calendar import *
from julianday.constants import MINYEAR, MAXYEAR
import datetime
import pytest


def test_valid_dates():
    d = CalendarDate(2020, 2, 18)
    assert(d.year == 2020 and d.month == 2 and d.day == 18)
    assert(d == (2020, 2, 18))
    assert(CalendarDate(2000, 2, 29).day == 29)
    assert(CalendarDate(0, 2, 29).year == 0)
    assert(CalendarDate(-4713, 11, 24).year == -4713)
    assert(CalendarDate(MINYEAR, 1, 1).year == MINYEAR)
    assert(CalendarDate(MAXYEAR, 12, 31).year == MAXYEAR)

def test_invalid_dates():
    for date in [(2020, 13, 1), (2020, 0, 1), (2020, 1, 32), (2020, 1, 0),
                 (2020, 2, 30), (1900, 2, 29), (2023, 4, 31), (-100, 2, 29)]:
        with pytest.raises(ValueError):
            CalendarDate(*date)

def test_year_range():
    with pytest.raises(OverflowError):
        CalendarDate(MAXYEAR + 1, 1, 1)
    with pytest.raises(OverflowError):
        CalendarDate(MINYEAR - 1, 1, 1)

def test_integer_fields():
    with pytest.raises(TypeError):
        CalendarDate(2020.0, 2, 18)
    with pytest.raises(TypeError):
        CalendarDate(2020, 2, "18")

def test_immutable():
    d = CalendarDate(2020, 2, 18)
    with pytest.raises(AttributeError):
        d.year = 2021
    with pytest.raises(ValueError):
        d._replace(day=30)
    assert(d._replace(day=29) == (2020, 2, 29))
    assert(isinstance(d._replace(day=29), CalendarDate))

def test_ordering():
    assert(CalendarDate(2020, 2, 18) < CalendarDate(2020, 2, 19))
    assert(CalendarDate(2019, 12, 31) < CalendarDate(2020, 1, 1))
    assert(CalendarDate(-1, 12, 31) < CalendarDate(0, 1, 1))
    assert(sorted([CalendarDate(2000, 1, 1), CalendarDate(-44, 3, 15)])[0].year == -44)

def test_from_date():
    d = CalendarDate.from_date(datetime.date(2020, 2, 18))
    assert(d == CalendarDate(2020, 2, 18))
    assert(type(d) is CalendarDate)
    d = CalendarDate.from_date(datetime.datetime(1858, 11, 17, 23, 59))
    assert(d == CalendarDate(1858, 11, 17))
    d = CalendarDate(1, 1, 1)
    assert(CalendarDate.from_date(d) is d)
    with pytest.raises(TypeError):
        CalendarDate.from_date("2020-02-18")

def test_to_pydate():
    assert(CalendarDate(2020, 2, 18).to_pydate() == datetime.date(2020, 2, 18))
    assert(CalendarDate(1, 1, 1).to_pydate() == datetime.date.min)
    with pytest.raises(ValueError):
        CalendarDate(0, 12, 31).to_pydate()

def test_isoformat():
    assert(CalendarDate(2020, 2, 18).isoformat() == "2020-02-18")
    assert(str(CalendarDate(33, 4, 3)) == "0033-04-03")
    assert(str(CalendarDate(-44, 3, 15)) == "-0044-03-15")
    assert(repr(CalendarDate(2020, 2, 18)) == "CalendarDate(year=2020, month=2, day=18)")
