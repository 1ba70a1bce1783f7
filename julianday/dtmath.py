#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Created on Sat Jan 11 20:57:17 2025

@author: Marcel Hesselberth
"""

import logging
import numpy as np
from operator import index as _index
from julianday.constants import (MJD0, MINYEAR, MAXYEAR, JDN_EPOCH_OFFSET,
                                 RJDN_EPOCH_OFFSET, GREGORIAN_CYCLE,
                                 JULIAN_CYCLE, mdays, wdays)
from julianday.cnumba import cnjit

log = logging.getLogger(__name__)

"""
Integer day number math for the proleptic Gregorian calendar.

A julian day number (JD) counts whole days. JD 0 is -4713-11-24 in the
proleptic Gregorian calendar (-4712-1-1 Julian). The year before +1 is the
year 0, as is usual in astronomy.

The algorithms are those of Fliegel and Van Flandern. All divisions are
floor divisions, which makes both directions exact for negative years and
negative day numbers as well: the formulas are periodic in the 400 year
Gregorian cycle of 146097 days.

The scalar kernels are compiled with numba (int64). The same arithmetic
is applied to numpy int64 arrays by the *_array functions.
"""


def _jd(year, month, day):
    a = (14 - month) // 12
    y = year + 4800 - a
    m = month + 12 * a - 3
    return (day + (153 * m + 2) // 5 + 365 * y + y // 4 - y // 100 + y // 400
            - JDN_EPOCH_OFFSET)


def _rjd(jd):
    a = jd + RJDN_EPOCH_OFFSET
    b = (4 * a + 3) // GREGORIAN_CYCLE
    c = a - (GREGORIAN_CYCLE * b) // 4
    d = (4 * c + 3) // JULIAN_CYCLE
    e = c - (JULIAN_CYCLE * d) // 4
    m = (5 * e + 2) // 153
    day = e - (153 * m + 2) // 5 + 1
    month = m + 3 - 12 * (m // 10)
    year = 100 * b + d - 4800 + m // 10
    return year, month, day


_jd_kernel = cnjit(signature_or_function='i8(i8, i8, i8)')(_jd)
_rjd_kernel = cnjit(signature_or_function='Tuple((i8, i8, i8))(i8)')(_rjd)

MINJD = _jd(MINYEAR, 1, 1)
MAXJD = _jd(MAXYEAR, 12, 31)
MINMJD = MINJD - MJD0
MAXMJD = MAXJD - MJD0


def _check_year(year):
    if not MINYEAR <= year <= MAXYEAR:
        log.debug("year %d rejected", year)
        raise OverflowError(f"year {year} not in {MINYEAR}..{MAXYEAR}")


def _check_jd(jd):
    if not MINJD <= jd <= MAXJD:
        log.debug("julian day %d rejected", jd)
        raise OverflowError(f"julian day {jd} not in {MINJD}..{MAXJD}")


def JD(year, month, day):
    """
    Julian day number of a proleptic Gregorian date.

    Assumes that month and day are valid, the fields are not validated.

    Parameters
    ----------
    year : int
           Year from MINYEAR to MAXYEAR.
    month : int
           Month (1-12).
    day : int
           Day of the month.

    Raises
    ------
    TypeError
        If a field is not an integer.
    OverflowError
        If the year is outside the supported range.

    Returns
    -------
    int
        The julian day number.
    """
    year, month, day = _index(year), _index(month), _index(day)
    _check_year(year)
    return _jd_kernel(year, month, day)


def RJD(jd):
    """
    Reverse Julian Day. Compute the proleptic Gregorian date of a
    julian day number.

    RJD(JD(y, m, d)) == (y, m, d) and JD(*RJD(jd)) == jd are invariants.

    Parameters
    ----------
    jd : int
         Julian day number from MINJD to MAXJD.

    Raises
    ------
    TypeError
        If jd is not an integer.
    OverflowError
        If jd is outside the supported range.

    Returns
    -------
    year : int

    month : int

    day : int
    """
    jd = _index(jd)
    _check_jd(jd)
    return _rjd_kernel(jd)


def MJD(year, month, day):
    """
    Modified julian day of a proleptic Gregorian date, JD - MJD0.
    """
    return JD(year, month, day) - MJD0


def RMJD(mjd):
    """
    Reverse Modified Julian Day. Compute (year, month, day) of an mjd.
    """
    return RJD(_index(mjd) + MJD0)


def _int_array(a, name):
    arr = np.asarray(a)
    if arr.dtype.kind not in "iu":
        raise TypeError(f"{name} must be an integer array, not {arr.dtype}")
    return arr


def JD_array(year, month, day):
    """
    Julian day numbers of arrays of proleptic Gregorian dates.

    The arguments are broadcast against each other.

    Parameters
    ----------
    year : array_like of int

    month : array_like of int

    day : array_like of int

    Raises
    ------
    TypeError
        If an argument does not have an integer dtype.
    OverflowError
        If a year is outside the supported range.

    Returns
    -------
    numpy.ndarray (int64)
        The julian day numbers.
    """
    year = _int_array(year, "year")
    month = _int_array(month, "month")
    day = _int_array(day, "day")
    if year.size and (year.min() < MINYEAR or year.max() > MAXYEAR):
        raise OverflowError(f"year not in {MINYEAR}..{MAXYEAR}")
    year, month, day = np.broadcast_arrays(year.astype(np.int64),
                                           month.astype(np.int64),
                                           day.astype(np.int64))
    log.debug("JD_array for %d dates", year.size)
    return _jd(year, month, day)


def RJD_array(jd):
    """
    Reverse Julian Day for an array of julian day numbers.

    Parameters
    ----------
    jd : array_like of int

    Raises
    ------
    TypeError
        If jd does not have an integer dtype.
    OverflowError
        If a julian day is outside the supported range.

    Returns
    -------
    year, month, day : numpy.ndarray (int64)
    """
    jd = _int_array(jd, "jd")
    if jd.size and (jd.min() < MINJD or jd.max() > MAXJD):
        raise OverflowError(f"julian day not in {MINJD}..{MAXJD}")
    log.debug("RJD_array for %d days", jd.size)
    return _rjd(jd.astype(np.int64))


def MJD_array(year, month, day):
    return JD_array(year, month, day) - MJD0


def RMJD_array(mjd):
    mjd = _int_array(mjd, "mjd")
    if mjd.size and (mjd.min() < MINMJD or mjd.max() > MAXMJD):
        raise OverflowError(f"modified julian day not in {MINMJD}..{MAXMJD}")
    return RJD_array(mjd.astype(np.int64) + MJD0)


def is_gregorian_leapyear(year):
    """
    Check if a given year is a leap year in the proleptic Gregorian
    calendar.

    Parameters
    ----------
    year : int

    Returns
    -------
    leapyear : Boolean
        True if year is a leap year
    """
    if year % 4 == 0:               # possibly leap
        if year % 400 == 0:         # leap
            leapyear = True
        else:
            if year % 100 == 0:     # common
                leapyear = False
            else:                   # leap
                leapyear = True
    else:
        leapyear = False
    return leapyear


def days_in_month(year, month):
    dmax = mdays[month]
    if month == 2 and is_gregorian_leapyear(year):
        dmax += 1
    return dmax


# 0 is sunday, 1 is monday etc.
def weekday_nr(jd):
    return (jd + 1) % 7


# 1 is monday, 7 is sunday
def isoweekday_nr(jd):
    return jd % 7 + 1


def weekday_str(jd):
    return wdays[weekday_nr(jd)]
