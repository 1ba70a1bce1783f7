#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Created on Thu Dec 21 21:19:41 2023

@author: Marcel Hesselberth
"""

mdays   = {1:31,2:28, 3:31, 4:30, 5:31, 6:30, 7:31, 8:31, 9:30, 10:31,
           11:30, 12:31}
wdays   = { 0:"Sunday", 1:"Monday", 2:"Tuesday", 3:"Wednesday", 4:"Thursday",
            5:"Friday", 6:"Saturday" }
months  = {1: "January", 2: "February", 3:"March", 4: "April", 5: "May",
           6: "June", 7: "July", 8: "August", 9: "September", 10: "October",
           11: "November", 12: "December"}

# Whole-day MJD: MJD 0 is 1858-11-17. Astronomical MJD is JD - 2400000.5
# with a noon based JD; the integer JD used here is date based.
MJD0    = 2400001

JDN_EPOCH_OFFSET  = 32045      # Fliegel - Van Flandern, date -> JD
RJDN_EPOCH_OFFSET = 32044      # Fliegel - Van Flandern, JD -> date

GREGORIAN_CYCLE   = 146097     # days in 400 Gregorian years
JULIAN_CYCLE      = 1461       # days in 4 years

# Supported proleptic Gregorian years. The kernels use int64 arithmetic,
# products stay below 2**63 for all years in this range.
MINYEAR = -999999999
MAXYEAR =  999999999

MJD_UNIX_EPOCH = 40587         # 1970-1-1
JD2000         = 2451545       # 2000-1-1
