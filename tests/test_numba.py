#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Created on Sun Jan 05 16:27:27 2025

@author: Marcel Hesselberth
"""

import pytest


def test_numba_installed():
    import numba

def test_cnumba():
    import julianday.cnumba

def test_acc():
    import julianday.cnumba
    assert(isinstance(julianday.cnumba.numba_acc, bool))

def test_kernels_compiled():
    from julianday import cnumba, dtmath
    if not cnumba.numba_acc:
        pytest.skip("numba jit disabled")
    assert(len(dtmath._jd_kernel.signatures) == 1)
    assert(len(dtmath._rjd_kernel.signatures) == 1)
    assert(dtmath._jd_kernel(2020, 2, 18) == 2458898)
    assert(dtmath._rjd_kernel(2400001) == (1858, 11, 17))

def test_cnjit_lazy():
    from julianday.cnumba import cnjit

    @cnjit
    def floor_div(a, b):
        return a // b

    assert(floor_div(-7, 2) == -4)
    assert(floor_div(7, 2) == 3)

def test_cnjit_signature():
    from julianday.cnumba import cnjit

    @cnjit(signature_or_function='i8(i8)')
    def neg(a):
        return -a

    assert(neg(5) == -5)
