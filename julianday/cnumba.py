#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Created on Sun Jan 05 16:02:11 2025

@author: Marcel Hesselberth

Numba compilation for the day number kernels.

All kernels are pure integer functions without shared state, so they are
compiled with the GIL released. Compilation can be switched off with the
NUMBA_DISABLE_JIT environment variable, in which case cnjit returns the
plain Python function.
"""

import logging
import numba

log = logging.getLogger(__name__)

JIT_OPTIONS = {"nogil": True}

numba_acc = not numba.config.DISABLE_JIT


def cnjit(signature_or_function=None, **options):
    """
    Compile a function in nopython mode with the project jit options.

    Parameters
    ----------
    signature_or_function : str, numba signature or callable, optional
        An explicit signature such as 'i8(i8, i8, i8)' compiles eagerly.
        When a function is passed, cnjit acts as a plain decorator and
        compilation is lazy.
    **options :
        Extra numba.njit options, overriding JIT_OPTIONS.

    Returns
    -------
    decorator or numba dispatcher
    """
    jit_options = dict(JIT_OPTIONS)
    jit_options.update(options)

    if callable(signature_or_function):
        func = signature_or_function
        log.debug("lazy jit for %s", func.__name__)
        return numba.njit(**jit_options)(func)

    def decorate(func):
        dispatcher = numba.njit(signature_or_function, **jit_options)(func)
        log.debug("jit compiled %s with signature %s (acc=%s)",
                  func.__name__, signature_or_function, numba_acc)
        return dispatcher

    return decorate
