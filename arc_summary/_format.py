#
# Copyright (c) 2008 Ben Rockwood <benr@cuddletech.com>,
# Copyright (c) 2010 Martin Matuska <mm@FreeBSD.org>,
# Copyright (c) 2010-2011 Jason J. Hellenthal <jhell@DataIX.net>,
# All rights reserved.
#
# Redistribution and use in source and binary forms, with or without
# modification, are permitted provided that the following conditions
# are met:
#
# 1. Redistributions of source code must retain the above copyright
#    notice, this list of conditions and the following disclaimer.
# 2. Redistributions in binary form must reproduce the above copyright
#    notice, this list of conditions and the following disclaimer in the
#    documentation and/or other materials provided with the distribution.
#
# THIS SOFTWARE IS PROVIDED BY AUTHOR AND CONTRIBUTORS ``AS IS'' AND
# ANY EXPRESS OR IMPLIED WARRANTIES, INCLUDING, BUT NOT LIMITED TO, THE
# IMPLIED WARRANTIES OF MERCHANTABILITY AND FITNESS FOR A PARTICULAR PURPOSE
# ARE DISCLAIMED.  IN NO EVENT SHALL AUTHOR OR CONTRIBUTORS BE LIABLE
# FOR ANY DIRECT, INDIRECT, INCIDENTAL, SPECIAL, EXEMPLARY, OR CONSEQUENTIAL
# DAMAGES (INCLUDING, BUT NOT LIMITED TO, PROCUREMENT OF SUBSTITUTE GOODS
# OR SERVICES; LOSS OF USE, DATA, OR PROFITS; OR BUSINESS INTERRUPTION)
# HOWEVER CAUSED AND ON ANY THEORY OF LIABILITY, WHETHER IN CONTRACT, STRICT
# LIABILITY, OR TORT (INCLUDING NEGLIGENCE OR OTHERWISE) ARISING IN ANY WAY
# OUT OF THE USE OF THIS SOFTWARE, EVEN IF ADVISED OF THE POSSIBILITY OF
# SUCH DAMAGE.
#

"""
Human-readable formatting of kstat counters.

Byte counts use binary (IEC) units, hit counts decimal (SI) units. Both pick
the largest unit whose threshold the value reaches, so ``2 ** 20`` bytes is
"1.0 MiB" and never "1024.0 KiB", and print one decimal digit. The functions
take either an ``int`` or the raw string found in the kstat file.
"""

import re
from decimal import Decimal, InvalidOperation

from ._constants import (
    BYTE_UNITS,
    HIT_UNITS,
    PERCENT_PLACEHOLDER,
    UINT64_MAX,
)
from .exceptions import KstatValueError


_uint_pobj = re.compile(r'^\s*[0-9]+\s*$')


def to_uint64(value):
    '''
    Convert a raw kstat value to an unsigned 64-bit integer.

    :param value: an `int` or a string of decimal digits.
    :return: the value as `int`.
    :raises KstatValueError: if the value is not a number or does not fit
        into 64 unsigned bits.
    '''
    if isinstance(value, int) and not isinstance(value, bool):
        number = value
    elif isinstance(value, str) and _uint_pobj.match(value):
        number = int(value)
    else:
        raise KstatValueError(value)
    if number < 0 or number > UINT64_MAX:
        raise KstatValueError(value)
    return number


def _to_decimal(value):
    try:
        number = Decimal(value)
    except (InvalidOperation, TypeError, ValueError):
        raise KstatValueError(value)
    if not number.is_finite():
        raise KstatValueError(value)
    return number


def format_bytes(value):
    '''
    Format a byte count, e.g. "512 Bytes", "1.0 KiB" or "16.0 EiB".

    :raises KstatValueError: if `value` is not an unsigned 64-bit number.
    '''
    b = to_uint64(value)

    if b < 1024:
        return '%d %s' % (b, BYTE_UNITS[0])

    for i in range(len(BYTE_UNITS) - 1, 0, -1):
        limit = 2 ** (i * 10)
        if b >= limit:
            break

    return '%0.1f %s' % (b / limit, BYTE_UNITS[i])


def format_hits(value):
    '''
    Format a hit count, e.g. "999", "1.0k" or "18.4E".

    :raises KstatValueError: if `value` is not an unsigned 64-bit number.
    '''
    hits = to_uint64(value)

    # Small counts are printed as they are, without a decimal point
    if hits < 1000:
        return '%d' % hits

    for i in range(len(HIT_UNITS) - 1, 0, -1):
        limit = 10 ** (i * 3)
        if hits >= limit:
            break

    return '%0.1f%s' % (hits / limit, HIT_UNITS[i])


def format_percent(numerator, denominator):
    '''
    Format ``100 * numerator / denominator`` as "NN.N %".

    A denominator that is zero (or negative) yields
    :data:`PERCENT_PLACEHOLDER` instead of a division error, so a single
    empty counter never breaks the rest of the report.

    :raises KstatValueError: if either operand is not a finite number or the
        numerator is negative.
    '''
    lval = _to_decimal(numerator)
    rval = _to_decimal(denominator)

    if lval < 0:
        raise KstatValueError(numerator)
    if rval <= 0:
        return PERCENT_PLACEHOLDER

    return '%0.1f %%' % float(100 * lval / rval)


def format_ratio(numerator, denominator):
    '''
    Format the integer ratio of two counters as "N:1".
    '''
    lval = to_uint64(numerator)
    rval = to_uint64(denominator)

    if rval == 0:
        return PERCENT_PLACEHOLDER

    return '%d:1' % (lval // rval)
