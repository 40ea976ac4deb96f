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

'''
Human-readable diagnostics for the ZFS Adjustable Replacement Cache (ARC)
on Linux.

The statistics come from the kstat files the SPL module exports under
``/proc/spl/kstat/zfs`` and from the zfs module parameters under
``/sys/module/zfs/parameters``.
The parsing and formatting functions work on text that was already read and
have no side effects, so they can be used on saved kstat dumps as well.
Byte counts are rendered with binary units ("1.0 KiB"), hit counts with
decimal units ("1.0k") and percentages as "25.0 %".
Errors are reported as exceptions derived from
:exc:`~arc_summary.exceptions.ArcSummaryError`; only :func:`main` turns them
into an exit status.

.. data:: SECTIONS

    Names of the report sections, in report order.
'''

from ._constants import PERCENT_PLACEHOLDER

from ._format import (
    format_bytes,
    format_hits,
    format_percent,
    format_ratio,
)

from ._kstat import (
    build_section_map,
    load_kstats,
    load_tunable_descriptions,
    load_tunables,
    parse_stat_line,
    read_kstat_lines,
)

from ._sections import (
    SECTIONS,
    is_known_section,
)

from ._report import (
    build_report,
    graphic_report,
    raw_report,
    report_header,
)

from ._cli import main

from .exceptions import (
    ArcSummaryError,
    KstatFormatError,
    KstatReadError,
    KstatValueError,
    MissingStatError,
    UnknownSectionError,
)

__all__ = [
    'PERCENT_PLACEHOLDER',
    'SECTIONS',
    'format_bytes',
    'format_hits',
    'format_percent',
    'format_ratio',
    'build_section_map',
    'load_kstats',
    'load_tunable_descriptions',
    'load_tunables',
    'parse_stat_line',
    'read_kstat_lines',
    'is_known_section',
    'build_report',
    'graphic_report',
    'raw_report',
    'report_header',
    'main',
    'ArcSummaryError',
    'KstatFormatError',
    'KstatReadError',
    'KstatValueError',
    'MissingStatError',
    'UnknownSectionError',
]

# vim: softtabstop=4 tabstop=4 expandtab shiftwidth=4
