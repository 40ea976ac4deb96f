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
Important `arc_summary` constants.
"""

#: Directory holding the SPL kstat files of the zfs module.
PROC_PATH = '/proc/spl/kstat/zfs'
#: Directory holding the zfs module parameters.
TUNABLES_PATH = '/sys/module/zfs/parameters'
#: Command printing the zfs module description, NUL separated.
MODINFO = ['/sbin/modinfo', 'zfs', '-0']

#: Number of header lines on top of every kstat file.
KSTAT_HEADER_LINES = 2

#: Width of the report rule and of the label/value columns.
LINE_LENGTH = 72
INDENT = ' ' * 4
#: Width of the box drawn by the graphic view.
GRAPH_WIDTH = 60
DATE_FORMAT = '%a %b %d %H:%M:%S %Y'

#: Largest value a kstat counter can hold.
UINT64_MAX = 2 ** 64 - 1

# Unit suffixes, index i stands for 2 ** (10 * i) or 10 ** (3 * i)
BYTE_UNITS = ('Bytes', 'KiB', 'MiB', 'GiB', 'TiB', 'PiB', 'EiB')
HIT_UNITS = ('', 'k', 'M', 'G', 'T', 'P', 'E')

#: What a percentage field shows when there is nothing to divide by.
PERCENT_PLACEHOLDER = ''
TUNABLE_NO_DESCRIPTION = 'Description unavailable'
