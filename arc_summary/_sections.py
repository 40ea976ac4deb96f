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
The sections a report is made of.
"""

from .exceptions import UnknownSectionError


#: Section names in report order, also the values accepted by ``-s``.
SECTIONS = (
    'arc',
    'dmu',
    'l2arc',
    'tunables',
    'vdev',
    'xuio',
    'zfetch',
    'zil',
)

#: kstat files each section is built from. The L2ARC counters are part of
#: arcstats; tunables come from the module parameters instead.
SECTION_KSTATS = {
    'arc': ('arcstats',),
    'dmu': ('dmu_tx',),
    'l2arc': ('arcstats',),
    'tunables': (),
    'vdev': ('vdev_cache_stats',),
    'xuio': ('xuio_stats',),
    'zfetch': ('zfetchstats',),
    'zil': ('zil',),
}


def is_known_section(name):
    return name in SECTIONS if isinstance(name, str) else False


def check_section(name):
    if not is_known_section(name):
        raise UnknownSectionError(name)
    return name


def kstats_for(sections):
    '''
    Return the kstat file names needed by `sections`, sorted, without
    duplicates.
    '''
    names = set()
    for section in sections:
        names.update(SECTION_KSTATS[check_section(section)])
    return sorted(names)
