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
Collection of ZFS statistics from the kstat and module parameter files.

The parsing helpers work on text that was already read; the ``load_*``
functions are the thin layer that reads it from ``/proc`` and ``/sys``.
"""

import logging
import os
from subprocess import Popen, PIPE

from ._constants import (
    KSTAT_HEADER_LINES,
    MODINFO,
    PROC_PATH,
    TUNABLES_PATH,
    TUNABLE_NO_DESCRIPTION,
)
from .exceptions import KstatFormatError, KstatReadError


logger = logging.getLogger(__name__)


def parse_stat_line(line):
    '''
    Split a kstat data line into the statistic name and its raw value.

    A line reads ``<name> <type> <value>``; the type column is dropped.

    :param str line: one data line of a kstat file.
    :return: a ``(name, value)`` tuple of strings.
    :raises KstatFormatError: if the line has fewer than three fields.
    '''
    fields = line.split()
    if len(fields) < 3:
        raise KstatFormatError(line)
    name, unused, value = fields[:3]
    return name, value


def build_section_map(lines):
    '''
    Build the name to value mapping of one kstat section.

    :param lines: the data lines of the section, headers already removed.
    :return: `dict` of statistic name to raw string value.
    :raises KstatFormatError: if any of the lines is malformed.
    '''
    stats = {}
    for line in lines:
        name, value = parse_stat_line(line)
        stats[name] = value
    return stats


def read_kstat_lines(path):
    '''
    Read the data lines of a kstat file, sorted.

    :raises KstatReadError: if the file cannot be read.
    '''
    logger.debug('Reading %s', path)
    try:
        with open(path, encoding='utf-8') as f:
            lines = [line.strip() for line in f]
    except OSError as e:
        raise KstatReadError(path, e.strerror)
    except UnicodeDecodeError as e:
        raise KstatReadError(path, e.reason)

    # The first two lines are the kstat header
    del lines[0:KSTAT_HEADER_LINES]
    return sorted(line for line in lines if line)


def load_kstats(names, proc_path=PROC_PATH):
    '''
    Load the given kstat files of the zfs module.

    :param names: kstat file names such as ``arcstats`` or ``zil``.
    :param str proc_path: directory the files live in.
    :return: `dict` of kstat file name to its section `dict`.
    :raises KstatReadError: if one of the files cannot be read.
    :raises KstatFormatError: if one of the files holds a malformed line.
    '''
    kstats = {}
    for name in names:
        lines = read_kstat_lines(os.path.join(proc_path, name))
        kstats[name] = build_section_map(lines)
    return kstats


def load_tunables(path=TUNABLES_PATH):
    '''
    Load the current values of the zfs module parameters.

    :return: `dict` of parameter name to stripped string value.
    :raises KstatReadError: if the directory or a parameter cannot be read.
    '''
    logger.debug('Reading tunables from %s', path)
    try:
        names = os.listdir(path)
    except OSError as e:
        raise KstatReadError(path, e.strerror)

    values = {}
    for name in names:
        filename = os.path.join(path, name)
        try:
            with open(filename, encoding='utf-8') as f:
                values[name] = f.read().strip()
        except OSError as e:
            raise KstatReadError(filename, e.strerror)
        except UnicodeDecodeError as e:
            raise KstatReadError(filename, e.reason)
    return values


def parse_modinfo(output):
    descriptions = {}
    for record in output.strip().split('\0'):
        if not record.startswith('parm:'):
            continue
        name, sep, description = record[5:].strip().partition(':')
        description = description.strip()
        if not description:
            description = TUNABLE_NO_DESCRIPTION
        descriptions[name.strip()] = description
    return descriptions


def load_tunable_descriptions(command=MODINFO):
    '''
    Ask ``modinfo`` for the one-line descriptions of the zfs parameters.

    Descriptions are optional: if ``modinfo`` is missing or fails, a warning
    is logged and an empty mapping is returned.

    :return: `dict` of parameter name to description.
    '''
    try:
        p = Popen(command, stdin=PIPE, stdout=PIPE, stderr=PIPE,
                  shell=False, close_fds=True, universal_newlines=True)
        out, err = p.communicate()
    except OSError as e:
        logger.warning("Cannot run '%s': %s", command[0], e.strerror)
        logger.warning('Tunable descriptions will be disabled.')
        return {}

    if p.returncode != 0:
        logger.warning("'%s' exited with code %i", command[0], p.returncode)
        logger.warning('Tunable descriptions will be disabled.')
        return {}

    return parse_modinfo(out)
