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
Command line front end of arc_summary.
"""

import argparse
import logging
import sys

from ._constants import PROC_PATH, TUNABLES_PATH
from ._kstat import (
    load_kstats,
    load_tunable_descriptions,
    load_tunables,
)
from ._report import (
    build_report,
    graphic_report,
    raw_report,
    report_header,
)
from ._sections import SECTIONS, is_known_section, kstats_for
from .exceptions import ArcSummaryError


def _section(name):
    if not is_known_section(name):
        raise argparse.ArgumentTypeError(
            "unknown section '%s' (choose from %s)" %
            (name, ', '.join(SECTIONS)))
    return name


def get_parser():
    parser = argparse.ArgumentParser(
        prog='arc_summary',
        description='Print basic data on the ZFS Adjustable Replacement '
                    'Cache (ARC) on Linux systems')
    parser.add_argument('-a', '--alternate', action='store_true',
                        help='alternate display of tunables (name=value)')
    parser.add_argument('-d', '--description', action='store_true',
                        help='include descriptions of tunables')
    view = parser.add_mutually_exclusive_group()
    view.add_argument('-r', '--raw', action='store_true',
                      help='print raw (but sorted) data')
    view.add_argument('-g', '--graph', action='store_true',
                      help='print basic information as graphic')
    parser.add_argument('-s', '--section', type=_section, metavar='SECTION',
                        help='pick one section (%s); not with -r or -g' %
                        ', '.join(SECTIONS))
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='log what is being read to stderr')
    return parser


def setup_logging(verbose=False):
    '''
    Set up the console logger. Diagnostics go to stderr, the report itself
    is written to stdout.
    '''
    logger = logging.getLogger('arc_summary')
    level = logging.DEBUG if verbose else logging.INFO
    logger.setLevel(level)

    if not logger.handlers:
        cons = logging.StreamHandler()
        consfmt = logging.Formatter('%(name)s: %(message)s')
        cons.setFormatter(consfmt)
        logger.addHandler(cons)
        logger.propagate = False
    for handler in logger.handlers:
        handler.setLevel(level)

    return logger


def collect_report(args, proc_path=PROC_PATH,
                   tunables_path=TUNABLES_PATH):
    '''
    Read the statistics the chosen view needs and return the report lines.

    :raises ArcSummaryError: if the statistics cannot be read or parsed.
    '''
    if args.raw:
        kstats = load_kstats(kstats_for(SECTIONS), proc_path)
        tunables = load_tunables(tunables_path)
        return report_header() + raw_report(
            kstats, tunables, proc_path, tunables_path)

    if args.graph:
        kstats = load_kstats(kstats_for(['arc']), proc_path)
        return report_header() + graphic_report(kstats)

    sections = [args.section] if args.section else SECTIONS
    kstats = load_kstats(kstats_for(sections), proc_path)

    tunables = None
    descriptions = None
    if 'tunables' in sections:
        tunables = load_tunables(tunables_path)
        if args.description:
            descriptions = load_tunable_descriptions()

    return report_header() + build_report(
        kstats, tunables, descriptions, args.section, args.alternate)


def main(argv=None, proc_path=PROC_PATH, tunables_path=TUNABLES_PATH):
    parser = get_parser()
    args = parser.parse_args(argv)
    if args.section and (args.raw or args.graph):
        view = '-r/--raw' if args.raw else '-g/--graph'
        parser.error('argument -s/--section: not allowed with argument %s' %
                     view)
    logger = setup_logging(args.verbose)

    # Nothing is printed before the whole report is assembled
    try:
        lines = collect_report(args, proc_path, tunables_path)
    except ArcSummaryError as e:
        logger.error('%s', e)
        return 1

    sys.stdout.write('\n'.join(lines) + '\n')
    return 0
