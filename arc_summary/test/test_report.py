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
Tests for the derived metrics and the rendering of the report sections.
"""

import unittest

from .._report import (
    build_report,
    get_arc_efficiency,
    get_arc_summary,
    get_l2arc_summary,
    get_vdev_summary,
    get_zfetch_summary,
    graphic_report,
    raw_report,
    report_header,
)
from .._constants import GRAPH_WIDTH, LINE_LENGTH, PERCENT_PLACEHOLDER
from ..exceptions import (
    KstatValueError,
    MissingStatError,
    UnknownSectionError,
)
from ._data import ARC_STATS, KSTATS, L2ARC_STATS, TUNABLES


def _find(lines, label):
    for line in lines:
        if label in line:
            return line
    raise AssertionError('%r not in report' % label)


class TestArcSummary(unittest.TestCase):

    def test_healthy(self):
        arc = get_arc_summary(ARC_STATS)
        self.assertEqual(arc['health'], 'HEALTHY')
        self.assertEqual(arc['memory_throttle_count'], '0')

    def test_throttled(self):
        arc = get_arc_summary(dict(ARC_STATS, memory_throttle_count='3'))
        self.assertEqual(arc['health'], 'THROTTLED')
        self.assertEqual(arc['memory_throttle_count'], '3')

    def test_sizing(self):
        sizing = get_arc_summary(ARC_STATS)['arc_sizing']
        self.assertEqual(sizing['arc_size'],
                         {'per': '50.0 %', 'num': '4.0 GiB'})
        self.assertEqual(sizing['target_size'],
                         {'per': '75.0 %', 'num': '6.0 GiB'})
        self.assertEqual(sizing['target_min_size'],
                         {'per': '12.5 %', 'num': '1.0 GiB'})
        self.assertEqual(sizing['target_max_size'],
                         {'ratio': '8:1', 'num': '8.0 GiB'})

    def test_mfu_mru_relative_to_their_sum(self):
        size_break = get_arc_summary(ARC_STATS)['arc_size_break']
        # Both lists hold 1 GiB of a 4 GiB ARC
        self.assertEqual(size_break['frequently_used_cache_size'],
                         {'per': '50.0 %', 'num': '1.0 GiB'})
        self.assertEqual(size_break['recently_used_cache_size'],
                         {'per': '50.0 %', 'num': '1.0 GiB'})

    def test_empty_arc(self):
        stats = dict(ARC_STATS, size='0', c='0', c_min='0', c_max='0',
                     mfu_size='0', mru_size='0')
        arc = get_arc_summary(stats)
        self.assertEqual(arc['arc_sizing']['arc_size']['per'],
                         PERCENT_PLACEHOLDER)
        self.assertEqual(arc['arc_sizing']['target_max_size']['ratio'],
                         PERCENT_PLACEHOLDER)
        self.assertEqual(
            arc['arc_size_break']['frequently_used_cache_size']['per'],
            PERCENT_PLACEHOLDER)

    def test_hash_breakdown(self):
        hash_break = get_arc_summary(ARC_STATS)['arc_hash_break']
        self.assertEqual(hash_break['elements_max'], '100.0k')
        self.assertEqual(hash_break['elements_current'],
                         {'per': '50.0 %', 'num': '50.0k'})
        self.assertEqual(hash_break['chain_max'], '5')

    def test_missing_stat(self):
        stats = dict(ARC_STATS)
        del stats['c_max']
        with self.assertRaises(MissingStatError) as ctx:
            get_arc_summary(stats)
        self.assertEqual(ctx.exception.name, 'c_max')
        self.assertEqual(ctx.exception.section, 'arcstats')

    def test_invalid_stat(self):
        with self.assertRaises(KstatValueError):
            get_arc_summary(dict(ARC_STATS, size='lots'))


class TestArcEfficiency(unittest.TestCase):

    def test_ratios(self):
        eff = get_arc_efficiency(ARC_STATS)
        self.assertEqual(eff['total_accesses'], '10.0k')
        self.assertEqual(eff['cache_hit_ratio'],
                         {'per': '90.0 %', 'num': '9.0k'})
        self.assertEqual(eff['cache_miss_ratio'],
                         {'per': '10.0 %', 'num': '1.0k'})
        self.assertEqual(eff['actual_hit_ratio'],
                         {'per': '80.0 %', 'num': '8.0k'})
        self.assertEqual(eff['data_demand_efficiency'],
                         {'per': '92.3 %', 'num': '6.5k'})
        self.assertEqual(eff['data_prefetch_efficiency'],
                         {'per': '84.2 %', 'num': '950'})

    def test_cache_lists(self):
        by_list = get_arc_efficiency(ARC_STATS)['cache_hits_by_cache_list']
        self.assertEqual(by_list['anonymously_used'],
                         {'per': '5.6 %', 'num': '500'})
        self.assertEqual(by_list['most_frequently_used'],
                         {'per': '55.6 %', 'num': '5.0k'})

    def test_no_anonymous_hits(self):
        eff = get_arc_efficiency(dict(ARC_STATS, hits='8500'))
        self.assertNotIn('anonymously_used',
                         eff['cache_hits_by_cache_list'])

    def test_no_prefetch(self):
        stats = dict(ARC_STATS, prefetch_data_hits='0',
                     prefetch_data_misses='0')
        self.assertNotIn('data_prefetch_efficiency',
                         get_arc_efficiency(stats))

    def test_data_types(self):
        eff = get_arc_efficiency(ARC_STATS)
        self.assertEqual(eff['cache_hits_by_data_type']['demand_data'],
                         {'per': '66.7 %', 'num': '6.0k'})
        self.assertEqual(eff['cache_misses_by_data_type']['demand_data'],
                         {'per': '50.0 %', 'num': '500'})

    def test_idle_arc(self):
        stats = dict((name, '0') for name in ARC_STATS)
        eff = get_arc_efficiency(stats)
        self.assertEqual(eff['cache_hit_ratio']['per'], PERCENT_PLACEHOLDER)
        self.assertEqual(eff['total_accesses'], '0')


class TestL2arcSummary(unittest.TestCase):

    def test_not_present(self):
        self.assertFalse(get_l2arc_summary(ARC_STATS)['present'])
        lines = build_report(KSTATS, section='l2arc')
        self.assertEqual(lines[0], 'L2ARC not detected, skipping section')

    def test_healthy(self):
        l2 = get_l2arc_summary(L2ARC_STATS)
        self.assertEqual(l2['health'], 'HEALTHY')
        self.assertEqual(l2['l2_arc_size']['adaptive'], '1.0 GiB')
        self.assertEqual(l2['l2_arc_size']['actual'],
                         {'per': '50.0 %', 'num': '512.0 MiB'})
        self.assertEqual(l2['l2_arc_size']['head_size'],
                         {'per': '0.1 %', 'num': '1.0 MiB'})
        self.assertEqual(l2['l2_arc_breakdown']['hit_ratio'],
                         {'per': '30.0 %', 'num': '300'})
        self.assertEqual(l2['l2_arc_writes']['writes_sent'],
                         {'per': '100.0 %', 'num': '50'})

    def test_faulted_writes(self):
        stats = dict(L2ARC_STATS, l2_writes_done='40', l2_writes_error='10')
        l2 = get_l2arc_summary(stats)
        self.assertEqual(l2['health'], 'DEGRADED')
        writes = l2['l2_arc_writes']
        self.assertEqual(writes['writes_sent']['value'], 'FAULTED')
        self.assertEqual(writes['done_ratio'],
                         {'per': '80.0 %', 'num': '40'})
        self.assertEqual(writes['error_ratio'],
                         {'per': '20.0 %', 'num': '10'})

        kstats = dict(KSTATS, arcstats=stats)
        lines = build_report(kstats, section='l2arc')
        self.assertEqual(lines[0], 'L2ARC summary: (DEGRADED)')
        self.assertIn('Writes sent: (FAULTED)',
                      _find(lines, 'Writes sent'))

    def test_evicts_shown_when_nonzero(self):
        kstats = dict(KSTATS, arcstats=L2ARC_STATS)
        self.assertNotIn('L2ARC evicts:',
                         build_report(kstats, section='l2arc'))
        kstats = dict(KSTATS, arcstats=dict(L2ARC_STATS,
                                            l2_evict_reading='3'))
        self.assertIn('L2ARC evicts:', build_report(kstats, section='l2arc'))


class TestVdevSummary(unittest.TestCase):

    def test_ratios_of_three_counters(self):
        vdev = get_vdev_summary(KSTATS['vdev_cache_stats'])
        self.assertEqual(vdev['summary'], '100')
        self.assertEqual(vdev['hit_ratio'], {'per': '30.0 %', 'num': '30'})
        self.assertEqual(vdev['miss_ratio'], {'per': '60.0 %', 'num': '60'})
        self.assertEqual(vdev['delegations'],
                         {'per': '10.0 %', 'num': '10'})

    def test_disabled_cache(self):
        vdev = get_vdev_summary({'delegations': '0', 'hits': '0',
                                 'misses': '0'})
        self.assertEqual(vdev['hit_ratio'],
                         {'per': PERCENT_PLACEHOLDER, 'num': '0'})

        kstats = dict(KSTATS, vdev_cache_stats={
            'delegations': '0', 'hits': '0', 'misses': '0'})
        lines = build_report(kstats, section='vdev')
        self.assertEqual(_find(lines, 'Hit ratio:').split(),
                         ['Hit', 'ratio:', '0'])


class TestZfetchSummary(unittest.TestCase):

    def test_efficiency(self):
        zfetch = get_zfetch_summary(KSTATS['zfetchstats'])
        self.assertEqual(zfetch['value'], '1.0k')
        self.assertEqual(zfetch['hit_ratio'], {'per': '75.0 %', 'num': '750'})
        self.assertEqual(zfetch['miss_ratio'],
                         {'per': '25.0 %', 'num': '250'})
        self.assertEqual(zfetch['other'], {'max_streams': '12'})


class TestBuildReport(unittest.TestCase):

    def test_arc_section(self):
        lines = build_report(KSTATS, section='arc')
        self.assertEqual(lines[0], 'ARC summary: (HEALTHY)')
        self.assertEqual(_find(lines, 'ARC size (current):').split()[-4:],
                         ['50.0', '%', '4.0', 'GiB'])
        self.assertEqual(_find(lines, 'Max size (high water):').split()[-3:],
                         ['8:1', '8.0', 'GiB'])
        self.assertEqual(_find(lines, '(MFU) cache size:').split()[-4:],
                         ['50.0', '%', '1.0', 'GiB'])
        self.assertTrue(all(len(line) <= LINE_LENGTH for line in lines))

    def test_all_sections(self):
        lines = build_report(KSTATS, TUNABLES)
        for title in ('ARC summary: (HEALTHY)', 'DMU transactions:',
                      'L2ARC not detected, skipping section', 'ZFS tunables:',
                      'XUIO statistics:', 'ZIL committed transactions:'):
            self.assertIn(title, lines)
        _find(lines, 'VDEV cache summary:')
        _find(lines, 'DMU prefetch efficiency:')

    def test_zil_units(self):
        lines = build_report(KSTATS, section='zil')
        self.assertEqual(_find(lines, 'zil_commit_count:').split(),
                         ['zil_commit_count:', '1.5k'])
        self.assertEqual(
            _find(lines, 'zil_itx_metaslab_normal_bytes:').split(),
            ['zil_itx_metaslab_normal_bytes:', '2.0', 'KiB'])

    def test_dmu_listing_sorted(self):
        lines = build_report(KSTATS, section='dmu')
        self.assertEqual(lines[0], 'DMU transactions:')
        self.assertEqual([line.split()[0] for line in lines[1:4]],
                         ['dmu_tx_assigned:', 'dmu_tx_delay:',
                          'dmu_tx_error:'])
        self.assertEqual(lines[1].split()[-1], '4.2k')

    def test_tunables(self):
        lines = build_report({}, TUNABLES, section='tunables')
        self.assertEqual(lines[0], 'ZFS tunables:')
        self.assertEqual(lines[1], '    %-50s%s' % ('zfs_arc_max', '0'))
        self.assertEqual(lines[3], '    %-50s%s' % ('zfs_prefetch_disable',
                                                     '1'))

    def test_tunables_alternate_with_descriptions(self):
        descriptions = {'zfs_arc_max': 'Max arc size (ulong)'}
        lines = build_report({}, TUNABLES, descriptions, section='tunables',
                             alternate=True)
        self.assertEqual(lines[1:5], [
            '    # Max arc size (ulong)',
            '    zfs_arc_max=0',
            '    zfs_arc_min=0',
            '    zfs_prefetch_disable=1',
        ])

    def test_unknown_section(self):
        with self.assertRaises(UnknownSectionError):
            build_report(KSTATS, section='ARC')

    def test_repeatable(self):
        self.assertEqual(build_report(KSTATS, TUNABLES),
                         build_report(KSTATS, TUNABLES))


class TestOtherViews(unittest.TestCase):

    def test_header(self):
        lines = report_header(0)
        self.assertEqual(lines[1], '-' * LINE_LENGTH)
        self.assertTrue(lines[2].startswith('ZFS Subsystem Report\t'))

    def test_raw(self):
        lines = raw_report({'zil': KSTATS['zil']}, TUNABLES,
                           '/proc/spl/kstat/zfs',
                           '/sys/module/zfs/parameters')
        self.assertEqual(lines[:4], [
            '',
            '/proc/spl/kstat/zfs/zil',
            '\t%-40s%s' % ('zil_commit_count', '1500'),
            '\t%-40s%s' % ('zil_itx_metaslab_normal_bytes', '2048'),
        ])
        self.assertEqual(lines[5], '/sys/module/zfs/parameters')
        self.assertEqual(len(lines), 6 + len(TUNABLES))

    def test_graphic(self):
        lines = graphic_report(KSTATS)
        self.assertIn('ARC: 4.0 GiB (50.0 %)  MFU: 1.0 GiB  MRU: 1.0 GiB',
                      lines[1])
        border = '    +' + '-' * (GRAPH_WIDTH - 2) + '+'
        self.assertEqual(lines[2], border)
        self.assertEqual(lines[4], border)
        core = 'F' * 7 + 'R' * 7 + 'O' * 15
        self.assertEqual(lines[3],
                         '    |' + core.ljust(GRAPH_WIDTH - 2) + '|')

    def test_graphic_overfull_arc(self):
        kstats = {'arcstats': dict(ARC_STATS, size=str(16 * 2 ** 30))}
        core = graphic_report(kstats)[3]
        self.assertEqual(len(core), 4 + GRAPH_WIDTH)

    def test_graphic_empty_arc(self):
        kstats = {'arcstats': dict(ARC_STATS, c_max='0')}
        lines = graphic_report(kstats)
        self.assertEqual(lines[3], '    |' + ' ' * (GRAPH_WIDTH - 2) + '|')


# vim: softtabstop=4 tabstop=4 expandtab shiftwidth=4
