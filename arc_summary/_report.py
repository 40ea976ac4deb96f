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
Assembly of the report sections.

Every ``get_*`` function takes the statistics of one kstat file and returns
the derived, already formatted values. The section renderers turn those into
lines of text. Nothing here reads files or writes to the console.
"""

import os
import time

from ._constants import (
    DATE_FORMAT,
    GRAPH_WIDTH,
    INDENT,
    LINE_LENGTH,
    PROC_PATH,
    TUNABLES_PATH,
)
from ._format import (
    format_bytes,
    format_hits,
    format_percent,
    format_ratio,
    to_uint64,
)
from ._sections import SECTIONS, check_section
from .exceptions import MissingStatError


def _values(section, stats, *names):
    values = []
    for name in names:
        if name not in stats:
            raise MissingStatError(section, name)
        values.append(to_uint64(stats[name]))
    return values


def _pair(count, total, fmt=format_hits):
    return {
        'per': format_percent(count, total),
        'num': fmt(count),
    }


def _row(label, per='', num='', indent=1):
    return ('%-50s%10s%12s' % (INDENT * indent + label, per, num)).rstrip()


def _pair_row(label, pair, indent=1):
    return _row(label, pair['per'], pair['num'], indent)


def report_header(now=None):
    daydate = time.strftime(DATE_FORMAT, time.localtime(now))
    return [
        '',
        '-' * LINE_LENGTH,
        'ZFS Subsystem Report\t\t\t\t%s' % daydate,
        '',
    ]


def get_arc_summary(arc_stats):
    '''
    Derive the ARC health, sizing and hash figures.

    The MFU and MRU sizes are given as percentages of their sum, so they show
    how the two lists share the cache regardless of the other buffers that
    count towards the total ARC size.

    :param dict arc_stats: the arcstats section.
    :raises MissingStatError: if a required statistic is absent.
    :raises KstatValueError: if a required statistic is not a number.
    '''
    (memory_throttle_count, deleted, mutex_miss, evict_skip,
     arc_size, target_size, target_min_size, target_max_size,
     mfu_size, mru_size) = _values(
        'arcstats', arc_stats,
        'memory_throttle_count', 'deleted', 'mutex_miss', 'evict_skip',
        'size', 'c', 'c_min', 'c_max', 'mfu_size', 'mru_size')
    (hash_chain_max, hash_chains, hash_collisions, hash_elements,
     hash_elements_max) = _values(
        'arcstats', arc_stats,
        'hash_chain_max', 'hash_chains', 'hash_collisions', 'hash_elements',
        'hash_elements_max')

    output = {}

    if memory_throttle_count == 0:
        output['health'] = 'HEALTHY'
    else:
        output['health'] = 'THROTTLED'
    output['memory_throttle_count'] = format_hits(memory_throttle_count)

    ### ARC Misc. ###
    output['arc_misc'] = {}
    output['arc_misc']['deleted'] = format_hits(deleted)
    output['arc_misc']['mutex_miss'] = format_hits(mutex_miss)
    output['arc_misc']['evict_skips'] = format_hits(evict_skip)

    ### ARC Sizing ###
    output['arc_sizing'] = {}
    output['arc_sizing']['arc_size'] = _pair(
        arc_size, target_max_size, format_bytes)
    output['arc_sizing']['target_size'] = _pair(
        target_size, target_max_size, format_bytes)
    output['arc_sizing']['target_min_size'] = _pair(
        target_min_size, target_max_size, format_bytes)
    output['arc_sizing']['target_max_size'] = {
        'ratio': format_ratio(target_max_size, target_min_size),
        'num': format_bytes(target_max_size),
    }

    ### ARC Size Breakdown ###
    cache_size_total = mfu_size + mru_size
    output['arc_size_break'] = {}
    output['arc_size_break']['frequently_used_cache_size'] = _pair(
        mfu_size, cache_size_total, format_bytes)
    output['arc_size_break']['recently_used_cache_size'] = _pair(
        mru_size, cache_size_total, format_bytes)

    ### ARC Hash Breakdown ###
    output['arc_hash_break'] = {}
    output['arc_hash_break']['elements_max'] = format_hits(hash_elements_max)
    output['arc_hash_break']['elements_current'] = _pair(
        hash_elements, hash_elements_max)
    output['arc_hash_break']['collisions'] = format_hits(hash_collisions)
    output['arc_hash_break']['chain_max'] = format_hits(hash_chain_max)
    output['arc_hash_break']['chains'] = format_hits(hash_chains)

    return output


def get_arc_efficiency(arc_stats):
    (arc_hits, arc_misses, mfu_hits, mru_hits, mfu_ghost_hits,
     mru_ghost_hits) = _values(
        'arcstats', arc_stats,
        'hits', 'misses', 'mfu_hits', 'mru_hits', 'mfu_ghost_hits',
        'mru_ghost_hits')
    (demand_data_hits, demand_data_misses, demand_metadata_hits,
     demand_metadata_misses, prefetch_data_hits, prefetch_data_misses,
     prefetch_metadata_hits, prefetch_metadata_misses) = _values(
        'arcstats', arc_stats,
        'demand_data_hits', 'demand_data_misses', 'demand_metadata_hits',
        'demand_metadata_misses', 'prefetch_data_hits',
        'prefetch_data_misses', 'prefetch_metadata_hits',
        'prefetch_metadata_misses')

    anon_hits = arc_hits - (
        mfu_hits + mru_hits + mfu_ghost_hits + mru_ghost_hits)
    arc_accesses_total = arc_hits + arc_misses
    demand_data_total = demand_data_hits + demand_data_misses
    prefetch_data_total = prefetch_data_hits + prefetch_data_misses
    real_hits = mfu_hits + mru_hits

    output = {}
    output['total_accesses'] = format_hits(arc_accesses_total)
    output['cache_hit_ratio'] = _pair(arc_hits, arc_accesses_total)
    output['cache_miss_ratio'] = _pair(arc_misses, arc_accesses_total)
    output['actual_hit_ratio'] = _pair(real_hits, arc_accesses_total)
    output['data_demand_efficiency'] = {
        'per': format_percent(demand_data_hits, demand_data_total),
        'num': format_hits(demand_data_total),
    }

    if prefetch_data_total > 0:
        output['data_prefetch_efficiency'] = {
            'per': format_percent(prefetch_data_hits, prefetch_data_total),
            'num': format_hits(prefetch_data_total),
        }

    output['cache_hits_by_cache_list'] = {}
    if anon_hits > 0:
        output['cache_hits_by_cache_list']['anonymously_used'] = _pair(
            anon_hits, arc_hits)
    output['cache_hits_by_cache_list']['most_recently_used'] = _pair(
        mru_hits, arc_hits)
    output['cache_hits_by_cache_list']['most_frequently_used'] = _pair(
        mfu_hits, arc_hits)
    output['cache_hits_by_cache_list']['most_recently_used_ghost'] = _pair(
        mru_ghost_hits, arc_hits)
    output['cache_hits_by_cache_list']['most_frequently_used_ghost'] = _pair(
        mfu_ghost_hits, arc_hits)

    output['cache_hits_by_data_type'] = {
        'demand_data': _pair(demand_data_hits, arc_hits),
        'prefetch_data': _pair(prefetch_data_hits, arc_hits),
        'demand_metadata': _pair(demand_metadata_hits, arc_hits),
        'prefetch_metadata': _pair(prefetch_metadata_hits, arc_hits),
    }
    output['cache_misses_by_data_type'] = {
        'demand_data': _pair(demand_data_misses, arc_misses),
        'prefetch_data': _pair(prefetch_data_misses, arc_misses),
        'demand_metadata': _pair(demand_metadata_misses, arc_misses),
        'prefetch_metadata': _pair(prefetch_metadata_misses, arc_misses),
    }

    return output


def _arc_summary(kstats):
    arc_stats = kstats['arcstats']
    arc = get_arc_summary(arc_stats)
    eff = get_arc_efficiency(arc_stats)
    sizing = arc['arc_sizing']
    size_break = arc['arc_size_break']
    hash_break = arc['arc_hash_break']

    lines = [
        'ARC summary: (%s)' % arc['health'],
        _row('Memory throttle count:', num=arc['memory_throttle_count']),
        '',
        _pair_row('ARC size (current):', sizing['arc_size'], indent=0),
        _pair_row('Target size (adaptive):', sizing['target_size']),
        _pair_row('Min size (hard limit):', sizing['target_min_size']),
        _row('Max size (high water):', sizing['target_max_size']['ratio'],
             sizing['target_max_size']['num']),
        _pair_row('Most Frequently Used (MFU) cache size:',
                  size_break['frequently_used_cache_size']),
        _pair_row('Most Recently Used (MRU) cache size:',
                  size_break['recently_used_cache_size']),
        '',
        'ARC hash breakdown:',
        _row('Elements max:', num=hash_break['elements_max']),
        _pair_row('Elements current:', hash_break['elements_current']),
        _row('Collisions:', num=hash_break['collisions']),
        _row('Chain max:', num=hash_break['chain_max']),
        _row('Chains:', num=hash_break['chains']),
        '',
        'ARC misc:',
        _row('Deleted:', num=arc['arc_misc']['deleted']),
        _row('Mutex misses:', num=arc['arc_misc']['mutex_miss']),
        _row('Eviction skips:', num=arc['arc_misc']['evict_skips']),
        '',
        _row('ARC total accesses (hits + misses):',
             num=eff['total_accesses'], indent=0),
        _pair_row('Cache hit ratio:', eff['cache_hit_ratio']),
        _pair_row('Cache miss ratio:', eff['cache_miss_ratio']),
        _pair_row('Actual hit ratio (MFU + MRU hits):',
                  eff['actual_hit_ratio']),
        _pair_row('Data demand efficiency:', eff['data_demand_efficiency']),
    ]
    if 'data_prefetch_efficiency' in eff:
        lines.append(_pair_row('Data prefetch efficiency:',
                               eff['data_prefetch_efficiency']))

    by_list = eff['cache_hits_by_cache_list']
    lines.extend(['', 'Cache hits by cache list:'])
    if 'anonymously_used' in by_list:
        lines.append(_pair_row('Anonymously used:',
                               by_list['anonymously_used']))
    lines.extend([
        _pair_row('Most recently used (MRU):',
                  by_list['most_recently_used']),
        _pair_row('Most frequently used (MFU):',
                  by_list['most_frequently_used']),
        _pair_row('Most recently used (MRU) ghost:',
                  by_list['most_recently_used_ghost']),
        _pair_row('Most frequently used (MFU) ghost:',
                  by_list['most_frequently_used_ghost']),
    ])

    for title, key in (('Cache hits by data type:', 'cache_hits_by_data_type'),
                       ('Cache misses by data type:',
                        'cache_misses_by_data_type')):
        by_type = eff[key]
        lines.extend([
            '',
            title,
            _pair_row('Demand data:', by_type['demand_data']),
            _pair_row('Prefetch data:', by_type['prefetch_data']),
            _pair_row('Demand metadata:', by_type['demand_metadata']),
            _pair_row('Prefetch metadata:', by_type['prefetch_metadata']),
        ])

    return lines


def get_l2arc_summary(arc_stats):
    (l2_abort_lowmem, l2_cksum_bad, l2_evict_lock_retry, l2_evict_reading,
     l2_feeds, l2_free_on_write, l2_hdr_size, l2_hits, l2_io_error,
     l2_misses, l2_rw_clash, l2_size, l2_asize, l2_writes_done,
     l2_writes_error, l2_writes_sent) = _values(
        'arcstats', arc_stats,
        'l2_abort_lowmem', 'l2_cksum_bad', 'l2_evict_lock_retry',
        'l2_evict_reading', 'l2_feeds', 'l2_free_on_write', 'l2_hdr_size',
        'l2_hits', 'l2_io_error', 'l2_misses', 'l2_rw_clash', 'l2_size',
        'l2_asize', 'l2_writes_done', 'l2_writes_error', 'l2_writes_sent')

    l2_access_total = l2_hits + l2_misses
    output = {}
    output['l2_health_count'] = l2_writes_error + l2_cksum_bad + l2_io_error
    output['l2_access_total'] = l2_access_total
    output['l2_size'] = l2_size
    output['present'] = l2_size > 0 and l2_access_total > 0

    if not output['present']:
        return output

    if output['l2_health_count'] > 0:
        output['health'] = 'DEGRADED'
    else:
        output['health'] = 'HEALTHY'

    output['low_memory_aborts'] = format_hits(l2_abort_lowmem)
    output['free_on_write'] = format_hits(l2_free_on_write)
    output['rw_clashes'] = format_hits(l2_rw_clash)
    output['bad_checksums'] = format_hits(l2_cksum_bad)
    output['io_errors'] = format_hits(l2_io_error)

    output['l2_arc_size'] = {}
    output['l2_arc_size']['adaptive'] = format_bytes(l2_size)
    output['l2_arc_size']['actual'] = _pair(l2_asize, l2_size, format_bytes)
    output['l2_arc_size']['head_size'] = _pair(
        l2_hdr_size, l2_size, format_bytes)

    output['l2_arc_evicts'] = {}
    output['l2_arc_evicts']['total'] = l2_evict_lock_retry + l2_evict_reading
    output['l2_arc_evicts']['lock_retries'] = format_hits(l2_evict_lock_retry)
    output['l2_arc_evicts']['reading'] = format_hits(l2_evict_reading)

    output['l2_arc_breakdown'] = {}
    output['l2_arc_breakdown']['value'] = format_hits(l2_access_total)
    output['l2_arc_breakdown']['hit_ratio'] = _pair(l2_hits, l2_access_total)
    output['l2_arc_breakdown']['miss_ratio'] = _pair(
        l2_misses, l2_access_total)
    output['l2_arc_breakdown']['feeds'] = format_hits(l2_feeds)

    output['l2_arc_writes'] = {}
    if l2_writes_done != l2_writes_sent:
        output['l2_arc_writes']['writes_sent'] = {
            'value': 'FAULTED',
            'num': format_hits(l2_writes_sent),
        }
        output['l2_arc_writes']['done_ratio'] = _pair(
            l2_writes_done, l2_writes_sent)
        output['l2_arc_writes']['error_ratio'] = _pair(
            l2_writes_error, l2_writes_sent)
    else:
        output['l2_arc_writes']['writes_sent'] = _pair(
            l2_writes_sent, l2_writes_sent)

    return output


def _l2arc_summary(kstats):
    arc = get_l2arc_summary(kstats['arcstats'])

    if not arc['present']:
        return ['L2ARC not detected, skipping section']

    lines = [
        'L2ARC summary: (%s)' % arc['health'],
        _row('Low memory aborts:', num=arc['low_memory_aborts']),
        _row('Free on write:', num=arc['free_on_write']),
        _row('R/W clashes:', num=arc['rw_clashes']),
        _row('Bad checksums:', num=arc['bad_checksums']),
        _row('I/O errors:', num=arc['io_errors']),
        '',
        _row('L2ARC size (adaptive):', num=arc['l2_arc_size']['adaptive'],
             indent=0),
        _pair_row('Compressed:', arc['l2_arc_size']['actual']),
        _pair_row('Header size:', arc['l2_arc_size']['head_size']),
        '',
    ]

    evicts = arc['l2_arc_evicts']
    if evicts['total'] > 0:
        lines.extend([
            'L2ARC evicts:',
            _row('Lock retries:', num=evicts['lock_retries']),
            _row('Upon reading:', num=evicts['reading']),
            '',
        ])

    breakdown = arc['l2_arc_breakdown']
    lines.extend([
        _row('L2ARC breakdown:', num=breakdown['value'], indent=0),
        _pair_row('Hit ratio:', breakdown['hit_ratio']),
        _pair_row('Miss ratio:', breakdown['miss_ratio']),
        _row('Feeds:', num=breakdown['feeds']),
        '',
        'L2ARC writes:',
    ])

    writes = arc['l2_arc_writes']
    if 'done_ratio' in writes:
        lines.extend([
            _row('Writes sent: (%s)' % writes['writes_sent']['value'],
                 num=writes['writes_sent']['num']),
            _pair_row('Done ratio:', writes['done_ratio'], indent=2),
            _pair_row('Error ratio:', writes['error_ratio'], indent=2),
        ])
    else:
        lines.append(_pair_row('Writes sent:', writes['writes_sent']))

    return lines


def _listing(title, stats, formatter_for=None):
    lines = [title]
    for name in sorted(stats):
        if formatter_for is None:
            value = format_hits(stats[name])
        else:
            value = formatter_for(name)(stats[name])
        lines.append(_row('%s:' % name, num=value))
    return lines


def _dmu_summary(kstats):
    return _listing('DMU transactions:', kstats['dmu_tx'])


def _xuio_summary(kstats):
    return _listing('XUIO statistics:', kstats['xuio_stats'])


def _zil_formatter(name):
    return format_bytes if 'bytes' in name else format_hits


def _zil_summary(kstats):
    return _listing('ZIL committed transactions:', kstats['zil'],
                    _zil_formatter)


def get_zfetch_summary(zfetch_stats):
    zfetch_hits, zfetch_misses = _values(
        'zfetchstats', zfetch_stats, 'hits', 'misses')
    zfetch_access_total = zfetch_hits + zfetch_misses

    output = {}
    output['value'] = format_hits(zfetch_access_total)
    output['hit_ratio'] = _pair(zfetch_hits, zfetch_access_total)
    output['miss_ratio'] = _pair(zfetch_misses, zfetch_access_total)
    output['other'] = dict(
        (name, value) for name, value in zfetch_stats.items()
        if name not in ('hits', 'misses'))
    return output


def _zfetch_summary(kstats):
    zfetch = get_zfetch_summary(kstats['zfetchstats'])
    lines = [
        _row('DMU prefetch efficiency:', num=zfetch['value'], indent=0),
        _pair_row('Hit ratio:', zfetch['hit_ratio']),
        _pair_row('Miss ratio:', zfetch['miss_ratio']),
    ]
    if zfetch['other']:
        lines.append('')
        lines.extend(_listing('DMU prefetch statistics:', zfetch['other']))
    return lines


def get_vdev_summary(vdev_stats):
    '''
    Derive the VDEV cache ratios. Hits, misses and delegations are each
    given as a share of the sum of the three counters.
    '''
    vdev_cache_delegations, vdev_cache_hits, vdev_cache_misses = _values(
        'vdev_cache_stats', vdev_stats, 'delegations', 'hits', 'misses')
    vdev_cache_total = (vdev_cache_misses + vdev_cache_hits +
                        vdev_cache_delegations)

    output = {}
    output['vdev_cache_total'] = vdev_cache_total
    output['summary'] = format_hits(vdev_cache_total)
    output['hit_ratio'] = _pair(vdev_cache_hits, vdev_cache_total)
    output['miss_ratio'] = _pair(vdev_cache_misses, vdev_cache_total)
    output['delegations'] = _pair(vdev_cache_delegations, vdev_cache_total)
    return output


def _vdev_summary(kstats):
    vdev = get_vdev_summary(kstats['vdev_cache_stats'])
    return [
        _row('VDEV cache summary:', num=vdev['summary'], indent=0),
        _pair_row('Hit ratio:', vdev['hit_ratio']),
        _pair_row('Miss ratio:', vdev['miss_ratio']),
        _pair_row('Delegations:', vdev['delegations']),
    ]


def _tunables_summary(tunables, descriptions=None, alternate=False):
    if alternate:
        form = '%s%s=%s'
    else:
        form = '%s%-50s%s'

    lines = ['ZFS tunables:']
    for name in sorted(tunables):
        if descriptions and name in descriptions:
            lines.append('%s# %s' % (INDENT, descriptions[name]))
        lines.append(form % (INDENT, name, tunables[name]))
    return lines


_renderers = {
    'arc': _arc_summary,
    'dmu': _dmu_summary,
    'l2arc': _l2arc_summary,
    'vdev': _vdev_summary,
    'xuio': _xuio_summary,
    'zfetch': _zfetch_summary,
    'zil': _zil_summary,
}


def build_report(kstats, tunables=None, descriptions=None, section=None,
                 alternate=False):
    '''
    Build the human-readable report.

    :param dict kstats: kstat file name to section statistics, holding at
        least the files the requested sections are built from.
    :param tunables: module parameter name to value; needed for the
        ``tunables`` section.
    :param descriptions: optional parameter name to description.
    :param section: a single section to report, all of them if `None`.
    :param bool alternate: print tunables as ``name=value``.
    :return: the report as a list of lines.

    :raises UnknownSectionError: if `section` is not a known section.
    :raises MissingStatError: if a statistic a section needs is absent.
    :raises KstatValueError: if a statistic is not a valid number.
    '''
    if section is None:
        sections = SECTIONS
    else:
        sections = (check_section(section),)

    lines = []
    for name in sections:
        if name == 'tunables':
            lines.extend(
                _tunables_summary(tunables or {}, descriptions, alternate))
        else:
            lines.extend(_renderers[name](kstats))
        lines.append('')
    return lines


def raw_report(kstats, tunables=None, proc_path=PROC_PATH,
               tunables_path=TUNABLES_PATH):
    '''
    Dump every statistic and tunable as it was read, sorted by name.
    '''
    lines = []
    for name in sorted(kstats):
        lines.extend(['', os.path.join(proc_path, name)])
        stats = kstats[name]
        for stat in sorted(stats):
            lines.append('\t%-40s%s' % (stat, stats[stat]))

    if tunables is not None:
        lines.extend(['', tunables_path])
        for name in sorted(tunables):
            lines.append('\t%-40s%s' % (name, tunables[name]))
    return lines


def graphic_report(kstats):
    '''
    Draw a primitive graph of the ARC: how full it is with respect to its
    maximum size, and which share of it MFU and MRU take. This is a very
    rough representation.
    '''
    arc_size, target_max_size, mfu_size, mru_size = _values(
        'arcstats', kstats['arcstats'], 'size', 'c_max', 'mfu_size',
        'mru_size')

    info_line = 'ARC: %s (%s)  MFU: %s  MRU: %s' % (
        format_bytes(arc_size),
        format_percent(arc_size, target_max_size),
        format_bytes(mfu_size),
        format_bytes(mru_size))
    info_spc = ' ' * max(0, (GRAPH_WIDTH - len(info_line)) // 2)

    inner_width = GRAPH_WIDTH - 2
    if target_max_size > 0:
        total_ticks = inner_width * arc_size // target_max_size
        mfu_ticks = inner_width * mfu_size // target_max_size
        mru_ticks = inner_width * mru_size // target_max_size
    else:
        total_ticks = mfu_ticks = mru_ticks = 0

    # The ARC may briefly grow past c_max
    total_ticks = min(total_ticks, inner_width)
    mfu_ticks = min(mfu_ticks, total_ticks)
    mru_ticks = min(mru_ticks, total_ticks - mfu_ticks)
    other_ticks = total_ticks - (mfu_ticks + mru_ticks)

    core_form = 'F' * mfu_ticks + 'R' * mru_ticks + 'O' * other_ticks
    graph_line = INDENT + '+' + '-' * inner_width + '+'
    core_line = INDENT + '|' + core_form.ljust(inner_width) + '|'

    return [
        '',
        INDENT + info_spc + info_line,
        graph_line,
        core_line,
        graph_line,
        '',
    ]
