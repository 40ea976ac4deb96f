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
Exceptions that can be raised while collecting and formatting ARC statistics.
"""


class ArcSummaryError(Exception):
    message = None
    name = None

    def __str__(self):
        if self.name is not None:
            return "%s: '%s'" % (self.message, self.name)
        else:
            return "%s" % self.message

    def __repr__(self):
        return "%s(%r, %r)" % (
            self.__class__.__name__, self.message, self.name)


class KstatFormatError(ArcSummaryError):
    message = "Malformed kstat line, incompatible kernel interface"

    def __init__(self, line):
        self.name = line


class KstatValueError(ArcSummaryError):
    message = "Value is not a valid unsigned 64-bit number"

    def __init__(self, value):
        self.name = value


class KstatReadError(ArcSummaryError):

    def __init__(self, path, strerror):
        self.name = path
        self.message = "Could not read kstat data (%s)" % strerror


class MissingStatError(ArcSummaryError):

    def __init__(self, section, stat):
        self.name = stat
        self.message = "Statistic missing from %s" % section
        self.section = section


class UnknownSectionError(ArcSummaryError):
    message = "Unknown section"

    def __init__(self, name):
        self.name = name


# vim: softtabstop=4 tabstop=4 expandtab shiftwidth=4
