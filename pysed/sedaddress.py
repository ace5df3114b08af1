# -*- coding: utf-8 -*-
"""
Addresses select the input lines a command applies to.

An address is one of a closed set of kinds, each checked in
Address.matches(). A command without address is stored with None
as its address and applies to every line.
"""

ADDRESS_LINE = 0
ADDRESS_RANGE = 1
ADDRESS_TO_END_OF_FILE = 2
ADDRESS_LAST_LINE = 3
ADDRESS_REGEXP = 4
ADDRESS_NAMES = {
        ADDRESS_LINE: 'line',
        ADDRESS_RANGE: 'range',
        ADDRESS_TO_END_OF_FILE: 'to end of file',
        ADDRESS_LAST_LINE: 'last line',
        ADDRESS_REGEXP: 'regular expression',
    }


class Address(object):

    def __init__(self, kind, start=0, end=0, regexp=None, negate=False):
        if kind == ADDRESS_RANGE and end < start:
            # a range ending before it starts only selects its first line
            kind, end = ADDRESS_LINE, start
        self.kind = kind
        self.start = start
        self.end = end
        self.regexp = regexp
        self.negate = negate

    @classmethod
    def line(cls, num, negate=False):
        return cls(ADDRESS_LINE, start=num, end=num, negate=negate)

    @classmethod
    def range(cls, start, end, negate=False):
        return cls(ADDRESS_RANGE, start=start, end=end, negate=negate)

    @classmethod
    def to_end_of_file(cls, start, negate=False):
        return cls(ADDRESS_TO_END_OF_FILE, start=start, negate=negate)

    @classmethod
    def last_line(cls, negate=False):
        return cls(ADDRESS_LAST_LINE, negate=negate)

    @classmethod
    def matching(cls, regexp, negate=False):
        return cls(ADDRESS_REGEXP, regexp=regexp, negate=negate)

    def __eq__(self, other):
        if not isinstance(other, Address):
            return NotImplemented
        return (self.kind == other.kind
                and self.start == other.start
                and self.end == other.end
                and self.negate == other.negate
                and (self.regexp.pattern if self.regexp else None)
                == (other.regexp.pattern if other.regexp else None))

    def __ne__(self, other):
        result = self.__eq__(other)
        return result if result is NotImplemented else not result

    def __hash__(self):
        return hash((self.kind, self.start, self.end, self.negate))

    def __str__(self):
        if self.kind == ADDRESS_LINE:
            result = str(self.start)
        elif self.kind == ADDRESS_RANGE:
            result = '{},{}'.format(self.start, self.end)
        elif self.kind == ADDRESS_TO_END_OF_FILE:
            result = '{},$'.format(self.start)
        elif self.kind == ADDRESS_LAST_LINE:
            result = '$'
        else:
            result = str(self.regexp)
        return result + ('!' if self.negate else '')

    def __repr__(self):
        return 'Address<{kind} {addr}>'.format(kind=ADDRESS_NAMES[self.kind],
                                               addr=self.__str__())

    def matches(self, line_number, line, last_line=False):
        if self.kind == ADDRESS_LINE:
            val = line_number == self.start
        elif self.kind == ADDRESS_RANGE:
            val = self.start <= line_number <= self.end
        elif self.kind == ADDRESS_TO_END_OF_FILE:
            val = line_number >= self.start
        elif self.kind == ADDRESS_LAST_LINE:
            val = last_line
        elif self.kind == ADDRESS_REGEXP:
            val = self.regexp.matches(line)
        else:
            val = False
        if self.negate:
            val = not val
        return val


def address_matches(address, line_number, line, last_line=False):
    """None stands for 'no address' and matches every line."""
    if address is None:
        return True
    return address.matches(line_number, line, last_line)
