# -*- coding: utf-8 -*-
"""Regular expressions for addresses and the s command."""
import regex

from pysed.sederrors import InvalidRegex


class Occurrence(object):
    """ Selects which matches the s command replaces: every match (global)
        or only the nth one.
    """

    def __init__(self, nth=1, globally=False):
        self.globally = globally
        self.nth = None if globally else nth

    @classmethod
    def all(cls):
        return cls(globally=True)

    def __eq__(self, other):
        return (isinstance(other, Occurrence)
                and self.globally == other.globally
                and self.nth == other.nth)

    def __ne__(self, other):
        return not self.__eq__(other)

    def __hash__(self):
        return hash((self.globally, self.nth))

    def __str__(self):
        return 'g' if self.globally else str(self.nth)

    def __repr__(self):
        return 'Occurrence({})'.format(self)


class SedRegexp(object):
    """ A regular expression compiled once when the script is parsed.
        Patterns are POSIX extended regular expressions: bracket classes
        like [[:digit:]] are understood and every search returns the
        leftmost-longest match.
    """

    def __init__(self, pattern, lineno=0, line=''):
        self.pattern = pattern
        try:
            self.compiled = regex.compile(pattern, regex.POSIX | regex.VERSION0)
        except regex.error as e:
            raise InvalidRegex(lineno, line,
                               'Invalid regex /{pattern}/: {err}',
                               pattern=pattern,
                               err=str(e)) from e

    def __str__(self):
        return '/' + self.pattern + '/'

    def __repr__(self):
        return self.__str__()

    def matches(self, strng):
        return self.compiled.search(strng) is not None

    def replace_all(self, replacement, strng):

        class Literal(object):

            def __init__(self):
                self.prevmatch_end = -1

            def __call__(self, matchobj):
                try:
                    # an empty match directly behind the previous match
                    # is not really a match, so nothing is inserted
                    if matchobj.group(0) == '' \
                       and matchobj.start(0) == self.prevmatch_end:
                        return ''
                    # the replacement is literal text: no & or \1 expansion
                    return replacement
                finally:
                    self.prevmatch_end = matchobj.end(0)

        return self.compiled.sub(Literal(), strng)

    def replace_nth(self, replacement, strng, nth):
        # Skipped matches only advance the scan by one character past the
        # match start, so overlapping matches are counted again.
        result = []
        count = 0
        remaining = strng
        while True:
            match = self.compiled.search(remaining)
            if match is None:
                result.append(remaining)
                break
            count += 1
            if count == nth:
                result.append(remaining[:match.start()])
                result.append(replacement)
                result.append(remaining[match.end():])
                break
            if not remaining:
                # every further search of the empty rest matches again
                result.append(replacement)
                break
            result.append(remaining[:match.start() + 1])
            remaining = remaining[match.start() + 1:]
        return ''.join(result)

    def subn(self, replacement, strng, occurrence):
        if occurrence.globally:
            return self.replace_all(replacement, strng)
        return self.replace_nth(replacement, strng, occurrence.nth)
