# -*- coding: utf-8 -*-
"""Line output sink and line input readers."""

from pysed.sederrors import SedIOError


class Writer(object):
    """ Wraps the text stream all output goes to.
        line_wrap is the width used when the pattern space is printed
        automatically (0 means never wrap).
    """

    def __init__(self, output, line_wrap=0, name=None):
        self.output = output
        self.line_wrap = line_wrap
        self.name = name

    def write(self, text):
        try:
            self.output.write(text)
        except (IOError, ValueError) as e:
            raise SedIOError('', 'Can not write to {out}: {err}',
                             out=self.name or '<output>', err=str(e)) from e

    def writeline(self, text):
        self.write(text + '\n')

    def printline(self, line):
        l = len(line)
        if self.line_wrap <= 0 or l < self.line_wrap:
            self.writeline(line)
        else:
            for i in range(0, l, self.line_wrap):
                self.writeline(line[i:i + self.line_wrap])

    def print_pattern_space(self, pattern_space):
        for line in pattern_space.split('\n'):
            self.printline(line)

    def flush(self):
        try:
            self.output.flush()
        except (AttributeError, IOError, ValueError):
            pass


# The reader classes below provide the input lines to the execution cycle.
# The buffered variant reads one line ahead to know the last line of input
# and is only used if the script contains a $ address.

class ReaderUnbuffered(object):
    """ Reads one line at a time from a text stream. Only the trailing newline
        of each line is removed, a carriage return before it stays.
        A last line without newline is returned too.
    """

    def __init__(self, stream, name='-', last_input=True):
        self.stream = stream
        self.name = name
        self.last_input = last_input

    def _read(self):
        try:
            line = self.stream.readline()
        except (IOError, UnicodeDecodeError) as e:
            raise SedIOError('', 'Can not read from {name}: {err}',
                             name=self.name, err=str(e)) from e
        if not line:
            return None
        if line.endswith('\n'):
            line = line[:-1]
        return line

    def readline(self):
        return self._read()

    def is_last_line(self):
        return False


class ReaderBuffered(ReaderUnbuffered):
    """ Keeps the next line in a look-ahead buffer, so that the last
        line of the last input can be detected.
    """

    def __init__(self, stream, name='-', last_input=True):
        super(ReaderBuffered, self).__init__(stream, name, last_input)
        self.next_line = self._read()

    def readline(self):
        line = self.next_line
        if line is not None:
            self.next_line = self._read()
        return line

    def is_last_line(self):
        return self.last_input and self.next_line is None


def get_reader(stream, name='-', last_input=True, needs_last_line=False):
    if needs_last_line:
        return ReaderBuffered(stream, name, last_input)
    return ReaderUnbuffered(stream, name, last_input)
