# -*- coding: utf-8 -*-
"""The run state shared by the parser, the commands and the execution cycle."""
import logging
import sys

from pysed.sederrors import OperationFailure, SedIOError
from pysed.sedfsi import LocalFSI
from pysed.sedio import Writer


class SedSession(object):
    """
    Holds the pattern space, the hold space, the line counter and the
    compiled command lists of one pysed run.
    Insert commands go to 'before', append commands to 'after' and all
    other commands to 'main', each list in script order.
    The hold space survives from one input file to the next.
    """

    def __init__(self, output=None, stdout=None, quiet=False, line_wrap=0):
        self.line_number = 0
        self.pattern_space = ''
        self.hold_space = ''
        self.before = []
        self.main = []
        self.after = []
        self.quiet = quiet
        self.needs_last_line = False
        self.reader = None
        self._stdout = stdout
        self.output = Writer(output if output is not None else self.stdout,
                             line_wrap)

    @property
    def stdout(self):
        # resolved late so that a replaced sys.stdout is honoured
        return self._stdout if self._stdout is not None else sys.stdout

    @property
    def line_wrap(self):
        return self.output.line_wrap

    def add_command(self, command):
        if command.function == 'i':
            self.before.append(command)
        elif command.function == 'a':
            self.after.append(command)
        else:
            self.main.append(command)

    def commands(self):
        return self.before + self.main + self.after

    def set_output(self, output, name=None):
        self.output = Writer(output, self.output.line_wrap, name)

    def read_line(self):
        if self.reader is None:
            return None
        line = self.reader.readline()
        if line is not None:
            self.line_number += 1
        return line

    def is_last_line(self):
        return self.reader is not None and self.reader.is_last_line()

    def print_pattern_space(self):
        self.output.print_pattern_space(self.pattern_space)


class InplaceEdit(object):
    """
    Output of an in-place run goes to a temporary file next to the input
    file (the input name plus '.tmp', or '-<n>.tmp' if that exists already).
    When the input is fully processed, finish() truncates the input file,
    copies the temporary file into it and removes the temporary file.
    The input file is already truncated when the copy starts; if the copy
    fails the output is left in the temporary file.
    """

    def __init__(self, filename, encoding=None, fsi=None):
        self.filename = filename
        self.encoding = encoding
        self.logger = logging.getLogger('PySed.Session')
        self.fsi = fsi if fsi is not None else LocalFSI(logger=self.logger.debug)
        self.temp_filename = self.make_temp_name()
        self.temp = None

    def make_temp_name(self):
        name = self.filename + '.tmp'
        tmpc = 0
        while self.fsi.exists(name):
            tmpc += 1
            name = '{f}-{n}.tmp'.format(f=self.filename, n=tmpc)
        return name

    def start(self):
        try:
            self.temp = self.fsi.create(self.temp_filename, encoding=self.encoding)
        except OperationFailure as e:
            raise SedIOError('', 'Error opening temp file for inplace editing: {err}',
                             err=str(e)) from e
        self.logger.debug('writing output for %s to %s on %s',
                          self.filename, self.temp_filename, self.fsi.repr())
        return self.temp

    def abandon(self):
        self.temp.close()
        self.logger.warning('%s not rewritten, output left in %s',
                            self.filename, self.temp_filename)

    def finish(self):
        self.temp.flush()
        self.temp.seek(0)
        try:
            self.fsi.stat(self.filename)
        except OperationFailure as e:
            self.temp.close()
            raise SedIOError('', 'Error getting information about input file: {file} {err}',
                             file=self.filename, err=str(e)) from e
        try:
            original = self.fsi.truncate(self.filename, encoding=self.encoding)
        except OperationFailure as e:
            self.temp.close()
            raise SedIOError('', 'Error opening input file for inplace editing: {err}',
                             err=str(e)) from e
        try:
            self.fsi.copy(self.temp, original)
        except OperationFailure as e:
            self.logger.error('copying %s back failed, full output is in %s',
                              self.filename, self.temp_filename)
            raise SedIOError('', 'Error copying temp file back to input file: {err}\n'
                             'Full output is in {tmp}',
                             err=str(e), tmp=self.temp_filename) from e
        finally:
            original.close()
            self.temp.close()
        try:
            self.fsi.remove(self.temp_filename)
        except OperationFailure as e:
            raise SedIOError('', 'Can not remove temp file {tmp}: {err}',
                             tmp=self.temp_filename, err=str(e)) from e
        self.logger.debug('%s rewritten in place', self.filename)
