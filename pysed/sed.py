# -*- coding: utf-8 -*-
"""
The execution cycle of pysed.

For every input line the cycle
  - runs the insert commands whose address matches,
  - runs the main commands in script order until one of them asks to stop,
  - prints the pattern space unless -n/#n is active or a command stopped,
  - runs the append commands whose address matches.
"""
import logging
import os
import sys

from pysed.sedcommon import DEFAULT_ENCODING
from pysed.sederrors import SedException, SedIOError, SedQuit, SedRuntimeError
from pysed.sedio import get_reader
from pysed.sedparser import Script
from pysed.sedsession import SedSession, InplaceEdit


class Sed(object):
    """Usage:
    from pysed import Sed, SedException
    sed = Sed()
    sed.no_autoprint = True/False
    sed.in_place = True/False
    sed.separate = True/False
    sed.line_wrap = wrap width for automatic printing (0=never)
    sed.debug = debug level (0=no debug, 1=trace execution,
                             2=trace execution and dump the compiled script)
    sed.load_script(myscript)             file name
    sed.load_string(mystring)             literal string
    exit_code = sed.apply(myinput)            print lines to stdout
    exit_code = sed.apply(myinput, myoutput)  print lines to myoutput
    myinput and myoutput may be:
    * strings, in that case they are interpreted as file names
    * file-like objects (including streams)
    myinput may also be a list of them.
    Note that if myinput or myoutput are file-like objects, they must be closed
    by the caller.
    Errors found while loading a script are raised as SedException. Errors
    found by apply are written to stderr and make apply return 1; a q
    command makes apply return the exit code of q.
    """

    def __init__(self,
                 encoding=DEFAULT_ENCODING,
                 line_wrap=0,
                 no_autoprint=False,
                 in_place=False,
                 separate=False,
                 debug=0,
                 fsi=None,
                 stdout=None,
                 stderr=None):
        self.encoding = encoding
        self.in_place = in_place
        self.separate = separate
        self.debug = debug
        self.fsi = fsi
        self._stderr = stderr
        self.session = SedSession(stdout=stdout, quiet=no_autoprint, line_wrap=line_wrap)
        self.script = Script(self.session)
        self.exit_code = 0
        self.logger = logging.getLogger('PySed.Runtime')

    @property
    def no_autoprint(self):
        return self.session.quiet

    @no_autoprint.setter
    def no_autoprint(self, value):
        self.session.quiet = value

    @property
    def line_wrap(self):
        return self.session.line_wrap

    @line_wrap.setter
    def line_wrap(self, value):
        self.session.output.line_wrap = value

    @property
    def stderr(self):
        return self._stderr if self._stderr is not None else sys.stderr

    def load_string(self, string):
        self.script.compile(string)

    def read_script(self, filename):
        try:
            with open(filename, 'rt', encoding=self.encoding) as f:
                return f.read()
        except (IOError, UnicodeDecodeError) as e:
            raise SedIOError('', 'Error reading script file {file}: {err}',
                             file=filename, err=str(e)) from e

    def load_script(self, filename):
        self.script.compile(self.read_script(filename))

    def _inputs(self, inputs):
        if inputs is None:
            return [sys.stdin]
        if not isinstance(inputs, (list, tuple)):
            inputs = [inputs]
        inputs = list(inputs)
        if len(inputs) == 0:
            return [sys.stdin]
        return inputs

    def _open_input(self, source):
        """returns (name, stream, opened_here) for a file name or stream."""
        if isinstance(source, str):
            if source == '-':
                return None, sys.stdin, False
            try:
                return source, open(source, 'rt', encoding=self.encoding, newline='\n'), True
            except (IOError, OSError) as e:
                raise SedIOError('', 'could not open input file: {file}: {err}',
                                 file=source, err=str(e)) from e
        return None, source, False

    def _is_empty_file(self, source):
        return (isinstance(source, str) and source != '-'
                and os.path.isfile(source) and os.path.getsize(source) == 0)

    def apply(self, inputs=None, output=None):
        session = self.session
        out_file = None
        self.exit_code = 0
        session.hold_space = ''
        session.line_number = 0
        saved_output = session.output
        try:
            if isinstance(output, str):
                try:
                    out_file = open(output, 'wt', encoding=self.encoding, newline='\n')
                except (IOError, OSError) as e:
                    raise SedIOError('', 'Can not open output file {file}: {err}',
                                     file=output, err=str(e)) from e
                session.set_output(out_file, output)
            elif output is not None:
                session.set_output(output)
            if self.debug > 1:
                self.logger.debug('compiled script:\n%s', self.script)
            inputs = self._inputs(inputs)
            if self.in_place and not any(isinstance(i, str) and i != '-' for i in inputs):
                self.logger.warning('Option -i ignored')
            for idx, source in enumerate(inputs):
                # empty files at the end do not hide the last line before them
                last_input = all(self._is_empty_file(s) for s in inputs[idx + 1:])
                self.process_input(source, last_input)
        except SedQuit as q:
            self.exit_code = q.exit_code
        except SedException as e:
            self.stderr.write(e.message + '\n')
            self.exit_code = 1
        finally:
            session.output.flush()
            session.output = saved_output
            if out_file is not None:
                out_file.close()
        return self.exit_code

    def process_input(self, source, last_input=True):
        session = self.session
        name, stream, opened = self._open_input(source)
        inplace = None
        saved_output = session.output
        if self.in_place and name is not None:
            inplace = InplaceEdit(name, self.encoding, self.fsi)
            try:
                session.set_output(inplace.start(), inplace.temp_filename)
            except SedException:
                stream.close()
                raise
        if self.separate or inplace is not None:
            session.line_number = 0
            last_input = True
        session.reader = get_reader(stream, name or '-', last_input, session.needs_last_line)
        try:
            self.process()
        except (SedQuit, SedException):
            if inplace is not None:
                # no copy back, the output stays in the temp file
                inplace.abandon()
            raise
        finally:
            session.reader = None
            if opened:
                stream.close()
            if inplace is not None:
                session.output = saved_output
        if inplace is not None:
            inplace.finish()

    def process(self):
        session = self.session
        line = session.read_line()
        while line is not None:
            session.pattern_space = line
            self.cycle()
            line = session.read_line()

    def cycle(self):
        session = self.session
        if self.debug > 0:
            self.logger.debug('new cycle: line %d, pattern space %r, hold space %r',
                              session.line_number, session.pattern_space, session.hold_space)
        for command in session.before:
            if command.matches(session):
                command.apply(session)
        stop = False
        for command in session.main:
            if not command.matches(session):
                if self.debug > 0:
                    self.logger.debug('skipping %s', command)
                continue
            try:
                stop = command.apply(session)
            except SedRuntimeError as e:
                e.add_context(session.line_number, session.pattern_space, command)
                raise
            if self.debug > 0:
                self.logger.debug('executed %s: pattern space %r, hold space %r',
                                  command, session.pattern_space, session.hold_space)
            if stop:
                break
        if not session.quiet and not stop:
            session.print_pattern_space()
        for command in session.after:
            if command.matches(session):
                command.apply(session)
