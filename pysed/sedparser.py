# -*- coding: utf-8 -*-
"""
Compiles the text of a sed script into the command lists of a session.

The script is processed one line at a time. Each line holds at most one
command: an optional address followed by the command letter. Parameters
of all commands but a, i, c and r are separated by a fixed '/' delimiter.
The text of a, i and c continues on the next script line as long as it
ends with a backslash.
"""
import logging
import re

from pysed.sedaddress import Address
from pysed.sedcommands import Command, TEXT_COMMANDS, SIMPLE_COMMANDS
from pysed.sederrors import (UnknownCommand, WrongParameterCount, EmptyRegex,
                             UnterminatedRegex, InvalidSubstituteFlag,
                             InvalidExitCode)
from pysed.sedregexp import SedRegexp, Occurrence

NUMBER = re.compile(r'[0-9]+')
DELIMITER = '/'


class Script(object):

    def __init__(self, session):
        self.session = session
        self.logger = logging.getLogger('PySed.Parser')
        self.script_lines = []
        self.script_line_number = 0
        # text of the script line being compiled, for error messages
        self.current = ''
        self.buffers = 0

    def __str__(self):
        commands = self.session.commands()
        if not commands:
            return '<nothing compiled yet>'
        result = ''
        for idx, command in enumerate(commands):
            result += '|{num:03d}| {cmd}\n'.format(num=idx + 1, cmd=command)
        return result

    def get_next_script_line(self):
        if self.script_line_number < len(self.script_lines):
            line = self.script_lines[self.script_line_number]
            self.script_line_number += 1
            return line
        return None

    def error(self, cls, message, **params):
        return cls(self.script_line_number, self.current, message, **params)

    def compile(self, text):
        self.script_lines = text.split('\n')
        self.script_line_number = 0
        self.buffers += 1
        while True:
            line = self.get_next_script_line()
            if line is None:
                break
            line = line.lstrip()
            if len(line) == 0:
                continue
            if line[0] == '#':
                # '#n' on the very first line works like option -n
                if (line.startswith('#n') and self.buffers == 1
                        and self.script_line_number == 1):
                    self.session.quiet = True
                continue
            self.current = line
            command = self.get_command(line)
            self.logger.debug('compiled script line %d: %s',
                              self.script_line_number, command)
            self.session.add_command(command)

    def get_number(self, line):
        match = NUMBER.match(line)
        return line[match.end():], int(match.group())

    def get_address(self, line):
        """ Returns the rest of the line and the address found at its start,
            which is None if the line does not start with an address.
        """
        if line[0] == '/':
            end = line.find('/', 1)
            if end < 0:
                raise self.error(UnterminatedRegex, 'Unterminated regular expression')
            pattern = line[1:end]
            if len(pattern) == 0:
                raise self.error(EmptyRegex,
                                 'Expected a regular expression, got zero length string')
            regexp = SedRegexp(pattern, self.script_line_number, self.current)
            line, negate = self.get_negation(line[end + 1:])
            return line, Address.matching(regexp, negate)
        elif line[0] == '$':
            self.session.needs_last_line = True
            line, negate = self.get_negation(line[1:])
            return line, Address.last_line(negate)
        elif line[0] in '0123456789':
            line, start = self.get_number(line)
            if line.startswith(','):
                line = line[1:]
                if NUMBER.match(line):
                    line, end = self.get_number(line)
                    line, negate = self.get_negation(line)
                    return line, Address.range(start, end, negate)
                if line.startswith('$'):
                    line = line[1:]
                line, negate = self.get_negation(line)
                return line, Address.to_end_of_file(start, negate)
            line, negate = self.get_negation(line)
            return line, Address.line(start, negate)
        return line, None

    def get_negation(self, line):
        if line.startswith('!'):
            return line[1:], True
        return line, False

    def get_text(self, text, trim):
        while text.endswith('\\'):
            text = text[:-1]
            line = self.get_next_script_line()
            if line is None:
                break
            text += '\n' + line
        if trim:
            text = text.lstrip()
        return text

    def get_command(self, line):
        line, address = self.get_address(line)
        if len(line) == 0:
            raise self.error(UnknownCommand, 'Unknown script command')
        function = line[0]
        if function in TEXT_COMMANDS:
            return Command(function, address,
                           text=self.get_text(line[1:], trim=(function != 'i')))
        elif function == 'r':
            return Command(function, address, text=line[1:] or None)
        pieces = line.split(DELIMITER)
        if function in SIMPLE_COMMANDS:
            if len(pieces) > 1:
                raise self.error(WrongParameterCount,
                                 'Wrong number of parameters for command {cmd}',
                                 cmd=function)
            return Command(function, address)
        elif function == 'b':
            if len(pieces) != 1:
                raise self.error(WrongParameterCount,
                                 'Wrong number of parameters for command {cmd}',
                                 cmd=function)
            return Command(function, address, label=pieces[0][1:].strip())
        elif function == 'q':
            return Command(function, address, exit_code=self.get_exit_code(pieces))
        elif function == 's':
            return self.get_substitute(pieces, address)
        raise self.error(UnknownCommand, 'Unknown script command {cmd}', cmd=function)

    def get_exit_code(self, pieces):
        if len(pieces) == 2:
            code = pieces[1]
        elif len(pieces) == 1:
            code = pieces[0][1:].strip()
            if not code:
                return 0
        else:
            raise self.error(WrongParameterCount,
                             'Wrong number of parameters for command q')
        try:
            return int(code)
        except ValueError as e:
            raise self.error(InvalidExitCode, 'Invalid exit code for command q: {err}',
                             err=str(e)) from e

    def get_substitute(self, pieces, address):
        if len(pieces) != 4:
            raise self.error(WrongParameterCount,
                             'Wrong number of parameters for command s')
        pattern, replacement, flag = pieces[1], pieces[2], pieces[3].strip()
        if len(pattern) == 0:
            raise self.error(EmptyRegex,
                             "Regular expression in s command can't be zero length")
        regexp = SedRegexp(pattern, self.script_line_number, self.current)
        if flag == 'g':
            occurrence = Occurrence.all()
        elif flag == '':
            occurrence = Occurrence(1)
        elif NUMBER.fullmatch(flag) and int(flag) > 0:
            occurrence = Occurrence(int(flag))
        else:
            raise self.error(InvalidSubstituteFlag,
                             'Invalid flag {flag} for s command', flag=flag)
        return Command('s', address, regexp=regexp, replacement=replacement,
                       occurrence=occurrence)
