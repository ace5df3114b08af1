# -*- coding: utf-8 -*-
"""
The commands of a sed script.

Every command found in the script becomes a Command instance. The command
letter (Command.function) selects the behaviour: Command.apply() looks the
letter up in COMMANDS and calls the matching apply function with the
session. Each apply function returns True if the rest of the main command
list must be skipped for the current line.
"""
import logging

from pysed.sedaddress import (address_matches, ADDRESS_LINE, ADDRESS_RANGE,
                              ADDRESS_TO_END_OF_FILE, ADDRESS_LAST_LINE,
                              ADDRESS_REGEXP)
from pysed.sederrors import CommandNotImplemented, SedQuit

logger = logging.getLogger('PySed.Commands')

# commands taking a text block, possibly continued over several script lines
TEXT_COMMANDS = 'aic'
# commands without any parameter
SIMPLE_COMMANDS = 'dDgGhHnNpP=x'

DESCRIPTIONS = {
    'a': 'Append text after the line',
    'b': 'Branch to label',
    'c': 'Change the line to text',
    'd': 'Delete pattern space',
    'D': 'Delete pattern space up to first newline',
    'g': 'Replace pattern space with hold space',
    'G': 'Append a newline and the hold space to the pattern space',
    'h': 'Replace hold space with pattern space',
    'H': 'Append a newline and the pattern space to the hold space',
    'i': 'Insert text before the line',
    'n': 'Print pattern space and read next line',
    'N': 'Append a newline and the next line to the pattern space',
    'p': 'Print pattern space',
    'P': 'Print pattern space up to first newline',
    'q': 'Quit',
    'r': 'Write text',
    's': 'Substitute',
    'x': 'Exchange pattern space and hold space',
    '=': 'Print line number',
}


class Command(object):
    """ A compiled command. Its parameters are fixed when the script is
        parsed and never change afterwards.
    """

    def __init__(self, function, address=None, text=None, label=None,
                 exit_code=0, regexp=None, replacement=None, occurrence=None):
        self.function = function
        self.address = address
        self.text = text
        self.label = label
        self.exit_code = exit_code
        self.regexp = regexp
        self.replacement = replacement
        self.occurrence = occurrence

    def __str__(self):
        addr = '' if self.address is None else str(self.address)
        return '{addr}{cmd}{args}'.format(addr=addr,
                                          cmd=self.function,
                                          args=self.str_arguments())

    def __repr__(self):
        return 'Command<{}>'.format(self.__str__())

    def str_arguments(self):
        if self.function == 's':
            return '{regex}{repl}/{flags}'.format(regex=self.regexp,
                                                   repl=self.replacement,
                                                   flags=self.occurrence)
        elif self.function == 'q':
            return '/' + str(self.exit_code) if self.exit_code else ''
        elif self.function == 'b':
            return ' ' + self.label if self.label else ''
        elif self.text is not None:
            return self.text.replace('\n', '\\\n')
        return ''

    def describe(self):
        """human readable description used in diagnostics."""
        result = '{' + DESCRIPTIONS[self.function] + ' Cmd'
        if self.address is not None:
            result += ' addr:' + str(self.address)
        if self.function == 's':
            result += ' ' + self.str_arguments()
        return result + '}'

    def matches(self, session):
        return address_matches(self.address,
                               session.line_number,
                               session.pattern_space,
                               session.is_last_line())

    def apply(self, session):
        return COMMANDS[self.function](self, session)


def apply_a(command, session):
    session.output.writeline(command.text)
    return False


def apply_b(command, session):
    raise CommandNotImplemented("This command hasn't been implemented yet")


def apply_c(command, session):
    session.pattern_space = ''
    address = command.address
    if address is None:
        session.output.write(command.text)
        return True
    if address.kind == ADDRESS_RANGE:
        if session.line_number + 1 == address.end:
            session.output.write(command.text)
            return True
    elif address.kind in (ADDRESS_LINE, ADDRESS_REGEXP, ADDRESS_LAST_LINE):
        session.output.write(command.text)
        return True
    elif address.kind == ADDRESS_TO_END_OF_FILE:
        # TODO: emit the text once the end of the input is reached
        logger.warning('Change with an address range up to end of file is not handled')
    return False


def apply_d(command, session):
    session.pattern_space = ''
    return True


def apply_D(command, session):
    idx = session.pattern_space.find('\n')
    if idx >= 0:
        session.pattern_space = session.pattern_space[idx + 1:]
    else:
        session.pattern_space = ''
    return True


def apply_equal(command, session):
    session.stdout.write('\n{num}\n'.format(num=session.line_number))
    return False


def apply_g(command, session):
    session.pattern_space = session.hold_space
    return False


def apply_G(command, session):
    session.pattern_space += '\n' + session.hold_space
    return False


def apply_h(command, session):
    session.hold_space = session.pattern_space
    return False


def apply_H(command, session):
    session.hold_space += '\n' + session.pattern_space
    return False


def apply_i(command, session):
    session.output.write(command.text)
    return False


def apply_n(command, session):
    if not session.quiet:
        session.print_pattern_space()
    line = session.read_line()
    if line is None:
        return False
    session.pattern_space = line
    return True


def apply_N(command, session):
    line = session.read_line()
    if line is None:
        return False
    session.pattern_space += '\n' + line
    return True


def apply_p(command, session):
    session.output.writeline(session.pattern_space)
    return False


def apply_P(command, session):
    session.output.writeline(session.pattern_space.split('\n', 1)[0])
    return False


def apply_q(command, session):
    raise SedQuit(command.exit_code)


def apply_r(command, session):
    if command.text:
        session.output.write(command.text)
    return False


def apply_s(command, session):
    session.pattern_space = command.regexp.subn(command.replacement,
                                                session.pattern_space,
                                                command.occurrence)
    return False


def apply_x(command, session):
    session.pattern_space, session.hold_space = session.hold_space, session.pattern_space
    return False


COMMANDS = {
    'a': apply_a,
    'b': apply_b,
    'c': apply_c,
    'd': apply_d,
    'D': apply_D,
    'g': apply_g,
    'G': apply_G,
    'h': apply_h,
    'H': apply_H,
    'i': apply_i,
    'n': apply_n,
    'N': apply_N,
    'p': apply_p,
    'P': apply_P,
    'q': apply_q,
    'r': apply_r,
    's': apply_s,
    'x': apply_x,
    '=': apply_equal,
}
