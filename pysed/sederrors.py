# -*- coding: utf-8 -*-
"""Errors and Exceptions."""


class SedException(Exception):
    """ Implements the error reporting exception in pysed.
        position is a free form location string (script line or input line)
        and may be empty.
    """

    def __init__(self, position, message, **params):
        super(SedException, self).__init__()
        self.position = position
        self.text = message.format(**params)
        if len(position) > 0:
            self.message = 'pysed error: {pos}: {msg}'.format(
                pos=position, msg=self.text)
        else:
            self.message = 'pysed error: {msg}'.format(msg=self.text)

    def __str__(self):
        return self.message


class SedParseError(SedException):
    """raised while compiling a script. Always fatal."""

    def __init__(self, lineno, line, message, **params):
        self.lineno = lineno
        self.line = line
        super(SedParseError, self).__init__(
            'script line {num} ({line})'.format(num=lineno, line=line),
            message, **params)


class UnknownCommand(SedParseError):
    pass


class WrongParameterCount(SedParseError):
    pass


class EmptyRegex(SedParseError):
    pass


class UnterminatedRegex(SedParseError):
    pass


class InvalidRegex(SedParseError):
    pass


class InvalidSubstituteFlag(SedParseError):
    pass


class InvalidExitCode(SedParseError):
    pass


class SedRuntimeError(SedException):
    """raised by a command while a line is processed.
    The execution cycle adds the input context with add_context()."""

    def __init__(self, message, **params):
        super(SedRuntimeError, self).__init__('', message, **params)
        self.line_number = None
        self.pattern_space = None
        self.command = None

    def add_context(self, line_number, pattern_space, command):
        self.line_number = line_number
        self.pattern_space = pattern_space
        self.command = command
        self.position = 'input line {num}'.format(num=line_number)
        self.message = ('pysed error: {pos}: {msg}\n'
                        'Line: {num}:{ps}\n'
                        'Command: {cmd}').format(
                            pos=self.position,
                            msg=self.text,
                            num=line_number,
                            ps=pattern_space,
                            cmd=command.describe())


class CommandNotImplemented(SedRuntimeError):
    pass


class SedIOError(SedException):
    """raised if an input, output or script file can not be used."""
    pass


class OperationFailure(IOError):
    """raise this if a file system operation fails.
    The FSI is responsible for undoing errors."""
    pass


class SedQuit(Exception):
    """ Not an error: signals the q command. It travels up through the
        execution cycle and ends the run with exit_code.
    """

    def __init__(self, exit_code=0):
        super(SedQuit, self).__init__(exit_code)
        self.exit_code = exit_code
