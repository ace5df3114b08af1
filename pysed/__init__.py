# -*- coding: utf-8 -*-
"""
pysed - a line oriented stream editor.

The Sed class compiles a script and runs it over one or more inputs;
pysed.cli is the command line front end.
"""
from pysed.sed import Sed
from pysed.sederrors import (SedException, SedParseError, SedRuntimeError,
                             SedIOError, SedQuit)

__version__ = '1.0.0'

__all__ = ['Sed', 'SedException', 'SedParseError', 'SedRuntimeError',
           'SedIOError', 'SedQuit', '__version__']
