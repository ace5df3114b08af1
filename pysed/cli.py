# -*- coding: utf-8 -*-
"""Command line front end of pysed."""
import argparse
import sys

from pysed import __version__
from pysed.sed import Sed
from pysed.sedcommon import load_config, config_logging, get_encoding
from pysed.sederrors import SedException

BRIEF = """
pysed - a line oriented stream editor\
"""


class Filename(object):
    def __init__(self, filename):
        self.filename = filename


class Literal(object):
    def __init__(self, literal):
        self.literal = literal


class ParseArguments(object):

    def __init__(self, argv=None):
        parser = argparse.ArgumentParser(
            prog='pysed',
            formatter_class=argparse.RawDescriptionHelpFormatter,
            description=BRIEF,
            epilog="""\
Options -e and -f can be repeated multiple times and add to the commands \
executed for each line of input in the sequence they are specified. \
In script literals (-e and the positional script) ';' separates commands.

If neither -e nor -f is given, the first positional parameter is taken as \
the script, as if it had been prefixed with -e.""")
        parser.add_argument(
            '--version',
            help='display version',
            action='store_true',
            default=False,
            dest='version')
        parser.add_argument(
            '-c', '--encoding',
            help='encoding of inputs, outputs and script files',
            action='store',
            default=None)
        parser.add_argument(
            '-f', '--file',
            help='add script commands from file',
            action='append',
            dest='scripts',
            default=[],
            type=Filename,
            metavar='file')
        parser.add_argument(
            '-e', '--expression',
            help='add script commands from string',
            action='append',
            dest='scripts',
            default=[],
            type=Literal,
            metavar='string')
        parser.add_argument(
            '-i', '--in-place',
            help='change input files in place',
            action='store_true',
            default=False,
            dest='in_place')
        parser.add_argument(
            '-n', '--quiet', '--silent',
            help='print only if requested',
            action='store_true',
            default=False,
            dest='no_autoprint')
        parser.add_argument(
            '-s', '--separate',
            help='consider input files as separate files ' +
            'instead of a continuous stream',
            action='store_true',
            default=False,
            dest='separate')
        parser.add_argument(
            '-l', '--line-wrap',
            help='wrap automatically printed lines at this width (0=never)',
            dest='line_wrap',
            default=None,
            type=int)
        parser.add_argument(
            '-d', '--debug',
            help='dump script and annotate execution on stderr',
            action='store',
            type=int,
            default=0,
            dest='debug')
        parser.add_argument(
            '--no-cfgfile',
            help='do not read the configuration files',
            action='store_true',
            default=False,
            dest='no_cfgfile')
        parser.add_argument(
            'targets',
            nargs='*',
            help='files to be processed (defaults to stdin if not specified)',
            default=[])
        self.args = parser.parse_args(argv)
        if (not self.args.version and
            len(self.args.scripts) == 0 and
                len(self.args.targets) == 0):
            parser.print_help()
            raise SedException('', 'No script specified.')

    def __getattr__(self, name):
        if name in self.args:
            return self.args.__getattribute__(name)
        raise AttributeError('Attribute {name} not found'.format(name=name))


def literal_script(text):
    return text.replace(';', '\n')


def main(argv=None):
    exit_code = 0
    try:
        args = ParseArguments(argv)

        if args.version:
            print('pysed {vers}'.format(vers=__version__))
            return 0

        config = load_config(no_cfgfile=args.no_cfgfile)
        level = 'DEBUG' if args.debug > 0 else config.get('logging', 'level')
        config_logging(level)

        line_wrap = args.line_wrap
        if line_wrap is None:
            line_wrap = config.getint('sed', 'line_wrap')
        sed = Sed(encoding=args.encoding or get_encoding(config),
                  line_wrap=line_wrap,
                  no_autoprint=args.no_autoprint or config.getboolean('sed', 'quiet'),
                  in_place=args.in_place,
                  separate=args.separate or config.getboolean('sed', 'separate'),
                  debug=args.debug)

        targets = list(args.targets)
        scripts = args.scripts
        if len(scripts) == 0:
            # at this point we know targets is
            # not empty because that was checked
            # in ParseArguments.__init__() already
            scripts = [Literal(targets.pop(0))]
        parts = []
        for script in scripts:
            if isinstance(script, Filename):
                parts.append(sed.read_script(script.filename))
            else:
                parts.append(literal_script(script.literal))
        sed.load_string('\n'.join(parts))

        exit_code = sed.apply(targets, output=sys.stdout)
    except SedException as e:
        sys.stderr.write(e.message + '\n')
        exit_code = 1
    return exit_code


if __name__ == '__main__':
    sys.exit(main())  # pragma: no cover (not executed in unittest)
