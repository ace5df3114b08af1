# -*- coding: utf-8 -*-
"""Configuration and logging shared by the library and the command line."""
import locale
import logging
import os
import sys
from configparser import ConfigParser
from io import StringIO

DEFAULT_ENCODING = locale.getpreferredencoding()

_PYSED_CONFIG_FILES = (
    os.path.join(os.path.expanduser('~'), '.pysed_config'),
    'pysed.cfg',
)

# Default configuration (can be overridden by external configuration file)
_DEFAULT_CONFIG = """[sed]
encoding=
line_wrap=0
quiet=0
separate=0

[logging]
level=WARNING
"""

_LOG_LEVELS = {
    'CRITICAL': logging.CRITICAL,
    'ERROR': logging.ERROR,
    'WARNING': logging.WARNING,
    'INFO': logging.INFO,
    'DEBUG': logging.DEBUG,
    'NOTSET': logging.NOTSET,
}


def load_config(no_cfgfile=False, config_files=_PYSED_CONFIG_FILES):
    config = ConfigParser()
    config.optionxform = str  # make it preserve case

    # defaults
    config.read_file(StringIO(_DEFAULT_CONFIG))

    # update from config file
    if not no_cfgfile:
        config.read(config_files)

    return config


def get_encoding(config):
    return config.get('sed', 'encoding') or DEFAULT_ENCODING


def config_logging(level='WARNING', stream=None):

    logger = logging.getLogger('PySed')

    level = _LOG_LEVELS.get(level, logging.WARNING) if not isinstance(level, int) else level

    logger.setLevel(level)

    if not logger.handlers:
        _log_handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
        _log_handler.setFormatter(
            logging.Formatter(
                '[%(levelname)s] [%(name)s] [%(funcName)s] [%(lineno)d] - %(message)s'
            )
        )
        logger.addHandler(_log_handler)
    for handler in logger.handlers:
        handler.setLevel(level)

    return logger
