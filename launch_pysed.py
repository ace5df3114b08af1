# coding: utf-8
"""
Launch pysed from the command line.
"""
import sys

from pysed.cli import main

sys.exit(main())
