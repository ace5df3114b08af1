# -*- coding: utf-8 -*-
import sys

from pysed.cli import main

sys.exit(main())
