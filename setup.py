"""
Setup.py for pysed.
"""

import ast
import os


# =================== SETUP ===================

from setuptools import setup, find_packages

INSTALL_REQUIREMENTS = [
    "regex",  # POSIX classes and leftmost-longest matching
]
TEST_REQUIREMENTS = [
    "pytest",
    "flake8>=3.7.9",
]


PYSED_DIR = os.path.dirname(os.path.abspath(__file__))
INIT_PATH = os.path.join(PYSED_DIR, "pysed", "__init__.py")


def get_pysed_version(initpath):
    """
    Find and return the current pysed version.
    :param initpath: path to the '__init__.py' file of the pysed package
    :type initpath: str
    :return: the pysed version defined in the initpath
    :rtype: str
    """
    with open(initpath, "r") as fin:
        for line in fin:
            if line.startswith("__version__"):
                version = ast.literal_eval(line.split("=")[1].strip())
                return version
    raise Exception("Could not find pysed version in file '{f}'".format(f=initpath))


setup(
    name="pysed",
    version=get_pysed_version(INIT_PATH),
    description="A line oriented stream editor",
    packages=find_packages(PYSED_DIR, exclude=["tests", "tests.*"]),
    scripts=[os.path.join(PYSED_DIR, "launch_pysed.py")],
    zip_safe=False,
    install_requires=INSTALL_REQUIREMENTS,
    extras_require={
        "testing": TEST_REQUIREMENTS,
    },
)
