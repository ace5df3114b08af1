# -*- coding: utf-8 -*-
"""The file system interface used for in-place editing."""
import os
import shutil

from pysed.sederrors import OperationFailure


class BaseFSI(object):
    """
Baseclass for all FSIs.
Other FSIs should subclass this.
In-place editing only needs a handful of primitives, all of them are listed here.
"""
    def __init__(self, logger=None):
        """
        "logger" should be a callable,
        which will be called with log messages, or None.
        """
        self.logger = logger

    def repr(self):
        """
this should return a string identifying the instance of this interface.
"""
        return "Unknown Interface"

    def exists(self, name):
        """this should return whether name exists."""
        raise OperationFailure("NotImplemented")

    def stat(self, name):
        """this should stat the file name and return a os.stat_result."""
        raise OperationFailure("NotImplemented")

    def create(self, name, encoding=None):
        """
        this should create name and return a file-like object opened
        for reading and writing text.
        """
        raise OperationFailure("NotImplemented")

    def open(self, name, mode="r", encoding=None):
        """
        this should return a file-like object opened in mode mode.
        """
        raise OperationFailure("NotImplemented")

    def truncate(self, name, encoding=None):
        """this should open name for writing, dropping its current content."""
        return self.open(name, "w", encoding=encoding)

    def copy(self, source, destination):
        """this should copy the content of the open file source into the open file destination."""
        raise OperationFailure("NotImplemented")

    def remove(self, name):
        """this should remove name."""
        raise OperationFailure("NotImplemented")

    def log(self, msg):
        """logs/prints a message to self.logger."""
        if self.logger is not None:
            self.logger(msg)


class LocalFSI(BaseFSI):
    """A FSI for the local filesystem."""

    def repr(self):
        return "Local Filesystem [CWD: {p}]".format(p=os.getcwd())

    def exists(self, name):
        return os.path.exists(name)

    def stat(self, name):
        try:
            return os.stat(name)
        except Exception as e:
            raise OperationFailure(str(e))

    def create(self, name, encoding=None):
        self.log("creating {n}".format(n=name))
        try:
            return open(name, "w+", encoding=encoding, newline="\n")
        except Exception as e:
            raise OperationFailure(str(e))

    def open(self, name, mode="r", encoding=None):
        if os.path.isdir(name):
            raise OperationFailure("Is a directory: {n}".format(n=name))
        try:
            return open(name, mode, encoding=encoding, newline="\n")
        except Exception as e:
            raise OperationFailure(str(e))

    def copy(self, source, destination):
        try:
            shutil.copyfileobj(source, destination)
        except Exception as e:
            raise OperationFailure(str(e))

    def remove(self, name):
        self.log("removing {n}".format(n=name))
        if not os.path.exists(name):
            raise OperationFailure("Not found")
        try:
            os.remove(name)
        except Exception as e:
            raise OperationFailure(str(e))
