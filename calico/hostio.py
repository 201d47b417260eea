#!/usr/bin/env python3

"""
Host I/O Functionality

Handles loading ROM binaries from the host for later writing into RAM.  ROMs
are raw big-endian instruction streams with no header or checksum, so there is
nothing to parse.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"


class LoadError(Exception):
    pass


class ProgramTooLarge(LoadError):
    def __init__(self, size, max_size):
        self.size = size
        self.max_size = max_size
        super().__init__("Program is {} bytes, but only {} bytes will fit in memory".format(size, max_size))


class Loader:
    def load_binary(self, filename):
        try:
            with open(filename, "rb") as f:
                return f.read()
        except OSError as e:
            raise LoadError("Unable to load '{}': {}".format(filename, e.strerror or e)) from None
