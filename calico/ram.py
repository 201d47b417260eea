#!/usr/bin/env python3

"""
RAM Emulator

A flat 4K address space.  Supports reading and writing of blocks of memory or
individual bytes.  The system font lives low in memory and programs are loaded
at 0x200, but nothing here enforces that layout; it is simply bytes.

Accesses beyond the top of memory are reported rather than wrapped.  No real
program should be doing this, so it is treated as a fatal error.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

from .constants import MEMORY_SIZE


class RAMError(Exception):
    pass


class RAM:
    def __init__(self, mem_size=MEMORY_SIZE):
        self.mem = memoryview(bytearray(mem_size))
        self.mem_top = mem_size - 1
        self.mem_size = mem_size

    def read(self, location):
        self.check_overflow(location)
        return self.mem[location]

    def read_block(self, location, size=1):
        self.check_overflow(location + size - 1)
        return self.mem[location:location + size]

    def write(self, location, byte):
        self.check_overflow(location)
        self.mem[location] = byte

    def write_block(self, location, block):
        block_size = len(block)
        block_top = location + block_size
        self.check_overflow(block_top - 1)
        self.mem[location:block_top] = block

    def check_overflow(self, location):
        if location > self.mem_top:
            raise RAMError("Memory overflow at address 0x{:04x}".format(location))

    def clear(self):
        self.mem[:] = bytes(self.mem_size)
