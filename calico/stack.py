#!/usr/bin/env python3

"""
Stack Emulator

The call stack is not part of system RAM, because there is no specified
location for it, and there is no stack pointer (SP) register exposed to the
running program.  A plain list is all that is needed, capped at 16 levels.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

from .constants import STACK_SIZE


class StackError(Exception):
    pass


class Stack:
    def __init__(self, size=STACK_SIZE):
        self.items = []
        self.size = size

    def push(self, item):
        if len(self.items) >= self.size:
            raise StackError("Stack overflow")

        self.items.append(item)

    def pop(self):
        try:
            return self.items.pop()
        except IndexError:
            raise StackError("Stack underflow") from None

    def clear(self):
        self.items.clear()

    def get_items(self):
        # For diagnostics
        return self.items

    def __len__(self):
        return len(self.items)
