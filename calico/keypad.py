#!/usr/bin/env python3

"""
Keypad Emulator

The guest has a 16-key hexadecimal keypad.  The host writes key states in here
as it receives events, and the CPU only ever reads them.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

NUM_KEYS = 0x10


class KeypadError(Exception):
    pass


class Keypad:
    def __init__(self):
        self.key_down = [False] * NUM_KEYS

    def _check_key(self, key):
        # Negative indices would otherwise alias the keys at the top of the list
        if not 0 <= key < NUM_KEYS:
            raise KeypadError("Key {} is outside the range 0x0-0xF".format(key))

    def set(self, key, pressed):
        self._check_key(key)
        self.key_down[key] = bool(pressed)

    def is_pressed(self, key):
        self._check_key(key)
        return self.key_down[key]

    def release_all(self):
        self.key_down = [False] * NUM_KEYS
