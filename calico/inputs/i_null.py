#!/usr/bin/env python3

"""
Null Input Plugin

Serves as a base class for other Input plugins.  Can be used on its own if zero
input functionality is required.

The keymap is a string of 16 comma-separated decimal codes, one for each of
the keys 0-F in turn.  Each plugin decides what the codes mean (keyscans for
PyGame).
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"


class InputsError(Exception):
    pass


class Inputs:
    def __init__(self, keymap, renderer):
        self.keymap_dict = {}
        self.renderer = renderer
        keymap_split = keymap.split(",")

        if len(keymap_split) != 0x10:
            raise InputsError("Incorrect number of keys defined -- 16 required.  Use commas to split numbers")

        for key_num, key_defined in enumerate(keymap_split):
            try:
                key_defined_ord = int(key_defined)
            except ValueError:
                raise InputsError("Defined keys are not all integer values") from None

            if key_defined_ord in self.keymap_dict:
                raise InputsError("Duplicate keys defined")

            self.keymap_dict[key_defined_ord] = key_num

    def process_messages(self, key_handler):  # pylint: disable=unused-argument
        # Calls key_handler(key, down) for each mapped key event, and returns True if the user wants to quit
        return False  # Don't exit the program

    def shutdown(self):
        pass
