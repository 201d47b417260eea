#!/usr/bin/env python3

"""
PyGame Input Plugin

Scans the keyboard and detects key 'press' and 'release' events, passing them
on to the emulator as they arrive.  Note that the check should not be called
more often than 60Hz, as constantly checking the queue is time consuming.

Closing the window, or pressing Escape, asks the emulator to quit.  This
relies on the PyGame Renderer having already opened the display.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

import pygame
from .i_null import Inputs as InputsBase


class Inputs(InputsBase):
    def __init__(self, keymap, renderer):
        self.pygame_methods = {
            pygame.QUIT:    self._pygame_quit,
            pygame.KEYDOWN: self._pygame_keydown,
            pygame.KEYUP:   self._pygame_keyup
        }

        super().__init__(keymap, renderer)

    def process_messages(self, key_handler):
        # Call PyGame method based on fast dictionary lookup of event
        quit_program = False

        for event in pygame.event.get():
            pygame_method = self.pygame_methods.get(event.type)

            if pygame_method and pygame_method(event, key_handler):  # Check via short circuit that we don't have 'None'
                quit_program = True  # Process more events, even if planning to quit

        return quit_program

    def _pygame_quit(self, *_):
        return True

    def _pygame_keydown(self, event, key_handler):
        if event.key == pygame.K_ESCAPE:
            return True

        hex_key = self.keymap_dict.get(event.key)

        if hex_key is not None:
            key_handler(hex_key, True)

        return False

    def _pygame_keyup(self, event, key_handler):
        hex_key = self.keymap_dict.get(event.key)

        if hex_key is not None:
            key_handler(hex_key, False)

        return False
