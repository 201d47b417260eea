#!/usr/bin/env python3

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

# App identification
APP_NAME = "Calico8 Emulator"
APP_VERSION = "1.0.0"
APP_COPYRIGHT = "Copyright (C) 2022 Gregory Maynard-Hoare, licensed under GNU Affero General Public License v3.0"
APP_INTRO = "{} V{} -- ".format(APP_NAME, APP_VERSION)

# Memory map
MEMORY_SIZE = 0x1000
PROGRAM_START = 0x200
FONT_LOCATION = 0x50
MAX_PROGRAM_SIZE = MEMORY_SIZE - PROGRAM_START
STACK_SIZE = 16

# Display
VID_WIDTH = 64
VID_HEIGHT = 32

# Host timing
TICK_FREQ = 60.0  # 60Hz timers, input polling and display refresh

# Startup
DEFAULT_CLOCK_SPEED = 600
DEFAULT_WINDOW_SIZE = (640, 320)
SUPPORTED_RENDERERS = ["pygame", "null"]

# Default mappings for keys 0-F, later populated into a dictionary.  These are the PyGame keyscans for the COSMAC VIP
# layout on a QWERTY keyboard (X, 1, 2, 3, Q, W, E, A, S, D, Z, C, 4, R, F, V)
DEFAULT_KEYMAP = "120,49,50,51,113,119,101,97,115,100,122,99,52,114,102,118"

# Hexadecimal system font, 5 bytes per glyph for 0-F
SYSTEM_FONT = bytes((
    0xF0, 0x90, 0x90, 0x90, 0xF0,  # 0
    0x20, 0x60, 0x20, 0x20, 0x70,  # 1
    0xF0, 0x10, 0xF0, 0x80, 0xF0,  # 2
    0xF0, 0x10, 0xF0, 0x10, 0xF0,  # 3
    0x90, 0x90, 0xF0, 0x10, 0x10,  # 4
    0xF0, 0x80, 0xF0, 0x10, 0xF0,  # 5
    0xF0, 0x80, 0xF0, 0x90, 0xF0,  # 6
    0xF0, 0x10, 0x20, 0x40, 0x40,  # 7
    0xF0, 0x90, 0xF0, 0x90, 0xF0,  # 8
    0xF0, 0x90, 0xF0, 0x10, 0xF0,  # 9
    0xF0, 0x90, 0xF0, 0x90, 0x90,  # A
    0xE0, 0x90, 0xE0, 0x90, 0xE0,  # B
    0xF0, 0x80, 0x80, 0x80, 0xF0,  # C
    0xE0, 0x90, 0x90, 0x90, 0xE0,  # D
    0xF0, 0x80, 0xF0, 0x80, 0xF0,  # E
    0xF0, 0x80, 0xF0, 0x80, 0x80   # F
))
