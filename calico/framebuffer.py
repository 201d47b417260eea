#!/usr/bin/env python3

"""
Framebuffer Emulator

Pixels are written here by the CPU, and are only presented on the actual
display (the host rendering system) at 60Hz, when the CPU reports that
something has changed.

Programs for this system cannot write directly into video RAM.  Instead,
sprites are drawn to the screen by XORing them against a single 64x32
monochrome plane.  Coordinates always wrap around the edges of the screen.

Collisions (where a pixel was set, but was unset by an XOR) are reported back
to the caller.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

from .constants import VID_WIDTH, VID_HEIGHT

PIXEL_OFF = 0x00
PIXEL_ON = 0xFF


class Framebuffer:
    def __init__(self, vid_width=VID_WIDTH, vid_height=VID_HEIGHT):
        self.vid_width = vid_width
        self.vid_height = vid_height
        self.vid_size = vid_width * vid_height
        # One byte per pixel, row-major, so renderers can expand it without unpacking bits
        self.pixels = memoryview(bytearray(self.vid_size))

    def _vram_loc(self, x, y):
        return (y % self.vid_height) * self.vid_width + (x % self.vid_width)

    def get(self, x, y):
        return self.pixels[self._vram_loc(x, y)] != PIXEL_OFF

    def flip(self, x, y):
        vram_loc = self._vram_loc(x, y)
        self.pixels[vram_loc] ^= PIXEL_ON

    def xor_pixel(self, x, y):
        # Returns True if the pixel was switched off, i.e. a collision
        vram_loc = self._vram_loc(x, y)
        pixel = self.pixels[vram_loc]
        self.pixels[vram_loc] = pixel ^ PIXEL_ON
        return pixel != PIXEL_OFF

    def clear(self):
        self.pixels[:] = bytes(self.vid_size)

    def get_vid_size(self):
        return self.vid_width, self.vid_height

    def rows(self):
        # Yields each row as a list of booleans, top to bottom
        vid_width = self.vid_width

        for y in range(self.vid_height):
            row_start = y * vid_width
            yield [pixel != PIXEL_OFF for pixel in self.pixels[row_start:row_start + vid_width]]
