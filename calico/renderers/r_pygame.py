#!/usr/bin/env python3

"""
PyGame Renderer Plugin

Presents the Framebuffer on an SDL window via PyGame.  Note that the surface is
built at the guest's 64x32 resolution, and then the contents are stretched
(using 'Nearest Neighbour' translation) to fit the window itself.  This means
we don't have to draw the same pixel multiple times.

Lit pixels are drawn in white, and unlit pixels in black.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

import pygame
from .r_null import RendererError, Renderer as RendererBase
from ..constants import APP_NAME, VID_WIDTH, VID_HEIGHT
from ..framebuffer import PIXEL_ON

COLOUR_OFF = 0x000000
COLOUR_ON = 0xFFFFFF


class Renderer(RendererBase):
    def __init__(self, window_size=None, **kwargs):
        super().__init__(window_size, **kwargs)

        if self.window_size[0] <= 0 or self.window_size[1] <= 0:
            raise RendererError("Window width and height must both be above zero.")

        try:
            pygame.display.init()
            self.set_title(APP_NAME)
            self.display_surface = pygame.display.set_mode(self.window_size)
        except pygame.error as e:
            pygame.display.quit()
            raise RendererError("Unable to open the display: {}".format(e)) from None

        self.display_surface.set_alpha(None)

        # Split compound RGB values for faster byte-based lookup later
        self.rgb_map = {
            colour_num: bytes((colour >> 16, (colour >> 8) & 0xFF, colour & 0xFF))
            for colour_num, colour in ((0, COLOUR_OFF), (PIXEL_ON, COLOUR_ON))
        }

        self.rgb_buffer = bytearray(VID_WIDTH * VID_HEIGHT * 3)  # 24-bit

    def draw_frame(self, framebuffer):
        vid_size = framebuffer.get_vid_size()

        if len(self.rgb_buffer) != vid_size[0] * vid_size[1] * 3:
            self.rgb_buffer = bytearray(vid_size[0] * vid_size[1] * 3)

        # Update RGB buffer in-place to minimise allocations and PyGame calls
        rgb_map = self.rgb_map

        for location, pixel in enumerate(framebuffer.pixels):
            rgb_location = location * 3
            self.rgb_buffer[rgb_location:rgb_location + 3] = rgb_map[pixel]

        # Blit the bytearray straight to the surface, rather than plotting individual pixels
        render_surface = pygame.image.frombuffer(self.rgb_buffer, vid_size, "RGB")
        scaled_win = pygame.transform.scale(render_surface, self.window_size)
        self.display_surface.blit(scaled_win, (0, 0))
        pygame.display.flip()
        super().draw_frame(framebuffer)

    def set_title(self, title):
        pygame.display.set_caption(title)
        super().set_title(title)

    def shutdown(self):
        # PyGame currently segfaults if display.quit is called via __del__
        pygame.display.quit()
        super().shutdown()
