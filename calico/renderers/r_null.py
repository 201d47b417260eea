#!/usr/bin/env python3

"""
Null Renderer Plugin

This serves as a base class for other rendering plugins.

This module can be used on its own as a Renderer plugin when no window is
wanted, such as when running headless.  It only counts the frames it is asked
to present.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

from ..constants import DEFAULT_WINDOW_SIZE


class RendererError(Exception):
    pass


class Renderer:
    def __init__(self, window_size=None, **kwargs):  # pylint: disable=unused-argument
        self.window_size = DEFAULT_WINDOW_SIZE if window_size is None else tuple(window_size)
        self.frames_drawn = 0
        self.title = None

    def draw_frame(self, framebuffer):  # pylint: disable=unused-argument
        self.frames_drawn += 1

    def set_title(self, title):
        self.title = title

    def shutdown(self):
        pass
