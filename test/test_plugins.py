#!/usr/bin/env python3

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

import os
import unittest
from unittest import mock
from calico.constants import DEFAULT_KEYMAP
from calico.framebuffer import Framebuffer
from calico.inputs.i_null import Inputs, InputsError
from calico.renderers.r_null import Renderer, RendererError

try:
    import pygame
    from calico.inputs import i_pygame
    from calico.renderers import r_pygame
    HAVE_PYGAME = True
except ImportError:
    HAVE_PYGAME = False


class TestInputs(unittest.TestCase):
    def test_inputs_default_keymap_layout(self):
        keymap_dict = Inputs(DEFAULT_KEYMAP, Renderer()).keymap_dict
        layout = {
            "1": 0x1, "2": 0x2, "3": 0x3, "4": 0xC,
            "q": 0x4, "w": 0x5, "e": 0x6, "r": 0xD,
            "a": 0x7, "s": 0x8, "d": 0x9, "f": 0xE,
            "z": 0xA, "x": 0x0, "c": 0xB, "v": 0xF
        }

        self.assertEqual({ord(char): key for char, key in layout.items()}, keymap_dict)

    def test_inputs_bad_keymaps(self):
        for keymap in "1,2,3", ",".join(["1"] * 16), "a,b,c,d,e,f,g,h,i,j,k,l,m,n,o,p":
            self.assertRaises(InputsError, Inputs, keymap, Renderer())

    def test_inputs_null_never_quits(self):
        events = []
        self.assertFalse(Inputs(DEFAULT_KEYMAP, Renderer()).process_messages(lambda *event: events.append(event)))
        self.assertEqual([], events)


class TestNullRenderer(unittest.TestCase):
    def test_renderer_counts_frames(self):
        renderer = Renderer(window_size=(128, 64))
        self.assertEqual((128, 64), renderer.window_size)
        renderer.draw_frame(Framebuffer())
        renderer.draw_frame(Framebuffer())
        self.assertEqual(2, renderer.frames_drawn)

    def test_renderer_title(self):
        renderer = Renderer()
        renderer.set_title("Test")
        self.assertEqual("Test", renderer.title)
        self.assertEqual((640, 320), renderer.window_size)


@unittest.skipUnless(HAVE_PYGAME, "PyGame is not installed")
class TestPygamePlugins(unittest.TestCase):
    def setUp(self):
        # SDL's dummy video driver runs the display without a real window
        self.environ = mock.patch.dict(os.environ, {"SDL_VIDEODRIVER": "dummy"})
        self.environ.start()
        self.renderer = r_pygame.Renderer(window_size=(640, 320))
        self.inputs = i_pygame.Inputs(DEFAULT_KEYMAP, self.renderer)
        self.events = []

    def tearDown(self):
        self.inputs.shutdown()
        self.renderer.shutdown()
        self.environ.stop()

    def _post_keys(self, event_type, *keys):
        for key in keys:
            pygame.event.post(pygame.event.Event(event_type, key=key))

    def _process(self):
        return self.inputs.process_messages(lambda *event: self.events.append(event))

    def test_pygame_inputs_key_down_and_up(self):
        self._post_keys(pygame.KEYDOWN, pygame.K_x, pygame.K_4, pygame.K_p)
        self.assertFalse(self._process())
        self.assertEqual([(0x0, True), (0xC, True)], self.events)

        del self.events[:]
        self._post_keys(pygame.KEYUP, pygame.K_x)
        self.assertFalse(self._process())
        self.assertEqual([(0x0, False)], self.events)

    def test_pygame_inputs_escape_quits(self):
        self._post_keys(pygame.KEYDOWN, pygame.K_ESCAPE)
        self.assertTrue(self._process())
        self.assertEqual([], self.events)

    def test_pygame_inputs_window_close_quits(self):
        pygame.event.post(pygame.event.Event(pygame.QUIT))
        self.assertTrue(self._process())

    def test_pygame_renderer_scales_white_on_black(self):
        framebuffer = Framebuffer()
        framebuffer.flip(0, 0)
        framebuffer.flip(63, 31)
        self.renderer.draw_frame(framebuffer)
        surface = self.renderer.display_surface

        # Each guest pixel covers a 10x10 block of the window
        self.assertEqual((255, 255, 255), tuple(surface.get_at((0, 0)))[:3])
        self.assertEqual((255, 255, 255), tuple(surface.get_at((9, 9)))[:3])
        self.assertEqual((0, 0, 0), tuple(surface.get_at((10, 10)))[:3])
        self.assertEqual((0, 0, 0), tuple(surface.get_at((15, 15)))[:3])
        self.assertEqual((255, 255, 255), tuple(surface.get_at((639, 319)))[:3])
        self.assertEqual(1, self.renderer.frames_drawn)

    def test_pygame_renderer_bad_window_size(self):
        self.assertRaises(RendererError, r_pygame.Renderer, window_size=(0, 320))


@unittest.skipUnless(HAVE_PYGAME, "PyGame is not installed")
class TestPygameDeviceErrors(unittest.TestCase):
    def test_pygame_renderer_display_unavailable(self):
        with mock.patch.dict(os.environ, {"SDL_VIDEODRIVER": "no_such_driver"}):
            with self.assertRaises(RendererError) as context:
                r_pygame.Renderer(window_size=(640, 320))

        self.assertIn("display", str(context.exception))


if __name__ == "__main__":
    unittest.main()
