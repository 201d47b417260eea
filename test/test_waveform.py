#!/usr/bin/env python3

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

import unittest
from calico.audio.waveform import SquareWave


class TestSquareWave(unittest.TestCase):
    def test_square_wave_levels(self):
        wave = SquareWave(1.0, 4.0, 0.25)
        # Phase steps 0, 0.25, 0.5, 0.75, 0 ..
        self.assertEqual([-0.25, 0.25, -0.25, -0.25, -0.25, 0.25], wave.fill(6))

    def test_square_wave_frequency(self):
        wave = SquareWave(440.0, 44100.0, 0.25)
        samples = wave.fill(4410)
        rising_edges = sum(1 for prev, this in zip(samples, samples[1:]) if prev < 0 < this)
        self.assertIn(rising_edges, (43, 44, 45))
        self.assertEqual({-0.25, 0.25}, set(samples))

    def test_square_wave_pcm16(self):
        wave = SquareWave(1.0, 4.0, 0.5)
        pcm = wave.render_pcm16(8)
        self.assertEqual(16, len(pcm))


if __name__ == "__main__":
    unittest.main()
