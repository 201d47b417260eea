#!/usr/bin/env python3

"""
Square Wave Generator

The beeper is a plain square wave.  A phase accumulator steps through each
cycle, and the output is held high for the first half of the cycle and low for
the second.  The generator owns nothing but its own phase and volume, so it is
safe to hand to an audio thread.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

from array import array

PCM16_PEAK = 0x7FFF


class SquareWave:
    def __init__(self, frequency, sample_rate, volume, phase=0.0):
        self.phase_inc = frequency / sample_rate
        self.phase = phase
        self.volume = volume

    def next_sample(self):
        sample = self.volume if 0.0 < self.phase < 0.5 else -self.volume
        self.phase = (self.phase + self.phase_inc) % 1.0
        return sample

    def fill(self, num_samples):
        return [self.next_sample() for _ in range(num_samples)]

    def render_pcm16(self, num_samples):
        # Signed 16-bit samples in the host's byte order, as expected by the mixer
        return array("h", (int(sample * PCM16_PEAK) for sample in self.fill(num_samples))).tobytes()
