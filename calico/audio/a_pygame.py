#!/usr/bin/env python3

"""
PyGame Audio Plugin

Plays the emulated beeper within PyGame / SDL.

The emulated sound hardware is simply a buzzer with an 'on' or 'off' status.
A short 440Hz square wave sample is rendered once at startup, and is looped
for as long as the buzzer is enabled.  The sample is exactly 44 cycles long,
so it loops without clicking.

The mixer is opened when this plugin is created, and must be released with
shutdown() however the emulator exits.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

import pygame
from .a_null import AudioError, Audio as AudioBase
from .waveform import SquareWave

PLAYBACK_FREQUENCY = 44100
TONE_FREQUENCY = 440.0
DEFAULT_VOLUME = 0.25
SAMPLE_LENGTH = PLAYBACK_FREQUENCY // 10  # 0.1 seconds holds a whole number of 440Hz cycles


class Audio(AudioBase):
    def __init__(self):
        super().__init__()
        pygame.mixer.pre_init(PLAYBACK_FREQUENCY, size=-16, channels=1, buffer=512, allowedchanges=0)

        try:
            pygame.mixer.init()
        except pygame.error as e:
            pygame.mixer.quit()
            raise AudioError("Unable to open the sound device: {}".format(e)) from None

        wave = SquareWave(TONE_FREQUENCY, PLAYBACK_FREQUENCY, DEFAULT_VOLUME)
        self.sound = pygame.mixer.Sound(buffer=wave.render_pcm16(SAMPLE_LENGTH))

    def enable_buzzer(self, enabled):
        # Enable or disable the buzzer, i.e. play or stop sample playback.  If the sample is already playing, it won't
        # be restarted.

        if enabled:
            if not self.buzzer_enabled:
                self.sound.play(-1)
                self.buzzer_enabled = True
        else:
            if self.buzzer_enabled:
                self.sound.stop()
                self.buzzer_enabled = False

    def shutdown(self):
        if self.sound:
            self.sound.stop()
            self.sound = None

        pygame.mixer.quit()
        super().shutdown()
