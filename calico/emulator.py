#!/usr/bin/env python3

"""
Host Loop

Drives the CPU from the host at 60Hz.  Each tick does the following, in order:

    1. Drain host input events into the keypad
    2. Execute clock_speed / 60 instructions
    3. Decrement the delay and sound timers
    4. Switch the buzzer on or off to match the sound timer
    5. Present the framebuffer, if the CPU has drawn anything

The timers must be decremented after the instructions that may have set them,
and the buzzer must see the timer after it has been decremented.

This holds no emulation state of its own, other than the CPU itself and a few
performance counters for the window title.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

from time import perf_counter, sleep
from .constants import APP_NAME, DEFAULT_CLOCK_SPEED, TICK_FREQ

TICK_INTERVAL = 1.0 / TICK_FREQ


class Emulator:
    def __init__(self, cpu, renderer, inputs, audio, clock_speed=DEFAULT_CLOCK_SPEED):
        self.cpu = cpu
        self.renderer = renderer
        self.inputs = inputs
        self.audio = audio
        self.steps_per_tick = clock_speed // int(TICK_FREQ)  # Integer division keeps u64 speeds exact

        # Performance-related vars
        self.perf_counter_fps = 0
        self.perf_counter_ops = 0
        self.next_perf_report_time = 0
        self.report_perf()

    def run(self):
        next_tick_time = perf_counter()

        while True:
            this_time = perf_counter()

            if this_time >= self.next_perf_report_time:
                self.next_perf_report_time = int(this_time) + 1.0
                self.report_perf(self.perf_counter_fps, self.perf_counter_ops)
                self.perf_counter_fps = 0
                self.perf_counter_ops = 0

            if not self.tick():
                return

            next_tick_time += TICK_INTERVAL
            delay = next_tick_time - perf_counter()

            if delay > 0:
                sleep(delay)
            else:
                # Running behind, so don't try to catch up with a burst of ticks
                next_tick_time = perf_counter()

    def tick(self):
        # Returns False once the user has asked to quit
        cpu = self.cpu

        if self.inputs.process_messages(cpu.handle_key):
            return False

        for _ in range(self.steps_per_tick):
            cpu.step()

        self.perf_counter_ops += self.steps_per_tick
        cpu.tick_timers()
        self.audio.enable_buzzer(cpu.should_beep())

        if cpu.draw_flag:
            self.renderer.draw_frame(cpu.framebuffer)
            cpu.clear_draw_flag()
            self.perf_counter_fps += 1

        return True

    def report_perf(self, fps=0, ops=0):
        self.renderer.set_title("{} - {} FPS, {} OPS".format(APP_NAME, fps, ops))
