#!/usr/bin/env python3

"""
Main Startup Module

Simply call main(args) to start the emulator, replacing args with a dictionary
of options.  This can be done via the Terminal or GUI.  calico.config.parse_args
builds a suitable dictionary from the command line.

All options must be supplied.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

from .constants import APP_INTRO, APP_COPYRIGHT
from .cpu import CPU
from .emulator import Emulator
from .hostio import Loader


class StartupError(Exception):
    pass


def main(args):
    print("".join((APP_INTRO, APP_COPYRIGHT)))
    opt_renderer = args["renderer"]

    if opt_renderer == "pygame":
        # pylint: disable=unused-import, import-outside-toplevel, raise-missing-from
        try:
            import pygame  # noqa: F401
        except ImportError:
            raise StartupError("PyGame does not appear to be installed.")

        from .inputs.i_pygame import Inputs
        from .renderers.r_pygame import Renderer

        if args["no_sound"]:
            from .audio.a_null import Audio
        else:
            from .audio.a_pygame import Audio
    else:
        # pylint: disable=import-outside-toplevel
        from .inputs.i_null import Inputs
        from .renderers.r_null import Renderer
        from .audio.a_null import Audio

    # Read ROM binary before opening any windows, so a bad path fails quickly
    program = Loader().load_binary(args["filename"])

    # Create a new CPU (which writes the system font into RAM), and place the program at 0x200
    cpu = CPU(sound_enabled=not args["no_sound"])
    cpu.load_program(program)

    renderer = None
    inputs = None
    audio = None

    try:
        renderer = Renderer(window_size=args["window_size"])
        inputs = Inputs(args["keymap"], renderer)
        audio = Audio()
        Emulator(cpu, renderer, inputs, audio, clock_speed=args["clock_speed"]).run()
    finally:
        # The emulator has quit, so shut everything down.  __del__ cannot be relied upon when using PyPy
        if audio is not None:
            audio.shutdown()

        if inputs is not None:
            inputs.shutdown()

        if renderer is not None:
            renderer.shutdown()
