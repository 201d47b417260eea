#!/usr/bin/env python3

"""
Command Line Configuration

Options are written as a single token, with any values joined on by colons,
e.g. '-clock_speed:900' or '-window_size:1280:640'.  These are split apart and
handed to argparse, so that numbers are validated in the usual way.

The result is a plain dictionary which can be passed straight to main(), so
the emulator could equally be started from a GUI by building the dictionary
by hand.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

import argparse
from .constants import DEFAULT_CLOCK_SPEED, DEFAULT_WINDOW_SIZE, DEFAULT_KEYMAP, SUPPORTED_RENDERERS

# Number of colon-separated values each option takes
OPTION_ARITY = {
    "-no_sound": 0,
    "-clock_speed": 1,
    "-window_size": 2,
    "-renderer": 1,
    "-keymap": 1
}

MAX_U32 = 0xFFFFFFFF
MAX_U64 = 0xFFFFFFFFFFFFFFFF

USAGE = "\n".join((
    "usage: calico8 <rom-path or 'help'> <args>",
    "args explanation:",
    "-window_size:x:y = sets window width to 'x' and height to 'y' (default = {} x {})".format(*DEFAULT_WINDOW_SIZE),
    "-clock_speed:x = sets clock speed to 'x' instructions per second (default = {})".format(DEFAULT_CLOCK_SPEED),
    "-no_sound = disables the beep sound (default = false)",
    "-renderer:x = selects the 'pygame' or 'null' host system (default = pygame)",
    "-keymap:a,b,.. = redefines the 16 keyscan codes for keys 0-F (default = {})".format(DEFAULT_KEYMAP)
))


class ConfigError(Exception):
    pass


class ArgumentParser(argparse.ArgumentParser):
    # Report problems to the caller rather than exiting with argparse's own message
    def error(self, message):
        raise ConfigError(message)


def _unsigned(max_value):
    def parse(value):
        try:
            number = int(value, 10)
        except ValueError:
            raise argparse.ArgumentTypeError("unable to parse '{}'".format(value)) from None

        if number < 0 or number > max_value:
            raise argparse.ArgumentTypeError("'{}' is out of range".format(value))

        return number

    return parse


def split_options(argv):
    # Turn '-option:a:b' into '-option a b', checking the number of values on the way
    split_argv = []

    for arg in argv:
        if not arg.startswith("-"):
            split_argv.append(arg)
            continue

        arg_tokens = arg.split(":")
        arity = OPTION_ARITY.get(arg_tokens[0])

        if arity is None:
            raise ConfigError("Invalid argument '{}'".format(arg))

        if len(arg_tokens) - 1 != arity:
            raise ConfigError("Invalid argument '{}' format".format(arg))

        split_argv.extend(arg_tokens)

    return split_argv


def build_parser():
    parser = ArgumentParser(prog="calico8", add_help=False, allow_abbrev=False, prefix_chars="-")
    parser.add_argument("filename", nargs="?", help="ROM to execute, or 'help'")
    parser.add_argument("-no_sound", action="store_true", default=False)
    parser.add_argument("-clock_speed", type=_unsigned(MAX_U64), default=DEFAULT_CLOCK_SPEED)
    parser.add_argument("-window_size", type=_unsigned(MAX_U32), nargs=2, default=list(DEFAULT_WINDOW_SIZE))
    parser.add_argument("-renderer", choices=SUPPORTED_RENDERERS, default="pygame")
    parser.add_argument("-keymap", default=DEFAULT_KEYMAP)
    return parser


def parse_args(argv):
    args = vars(build_parser().parse_args(split_options(argv)))
    args["window_size"] = tuple(args["window_size"])
    return args


def wants_help(args):
    return args["filename"] is None or args["filename"] == "help"
