#!/usr/bin/env python3

__author__ = "Gregory Maynard-Hoare"
__copyright__ = "Copyright (C) 2024 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"
__version__ = "1.0.0"

import sys
from calico import main, StartupError
from calico.audio.a_null import AudioError
from calico.config import ConfigError, USAGE, parse_args, wants_help
from calico.cpu import CPUError
from calico.hostio import LoadError
from calico.inputs.i_null import InputsError
from calico.ram import RAMError
from calico.renderers.r_null import RendererError


def run(argv):
    try:
        args = parse_args(argv)
    except ConfigError as e:
        print("Configuration error: {}".format(e), file=sys.stderr)
        return 2

    if wants_help(args):
        print(USAGE)
        return 0

    try:
        main(args)
    except (StartupError, LoadError, InputsError, RendererError, AudioError) as e:
        print("Startup error: {}".format(e), file=sys.stderr)
        return 1
    except (CPUError, RAMError) as e:
        print("Emulation halted: {}".format(e), file=sys.stderr)
        return 1

    return 0


def entry():
    sys.exit(run(sys.argv[1:]))


if __name__ == "__main__":
    entry()
