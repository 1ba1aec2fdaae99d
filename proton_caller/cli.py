"""
Command line entry point for proton-call.

Resolves the arguments and environment, then forwards the program to Proton.
"""

import os
import sys

from . import __version__
from .arguments import Mode, parse_args
from .environment import resolve_environment
from .errors import HelpFileError, ProtonCallerError, UnresolvableSetup
from .launcher import ProtonLauncher
from .setup_hook import run_setup

HELP_PATH = "/usr/share/proton-caller/HELP"


def help_path():
    """Locate the HELP file: $PROTON_CALLER_HELP, /usr/share, then sys.prefix."""
    override = os.environ.get("PROTON_CALLER_HELP")
    if override:
        return override
    installed = os.path.join(sys.prefix, "share", "proton-caller", "HELP")
    if not os.path.isfile(HELP_PATH) and os.path.isfile(installed):
        return installed
    return HELP_PATH


def help_msg(path=None):
    """Copy the HELP file to stdout byte for byte."""
    path = path or help_path()
    try:
        with open(path, "rb") as f:
            contents = f.read()
    except OSError:
        raise HelpFileError(path) from None
    sys.stdout.flush()
    sys.stdout.buffer.write(contents)
    sys.stdout.buffer.flush()


def version_msg():
    return f"Proton Caller (proton-call) {__version__} Copyright (C) 2020 proton-caller contributors"


def proton_call(argv, environ=None, launcher=None, setup=None):
    """Run one invocation and return the process exit status.

    Raises ProtonCallerError on any resolution failure.
    """
    mode, slots = parse_args(argv)

    if mode is Mode.HELP:
        help_msg()
        return 0
    if mode is Mode.VERSION:
        print(version_msg())
        return 0
    if mode is Mode.SETUP:
        (setup or run_setup)(Mode.SETUP.value)
        raise UnresolvableSetup(Mode.SETUP.value)

    config = resolve_environment(mode, slots, environ=environ, setup=setup)
    if launcher is None:
        launcher = ProtonLauncher()
    return launcher.run(config)


def main(argv=None):
    """Entry point for the proton-call console script."""
    if argv is None:
        argv = sys.argv[1:]

    try:
        code = proton_call(argv)
    except ProtonCallerError as e:
        print(e.message, file=sys.stderr)
        sys.exit(e.exit_code)
    sys.exit(code)


if __name__ == "__main__":
    main()
