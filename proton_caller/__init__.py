"""
Proton Caller - run Windows programs through Valve's Proton.

Usage:
    proton-call 5 foo.exe
    proton-call -c '/path/to/Proton 6.3' foo.exe

Or resolve an invocation from Python without launching it:

    import proton_caller
    config = proton_caller.resolve(["6.3", "foo.exe"])
    print(config.proton_path)
"""

__version__ = "1.3.0"

from .arguments import ArgumentSlots, Mode, parse_args
from .environment import LaunchConfig, resolve_environment
from .errors import ProtonCallerError


def resolve(argv, environ=None):
    """Resolve argv (without the program name) into a LaunchConfig."""
    mode, slots = parse_args(argv)
    return resolve_environment(mode, slots, environ=environ)
