"""
Turns parsed arguments and the process environment into a LaunchConfig.
"""

import os
from dataclasses import dataclass
from typing import Optional, Tuple

from .arguments import Mode
from .errors import MissingEnvironmentVariable, UnresolvableSetup
from .setup_hook import run_setup

STEAM = "STEAM"
COMMON = "PC_COMMON"


@dataclass(frozen=True)
class LaunchConfig:
    custom: bool
    program: str
    proton_path: str
    common: Optional[str] = None
    steam: Optional[str] = None
    proton: Optional[str] = None
    args: Tuple[str, ...] = ()


def normalize_version(version):
    """Proton 5 ships as ``Proton 5.0``."""
    if version == "5":
        return "5.0"
    return version


def find_env(environ, custom=False, setup=None):
    """Look up STEAM and, outside custom mode, PC_COMMON.

    Returns a ``(steam, common)`` pair; ``common`` is None in custom mode.
    A missing PC_COMMON hands off to setup and then raises UnresolvableSetup.
    """
    steam = environ.get(STEAM)
    if steam is None:
        raise MissingEnvironmentVariable(STEAM)
    print(f"{STEAM} located at: {steam}")

    if custom:
        return steam, None

    common = environ.get(COMMON)
    if common is None:
        (setup or run_setup)(COMMON)
        raise UnresolvableSetup(COMMON)
    print(f"{COMMON} located at: {common}")
    return steam, common


def resolve_environment(mode, slots, environ=None, setup=None):
    """Build the LaunchConfig for a custom or normal mode invocation.

    Args:
        mode: ``Mode.CUSTOM`` or ``Mode.NORMAL``.
        slots: ArgumentSlots from ``parse_args``.
        environ: Mapping to read variables from. Defaults to os.environ.
        setup: Callable taking a variable name; defaults to ``run_setup``.
    """
    if environ is None:
        environ = os.environ

    if mode is Mode.CUSTOM:
        print("Custom mode: will not check for Proton.")
        steam, _ = find_env(environ, custom=True, setup=setup)
        return LaunchConfig(
            custom=True,
            program=slots.slot3,
            proton_path=slots.slot2,
            steam=steam,
            args=slots.extra,
        )

    if mode is not Mode.NORMAL:
        raise ValueError(f"{mode} does not resolve an environment")

    steam, common = find_env(environ, setup=setup)
    proton = normalize_version(slots.slot1)
    return LaunchConfig(
        custom=False,
        program=slots.slot2,
        proton_path=os.path.join(common, f"Proton {proton}"),
        common=common,
        steam=steam,
        proton=proton,
        args=slots.extra,
    )
