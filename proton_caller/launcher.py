"""
ProtonLauncher - runs a program through a resolved Proton install.

Starts ``<proton_path>/proton run <program>`` as a subprocess with the
STEAM_COMPAT_* variables Proton expects.
"""

import os
import subprocess

from .errors import DataPathError, ProtonMissing, ProtonNotExecutable

DEFAULT_DATA_PATH = os.path.join("~", ".local", "share", "proton-caller", "env")


class ProtonLauncher:
    """Launches LaunchConfigs produced by ``resolve_environment``."""

    def __init__(self, data_path=None):
        """Initialize the launcher.

        Args:
            data_path: Proton prefix directory. Defaults to $PC_DATA or
                ~/.local/share/proton-caller/env.
        """
        if data_path is None:
            data_path = os.environ.get("PC_DATA", DEFAULT_DATA_PATH)
        self.data_path = os.path.expanduser(data_path)

    def command(self, config):
        """Return the argv used to start ``config.program``."""
        proton = os.path.join(config.proton_path, "proton")
        return [proton, "run", config.program, *config.args]

    def environment(self, config, base=None):
        env = dict(os.environ if base is None else base)
        env["STEAM_COMPAT_DATA_PATH"] = self.data_path
        if config.steam is not None:
            env["STEAM_COMPAT_CLIENT_INSTALL_PATH"] = config.steam
        return env

    def run(self, config):
        """Run the program and return its exit code.

        Raises:
            ProtonMissing: No ``proton`` script under ``config.proton_path``.
            ProtonNotExecutable: The ``proton`` script cannot be executed.
            DataPathError: The data directory cannot be created.
        """
        try:
            os.makedirs(self.data_path, exist_ok=True)
        except OSError as e:
            raise DataPathError(self.data_path, e.strerror or e) from None
        try:
            result = subprocess.run(self.command(config), env=self.environment(config))
        except FileNotFoundError:
            raise ProtonMissing(config.proton_path) from None
        except PermissionError:
            raise ProtonNotExecutable(config.proton_path) from None
        return result.returncode
