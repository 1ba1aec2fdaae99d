"""
Hand-off to the external first-time setup program.

The setup program is run in the foreground but its outcome is not checked;
proton-call always stops after handing off.
"""

import os
import subprocess
import sys


def run_setup(name, binary=None):
    """Run the setup program for ``name`` (``--setup`` or a variable name).

    Returns the setup program's exit code, or None when it could not be found.
    """
    if binary is None:
        binary = os.environ.get("PROTON_SETUP_BIN", "proton-setup")

    try:
        result = subprocess.run([binary, name])
    except FileNotFoundError:
        print(
            f"Error: setup program not found at '{binary}'.\n"
            f"Configure {name} by hand, or set PROTON_SETUP_BIN.",
            file=sys.stderr,
        )
        return None
    return result.returncode
