"""
Errors raised while resolving a proton-call invocation.

Only ``proton_caller.cli.main`` catches these; it prints the message and
exits with the error's ``exit_code``.
"""


class ProtonCallerError(Exception):
    """Base class for every proton-call failure."""

    exit_code = 1

    def __init__(self, message):
        super().__init__(message)
        self.message = message


class MissingArgument(ProtonCallerError):
    """Raised when too few command line tokens were given."""

    exit_code = 2


class MissingEnvironmentVariable(ProtonCallerError):
    """Raised when a required environment variable is not set."""

    exit_code = 3

    def __init__(self, name):
        super().__init__(
            f"{name} must be added to your environment. "
            "Proton will not run without it."
        )
        self.name = name


class UnresolvableSetup(ProtonCallerError):
    """Raised after setup has been handed off; the caller cannot continue."""

    exit_code = 4

    def __init__(self, name):
        super().__init__(f"Setup handed off ({name}). Run proton-call again once it completes.")
        self.name = name


class HelpFileError(ProtonCallerError):
    exit_code = 5

    def __init__(self, path):
        super().__init__("Error opening help message.")
        self.path = path


class ProtonMissing(ProtonCallerError):
    """Raised when the Proton directory has no ``proton`` script."""

    exit_code = 6

    def __init__(self, path):
        super().__init__(f"Proton not found at '{path}'.")
        self.path = path


class ProtonNotExecutable(ProtonCallerError):
    """Raised when the ``proton`` script exists but cannot be executed."""

    exit_code = 7

    def __init__(self, path):
        super().__init__(f"Proton at '{path}' is not executable.")
        self.path = path


class DataPathError(ProtonCallerError):
    exit_code = 8

    def __init__(self, path, reason):
        super().__init__(f"Cannot create Proton data directory '{path}': {reason}")
        self.path = path
