"""Exceptions raised while setting up the developer environment."""


class DevenvSetupError(Exception):
    """Base class for devenv-setup errors."""

    pass


class UnsupportedOSError(DevenvSetupError):
    """Raised when no package installation recipe exists for the OS."""

    pass


class UnsupportedShellError(DevenvSetupError):
    """Raised when the shell's startup file cannot be determined."""

    pass


class PackageInstallError(DevenvSetupError):
    """Raised when a package manager or installer command fails."""

    def __init__(self, message: str, result=None):
        super().__init__(message)
        self.result = result


class ConfigFileError(DevenvSetupError):
    """Raised when a shell startup file cannot be created or written."""

    pass


class ConfigError(DevenvSetupError):
    """An error in the devenv-setup settings file."""

    pass
