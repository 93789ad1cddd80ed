"""
Exception types shared with the host system.
"""


class PackageAlreadyInstalledError(Exception):
    """Raised by package management when the requested package is already installed."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __reduce__(self):
        return (self.__class__, (self.message,))


class ConfigurationError(Exception):
    """A configuration file was readable but not shaped as expected."""
