"""Exception types raised by tiapp."""


class TiappError(Exception):
    """Base class for tiapp errors.

    Args:
        message: Human readable description of the failure
        data: The offending value (bad argument, attempted path, ...)
    """

    def __init__(self, message: str, data=None):
        super().__init__(message)
        self.message = message
        self.data = data


class TiappArgumentError(TiappError, TypeError):
    """A path or XML argument had the wrong type or was empty."""


class TiappNotFoundError(TiappError, FileNotFoundError):
    """No tiapp.xml could be resolved for loading."""


class TiappParseError(TiappError, ValueError):
    """The XML could not be turned into a document."""


class TiappConfigError(TiappError, ValueError):
    """The .tiapp.toml settings file is unreadable or invalid."""
