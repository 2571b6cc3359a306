# src/catr/errors.py


class CatrError(Exception):
    """Base class for errors raised by catr."""


class ConfigurationError(CatrError):
    """The invocation could not be turned into a valid configuration."""


class StreamReadError(CatrError):
    """Reading from an already opened source failed part-way through."""

    def __init__(self, token: str, cause: OSError):
        self.token = token
        self.cause = cause
        super().__init__(f"{token}: {describe_os_error(cause)}")


def describe_os_error(exc: OSError) -> str:
    """Short human text for an OS error, e.g. 'No such file or directory'."""
    return exc.strerror or str(exc)
