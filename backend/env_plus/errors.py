# Exception types raised while configuring and activating a loader.
from typing import Optional


class EnvPlusError(Exception):
    pass


# Invalid builder settings, raised when the configuration is built.
class ConfigError(EnvPlusError, ValueError):
    pass


# Base class for failures during activation.
class LoadError(EnvPlusError):
    pass


# The env file could not be opened, read or decoded.
class FileReadError(LoadError):
    def __init__(self, path: str, reason: Optional[str] = None):
        self.path = path
        self.reason = reason
        message = f"unable to read env file {path!r}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


# Raised in strict mode for a line that is not a comment, blank or assignment.
class MalformedLineError(LoadError):
    def __init__(self, line: int, content: str):
        self.line = line
        self.content = content
        super().__init__(
            f"line {line} with content {content!r} does not appear to be formatted properly"
        )
