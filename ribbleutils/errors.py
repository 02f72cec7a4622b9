"""Error types shared across the package."""


class RibbleError(Exception):
    """Base class for every error raised by this package."""

    category = ""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        if self.category:
            return f"{self.category}: {self.message}"
        return self.message


class CoreError(RibbleError):
    """A general failure in the application core."""

    category = "Core"


class ThreadPanicError(RibbleError):
    """A worker thread died unexpectedly."""

    category = "Thread Panic"


class ConversionError(RibbleError):
    """A value could not be converted to the requested form."""

    category = "Conversion Error"