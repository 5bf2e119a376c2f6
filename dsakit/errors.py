"""Exceptions raised by the container types."""


class CapacityError(OverflowError):
    """Raised when pushing onto a container that is already full."""

    def __init__(self, message: str = "Overflow") -> None:
        super().__init__(message)


class EmptyError(IndexError):
    """Raised when reading from or removing from an empty container."""

    def __init__(self, message: str = "Underflow") -> None:
        super().__init__(message)