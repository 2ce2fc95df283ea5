"""Exception hierarchy for Gridmath."""


class GridMathError(Exception):
    """Base exception for all Gridmath errors."""

    pass


class InvalidRangeError(GridMathError, ValueError):
    """Interval bounds or lengths that would produce an empty interval."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Invalid interval range: {reason}")


class InvalidArgumentError(GridMathError, ValueError):
    """Argument outside the accepted domain of an operation."""

    def __init__(self, name: str, reason: str) -> None:
        self.name = name
        self.reason = reason
        super().__init__(f"Invalid argument '{name}': {reason}")


class InvalidOperationError(GridMathError):
    """Operation not valid for the current value."""

    def __init__(self, operation: str, reason: str) -> None:
        self.operation = operation
        self.reason = reason
        super().__init__(f"Cannot {operation}: {reason}")


class UnsupportedOperationError(InvalidOperationError, NotImplementedError):
    """Operation a shape does not implement."""

    def __init__(self, shape: str, operation: str) -> None:
        self.shape = shape
        super().__init__(operation, f"not supported by {shape}")
