from __future__ import annotations

__all__ = ["AlreadySpinning", "InvalidLabelCount", "WheelError"]


class WheelError(Exception):
    """Base class for wheel engine failures."""


class InvalidLabelCount(WheelError, ValueError):
    def __init__(self, count: int, minimum: int, maximum: int) -> None:
        self.count = count
        self.minimum = minimum
        self.maximum = maximum
        super().__init__(f"wheel needs between {minimum} and {maximum} labels; got {count}")


class AlreadySpinning(WheelError, RuntimeError):
    def __init__(self) -> None:
        super().__init__("a spin is already in progress")
