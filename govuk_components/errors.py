"""Errors raised while validating component input."""

from __future__ import annotations

from typing import Sequence

from .text_utils import to_sentence


class ComponentError(ValueError):
    """Base class for invalid component arguments."""


class MissingContentError(ComponentError):
    """Raised when a component has neither text nor a content block."""

    def __init__(self, message: str = "no text or content") -> None:
        super().__init__(message)


class InvalidColourError(ComponentError):
    """Raised when a tag colour is not one of the supported colours."""

    def __init__(self, colour: str, allowed: Sequence[str]) -> None:
        self.colour = colour
        self.allowed = tuple(allowed)
        super().__init__(
            f"invalid tag colour {colour}, supported colours are {to_sentence(self.allowed)}"
        )


class ConflictingStyleError(ComponentError):
    """Raised when more than one mutually exclusive style flag is set."""

    def __init__(self, subject: str, group: Sequence[str]) -> None:
        self.subject = subject
        self.group = tuple(group)
        choices = to_sentence(self.group, last_connector=" or ", two_connector=" or ")
        super().__init__(f"{subject} can only be one of {choices}")


__all__ = [
    "ComponentError",
    "ConflictingStyleError",
    "InvalidColourError",
    "MissingContentError",
]
