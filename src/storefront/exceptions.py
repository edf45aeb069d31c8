"""Errors raised by the storefront domain.

All of them are Protean ``ValidationError`` subclasses carrying a
``{field: [messages]}`` mapping, so callers that already handle validation
failures (command handlers, the FastAPI exception handlers) treat them alike.
"""

from protean.exceptions import ValidationError


class InvalidAmount(ValidationError):
    """A monetary input is negative or not a number."""


class InvalidQuantity(ValidationError):
    """A line-item quantity is zero, negative or not an integer."""


class ConstraintViolation(ValidationError):
    """A referential, restrict or uniqueness rule of the store was violated.

    ``rule`` names the violated rule (a propagation rule's label or the unique
    field), which lets API layers and tests tell rejections apart.
    """

    def __init__(self, messages, rule=None):
        super().__init__(messages)
        self.rule = rule
