"""Exception types raised by the flop coach.

InputError and its subclasses describe rejected user input and are safe to
show to the user. InvalidHandSize signals a caller bug inside the library.
"""

from __future__ import annotations


class InputError(ValueError):
    """User-supplied cards were rejected."""


class ParseError(InputError):
    """A card token was malformed or the wrong number of tokens was given."""


class DuplicateCard(InputError):
    """The same card appeared more than once."""


class InvalidHandSize(ValueError):
    """The evaluator was given fewer than 5 or more than 7 cards."""
