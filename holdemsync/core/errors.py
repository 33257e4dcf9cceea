"""
Exceptions raised by the HoldemSync core.

Only malformed input raises. Protocol misuse from a peer (acting out of
turn, joining twice, betting under the call) is reported through
``MessageResult`` instead, so a desynchronized client cannot take the
host down.
"""


class PokerError(Exception):
    """Base class for all HoldemSync errors."""
    pass


class InvalidInputError(PokerError, ValueError):
    """Wrong number of cards, duplicate cards, or unparseable card text."""
    pass


class InsufficientCardsError(InvalidInputError):
    """A hand pool was given fewer than five cards."""
    pass


class DeckEmptyError(PokerError, IndexError):
    """A card was drawn from an empty deck."""
    pass


class SyncFormatError(PokerError, ValueError):
    """A deck string, wire message or new-hand snapshot could not be parsed."""
    pass
