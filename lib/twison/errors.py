"""Exceptions raised by the Twison converter."""


class MissingInputError(ValueError):
    """Required input is structurally absent.

    Raised when the document has no story element, or when a passage lacks
    an attribute that identifies it (name or pid). Everything else degrades
    gracefully instead of raising.
    """
