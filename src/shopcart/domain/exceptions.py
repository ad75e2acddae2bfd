"""Domain-level exceptions.

The cart core itself never raises: every operation accepts whatever it is
given.  These exceptions cover the boundary where user input is turned into
domain values and commands, so the CLI layer can catch them uniformly and
display user-friendly messages.
"""


class DomainException(Exception):
    """Base class for all shopcart errors."""


class ValidationError(DomainException):
    """Input could not be turned into a domain value."""


class UnknownCommandError(DomainException):
    """The dispatcher was handed a command it has no handler for."""
