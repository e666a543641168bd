"""Exceptions raised by the service layer.

Routes catch them by kind and choose the status code: ``NotFoundError``
maps to 404, ``ValidationError`` to 400. Anything else is unexpected and
becomes a 500.
"""


class NotFoundError(LookupError):
    """The requested row does not exist."""


class ValidationError(ValueError):
    """A field rule was violated; the message is safe to show to the client."""
