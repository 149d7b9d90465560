# py


class ValidationError(ValueError):
    """Client-side input problem. Rendered as a 422 with the message."""


class StoreError(RuntimeError):
    """The backing store failed. Rendered as a 500 with the message."""
