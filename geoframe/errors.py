"""Exceptions raised by geoframe."""


class InvalidArgumentError(ValueError):
    """A point or border argument is missing, malformed or out of bounds."""
