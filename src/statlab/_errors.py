"""Error taxonomy.

Every public operation validates its arguments before computing anything
and raises :class:`InvalidArgumentError` on a domain violation.
"""

__all__ = ['InvalidArgumentError']


class InvalidArgumentError(ValueError):
    """An argument lies outside the domain of the requested operation."""
