"""
Marker base for value objects.

A value object is a frozen dataclass: the dataclass machinery compares,
hashes and prints it by its fields. Rules live either in ``__post_init__``
(when breaking them is a programming error) or in a ``validate`` method
returning field errors (when the values came from a caller).

Example:
    @dataclass(frozen=True)
    class YesNoContent(ValueObject):
        correct: bool
        justification: str | None = None
"""


class ValueObject:
    """Base for immutable domain values compared by their fields."""

    __slots__ = ()
