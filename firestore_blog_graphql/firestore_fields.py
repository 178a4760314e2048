from typing import Any, Optional, Tuple

from .enums import FirestoreOperators


FilterTuple = Tuple[str, FirestoreOperators, Any]


class FirestoreField:
    """
    Descriptor installed on document models so that class-level attribute
    access builds Firestore equality filters.

    Examples
    --------
    >>> PostDocument.user_id == "u1"
    ('user_id', FirestoreOperators.EQ, 'u1')

    Instance access returns the stored value (None when the stored document
    lacks it), class access returns the descriptor itself.
    """

    def __init__(self, field_name: str, attribute: Optional[str] = None):
        self.field_name = field_name
        self.attribute = attribute or field_name

    def __get__(self, instance, owner):
        if instance is None:
            return self
        return instance.__dict__.get(self.attribute)

    def __str__(self) -> str:          # noqa: DunderStr
        return self.field_name

    __repr__ = __str__

    def __hash__(self) -> int:         # noqa: DunderHash
        return hash(self.field_name)

    def __eq__(self, other) -> FilterTuple:   # type: ignore[override]
        return (self.field_name, FirestoreOperators.EQ, other)
