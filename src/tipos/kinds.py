"""Node kinds for type-expression trees.

The upstream annotation parser tags every node with a string such as
``NameExpression`` or ``TypeUnion``. TypeKind gives those tags a closed
set of names; anything the renderer does not recognize is treated as a
plain name.

Thread Safety:
TypeKind is an enum (inherently immutable).

"""

from enum import Enum

# Tag used by the parser for record members; not a type in its own right.
FIELD_TAG = "FieldType"


class TypeKind(Enum):
    """Kinds of type node, valued by the parser's tag string."""

    ALL = "AllLiteral"  # *
    FUNCTION = "FunctionType"  # function(string): number
    NULL = "NullLiteral"  # null
    RECORD = "RecordType"  # {x: number}
    APPLICATION = "TypeApplication"  # Array<string>, string[]
    UNDEFINED = "UndefinedLiteral"  # undefined
    UNION = "TypeUnion"  # (string|number)
    UNKNOWN = "UnknownLiteral"  # ?
    NAME = "NameExpression"  # string, my.Class

    @classmethod
    def from_tag(cls, tag: str | None) -> "TypeKind":
        """Map a parser tag to a kind, defaulting to NAME.

        Example:
            >>> TypeKind.from_tag("TypeUnion")
            <TypeKind.UNION: 'TypeUnion'>
            >>> TypeKind.from_tag("SomethingNew")
            <TypeKind.NAME: 'NameExpression'>

        """
        try:
            return cls(tag)
        except ValueError:
            return cls.NAME


__all__ = ["FIELD_TAG", "TypeKind"]
