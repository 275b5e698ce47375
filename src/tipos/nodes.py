"""Typed nodes for type-expression trees.

All nodes are frozen dataclasses with slots, keyword-only so the shared
modifier fields on TypeNode can sit in front of each variant's own fields.
Pattern matching on the node class is how the stringifier dispatches.

Node Hierarchy:
TypeNode (base, carries modifiers)
├── AllType             *
├── NullType            null
├── UndefinedType       undefined
├── UnknownType         ?
├── NamedType           string, my.Class
├── GenericApplication  Array<string>, string[]
├── UnionType           (string|number)
├── RecordType          {x: number, y}
└── FunctionType        function(new:Foo, this:Bar, string): number

RecordField is not a type node: it pairs a record key with an optional value.

Child sequences are tuples. ``None`` means the field is absent, ``()`` that
it is present but empty; the two render differently in a few places.

Thread Safety:
All nodes are frozen (immutable) and safe to share across threads.

"""

from dataclasses import dataclass
from typing import ClassVar

from tipos.kinds import TypeKind

# =============================================================================
# Base Node
# =============================================================================


@dataclass(frozen=True, slots=True, kw_only=True)
class TypeNode:
    """Base class for all type nodes.

    Attributes:
        name: Display name; for literal kinds it replaces the literal text
        nullable: True for ``?T``, False for ``!T``, None when unspecified
        optional: Trailing ``=`` (optional parameter)
        repeatable: Leading ``...`` (variadic parameter)

    """

    kind: ClassVar[TypeKind] = TypeKind.NAME

    name: str | None = None
    nullable: bool | None = None
    optional: bool = False
    repeatable: bool = False


# =============================================================================
# Literal Nodes
# =============================================================================


@dataclass(frozen=True, slots=True, kw_only=True)
class AllType(TypeNode):
    """The any type. Renders as ``*``."""

    kind: ClassVar[TypeKind] = TypeKind.ALL


@dataclass(frozen=True, slots=True, kw_only=True)
class NullType(TypeNode):
    """The null literal type."""

    kind: ClassVar[TypeKind] = TypeKind.NULL


@dataclass(frozen=True, slots=True, kw_only=True)
class UndefinedType(TypeNode):
    """The undefined literal type."""

    kind: ClassVar[TypeKind] = TypeKind.UNDEFINED


@dataclass(frozen=True, slots=True, kw_only=True)
class UnknownType(TypeNode):
    """The unknown type. Renders as ``?``."""

    kind: ClassVar[TypeKind] = TypeKind.UNKNOWN


@dataclass(frozen=True, slots=True, kw_only=True)
class NamedType(TypeNode):
    """A type referenced by name, e.g. ``string`` or ``module:foo.Bar``.

    Also the fallback for tags the renderer does not recognize.

    """

    kind: ClassVar[TypeKind] = TypeKind.NAME


# =============================================================================
# Composite Nodes
# =============================================================================


@dataclass(frozen=True, slots=True, kw_only=True)
class GenericApplication(TypeNode):
    """A parameterized type.

    Closure: Array.<string>, Object<string, number>
    Shorthand: string[]

    Attributes:
        expression: The base type (``Array`` in ``Array<string>``)
        applications: Type arguments, in order

    """

    kind: ClassVar[TypeKind] = TypeKind.APPLICATION

    expression: TypeNode | None = None
    applications: tuple[TypeNode, ...] | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class UnionType(TypeNode):
    """Alternatives, e.g. ``(string|number)``."""

    kind: ClassVar[TypeKind] = TypeKind.UNION

    elements: tuple[TypeNode, ...] | None = None


@dataclass(frozen=True, slots=True)
class RecordField:
    """A member of a record type.

    ``{x: number}`` has key ``x`` and value ``number``; ``{y}`` has no value.
    The key may be a bare name or a type node.

    """

    key: TypeNode | str
    value: TypeNode | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class RecordType(TypeNode):
    """A structural record, e.g. ``{x: number, y}``."""

    kind: ClassVar[TypeKind] = TypeKind.RECORD

    fields: tuple[RecordField, ...] | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class FunctionType(TypeNode):
    """A function signature.

    Closure: function(new:Foo, this:Bar, string, number=): boolean

    Attributes:
        params: Parameter types, in order
        result: Return type
        this: Type bound to ``this``
        new: Type constructed when called with ``new``

    """

    kind: ClassVar[TypeKind] = TypeKind.FUNCTION

    params: tuple[TypeNode, ...] | None = None
    result: TypeNode | None = None
    this: TypeNode | None = None
    new: TypeNode | None = None


# Node classes keyed by kind, used when decoding parser output.
NODE_CLASSES: dict[TypeKind, type[TypeNode]] = {
    cls.kind: cls
    for cls in (
        AllType,
        NullType,
        UndefinedType,
        UnknownType,
        NamedType,
        GenericApplication,
        UnionType,
        RecordType,
        FunctionType,
    )
}
