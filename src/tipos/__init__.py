"""
tipos: render JSDoc/Closure type expressions as readable strings

Takes the type-expression tree an annotation parser produces and renders it
back to one line of text, optionally linking known type names.

Quick Start:
    >>> from tipos import NamedType, GenericApplication, stringify
    >>> node = GenericApplication(
    ...     expression=NamedType(name="Array"),
    ...     applications=(NamedType(name="string", nullable=False),),
    ... )
    >>> stringify(node)  # doctest: +ELLIPSIS
    '!string<a href="https://developer.mozilla.org/...">[]</a>'

    >>> # Straight from parser output, with links
    >>> from tipos import RenderConfig, stringify_dict
    >>> stringify_dict(
    ...     {"type": "NameExpression", "name": "Foo"},
    ...     RenderConfig(links={"Foo": "Foo.html"}, css_class="type"),
    ... )
    '<a href="Foo.html" class="type">Foo</a>'

Installation:
    pip install tipos    # zero runtime dependencies
"""

from tipos.config import (
    MDN_ARRAY_URL,
    RenderConfig,
    get_render_config,
    render_config_context,
    reset_render_config,
    set_render_config,
)
from tipos.errors import NodeDecodeError, TiposError
from tipos.kinds import FIELD_TAG, TypeKind
from tipos.nodes import (
    AllType,
    FunctionType,
    GenericApplication,
    NamedType,
    NullType,
    RecordField,
    RecordType,
    TypeNode,
    UndefinedType,
    UnionType,
    UnknownType,
)
from tipos.serialization import from_dict, from_json, stringify_dict, to_dict, to_json
from tipos.stringifier import TypeStringifier, combine_name_and_type, stringify

__version__ = "0.1.0"

__all__ = [
    # Rendering
    "TypeStringifier",
    "combine_name_and_type",
    "stringify",
    "stringify_dict",
    # Configuration
    "MDN_ARRAY_URL",
    "RenderConfig",
    "get_render_config",
    "render_config_context",
    "reset_render_config",
    "set_render_config",
    # Nodes
    "AllType",
    "FunctionType",
    "GenericApplication",
    "NamedType",
    "NullType",
    "RecordField",
    "RecordType",
    "TypeNode",
    "UndefinedType",
    "UnionType",
    "UnknownType",
    # Kinds
    "FIELD_TAG",
    "TypeKind",
    # Serialization
    "from_dict",
    "from_json",
    "to_dict",
    "to_json",
    # Errors
    "NodeDecodeError",
    "TiposError",
    # Version
    "__version__",
]
