"""Type-expression stringifier.

Renders a typed type-expression tree to a single string such as
``Array<string>``, ``(number|?Foo)`` or ``function(this:Bar, ...string=): boolean``,
optionally wrapping known type names in HTML links.

Rendering is two stages for every node, at every depth:
1. Render the base shape for the node's kind
2. Decorate it with modifiers: ``...`` + ``?``/``!`` + base + ``=``

Missing parts of a tree contribute empty strings; nothing here raises
for a well-formed (acyclic) tree.

Thread Safety:
A TypeStringifier holds only its frozen RenderConfig. Multiple threads can
share one instance and call render() concurrently.
"""

import re
from collections.abc import Sequence

from tipos.config import RenderConfig, get_render_config
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
from tipos.utils.logger import get_logger

logger = get_logger(__name__)

# Substring match on the base name, so ReadonlyArray and Uint8Array match too.
_ARRAY_RE = re.compile("array", re.IGNORECASE)


def combine_name_and_type(name_string: str, type_string: str) -> str:
    """Join a name and a type with ``:`` when both are non-empty.

    Example:
        >>> combine_name_and_type("foo", "string")
        'foo:string'
        >>> combine_name_and_type("", "string")
        'string'
    """
    separator = ":" if name_string and type_string else ""
    return name_string + separator + type_string


class TypeStringifier:
    """Render type nodes to strings.

    Usage:
        >>> from tipos.nodes import GenericApplication, NamedType
        >>> node = GenericApplication(
        ...     expression=NamedType(name="Promise"),
        ...     applications=(NamedType(name="string"),),
        ... )
        >>> TypeStringifier().render(node)
        'Promise<string>'

    Thread Safety:
        Stateless apart from the frozen config captured at construction.
    """

    __slots__ = ("_config",)

    def __init__(self, config: RenderConfig | None = None) -> None:
        """Initialize stringifier.

        Args:
            config: Render options. Defaults to the config active in the
                current context (see ``tipos.config.render_config_context``).
        """
        self._config = config if config is not None else get_render_config()

    @property
    def config(self) -> RenderConfig:
        return self._config

    def render(self, node: TypeNode | None) -> str:
        """Render a type node, including its modifiers.

        Args:
            node: Root of the tree to render; None renders as ""

        Returns:
            The rendered type string
        """
        if not node:
            return ""

        match node:
            case AllType():
                type_string = self.render_name(node.name or "*")
            case FunctionType():
                type_string = self.render_signature(node)
            case NullType():
                type_string = self.render_name(node.name or "null")
            case RecordType():
                type_string = self.render_record(node.fields)
            case GenericApplication():
                base_name = node.expression.name if node.expression else None
                type_string = self.render_application(
                    self.render(node.expression), node.applications, base_name or ""
                )
            case UndefinedType():
                type_string = self.render_name(node.name or "undefined")
            case UnionType():
                type_string = self.render_union(node.elements)
            case UnknownType():
                type_string = self.render_name(node.name or "?")
            case NamedType():
                type_string = self.render_name(node.name)
            case _:
                logger.debug("Rendering %s by name", type(node).__name__)
                type_string = self.render_name(node.name)

        if not self._config.suppress_modifiers:
            type_string = self.apply_modifiers(node, type_string)

        return type_string

    stringify = render

    # =========================================================================
    # Composite shapes
    # =========================================================================

    def render_application(
        self,
        base: str,
        applications: Sequence[TypeNode] | None,
        base_name: str | None = None,
    ) -> str:
        """Render a generic application around an already-rendered base.

        ``Array`` bases use the ``T[]`` shorthand, with the brackets linked to
        the configured array reference. Anything else renders as ``Base<T>``
        (``Base&lt;T&gt;`` when html_safe is set). No arguments renders "".

        The array check looks at base_name, the plain name of the base type,
        so link markup in base never affects it. When base_name is None the
        rendered base is checked instead.
        """
        if not applications:
            return ""

        args = ", ".join(self.render(application) for application in applications)

        if _ARRAY_RE.search(base if base_name is None else base_name):
            return args + self._anchor(self._config.array_url, "[]")
        if self._config.html_safe:
            return f"{base}&lt;{args}&gt;"
        return f"{base}<{args}>"

    def render_union(self, elements: Sequence[TypeNode] | None) -> str:
        """Render alternatives as ``(A|B|C)``.

        Absent elements render as ""; an empty sequence as ``()``.
        """
        if elements is None:
            return ""
        return "(" + "|".join(self.render(element) for element in elements) + ")"

    def render_record(self, fields: Sequence[RecordField] | None) -> str:
        """Render a record as ``{k1: v1, k2}``; no fields gives ``{}``."""
        members: list[str] = []
        for record_field in fields or ():
            member = self.render_key(record_field.key)
            if record_field.value:
                member += ": " + self.render(record_field.value)
            members.append(member)
        return "{" + ", ".join(members) + "}"

    def render_key(self, key: TypeNode | str | None) -> str:
        """Render a record key through the same pipeline as types."""
        if isinstance(key, str):
            key = NamedType(name=key)
        return self.render(key)

    def render_signature(self, node: FunctionType) -> str:
        """Render ``function(new:C, this:T, A, B): R``.

        The new, this and params parts appear in that order, each only
        when non-empty. The result suffix is omitted when there is none.
        """
        parts = [
            self.render_new(node.new),
            self.render_this(node.this),
            self.render_params(node.params),
        ]
        signature = "function(" + ", ".join(part for part in parts if part) + ")"
        return signature + self.render_result(node.result)

    # =========================================================================
    # Signature components
    # =========================================================================

    def render_new(self, new: TypeNode | None) -> str:
        return "new:" + self.render(new) if new else ""

    def render_this(self, this: TypeNode | None) -> str:
        return "this:" + self.render(this) if this else ""

    def render_params(self, params: Sequence[TypeNode] | None) -> str:
        if not params:
            return ""
        return ", ".join(self.render(param) for param in params)

    def render_result(self, result: TypeNode | None) -> str:
        return ": " + self.render(result) if result else ""

    # =========================================================================
    # Modifiers
    # =========================================================================

    def apply_modifiers(self, node: TypeNode, type_string: str) -> str:
        """Wrap a rendered type with its modifiers.

        Order is ``...`` + nullability + type + ``=``. A node with no
        modifiers set comes back unchanged.
        """
        repeatable = "..." if node.repeatable else ""
        return (
            repeatable
            + self.render_nullable(node.nullable)
            + type_string
            + self.render_optional(node.optional)
        )

    @staticmethod
    def render_nullable(nullable: bool | None) -> str:
        if nullable is True:
            return "?"
        if nullable is False:
            return "!"
        return ""

    @staticmethod
    def render_optional(optional: bool | None) -> str:
        return "=" if optional is True else ""

    # =========================================================================
    # Names and links
    # =========================================================================

    def render_name(self, display_name: str | None, type_string: str = "") -> str:
        """Render a (possibly linked) name, joined to type_string by ``:``."""
        return combine_name_and_type(self.link(display_name or ""), type_string)

    def link(self, name: str) -> str:
        """Wrap name in an anchor when the config has a URL for it."""
        url = self._config.links.get(name)
        if url is None:
            return name
        return self._anchor(url, name)

    def _anchor(self, href: str, text: str) -> str:
        link_class = self._config.link_class
        class_attr = f' class="{link_class}"' if link_class else ""
        return f'<a href="{href}"{class_attr}>{text}</a>'


def stringify(node: TypeNode | None, config: RenderConfig | None = None) -> str:
    """Render a type node to a string.

    Args:
        node: Root of the type tree
        config: Render options (defaults to the context's active config)

    Returns:
        The rendered type, e.g. ``"Array<string>"``

    Example:
        >>> from tipos.nodes import NamedType, UnionType
        >>> stringify(UnionType(elements=(NamedType(name="a"), NamedType(name="b"))))
        '(a|b)'
    """
    return TypeStringifier(config).render(node)


__all__ = ["TypeStringifier", "combine_name_and_type", "stringify"]
