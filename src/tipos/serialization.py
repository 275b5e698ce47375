"""Conversion between parser output and typed nodes.

Type-annotation parsers emit plain dict trees tagged with a ``type`` key:

    {"type": "TypeApplication",
     "expression": {"type": "NameExpression", "name": "Array"},
     "applications": [{"type": "NameExpression", "name": "string"}]}

from_dict() turns such a tree into typed nodes; to_dict() goes the other
way. Unknown tags decode as NamedType, matching how the renderer treats
anything it does not recognize.

Example:
    from tipos.serialization import from_json, to_json

    node = from_json('{"type": "NameExpression", "name": "string", "nullable": true}')
    assert to_json(node) == '{"name": "string", "nullable": true, "type": "NameExpression"}'

Thread Safety:
    All functions are pure and safe to call from any thread.

"""

import json
from collections.abc import Mapping
from typing import Any

from tipos.config import RenderConfig
from tipos.errors import NodeDecodeError
from tipos.kinds import FIELD_TAG, TypeKind
from tipos.nodes import (
    NODE_CLASSES,
    FunctionType,
    GenericApplication,
    RecordField,
    RecordType,
    TypeNode,
    UnionType,
)
from tipos.stringifier import stringify
from tipos.utils.logger import get_logger

logger = get_logger(__name__)

# Single-node fields on FunctionType / GenericApplication
_NODE_FIELDS = ("expression", "result", "this", "new")

# Fields holding sequences of nodes
_SEQUENCE_FIELDS = ("applications", "elements", "params")


def from_dict(data: Mapping[str, Any], path: str = "$") -> TypeNode:
    """Build a typed node tree from parser output.

    Args:
        data: Tagged dict as produced by the annotation parser.
        path: Location of ``data`` in the enclosing document, for errors.

    Returns:
        The typed root node.

    Raises:
        NodeDecodeError: If a node is not a mapping or a child list is not
            a list.

    """
    if not isinstance(data, Mapping):
        raise NodeDecodeError(f"expected a type node, got {type(data).__name__}", path)

    tag = data.get("type")
    kind = TypeKind.from_tag(tag)
    if tag is not None and kind.value != tag:
        logger.debug("Unknown type tag %r at %s, decoding as a name", tag, path)

    kwargs: dict[str, Any] = {
        "name": data.get("name"),
        "nullable": data.get("nullable"),
        "optional": bool(data.get("optional", False)),
        "repeatable": bool(data.get("repeatable", False)),
    }

    cls = NODE_CLASSES[kind]
    if cls is GenericApplication:
        kwargs["expression"] = _decode_optional(data, "expression", path)
        kwargs["applications"] = _decode_sequence(data, "applications", path)
    elif cls is UnionType:
        kwargs["elements"] = _decode_sequence(data, "elements", path)
    elif cls is RecordType:
        kwargs["fields"] = _decode_fields(data, path)
    elif cls is FunctionType:
        kwargs["params"] = _decode_sequence(data, "params", path)
        kwargs["result"] = _decode_optional(data, "result", path)
        kwargs["this"] = _decode_optional(data, "this", path)
        kwargs["new"] = _decode_optional(data, "new", path)

    return cls(**kwargs)


def _decode_optional(data: Mapping[str, Any], key: str, path: str) -> TypeNode | None:
    value = data.get(key)
    if value is None:
        return None
    return from_dict(value, f"{path}.{key}")


def _decode_sequence(
    data: Mapping[str, Any], key: str, path: str
) -> tuple[TypeNode, ...] | None:
    values = data.get(key)
    if values is None:
        return None
    if not isinstance(values, (list, tuple)):
        raise NodeDecodeError(f"expected a list, got {type(values).__name__}", f"{path}.{key}")
    return tuple(from_dict(value, f"{path}.{key}[{i}]") for i, value in enumerate(values))


def _decode_fields(data: Mapping[str, Any], path: str) -> tuple[RecordField, ...] | None:
    values = data.get("fields")
    if values is None:
        return None
    if not isinstance(values, (list, tuple)):
        raise NodeDecodeError(f"expected a list, got {type(values).__name__}", f"{path}.fields")

    fields: list[RecordField] = []
    for i, value in enumerate(values):
        field_path = f"{path}.fields[{i}]"
        if not isinstance(value, Mapping):
            raise NodeDecodeError(
                f"expected a record field, got {type(value).__name__}", field_path
            )
        key = value.get("key")
        if key is not None and not isinstance(key, str):
            key = from_dict(key, f"{field_path}.key")
        fields.append(
            RecordField(
                key=key if key is not None else "",
                value=_decode_optional(value, "value", field_path),
            )
        )
    return tuple(fields)


def to_dict(node: TypeNode) -> dict[str, Any]:
    """Convert a typed node back to the parser's tagged-dict shape.

    Absent fields are omitted. ``nullable`` is kept whenever it is set,
    since False (non-null) is meaningful.

    """
    result: dict[str, Any] = {"type": node.kind.value}

    if node.name is not None:
        result["name"] = node.name
    if node.nullable is not None:
        result["nullable"] = node.nullable
    if node.optional:
        result["optional"] = True
    if node.repeatable:
        result["repeatable"] = True

    for key in _NODE_FIELDS:
        child = getattr(node, key, None)
        if child is not None:
            result[key] = to_dict(child)

    for key in _SEQUENCE_FIELDS:
        children = getattr(node, key, None)
        if children is not None:
            result[key] = [to_dict(child) for child in children]

    if isinstance(node, RecordType) and node.fields is not None:
        result["fields"] = [_field_to_dict(f) for f in node.fields]

    return result


def _field_to_dict(record_field: RecordField) -> dict[str, Any]:
    key = record_field.key
    result: dict[str, Any] = {
        "type": FIELD_TAG,
        "key": key if isinstance(key, str) else to_dict(key),
    }
    if record_field.value is not None:
        result["value"] = to_dict(record_field.value)
    return result


def to_json(node: TypeNode, *, indent: int | None = None) -> str:
    """Serialize a node to a JSON string (sorted keys, deterministic)."""
    return json.dumps(to_dict(node), sort_keys=True, indent=indent)


def from_json(text: str) -> TypeNode:
    """Deserialize a JSON string to a typed node tree."""
    return from_dict(json.loads(text))


def stringify_dict(data: Mapping[str, Any], config: RenderConfig | None = None) -> str:
    """Render raw parser output directly.

    Example:
        >>> stringify_dict({"type": "NameExpression", "name": "string", "optional": True})
        'string='
    """
    return stringify(from_dict(data), config)


__all__ = ["from_dict", "from_json", "stringify_dict", "to_dict", "to_json"]
