"""Error classes and graceful degradation on incomplete trees."""

import pytest

from tipos.errors import NodeDecodeError, TiposError
from tipos.kinds import TypeKind
from tipos.nodes import FunctionType, GenericApplication, NamedType, RecordField, RecordType
from tipos.stringifier import stringify
from tipos.utils.logger import get_logger


class TestNodeDecodeErrorFormatting:
    def test_message_only(self) -> None:
        err = NodeDecodeError("bad node")
        assert str(err) == "bad node"
        assert err.path is None

    def test_with_path(self) -> None:
        err = NodeDecodeError("bad node", "$.params[0]")
        assert str(err) == "$.params[0]: bad node"
        assert err.message == "bad node"

    def test_is_tipos_error(self) -> None:
        assert isinstance(NodeDecodeError("x"), TiposError)


class TestIncompleteTrees:
    """Missing parts render as empty strings instead of raising."""

    def test_application_without_expression(self) -> None:
        node = GenericApplication(applications=(NamedType(name="T"),))
        assert stringify(node) == "<T>"

    def test_function_with_nothing(self) -> None:
        assert stringify(FunctionType(result=None, this=None, new=None)) == "function()"

    def test_record_field_with_empty_key(self) -> None:
        assert stringify(RecordType(fields=(RecordField(key=""),))) == "{}"


class TestKinds:
    @pytest.mark.parametrize("kind", list(TypeKind))
    def test_tag_round_trip(self, kind: TypeKind) -> None:
        assert TypeKind.from_tag(kind.value) is kind

    @pytest.mark.parametrize("tag", [None, "", "FieldType", "VoidLiteral"])
    def test_unknown_tags_are_names(self, tag: str | None) -> None:
        assert TypeKind.from_tag(tag) is TypeKind.NAME


class TestLogger:
    def test_prefix_added(self) -> None:
        assert get_logger("mymodule").name == "tipos.mymodule"

    def test_prefix_not_doubled(self) -> None:
        assert get_logger("tipos.stringifier").name == "tipos.stringifier"
