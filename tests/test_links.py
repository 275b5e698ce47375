"""Tests for link injection on type names."""

from tipos.config import RenderConfig
from tipos.nodes import (
    FunctionType,
    GenericApplication,
    NamedType,
    NullType,
    RecordField,
    RecordType,
    UnionType,
)
from tipos.stringifier import TypeStringifier, stringify

LINKS = {"Foo": "Foo.html", "Array": "https://example.com/Array", "x": "#x"}


class TestLinks:
    """Names with a configured URL are wrapped in anchors."""

    def test_linked_name(self) -> None:
        config = RenderConfig(links={"Array": "<url>"})
        assert stringify(NamedType(name="Array"), config) == '<a href="<url>">Array</a>'

    def test_unlinked_name(self) -> None:
        assert stringify(NamedType(name="Bar"), RenderConfig(links=LINKS)) == "Bar"

    def test_match_is_exact(self) -> None:
        config = RenderConfig(links=LINKS)
        assert stringify(NamedType(name="foo"), config) == "foo"
        assert stringify(NamedType(name="Foo.Bar"), config) == "Foo.Bar"

    def test_css_class(self) -> None:
        config = RenderConfig(links=LINKS, css_class="type")
        assert stringify(NamedType(name="Foo"), config) == '<a href="Foo.html" class="type">Foo</a>'

    def test_link_class_wins_over_css_class(self) -> None:
        config = RenderConfig(links=LINKS, css_class="type", link_class="link")
        assert stringify(NamedType(name="Foo"), config) == '<a href="Foo.html" class="link">Foo</a>'

    def test_modifiers_wrap_the_link(self) -> None:
        config = RenderConfig(links=LINKS)
        node = NamedType(name="Foo", nullable=True, optional=True)
        assert stringify(node, config) == '?<a href="Foo.html">Foo</a>='

    def test_literal_names_can_be_linked(self) -> None:
        config = RenderConfig(links={"null": "null.html"})
        assert stringify(NullType(), config) == '<a href="null.html">null</a>'

    def test_links_in_nested_nodes(self) -> None:
        config = RenderConfig(links=LINKS, html_safe=True)
        node = GenericApplication(
            expression=NamedType(name="Promise"),
            applications=(UnionType(elements=(NamedType(name="Foo"), NamedType(name="Bar"))),),
        )
        assert stringify(node, config) == 'Promise&lt;(<a href="Foo.html">Foo</a>|Bar)&gt;'

    def test_record_keys_are_linked_like_names(self) -> None:
        config = RenderConfig(links=LINKS)
        node = RecordType(fields=(RecordField(key="x", value=NamedType(name="Foo")),))
        assert stringify(node, config) == '{<a href="#x">x</a>: <a href="Foo.html">Foo</a>}'

    def test_signature_components_are_linked(self) -> None:
        config = RenderConfig(links=LINKS)
        node = FunctionType(new=NamedType(name="Foo"), result=NamedType(name="Foo"))
        assert stringify(node, config) == (
            'function(new:<a href="Foo.html">Foo</a>): <a href="Foo.html">Foo</a>'
        )

    def test_link_method(self) -> None:
        stringifier = TypeStringifier(RenderConfig(links=LINKS))
        assert stringifier.link("Foo") == '<a href="Foo.html">Foo</a>'
        assert stringifier.link("Nope") == "Nope"
