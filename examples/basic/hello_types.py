"""Render a parsed JSDoc type in a few lines, with no config."""

from tipos import RenderConfig, stringify_dict

tree = {
    "type": "FunctionType",
    "params": [
        {"type": "NameExpression", "name": "string"},
        {"type": "NameExpression", "name": "Options", "optional": True},
    ],
    "result": {
        "type": "TypeApplication",
        "expression": {"type": "NameExpression", "name": "Promise"},
        "applications": [{"type": "NameExpression", "name": "Response"}],
    },
}

print(stringify_dict(tree))
print(stringify_dict(tree, RenderConfig(html_safe=True, links={"Options": "Options.html"})))
