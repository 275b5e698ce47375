"""Render configuration for tipos.

RenderConfig is an immutable bundle of options captured once per
TypeStringifier. An ambient config can also be installed for the current
context with ContextVars (PEP 567); ``stringify()`` falls back to it when
no config is passed explicitly.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent
    storage, so no locks are needed.

Usage:
    # Explicit config
    from tipos import RenderConfig, stringify
    stringify(node, RenderConfig(html_safe=True))

    # Ambient config for a block of calls
    with render_config_context(RenderConfig(links={"Foo": "foo.html"})):
        stringify(node)

"""

from collections.abc import Mapping
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Iterator

# Target of the link wrapped around the ``[]`` in ``string[]``.
MDN_ARRAY_URL = (
    "https://developer.mozilla.org/en-US/docs/Web/JavaScript/Reference/Global_Objects/Array"
)

# JSDoc-style option names accepted by from_dict().
_OPTION_ALIASES: dict[str, str] = {
    "cssClass": "css_class",
    "linkClass": "link_class",
    "htmlSafe": "html_safe",
    "suppressModifiers": "suppress_modifiers",
    "ignoreModifiers": "suppress_modifiers",
    "_ignoreModifiers": "suppress_modifiers",
    "arrayUrl": "array_url",
}


@dataclass(frozen=True, slots=True)
class RenderConfig:
    """Immutable render configuration.

    ``link_class`` falls back to ``css_class`` here, once, so every render
    sees the resolved value. ``links`` is frozen into a read-only mapping.

    Attributes:
        css_class: CSS class for generated links when link_class is unset
        link_class: CSS class for generated links
        html_safe: Escape the angle brackets of generic applications
        links: Type name to URL; matching names are wrapped in ``<a>``
        suppress_modifiers: Skip nullable/optional/repeatable decoration
        array_url: Target of the link on the ``[]`` array shorthand

    """

    css_class: str | None = None
    link_class: str | None = None
    html_safe: bool = False
    links: Mapping[str, str] = field(default_factory=dict, hash=False)
    suppress_modifiers: bool = False
    array_url: str = MDN_ARRAY_URL

    def __post_init__(self) -> None:
        if not self.link_class:
            object.__setattr__(self, "link_class", self.css_class)
        object.__setattr__(self, "links", MappingProxyType(dict(self.links or {})))

    @classmethod
    def from_dict(cls, config_dict: Mapping[str, Any]) -> "RenderConfig":
        """Create RenderConfig from a dictionary.

        Accepts the field names as well as the camelCase option names used
        by JSDoc templates (``cssClass``, ``linkClass``, ``htmlSafe``,
        ``ignoreModifiers``). Unknown keys are silently ignored.

        Example:
            >>> config = RenderConfig.from_dict({
            ...     "cssClass": "type",
            ...     "links": {"Foo": "foo.html"},
            ...     "unknown_key": "ignored",
            ... })
            >>> config.link_class
            'type'

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered: dict[str, Any] = {}
        for key, value in config_dict.items():
            name = _OPTION_ALIASES.get(key, key)
            if name in valid_fields:
                filtered[name] = value
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: RenderConfig = RenderConfig()

_render_config: ContextVar[RenderConfig] = ContextVar(
    "render_config",
    default=_DEFAULT_CONFIG,
)


def get_render_config() -> RenderConfig:
    """Get the render configuration active in this context."""
    return _render_config.get()


def set_render_config(config: RenderConfig) -> None:
    """Set the render configuration for the current context."""
    _render_config.set(config)


def reset_render_config() -> None:
    """Reset the current context to the default configuration."""
    _render_config.set(_DEFAULT_CONFIG)


@contextmanager
def render_config_context(config: RenderConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Example:
        >>> with render_config_context(RenderConfig(html_safe=True)):
        ...     stringify(node)  # renders Promise&lt;T&gt;
        >>> # Previous config restored

    Thread Safety:
        Only affects the current thread's context. Restores the previous
        config even if an exception is raised.

    """
    previous = _render_config.get()
    _render_config.set(config)
    try:
        yield
    finally:
        _render_config.set(previous)


__all__ = [
    "MDN_ARRAY_URL",
    "RenderConfig",
    "get_render_config",
    "render_config_context",
    "reset_render_config",
    "set_render_config",
]
