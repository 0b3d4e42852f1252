"""Lightweight string templating utilities."""

from __future__ import annotations

import json
import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Mapping, MutableMapping

__all__ = [
    "TemplateRenderer",
    "TemplateRenderingError",
]


# Double braces never occur in the generated JavaScript, so ``${...}`` template
# literals pass through untouched.
_PLACEHOLDER_PATTERN = re.compile(r"{{\s*(?P<expression>[^{}]+?)\s*}}")


class TemplateRenderingError(RuntimeError):
    """Raised when the renderer cannot evaluate a placeholder."""


def js_string(value: Any) -> str:
    """Return ``value`` as a double-quoted JavaScript string literal."""

    # ensure_ascii also escapes U+2028/U+2029, which older engines reject.
    return json.dumps(str(value))


def _resolve_value(context: Mapping[str, Any], dotted_path: str) -> Any:
    value: Any = context
    for segment in dotted_path.split("."):
        if isinstance(value, Mapping):
            if segment not in value:
                raise KeyError(segment)
            value = value[segment]
            continue
        if hasattr(value, segment):
            value = getattr(value, segment)
            continue
        raise KeyError(segment)
    return value


def _apply_filter(value: Any, filter_name: str, filters: Mapping[str, Callable[[Any], Any]]) -> Any:
    try:
        filter_func = filters[filter_name]
    except KeyError as exc:
        raise TemplateRenderingError(f"unknown filter '{filter_name}'") from exc

    return filter_func(value)


@dataclass(slots=True)
class TemplateRenderer:
    """Render templates with ``{{ placeholder|filters }}`` expressions.

    Every placeholder must resolve; a missing value raises
    :class:`TemplateRenderingError` so no half-rendered file reaches disk.
    """

    filters: MutableMapping[str, Callable[[Any], Any]] = field(default_factory=dict)

    def __post_init__(self) -> None:
        self.filters.setdefault("js", js_string)

    def render_string(self, template: str, context: Mapping[str, Any]) -> str:
        """Render ``template`` using ``context``.

        Dotted keys walk into nested mappings or object attributes, so
        ``spec.name`` works when a :class:`~express_scaffold.config.ProjectSpec`
        is in the context. Enum members render as their value.
        """

        def substitute(match: re.Match[str]) -> str:
            expression = match.group("expression")
            parts = [part.strip() for part in expression.split("|") if part.strip()]
            if not parts:
                return match.group(0)

            key, *filters = parts
            try:
                value = _resolve_value(context, key)
            except KeyError:
                raise TemplateRenderingError(f"missing value for '{key}'") from None

            if isinstance(value, Enum):
                value = value.value

            for filter_name in filters:
                value = _apply_filter(value, filter_name, self.filters)

            return str(value)

        return _PLACEHOLDER_PATTERN.sub(substitute, template)
