"""String normalisation utilities used throughout the project."""

from __future__ import annotations

import re
import unicodedata

__all__ = ["slugify", "npm_package_name"]


_SEPARATORS = re.compile(r"[\s\-]+")
_NPM_INVALID = re.compile(r"[^a-z0-9\-._~]")
_NPM_MAX_LENGTH = 214


def slugify(value: str, *, separator: str = "-") -> str:
    """Create a lowercase ASCII slug from ``value``.

    Accented characters are reduced to their ASCII base letter and anything
    that is not a word character, a hyphen or whitespace is dropped.
    """

    text = unicodedata.normalize("NFKD", value)
    text = text.encode("ascii", "ignore").decode("ascii")

    text = re.sub(r"[\s]+", " ", text)
    text = re.sub(r"[^\w\- ]", "", text)
    text = text.strip().lower()

    if not text:
        return ""

    collapsed = _SEPARATORS.sub(separator, text)
    collapsed = re.sub(rf"{re.escape(separator)}+", separator, collapsed)
    return collapsed.strip(separator)


def npm_package_name(name: str) -> str:
    """Return a name accepted by the npm registry for ``name``.

    npm names are lowercase, URL safe, at most 214 characters long and may not
    start with a dot or an underscore. Names that normalise to nothing fall
    back to ``"express-app"``.
    """

    candidate = slugify(name)
    candidate = candidate.replace("_", "-")
    candidate = _NPM_INVALID.sub("", candidate)
    candidate = candidate.lstrip("._-")[:_NPM_MAX_LENGTH].rstrip("-")

    if not candidate:
        return "express-app"

    return candidate
