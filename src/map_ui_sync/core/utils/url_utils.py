"""URL pattern matching shared by the request stream and response routing."""

from __future__ import annotations

import re
from functools import lru_cache

UrlPattern = str | re.Pattern[str]


@lru_cache(maxsize=128)
def _glob_to_regex(glob: str) -> re.Pattern[str]:
    """Translate a Playwright-style URL glob into a compiled regex.

    ``**`` matches any characters including ``/``, ``*`` matches any characters
    except ``/``, ``?`` matches a single character and ``{a,b}`` matches either
    alternative. Groups do not nest.

    Example:
        ``**/tiles/*.{pbf,png}`` matches ``https://host/api/tiles/12.pbf``

    Raises:
        ValueError: If a ``{`` group is nested or left unclosed, or a ``}``
            has no opening ``{``.
    """
    parts: list[str] = []
    in_group = False
    i = 0
    while i < len(glob):
        char = glob[i]
        if glob.startswith("**", i):
            parts.append(".*")
            i += 2
            continue
        if char == "*":
            parts.append("[^/]*")
        elif char == "?":
            parts.append(".")
        elif char == "{":
            if in_group:
                raise ValueError(f"Nested '{{' in URL glob {glob!r}")
            in_group = True
            parts.append("(?:")
        elif char == "}":
            if not in_group:
                raise ValueError(f"Unmatched '}}' in URL glob {glob!r}")
            in_group = False
            parts.append(")")
        elif char == "," and in_group:
            parts.append("|")
        else:
            parts.append(re.escape(char))
        i += 1
    if in_group:
        raise ValueError(f"Unclosed '{{' in URL glob {glob!r}")
    return re.compile("".join(parts))


def url_matches(url: str, pattern: UrlPattern) -> bool:
    """Check whether a URL matches a glob string or a compiled regex.

    Globs must match the whole URL. Compiled regexes match anywhere in the URL,
    the same way ``re.search`` does.
    """
    if isinstance(pattern, re.Pattern):
        return pattern.search(url) is not None
    return _glob_to_regex(pattern).fullmatch(url) is not None


def describe_pattern(pattern: UrlPattern) -> str:
    """Human-readable form of a URL pattern for logs and error messages."""
    if isinstance(pattern, re.Pattern):
        return f"/{pattern.pattern}/"
    return pattern


__all__ = [
    "UrlPattern",
    "describe_pattern",
    "url_matches",
]
