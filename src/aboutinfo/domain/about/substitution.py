"""Localized string lookup with positional ``{n}`` substitution."""

from __future__ import annotations

import re
from itertools import count
from typing import Mapping, Sequence

_PLACEHOLDER = re.compile(r"\{([0-9]+)\}")


def build_mappings(bundle: Mapping[str, str] | None) -> tuple[str, ...]:
    """Collect values for keys ``"0"``, ``"1"``, ... up to the first gap."""
    if not bundle:
        return ()
    values: list[str] = []
    for index in count():
        value = bundle.get(str(index))
        if value is None:
            break
        values.append(value)
    return tuple(values)


def substitute(
    raw: str | None,
    bundle: Mapping[str, str] | None,
    mappings: Sequence[str],
) -> str | None:
    """Resolve ``raw`` against the bundle and expand ``{n}`` placeholders.

    ``raw`` doubles as a bundle key: when the bundle has an entry for it the
    entry becomes the template, otherwise ``raw`` is used verbatim.
    Placeholders whose index has no mapping are kept as literal text.
    """
    if raw is None:
        return None
    template = raw
    if bundle is not None:
        template = bundle.get(raw, raw)
    if not mappings or "{" not in template:
        return template

    def _replace(match: re.Match) -> str:
        index = int(match.group(1))
        if index < len(mappings):
            return mappings[index]
        return match.group(0)

    return _PLACEHOLDER.sub(_replace, template)


__all__ = ["build_mappings", "substitute"]
