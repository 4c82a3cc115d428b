"""Variable references embedded in text.

Variables have the form ``$name`` where ``name`` starts with a letter or an
underscore followed by letters, digits or underscores. ``$$`` renders a
literal ``$``. A ``$`` that starts no valid name renders as an undefined
variable.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Iterator, Mapping, Sequence

from markupsafe import escape

VAR_DELIMITER = "$"
UNDEFINED_VALUE = "undefined"

_VAR_RE = re.compile(r"\$|[a-zA-Z_][a-zA-Z0-9_]*")


@dataclass(frozen=True)
class StringValue:
    """A variable value wrapping a plain string."""

    value: str

    def __str__(self) -> str:
        return self.value


# Values are rendered through str(); StringValue is the canonical variant.
Environment = Mapping[str, Any]


@dataclass(frozen=True)
class Var:
    # Position of the leading "$".
    start_offset: int
    # Full span length including the leading "$".
    length: int

    @property
    def end_offset(self) -> int:
        return self.start_offset + self.length


def parse_vars(text: str) -> list[Var]:
    """Scan text once and return the variable spans in order."""
    spans: list[Var] = []
    offset = 0
    while offset < len(text):
        index = text.find(VAR_DELIMITER, offset)
        if index == -1:
            break
        match = _VAR_RE.match(text, index + 1)
        length = 1 + (len(match.group(0)) if match else 0)
        spans.append(Var(start_offset=index, length=length))
        offset = index + length
    return spans


def _escape(text: str, unsafe: bool) -> str:
    return text if unsafe else str(escape(text))


def expand(
    text: str,
    spans: Sequence[Var],
    env: Environment | None = None,
    *,
    unsafe: bool = False,
    undefined: str = UNDEFINED_VALUE,
) -> Iterator[str]:
    """Yield the rendered fragments of text with every span substituted."""
    env = env or {}
    offset = 0
    for span in spans:
        yield _escape(text[offset : span.start_offset], unsafe)

        name = text[span.start_offset + 1 : span.end_offset]
        if name == VAR_DELIMITER:
            yield VAR_DELIMITER
        else:
            value = env.get(name, undefined)
            yield _escape(str(value), unsafe)

        offset = span.end_offset

    yield _escape(text[offset:], unsafe)


def expand_to_string(
    text: str,
    env: Environment | None = None,
    *,
    unsafe: bool = False,
    undefined: str = UNDEFINED_VALUE,
) -> str:
    return "".join(expand(text, parse_vars(text), env, unsafe=unsafe, undefined=undefined))
