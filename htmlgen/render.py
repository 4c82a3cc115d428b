"""Entry points that serialize a node tree."""

from __future__ import annotations

import io
from typing import Any

from .base import ChildWriter
from .config import RenderConfig
from .output import RenderOutput
from .variables import Environment


def write(
    sink: Any,
    root: ChildWriter,
    env: Environment | None = None,
    *,
    config: RenderConfig | None = None,
) -> int:
    """Write ``root`` in compact form and return the count the sink accepted.

    The count is in the sink's units: characters for text streams, bytes for
    binary streams. Raises WriteError as soon as the sink fails.
    """
    return root.write(RenderOutput(sink, config), env)


def write_pretty(
    sink: Any,
    root: ChildWriter,
    env: Environment | None = None,
    *,
    config: RenderConfig | None = None,
) -> int:
    """Write ``root`` indented one child per line, attributes sorted by name.

    Counts the same way as write().
    """
    return root.write_pretty(RenderOutput(sink, config), 0, env)


def render(
    root: ChildWriter,
    env: Environment | None = None,
    *,
    pretty: bool = False,
    config: RenderConfig | None = None,
) -> str:
    buffer = io.StringIO()
    if pretty:
        write_pretty(buffer, root, env, config=config)
    else:
        write(buffer, root, env, config=config)
    return buffer.getvalue()
