"""Counted writes to an output sink."""

from __future__ import annotations

import io
import logging
from typing import Any

from .config import DEFAULT_CONFIG, RenderConfig
from .errors import WriteError

logger = logging.getLogger(__name__)


class RenderOutput:
    """Wraps a sink for one render call.

    Every unit the sink accepts adds to ``count``. A failing sink raises
    WriteError carrying the count accepted so far, which aborts the render.
    """

    def __init__(self, sink: Any, config: RenderConfig | None = None) -> None:
        self.sink = sink
        self.config = config or DEFAULT_CONFIG
        self.count = 0
        self._raw = isinstance(sink, io.RawIOBase)
        self._binary = self._raw or isinstance(sink, io.BufferedIOBase)

    def write(self, text: str) -> int:
        """Write all of ``text``, retrying after short writes.

        A sink that stops accepting data raises WriteError with the count
        accepted so far.
        """
        if not text:
            return 0
        payload: str | bytes = text.encode(self.config.encoding) if self._binary else text
        view = memoryview(payload) if isinstance(payload, bytes) else payload
        total = len(payload)
        written = 0
        while written < total:
            chunk = view[written:]
            try:
                accepted = self.sink.write(chunk)
            except (OSError, ValueError) as exc:
                logger.debug("Sink rejected write after %d units: %s", self.count, exc)
                raise WriteError(f"write failed: {exc}", self.count) from exc
            if accepted is None:
                # Raw streams return None when they would block.
                accepted = 0 if self._raw else len(chunk)
            if accepted <= 0:
                logger.debug("Sink stopped accepting data after %d units", self.count)
                raise WriteError(f"short write: {written} of {total} units", self.count)
            written += accepted
            self.count += accepted
        return written

    def indent(self, width: int) -> int:
        return self.write(" " * width)
