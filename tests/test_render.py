from __future__ import annotations

import io

import pytest

from htmlgen import H, RenderConfig, WriteError, new_null, new_root, render, write, write_pretty


class FailingSink:
    """Accepts ``limit`` writes, then raises."""

    def __init__(self, limit: int) -> None:
        self.limit = limit
        self.chunks: list[str] = []

    def write(self, text: str) -> int:
        if len(self.chunks) >= self.limit:
            raise OSError("disk full")
        self.chunks.append(text)
        return len(text)


class SilentSink:
    """A sink whose write() returns None."""

    def __init__(self) -> None:
        self.parts: list[str] = []

    def write(self, text: str) -> None:
        self.parts.append(text)


def _tree():
    root = new_null()
    div = root.div_id("x")
    div.span().t("hello")
    return root


def test_write_returns_characters_written() -> None:
    buffer = io.StringIO()
    count = write(buffer, _tree())

    assert buffer.getvalue() == '<div id="x"><span>hello</span></div>'
    assert count == len(buffer.getvalue())


def test_write_pretty_counts_indentation() -> None:
    buffer = io.StringIO()
    count = write_pretty(buffer, _tree())

    assert buffer.getvalue() == '<div id="x">\n  <span>\n    hello\n  </span>\n</div>'
    assert count == len(buffer.getvalue())


def test_sink_failure_raises_write_error_with_count() -> None:
    sink = FailingSink(limit=2)

    with pytest.raises(WriteError) as excinfo:
        write(sink, _tree())

    assert excinfo.value.bytes_written == sum(len(chunk) for chunk in sink.chunks)
    assert isinstance(excinfo.value.__cause__, OSError)


def test_tree_renders_after_a_failed_write() -> None:
    root = _tree()
    with pytest.raises(WriteError):
        write(FailingSink(limit=0), root)

    assert render(root) == '<div id="x"><span>hello</span></div>'


def test_binary_sink_receives_encoded_bytes() -> None:
    root = new_null()
    root.p().t("café")

    buffer = io.BytesIO()
    count = write(buffer, root)

    assert buffer.getvalue() == "<p>café</p>".encode("utf-8")
    assert count == len(buffer.getvalue())


def test_sink_returning_none_counts_string_length() -> None:
    sink = SilentSink()
    count = write(sink, _tree())

    assert count == len("".join(sink.parts))


def test_root_writes_doctype() -> None:
    root = new_root()
    root.body()

    assert render(root) == "<!DOCTYPE html><html><body></body></html>"
    assert render(root, pretty=True) == "<!DOCTYPE html>\n<html>\n  <body></body>\n</html>"


def test_config_changes_indent_and_doctype() -> None:
    root = new_root()
    root.body().p()
    config = RenderConfig(indent_width=4, doctype="<!doctype html>")

    assert render(root, pretty=True, config=config) == (
        "<!doctype html>\n<html>\n    <body>\n        <p></p>\n    </body>\n</html>"
    )


def test_leaf_can_be_rendered_directly() -> None:
    assert render(H.t("a & b")) == "a &amp; b"


class TrickleSink(io.RawIOBase):
    """Raw stream that accepts at most ``limit`` bytes per call."""

    def __init__(self, limit: int) -> None:
        self.limit = limit
        self.data = bytearray()

    def writable(self) -> bool:
        return True

    def write(self, b) -> int:
        chunk = bytes(b[: self.limit])
        self.data.extend(chunk)
        return len(chunk)


class StalledSink(TrickleSink):
    """Accepts ``budget`` bytes in total, then reports zero progress."""

    def __init__(self, limit: int, budget: int) -> None:
        super().__init__(limit)
        self.budget = budget

    def write(self, b) -> int:
        room = min(self.limit, self.budget - len(self.data))
        if room <= 0:
            return 0
        return super().write(b[:room])


def test_short_writes_are_completed() -> None:
    root = new_null()
    root.div_id("abcdef").t("hello")
    sink = TrickleSink(limit=4)

    count = write(sink, root)

    assert bytes(sink.data) == b'<div id="abcdef">hello</div>'
    assert count == len(sink.data)


def test_stalled_sink_raises_write_error_with_count() -> None:
    sink = StalledSink(limit=4, budget=10)

    with pytest.raises(WriteError) as excinfo:
        write(sink, _tree())

    assert excinfo.value.bytes_written == 10
    assert bytes(sink.data) == b'<div id="x'
