"""Text leaves: literal text and text with ``$name`` variables."""

from __future__ import annotations

import abc
from typing import TYPE_CHECKING, Optional

from markupsafe import escape

from .base import TreeEntry
from .errors import HtmlgenError
from .output import RenderOutput
from .variables import Environment, Var, expand, parse_vars

if TYPE_CHECKING:
    from .nodes import Node
    from .options import ImgOptions


class _Leaf(TreeEntry, abc.ABC):
    """Inline chaining shared by both leaf kinds.

    ``leaf.b("bold")`` appends a ``<b>`` sibling holding the text and returns
    a fresh empty leaf after it, so text and inline markup can be chained.
    """

    def _owner(self) -> "Node":
        if self.parent is None:
            raise HtmlgenError("a detached text node cannot add siblings")
        return self.parent

    @abc.abstractmethod
    def _fill(self, node: "Node", text: str) -> None:
        """Put ``text`` into the freshly added inline element."""

    @abc.abstractmethod
    def _next(self):
        """Append and return the leaf that continues the chain."""

    def _wrap(self, node: "Node", text: str):
        self._fill(node, text)
        return self._next()

    def a(self, href: str, text: str):
        return self._wrap(self._owner().a(href), text)

    def abbr(self, text: str, title: str = ""):
        return self._wrap(self._owner().abbr(title), text)

    def b(self, text: str):
        return self._wrap(self._owner().b(), text)

    def cite(self, text: str):
        return self._wrap(self._owner().cite(), text)

    def code(self, text: str):
        return self._wrap(self._owner().code(), text)

    def dfn(self, text: str):
        return self._wrap(self._owner().dfn(), text)

    def em(self, text: str):
        return self._wrap(self._owner().em(), text)

    def i(self, text: str):
        return self._wrap(self._owner().i(), text)

    def kbd(self, text: str):
        return self._wrap(self._owner().kbd(), text)

    def pre(self, text: str):
        return self._wrap(self._owner().pre(), text)

    def samp(self, text: str):
        return self._wrap(self._owner().samp(), text)

    def small(self, text: str):
        return self._wrap(self._owner().small(), text)

    def strong(self, text: str):
        return self._wrap(self._owner().strong(), text)

    def u(self, text: str):
        return self._wrap(self._owner().u(), text)

    def var(self, text: str):
        return self._wrap(self._owner().var(), text)

    def img(self, src: str, alt: str, options: Optional["ImgOptions"] = None):
        self._owner().img(src, alt, options)
        return self._next()

    def write_pretty(
        self, out: RenderOutput, indent: int, env: Environment | None = None
    ) -> int:
        count = out.indent(indent)
        count += self.write(out, env)
        return count

    @abc.abstractmethod
    def write(self, out: RenderOutput, env: Environment | None = None) -> int:
        ...


class TextNode(_Leaf):
    """Literal text, escaped once when each fragment is appended."""

    def __init__(self, text: str = "") -> None:
        super().__init__()
        self._text = text

    def __repr__(self) -> str:
        return f"TextNode({self._text!r})"

    @property
    def text(self) -> str:
        return self._text

    def copy(self) -> "TextNode":
        return TextNode(self._text)

    def set_text(self, text: str) -> "TextNode":
        """Replace the text with the escaped form of ``text``."""
        self._text = str(escape(text))
        return self

    def set_text_unsafe(self, text: str) -> "TextNode":
        self._text = text
        return self

    def t(self, text: str = "") -> "TextNode":
        self._text += str(escape(text))
        return self

    def t_unsafe(self, text: str = "") -> "TextNode":
        self._text += text
        return self

    def tv(self, text: str = "") -> "VarTextNode":
        return self._owner().tv(text)

    def tv_unsafe(self, text: str = "") -> "VarTextNode":
        return self._owner().tv_unsafe(text)

    def _fill(self, node: "Node", text: str) -> None:
        node.t(text)

    def _next(self) -> "TextNode":
        return self._owner().t()

    def write(self, out: RenderOutput, env: Environment | None = None) -> int:
        return out.write(self._text)


class VarTextNode(_Leaf):
    """Raw text whose ``$name`` references are expanded at render time.

    Literal text and substituted values are escaped when rendered unless the
    node is unsafe.
    """

    def __init__(self, text: str = "", unsafe: bool = False) -> None:
        super().__init__()
        self._text = text
        self._vars = parse_vars(text)
        self.unsafe = unsafe

    def __repr__(self) -> str:
        return f"VarTextNode({self._text!r}, unsafe={self.unsafe})"

    @property
    def text(self) -> str:
        return self._text

    @property
    def vars(self) -> tuple[Var, ...]:
        return tuple(self._vars)

    def copy(self) -> "VarTextNode":
        return VarTextNode(self._text, unsafe=self.unsafe)

    def set_text(self, text: str) -> "VarTextNode":
        self._text = text
        self._vars = parse_vars(text)
        return self

    def set_unsafe(self, unsafe: bool = True) -> "VarTextNode":
        self.unsafe = unsafe
        return self

    def tv(self, text: str = "") -> "VarTextNode":
        if text:
            self.set_text(self._text + text)
        return self

    def t(self, text: str = "") -> TextNode:
        return self._owner().t(text)

    def t_unsafe(self, text: str = "") -> TextNode:
        return self._owner().t_unsafe(text)

    def _fill(self, node: "Node", text: str) -> None:
        node.tv(text)

    def _next(self) -> "VarTextNode":
        return self._owner().tv()

    def write(self, out: RenderOutput, env: Environment | None = None) -> int:
        count = 0
        for fragment in expand(
            self._text,
            self._vars,
            env,
            unsafe=self.unsafe,
            undefined=out.config.undefined,
        ):
            count += out.write(fragment)
        return count
