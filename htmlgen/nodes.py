"""Element nodes and the factory that creates them."""

from __future__ import annotations

from typing import Callable, Dict, Iterable, Iterator, List, Mapping, Optional, Tuple

from markupsafe import escape

from .base import ChildWriter, TreeEntry
from .constants import ATTR_NAMES, TAG_NAMES, Attr, TagType
from .errors import ChildNotAllowedError, NotFoundError
from .options import (
    CanvasOptions,
    FormOptions,
    ImgOptions,
    InputOptions,
    LabelOptions,
    LinkOptions,
    MetaOptions,
    OptionOptions,
    SelectOptions,
    StyleOptions,
    TableOptions,
    TdOptions,
    TextareaOptions,
    ThOptions,
)
from .output import RenderOutput
from .text import TextNode, VarTextNode
from .variables import Environment


def _simple(tag_type: TagType) -> Callable[["TagFactory"], "Node"]:
    def make(self: "TagFactory") -> "Node":
        return self._make(Node(tag_type))

    make.__name__ = TAG_NAMES[tag_type]
    make.__doc__ = f"Create a <{TAG_NAMES[tag_type]}> element."
    return make


def _with_id_classes(node: "Node", id: str, classes: Iterable[str]) -> "Node":
    node.set_id(id)
    node.set_classes(list(classes))
    return node


def _pretty_children(children: Iterable[ChildWriter]) -> List[ChildWriter]:
    """Children that produce output; hidden ones and empty fragments are skipped."""
    return [
        child
        for child in children
        if not child.is_hidden() and not (isinstance(child, NullNode) and child.is_empty())
    ]


class TagFactory:
    """Creates nodes, one method per supported element.

    On a bare factory (``H``) the nodes come back detached. Node inherits
    these methods and attaches each new node as its last child instead.
    """

    def _make(self, node):
        return node

    def a(self, href: str = "") -> "Node":
        node = Node(TagType.A)
        node._set_attr(Attr.HREF, href)
        return self._make(node)

    def abbr(self, title: str = "") -> "Node":
        node = Node(TagType.ABBR)
        node._set_attr(Attr.TITLE, title)
        return self._make(node)

    address = _simple(TagType.ADDRESS)
    b = _simple(TagType.B)
    blockquote = _simple(TagType.BLOCKQUOTE)

    def body(self) -> "BodyNode":
        return self._make(BodyNode())

    def br(self) -> "SingleNode":
        return self._make(SingleNode(TagType.BR))

    button = _simple(TagType.BUTTON)

    def canvas(self, options: Optional[CanvasOptions] = None) -> "Node":
        return self._make(Node(TagType.CANVAS)._apply(options))

    caption = _simple(TagType.CAPTION)

    def checked_input(
        self, input_type: str, options: Optional[InputOptions] = None
    ) -> "CheckedInputNode":
        node = CheckedInputNode()
        node._set_attr(Attr.TYPE, input_type)
        if options is not None:
            node.set_options(options)
        return self._make(node)

    def checked_input_type_name_value(
        self, input_type: str, name: str, value: str
    ) -> "CheckedInputNode":
        node = CheckedInputNode()
        node._set_name_value(input_type, name, value)
        return self._make(node)

    cite = _simple(TagType.CITE)
    code = _simple(TagType.CODE)

    def comment(self) -> "CommentNode":
        return self._make(CommentNode())

    datalist = _simple(TagType.DATALIST)
    dfn = _simple(TagType.DFN)
    div = _simple(TagType.DIV)

    def div_classes(self, *classes: str) -> "Node":
        return self._make(Node(TagType.DIV).set_classes(list(classes)))

    def div_id(self, id: str) -> "Node":
        return self._make(Node(TagType.DIV).set_id(id))

    def div_id_classes(self, id: str, *classes: str) -> "Node":
        return self._make(_with_id_classes(Node(TagType.DIV), id, classes))

    dd = _simple(TagType.DD)
    dl = _simple(TagType.DL)
    dt = _simple(TagType.DT)
    em = _simple(TagType.EM)
    footer = _simple(TagType.FOOTER)

    def form(self, options: Optional[FormOptions] = None) -> "Node":
        return self._make(Node(TagType.FORM)._apply(options))

    h1 = _simple(TagType.H1)
    h2 = _simple(TagType.H2)
    h3 = _simple(TagType.H3)
    h4 = _simple(TagType.H4)
    h5 = _simple(TagType.H5)
    h6 = _simple(TagType.H6)
    head = _simple(TagType.HEAD)

    def hr(self) -> "SingleNode":
        return self._make(SingleNode(TagType.HR))

    i = _simple(TagType.I)

    def img(self, src: str, alt: str, options: Optional[ImgOptions] = None) -> "SingleNode":
        node = SingleNode(TagType.IMG)
        # src and alt are always written, even when empty.
        node.attrs[Attr.SRC] = src
        node.attrs[Attr.ALT] = alt
        return self._make(node._apply(options))

    def input(self, input_type: str, options: Optional[InputOptions] = None) -> "InputNode":
        node = InputNode()
        node._set_attr(Attr.TYPE, input_type)
        if options is not None:
            node.set_options(options)
        return self._make(node)

    def input_type_name_value(self, input_type: str, name: str, value: str) -> "InputNode":
        node = InputNode()
        node._set_name_value(input_type, name, value)
        return self._make(node)

    kbd = _simple(TagType.KBD)

    def label(self, options: Optional[LabelOptions] = None) -> "Node":
        return self._make(Node(TagType.LABEL)._apply(options))

    li = _simple(TagType.LI)

    def link(self, rel: str, options: Optional[LinkOptions] = None) -> "SingleNode":
        node = SingleNode(TagType.LINK)
        # rel is required.
        node.attrs[Attr.REL] = rel
        return self._make(node._apply(options))

    def meta(
        self, name: str, content: str, options: Optional[MetaOptions] = None
    ) -> "SingleNode":
        node = SingleNode(TagType.META)
        node.attrs[Attr.NAME] = name
        node.attrs[Attr.CONTENT] = content
        return self._make(node._apply(options))

    noscript = _simple(TagType.NOSCRIPT)
    ol = _simple(TagType.OL)

    def option(self, options: Optional[OptionOptions] = None) -> "OptionNode":
        node = OptionNode()
        if options is not None:
            node.set_options(options)
        return self._make(node)

    p = _simple(TagType.P)
    pre = _simple(TagType.PRE)
    samp = _simple(TagType.SAMP)

    def script(self, script_type: str = "") -> "Node":
        return self.script_src(script_type, "")

    def script_src(self, script_type: str, src: str) -> "Node":
        node = Node(TagType.SCRIPT)
        node._set_attr(Attr.TYPE, script_type)
        node._set_attr(Attr.SRC, src)
        return self._make(node)

    def select(self, options: Optional[SelectOptions] = None) -> "SelectNode":
        return self._make(SelectNode()._apply(options))

    small = _simple(TagType.SMALL)
    span = _simple(TagType.SPAN)

    def span_classes(self, *classes: str) -> "Node":
        return self._make(Node(TagType.SPAN).set_classes(list(classes)))

    def span_id(self, id: str) -> "Node":
        return self._make(Node(TagType.SPAN).set_id(id))

    def span_id_classes(self, id: str, *classes: str) -> "Node":
        return self._make(_with_id_classes(Node(TagType.SPAN), id, classes))

    strong = _simple(TagType.STRONG)

    def style(self, options: Optional[StyleOptions] = None) -> "Node":
        return self._make(Node(TagType.STYLE)._apply(options))

    def t(self, text: str = "") -> TextNode:
        """Create a text leaf; ``text`` is escaped."""
        return self._make(TextNode(str(escape(text))))

    def t_unsafe(self, text: str = "") -> TextNode:
        """Create a text leaf holding ``text`` verbatim."""
        return self._make(TextNode(text))

    def table(self, options: Optional[TableOptions] = None) -> "Node":
        return self._make(Node(TagType.TABLE)._apply(options))

    tbody = _simple(TagType.TBODY)

    def td(self, options: Optional[TdOptions] = None) -> "Node":
        return self._make(Node(TagType.TD)._apply(options))

    def textarea(
        self, rows: int, cols: int, options: Optional[TextareaOptions] = None
    ) -> "Node":
        node = Node(TagType.TEXTAREA)
        node.attrs[Attr.ROWS] = str(rows)
        node.attrs[Attr.COLS] = str(cols)
        return self._make(node._apply(options))

    tfoot = _simple(TagType.TFOOT)

    def th(self, options: Optional[ThOptions] = None) -> "Node":
        return self._make(Node(TagType.TH)._apply(options))

    thead = _simple(TagType.THEAD)
    title = _simple(TagType.TITLE)
    tr = _simple(TagType.TR)

    def tv(self, text: str = "") -> VarTextNode:
        """Create a variable text leaf; text and values are escaped at render time."""
        return self._make(VarTextNode(text))

    def tv_unsafe(self, text: str = "") -> VarTextNode:
        """Like tv() but nothing is escaped."""
        return self._make(VarTextNode(text, unsafe=True))

    u = _simple(TagType.U)
    ul = _simple(TagType.UL)
    var = _simple(TagType.VAR)


class Node(TagFactory, TreeEntry):
    """An element with attributes and ordered children.

    The rendered open tag is cached for compact output; every attribute
    mutator marks the cache dirty and the renderer rebuilds it lazily.
    """

    def __init__(self, tag_type: TagType) -> None:
        super().__init__()
        self.tag_type = tag_type
        self.attrs: Dict[Attr, str] = {}
        self.custom_attrs: Dict[str, str] = {}
        self.children: List[ChildWriter] = []
        self.hidden = False
        self._cache_open: Optional[str] = None

    def __repr__(self) -> str:
        return f"{type(self).__name__}(<{self.tag_name}>, children={len(self.children)})"

    @property
    def tag_name(self) -> str:
        return TAG_NAMES.get(self.tag_type, "")

    # Tree structure.

    def _make(self, node):
        self.add_child(node)
        return node

    def add_child(self, node: ChildWriter) -> "Node":
        """Append ``node`` as the last child and return self.

        A node that already has a parent is detached from it first.
        """
        if node.parent is not None:
            node.remove_parent()
        self.children.append(node)
        node.parent = self
        return self

    def _detach_child(self, node: ChildWriter) -> None:
        # Search from the end: the most recently added child is the common case.
        for index in range(len(self.children) - 1, -1, -1):
            if self.children[index] is node:
                del self.children[index]
                return

    def remove_children(self) -> "Node":
        for child in self.children:
            child.parent = None
        self.children = []
        return self

    def hide(self, hidden: bool = True) -> "Node":
        self.hidden = hidden
        return self

    def is_hidden(self) -> bool:
        return self.hidden

    def copy(self) -> "Node":
        """Copy attributes into a detached, childless, visible node.

        The source's open-tag cache is made valid first so the copy can share
        the rendered string.
        """
        cached = self._open_tag()
        dup = type(self)(self.tag_type)
        dup.attrs = dict(self.attrs)
        dup.custom_attrs = dict(self.custom_attrs)
        dup._cache_open = cached
        return dup

    # Attributes.

    def _mark_dirty(self) -> None:
        self._cache_open = None

    def _set_attr(self, attr: Attr, value: str) -> "Node":
        """Set a known attribute; an empty value removes it."""
        if value:
            self.attrs[attr] = value
        else:
            self.attrs.pop(attr, None)
        self._mark_dirty()
        return self

    def _apply(self, options) -> "Node":
        if options is not None:
            self.attrs.update(options.to_attrs())
            self._mark_dirty()
        return self

    @property
    def id(self) -> str:
        return self.attrs.get(Attr.ID, "")

    def set_id(self, id: str) -> "Node":
        return self._set_attr(Attr.ID, id)

    def set_title(self, title: str) -> "Node":
        return self._set_attr(Attr.TITLE, title)

    def add_class(self, *classes: str) -> "Node":
        return self.add_classes(list(classes))

    def add_classes(self, classes: List[str]) -> "Node":
        if not classes:
            return self
        joined = " ".join(classes)
        current = self.attrs.get(Attr.CLASS)
        self.attrs[Attr.CLASS] = f"{current} {joined}" if current else joined
        self._mark_dirty()
        return self

    def set_class(self, *classes: str) -> "Node":
        return self.set_classes(list(classes))

    def set_classes(self, classes: List[str]) -> "Node":
        """Replace the class attribute; an empty list removes it."""
        return self._set_attr(Attr.CLASS, " ".join(classes) if classes else "")

    def set_attribute(self, key: str, value: str) -> "Node":
        self.custom_attrs[key] = value
        self._mark_dirty()
        return self

    def set_attributes(self, attrs: Mapping[str, str]) -> "Node":
        self.custom_attrs.update(attrs)
        self._mark_dirty()
        return self

    def remove_attribute(self, key: str) -> "Node":
        self.custom_attrs.pop(key, None)
        self._mark_dirty()
        return self

    def remove_attributes(self, *keys: str) -> "Node":
        for key in keys:
            self.custom_attrs.pop(key, None)
        self._mark_dirty()
        return self

    def set_onblur(self, script: str) -> "Node":
        return self._set_attr(Attr.ONBLUR, script)

    def set_onchange(self, script: str) -> "Node":
        return self._set_attr(Attr.ONCHANGE, script)

    def set_onclick(self, script: str) -> "Node":
        return self._set_attr(Attr.ONCLICK, script)

    def set_ondblclick(self, script: str) -> "Node":
        return self._set_attr(Attr.ONDBLCLICK, script)

    def set_onfocus(self, script: str) -> "Node":
        return self._set_attr(Attr.ONFOCUS, script)

    def set_onkeydown(self, script: str) -> "Node":
        return self._set_attr(Attr.ONKEYDOWN, script)

    def set_onkeypress(self, script: str) -> "Node":
        return self._set_attr(Attr.ONKEYPRESS, script)

    def set_onkeyup(self, script: str) -> "Node":
        return self._set_attr(Attr.ONKEYUP, script)

    def set_onmousedown(self, script: str) -> "Node":
        return self._set_attr(Attr.ONMOUSEDOWN, script)

    def set_onmousemove(self, script: str) -> "Node":
        return self._set_attr(Attr.ONMOUSEMOVE, script)

    def set_onmouseout(self, script: str) -> "Node":
        return self._set_attr(Attr.ONMOUSEOUT, script)

    def set_onmouseover(self, script: str) -> "Node":
        return self._set_attr(Attr.ONMOUSEOVER, script)

    def set_onmouseup(self, script: str) -> "Node":
        return self._set_attr(Attr.ONMOUSEUP, script)

    def set_onselect(self, script: str) -> "Node":
        return self._set_attr(Attr.ONSELECT, script)

    def set_onsubmit(self, script: str) -> "Node":
        return self._set_attr(Attr.ONSUBMIT, script)

    # Rendering.

    def _attr_items(self) -> Iterator[Tuple[str, str]]:
        for attr, value in self.attrs.items():
            yield ATTR_NAMES[attr], value
        yield from self.custom_attrs.items()

    def _sorted_attr_items(self) -> List[Tuple[str, str]]:
        if not self.custom_attrs:
            return [(ATTR_NAMES[attr], self.attrs[attr]) for attr in sorted(self.attrs)]
        merged = {ATTR_NAMES[attr]: value for attr, value in self.attrs.items()}
        merged.update(self.custom_attrs)
        return sorted(merged.items())

    def _open_tag_lead(self, items: Iterable[Tuple[str, str]]) -> str:
        parts = [f"<{self.tag_name}"]
        for key, value in items:
            parts.append(f' {key}="{escape(value)}"')
        return "".join(parts)

    def _render_open_tag(self) -> str:
        return self._open_tag_lead(self._attr_items()) + ">"

    def _open_tag(self) -> str:
        if self._cache_open is None:
            self._cache_open = self._render_open_tag()
        return self._cache_open

    def write(self, out: RenderOutput, env: Environment | None = None) -> int:
        if self.hidden:
            return 0
        count = out.write(self._open_tag())
        for child in self.children:
            count += child.write(out, env)
        count += out.write(f"</{self.tag_name}>")
        return count

    def _write_children_pretty(
        self, out: RenderOutput, indent: int, env: Environment | None
    ) -> int:
        """Write visible children one per line, then the closing indentation."""
        count = 0
        visible = _pretty_children(self.children)
        for child in visible:
            count += out.write("\n")
            count += child.write_pretty(out, indent + out.config.indent_width, env)
        if visible:
            count += out.write("\n")
            count += out.indent(indent)
        return count

    def write_pretty(
        self, out: RenderOutput, indent: int, env: Environment | None = None
    ) -> int:
        if self.hidden:
            return 0
        count = out.indent(indent)
        count += out.write(self._open_tag_lead(self._sorted_attr_items()) + ">")
        count += self._write_children_pretty(out, indent, env)
        count += out.write(f"</{self.tag_name}>")
        return count


class SingleNode(Node):
    """Self-closing element such as <br />; it never has children."""

    def add_child(self, node: ChildWriter) -> "Node":
        raise ChildNotAllowedError(f"<{self.tag_name}> cannot have children")

    def remove_children(self) -> "Node":
        return self

    def _render_open_tag(self) -> str:
        return self._open_tag_lead(self._attr_items()) + " />"

    def write(self, out: RenderOutput, env: Environment | None = None) -> int:
        if self.hidden:
            return 0
        return out.write(self._open_tag())

    def write_pretty(
        self, out: RenderOutput, indent: int, env: Environment | None = None
    ) -> int:
        if self.hidden:
            return 0
        count = out.indent(indent)
        count += out.write(self._open_tag_lead(self._sorted_attr_items()) + " />")
        return count


class RootNode(Node):
    """The <html> element; a document declaration is written before it."""

    def __init__(self, tag_type: TagType = TagType.HTML) -> None:
        super().__init__(tag_type)

    def write(self, out: RenderOutput, env: Environment | None = None) -> int:
        if self.hidden:
            return 0
        count = out.write(out.config.doctype)
        count += super().write(out, env)
        return count

    def write_pretty(
        self, out: RenderOutput, indent: int, env: Environment | None = None
    ) -> int:
        if self.hidden:
            return 0
        count = out.indent(indent)
        count += out.write(out.config.doctype + "\n")
        count += super().write_pretty(out, indent, env)
        return count


class CommentNode(Node):
    """Wraps its children in <!-- -->; attributes are never written."""

    def __init__(self, tag_type: TagType = TagType.NULL) -> None:
        super().__init__(tag_type)

    def copy(self) -> "CommentNode":
        return CommentNode()

    def write(self, out: RenderOutput, env: Environment | None = None) -> int:
        if self.hidden:
            return 0
        count = out.write("<!-- ")
        for child in self.children:
            count += child.write(out, env)
        count += out.write(" -->")
        return count

    def write_pretty(
        self, out: RenderOutput, indent: int, env: Environment | None = None
    ) -> int:
        if self.hidden:
            return 0
        count = out.indent(indent)
        count += out.write("<!--")
        children = self._write_children_pretty(out, indent, env)
        if not children:
            children = out.write(" ")
        count += children
        count += out.write("-->")
        return count


class NullNode(Node):
    """A fragment: writes only its children."""

    def __init__(self, tag_type: TagType = TagType.NULL) -> None:
        super().__init__(tag_type)

    def copy(self) -> "NullNode":
        return NullNode()

    def is_empty(self) -> bool:
        """True when no child would produce any output."""
        return not _pretty_children(self.children)

    def write(self, out: RenderOutput, env: Environment | None = None) -> int:
        if self.hidden:
            return 0
        count = 0
        for child in self.children:
            count += child.write(out, env)
        return count

    def write_pretty(
        self, out: RenderOutput, indent: int, env: Environment | None = None
    ) -> int:
        if self.hidden:
            return 0
        count = 0
        visible = _pretty_children(self.children)
        for index, child in enumerate(visible):
            if index:
                count += out.write("\n")
            count += child.write_pretty(out, indent, env)
        return count


class BodyNode(Node):
    def __init__(self, tag_type: TagType = TagType.BODY) -> None:
        super().__init__(tag_type)

    def set_onload(self, script: str) -> "BodyNode":
        self._set_attr(Attr.ONLOAD, script)
        return self


class InputNode(SingleNode):
    # Attributes cleared by reset_options(); name and type survive.
    _OPTION_ATTRS = (
        Attr.ACTION,
        Attr.ALT,
        Attr.AUTOCOMPLETE,
        Attr.CHECKED,
        Attr.DISABLED,
        Attr.HEIGHT,
        Attr.MAXLENGTH,
        Attr.READONLY,
        Attr.SIZE,
        Attr.SRC,
        Attr.VALUE,
        Attr.WIDTH,
    )

    def __init__(self, tag_type: TagType = TagType.INPUT) -> None:
        super().__init__(tag_type)

    def _set_name_value(self, input_type: str, name: str, value: str) -> None:
        self._set_attr(Attr.TYPE, input_type)
        self._set_attr(Attr.NAME, name)
        self._set_attr(Attr.VALUE, value)

    def reset_options(self) -> "InputNode":
        for attr in self._OPTION_ATTRS:
            self.attrs.pop(attr, None)
        self._mark_dirty()
        return self

    def set_options(self, options: InputOptions) -> "InputNode":
        """Apply the non-default fields of ``options``; other attributes are kept."""
        self._apply(options)
        return self

    def set_value(self, value: str) -> "InputNode":
        """Set the value; an empty string removes it."""
        self._set_attr(Attr.VALUE, value)
        return self

    @property
    def type(self) -> str:
        return self.attrs.get(Attr.TYPE, "")

    @property
    def value(self) -> str:
        return self.attrs.get(Attr.VALUE, "")


class CheckedInputNode(InputNode):
    """A checkbox or radio input."""

    @property
    def checked(self) -> bool:
        return Attr.CHECKED in self.attrs

    def set_checked(self, checked: bool = True) -> "CheckedInputNode":
        if checked:
            self.attrs[Attr.CHECKED] = ""
        else:
            self.attrs.pop(Attr.CHECKED, None)
        self._mark_dirty()
        return self


class OptionNode(Node):
    _OPTION_ATTRS = (Attr.DISABLED, Attr.LABEL, Attr.SELECTED, Attr.VALUE)

    def __init__(self, tag_type: TagType = TagType.OPTION) -> None:
        super().__init__(tag_type)

    def reset_options(self) -> "OptionNode":
        for attr in self._OPTION_ATTRS:
            self.attrs.pop(attr, None)
        self._mark_dirty()
        return self

    def set_options(self, options: OptionOptions) -> "OptionNode":
        self._apply(options)
        return self

    @property
    def selected(self) -> bool:
        return Attr.SELECTED in self.attrs

    def set_selected(self, selected: bool = True) -> "OptionNode":
        if selected:
            self.attrs[Attr.SELECTED] = ""
        else:
            self.attrs.pop(Attr.SELECTED, None)
        self._mark_dirty()
        return self

    @property
    def value(self) -> str:
        return self.attrs.get(Attr.VALUE, "")


class SelectNode(Node):
    """A <select> that keeps track of its <option> children."""

    def __init__(self, tag_type: TagType = TagType.SELECT) -> None:
        super().__init__(tag_type)
        self._options: List[OptionNode] = []

    def add_child(self, node: ChildWriter) -> "Node":
        super().add_child(node)
        if isinstance(node, OptionNode):
            self._options.append(node)
        return self

    def _detach_child(self, node: ChildWriter) -> None:
        super()._detach_child(node)
        if isinstance(node, OptionNode):
            self._options = [option for option in self._options if option is not node]

    def remove_children(self) -> "Node":
        super().remove_children()
        self._options = []
        return self

    def option_children(self) -> List[OptionNode]:
        return list(self._options)

    def selected_option(self) -> OptionNode:
        """Return the first selected option; raise NotFoundError if none is."""
        for option in self._options:
            if option.selected:
                return option
        raise NotFoundError("no selected option")


def new_root() -> RootNode:
    """Create an <html> document root."""
    return RootNode()


def new_null() -> NullNode:
    """Create a fragment node that renders only its children."""
    return NullNode()


H = TagFactory()
