"""Option records translating caller-friendly fields into attributes.

Only fields holding a non-default value produce an attribute. Boolean
attributes are written with an empty value (``disabled=""``).
"""

from __future__ import annotations

import abc
from typing import Dict

from pydantic import BaseModel, ConfigDict, Field

from .constants import HTML_BORDER_ON, HTML_OFF, HTML_WRAP_HARD, Attr

AttrMap = Dict[Attr, str]


def format_number(value: float) -> str:
    """Shortest text for a number, without a trailing ``.0``."""
    text = repr(float(value))
    if text.endswith(".0"):
        text = text[:-2]
    return text


class _Options(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    @abc.abstractmethod
    def to_attrs(self) -> AttrMap:
        ...


def _put(attrs: AttrMap, attr: Attr, value: str) -> None:
    if value:
        attrs[attr] = value


def _put_flag(attrs: AttrMap, attr: Attr, enabled: bool) -> None:
    if enabled:
        attrs[attr] = ""


def _put_positive(attrs: AttrMap, attr: Attr, value: int) -> None:
    if value > 0:
        attrs[attr] = str(value)


def _put_nonzero(attrs: AttrMap, attr: Attr, value: float) -> None:
    if value != 0:
        attrs[attr] = format_number(value)


class CanvasOptions(_Options):
    id: str = ""
    height: int = Field(0, description="Height in pixels (set when > 0).")
    width: int = Field(0, description="Width in pixels (set when > 0).")

    def to_attrs(self) -> AttrMap:
        attrs: AttrMap = {}
        _put(attrs, Attr.ID, self.id)
        _put_positive(attrs, Attr.HEIGHT, self.height)
        _put_positive(attrs, Attr.WIDTH, self.width)
        return attrs


class FormOptions(_Options):
    """Form attributes supported by the major browsers."""

    accept_charset: str = ""
    action: str = ""
    # Autocomplete is on by default.
    autocomplete_off: bool = False
    enctype: str = ""
    method: str = ""
    name: str = ""
    target: str = ""

    def to_attrs(self) -> AttrMap:
        attrs: AttrMap = {}
        _put(attrs, Attr.ACCEPT_CHARSET, self.accept_charset)
        _put(attrs, Attr.ACTION, self.action)
        if self.autocomplete_off:
            attrs[Attr.AUTOCOMPLETE] = HTML_OFF
        _put(attrs, Attr.ENCTYPE, self.enctype)
        _put(attrs, Attr.METHOD, self.method)
        _put(attrs, Attr.NAME, self.name)
        _put(attrs, Attr.TARGET, self.target)
        return attrs


class ImgOptions(_Options):
    height: int = 0
    ismap: bool = False
    usemap: str = ""
    width: int = 0

    def to_attrs(self) -> AttrMap:
        attrs: AttrMap = {}
        _put_positive(attrs, Attr.HEIGHT, self.height)
        _put_flag(attrs, Attr.ISMAP, self.ismap)
        _put(attrs, Attr.USEMAP, self.usemap)
        _put_positive(attrs, Attr.WIDTH, self.width)
        return attrs


class InputOptions(_Options):
    action: str = ""
    alt: str = ""
    autocomplete_off: bool = False
    # False never clears a checked attribute; use CheckedInputNode.set_checked.
    checked: bool = False
    disabled: bool = False
    height: int = 0
    list: str = ""
    max: float = 0
    maxlength: int = 0
    min: float = 0
    name: str = ""
    pattern: str = ""
    placeholder: str = ""
    readonly: bool = False
    required: bool = False
    size: int = 0
    step: float = 0
    src: str = ""
    # An empty type keeps the type the input was created with.
    type: str = ""
    value: str = ""
    width: int = 0

    def to_attrs(self) -> AttrMap:
        attrs: AttrMap = {}
        _put(attrs, Attr.ACTION, self.action)
        _put(attrs, Attr.ALT, self.alt)
        if self.autocomplete_off:
            attrs[Attr.AUTOCOMPLETE] = HTML_OFF
        _put_flag(attrs, Attr.CHECKED, self.checked)
        _put_flag(attrs, Attr.DISABLED, self.disabled)
        _put_positive(attrs, Attr.HEIGHT, self.height)
        _put(attrs, Attr.LIST, self.list)
        _put_nonzero(attrs, Attr.MAX, self.max)
        _put_positive(attrs, Attr.MAXLENGTH, self.maxlength)
        _put_nonzero(attrs, Attr.MIN, self.min)
        _put(attrs, Attr.NAME, self.name)
        _put(attrs, Attr.PATTERN, self.pattern)
        _put(attrs, Attr.PLACEHOLDER, self.placeholder)
        _put_flag(attrs, Attr.READONLY, self.readonly)
        _put_flag(attrs, Attr.REQUIRED, self.required)
        _put_positive(attrs, Attr.SIZE, self.size)
        _put_nonzero(attrs, Attr.STEP, self.step)
        _put(attrs, Attr.SRC, self.src)
        _put(attrs, Attr.TYPE, self.type)
        _put(attrs, Attr.VALUE, self.value)
        _put_positive(attrs, Attr.WIDTH, self.width)
        return attrs


class LabelOptions(_Options):
    for_: str = Field("", alias="for")
    form: str = ""

    model_config = ConfigDict(frozen=True, extra="forbid", populate_by_name=True)

    def to_attrs(self) -> AttrMap:
        attrs: AttrMap = {}
        _put(attrs, Attr.FOR, self.for_)
        _put(attrs, Attr.FORM, self.form)
        return attrs


class LinkOptions(_Options):
    href: str = ""
    hreflang: str = ""
    media: str = ""
    type: str = ""

    def to_attrs(self) -> AttrMap:
        attrs: AttrMap = {}
        _put(attrs, Attr.HREF, self.href)
        _put(attrs, Attr.HREFLANG, self.hreflang)
        _put(attrs, Attr.MEDIA, self.media)
        _put(attrs, Attr.TYPE, self.type)
        return attrs


class MetaOptions(_Options):
    charset: str = ""
    content: str = ""
    http_equiv: str = ""
    name: str = ""

    def to_attrs(self) -> AttrMap:
        attrs: AttrMap = {}
        _put(attrs, Attr.CHARSET, self.charset)
        _put(attrs, Attr.CONTENT, self.content)
        _put(attrs, Attr.HTTP_EQUIV, self.http_equiv)
        _put(attrs, Attr.NAME, self.name)
        return attrs


class OptionOptions(_Options):
    disabled: bool = False
    label: str = ""
    selected: bool = False
    value: str = ""

    def to_attrs(self) -> AttrMap:
        attrs: AttrMap = {}
        _put_flag(attrs, Attr.DISABLED, self.disabled)
        _put(attrs, Attr.LABEL, self.label)
        _put_flag(attrs, Attr.SELECTED, self.selected)
        _put(attrs, Attr.VALUE, self.value)
        return attrs


class SelectOptions(_Options):
    autofocus: bool = False
    disabled: bool = False
    form: str = ""
    multiple: bool = False
    name: str = ""
    size: int = 0

    def to_attrs(self) -> AttrMap:
        attrs: AttrMap = {}
        _put_flag(attrs, Attr.AUTOFOCUS, self.autofocus)
        _put_flag(attrs, Attr.DISABLED, self.disabled)
        _put(attrs, Attr.FORM, self.form)
        _put_flag(attrs, Attr.MULTIPLE, self.multiple)
        _put(attrs, Attr.NAME, self.name)
        _put_positive(attrs, Attr.SIZE, self.size)
        return attrs


class StyleOptions(_Options):
    media: str = ""
    type: str = ""

    def to_attrs(self) -> AttrMap:
        attrs: AttrMap = {}
        _put(attrs, Attr.MEDIA, self.media)
        _put(attrs, Attr.TYPE, self.type)
        return attrs


class TableOptions(_Options):
    border: bool = False

    def to_attrs(self) -> AttrMap:
        if self.border:
            return {Attr.BORDER: HTML_BORDER_ON}
        return {}


class TdOptions(_Options):
    # Only Opera supports colspan/rowspan of 0, so 0 is omitted.
    colspan: int = 0
    headers: str = ""
    rowspan: int = 0

    def to_attrs(self) -> AttrMap:
        attrs: AttrMap = {}
        _put_positive(attrs, Attr.COLSPAN, self.colspan)
        _put(attrs, Attr.HEADERS, self.headers)
        _put_positive(attrs, Attr.ROWSPAN, self.rowspan)
        return attrs


class ThOptions(TdOptions):
    scope: str = ""

    def to_attrs(self) -> AttrMap:
        attrs = super().to_attrs()
        _put(attrs, Attr.SCOPE, self.scope)
        return attrs


class TextareaOptions(_Options):
    autofocus: bool = False
    disabled: bool = False
    form: str = ""
    maxlength: int = 0
    name: str = ""
    placeholder: str = ""
    readonly: bool = False
    required: bool = False
    wrap_hard: bool = False

    def to_attrs(self) -> AttrMap:
        attrs: AttrMap = {}
        _put_flag(attrs, Attr.AUTOFOCUS, self.autofocus)
        _put_flag(attrs, Attr.DISABLED, self.disabled)
        _put(attrs, Attr.FORM, self.form)
        _put_positive(attrs, Attr.MAXLENGTH, self.maxlength)
        _put(attrs, Attr.NAME, self.name)
        _put(attrs, Attr.PLACEHOLDER, self.placeholder)
        _put_flag(attrs, Attr.READONLY, self.readonly)
        _put_flag(attrs, Attr.REQUIRED, self.required)
        if self.wrap_hard:
            attrs[Attr.WRAP] = HTML_WRAP_HARD
        return attrs


__all__ = [
    "CanvasOptions",
    "FormOptions",
    "ImgOptions",
    "InputOptions",
    "LabelOptions",
    "LinkOptions",
    "MetaOptions",
    "OptionOptions",
    "SelectOptions",
    "StyleOptions",
    "TableOptions",
    "TdOptions",
    "ThOptions",
    "TextareaOptions",
    "format_number",
]
