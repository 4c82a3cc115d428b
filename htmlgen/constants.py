"""Element and attribute name tables plus common HTML constants."""

from __future__ import annotations

from enum import IntEnum
from types import MappingProxyType
from typing import Literal, Mapping


class Attr(IntEnum):
    """Known attributes.

    Pretty rendering sorts known attributes by these ordinals when a node has
    no custom attributes, so the order here is part of the output format.
    """

    ACCEPT_CHARSET = 0
    ACTION = 1
    ALT = 2
    AUTOCOMPLETE = 3
    AUTOFOCUS = 4
    BORDER = 5
    CHARSET = 6
    CHECKED = 7
    CLASS = 8
    COLS = 9
    COLSPAN = 10
    CONTENT = 11
    DISABLED = 12
    ENCTYPE = 13
    FOR = 14
    FORM = 15
    HEADERS = 16
    HEIGHT = 17
    HREF = 18
    HREFLANG = 19
    HTTP_EQUIV = 20
    ID = 21
    ISMAP = 22
    LABEL = 23
    LIST = 24
    MAX = 25
    MAXLENGTH = 26
    MEDIA = 27
    METHOD = 28
    MIN = 29
    MULTIPLE = 30
    NAME = 31
    ONBLUR = 32
    ONCHANGE = 33
    ONCLICK = 34
    ONDBLCLICK = 35
    ONFOCUS = 36
    ONLOAD = 37
    ONKEYDOWN = 38
    ONKEYPRESS = 39
    ONKEYUP = 40
    ONMOUSEDOWN = 41
    ONMOUSEMOVE = 42
    ONMOUSEOUT = 43
    ONMOUSEOVER = 44
    ONMOUSEUP = 45
    ONSELECT = 46
    ONSUBMIT = 47
    PATTERN = 48
    PLACEHOLDER = 49
    ROWSPAN = 50
    READONLY = 51
    REL = 52
    REQUIRED = 53
    ROWS = 54
    SCOPE = 55
    SELECTED = 56
    SIZE = 57
    SRC = 58
    STEP = 59
    TARGET = 60
    TITLE = 61
    TYPE = 62
    USEMAP = 63
    VALUE = 64
    WIDTH = 65
    WRAP = 66


class TagType(IntEnum):
    """Known elements."""

    A = 0
    ABBR = 1
    ADDRESS = 2
    B = 3
    BLOCKQUOTE = 4
    BODY = 5
    BR = 6
    BUTTON = 7
    CANVAS = 8
    CAPTION = 9
    CITE = 10
    CODE = 11
    DATALIST = 12
    DFN = 13
    DIV = 14
    DD = 15
    DL = 16
    DT = 17
    EM = 18
    FOOTER = 19
    FORM = 20
    H1 = 21
    H2 = 22
    H3 = 23
    H4 = 24
    H5 = 25
    H6 = 26
    HEAD = 27
    HR = 28
    HTML = 29
    I = 30  # noqa: E741
    IMG = 31
    INPUT = 32
    KBD = 33
    LABEL = 34
    LI = 35
    LINK = 36
    META = 37
    NOSCRIPT = 38
    OL = 39
    OPTION = 40
    P = 41
    PRE = 42
    SAMP = 43
    SCRIPT = 44
    SELECT = 45
    SMALL = 46
    SPAN = 47
    STRONG = 48
    STYLE = 49
    TABLE = 50
    TBODY = 51
    TD = 52
    TEXTAREA = 53
    TFOOT = 54
    TH = 55
    THEAD = 56
    TITLE = 57
    TR = 58
    U = 59
    UL = 60
    VAR = 61
    # Prints nothing of its own, only its children.
    NULL = 62


def _attr_name(attr: Attr) -> str:
    return attr.name.lower().replace("_", "-")


ATTR_NAMES: Mapping[Attr, str] = MappingProxyType({attr: _attr_name(attr) for attr in Attr})

TAG_NAMES: Mapping[TagType, str] = MappingProxyType(
    {tag: tag.name.lower() for tag in TagType if tag is not TagType.NULL}
)

# Attribute values with a fixed meaning.
HTML_OFF = "off"
HTML_ON = "on"
HTML_BORDER_ON = "1"
HTML_BORDER_OFF = ""
HTML_WRAP_HARD = "hard"

DOCTYPE = "<!DOCTYPE html>"
INDENT_WIDTH = 2

# SetAttribute() writes custom attributes, so this does not replace an href
# set through a(href); pass an empty href and set it here instead.
ATTR_HREF = "href"

InputType = Literal[
    "button",
    "checkbox",
    "file",
    "hidden",
    "image",
    "number",
    "password",
    "radio",
    "range",
    "reset",
    "submit",
    "text",
]
CheckedInputType = Literal["checkbox", "radio"]

INPUT_TYPE_BUTTON = "button"
INPUT_TYPE_CHECKBOX = "checkbox"
INPUT_TYPE_FILE = "file"
INPUT_TYPE_HIDDEN = "hidden"
INPUT_TYPE_IMAGE = "image"
INPUT_TYPE_NUMBER = "number"
INPUT_TYPE_PASSWORD = "password"
INPUT_TYPE_RADIO = "radio"
INPUT_TYPE_RANGE = "range"
INPUT_TYPE_RESET = "reset"
INPUT_TYPE_SUBMIT = "submit"
INPUT_TYPE_TEXT = "text"

CHARSET_UNICODE = "UTF-8"
CHARSET_LATIN = "ISO-8859-1"

FORM_ENCTYPE_DATA = "multipart/form-data"
FORM_ENCTYPE_PLAIN = "text/plain"
FORM_ENCTYPE_URLENCODED = "application/x-www-form-urlencoded"

FORM_METHOD_GET = "get"
FORM_METHOD_POST = "post"

FORM_TARGET_BLANK = "_blank"
FORM_TARGET_SELF = "_self"
FORM_TARGET_PARENT = "_parent"
FORM_TARGET_TOP = "_top"

HEADER_CONTENT_TYPE = "Content-Type"

LINK_REL_ALTERNATE = "alternate"
LINK_REL_AUTHOR = "author"
LINK_REL_HELP = "help"
LINK_REL_ICON = "icon"
LINK_REL_LICENSE = "license"
LINK_REL_NEXT = "next"
LINK_REL_NOFOLLOW = "nofollow"
LINK_REL_NOREFERRER = "noreferrer"
LINK_REL_PREFETCH = "prefetch"
LINK_REL_PREV = "prev"
LINK_REL_SEARCH = "search"
LINK_REL_SHORTCUT_ICON = "shortcut icon"
LINK_REL_STYLESHEET = "stylesheet"

META_NAME_VIEWPORT = "viewport"

STYLE_MEDIA_ALL = "all"
STYLE_MEDIA_HANDHELD = "handheld"
STYLE_MEDIA_PRINT = "print"
STYLE_MEDIA_PROJECTION = "projection"
STYLE_MEDIA_SCREEN = "screen"
STYLE_MEDIA_TV = "tv"

MIME_TYPE_CSS = "text/css"
MIME_TYPE_HTML = "text/html"
MIME_TYPE_JAVASCRIPT = "text/javascript"
MIME_TYPE_GIF = "image/gif"
MIME_TYPE_PNG = "image/png"

# Patterns for input fields.
PATTERN_FLOAT = r"([0-9]+\.|[0-9]*\.?[0-9]+)"
PATTERN_INT = r"[0-9]*"
