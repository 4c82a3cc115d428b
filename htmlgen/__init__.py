"""htmlgen: build HTML node trees in code and write them as markup."""

from htmlgen.config import DEFAULT_CONFIG, RenderConfig, load_render_config
from htmlgen.constants import ATTR_NAMES, TAG_NAMES, Attr, TagType
from htmlgen.errors import (
    ChildNotAllowedError,
    ConfigError,
    HtmlgenError,
    NotFoundError,
    WriteError,
)
from htmlgen.nodes import (
    H,
    BodyNode,
    CheckedInputNode,
    CommentNode,
    InputNode,
    Node,
    NullNode,
    OptionNode,
    RootNode,
    SelectNode,
    SingleNode,
    TagFactory,
    new_null,
    new_root,
)
from htmlgen.options import (
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
from htmlgen.render import render, write, write_pretty
from htmlgen.text import TextNode, VarTextNode
from htmlgen.variables import Environment, StringValue, Var, parse_vars

__all__ = [
    "ATTR_NAMES",
    "Attr",
    "BodyNode",
    "CanvasOptions",
    "CheckedInputNode",
    "ChildNotAllowedError",
    "CommentNode",
    "ConfigError",
    "DEFAULT_CONFIG",
    "Environment",
    "FormOptions",
    "H",
    "HtmlgenError",
    "ImgOptions",
    "InputNode",
    "InputOptions",
    "LabelOptions",
    "LinkOptions",
    "MetaOptions",
    "Node",
    "NotFoundError",
    "NullNode",
    "OptionNode",
    "OptionOptions",
    "RenderConfig",
    "RootNode",
    "SelectNode",
    "SelectOptions",
    "SingleNode",
    "StringValue",
    "StyleOptions",
    "TAG_NAMES",
    "TableOptions",
    "TagFactory",
    "TagType",
    "TdOptions",
    "TextNode",
    "TextareaOptions",
    "ThOptions",
    "Var",
    "VarTextNode",
    "WriteError",
    "load_render_config",
    "new_null",
    "new_root",
    "parse_vars",
    "render",
    "write",
    "write_pretty",
]
