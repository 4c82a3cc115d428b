from __future__ import annotations

import unittest

import pytest
from bs4 import BeautifulSoup

from htmlgen import (
    H,
    ChildNotAllowedError,
    HtmlgenError,
    NotFoundError,
    OptionOptions,
    TextNode,
    new_null,
    new_root,
    render,
)
from htmlgen.constants import Attr


def pretty(node) -> str:
    # Pretty mode orders attributes deterministically.
    return render(node, pretty=True)


class CopyTest(unittest.TestCase):
    def test_comment_copy_drops_children(self) -> None:
        root = new_null()
        comment = root.comment()
        comment.t("commented text")
        dup = comment.copy()

        self.assertEqual(pretty(comment), "<!--\n  commented text\n-->")
        self.assertEqual(pretty(dup), "<!-- -->")

    def test_element_copy_is_independent(self) -> None:
        root = new_null()
        div = root.div_classes("foo")
        dup = div.copy()
        self.assertEqual(pretty(dup), '<div class="foo"></div>')

        dup.set_id("copy")
        self.assertEqual(pretty(div), '<div class="foo"></div>')
        self.assertEqual(pretty(dup), '<div class="foo" id="copy"></div>')

    def test_single_copy_is_independent(self) -> None:
        root = new_null()
        img = root.img("src", "alt")
        dup = img.copy()
        self.assertEqual(pretty(dup), '<img alt="alt" src="src" />')

        dup.set_id("img_copy")
        self.assertEqual(pretty(img), '<img alt="alt" src="src" />')
        self.assertEqual(pretty(dup), '<img alt="alt" id="img_copy" src="src" />')

    def test_text_copy_is_independent(self) -> None:
        root = new_null()
        text = root.t("hello")
        text.copy().set_text("world")
        self.assertEqual(pretty(root), "hello")

    def test_copy_is_detached_visible_and_childless(self) -> None:
        div = new_null().div().hide()
        div.span()
        dup = div.copy()
        self.assertIsNone(dup.parent)
        self.assertFalse(dup.is_hidden())
        self.assertEqual(dup.children, [])
        self.assertEqual(render(dup), "<div></div>")


def test_copy_shares_the_rendered_open_tag() -> None:
    div = H.div().set_id("x")
    dup = div.copy()

    assert dup._cache_open == '<div id="x">'
    assert render(dup) == '<div id="x"></div>'


def test_open_tag_cache_follows_attribute_changes() -> None:
    div = H.div_id("a")
    assert render(div) == '<div id="a"></div>'

    div.set_id("b")
    assert render(div) == '<div id="b"></div>'

    div.set_class("c")
    assert render(div, pretty=True) == '<div class="c" id="b"></div>'

    div.set_id("")
    div.set_classes([])
    assert render(div) == "<div></div>"

    div.set_attribute("data-x", "1")
    assert render(div) == '<div data-x="1"></div>'

    div.remove_attributes("data-x")
    assert render(div) == "<div></div>"


def test_add_child_reparents_a_node() -> None:
    root = new_null()
    first = root.div_id("first")
    second = root.div_id("second")
    span = first.span()

    second.add_child(span)

    assert span.parent is second
    assert first.children == []
    assert second.children == [span]
    assert render(root) == '<div id="first"></div><div id="second"><span></span></div>'


def test_remove_parent_on_first_and_last_child() -> None:
    root = new_null()
    a, b, c = root.p(), root.div(), root.span()

    a.remove_parent()
    assert root.children == [b, c]
    c.remove_parent()
    assert root.children == [b]
    assert a.parent is None and c.parent is None

    # Detached nodes can be re-attached.
    root.add_child(a)
    assert render(root) == "<div></div><p></p>"


def test_remove_children_clears_parent_links() -> None:
    div = H.div()
    kids = [div.span(), div.t("x")]
    div.remove_children()

    assert div.children == []
    assert all(kid.parent is None for kid in kids)
    assert render(div) == "<div></div>"


def test_up_walks_parents() -> None:
    root = new_root()
    body = root.body()
    div = body.div()
    text = div.t("x")

    assert text.up() is div
    assert text.up(0) is div
    assert text.up(-3) is div
    assert text.up(2) is body
    assert text.up(3) is root
    assert text.up(4) is None
    assert text.up(10) is None
    assert root.up() is None


def test_hidden_subtree_renders_nothing() -> None:
    root = new_null()
    root.div().t("a")
    hidden = root.div()
    hidden.span().t("b")
    hidden.hide()

    assert render(root) == "<div>a</div>"
    assert render(root, pretty=True) == "<div>\n  a\n</div>"
    assert render(hidden) == ""

    hidden.hide(False)
    assert render(root) == "<div>a</div><div><span>b</span></div>"


def test_only_hidden_children_closes_on_the_same_line() -> None:
    div = H.div()
    div.span().hide()

    assert render(div, pretty=True) == "<div></div>"


def test_hidden_root_renders_nothing() -> None:
    root = new_root()
    root.body()
    root.hide()

    assert render(root) == ""
    assert render(root, pretty=True) == ""


def test_null_node_pretty_keeps_children_at_its_indent() -> None:
    div = H.div()
    fragment = new_null()
    fragment.p().t("one")
    fragment.p().t("two")
    div.add_child(fragment)

    assert render(div, pretty=True) == (
        "<div>\n  <p>\n    one\n  </p>\n  <p>\n    two\n  </p>\n</div>"
    )


def test_single_node_rejects_children() -> None:
    br = H.br()

    with pytest.raises(ChildNotAllowedError):
        br.add_child(H.span())
    with pytest.raises(ChildNotAllowedError):
        H.hr().t("text")

    assert br.remove_children() is br
    assert render(br) == "<br />"


def test_child_not_allowed_is_a_type_error() -> None:
    with pytest.raises(TypeError):
        H.img("a.png", "").span()


def test_attribute_values_are_escaped() -> None:
    div = H.div().set_attribute("title", 'say "hi" & <go>')

    assert render(div) == '<div title="say &#34;hi&#34; &amp; &lt;go&gt;"></div>'


def test_text_is_escaped_once() -> None:
    root = new_null()
    leaf = root.t("a < b")
    leaf.t(" & c")

    assert leaf.text == "a &lt; b &amp; c"
    assert render(root) == "a &lt; b &amp; c"

    leaf.set_text_unsafe("<b>raw</b>")
    assert render(root) == "<b>raw</b>"


def test_detached_text_cannot_chain_siblings() -> None:
    with pytest.raises(HtmlgenError):
        TextNode("x").b("bold")


def test_compact_output_matches_structure() -> None:
    root = new_root()
    body = root.body()
    div = body.div_id_classes("main", "a", "b")
    div.set_attribute("data-role", "page")
    div.a("/next").t("next")
    body.ul().li().t("one")

    soup = BeautifulSoup(render(root), "html.parser")

    main = soup.find("div", id="main")
    assert main["class"] == ["a", "b"]
    assert main["data-role"] == "page"
    assert main.find("a")["href"] == "/next"
    assert main.find("a").get_text() == "next"
    assert soup.find("ul").find("li").get_text() == "one"


def test_small_tree_compact_output() -> None:
    root = new_null()
    root.div_classes("a").span().t("x")

    assert render(root) == '<div class="a"><span>x</span></div>'
    assert render(root, pretty=True) == '<div class="a">\n  <span>\n    x\n  </span>\n</div>'


def test_selected_option() -> None:
    select = H.select()
    select.option(OptionOptions(value="1")).t("one")
    two = select.option(OptionOptions(value="2"))
    select.option(OptionOptions(value="3", selected=True))

    with pytest.raises(NotFoundError):
        H.select().selected_option()

    two.set_selected()
    assert select.selected_option() is two
    assert select.selected_option().value == "2"

    two.remove_parent()
    assert select.selected_option().value == "3"
    assert len(select.option_children()) == 2

    select.remove_children()
    with pytest.raises(LookupError):
        select.selected_option()


def test_option_nested_in_select_via_add_child() -> None:
    select = H.select()
    option = H.option(OptionOptions(selected=True))
    select.add_child(option)

    assert select.selected_option() is option


def test_checked_input() -> None:
    box = H.checked_input_type_name_value("checkbox", "agree", "yes")
    assert not box.checked
    box.set_checked()
    assert box.checked
    assert render(box, pretty=True) == '<input checked="" name="agree" type="checkbox" value="yes" />'

    box.set_checked(False)
    assert Attr.CHECKED not in box.attrs


def test_input_reset_options_keeps_name_and_type() -> None:
    field = H.input_type_name_value("text", "q", "hello")
    field.set_value("")
    assert field.value == ""

    field.set_attribute("data-k", "v")
    field.reset_options()
    assert field.type == "text"
    assert render(field, pretty=True) == '<input data-k="v" name="q" type="text" />'


def test_factory_returns_detached_nodes() -> None:
    div = H.div()
    assert div.parent is None
    assert H.t("x").parent is None


def test_id_and_classes() -> None:
    span = H.span_id_classes("s", "x", "y")
    assert span.id == "s"
    span.add_classes(["z"])
    assert render(span, pretty=True) == '<span class="x y z" id="s"></span>'


def test_empty_fragment_adds_no_blank_line() -> None:
    div = H.div()
    div.add_child(new_null())

    assert render(div, pretty=True) == "<div></div>"

    outer = new_null()
    outer.add_child(new_null())
    div.add_child(outer)
    div.p()
    assert render(div, pretty=True) == "<div>\n  <p></p>\n</div>"


def test_leaf_and_option_bases_are_abstract() -> None:
    from htmlgen.options import _Options
    from htmlgen.text import _Leaf

    with pytest.raises(TypeError):
        _Leaf()
    with pytest.raises(TypeError):
        _Options()
