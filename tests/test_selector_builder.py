import pytest

from web_selectors import (
    DUPLICATE_ERROR_MESSAGE,
    ORDER_ERROR_MESSAGE,
    DuplicateSingleton,
    OrderViolation,
    SelectorBuilder,
    SelectorError,
    css_selector_builder as builder,
)


def test_id_with_classes():
    sel = builder.id("main").class_("container").class_("editable")
    assert sel.stringify() == "#main.container.editable"


def test_element_attr_pseudo_class():
    sel = builder.element("a").attr('href$=".png"').pseudo_class("focus")
    assert sel.stringify() == 'a[href$=".png"]:focus'


def test_full_compound_selector():
    sel = (
        builder.element("input")
        .id("email")
        .class_("field")
        .class_("required")
        .attr("type=email")
        .attr("required")
        .pseudo_class("invalid")
        .pseudo_element("placeholder")
    )
    assert sel.stringify() == "input#email.field.required[type=email][required]:invalid::placeholder"


@pytest.mark.parametrize(
    "factory, value, expected",
    [
        ("element", "div", "div"),
        ("id", "main", "#main"),
        ("class_", "btn", ".btn"),
        ("attr", "disabled", "[disabled]"),
        ("pseudo_class", "hover", ":hover"),
        ("pseudo_element", "before", "::before"),
    ],
)
def test_each_category_formatting(factory, value, expected):
    assert getattr(builder, factory)(value).stringify() == expected


def test_fragment_text_passed_through_unvalidated():
    assert builder.class_("a b").attr("").stringify() == ".a b[]"


@pytest.mark.parametrize(
    "build",
    [
        lambda: builder.element("div").element("span"),
        lambda: builder.id("a").id("b"),
        lambda: builder.pseudo_element("after").pseudo_element("before"),
        lambda: builder.element("p").class_("x").element("span"),
    ],
)
def test_duplicate_singleton(build):
    with pytest.raises(DuplicateSingleton) as exc:
        build()
    assert str(exc.value) == DUPLICATE_ERROR_MESSAGE


@pytest.mark.parametrize(
    "build",
    [
        lambda: builder.id("main").element("div"),
        lambda: builder.class_("container").id("main"),
        lambda: builder.attr("href").class_("link"),
        lambda: builder.pseudo_class("focus").attr("href"),
        lambda: builder.pseudo_element("after").pseudo_class("hover"),
        lambda: builder.id("main").class_("container").element("div"),
    ],
)
def test_order_violation(build):
    with pytest.raises(OrderViolation) as exc:
        build()
    assert str(exc.value) == ORDER_ERROR_MESSAGE


def test_duplicate_is_checked_before_order():
    with pytest.raises(DuplicateSingleton):
        builder.id("main").class_("container").id("other")


def test_errors_are_value_errors():
    assert issubclass(OrderViolation, SelectorError)
    assert issubclass(DuplicateSingleton, SelectorError)
    with pytest.raises(ValueError):
        builder.id("a").id("b")


def test_repeatable_parts_never_raise():
    sel = builder.class_("a").class_("b").attr("x").attr("y").pseudo_class("hover").pseudo_class("focus")
    assert sel.stringify() == ".a.b[x][y]:hover:focus"


def test_failed_append_leaves_text_unchanged():
    sel = builder.id("main")
    with pytest.raises(OrderViolation):
        sel.element("div")
    assert sel.stringify() == "#main"


def test_combine_with_sibling():
    left = builder.element("li").class_("active")
    right = builder.element("li")
    assert builder.combine(left, "+", right).stringify() == "li.active + li"


def test_combine_passes_combinator_verbatim():
    assert builder.combine(builder.id("a"), "||", builder.id("b")).stringify() == "#a || #b"


def test_nested_combine():
    sel = builder.combine(
        builder.element("div").id("main").class_("container").class_("draggable"),
        "+",
        builder.combine(
            builder.element("table").id("data"),
            "~",
            builder.combine(
                builder.element("tr").pseudo_class("nth-of-type(even)"),
                " ",
                builder.element("td").pseudo_class("nth-of-type(even)"),
            ),
        ),
    )
    assert sel.stringify() == (
        "div#main.container.draggable + table#data ~ tr:nth-of-type(even)   td:nth-of-type(even)"
    )


def test_builders_are_independent():
    first = builder.element("div")
    second = builder.element("span")
    first.class_("a")
    assert second.stringify() == "span"
    assert first is not second


def test_str_matches_stringify():
    sel = builder.element("p").class_("lead")
    assert str(sel) == sel.stringify() == "p.lead"


def test_empty_builder():
    assert SelectorBuilder().stringify() == ""
    assert SelectorBuilder().specificity() == (0, 0, 0)


def test_specificity():
    sel = builder.element("a").id("home").class_("nav").attr("href").pseudo_class("hover").pseudo_element("after")
    assert sel.specificity() == (1, 3, 2)


def test_specificity_of_combined_selector():
    sel = builder.combine(
        builder.element("ul").id("menu"),
        ">",
        builder.element("li").class_("item").class_("open"),
    )
    assert sel.specificity() == (1, 2, 2)


def test_parts_appended_after_combine_add_to_specificity():
    sel = builder.combine(builder.id("a"), ">", builder.element("b")).class_("x")
    assert sel.stringify() == "#a > b.x"
    assert sel.specificity() == (1, 1, 1)


class PlainSelector:
    def __init__(self, text):
        self.text = text

    def stringify(self):
        return self.text


def test_combine_with_operand_without_specificity():
    sel = SelectorBuilder().element("div")
    sel.combine(PlainSelector("section"), " ", builder.element("p").class_("lead"))
    assert sel.stringify() == "section   p.lead"
    assert sel.specificity() == (0, 1, 1)


def test_star_import_keeps_builtin_id():
    namespace = {}
    exec("from web_selectors import *", namespace)
    assert "id" not in namespace
    assert namespace["css_selector_builder"].id("x").stringify() == "#x"


def test_error_message_defaults_and_overrides():
    assert str(OrderViolation()) == ORDER_ERROR_MESSAGE
    assert str(DuplicateSingleton(None)) == DUPLICATE_ERROR_MESSAGE
    assert str(SelectorError("custom")) == "custom"
