"""Tests for title and anchor slug normalization."""

from __future__ import annotations

import pytest

from mdtoc.normalize import slugify, titleize

# (raw heading text, expected title, expected slug)
CASES = [
    ("Frachtaufträge", "Frachtaufträge", "frachtaufträge"),
    ("C#", "C#", "c"),
    ("Okay Åô Then", "Okay Åô Then", "okay-åô-then"),
    ("Some/Article", "Some/Article", "somearticle"),
    ("Some`Article`", "Some`Article`", "somearticle"),
    ("存在，【中文】；《标点》、符号！的标题？", "存在，【中文】；《标点》、符号！的标题？", "存在中文标点符号的标题"),
    ("Foo & Bar", "Foo & Bar", "foo--bar"),
    ("中文", "中文", "中文"),
    ("かんじ", "かんじ", "かんじ"),
    ("한자", "한자", "한자"),
    ("日本語", "日本語", "日本語"),
    ("Русский", "Русский", "русский"),
    ("<test>Foo", "Foo", "foo"),
    ("<test> Foo", "Foo", "-foo"),
    ("<test> Foo ", "Foo", "-foo"),
    ("<div> Foo </div>", "Foo", "-foo-"),
    (" Foo <test>", "Foo", "foo-"),
    ("Some    Article", "Some Article", "some----article"),
    ("Foo - bar", "Foo - bar", "foo---bar"),
    ("Foo- - -bar", "Foo- - -bar", "foo-----bar"),
    ("Foo---bar", "Foo---bar", "foo---bar"),
    ("Foo- -   -bar", "Foo- - -bar", "foo-------bar"),
    ("MysTrInghEre", "MysTrInghEre", "mystringhere"),
    ("Some ex ample", "Some ex ample", "some-ex-ample"),
    ("Header (something)", "Header (something)", "header-something"),
    ("Header [something]", "Header [something]", "header-something"),
    ("Header {something}", "Header {something}", "header-something"),
    ('Header "something"', 'Header "something"', "header-something"),
    ("Header 'something'", "Header 'something'", "header-something"),
    ("Header `something`", "Header `something`", "header-something"),
    ("Header .something.", "Header .something.", "header-something"),
    ("Header !something!", "Header !something!", "header-something"),
    ("Header ~something~", "Header ~something~", "header-something"),
    ("Header &something&", "Header &something&", "header-something"),
    ("Header %something%", "Header %something%", "header-something"),
    ("Header ^something^", "Header ^something^", "header-something"),
    ("Header *something*", "Header *something*", "header-something"),
    ("Header #something#", "Header #something#", "header-something"),
    ("Header @something@", "Header @something@", "header-something"),
    ("Header |something|", "Header |something|", "header-something"),
    ("      Heading 1", "Heading 1", "heading-1"),
    ("Heading ! 0", "Heading ! 0", "heading--0"),
    ("Heading # 1", "Heading # 1", "heading--1"),
    ("Heading !! 2", "Heading !! 2", "heading--2"),
    ("Heading &and&and& 3", "Heading &and&and& 3", "heading-andand-3"),
    ("`function(param, [optional])`", "`function(param, [optional])`", "functionparam-optional"),
    (
        "(a static function) `greet([name])` (original, right?)",
        "(a static function) `greet([name])` (original, right?)",
        "a-static-function-greetname-original-right",
    ),
    (
        "`add(keys, command[, args][, context])`",
        "`add(keys, command[, args][, context])`",
        "addkeys-command-args-context",
    ),
    (
        "`get_context(key[, operator][, operand][, match_all])`",
        "`get_context(key[, operator][, operand][, match_all])`",
        "get_contextkey-operator-operand-match_all",
    ),
    ('"Funky President" by James Brown', '"Funky President" by James Brown', "funky-president-by-james-brown"),
    ('"It\'s My Thing" by Marva Whitney', '"It\'s My Thing" by Marva Whitney', "its-my-thing-by-marva-whitney"),
    ('"Ruthless Villain" by Eazy-E', '"Ruthless Villain" by Eazy-E', "ruthless-villain-by-eazy-e"),
]

# Underscore emphasis is kept in slugs so existing links keep working.
EMPHASIS_CASES = [
    ("_x test 1", "_x-test-1"),
    ("*x* test 3", "x-test-3"),
    ("_x _ test 4", "_x-_-test-4"),
    ("*x * test 5", "x--test-5"),
    ("_ x_ test 6", "_-x_-test-6"),
    ("* x* test 7", "-x-test-7"),
    ("**x** test 9", "x-test-9"),
    ("__x __ test 10", "__x-__-test-10"),
    ("** x** test 13", "-x-test-13"),
    ("x_ test 15", "x_-test-15"),
    ("1 test_x", "1-test_x"),
    ("7 test * x*", "7-test--x"),
    ("12 test __ x__", "12-test-__-x__"),
    ("1_x test", "1_x-test"),
    ("5 *x * test", "5-x--test"),
    ("15 x_ test", "15-x_-test"),
    ("_x_ test 2", "_x_-test-2"),
    ("__x__ test 8", "__x__-test-8"),
]


@pytest.mark.parametrize("raw,title,slug", CASES)
def test_titleize_and_slugify(raw: str, title: str, slug: str) -> None:
    assert titleize(raw) == title
    assert slugify(raw) == slug


@pytest.mark.parametrize("raw,slug", EMPHASIS_CASES)
def test_slugify_keeps_underscore_emphasis(raw: str, slug: str) -> None:
    assert slugify(raw) == slug
    assert titleize(raw) == raw


def test_titleize_collapses_newlines() -> None:
    assert titleize("Multi\nline\r\n  heading") == "Multi line heading"


def test_empty_input_yields_empty_results() -> None:
    assert titleize("") == ""
    assert slugify("") == ""
    assert slugify("?!.") == ""


def test_titleize_collapses_unicode_spaces_only() -> None:
    assert titleize("　Wide space here\t") == "Wide space here"
    assert titleize("\x1fUnit\x1cseparators\x1f") == "\x1fUnit\x1cseparators\x1f"
