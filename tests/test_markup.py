"""Tests for markup helpers"""

from bs4 import BeautifulSoup

from utils.markup import balance_markup, plain_text, telegram_html


def test_plain_text_strips_tags():
    assert plain_text("<p>one <b>two</b></p>") == "one two"


def test_plain_text_decodes_entities():
    assert plain_text("a &amp; b &lt;c&gt;") == "a & b <c>"


def test_plain_text_of_truncated_markup():
    assert plain_text("<p>one <a href='x'>two ") == "one two "


def test_plain_text_without_tags():
    assert plain_text("just text") == "just text"


def test_balance_closes_open_tags():
    assert balance_markup("<b>one <i>two ") == "<b>one <i>two </i></b>"


def test_balance_keeps_balanced_markup():
    assert balance_markup('<a href="https://t.me/x">x</a> y') == '<a href="https://t.me/x">x</a> y'


def test_telegram_html_replaces_br_and_unwraps_unknown_tags():
    html = '<div class="x">Hi<br/>there <span>plain</span> <b class="y">bold</b></div>'
    assert telegram_html(html) == "Hi\nthere plain <b>bold</b>"


def test_telegram_html_keeps_only_href_on_links():
    html = '<a href="https://example.com" target="_blank" onclick="x()">link</a>'
    assert telegram_html(html) == '<a href="https://example.com">link</a>'


def test_telegram_html_from_tag():
    soup = BeautifulSoup(
        '<div class="tgme_widget_message_text">One<br>'
        '<i class="emoji" style="background:url(x)"><b>🙂</b></i> two</div>',
        "html.parser",
    )
    block = soup.select_one(".tgme_widget_message_text")

    assert telegram_html(block) == "One\n<i><b>🙂</b></i> two"
