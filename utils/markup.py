"""Работа с HTML разметкой постов: текст, балансировка тегов, подмножество Telegram"""

import warnings
from typing import Union

from bs4 import BeautifulSoup, MarkupResemblesLocatorWarning
from bs4.element import Tag

# Короткие посты вида "t.me/channel" bs4 принимает за URL и ругается
warnings.filterwarnings("ignore", category=MarkupResemblesLocatorWarning)

# Теги, которые понимает Telegram при parse_mode=HTML
TELEGRAM_TAGS = {
    "b",
    "strong",
    "i",
    "em",
    "u",
    "ins",
    "s",
    "strike",
    "del",
    "code",
    "pre",
    "a",
    "blockquote",
    "tg-spoiler",
}


def plain_text(markup: str) -> str:
    """Возвращает видимый текст разметки (теги удалены, сущности раскрыты)"""
    return BeautifulSoup(markup, "html.parser").get_text()


def balance_markup(markup: str) -> str:
    """Закрывает незакрытые теги у обрезанного фрагмента HTML"""
    return BeautifulSoup(markup, "html.parser").decode()


def telegram_html(node: Union[Tag, str]) -> str:
    """
    Приводит HTML поста к подмножеству, которое принимает Telegram.

    <br> превращается в перенос строки, разрешенные теги сохраняются
    (у <a> остается только href), остальные теги разворачиваются.

    Args:
        node: Блок поста из BeautifulSoup или строка HTML

    Returns:
        HTML строка, пригодная для отправки с parse_mode=HTML
    """
    source = node.decode_contents() if isinstance(node, Tag) else node
    fragment = BeautifulSoup(source, "html.parser")

    for br in fragment.find_all("br"):
        br.replace_with("\n")

    for tag in fragment.find_all(True):
        if tag.name not in TELEGRAM_TAGS:
            tag.unwrap()
        elif tag.name == "a" and tag.has_attr("href"):
            tag.attrs = {"href": tag["href"]}
        else:
            tag.attrs = {}

    return fragment.decode().strip()
