"""
Загрузка HTML постов из публичных Telegram каналов через веб t.me/s/

Примеры использования:
    from utils.parser import TelegramWebScraper

    scraper = TelegramWebScraper()

    # Последние посты канала
    posts = scraper.fetch_posts("@channelname")

    # Один пост
    post = scraper.fetch_single_post("channelname", 123)
    print(post["html"])
"""

import logging
import re
from datetime import datetime, timezone
from typing import List, Optional

import requests
from bs4 import BeautifulSoup
from bs4.element import Tag

from .markup import telegram_html

logger = logging.getLogger(__name__)

# Максимум страниц за один запрос
MAX_PAGES = 20


class TelegramWebError(Exception):
    """Базовая ошибка при работе с веб-версией Telegram."""


def _normalize_channel(channel: str) -> str:
    """
    Нормализует название канала из различных форматов.

    Примеры входных данных:
        - "https://t.me/channelname"
        - "https://t.me/s/channelname"
        - "t.me/channelname"
        - "@channelname"
        - "channelname/123"  # с ID поста

    Результат всегда: "channelname"
    """
    cleaned = channel.strip()
    cleaned = re.sub(r"^(https?://)?t\.me/(s/)?", "", cleaned, flags=re.IGNORECASE)
    cleaned = cleaned.lstrip("@")
    return cleaned.split("/")[0]


def parse_post_link(url: str) -> Optional[tuple[str, int]]:
    """
    Проверяет, является ли URL прямой ссылкой на пост, и извлекает канал и ID.

    Примеры:
        - "https://t.me/prog_ai/345" -> ("prog_ai", 345)
        - "t.me/s/prog_ai/345" -> ("prog_ai", 345)
        - "@prog_ai/345" -> ("prog_ai", 345)
        - "https://t.me/prog_ai" -> None (нет ID)

    Returns:
        Кортеж (channel_slug, post_id) если прямая ссылка, иначе None
    """
    cleaned = re.sub(
        r"^(https?://)?t\.me/(s/)?", "", url.strip(), flags=re.IGNORECASE
    ).lstrip("@")

    parts = cleaned.split("/")
    if len(parts) != 2:
        return None

    channel_slug, post_id_str = parts
    if not channel_slug or not post_id_str.isdigit():
        return None

    post_id = int(post_id_str)
    return (channel_slug, post_id) if post_id > 0 else None


def _parse_counter(raw: str) -> int:
    """
    Парсит счетчики просмотров с суффиксами K и M.

    Примеры: "1 234" → 1234, "1.2K" → 1200, "3,5M" → 3500000
    """
    text = raw.replace(" ", "").upper()
    match = re.match(r"([0-9]+(?:[\.,][0-9]+)?)([KM]?)", text)
    if not match:
        return 0

    number_part, suffix = match.groups()
    number = float(number_part.replace(",", "."))
    multiplier = {"K": 1_000, "M": 1_000_000}.get(suffix, 1)
    return int(round(number * multiplier))


def _parse_datetime(value: Optional[str]) -> Optional[datetime]:
    """Парсит ISO datetime из атрибута <time datetime="..."> в naive UTC"""
    if not value:
        return None

    try:
        dt = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return None
    if dt.tzinfo:
        dt = dt.astimezone(timezone.utc).replace(tzinfo=None)
    return dt


def _extract_markup(message: Tag) -> str:
    """Извлекает HTML текста сообщения в формате, понятном Telegram."""
    block = message.select_one(".tgme_widget_message_text")
    return telegram_html(block) if block else ""


def _extract_post_link(message: Tag) -> Optional[str]:
    link = message.select_one("a.tgme_widget_message_date")
    if link and link.has_attr("href"):
        return str(link["href"])
    return None


def _extract_views(message: Tag) -> int:
    views_tag = message.select_one(".tgme_widget_message_views")
    return _parse_counter(views_tag.get_text(strip=True)) if views_tag else 0


def _extract_message_id(message: Tag) -> Optional[int]:
    """Извлекает ID сообщения из data-post (нужен для пагинации)."""
    post_attr = message.get("data-post")
    if not post_attr:
        return None

    try:
        return int(str(post_attr).split("/")[-1])
    except ValueError:
        return None


def _build_post(slug: str, message: Tag, post_link: str) -> dict:
    posted_at = None
    time_tag = message.find("time")
    if isinstance(time_tag, Tag) and time_tag.has_attr("datetime"):
        posted_at = _parse_datetime(str(time_tag["datetime"]))

    return {
        "channel_slug": slug,
        "post_link": post_link,
        "html": _extract_markup(message),
        "posted_at": posted_at,
        "views": _extract_views(message),
        "message_id": _extract_message_id(message),
    }


class TelegramWebScraper:
    """
    Парсер Telegram каналов через веб t.me/s/

    Не требует Bot API токена, работает через простые HTTP запросы.
    Каждый пост возвращается словарем с HTML текста в ключе 'html'.
    """

    BASE_URL = "https://t.me/s"

    def __init__(self, session: Optional[requests.Session] = None):
        self.session = session or requests.Session()
        self.session.headers.update(
            {
                "User-Agent": "Mozilla/5.0 (X11; Linux x86_64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/120.0 Safari/537.36",
                "Accept-Language": "en-US,en;q=0.9",
            }
        )

    def _get_soup(self, url: str, not_found: str) -> BeautifulSoup:
        try:
            response = self.session.get(url, timeout=15)
        except requests.RequestException as exc:
            raise TelegramWebError(f"Ошибка запроса: {exc}") from exc

        if response.status_code == 404:
            raise TelegramWebError(not_found)
        if response.status_code in (403, 429):
            raise TelegramWebError(
                f"Доступ к t.me запрещен (HTTP {response.status_code})"
            )
        if response.status_code != 200:
            raise TelegramWebError(f"t.me вернул статус {response.status_code}")

        soup = BeautifulSoup(response.text, "html.parser")
        if soup.select_one(".tgme_page_error"):
            raise TelegramWebError(
                "Telegram вернул страницу ошибки (канал скрыт или пост удален)"
            )
        return soup

    def fetch_posts(self, channel: str, pages: int = 1) -> List[dict]:
        """
        Загружает последние посты канала (новые сверху).

        Args:
            channel: Ссылка на канал (@channel, https://t.me/channel и т.д.)
            pages: Количество страниц (по умолчанию 1, макс 20)

        Raises:
            TelegramWebError: Канал не найден, приватный или верстка не распознана
        """
        slug = _normalize_channel(channel)
        if not slug:
            raise TelegramWebError("Некорректное имя канала")

        pages = max(1, min(pages, MAX_PAGES))
        posts: list[dict] = []
        before: Optional[int] = None

        for _ in range(pages):
            url = f"{self.BASE_URL}/{slug}" + (f"?before={before}" if before else "")
            soup = self._get_soup(url, "Канал не найден или приватный")

            page_posts = []
            for message in soup.select(".tgme_widget_message"):
                if post_link := _extract_post_link(message):
                    page_posts.append(_build_post(slug, message, post_link))
            if not page_posts:
                break
            posts.extend(page_posts)

            ids = [p["message_id"] for p in page_posts if p["message_id"]]
            before = min(ids) if ids and min(ids) > 1 else None
            if not before:
                break

        if not posts:
            raise TelegramWebError(
                "Не удалось распарсить посты (возможно, Telegram изменил верстку)"
            )

        logger.info("Fetched %d posts from %s", len(posts), slug)
        return sorted(posts, key=lambda p: p["message_id"] or 0, reverse=True)

    def fetch_single_post(self, channel: str, post_id: int) -> dict:
        """
        Загружает один пост по его ID из публичного канала.

        Raises:
            TelegramWebError: Пост не найден, канал приватный, запрос заблокирован
        """
        slug = _normalize_channel(channel)
        if not slug:
            raise TelegramWebError("Некорректное имя канала")

        soup = self._get_soup(
            f"{self.BASE_URL}/{slug}/{post_id}",
            "Пост не найден. Возможно, он был удален или канал приватный.",
        )

        message = soup.select_one(f'.tgme_widget_message[data-post="{slug}/{post_id}"]')
        if not message:
            raise TelegramWebError(
                "Пост не найден на странице. Возможно, он был удален или ID неверный."
            )

        post_link = _extract_post_link(message)
        if not post_link:
            raise TelegramWebError("Не удалось извлечь ссылку на пост")

        return _build_post(slug, message, post_link)
