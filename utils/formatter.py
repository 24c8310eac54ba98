"""Форматирование свернутых постов и сводки канала для Telegram"""

from typing import List, Optional

from aiogram.types import InlineKeyboardButton, InlineKeyboardMarkup

from config import (
    LESS_TEXT,
    MAX_MESSAGE_LENGTH,
    MAX_POSTS_IN_SUMMARY,
    MORE_TEXT,
    PREVIEW_LENGTH,
)

from .condenser import Condensed, condense_markup
from .markup import balance_markup
from .options import DEFAULT_OPTIONS, TruncationOptions, resolve_options
from .view_state import ViewState

MORE_CALLBACK = "condense:more"
LESS_CALLBACK = "condense:less"


def collapsed_view(result: Condensed, options: TruncationOptions) -> str:
    """Свернутый вид: начало разметки с закрытыми тегами и многоточием"""
    view = balance_markup(result.prefix_markup)
    return view if options.inline else view + options.ellipsis


def expanded_view(markup: str) -> str:
    """Полный вид поста"""
    return balance_markup(markup.strip())


def toggle_keyboard(state: ViewState) -> Optional[InlineKeyboardMarkup]:
    """Кнопка [more] для свернутого вида, [less] для развернутого"""
    if state is ViewState.COLLAPSED:
        text, data = MORE_TEXT, MORE_CALLBACK
    elif LESS_TEXT:
        text, data = LESS_TEXT, LESS_CALLBACK
    else:
        return None
    return InlineKeyboardMarkup(
        inline_keyboard=[[InlineKeyboardButton(text=text, callback_data=data)]]
    )


def format_preview(markup: str, options: TruncationOptions) -> str:
    """Короткое превью поста (или весь пост, если сворачивать нечего)"""
    result = condense_markup(markup, options)
    if isinstance(result, Condensed):
        return collapsed_view(result, options)
    return expanded_view(markup)


def format_summary(
    posts: List[dict], options: TruncationOptions = DEFAULT_OPTIONS
) -> str:
    """Форматирует сводку постов в одно Telegram сообщение"""
    if not posts:
        return "❌ Посты не найдены"

    posts = posts[:MAX_POSTS_IN_SUMMARY]
    preview_options = resolve_options(
        {"target_length": PREVIEW_LENGTH, "inline": True}, defaults=options
    )

    header = "\n".join(
        [
            f"📊 <b>Сводка канала</b> ({len(posts)} постов)\n",
            f"💡 <i>Отправь номер поста (1-{len(posts)}), чтобы открыть его</i>\n",
            "=" * 40,
        ]
    )
    footer = "\n\n⚠️ Сообщение обрезано (слишком много постов)"

    result = header
    for i, p in enumerate(posts, 1):
        parts = [f"\n📄 <b>Пост #{i}</b>"]

        if link := p.get("post_link"):
            parts.append(f'🔗 <a href="{link}">Открыть</a>')

        stats = f"👁 {p.get('views', 0):,}"
        if posted_at := p.get("posted_at"):
            stats += f" | 🕒 {posted_at:%d.%m.%Y %H:%M}"
        parts.append(stats)

        if markup := p.get("html"):
            parts.append(f"📝 {format_preview(markup, preview_options)}")

        parts.append("-" * 40)
        block = "\n" + "\n".join(parts)

        # Режем по целым постам, чтобы не порвать HTML
        if len(result) + len(block) + len(footer) > MAX_MESSAGE_LENGTH:
            return result + footer
        result += block

    return result
