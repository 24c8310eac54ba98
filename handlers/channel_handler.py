"Обработчик постов, ссылок на посты и каналы"

import asyncio
from aiogram import Router, F
from aiogram.types import Message
from aiogram.fsm.context import FSMContext
import logging
from typing import Callable, Any

from utils.condenser import Condensed, condense_markup
from utils.formatter import (
    collapsed_view,
    expanded_view,
    format_summary,
    toggle_keyboard,
)
from utils.options import resolve_options
from utils.parser import TelegramWebScraper, TelegramWebError, parse_post_link
from utils.states import ChannelSummaryState
from utils.view_state import ViewState
from config import MAX_PAGES_PER_REQUEST, MAX_STORED_VIEWS

router = Router()
logger = logging.getLogger(__name__)


async def with_status_message(
    message: Message, status_text: str, action: Callable, *args, **kwargs
) -> Any:
    """Выполняет действие с отображением статусного сообщения"""
    status_msg = await message.answer(status_text)
    try:
        result = await action(*args, **kwargs)
        await status_msg.delete()
        return result
    except Exception as e:
        await status_msg.edit_text(f"❌ Ошибка: {e}")
        raise


async def send_condensed_post(message: Message, state: FSMContext, markup: str):
    """
    Сворачивает разметку поста и отправляет ее с кнопкой [more].

    Если сворачивать нечего, пост отправляется целиком без кнопок.
    Оба вида сохраняются в FSM по ID отправленного сообщения,
    чтобы кнопки могли переключать их.
    """
    data = await state.get_data()
    options = resolve_options(data)
    result = condense_markup(markup, options)

    if not isinstance(result, Condensed):
        logger.info("Post not condensed: %s", result.reason)
        return await message.answer(expanded_view(markup))

    collapsed = collapsed_view(result, options)
    sent = await message.answer(
        collapsed, reply_markup=toggle_keyboard(ViewState.COLLAPSED)
    )

    views = dict(data.get("views", {}))
    views[str(sent.message_id)] = {
        "full": expanded_view(markup),
        "condensed": collapsed,
        "state": ViewState.COLLAPSED.value,
    }
    # Старые сообщения забываем, иначе память растет бесконечно
    while len(views) > MAX_STORED_VIEWS:
        views.pop(next(iter(views)))
    await state.update_data(views=views)
    return sent


@router.message(ChannelSummaryState.waiting_for_number, F.text.regexp(r"^\d+$"))
async def handle_post_selection(message: Message, state: FSMContext):
    """Обработка выбора поста по номеру из сводки"""
    post_number = int(message.text.strip())
    posts = (await state.get_data()).get("posts", [])

    if not posts:
        await state.set_state(None)
        return await message.answer(
            "❌ Список постов пуст. Отправь ссылку на канал заново."
        )

    if not 1 <= post_number <= len(posts):
        return await message.answer(
            f"❌ Некорректный номер. Выбери от 1 до {len(posts)}"
        )

    selected = posts[post_number - 1]
    if not selected.get("html"):
        return await message.answer("❌ В этом посте нет текста")

    await send_condensed_post(message, state, selected["html"])


async def handle_direct_post_link(
    message: Message, state: FSMContext, post_info: tuple[str, int]
):
    """
    Обрабатывает прямую ссылку на пост: загружает пост и отправляет свернутым.

    Args:
        message: Message от пользователя
        state: FSM контекст (настройки пользователя)
        post_info: Кортеж (channel_slug, post_id) из parse_post_link()
    """
    channel_slug, post_id = post_info

    async def fetch_action():
        return await asyncio.to_thread(
            TelegramWebScraper().fetch_single_post, channel_slug, post_id
        )

    try:
        post = await with_status_message(message, "⏳ Загрузка поста...", fetch_action)
    except TelegramWebError as e:
        logger.error("Direct post fetch error %s/%d: %s", channel_slug, post_id, e)
        return await message.answer(
            f"❌ Ошибка при загрузке поста:\n{e}\n\n"
            "💡 Проверь, что пост существует и канал публичный."
        )
    except Exception:
        logger.exception("Unexpected error for direct post %s/%d", channel_slug, post_id)
        return await message.answer("❌ Неожиданная ошибка при обработке поста")

    if not post["html"]:
        return await message.answer("❌ В этом посте нет текста")
    await send_condensed_post(message, state, post["html"])


async def handle_channel_scan(message: Message, state: FSMContext, channel: str):
    """Загружает посты канала, отправляет сводку и ждет номер поста"""

    async def parse_action():
        posts = await asyncio.to_thread(
            TelegramWebScraper().fetch_posts, channel, MAX_PAGES_PER_REQUEST
        )
        data = await state.get_data()
        await state.update_data(posts=posts)
        await state.set_state(ChannelSummaryState.waiting_for_number)
        await message.answer(format_summary(posts, resolve_options(data)))

    try:
        await with_status_message(message, "⏳ Парсинг канала...", parse_action)
    except TelegramWebError as e:
        logger.error("Parsing error for %s: %s", channel, e)
    except Exception:
        logger.exception("Unexpected error for %s", channel)


@router.message(F.forward_from_chat)
async def handle_forwarded_post(message: Message, state: FSMContext):
    """
    Обрабатывает пересланные посты из каналов.
    HTML берется прямо из сообщения, поэтому работает и для приватных каналов.
    """
    markup = message.html_text if (message.text or message.caption) else ""

    if not markup.strip():
        return await message.answer("❌ В пересланном посте нет текста.")

    await send_condensed_post(message, state, markup)


@router.message(F.text)
async def handle_text(message: Message, state: FSMContext):
    """
    Роутер для текстовых сообщений.

    - Прямая ссылка на пост (t.me/channel/123), в том числе с комментарием
      после нее -> handle_direct_post_link()
    - Ссылка на канал (t.me/channel, @channel) -> handle_channel_scan()
    - Любой другой текст из нескольких слов сворачивается сам
    """
    text = message.text.strip()
    first_word = (text.split() or [""])[0]

    if post_info := parse_post_link(first_word):
        return await handle_direct_post_link(message, state, post_info)

    if " " in text or "\n" in text:
        return await send_condensed_post(message, state, message.html_text)

    if not any(x in text.lower() for x in ["t.me", "@"]) and len(text) <= 3:
        return await message.answer("❌ Некорректная ссылка на канал")

    await handle_channel_scan(message, state, text)
