"""Обработчик базовых команд (start, help) и настроек сворачивания"""

from aiogram import Router, F
from aiogram.filters import Command
from aiogram.types import (
    Message,
    CallbackQuery,
    InlineKeyboardMarkup,
    InlineKeyboardButton,
)
from aiogram.fsm.context import FSMContext
import logging

from pydantic import ValidationError

from utils.options import TruncationOptions, resolve_options

router = Router()
logger = logging.getLogger(__name__)

# Ключи FSM, в которых хранятся пользовательские настройки
OPTION_KEYS = ("target_length", "min_trailing_length", "inline")

HELP_TEXT = {
    "start": (
        "👋 Этот бот сворачивает длинные посты и тексты.\n\n"
        "<b>Как это работает:</b>\n"
        "1. Пришлите ссылку на пост, перешлите пост или просто отправьте текст\n"
        "2. Получите свернутую версию с кнопкой [more]\n"
        "3. Ссылка на канал — сводка постов, из которой можно выбрать номер\n\n"
        "⚙️ /settings — настройки сворачивания\n"
        "❓ /help — список команд"
    ),
    "help": (
        "📖 <b>Команды</b>\n\n"
        "/start — начало работы\n"
        "/settings — текущие настройки\n"
        "/length &lt;число&gt; — длина свернутого текста\n"
        "/trail &lt;число&gt; — минимальный скрытый остаток\n"
        "/mode — где ставить многоточие\n"
        "/reset — вернуть настройки по умолчанию\n"
        "/help — эта справка\n\n"
        "<b>Способы отправки:</b>\n"
        "• Перешлите пост из канала или отправьте текст\n"
        "• Ссылка на пост: t.me/channel/123\n"
        "• Ссылка на канал: @channel или t.me/channel"
    ),
}


def format_settings(options: TruncationOptions) -> str:
    mode = "внутри текста" if options.inline else "после текста"
    return (
        "⚙️ <b>Ваши настройки:</b>\n\n"
        f"📏 <b>Длина:</b> <code>{options.target_length}</code>\n"
        f"✂️ <b>Минимальный остаток:</b> <code>{options.min_trailing_length}</code>\n"
        f"💬 <b>Многоточие:</b> {mode}\n\n"
        "Для изменения:\n"
        "• /length &lt;число&gt;\n"
        "• /trail &lt;число&gt;\n"
        "• /mode"
    )


@router.message(Command("start"))
async def cmd_start(message: Message):
    """Обработчик команды /start"""
    await message.answer(HELP_TEXT["start"])


@router.message(Command("help"))
async def cmd_help(message: Message):
    """Обработчик команды /help"""
    await message.answer(HELP_TEXT["help"])


@router.message(Command("settings"))
async def cmd_settings(message: Message, state: FSMContext):
    """Отображение текущих настроек пользователя"""
    options = resolve_options(await state.get_data())
    await message.answer(format_settings(options))


async def _set_number_option(
    message: Message, state: FSMContext, key: str, usage: str
):
    """Общая логика для /length и /trail"""
    if not message.text or len(args := message.text.split(maxsplit=1)) < 2:
        return await message.answer(f"❌ Укажи число после команды:\n{usage}")

    try:
        value = int(args[1].strip())
        options = resolve_options({**await state.get_data(), key: value})
    except (ValueError, ValidationError):
        return await message.answer("❌ Некорректное значение")

    await state.update_data(**{key: value})
    logger.info("User %s set %s=%d", message.from_user.id, key, value)
    await message.answer("✅ Готово\n\n" + format_settings(options))


@router.message(Command("length"))
async def cmd_length(message: Message, state: FSMContext):
    """Установка длины свернутого текста"""
    await _set_number_option(message, state, "target_length", "/length 300")


@router.message(Command("trail"))
async def cmd_trail(message: Message, state: FSMContext):
    """Установка минимальной длины скрытого остатка"""
    await _set_number_option(message, state, "min_trailing_length", "/trail 50")


@router.message(Command("mode"))
async def cmd_mode(message: Message, state: FSMContext):
    """Выбор положения многоточия через inline-клавиатуру"""
    options = resolve_options(await state.get_data())

    keyboard = InlineKeyboardMarkup(inline_keyboard=[
        [InlineKeyboardButton(
            text=f"{'✅ ' if options.inline == inline else ''}{label}",
            callback_data=f"mode:{value}",
        )]
        for inline, value, label in (
            (True, "inline", "Многоточие внутри текста"),
            (False, "block", "Многоточие после текста"),
        )
    ])

    await message.answer("💬 <b>Где ставить многоточие?</b>", reply_markup=keyboard)


@router.callback_query(F.data.startswith("mode:"))
async def callback_select_mode(callback: CallbackQuery, state: FSMContext):
    """Обработка выбора режима через inline-кнопку"""
    mode = callback.data.split(":", 1)[1]

    if mode not in ("inline", "block"):
        return await callback.answer("❌ Недопустимый режим", show_alert=True)

    await state.update_data(inline=mode == "inline")
    await callback.message.edit_text(
        "✅ Многоточие: " + ("внутри текста" if mode == "inline" else "после текста")
    )
    await callback.answer()


@router.message(Command("reset"))
async def cmd_reset(message: Message, state: FSMContext):
    """Сброс пользовательских настроек"""
    data = await state.get_data()
    await state.set_data({k: v for k, v in data.items() if k not in OPTION_KEYS})
    await message.answer("✅ Настройки сброшены\n\n" + format_settings(resolve_options({})))
