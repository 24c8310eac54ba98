#!/usr/bin/env python3
"""Telegram бот, который сворачивает длинные посты с кнопками [more] / [less]"""

import asyncio
import logging
from aiogram import Bot, Dispatcher
from aiogram.enums import ParseMode
from aiogram.client.default import DefaultBotProperties
from aiogram.fsm.storage.memory import MemoryStorage
from aiogram.exceptions import TelegramNetworkError

from config import TELEGRAM_BOT_TOKEN, LOG_LEVEL
from aiogram.types import BotCommand
from handlers import channel_handler, start_handler, toggle_handler

logging.basicConfig(
    level=getattr(logging, LOG_LEVEL, logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


async def set_commands(bot: Bot):
    """Регистрация команд в меню Telegram"""
    commands = [
        BotCommand(command="start", description="Начать работу"),
        BotCommand(command="help", description="Справка"),
        BotCommand(command="settings", description="Настройки сворачивания"),
        BotCommand(command="length", description="Длина свернутого текста"),
        BotCommand(command="trail", description="Минимальный скрытый остаток"),
        BotCommand(command="mode", description="Положение многоточия"),
        BotCommand(command="reset", description="Сбросить настройки"),
    ]
    await bot.set_my_commands(commands)


def build_dispatcher() -> Dispatcher:
    """Dispatcher со всеми роутерами (порядок важен: текстовый роутер последний)"""
    dp = Dispatcher(storage=MemoryStorage())
    dp.include_router(start_handler.router)
    dp.include_router(toggle_handler.router)
    dp.include_router(channel_handler.router)
    return dp


async def main():
    """Запуск бота"""
    bot = Bot(
        token=TELEGRAM_BOT_TOKEN,
        default=DefaultBotProperties(parse_mode=ParseMode.HTML),
    )
    dp = build_dispatcher()

    await set_commands(bot)

    for attempt in range(1, 6):
        try:
            logger.info("Подключение к Telegram (попытка %d/5)...", attempt)
            await dp.start_polling(bot)
            break
        except TelegramNetworkError:
            if attempt == 5:
                logger.error("Не удалось подключиться после 5 попыток")
                raise
            logger.warning("Ошибка, повтор через 10 сек...")
            await asyncio.sleep(10)


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        logger.info("Бот остановлен")
