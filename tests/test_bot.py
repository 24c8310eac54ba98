"""Тесты сборки бота"""

from unittest.mock import AsyncMock

import pytest

import bot as bot_module
from handlers import channel_handler, start_handler, toggle_handler


def test_build_dispatcher_includes_routers():
    dp = bot_module.build_dispatcher()

    assert dp.sub_routers == [
        start_handler.router,
        toggle_handler.router,
        channel_handler.router,
    ]


@pytest.mark.asyncio
async def test_set_commands_registers_settings():
    bot = AsyncMock()

    await bot_module.set_commands(bot)

    commands = [c.command for c in bot.set_my_commands.call_args[0][0]]
    assert {"start", "help", "settings", "length", "trail", "mode", "reset"} == set(commands)
