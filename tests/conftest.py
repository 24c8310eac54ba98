"""Pytest конфигурация и фикстуры для тестирования бота"""

import pytest
from unittest.mock import AsyncMock


@pytest.fixture
def long_markup():
    """HTML длиннее значения сворачивания по умолчанию"""
    return (
        "<b>Condense</b> shortens long text heavy posts so that only the first "
        "part is visible, with a <a href=\"https://t.me/demo/1\">link to more</a> "
        "and a button that reveals the rest. The condensed part always ends at "
        "a space outside of any tag, and tags are never cut in half. "
        "Short posts are sent as they are, without any buttons at all, "
        "because there would be too little hidden text to justify a toggle."
    )


@pytest.fixture
def mock_message():
    """Мок Message для тестирования handlers"""
    message = AsyncMock()
    message.from_user.id = 123456
    message.from_user.first_name = "TestUser"
    message.text = "/start"
    message.caption = None
    message.html_text = "/start"
    message.answer = AsyncMock(return_value=AsyncMock(message_id=42))
    message.reply = AsyncMock()
    return message


@pytest.fixture
def mock_state():
    """Мок FSMContext для тестирования состояний"""
    state = AsyncMock()
    state.set_state = AsyncMock()
    state.set_data = AsyncMock()
    state.get_data = AsyncMock(return_value={})
    state.update_data = AsyncMock()
    return state


@pytest.fixture
def mock_callback():
    """Мок CallbackQuery для кнопок [more] / [less]"""
    callback = AsyncMock()
    callback.data = "condense:more"
    callback.message.message_id = 42
    callback.message.edit_text = AsyncMock()
    callback.answer = AsyncMock()
    return callback
