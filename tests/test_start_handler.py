"""Тесты для команд и настроек сворачивания"""

import pytest
from handlers.start_handler import (
    callback_select_mode,
    cmd_help,
    cmd_length,
    cmd_mode,
    cmd_reset,
    cmd_settings,
    cmd_start,
    cmd_trail,
)
from utils.options import DEFAULT_OPTIONS


@pytest.mark.asyncio
async def test_cmd_start(mock_message):
    """Тест команды /start"""
    await cmd_start(mock_message)

    mock_message.answer.assert_called_once()
    call_args = mock_message.answer.call_args[0][0]
    assert "👋" in call_args
    assert "сворачивает" in call_args


@pytest.mark.asyncio
async def test_cmd_help(mock_message):
    """Тест команды /help"""
    await cmd_help(mock_message)

    call_args = mock_message.answer.call_args[0][0]
    assert "📖" in call_args
    assert "/length" in call_args
    assert "/trail" in call_args


@pytest.mark.asyncio
async def test_cmd_settings_default(mock_message, mock_state):
    """Тест /settings с настройками по умолчанию"""
    await cmd_settings(mock_message, mock_state)

    call_args = mock_message.answer.call_args[0][0]
    assert f"<code>{DEFAULT_OPTIONS.target_length}</code>" in call_args
    assert f"<code>{DEFAULT_OPTIONS.min_trailing_length}</code>" in call_args


@pytest.mark.asyncio
async def test_cmd_settings_custom(mock_message, mock_state):
    """Тест /settings с пользовательскими значениями"""
    mock_state.get_data.return_value = {"target_length": 333, "inline": False}

    await cmd_settings(mock_message, mock_state)

    call_args = mock_message.answer.call_args[0][0]
    assert "<code>333</code>" in call_args
    assert "после текста" in call_args


@pytest.mark.asyncio
async def test_cmd_length_valid(mock_message, mock_state):
    """Тест /length с корректным числом"""
    mock_message.text = "/length 300"

    await cmd_length(mock_message, mock_state)

    mock_state.update_data.assert_called_once_with(target_length=300)
    assert "✅" in mock_message.answer.call_args[0][0]


@pytest.mark.asyncio
@pytest.mark.parametrize("text", ["/length", "/length abc", "/length 0", "/length -10"])
async def test_cmd_length_invalid(mock_message, mock_state, text):
    """Тест /length без числа или с некорректным числом"""
    mock_message.text = text

    await cmd_length(mock_message, mock_state)

    assert "❌" in mock_message.answer.call_args[0][0]
    mock_state.update_data.assert_not_called()


@pytest.mark.asyncio
async def test_cmd_trail_allows_zero(mock_message, mock_state):
    """Минимальный остаток может быть нулевым"""
    mock_message.text = "/trail 0"

    await cmd_trail(mock_message, mock_state)

    mock_state.update_data.assert_called_once_with(min_trailing_length=0)


@pytest.mark.asyncio
async def test_cmd_mode_shows_keyboard(mock_message, mock_state):
    """Тест что /mode отправляет inline-клавиатуру"""
    await cmd_mode(mock_message, mock_state)

    call_args = mock_message.answer.call_args
    keyboard = call_args[1]["reply_markup"]
    data = [row[0].callback_data for row in keyboard.inline_keyboard]
    assert data == ["mode:inline", "mode:block"]


@pytest.mark.asyncio
async def test_callback_select_mode(mock_callback, mock_state):
    """Выбор режима сохраняется в FSM"""
    mock_callback.data = "mode:block"

    await callback_select_mode(mock_callback, mock_state)

    mock_state.update_data.assert_called_once_with(inline=False)
    mock_callback.message.edit_text.assert_called_once()


@pytest.mark.asyncio
async def test_callback_select_mode_invalid(mock_callback, mock_state):
    mock_callback.data = "mode:sideways"

    await callback_select_mode(mock_callback, mock_state)

    mock_state.update_data.assert_not_called()
    assert mock_callback.answer.call_args[1]["show_alert"] is True


@pytest.mark.asyncio
async def test_cmd_reset_keeps_other_data(mock_message, mock_state):
    """/reset убирает только настройки сворачивания"""
    mock_state.get_data.return_value = {
        "target_length": 10,
        "inline": False,
        "views": {"1": {}},
    }

    await cmd_reset(mock_message, mock_state)

    mock_state.set_data.assert_called_once_with({"views": {"1": {}}})
