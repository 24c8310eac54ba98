"""Обработчик кнопок [more] / [less]"""

from aiogram import Router, F
from aiogram.types import CallbackQuery
from aiogram.fsm.context import FSMContext
import logging

from utils.formatter import LESS_CALLBACK, MORE_CALLBACK, toggle_keyboard
from utils.view_state import ViewState

router = Router()
logger = logging.getLogger(__name__)


@router.callback_query(F.data.in_({MORE_CALLBACK, LESS_CALLBACK}))
async def callback_toggle(callback: CallbackQuery, state: FSMContext):
    """Переключает сообщение между свернутым и полным видом"""
    data = await state.get_data()
    views = dict(data.get("views", {}))
    key = str(callback.message.message_id)

    if not (view := views.get(key)):
        return await callback.answer(
            "❌ Полный текст больше недоступен, отправь пост заново", show_alert=True
        )

    current = ViewState(view["state"])
    target = current.expand() if callback.data == MORE_CALLBACK else current.condense()

    # Повторное нажатие в том же состоянии ничего не меняет
    if target is current:
        return await callback.answer()

    logger.debug("Message %s: %s -> %s", key, current.value, target.value)
    await callback.message.edit_text(
        view["full"] if target is ViewState.EXPANDED else view["condensed"],
        reply_markup=toggle_keyboard(target),
    )

    views[key] = {**view, "state": target.value}
    await state.update_data(views=views)
    await callback.answer()
