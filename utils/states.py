"""FSM состояния для бота"""

from aiogram.fsm.state import State, StatesGroup


class ChannelSummaryState(StatesGroup):
    """После сводки канала ждем номер поста"""

    waiting_for_number = State()
