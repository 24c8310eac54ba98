"""Состояние отображения свернутого сообщения"""

from enum import Enum


class ViewState(str, Enum):
    """Свернуто или развернуто. Повторный переход в то же состояние ничего не меняет."""

    COLLAPSED = "collapsed"
    EXPANDED = "expanded"

    def expand(self) -> "ViewState":
        return ViewState.EXPANDED

    def condense(self) -> "ViewState":
        return ViewState.COLLAPSED
