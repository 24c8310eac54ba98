"""Параметры сворачивания текста"""

from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict, Field

from config import CONDENSED_LENGTH, DELIMITER, ELLIPSIS, INLINE, MIN_TRAIL


class TruncationOptions(BaseModel):
    """Неизменяемый набор параметров для condense()"""

    model_config = ConfigDict(frozen=True, extra="forbid")

    target_length: int = Field(default=200, gt=0)
    min_trailing_length: int = Field(default=20, ge=0)
    delimiter: str = Field(default=" ", min_length=1)
    inline: bool = True
    ellipsis: str = "( ... )"


DEFAULT_OPTIONS = TruncationOptions(
    target_length=CONDENSED_LENGTH,
    min_trailing_length=MIN_TRAIL,
    delimiter=DELIMITER,
    inline=INLINE,
    ellipsis=ELLIPSIS,
)


def resolve_options(
    overrides: Mapping[str, Any], defaults: TruncationOptions = DEFAULT_OPTIONS
) -> TruncationOptions:
    """
    Накладывает пользовательские настройки на значения по умолчанию.

    Неизвестные ключи и None игнорируются, так что можно передавать
    прямо данные FSM. Некорректные значения вызывают ValidationError.
    """
    known = {
        key: value
        for key, value in overrides.items()
        if key in TruncationOptions.model_fields and value is not None
    }
    return TruncationOptions.model_validate({**defaults.model_dump(), **known})
