"""
Сворачивание HTML текста до заданной длины без разрыва тегов.

Пример:
    from utils.condenser import condense_markup, Condensed
    from utils.options import TruncationOptions

    result = condense_markup(html, TruncationOptions(target_length=100))
    if isinstance(result, Condensed):
        print(result.prefix_markup)
"""

import logging
from typing import Literal, Union

from pydantic import BaseModel, ConfigDict

from .delimiter import locate_delimiter
from .markup import plain_text
from .options import TruncationOptions

logger = logging.getLogger(__name__)


class Condensed(BaseModel):
    """Свернутый вариант: начало разметки и длина его видимого текста"""

    model_config = ConfigDict(frozen=True)

    prefix_markup: str
    prefix_text_length: int


class NotCondensable(BaseModel):
    """Сворачивать нечего: текст короткий или хвост получается слишком мал"""

    model_config = ConfigDict(frozen=True)

    reason: Literal["too_short", "no_break", "short_trail"]


TruncationResult = Union[Condensed, NotCondensable]


def condense(
    markup: str, text: str, options: TruncationOptions
) -> TruncationResult:
    """
    Обрезает разметку по разделителю так, чтобы видимого текста было
    не меньше options.target_length, а отброшенного не меньше
    options.min_trailing_length.

    Длина видимого текста считается заново для каждого кандидата, а поиск
    разделителя сдвигается на число символов разметки (delta), попавших
    в кандидата. Цикл идет, пока delta не нулевая и текста не хватает.

    Args:
        markup: Полная HTML разметка
        text: Видимый текст той же разметки
        options: Параметры сворачивания

    Returns:
        Condensed с началом разметки или NotCondensable
    """
    full_markup = markup.strip()
    full_text = text.strip()

    if len(full_text) <= options.target_length + options.min_trailing_length:
        logger.debug("Element too short (%d chars): skipping", len(full_text))
        return NotCondensable(reason="too_short")

    delta = 0
    previous_loc = None
    while True:
        loc = locate_delimiter(
            full_markup, options.delimiter, options.target_length + delta
        )
        candidate = full_markup[: loc + len(options.delimiter)]
        if options.inline:
            candidate += options.ellipsis

        candidate_text_length = len(plain_text(candidate))
        delta = len(candidate) - candidate_text_length
        logger.debug(
            "Condensing... [markup-length: %d text-length: %d delta: %d break-point: %d]",
            len(candidate),
            candidate_text_length,
            delta,
            loc,
        )

        if not delta or candidate_text_length >= options.target_length:
            break
        if loc == previous_loc:
            break
        previous_loc = loc

    if loc >= len(full_markup):
        logger.debug("No break point outside tags: skipping")
        return NotCondensable(reason="no_break")

    if len(full_text) - candidate_text_length < options.min_trailing_length:
        logger.debug("Not enough trailing text: skipping")
        return NotCondensable(reason="short_trail")

    logger.debug("Condensed [text-length: %d]", candidate_text_length)
    return Condensed(
        prefix_markup=candidate, prefix_text_length=candidate_text_length
    )


def condense_markup(markup: str, options: TruncationOptions) -> TruncationResult:
    """Сворачивает разметку, вычисляя ее видимый текст самостоятельно"""
    return condense(markup, plain_text(markup), options)
