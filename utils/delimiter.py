"""Поиск точки разрыва в HTML вне тегов"""

import logging

logger = logging.getLogger(__name__)


def is_inside_tag(markup: str, loc: int) -> bool:
    """
    Проверяет, находится ли позиция внутри тега <...>.

    Смотрит только на ближайшие '<' и '>' начиная с loc: если '>' встречается
    раньше '<' (или '<' дальше нет вообще), значит мы внутри открытого тега.
    Кавычки в атрибутах не учитываются.
    """
    start_tag = markup.find("<", loc)
    end_tag = markup.find(">", loc)
    if end_tag < 0:
        return False
    return start_tag < 0 or end_tag < start_tag


def locate_delimiter(markup: str, delimiter: str, start: int) -> int:
    """
    Находит разделитель в HTML начиная с позиции start, пропуская теги.

    Args:
        markup: HTML строка
        delimiter: Разделитель (обычно пробел)
        start: Позиция, с которой начинается поиск

    Returns:
        Позиция первого разделителя вне тегов или len(markup), если его нет
    """
    loc = start
    while (loc := markup.find(delimiter, loc)) >= 0:
        if not is_inside_tag(markup, loc):
            logger.debug("Delimiter found in markup at: %d", loc)
            return loc
        loc += 1

    logger.debug("No delimiter found after %d", start)
    return len(markup)
