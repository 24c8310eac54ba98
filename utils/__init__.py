"""Сворачивание HTML текста и вспомогательные модули бота"""

from .delimiter import locate_delimiter, is_inside_tag
from .condenser import Condensed, NotCondensable, TruncationResult, condense, condense_markup
from .options import TruncationOptions, DEFAULT_OPTIONS, resolve_options
from .markup import plain_text, balance_markup, telegram_html
from .view_state import ViewState
from .parser import TelegramWebScraper, TelegramWebError
from .formatter import format_summary
from .states import ChannelSummaryState

__all__ = [
    "locate_delimiter",
    "is_inside_tag",
    "Condensed",
    "NotCondensable",
    "TruncationResult",
    "condense",
    "condense_markup",
    "TruncationOptions",
    "DEFAULT_OPTIONS",
    "resolve_options",
    "plain_text",
    "balance_markup",
    "telegram_html",
    "ViewState",
    "TelegramWebScraper",
    "TelegramWebError",
    "format_summary",
    "ChannelSummaryState",
]
