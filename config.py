"""Конфигурация бота и параметров сворачивания текста"""

import os
from dotenv import load_dotenv

# Загрузка переменных окружения из .env
load_dotenv()

# Telegram Bot (из .env)
TELEGRAM_BOT_TOKEN = os.getenv("TELEGRAM_BOT_TOKEN", "")

# Сворачивание текста (значения по умолчанию для всех пользователей)
CONDENSED_LENGTH = int(os.getenv("CONDENSED_LENGTH", "200"))
MIN_TRAIL = int(os.getenv("MIN_TRAIL", "20"))
DELIMITER = os.getenv("DELIMITER", " ")
ELLIPSIS = os.getenv("ELLIPSIS", "( ... )")
INLINE = os.getenv("INLINE", "true").lower() in ("1", "true", "yes")

# Кнопки разворачивания/сворачивания
MORE_TEXT = os.getenv("MORE_TEXT", "[more]")
LESS_TEXT = os.getenv("LESS_TEXT", "[less]")  # пусто = без кнопки сворачивания

# Превью постов в сводке канала
PREVIEW_LENGTH = 100

# Парсер настройки
MAX_PAGES_PER_REQUEST = 3

# Telegram лимиты
MAX_MESSAGE_LENGTH = 4096
MAX_POSTS_IN_SUMMARY = 20

# Сколько свернутых сообщений помнить на пользователя
MAX_STORED_VIEWS = 50

# Логирование
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
