# admission/config/logger.py
import logging
import sys

from admission.config.config import settings

LOG_LEVEL = logging.DEBUG if settings.env == "dev" else logging.INFO

# корневой логгер проекта
logger = logging.getLogger("admission")
logger.setLevel(LOG_LEVEL)

# хендлер для вывода в stdout
handler = logging.StreamHandler(sys.stdout)
handler.setLevel(LOG_LEVEL)

# форматтер: время, уровень, [имя логгера], сообщение
fmt = logging.Formatter(
    "%(asctime)s %(levelname)-5s [admission] %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
handler.setFormatter(fmt)
logger.addHandler(handler)
