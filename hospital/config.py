"""
Service configuration

Hospital limits, the external datetime format and logging setup.
Values below are defaults; `Hospital(config=...)` may override the room
pool and the number of floors, and the environment controls logging and
CORS.
"""

import logging
import os
from typing import List

SERVICE_NAME = "Hospital Ward Service"
SERVICE_VERSION = "1.0.0"

# === Rooms and floors ===
MIN_ROOM_NUMBER = 1
MAX_ROOM_NUMBER = 10
ROOM_NUMBERS: List[int] = list(range(MIN_ROOM_NUMBER, MAX_ROOM_NUMBER + 1))

MIN_FLOOR_NUMBER = 1
MAX_FLOOR_NUMBER = 6

# === Staff ===
MIN_STAFF_ID = 100
MAX_STAFF_ID = 999

# === Ages (floor managers retire earlier than surgeons) ===
MIN_AGE_PATIENT = 0
MAX_AGE = 100
MIN_AGE_STAFF = 21
MAX_AGE_FLOOR_MANAGER = 70
MAX_AGE_SURGEON = MAX_AGE

# === Formats ===
SURGERY_DATETIME_FORMAT = "%H:%M %d/%m/%Y"  # HH:mm dd/MM/yyyy
MOBILE_NUMBER_PATTERN = r"^0\d{9}$"
EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+\.[^@\s]+$"
MIN_PASSWORD_LENGTH = 8

# === Runtime ===
# werkzeug 的雜湊方法；測試時可改成較快的 pbkdf2 迭代次數
PASSWORD_HASH_METHOD = os.getenv("HOSPITAL_PASSWORD_HASH", "scrypt")
LOG_LEVEL = os.getenv("HOSPITAL_LOG_LEVEL", "INFO")
CORS_ORIGINS: List[str] = [
    origin.strip()
    for origin in os.getenv(
        "HOSPITAL_CORS_ORIGINS",
        "http://localhost:3000,http://localhost:3001,http://localhost:5173",
    ).split(",")
    if origin.strip()
]


def configure_logging(level: str = LOG_LEVEL) -> None:
    """設定根 logger（只在服務啟動時呼叫一次）"""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format='[%(levelname)s] %(name)s: %(message)s',
        force=True
    )
