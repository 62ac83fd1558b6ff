"""
工具函數
"""

import re
from datetime import datetime
from typing import Optional

from .config import SURGERY_DATETIME_FORMAT

_SURGERY_DATETIME_SHAPE = re.compile(r"^\d{2}:\d{2} \d{2}/\d{2}/\d{4}$")


def format_surgery_time(when: Optional[datetime]) -> Optional[str]:
    """格式化手術時間為 HH:mm dd/MM/yyyy"""
    if when is None:
        return None
    return when.strftime(SURGERY_DATETIME_FORMAT)


def parse_surgery_time(value: str) -> datetime:
    """解析手術時間字串（格式必須完全符合 HH:mm dd/MM/yyyy）"""
    # strptime 允許個位數欄位，先檢查固定寬度
    if not _SURGERY_DATETIME_SHAPE.match(value):
        raise ValueError(f"Supplied value is not a valid DateTime: {value!r}")
    return datetime.strptime(value, SURGERY_DATETIME_FORMAT)
