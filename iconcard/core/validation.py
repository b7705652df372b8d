import logging
import re
from typing import Optional

from fastapi import HTTPException


logger = logging.getLogger(__name__)

MAX_ICON_NAME_LENGTH = 64
MAX_TEXT_LENGTH = 80
ICON_NAME_PATTERN = re.compile(r'^[a-z0-9-]+$')


def validate_icon_name(name: str) -> None:
    if not name:
        raise HTTPException(status_code=400, detail="Icon name is required")

    if len(name) > MAX_ICON_NAME_LENGTH:
        raise HTTPException(status_code=400, detail=f"Icon name too long. Maximum is {MAX_ICON_NAME_LENGTH} characters")

    if not ICON_NAME_PATTERN.fullmatch(name):
        raise HTTPException(status_code=400, detail="Invalid icon name format")


def validate_card_text(title: Optional[str] = None, subtitle: Optional[str] = None) -> None:
    for field, value in (("title", title), ("subtitle", subtitle)):
        if value is None:
            continue
        if len(value) > MAX_TEXT_LENGTH:
            raise HTTPException(status_code=400, detail=f"{field} too long. Maximum is {MAX_TEXT_LENGTH} characters")
        if any(ch in value for ch in '<>&"'):
            raise HTTPException(status_code=400, detail=f"Invalid characters in {field}")
