import re
from typing import Any
from pydantic import BaseModel, ConfigDict, field_validator
from pydantic_core import PydanticCustomError
from app.utils.forms import sanitize_text


INTEGER_RE = re.compile(r"^[+-]?(0|[1-9][0-9]*)$")

# Integer columns are 32-bit signed; names live in String(100)
MAX_INTEGER = 2**31 - 1
MAX_NAME_LENGTH = 100


def parse_int(value: Any, minimum: int, error_type: str, message: str, maximum: int = MAX_INTEGER) -> int:
    """Parse a trimmed integer literal, rejecting anything outside ``minimum..maximum``."""
    if isinstance(value, bool):
        raise PydanticCustomError(error_type, message)
    if isinstance(value, int):
        number = value
    else:
        text = "" if value is None else str(value).strip()
        if not INTEGER_RE.match(text):
            raise PydanticCustomError(error_type, message)
        number = int(text)
    if number < minimum or number > maximum:
        raise PydanticCustomError(error_type, message)
    return number


class ItemForm(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    name: str
    description: str = ""
    price: int
    numstock: int
    category: list[str] = []

    @field_validator("name")
    @classmethod
    def check_name(cls, value: str) -> str:
        if len(value) < 3:
            raise PydanticCustomError("name_too_short", "Name must contain at least 3 characters")
        value = sanitize_text(value)
        if len(value) > MAX_NAME_LENGTH:
            raise PydanticCustomError("name_too_long", f"Name must contain at most {MAX_NAME_LENGTH} characters")
        return value

    @field_validator("price", mode="before")
    @classmethod
    def check_price(cls, value: Any) -> int:
        return parse_int(value, 1, "price_invalid", "Price must be a positive number")

    @field_validator("numstock", mode="before")
    @classmethod
    def check_numstock(cls, value: Any) -> int:
        return parse_int(value, 0, "numstock_invalid", "Stock number must be a positive")

    @field_validator("description")
    @classmethod
    def clean_description(cls, value: str) -> str:
        return sanitize_text(value)

    @field_validator("category")
    @classmethod
    def clean_category(cls, value: list[str]) -> list[str]:
        ids = []
        for category_id in value:
            category_id = sanitize_text(category_id)
            if not category_id:
                continue
            if category_id in ids:
                raise PydanticCustomError("category_repeated", "Each category can only be selected once")
            ids.append(category_id)
        return ids
