from pydantic import BaseModel, ConfigDict, field_validator
from pydantic_core import PydanticCustomError
from app.utils.forms import sanitize_text
from app.schemas.item import MAX_NAME_LENGTH


class CategoryForm(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    name: str
    description: str = ""

    @field_validator("name")
    @classmethod
    def check_name(cls, value: str) -> str:
        if len(value) < 3:
            raise PydanticCustomError("name_too_short", "Category must contain at least 3 characters")
        value = sanitize_text(value)
        if len(value) > MAX_NAME_LENGTH:
            raise PydanticCustomError("name_too_long", f"Category must contain at most {MAX_NAME_LENGTH} characters")
        return value

    @field_validator("description")
    @classmethod
    def clean_description(cls, value: str) -> str:
        return sanitize_text(value)
