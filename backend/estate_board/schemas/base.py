# backend/estate_board/schemas/base.py
from datetime import date, datetime
from typing import Annotated, Any, Optional

from pydantic import BaseModel, BeforeValidator, ConfigDict
from pydantic.alias_generators import to_camel


class BaseSchema(BaseModel):
    # camelCase on the wire, snake_case attributes in Python
    model_config = ConfigDict(
        from_attributes=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )


class TimestampMixin(BaseModel):
    created_at: datetime
    updated_at: Optional[datetime] = None


def coerce_date(value: Any) -> Any:
    """Accept 'YYYY-MM-DD' as well as full ISO timestamps for date fields"""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        if "T" in text or " " in text:
            return datetime.fromisoformat(text.replace("Z", "+00:00")).date()
        return text
    return value


OptionalDate = Annotated[Optional[date], BeforeValidator(coerce_date)]
