# schemas/base.py
from datetime import datetime
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

# e.g. "Monday 14 November 2022 05:15"
DISPLAY_DATETIME_FORMAT = "%A %d %B %Y %H:%M"


def format_timestamp(value: Optional[datetime]) -> Optional[str]:
    return value.strftime(DISPLAY_DATETIME_FORMAT) if value else None


class CamelModel(BaseModel):
    """Base schema exchanging camelCase JSON keys"""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ResultResponse(CamelModel):
    result: Literal["success", "fail"] = "success"


class FailureResponse(ResultResponse):
    result: Literal["success", "fail"] = "fail"
    message: str
