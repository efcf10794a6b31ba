"""Wire models shared by every REST response."""

from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class ApiModel(BaseModel):
    """Base for backend payloads: camelCase on the wire, unknown fields kept."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="allow",
    )


class ApiEnvelope(BaseModel):
    """Uniform ``{success, code, message, data}`` response wrapper."""

    success: bool = True
    code: int = 200
    message: str = ""
    data: Any = None
