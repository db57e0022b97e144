from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator

from .error import ResponseErrorSchema


class GraphQlResponseSchema(BaseModel):
    model_config = ConfigDict(frozen=True, extra='ignore')

    data: Any = None
    errors: list[ResponseErrorSchema] = Field(default_factory=list)
    extensions: dict[str, Any] = Field(default_factory=dict)

    @field_validator('errors', 'extensions', mode='before')
    @classmethod
    def _null_as_empty(cls, value: Any, info: ValidationInfo) -> Any:
        if value is None:
            return [] if info.field_name == 'errors' else {}
        return value
