from typing import Any

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    NonNegativeInt,
    ValidationInfo,
    field_validator,
)

from graphql_response.services.path_parser import Path, PathParser


class SourceLocationSchema(BaseModel):
    model_config = ConfigDict(frozen=True)

    line: int
    column: int


class ResponseErrorSchema(BaseModel):
    model_config = ConfigDict(
        frozen=True, populate_by_name=True, serialize_by_alias=True, extra='ignore'
    )

    message: str = ''
    raw_path: list[str | NonNegativeInt] | None = Field(default=None, alias='path')
    locations: list[SourceLocationSchema] = Field(default_factory=list)
    extensions: dict[str, Any] = Field(default_factory=dict)

    @field_validator('locations', 'extensions', mode='before')
    @classmethod
    def _null_as_empty(cls, value: Any, info: ValidationInfo) -> Any:
        if value is None:
            return [] if info.field_name == 'locations' else {}
        return value

    @property
    def segments(self) -> Path | None:
        if self.raw_path is None:
            return None
        return PathParser.from_steps(self.raw_path)

    @property
    def parsed_path(self) -> list[str | int]:
        return list(self.raw_path or [])

    @property
    def path(self) -> str:
        """me.friends[0].name, либо '' если пути нет"""
        segments = self.segments
        return PathParser.render(segments) if segments else ''

    @property
    def error_type(self) -> str | None:
        classification = self.extensions.get('classification')
        return classification if isinstance(classification, str) else None
