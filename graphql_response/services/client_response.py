import json
from collections.abc import Mapping
from typing import Any, TypeVar

from graphql_response.schemas import GraphQlResponseSchema, ResponseErrorSchema
from .field_view import FieldView, resolve

EntityType = TypeVar('EntityType')


class ClientGraphQlResponse:
    def __init__(self, response: GraphQlResponseSchema):
        self._response = response

    @classmethod
    def from_map(cls, response_map: Mapping[str, Any]) -> 'ClientGraphQlResponse':
        return cls(GraphQlResponseSchema.model_validate(dict(response_map)))

    @classmethod
    def from_json(cls, raw: str | bytes, **json_kwargs: Any) -> 'ClientGraphQlResponse':
        payload: Any = json.loads(raw, **json_kwargs)
        if not isinstance(payload, dict):
            raise TypeError('Only JSON objects (dict) are supported as GraphQL responses')
        return cls.from_map(payload)

    @property
    def data(self) -> Any:
        return self._response.data

    @property
    def errors(self) -> list[ResponseErrorSchema]:
        return list(self._response.errors)

    @property
    def extensions(self) -> dict[str, Any]:
        return dict(self._response.extensions)

    def is_valid(self) -> bool:
        return self._response.data is not None

    def field(self, path: str) -> FieldView:
        return resolve(self._response.data, self._response.errors, path)

    def to_entity(self, entity_type: type[EntityType]) -> EntityType | None:
        return self.field('').to_entity(entity_type)

    def __repr__(self) -> str:
        return (
            f'ClientGraphQlResponse(valid={self.is_valid()}, '
            f'errors={[e.message for e in self._response.errors]})'
        )
