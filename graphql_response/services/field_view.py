from collections.abc import Iterable, Mapping
from dataclasses import dataclass
import logging
from typing import Any, TypeVar

from pydantic import TypeAdapter

from graphql_response.errors import FieldAccessError, InvalidPathError
from graphql_response.schemas import ResponseErrorSchema
from graphql_response.settings import settings
from .error_matcher import ErrorPathMatcher
from .path_parser import Path, PathParser
from .tree_navigator import Found, NavigationResult, TreeNavigator

logger = logging.getLogger(__name__)

EntityType = TypeVar('EntityType')


@dataclass(frozen=True)
class FieldView:
    path: str
    segments: Path
    result: NavigationResult
    errors: tuple[ResponseErrorSchema, ...] = ()
    document_present: bool = True

    @property
    def parsed_path(self) -> list[str | int]:
        return PathParser.to_steps(self.segments)

    @property
    def value(self) -> Any:
        # отсутствующее поле и явный null снаружи неразличимы
        return self.result.value if isinstance(self.result, Found) else None

    def has_value(self) -> bool:
        return self.value is not None

    def to_entity(self, entity_type: type[EntityType]) -> EntityType | None:
        if not self.has_value():
            self._check_access()
            return None
        return TypeAdapter(entity_type).validate_python(
            self.value, strict=settings.entity.strict
        )

    def to_entity_list(self, entity_type: type[EntityType]) -> list[EntityType]:
        if not self.has_value():
            self._check_access()
            return []
        return TypeAdapter(list[entity_type]).validate_python(
            self.value, strict=settings.entity.strict
        )

    def _check_access(self) -> None:
        if self.document_present and not self.errors:
            return
        logger.debug(
            'Refusing entity conversion for %r: data present=%s, errors=%d',
            self.path,
            self.document_present,
            len(self.errors),
        )
        raise FieldAccessError(self)


def resolve(
    document: Any,
    errors: Iterable[ResponseErrorSchema | Mapping[str, Any]],
    path: str,
) -> FieldView:
    try:
        segments = PathParser.parse(path)
        result = TreeNavigator.navigate(document, segments, path)
    except InvalidPathError as exc:
        logger.debug('Cannot resolve field %r: %s', path, exc)
        raise

    records = [
        e
        if isinstance(e, ResponseErrorSchema)
        else ResponseErrorSchema.model_validate(dict(e))
        for e in errors
    ]
    field = FieldView(
        path=path,
        segments=segments,
        result=result,
        errors=ErrorPathMatcher.select(segments, records),
        document_present=document is not None,
    )
    logger.debug(
        'Resolved field %r: value present=%s, errors=%d',
        path,
        field.has_value(),
        len(field.errors),
    )
    return field
