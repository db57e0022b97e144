from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import TYPE_CHECKING

from .path_parser import Path, PathParser

if TYPE_CHECKING:
    from graphql_response.schemas import ResponseErrorSchema


class ErrorPathMatcher:
    @staticmethod
    def matches(query: Path, raw_path: Sequence[str | int] | None) -> bool:
        """
        Ошибка относится к полю, если её путь совпадает с путём поля,
        лежит глубже него или является его предком. Ошибки без пути
        относятся только к корню.
        """
        if raw_path is None:
            return not query
        error_path = PathParser.from_steps(raw_path)
        shared = min(len(query), len(error_path))
        return query[:shared] == error_path[:shared]

    @staticmethod
    def render(raw_path: Sequence[str | int] | None) -> str:
        if raw_path is None:
            return ''
        return PathParser.render(PathParser.from_steps(raw_path))

    @staticmethod
    def select(
        query: Path, errors: Iterable[ResponseErrorSchema]
    ) -> tuple[ResponseErrorSchema, ...]:
        return tuple(
            error for error in errors if ErrorPathMatcher.matches(query, error.raw_path)
        )
