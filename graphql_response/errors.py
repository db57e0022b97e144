from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .services.field_view import FieldView
    from .services.path_parser import PathSegment


class GraphQlResponseError(Exception):
    pass


class InvalidPathError(GraphQlResponseError, ValueError):
    def __init__(self, path: Any, message: str):
        super().__init__(message)
        self.path = path


class InvalidPathSyntax(InvalidPathError):
    def __init__(self, path: Any):
        super().__init__(path, f"Invalid path: '{path}'")


class TypeMismatch(InvalidPathError):
    def __init__(
        self,
        path: str,
        position: int,
        segment: 'PathSegment',
        expected: str,
        actual: Any,
    ):
        super().__init__(
            path,
            f"Invalid path: '{path}', segment {position} ({segment}) "
            f'expects a {expected} but found {type(actual).__name__}',
        )
        self.position = position
        self.segment = segment


class FieldAccessError(GraphQlResponseError):
    def __init__(self, field: 'FieldView'):
        messages = [error.message for error in field.errors]
        super().__init__(f"Invalid field '{field.path}', errors: {messages}")
        self.field = field
