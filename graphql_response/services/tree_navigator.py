from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from graphql_response.errors import TypeMismatch
from .path_parser import FieldSegment, Path, PathParser


class Absent:
    """Sentinel for a key or index that is not in the document."""

    def __repr__(self) -> str:
        return 'ABSENT'


ABSENT: Absent = Absent()


@dataclass(frozen=True)
class Found:
    value: Any


NavigationResult = Found | Absent


def _is_sequence(value: Any) -> bool:
    return isinstance(value, Sequence) and not isinstance(
        value, (str, bytes, bytearray)
    )


class TreeNavigator:
    @staticmethod
    def navigate(root: Any, segments: Path, path: str | None = None) -> NavigationResult:
        # нет документа - нет и корня
        if root is None:
            return ABSENT

        current = root
        for position, segment in enumerate(segments):
            # null на любом уровне скрывает всё, что глубже
            if current is None:
                return ABSENT

            if isinstance(segment, FieldSegment):
                if not isinstance(current, Mapping):
                    raise TypeMismatch(
                        TreeNavigator._path(segments, path),
                        position,
                        segment,
                        'mapping',
                        current,
                    )
                if segment.name not in current:
                    return ABSENT
                current = current[segment.name]
                continue

            if not _is_sequence(current):
                raise TypeMismatch(
                    TreeNavigator._path(segments, path),
                    position,
                    segment,
                    'sequence',
                    current,
                )
            if segment.position >= len(current):
                return ABSENT
            current = current[segment.position]

        return Found(value=current)

    @staticmethod
    def _path(segments: Path, path: str | None) -> str:
        return path if path is not None else PathParser.render(segments)
