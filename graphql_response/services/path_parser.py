from collections.abc import Sequence
from dataclasses import dataclass
import logging
import re

from graphql_response.errors import InvalidPathSyntax

logger = logging.getLogger(__name__)

_BRACKET_RE = re.compile(r'[\[\]]')
_INDEXES_RE = re.compile(r'(?:\[[0-9]+\])*')
_INDEX_RE = re.compile(r'\[([0-9]+)\]')


@dataclass(frozen=True)
class FieldSegment:
    name: str

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class IndexSegment:
    position: int

    def __str__(self) -> str:
        return f'[{self.position}]'


PathSegment = FieldSegment | IndexSegment
Path = tuple[PathSegment, ...]


class PathParser:
    @staticmethod
    def parse(path: str) -> Path:
        """
        Поддерживаем только:
        - поля через точку: me.friends.name
        - индексы сразу после поля: friends[0], matrix[0][1]
        - пустая строка или одни пробелы -> корень документа
        Пробелы внутри сегментов сохраняются как есть.
        """
        if not path.strip():
            return ()

        segments: list[PathSegment] = []
        for raw in path.split('.'):
            segments.extend(PathParser._parse_token(raw, path))

        logger.debug('Parsed path %r into %d segments', path, len(segments))
        return tuple(segments)

    @staticmethod
    def _parse_token(raw: str, path: str) -> list[PathSegment]:
        m = _BRACKET_RE.search(raw)
        name, suffix = (raw[: m.start()], raw[m.start() :]) if m else (raw, '')

        if not name or not _INDEXES_RE.fullmatch(suffix):
            raise InvalidPathSyntax(path)

        segments: list[PathSegment] = [FieldSegment(name=name)]
        segments.extend(
            IndexSegment(position=int(index)) for index in _INDEX_RE.findall(suffix)
        )
        return segments

    @staticmethod
    def from_steps(steps: Sequence[str | int]) -> Path:
        """
        ["me", "friends", 0, "name"] -> me.friends[0].name
        """
        segments: list[PathSegment] = []
        for step in steps:
            if isinstance(step, str):
                segments.append(FieldSegment(name=step))
            elif isinstance(step, int) and not isinstance(step, bool) and step >= 0:
                segments.append(IndexSegment(position=step))
            else:
                raise InvalidPathSyntax(list(steps))
        return tuple(segments)

    @staticmethod
    def to_steps(segments: Path) -> list[str | int]:
        return [
            s.name if isinstance(s, FieldSegment) else s.position for s in segments
        ]

    @staticmethod
    def render(segments: Path) -> str:
        rendered = ''
        for segment in segments:
            if isinstance(segment, IndexSegment):
                rendered += str(segment)
            elif rendered:
                rendered += f'.{segment.name}'
            else:
                rendered = segment.name
        return rendered
