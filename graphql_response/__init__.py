# services must be imported before schemas: schemas.error depends on services.path_parser
from .services import (
    ABSENT,
    Absent,
    ClientGraphQlResponse,
    ErrorPathMatcher,
    FieldSegment,
    FieldView,
    Found,
    IndexSegment,
    NavigationResult,
    Path,
    PathParser,
    PathSegment,
    TreeNavigator,
    resolve,
)
from .schemas import GraphQlResponseSchema, ResponseErrorSchema, SourceLocationSchema
from .errors import (
    FieldAccessError,
    GraphQlResponseError,
    InvalidPathError,
    InvalidPathSyntax,
    TypeMismatch,
)
from .log import configure_logging
from .settings import SettingsSchema, settings

__version__ = '0.1.0'
