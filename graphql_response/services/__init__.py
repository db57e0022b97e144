from .path_parser import FieldSegment, IndexSegment, Path, PathParser, PathSegment
from .tree_navigator import ABSENT, Absent, Found, NavigationResult, TreeNavigator
from .error_matcher import ErrorPathMatcher
from .field_view import FieldView, resolve
from .client_response import ClientGraphQlResponse
