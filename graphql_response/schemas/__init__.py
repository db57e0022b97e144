from .error import ResponseErrorSchema, SourceLocationSchema
from .response import GraphQlResponseSchema
