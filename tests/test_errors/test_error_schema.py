import json
from decimal import Decimal

import pytest
from pydantic import ValidationError

from graphql_response import ResponseErrorSchema


def test_error_from_response_map():
    error = ResponseErrorSchema.model_validate(
        {
            'message': 'fail-me-friends-name',
            'path': ['me', 'friends', 0, 'name'],
            'locations': [{'line': 1, 'column': 5}],
            'extensions': {'classification': 'DataFetchingException', 'code': 7},
        }
    )

    assert error.message == 'fail-me-friends-name'
    assert error.path == 'me.friends[0].name'
    assert error.parsed_path == ['me', 'friends', 0, 'name']
    assert error.locations[0].line == 1
    assert error.locations[0].column == 5
    assert error.error_type == 'DataFetchingException'
    assert error.extensions['code'] == 7


def test_error_without_path():
    error = ResponseErrorSchema.model_validate({'message': 'boom'})

    assert error.raw_path is None
    assert error.segments is None
    assert error.path == ''
    assert error.parsed_path == []
    assert error.locations == []
    assert error.extensions == {}
    assert error.error_type is None


def test_null_collections_are_empty():
    error = ResponseErrorSchema.model_validate(
        {'message': 'boom', 'locations': None, 'extensions': None}
    )

    assert error.locations == []
    assert error.extensions == {}


def test_non_string_classification_is_not_an_error_type():
    error = ResponseErrorSchema.model_validate(
        {'message': 'boom', 'extensions': {'classification': {'type': 'x'}}}
    )

    assert error.error_type is None


def test_unknown_keys_are_ignored():
    error = ResponseErrorSchema.model_validate({'message': 'boom', 'foo': 'bar'})

    assert not hasattr(error, 'foo')


def test_negative_index_in_path_is_rejected():
    with pytest.raises(ValidationError):
        ResponseErrorSchema.model_validate({'message': 'boom', 'path': ['me', -1]})


def test_big_integer_locations():
    raw = json.dumps(
        {'message': 'fail-me', 'path': ['me'], 'locations': [{'line': 100, 'column': 100}]}
    )
    decoded = json.loads(raw, parse_int=Decimal)

    error = ResponseErrorSchema.model_validate(decoded)

    assert error.locations[0].line == 100
    assert error.locations[0].column == 100
    assert isinstance(error.locations[0].line, int)


def test_huge_integer_location_keeps_precision():
    line = 2**70 + 1
    error = ResponseErrorSchema.model_validate(
        {'message': 'boom', 'locations': [{'line': Decimal(line), 'column': 1}]}
    )

    assert error.locations[0].line == line


def test_serializes_raw_path_by_alias():
    error = ResponseErrorSchema.model_validate({'message': 'boom', 'path': ['me', 0]})

    assert error.model_dump()['path'] == ['me', 0]
