import logging

import pytest

pytest_plugins = ('tests.fixtures.responses',)


@pytest.fixture(autouse=True)
def reset_package_logger():
    yield

    package_logger = logging.getLogger('graphql_response')
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
    package_logger.setLevel(logging.NOTSET)
