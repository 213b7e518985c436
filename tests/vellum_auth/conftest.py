"""
Pytest configuration for vellum_auth tests.

Provides a mocked content-object finder whose bound field finders forward
to ``find_by_field`` so lookups can be asserted on one mock.
"""

from functools import partial
from unittest.mock import Mock

import pytest

from tests.shared.fixtures.factories import TestUserFactory
from vellum import ContentObjectFinder, UnknownFieldError, UserObject


@pytest.fixture
def finder() -> Mock:
    """Mocked finder; find_by_id and find_by_field are AsyncMocks."""
    mock = Mock(spec=ContentObjectFinder)

    def finder_for(entity_type, field):
        if not entity_type.has_field(field):
            raise UnknownFieldError(entity_type.__qualname__, field)
        return partial(mock.find_by_field, entity_type, field)

    mock.finder_for.side_effect = finder_for
    mock.find_by_field.return_value = None
    mock.find_by_id.return_value = None
    return mock


@pytest.fixture
def alice() -> UserObject:
    """Alice as a stored user object."""
    return TestUserFactory.alice()
