"""
Shared fixtures: a spy over the in-memory repository, a stubbed classifier
and a mock status listener.
"""

from unittest.mock import Mock

import pytest

from catpoint import InMemorySecurityRepository, SecurityService, Sensor, SensorType, StatusListener
from catpoint.agents import ImageClassifier


@pytest.fixture
def store():
    """Backing in-memory repository."""
    return InMemorySecurityRepository()


@pytest.fixture
def repository(store):
    """Repository spy recording every call made by the service."""
    return Mock(wraps=store)


@pytest.fixture
def classifier():
    classifier = Mock(spec=ImageClassifier)
    classifier.contains_cat.return_value = False
    return classifier


@pytest.fixture
def listener():
    return Mock(spec=StatusListener)


@pytest.fixture
def service(repository, classifier):
    return SecurityService(repository, classifier)


@pytest.fixture
def sensor(store):
    """An inactive door sensor known to the repository."""
    sensor = Sensor("Front door", SensorType.DOOR)
    store.add_sensor(sensor)
    return sensor
