# -*- coding: utf-8 -*-
import uuid
from enum import Enum
from functools import total_ordering


class SecurityError(Exception):
    pass


class NotFoundError(SecurityError):
    pass


class ReentrantCallError(SecurityError):
    pass


class _DescribedEnum(Enum):
    def __new__(cls, *args):
        obj = object.__new__(cls)
        # pylint: disable=protected-access
        obj._value_ = args[0]
        return obj

    # ignore the first param since it's already set by __new__
    def __init__(self, _, description):
        self._description_ = description

    def __str__(self):
        return self.value

    # this makes sure that the description is read-only
    @property
    def description(self):
        return self._description_

    @classmethod
    def from_str(cls, a_str):
        for name, member in cls.__members__.items():
            if a_str == name:
                return member
        return None


class AlarmStatus(_DescribedEnum):
    NO_ALARM = 'NO_ALARM', 'Cool and Good'
    PENDING_ALARM = 'PENDING_ALARM', "I'm in Danger..."
    ALARM = 'ALARM', 'Awooga!'


class ArmingStatus(_DescribedEnum):
    DISARMED = 'DISARMED', 'Disarmed'
    ARMED_HOME = 'ARMED_HOME', 'Armed - At Home'
    ARMED_AWAY = 'ARMED_AWAY', 'Armed - Away'

    @property
    def is_armed(self):
        return self is not ArmingStatus.DISARMED


class SensorType(_DescribedEnum):
    DOOR = 'DOOR', 'Door'
    WINDOW = 'WINDOW', 'Window'
    MOTION = 'MOTION', 'Motion'


@total_ordering
class Sensor(object):
    """
    A door, window or motion sensor. Identity is the sensor id, so a sensor
    keeps its place in a set while its active flag changes.
    """

    def __init__(self, name, sensor_type, active=False, sensor_id=None):
        if not isinstance(sensor_type, SensorType):
            raise ValueError("Invalid sensor type {0}".format(sensor_type))
        self.sensor_id = sensor_id or str(uuid.uuid4())
        self.name = name
        self.sensor_type = sensor_type
        self.active = bool(active)

    def _sort_key(self):
        return (self.name, self.sensor_type.value, self.sensor_id)

    def __eq__(self, other):
        if not isinstance(other, Sensor):
            return NotImplemented
        return self.sensor_id == other.sensor_id

    def __lt__(self, other):
        if not isinstance(other, Sensor):
            return NotImplemented
        return self._sort_key() < other._sort_key()

    def __hash__(self):
        return hash(self.sensor_id)

    def __str__(self):
        return "{0} sensor '{1}' ({2})".format(
            self.sensor_type.description, self.name, "active" if self.active else "inactive")

    def __repr__(self):
        return str(self.__dict__)
