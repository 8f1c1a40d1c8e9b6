# -*- coding: utf-8 -*-
from abc import ABC, abstractmethod
from threading import RLock

from .data import AlarmStatus, ArmingStatus, NotFoundError
from .util import getLogger


LOGGER = getLogger(__name__)


class SecurityRepository(ABC):
    """
    Store of the sensors, the alarm status and the arming status.
    Every call is synchronous and its answer authoritative.
    """

    @abstractmethod
    def get_alarm_status(self):
        pass

    @abstractmethod
    def set_alarm_status(self, alarm_status):
        pass

    @abstractmethod
    def get_arming_status(self):
        pass

    @abstractmethod
    def set_arming_status(self, arming_status):
        pass

    @abstractmethod
    def get_sensors(self):
        pass

    @abstractmethod
    def add_sensor(self, sensor):
        pass

    @abstractmethod
    def remove_sensor(self, sensor):
        pass

    @abstractmethod
    def update_sensor(self, sensor):
        pass


class InMemorySecurityRepository(SecurityRepository):

    def __init__(self, sensors=(), alarm_status=AlarmStatus.NO_ALARM,
                 arming_status=ArmingStatus.DISARMED):
        self.lock = RLock()
        self._sensors = {}
        for sensor in sensors:
            self._sensors[sensor.sensor_id] = sensor
        self._alarm_status = alarm_status
        self._arming_status = arming_status

    def get_alarm_status(self):
        with self.lock:
            return self._alarm_status

    def set_alarm_status(self, alarm_status):
        if not isinstance(alarm_status, AlarmStatus):
            raise ValueError("Invalid alarm status {0}".format(alarm_status))
        with self.lock:
            self._alarm_status = alarm_status

    def get_arming_status(self):
        with self.lock:
            return self._arming_status

    def set_arming_status(self, arming_status):
        if not isinstance(arming_status, ArmingStatus):
            raise ValueError("Invalid arming status {0}".format(arming_status))
        with self.lock:
            self._arming_status = arming_status

    def get_sensors(self):
        with self.lock:
            return set(self._sensors.values())

    def add_sensor(self, sensor):
        with self.lock:
            if sensor.sensor_id in self._sensors:
                LOGGER.debug("%s is already stored", sensor)
            self._sensors[sensor.sensor_id] = sensor

    def remove_sensor(self, sensor):
        with self.lock:
            if sensor.sensor_id not in self._sensors:
                raise NotFoundError("Unknown sensor {0}".format(sensor.name))
            del self._sensors[sensor.sensor_id]

    def update_sensor(self, sensor):
        with self.lock:
            if sensor.sensor_id not in self._sensors:
                raise NotFoundError("Unknown sensor {0}".format(sensor.name))
            self._sensors[sensor.sensor_id] = sensor

    def __repr__(self):
        return "InMemorySecurityRepository(alarm={0}, arming={1}, sensors={2})".format(
            self._alarm_status, self._arming_status, len(self._sensors))
