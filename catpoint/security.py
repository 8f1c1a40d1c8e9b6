# -*- coding: utf-8 -*-
from contextlib import contextmanager
from threading import RLock

from .data import AlarmStatus, ArmingStatus, NotFoundError, ReentrantCallError
from .event import SecurityEvents
from .util import getLogger


LOGGER = getLogger(__name__)

DEFAULT_CONFIDENCE_THRESHOLD = 50.0


class StatusListener(object):
    """
    Observer of the security service. Subclasses override the callbacks they
    care about. Callbacks run synchronously inside the triggering operation
    and must not call back into the service's mutating operations.
    """

    def on_alarm_status_changed(self, alarm_status):
        pass

    def on_cat_detected(self, present):
        pass


class SecurityService(object):
    """
    Receives sensor, arming and camera events, decides the resulting alarm
    status, writes it through the repository and notifies status listeners.

    Each public operation runs under a single lock from its first read to its
    last notification.
    """

    def __init__(self, repository, classifier, confidence_threshold=DEFAULT_CONFIDENCE_THRESHOLD):
        self.repository = repository
        self.classifier = classifier
        self.confidence_threshold = float(confidence_threshold)
        self.is_cat_detected = False
        self.lock = RLock()
        self.events = SecurityEvents()
        self._notifying = 0

    @contextmanager
    def _operation(self, name):
        with self.lock:
            if self._notifying:
                raise ReentrantCallError(
                    "{0} called from a status listener while notifying".format(name))
            yield

    def _notify(self, slot, *args):
        self._notifying += 1
        try:
            slot(*args)
        finally:
            self._notifying -= 1

    def add_status_listener(self, status_listener):
        with self.lock:
            # bound methods compare equal only for the same listener object
            if status_listener.on_alarm_status_changed in self.events.alarm_status_changed.targets:
                return
            self.events.alarm_status_changed += status_listener.on_alarm_status_changed
            self.events.cat_detected += status_listener.on_cat_detected

    def remove_status_listener(self, status_listener):
        with self.lock:
            self.events.alarm_status_changed -= status_listener.on_alarm_status_changed
            self.events.cat_detected -= status_listener.on_cat_detected

    def set_arming_status(self, arming_status):
        """
        Changes the arming status. Disarming clears the alarm, arming at home
        while a cat is in view raises it, and any armed mode resets every
        sensor to inactive.
        """
        if not isinstance(arming_status, ArmingStatus):
            raise ValueError("Invalid arming status {0}".format(arming_status))

        with self._operation("set_arming_status"):
            if arming_status == ArmingStatus.DISARMED:
                self._set_alarm_status(AlarmStatus.NO_ALARM)

            if arming_status == ArmingStatus.ARMED_HOME and self.is_cat_detected:
                self._set_alarm_status(AlarmStatus.ALARM)

            if arming_status.is_armed:
                self._reset_sensors()

            self.repository.set_arming_status(arming_status)
            LOGGER.info("Arming status is now %s", arming_status)

    def _reset_sensors(self):
        # direct reset, the deactivation rule does not apply here
        for sensor in self.repository.get_sensors():
            sensor.active = False
            self.repository.update_sensor(sensor)
            LOGGER.debug("Reset %s", sensor)

    def change_sensor_activation_status(self, sensor, active):
        """
        Changes the active flag of a known sensor and updates the alarm status
        accordingly. The passed sensor's current flag is taken as its previous
        state. Sensor changes never affect an alarm that is already raised.
        """
        active = bool(active)
        with self._operation("change_sensor_activation_status"):
            if sensor not in self.repository.get_sensors():
                raise NotFoundError("Unknown sensor {0}".format(sensor.name))

            if self.repository.get_alarm_status() != AlarmStatus.ALARM:
                if active:
                    self._handle_sensor_activated()
                elif sensor.active:
                    self._handle_sensor_deactivated()

            LOGGER.debug("Setting %s active=%s", sensor, active)
            sensor.active = active
            self.repository.update_sensor(sensor)

    def _handle_sensor_activated(self):
        if self.repository.get_arming_status() == ArmingStatus.DISARMED:
            LOGGER.debug("System is disarmed, ignoring sensor activation")
            return

        alarm_status = self.repository.get_alarm_status()
        if alarm_status == AlarmStatus.NO_ALARM:
            self._set_alarm_status(AlarmStatus.PENDING_ALARM)
        elif alarm_status == AlarmStatus.PENDING_ALARM:
            self._set_alarm_status(AlarmStatus.ALARM)

    def _handle_sensor_deactivated(self):
        alarm_status = self.repository.get_alarm_status()
        if alarm_status == AlarmStatus.PENDING_ALARM:
            self._set_alarm_status(AlarmStatus.NO_ALARM)
        elif alarm_status == AlarmStatus.ALARM:
            self._set_alarm_status(AlarmStatus.PENDING_ALARM)

    def process_image(self, image):
        """
        Runs the classifier on a camera image and updates the alarm status
        from its verdict.
        """
        with self._operation("process_image"):
            present = bool(self.classifier.contains_cat(image, self.confidence_threshold))
            LOGGER.debug("Classifier verdict for new image: cat=%s", present)
            self._cat_detected(present)

    def _cat_detected(self, present):
        self.is_cat_detected = present

        if present and self.repository.get_arming_status() == ArmingStatus.ARMED_HOME:
            self._set_alarm_status(AlarmStatus.ALARM)
        else:
            self._set_alarm_status(AlarmStatus.NO_ALARM)

        self._notify(self.events.cat_detected, present)

    def set_alarm_status(self, alarm_status):
        if not isinstance(alarm_status, AlarmStatus):
            raise ValueError("Invalid alarm status {0}".format(alarm_status))
        with self._operation("set_alarm_status"):
            self._set_alarm_status(alarm_status)

    def _set_alarm_status(self, alarm_status):
        self.repository.set_alarm_status(alarm_status)
        LOGGER.info("Alarm status is now %s (%s)", alarm_status, alarm_status.description)
        self._notify(self.events.alarm_status_changed, alarm_status)

    def get_alarm_status(self):
        with self.lock:
            return self.repository.get_alarm_status()

    def get_arming_status(self):
        with self.lock:
            return self.repository.get_arming_status()

    def get_sensors(self):
        with self.lock:
            return frozenset(self.repository.get_sensors())

    def add_sensor(self, sensor):
        with self._operation("add_sensor"):
            self.repository.add_sensor(sensor)
            LOGGER.info("Added %s", sensor)

    def remove_sensor(self, sensor):
        with self._operation("remove_sensor"):
            self.repository.remove_sensor(sensor)
            LOGGER.info("Removed %s", sensor)
