# -*- coding: utf-8 -*-
import shlex
import sys

from .data import ArmingStatus, Sensor, SensorType, SecurityError
from .security import StatusListener
from .util import getLogger


LOGGER = getLogger(__name__)

HELP = """Commands:
  arm DISARMED|ARMED_HOME|ARMED_AWAY   change the arming status
  add <name> DOOR|WINDOW|MOTION        add a sensor
  remove <name>                        remove a sensor
  activate <name>                      activate a sensor
  deactivate <name>                    deactivate a sensor
  scan                                 analyze a new camera frame
  status                               show arming and alarm status
  sensors                              list sensors
  help                                 show this message
  quit                                 exit"""


class CommandError(Exception):
    pass


class ControlPanel(StatusListener):
    """
    Text control panel driving a security service one command line at a time.
    """

    def __init__(self, security_service, out=None):
        self.security_service = security_service
        self.out = out or sys.stdout
        self.frame_count = 0
        self.security_service.add_status_listener(self)
        self.handlers = {
            'arm': self.handle_arm,
            'add': self.handle_add,
            'remove': self.handle_remove,
            'activate': lambda args: self.handle_activation(args, True),
            'deactivate': lambda args: self.handle_activation(args, False),
            'scan': self.handle_scan,
            'status': self.handle_status,
            'sensors': self.handle_sensors,
            'help': lambda _: self.write(HELP),
        }

    def write(self, text):
        self.out.write(text + "\n")

    def on_alarm_status_changed(self, alarm_status):
        self.write("alarm: {0} - {1}".format(alarm_status, alarm_status.description))

    def on_cat_detected(self, present):
        self.write("camera: {0}".format("DANGER - CAT DETECTED" if present else "no cats detected"))

    def run(self, lines):
        for line in lines:
            if not self.execute(line):
                break

    def execute(self, line):
        """
        Runs a single command line. Returns False once the panel should stop.
        """
        try:
            words = shlex.split(line)
        except ValueError as ex:
            self.write("error: {0}".format(ex))
            return True
        if not words:
            return True

        command, args = words[0].lower(), words[1:]
        if command in ('quit', 'exit'):
            return False

        handler = self.handlers.get(command)
        if handler is None:
            self.write("error: unknown command '{0}', try 'help'".format(command))
            return True

        try:
            handler(args)
        except (CommandError, SecurityError) as ex:
            LOGGER.debug("Command %r failed: %s", line, ex)
            self.write("error: {0}".format(ex))
        return True

    def find_sensor(self, name):
        for sensor in self.security_service.get_sensors():
            if sensor.name == name:
                return sensor
        raise CommandError("no sensor named '{0}'".format(name))

    def handle_arm(self, args):
        if len(args) != 1:
            raise CommandError("usage: arm DISARMED|ARMED_HOME|ARMED_AWAY")
        arming_status = ArmingStatus.from_str(args[0].upper())
        if arming_status is None:
            raise CommandError("unknown arming status '{0}'".format(args[0]))
        self.security_service.set_arming_status(arming_status)
        self.write("arming: {0}".format(arming_status.description))

    def handle_add(self, args):
        if len(args) != 2:
            raise CommandError("usage: add <name> DOOR|WINDOW|MOTION")
        name, type_name = args
        sensor_type = SensorType.from_str(type_name.upper())
        if sensor_type is None:
            raise CommandError("unknown sensor type '{0}'".format(type_name))
        if any(s.name == name for s in self.security_service.get_sensors()):
            raise CommandError("sensor '{0}' already exists".format(name))
        self.security_service.add_sensor(Sensor(name, sensor_type))
        self.write("added {0} sensor '{1}'".format(sensor_type.description, name))

    def handle_remove(self, args):
        if len(args) != 1:
            raise CommandError("usage: remove <name>")
        self.security_service.remove_sensor(self.find_sensor(args[0]))
        self.write("removed sensor '{0}'".format(args[0]))

    def handle_activation(self, args, active):
        if len(args) != 1:
            raise CommandError("usage: {0} <name>".format("activate" if active else "deactivate"))
        self.security_service.change_sensor_activation_status(self.find_sensor(args[0]), active)

    def handle_scan(self, _):
        self.frame_count += 1
        self.security_service.process_image("frame-{0}".format(self.frame_count))

    def handle_status(self, _):
        alarm_status = self.security_service.get_alarm_status()
        self.write("arming: {0}".format(self.security_service.get_arming_status().description))
        self.write("alarm: {0} - {1}".format(alarm_status, alarm_status.description))

    def handle_sensors(self, _):
        sensors = sorted(self.security_service.get_sensors())
        if not sensors:
            self.write("no sensors")
        for sensor in sensors:
            self.write("  {0}".format(sensor))
