"""
Tests for the text control panel.
"""

import io
from unittest.mock import Mock

import pytest

from catpoint import AlarmStatus, ArmingStatus, InMemorySecurityRepository, SecurityService
from catpoint.agents import ImageClassifier
from catpoint.console import ControlPanel


@pytest.fixture
def classifier():
    classifier = Mock(spec=ImageClassifier)
    classifier.contains_cat.return_value = False
    return classifier


@pytest.fixture
def service(classifier):
    return SecurityService(InMemorySecurityRepository(), classifier)


@pytest.fixture
def out():
    return io.StringIO()


@pytest.fixture
def panel(service, out):
    return ControlPanel(service, out=out)


def test_intrusion_scenario(panel, service, out):
    panel.run([
        "add 'Front door' door",
        "add Hall MOTION",
        "arm ARMED_AWAY",
        "activate 'Front door'",
        "activate Hall",
    ])

    assert service.get_arming_status() == ArmingStatus.ARMED_AWAY
    assert service.get_alarm_status() == AlarmStatus.ALARM
    lines = out.getvalue().splitlines()
    assert "alarm: PENDING_ALARM - I'm in Danger..." in lines
    assert lines[-1] == "alarm: ALARM - Awooga!"


def test_scan_reports_cat(panel, service, classifier, out):
    classifier.contains_cat.return_value = True
    panel.execute("arm armed_home")

    panel.execute("scan")
    panel.execute("scan")

    assert service.get_alarm_status() == AlarmStatus.ALARM
    assert out.getvalue().count("camera: DANGER - CAT DETECTED") == 2
    assert classifier.contains_cat.call_args_list[1].args == ("frame-2", 50.0)


def test_deactivate_and_remove(panel, service, out):
    panel.run(["add Window window", "arm ARMED_HOME", "activate Window", "deactivate Window"])
    assert service.get_alarm_status() == AlarmStatus.NO_ALARM

    panel.execute("remove Window")

    assert service.get_sensors() == frozenset()
    assert "removed sensor 'Window'" in out.getvalue()


def test_sensors_and_status_listing(panel, out):
    panel.run(["sensors", "add B window", "add A door", "sensors", "status"])

    lines = out.getvalue().splitlines()
    assert lines[0] == "no sensors"
    assert lines[3:5] == ["  Door sensor 'A' (inactive)", "  Window sensor 'B' (inactive)"]
    assert lines[5:] == ["arming: Disarmed", "alarm: NO_ALARM - Cool and Good"]


@pytest.mark.parametrize(
    "line,message",
    [
        ("dance", "error: unknown command 'dance', try 'help'"),
        ("arm SLEEPING", "error: unknown arming status 'SLEEPING'"),
        ("add Door", "error: usage: add <name> DOOR|WINDOW|MOTION"),
        ("add Door GATE", "error: unknown sensor type 'GATE'"),
        ("activate Nowhere", "error: no sensor named 'Nowhere'"),
        ("add 'unterminated", "error: No closing quotation"),
    ],
)
def test_bad_commands_report_errors(panel, out, line, message):
    assert panel.execute(line) is True
    assert out.getvalue().splitlines() == [message]


def test_duplicate_sensor_name_is_rejected(panel, service, out):
    panel.execute("add Door door")
    panel.execute("add Door window")

    assert len(service.get_sensors()) == 1
    assert out.getvalue().splitlines()[-1] == "error: sensor 'Door' already exists"


def test_quit_stops_the_run(panel, service):
    panel.run(["add Door door", "quit", "add Window window"])

    assert [s.name for s in service.get_sensors()] == ["Door"]


def test_blank_lines_are_ignored(panel, out):
    assert panel.execute("   \n") is True
    assert out.getvalue() == ""
