from collections import deque

import pytest

from manual_control.controller import ControllerEvent
from manual_control.core_control import ControlLoop
from manual_control.tuning import TuningParameters


class ScriptedController:
    """Input source that hands out queued events, one per poll."""
    def __init__(self, events=(), found=True):
        self.events = deque(events)
        self.found = found

    def is_found(self):
        return self.found

    def push(self, *events):
        self.events.extend(events)

    def poll(self):
        if self.events:
            return self.events.popleft()
        return None


class RecordingTransport:
    def __init__(self, ok=True):
        self.ok = ok
        self.sent = []

    def send(self, buffer):
        self.sent.append(bytes(buffer))
        return self.ok


class ManualClock:
    def __init__(self, now=100.0):
        self.now = now

    def __call__(self):
        return self.now

    def advance(self, seconds):
        self.now += seconds


@pytest.fixture
def controller():
    return ScriptedController()


@pytest.fixture
def transport():
    return RecordingTransport()


@pytest.fixture
def clock():
    return ManualClock()


@pytest.fixture
def tuning():
    return TuningParameters(
        max_linear_velocity=100, max_angular_velocity=60,
        max_axis_value=32767, min_axis_value=3000,
        dribbler_velocity=90, kick_power=200, pass_power=80,
        kick_times=3, robot_id=4, msg_type=1, frequency=4,
    )


@pytest.fixture
def loop(controller, transport, tuning, clock):
    ctrl = ControlLoop(controller, transport, tuning, clock=clock)
    ctrl.prepare()
    return ctrl


def button(number, pressed=True):
    return ControllerEvent.button(number, pressed)


def axis(number, value):
    return ControllerEvent.axis(number, value)
