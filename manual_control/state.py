from enum import IntEnum
from . import config
from .utils import apply_deadzone


class KickPhase(IntEnum):
    IDLE = 0
    PASSING = 1
    KICKING = 2


class AxisTracker:
    def __init__(self, deadzone=config.MIN_AXIS_VALUE):
        self.deadzone = deadzone
        self.axes = [0] * config.TRACKED_AXES

    @property
    def x(self):
        return self.axes[config.AXIS_X]

    @property
    def y(self):
        return self.axes[config.AXIS_Y]

    def update(self, number, value):
        # Sticks past the first two are not used for driving
        if 0 <= number < len(self.axes):
            self.axes[number] = value

    def active(self):
        return any(abs(v) >= self.deadzone for v in self.axes)

    def filtered(self):
        return [apply_deadzone(v, self.deadzone) for v in self.axes]

    def apply_deadzone(self):
        self.axes = self.filtered()


class KickSequencer:
    def __init__(self, kick_times=config.KICK_TIMES):
        self.kick_times = kick_times
        self.phase = KickPhase.IDLE
        self.ticks = 0

    @property
    def active(self):
        return self.phase != KickPhase.IDLE

    def trigger(self, phase):
        # A kick in progress is never interrupted or restarted
        if self.active:
            return
        self.phase = phase
        self.ticks = 0

    def expired(self):
        """Return True (and go back to idle) once the phase has run its ticks."""
        if self.active and self.ticks >= self.kick_times:
            self.phase = KickPhase.IDLE
            self.ticks = 0
            return True
        return False

    def advance(self):
        if self.active:
            self.ticks += 1

    def power(self, pass_power, kick_power):
        return {
            KickPhase.IDLE: 0,
            KickPhase.PASSING: pass_power,
            KickPhase.KICKING: kick_power,
        }[self.phase]


class CommandState:
    """Everything the loop decides each tick and puts into a packet."""
    def __init__(self, kick_times=config.KICK_TIMES, deadzone=config.MIN_AXIS_VALUE):
        self.axis = AxisTracker(deadzone)
        self.kick = KickSequencer(kick_times)

        self.linear_velocity_x = 0
        self.linear_velocity_y = 0
        self.direction_x = config.POSITIVE
        self.direction_y = config.NEGATIVE
        self.angular_velocity = 0
        self.direction_theta = config.POSITIVE

        self.rotating = False
        self.dribbling = False

    def read_button(self, number, pressed, max_angular_velocity):
        """
        Apply one button event. Returns the pressed value for known buttons
        (a press should force a packet out) and False for anything else.
        """
        pressed = bool(pressed)
        if number == config.PASS_BUTTON:
            if pressed:
                self.kick.trigger(KickPhase.PASSING)
        elif number == config.KICK_BUTTON:
            if pressed:
                self.kick.trigger(KickPhase.KICKING)
        elif number == config.DRIBBLER_BUTTON:
            self.dribbling = pressed
        elif number in (config.ROTATE_CW_BUTTON, config.ROTATE_CCW_BUTTON):
            self.angular_velocity = max_angular_velocity if pressed else 0
            self.rotating = pressed
            if pressed:
                clockwise = number == config.ROTATE_CW_BUTTON
                self.direction_theta = config.NEGATIVE if clockwise else config.POSITIVE
        else:
            return False
        return pressed

    def stop_linear(self):
        self.linear_velocity_x = 0
        self.linear_velocity_y = 0

    def transmit_worthy(self, axis_send, button_send):
        return axis_send or self.rotating or button_send or self.dribbling or self.kick.active
