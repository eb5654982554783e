import os
import struct
import time
from collections import namedtuple
from select import select
from . import config

# Linux joystick API record: u32 time (ms), s16 value, u8 type, u8 number
JS_EVENT = struct.Struct("<IhBB")
JS_EVENT_BUTTON = 0x01
JS_EVENT_AXIS = 0x02
JS_EVENT_INIT = 0x80

BUTTON = "button"
AXIS = "axis"


class ControllerEvent(namedtuple("ControllerEvent", "kind number value")):
    __slots__ = ()

    @classmethod
    def button(cls, number, pressed):
        return cls(BUTTON, number, int(bool(pressed)))

    @classmethod
    def axis(cls, number, value):
        return cls(AXIS, number, value)

    @property
    def is_button(self):
        return self.kind == BUTTON

    @property
    def is_axis(self):
        return self.kind == AXIS

    @property
    def pressed(self):
        return bool(self.value)


def decode_event(data):
    """Turn one raw js record into a ControllerEvent, or None if it is neither button nor axis."""
    _, value, kind, number = JS_EVENT.unpack(data)
    kind &= ~JS_EVENT_INIT
    if kind == JS_EVENT_BUTTON:
        return ControllerEvent.button(number, value)
    if kind == JS_EVENT_AXIS:
        return ControllerEvent.axis(number, value)
    return None


class JoystickInput:
    def __init__(self, device=config.JOYSTICK_DEVICE, timeout=config.POLL_TIMEOUT):
        self.device = device
        self.timeout = timeout
        self.fd = None
        self.open()

    def open(self):
        try:
            self.fd = os.open(self.device, os.O_RDONLY | os.O_NONBLOCK)
            print(f"[CTRL] Opened controller {self.device}")
        except OSError as e:
            print(f"[CTRL] Failed to open controller {self.device}: {e}")
            self.fd = None

    def is_found(self):
        return self.fd is not None

    def poll(self):
        if self.fd is None:
            # Degraded mode: keep the caller's tick rate bounded
            time.sleep(self.timeout)
            return None

        try:
            ready, _, _ = select([self.fd], [], [], self.timeout)
            if not ready:
                return None
            data = os.read(self.fd, JS_EVENT.size)
        except BlockingIOError:
            return None
        except OSError as e:
            print(f"[CTRL] Controller lost: {e}")
            self.close()
            return None

        if len(data) != JS_EVENT.size:
            return None
        return decode_event(data)

    def close(self):
        if self.fd is not None:
            os.close(self.fd)
            self.fd = None
