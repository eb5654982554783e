import numpy as np


def apply_deadzone(value, deadzone):
    if abs(value) < deadzone:
        return 0
    return value


def scale_axis(value, max_axis, max_velocity):
    """
    Map a raw stick reading onto 0..max_velocity.
    Readings past max_axis (e.g. -32768 on a 16 bit axis) saturate.
    """
    magnitude = np.rint(abs(value) * max_velocity / max_axis)
    return int(np.clip(magnitude, 0, max_velocity))
