import json
from . import config


class ConfigurationError(ValueError):
    """Raised when tuning values would make the control loop misbehave."""


# name -> (default, inclusive lower bound, inclusive upper bound or None)
INT_PARAMETERS = {
    "robot_id":              (config.ROBOT_ID, 0, config.BYTE_MAX),
    "msg_type":              (config.MSG_TYPE, 0, config.BYTE_MAX),
    "max_linear_velocity":   (config.MAX_LINEAR_VELOCITY, 0, config.BYTE_MAX),
    "max_angular_velocity":  (config.MAX_ANGULAR_VELOCITY, 0, config.BYTE_MAX),
    "max_axis_value":        (config.MAX_AXIS_VALUE, 1, None),
    "min_axis_value":        (config.MIN_AXIS_VALUE, 0, None),
    "dribbler_velocity":     (config.DRIBBLER_VELOCITY, 0, config.BYTE_MAX),
    "kick_power":            (config.KICK_POWER, 0, config.BYTE_MAX),
    "pass_power":            (config.PASS_POWER, 0, config.BYTE_MAX),
    "kick_times":            (config.KICK_TIMES, 1, None),
    "frequency":             (config.COMMUNICATION_FREQUENCY, 1, None),
}

OTHER_KEYS = {
    "serial_port": config.SERIAL_PORT,
    "serial_baud": config.SERIAL_BAUD,
    "joystick_device": config.JOYSTICK_DEVICE,
    "verbose": config.VERBOSE,
}


def check_int(name, value):
    # bool is an int subclass but never a sensible tuning value
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an integer, got {value!r}")
    return value


class TuningParameters:
    def __init__(self, **values):
        for name, (default, _, _) in INT_PARAMETERS.items():
            setattr(self, name, default)
        for name, default in OTHER_KEYS.items():
            setattr(self, name, default)
        self.update(values)

    def update(self, values):
        for name, value in values.items():
            if name in INT_PARAMETERS:
                setattr(self, name, check_int(name, value))
            elif name in OTHER_KEYS:
                setattr(self, name, value)
            else:
                raise ConfigurationError(f"Unknown configuration key: {name}")
        return self

    @property
    def send_period(self):
        return 1.0 / self.frequency

    def validate(self):
        """
        Range-check every numeric parameter. Anything that could divide by
        zero or overflow a one-byte packet field is rejected here so the
        loop never discovers it mid-run.
        """
        for name, (_, low, high) in INT_PARAMETERS.items():
            value = getattr(self, name)
            if value < low or (high is not None and value > high):
                upper = "" if high is None else f"..{high}"
                raise ConfigurationError(f"{name}={value} outside {low}{upper}")
        if self.min_axis_value > self.max_axis_value:
            raise ConfigurationError(
                f"min_axis_value={self.min_axis_value} exceeds "
                f"max_axis_value={self.max_axis_value}")
        return self


def load_tuning(path=None, overrides=None):
    values = {}
    if path is not None:
        try:
            with open(path, "r", encoding="utf-8") as f:
                values = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigurationError(f"Invalid JSON in {path}: {e}") from e
        if not isinstance(values, dict):
            raise ConfigurationError(f"{path} must hold a JSON object")
        print(f"[CONFIG] Loaded {path}")

    tuning = TuningParameters(**values)
    if overrides:
        tuning.update({k: v for k, v in overrides.items() if v is not None})
    return tuning
