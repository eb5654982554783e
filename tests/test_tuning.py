import json

import pytest

from manual_control import config
from manual_control.tuning import ConfigurationError, TuningParameters, load_tuning


def test_defaults_are_valid():
    t = TuningParameters().validate()
    assert t.max_axis_value == config.MAX_AXIS_VALUE
    assert t.send_period == pytest.approx(1.0 / config.COMMUNICATION_FREQUENCY)


@pytest.mark.parametrize("values", [
    {"max_axis_value": 0},
    {"max_linear_velocity": 256},
    {"max_angular_velocity": -1},
    {"kick_times": 0},
    {"frequency": 0},
    {"robot_id": 300},
    {"min_axis_value": 40000},
])
def test_validate_rejects(values):
    with pytest.raises(ConfigurationError):
        TuningParameters(**values).validate()


def test_non_integer_rejected():
    with pytest.raises(TypeError):
        TuningParameters(kick_power="high")
    with pytest.raises(TypeError):
        TuningParameters(kick_times=True)


def test_load_from_file_with_overrides(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"robot_id": 2, "frequency": 30, "serial_port": "loop://"}))

    t = load_tuning(str(path), {"robot_id": 5, "frequency": None})
    assert t.robot_id == 5
    assert t.frequency == 30
    assert t.serial_port == "loop://"


def test_load_rejects_unknown_key(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"max_speed": 2}))
    with pytest.raises(ConfigurationError):
        load_tuning(str(path))


def test_load_rejects_bad_json(tmp_path):
    path = tmp_path / "config.json"
    path.write_text("{robot_id: 1")
    with pytest.raises(ConfigurationError):
        load_tuning(str(path))
