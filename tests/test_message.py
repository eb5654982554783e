from manual_control import config
from manual_control.message import Message


def test_serialize_layout():
    m = Message()
    m.set_pkg_id(258)
    m.set_msg_type(1)
    m.set_robot_id(3)
    m.set_velocity_x(100)
    m.set_velocity_y(20)
    m.set_velocity_theta(60)
    m.set_direction_x(config.ALT_NEGATIVE)
    m.set_direction_y(config.ALT_POSITIVE)
    m.set_direction_theta(config.NEGATIVE)
    m.set_dribbler(90)
    m.set_kick(200)

    assert m.serialize() == bytes([2, 1, 3, 100, 20, 60, 0b011110, 90, 200])


def test_clear():
    m = Message()
    m.set_kick(200)
    m.set_direction_x(config.ALT_NEGATIVE)
    m.clear()
    assert m.serialize() == bytes(config.PACKET_SIZE)


def test_str_mentions_fields():
    m = Message()
    m.set_robot_id(7)
    assert "robot=7" in str(m)
