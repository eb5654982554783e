FIELDS = (
    "pkg_id", "msg_type", "robot_id",
    "velocity_x", "velocity_y", "velocity_theta",
    "direction_x", "direction_y", "direction_theta",
    "dribbler", "kick",
)


class Message:
    """
    Robot command packet.

    Wire layout (9 bytes):
        0 pkg_id (low byte)   3 velocity_x       6 directions
        1 msg_type            4 velocity_y       7 dribbler
        2 robot_id            5 velocity_theta   8 kick

    directions = direction_x << 4 | direction_y << 2 | direction_theta
    """
    def __init__(self):
        self.clear()

    def clear(self):
        for name in FIELDS:
            setattr(self, name, 0)

    def _set(self, name, value):
        setattr(self, name, int(value) & 0xFF)

    def set_pkg_id(self, value):
        self._set("pkg_id", value)

    def set_msg_type(self, value):
        self._set("msg_type", value)

    def set_robot_id(self, value):
        self._set("robot_id", value)

    def set_velocity_x(self, value):
        self._set("velocity_x", value)

    def set_velocity_y(self, value):
        self._set("velocity_y", value)

    def set_velocity_theta(self, value):
        self._set("velocity_theta", value)

    def set_direction_x(self, value):
        self.direction_x = int(value) & 0b11

    def set_direction_y(self, value):
        self.direction_y = int(value) & 0b11

    def set_direction_theta(self, value):
        self.direction_theta = int(value) & 0b11

    def set_dribbler(self, value):
        self._set("dribbler", value)

    def set_kick(self, value):
        self._set("kick", value)

    def directions(self):
        return self.direction_x << 4 | self.direction_y << 2 | self.direction_theta

    def serialize(self):
        return bytes([
            self.pkg_id, self.msg_type, self.robot_id,
            self.velocity_x, self.velocity_y, self.velocity_theta,
            self.directions(), self.dribbler, self.kick,
        ])

    def __str__(self):
        return (
            f"pkg={self.pkg_id} type={self.msg_type} robot={self.robot_id} | "
            f"vx={self.velocity_x}({self.direction_x}) "
            f"vy={self.velocity_y}({self.direction_y}) "
            f"w={self.velocity_theta}({self.direction_theta}) | "
            f"dribbler={self.dribbler} kick={self.kick}"
        )
