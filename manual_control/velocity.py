from . import config
from .utils import scale_axis


class VelocityResolver:
    def __init__(self, max_linear_velocity=config.MAX_LINEAR_VELOCITY,
                 max_axis_value=config.MAX_AXIS_VALUE):
        self.max_linear_velocity = max_linear_velocity
        self.max_axis_value = max_axis_value

    def resolve(self, state):
        """
        Fill linear velocity and direction flags of `state` from its
        dead-zoned stick position. x and y use different direction codes
        on the wire; the robot firmware expects exactly this pairing.
        """
        x, y = state.axis.filtered()

        state.direction_x = config.ALT_NEGATIVE if x < 0 else config.POSITIVE
        state.direction_y = config.ALT_POSITIVE if y < 0 else config.NEGATIVE

        state.linear_velocity_x = scale_axis(x, self.max_axis_value, self.max_linear_velocity)
        state.linear_velocity_y = scale_axis(y, self.max_axis_value, self.max_linear_velocity)
        return state.linear_velocity_x, state.linear_velocity_y
