import time
from .message import Message


class CommandAssembler:
    def __init__(self, message=None):
        self.message = message if message is not None else Message()

    def assemble(self, pkg_id, state, tuning):
        m = self.message
        m.clear()
        m.set_pkg_id(pkg_id)
        m.set_msg_type(tuning.msg_type)
        m.set_robot_id(tuning.robot_id)
        m.set_velocity_x(state.linear_velocity_x)
        m.set_velocity_y(state.linear_velocity_y)
        m.set_direction_x(state.direction_x)
        m.set_direction_y(state.direction_y)
        m.set_velocity_theta(state.angular_velocity)
        m.set_direction_theta(state.direction_theta)
        m.set_dribbler(tuning.dribbler_velocity if state.dribbling else 0)
        m.set_kick(state.kick.power(tuning.pass_power, tuning.kick_power))
        return m.serialize()


class DispatchScheduler:
    """
    Rate limits packets to one per send period and keeps the sequence id.
    pkg_id only moves on a send the transport reports as successful.
    """
    def __init__(self, transport, period, clock=time.monotonic):
        self.transport = transport
        self.period = period
        self.clock = clock
        self.pkg_id = 0
        self.failures = 0
        self.last_send = clock()

    def reset(self):
        self.last_send = self.clock()

    def due(self):
        return self.clock() - self.last_send >= self.period

    def dispatch(self, buffer):
        ok = bool(self.transport.send(buffer))
        self.last_send = self.clock()
        if ok:
            self.pkg_id += 1
        else:
            self.failures += 1
        return ok
