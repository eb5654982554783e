import threading
import time
from .dispatch import CommandAssembler, DispatchScheduler
from .state import CommandState
from .tuning import TuningParameters, check_int
from .velocity import VelocityResolver


class ControlLoop:
    """
    Manual piloting loop. One worker thread polls the controller, updates the
    command state and pushes packets to the transport at most once per send
    period. Tuning is applied before start() and left alone afterwards.
    """
    def __init__(self, controller, transport, tuning=None, clock=time.monotonic):
        self.controller = controller
        self.transport = transport
        self.tuning = tuning if tuning is not None else TuningParameters()
        self.clock = clock

        self.stop_event = threading.Event()
        self.thread = None

        self.state = None
        self.resolver = None
        self.assembler = CommandAssembler()
        self.scheduler = DispatchScheduler(transport, None, clock)

    # ---- tuning setters (type checked only, ranges are checked on start) ----
    def _set(self, name, value):
        setattr(self.tuning, name, check_int(name, value))

    def set_max_linear_velocity(self, value):
        self._set("max_linear_velocity", value)

    def set_max_angular_velocity(self, value):
        self._set("max_angular_velocity", value)

    def set_max_axis_value(self, value):
        self._set("max_axis_value", value)

    def set_min_axis_value(self, value):
        self._set("min_axis_value", value)

    def set_dribbler_velocity(self, value):
        self._set("dribbler_velocity", value)

    def set_kick_power(self, value):
        self._set("kick_power", value)

    def set_pass_power(self, value):
        self._set("pass_power", value)

    def set_kick_times(self, value):
        self._set("kick_times", value)

    def set_robot_id(self, value):
        self._set("robot_id", value)

    def set_msg_type(self, value):
        self._set("msg_type", value)

    def set_communication_frequency(self, value):
        self._set("frequency", value)

    def configure(self, tuning):
        self.tuning = tuning

    # ---- lifecycle ----
    @property
    def running(self):
        return self.thread is not None and self.thread.is_alive()

    @property
    def packets_sent(self):
        return self.scheduler.pkg_id

    @property
    def send_failures(self):
        return self.scheduler.failures

    def prepare(self):
        """Validate tuning and build fresh per-session state. Raises ConfigurationError."""
        t = self.tuning.validate()
        self.state = CommandState(t.kick_times, t.min_axis_value)
        self.resolver = VelocityResolver(t.max_linear_velocity, t.max_axis_value)
        self.scheduler.period = t.send_period
        self.scheduler.reset()
        self.assembler.message.clear()

    def start(self):
        if self.thread is not None:
            raise RuntimeError("Control loop already started")
        self.prepare()
        self.stop_event.clear()
        self.thread = threading.Thread(target=self.run, name="manual-control")
        self.thread.start()

    def stop(self):
        if self.thread is None:
            raise RuntimeError("Control loop is not running")
        if threading.current_thread() is self.thread:
            raise RuntimeError("stop() called from the control thread")
        self.stop_event.set()
        self.thread.join()
        self.thread = None
        print(f"[CONTROL] Loop stopped after {self.packets_sent} packets "
              f"({self.send_failures} failed).")

    def run(self):
        print(f"[CONTROL] Starting loop at {self.tuning.frequency} Hz")
        if not self.controller.is_found():
            print("[CONTROL] Controller not found, running without input.")

        try:
            while not self.stop_event.is_set():
                self.tick()
        finally:
            # Nothing stale may go out after a stop
            self.assembler.message.clear()

    def tick(self):
        state = self.state
        button_send = False

        event = self.controller.poll()
        if event is not None:
            if event.is_button:
                button_send = state.read_button(event.number, event.value,
                                                self.tuning.max_angular_velocity)
            elif event.is_axis:
                state.axis.update(event.number, event.value)

        axis_send = state.axis.active()

        if state.kick.expired():
            button_send = True

        if axis_send:
            self.resolver.resolve(state)
        else:
            state.stop_linear()

        state.axis.apply_deadzone()

        sent = False
        if state.transmit_worthy(axis_send, button_send) and self.scheduler.due():
            sent = self.send()

        state.kick.advance()
        return sent

    def send(self):
        buffer = self.assembler.assemble(self.scheduler.pkg_id, self.state, self.tuning)
        if self.tuning.verbose:
            print(f"[CONTROL] {self.assembler.message}")
        return self.scheduler.dispatch(buffer)
