import argparse
import signal
import sys
import threading
import serial

from .controller import JoystickInput
from .core_control import ControlLoop
from .serial_link import SerialSender
from .tuning import ConfigurationError, load_tuning


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Drive one robot from a game controller over serial.")
    parser.add_argument("--config", help="JSON file with tuning parameters")
    parser.add_argument("--serial-port", help="Serial device or pyserial URL")
    parser.add_argument("--device", dest="joystick_device", help="Joystick device, e.g. /dev/input/js0")
    parser.add_argument("--robot-id", type=int)
    parser.add_argument("--frequency", type=int, help="Packets per second")
    parser.add_argument("--verbose", action="store_true", default=None,
                        help="Print every packet sent")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    overrides = {
        "serial_port": args.serial_port,
        "joystick_device": args.joystick_device,
        "robot_id": args.robot_id,
        "frequency": args.frequency,
        "verbose": args.verbose,
    }
    try:
        tuning = load_tuning(args.config, overrides).validate()
    except (ConfigurationError, TypeError, OSError) as e:
        print(f"[CONFIG] {e}")
        return 2

    try:
        transport = SerialSender(tuning.serial_port, tuning.serial_baud)
    except serial.SerialException as e:
        print(f"[SERIAL] Failed to open serial: {e}")
        return 1
    controller = JoystickInput(tuning.joystick_device)

    loop = ControlLoop(controller, transport, tuning)

    shutdown = threading.Event()

    def request_shutdown(signum, frame):
        print("\n[MAIN] Shutdown requested")
        shutdown.set()

    for sig in (signal.SIGINT, signal.SIGTERM):
        signal.signal(sig, request_shutdown)

    print("[MAIN] Starting manual control...")
    loop.start()
    try:
        shutdown.wait()
    finally:
        loop.stop()
        controller.close()
        transport.close()
        print("[MAIN] Shutdown complete")
    return 0


if __name__ == "__main__":
    sys.exit(main())
