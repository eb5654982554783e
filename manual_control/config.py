# Hardware Configuration
SERIAL_PORT = "/dev/ttyUSB0"
SERIAL_BAUD = 115200
SERIAL_TIMEOUT = 0.1

JOYSTICK_DEVICE = "/dev/input/js0"
POLL_TIMEOUT = 0.01   # seconds a poll may wait for a controller event

# Controller layout (xpad numbering)
BUTTONS = {
    "A": 0, "B": 1, "X": 2, "Y": 3,
    "LB": 4, "RB": 5, "BACK": 6, "START": 7,
    "GUIDE": 8, "LS": 9, "RS": 10,
}
PASS_BUTTON = BUTTONS["A"]
KICK_BUTTON = BUTTONS["X"]
DRIBBLER_BUTTON = BUTTONS["LB"]
ROTATE_CW_BUTTON = BUTTONS["LS"]
ROTATE_CCW_BUTTON = BUTTONS["RS"]

AXIS_X = 0
AXIS_Y = 1
TRACKED_AXES = 2

# Wire direction codes
POSITIVE = 0
ALT_NEGATIVE = 1
NEGATIVE = 2
ALT_POSITIVE = 3

PACKET_SIZE = 9
BYTE_MAX = 255

# Tuning defaults
ROBOT_ID = 0
MSG_TYPE = 0
MAX_LINEAR_VELOCITY = 100
MAX_ANGULAR_VELOCITY = 60
MAX_AXIS_VALUE = 32767
MIN_AXIS_VALUE = 3000   # dead-zone
DRIBBLER_VELOCITY = 100
KICK_POWER = 200
PASS_POWER = 80
KICK_TIMES = 50         # ticks a kick/pass stays active
COMMUNICATION_FREQUENCY = 60   # packets per second
VERBOSE = False
