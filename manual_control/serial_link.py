import serial
from . import config


class SerialSender:
    def __init__(self, port=config.SERIAL_PORT, baud=config.SERIAL_BAUD):
        self.port = port
        self.baud = baud
        print(f"[SERIAL] Opening {self.port}...")
        self.ser = serial.serial_for_url(port, baudrate=baud, timeout=config.SERIAL_TIMEOUT,
                                         write_timeout=config.SERIAL_TIMEOUT)

    def send(self, buffer):
        try:
            written = self.ser.write(bytes(buffer))
            self.ser.flush()
        except (serial.SerialException, OSError) as e:
            print(f"[SERIAL] Send error: {e}")
            return False
        return written == len(buffer)

    def close(self):
        if self.ser.is_open:
            self.ser.close()
