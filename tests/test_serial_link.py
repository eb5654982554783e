import serial

from manual_control.serial_link import SerialSender


def test_send_over_loopback():
    sender = SerialSender("loop://", 115200)
    try:
        packet = bytes(range(9))
        assert sender.send(packet) is True
        assert sender.ser.read(9) == packet
    finally:
        sender.close()


def test_send_failure_reported(capsys):
    sender = SerialSender("loop://", 115200)
    sender.close()
    assert sender.send(bytes(9)) is False
    assert "Send error" in capsys.readouterr().out


def test_close_twice():
    sender = SerialSender("loop://", 115200)
    sender.close()
    sender.close()
    assert not sender.ser.is_open
    assert isinstance(sender.ser, serial.SerialBase)
