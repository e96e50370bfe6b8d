"""Serial link to an Arduino board that reports completed tasks and receives alerts."""

from __future__ import annotations

from typing import Iterable, Optional

import serial
from serial.tools import list_ports

ARDUINO_UNO_VENDOR_ID = 9025
ARDUINO_UNO_PRODUCT_ID = 67
BAUD_RATE = 9600

TASK_COMPLETED = "TASK_COMPLETED"
NOTIFICATION = "NOTIFICATION"


def find_arduino_port(ports: Optional[Iterable[object]] = None) -> Optional[str]:
    """Return the device name of an attached Arduino Uno, or None.

    ``ports`` holds port descriptions with ``vid``, ``pid`` and ``device``
    attributes; by default the system's serial ports are listed. When several
    boards match, the last one listed wins.
    """
    if ports is None:
        ports = list_ports.comports()
    found = None
    for info in ports:
        vid = getattr(info, "vid", None)
        pid = getattr(info, "pid", None)
        if vid is None or pid is None:
            continue
        if vid == ARDUINO_UNO_VENDOR_ID and pid == ARDUINO_UNO_PRODUCT_ID:
            found = info.device
    return found


def parse_commands(data: bytes) -> tuple[list[str], bytes]:
    """Split received bytes into trimmed complete lines and the unfinished rest."""
    *complete, rest = bytes(data).split(b"\n")
    commands = []
    for line in complete:
        text = line.decode("utf-8", errors="replace").strip()
        if text:
            commands.append(text)
    return commands, rest


class ArduinoLink:
    """Line-based messaging over an open serial port."""

    def __init__(self, port: object) -> None:
        self._port = port
        self._pending = b""

    @classmethod
    def open(cls, port_name: str) -> "ArduinoLink":
        """Open the named port at 9600 baud, 8 data bits, no parity, one stop bit."""
        port = serial.Serial(
            port=port_name,
            baudrate=BAUD_RATE,
            bytesize=serial.EIGHTBITS,
            parity=serial.PARITY_NONE,
            stopbits=serial.STOPBITS_ONE,
            xonxoff=False,
            rtscts=False,
            timeout=0,
        )
        return cls(port)

    @property
    def is_open(self) -> bool:
        return bool(getattr(self._port, "is_open", False))

    def send(self, message: str) -> bool:
        """Write message followed by a newline; return False when the port is closed."""
        if not self.is_open:
            return False
        self._port.write(message.encode("utf-8") + b"\n")
        return True

    def read_commands(self) -> list[str]:
        """Return the complete lines received since the last call."""
        if not self.is_open:
            return []
        waiting = self._port.in_waiting
        if waiting:
            self._pending += self._port.read(waiting)
        commands, self._pending = parse_commands(self._pending)
        return commands

    def close(self) -> None:
        """Close the port if it is open."""
        if self.is_open:
            self._port.close()

    def __enter__(self) -> "ArduinoLink":
        return self

    def __exit__(self, *args: object) -> None:
        self.close()