"""
Serial transport to the stepper controller board.

Classes:
    SerialTransport: ``Transport`` backed by a pyserial port.
"""

from __future__ import annotations

import logging
import threading
from typing import Optional

import serial

from scara_control.control.interfaces import Transport
from scara_control.utils.constants import (
    DEFAULT_BAUDRATE,
    DEFAULT_SERIAL_PORT,
    DEFAULT_WRITE_TIMEOUT_S,
)

logger = logging.getLogger(__name__)


class SerialTransport(Transport):
    """Writes command lines to a serial port, one at a time.

    ``send`` blocks until the bytes have been flushed, and an internal lock
    keeps concurrent callers from interleaving partial writes.
    """

    def __init__(
        self,
        port: str = DEFAULT_SERIAL_PORT,
        baudrate: int = DEFAULT_BAUDRATE,
        write_timeout: float = DEFAULT_WRITE_TIMEOUT_S,
    ) -> None:
        self.port = port
        self.baudrate = baudrate
        self.write_timeout = write_timeout
        self.ser: Optional[serial.Serial] = None
        self._write_lock = threading.Lock()

    @property
    def is_open(self) -> bool:
        return self.ser is not None and self.ser.is_open

    def open(self) -> None:
        """Open the port.

        Accepts a device path or any pyserial URL (e.g. ``loop://``).

        Raises:
            serial.SerialException: If the device cannot be opened.
        """
        if self.is_open:
            return
        self.ser = serial.serial_for_url(
            self.port, baudrate=self.baudrate, write_timeout=self.write_timeout
        )
        logger.info("Connected to %s at %d baud", self.port, self.baudrate)

    def close(self) -> None:
        if self.is_open:
            self.ser.close()
        self.ser = None

    def send(self, line: str) -> bool:
        if not self.is_open:
            logger.warning("Not connected; dropping %r", line)
            return False
        with self._write_lock:
            try:
                self.ser.write(line.encode("ascii"))
                self.ser.flush()
            except serial.SerialException as exc:
                logger.warning("Serial write to %s failed: %s", self.port, exc)
                return False
        return True

    def __enter__(self) -> "SerialTransport":
        self.open()
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
