import serial
import time
import logging
from . import config
from .errors import CommunicationFailure


class Session:
    def __init__(self, port, cfg=None):
        """
        Open the serial connection to the stand.
        The port is owned exclusively by this session; there is no
        reconnect, a failed open raises CommunicationFailure.
        """
        self.port = port
        self.config = cfg if cfg is not None else config.ScopeConfig()
        logging.info(f"Connecting to {port} at {self.config.baud_rate}...")

        try:
            self.ser = serial.Serial(
                port,
                self.config.baud_rate,
                bytesize=serial.EIGHTBITS,
                parity=serial.PARITY_NONE,
                stopbits=serial.STOPBITS_ONE,
                timeout=self.config.timeout_s,
                write_timeout=self.config.timeout_s,
            )
        except (serial.SerialException, OSError) as e:
            logging.error(f"Connection failed: {e}")
            raise CommunicationFailure(f"could not open {port}: {e}") from e

    @property
    def is_open(self):
        return self.ser is not None and self.ser.is_open

    def close(self):
        if self.is_open:
            self.ser.close()
            logging.info(f"Disconnected from {self.port}.")

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()

    def send(self, data):
        """
        Write all bytes and flush.
        The input buffer is cleared first so a late reply to an earlier
        command cannot be read as the reply to this one.
        """
        if not self.is_open:
            raise CommunicationFailure("communication with the device failed: port is closed")

        try:
            self.ser.reset_input_buffer()
            self.ser.write(data)
            self.ser.flush()
        except (serial.SerialException, OSError) as e:
            logging.error(f"Serial I/O Error: {e}")
            raise CommunicationFailure(f"communication with the device failed: {e}") from e
        logging.debug(f"TX -> {data!r}")

    def receive_until(self, terminator=config.TERMINATOR, timeout=None):
        """
        Poll the port until `terminator` shows up in a freshly read chunk,
        or until `timeout` seconds pass without any new bytes.
        The deadline restarts after every successful read.
        Returns whatever was accumulated, possibly empty; a missing
        terminator is left for the caller to judge.
        """
        if timeout is None:
            timeout = self.config.timeout_s
        if not self.is_open:
            raise CommunicationFailure("communication with the device failed: port is closed")

        buffer = bytearray()
        last_read = time.monotonic()

        try:
            while True:
                avail = self.ser.in_waiting
                if not avail:
                    time.sleep(self.config.poll_interval_s)
                    if time.monotonic() - last_read >= timeout:
                        logging.warning(f"Timeout after {timeout}s waiting for terminator ({len(buffer)} bytes read)")
                        break
                    continue

                last_read = time.monotonic()
                chunk = self.ser.read(avail)
                buffer.extend(chunk)
                if terminator in chunk:
                    break
        except (serial.SerialException, OSError) as e:
            logging.error(f"Serial I/O Error: {e}")
            raise CommunicationFailure(f"communication with the device failed: {e}") from e

        logging.debug(f"RX <- {bytes(buffer)!r}")
        return bytes(buffer)
