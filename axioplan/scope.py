import logging
from . import config, codec, utils
from .errors import EmptyResponse, InvalidResponse, OutOfRange, QueryValidation
from .transport import Session
from .turret import Turret


class Scope:
    """
    Client for the Axioplan 2 stand controller.

    Every call blocks for up to the configured timeout. One Scope per stand;
    it is not safe to share between threads without external locking.
    """

    def __init__(self, port, cfg=None):
        self.config = cfg if cfg is not None else config.ScopeConfig()
        self.session = Session(port, self.config)

    def close(self):
        self.session.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()

    def query(self, command, expect_response=True):
        """
        Send `command` (CR appended here) and return the validated payload.
        Returns None for set commands, which get no reply.
        """
        self.session.send(utils.frame_command(command))
        if not expect_response:
            return None

        response = self.session.receive_until(config.TERMINATOR, self.config.timeout_s)
        return self.validate(command, response)

    def raw_query(self, command):
        """Send `command` and return the unvalidated response bytes."""
        self.session.send(utils.frame_command(command))
        return self.session.receive_until(config.TERMINATOR, self.config.timeout_s)

    def validate(self, command, response):
        """
        Check the echoed command code and strip framing.
        The stand answers 'HPCr2,1' with 'PH...\\r', so the first two bytes
        of the reply are the first two of the command, reversed.
        """
        if len(response) < config.ECHO_LENGTH:
            raise EmptyResponse(response)

        expected = utils.echo_of(command)
        actual = response[:config.ECHO_LENGTH]
        if expected != actual:
            raise QueryValidation(
                expected.decode('ascii', errors='replace'),
                actual.decode('ascii', errors='replace'),
            )

        payload, _, _ = response[config.ECHO_LENGTH:].partition(bytes([config.TERMINATOR]))
        return payload

    def firmware_version(self):
        """Returns (stand firmware, controller firmware) version strings."""
        payload = self.query(config.CMD_FIRMWARE)
        text = payload.decode('utf-8', errors='replace')

        fields = text.split(config.FIRMWARE_SEPARATOR)
        if len(fields) != 2:
            raise InvalidResponse(f"unexpected firmware version string: {text!r}")

        logging.debug(f"Firmware: {fields[0]}, {fields[1]}")
        return fields[0], fields[1]

    def turret_position(self, turret):
        """Current 1-based position of a turret."""
        command = utils.format_command(config.CMD_TURRET_GET, int(turret), 1)
        return codec.decode_decimal(self.query(command), config.MAX_U8)

    def set_turret_position(self, turret, position):
        """
        Move a turret. The range check runs before anything is sent.
        """
        turret = Turret(turret)
        if not turret.accepts(position):
            raise OutOfRange(position, turret.positions)

        command = utils.format_command(config.CMD_TURRET_SET, int(turret), position)
        logging.info(f"Turret {turret.name} -> {position}")
        self.query(command, expect_response=False)

    def light_diaphragm_aperture(self):
        command = utils.format_command(config.CMD_APERTURE_GET, config.LIGHT_DIAPHRAGM, 1)
        return codec.decode_decimal(self.query(command), config.MAX_U8)

    def set_light_diaphragm_aperture(self, position):
        if not 0 <= position <= config.MAX_U8:
            raise OutOfRange(position, config.MAX_U8)

        command = utils.format_command(config.CMD_APERTURE_SET, config.LIGHT_DIAPHRAGM, position)
        self.query(command, expect_response=False)

    def focus_distance(self):
        """Focus (Z) position in motor steps."""
        return codec.decode_zeiss(self.query(config.CMD_FOCUS_GET))

    def set_focus_distance(self, steps):
        command = config.CMD_FOCUS_SET + codec.encode_zeiss(steps)
        logging.info(f"Focus -> {steps} steps ({command})")
        self.query(command, expect_response=False)

    def focus_distance_um(self):
        return codec.steps_to_um(self.focus_distance(), self.config.step_size_um)

    def set_focus_distance_um(self, um):
        self.set_focus_distance(codec.um_to_steps(um, self.config.step_size_um))

    def focus_limit_upper(self):
        return codec.decode_zeiss(self.query(config.CMD_FOCUS_LIMIT_UPPER))

    def focus_limit_lower(self):
        return codec.decode_zeiss(self.query(config.CMD_FOCUS_LIMIT_LOWER))
