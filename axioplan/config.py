# Axioplan Configuration Constants
from dataclasses import dataclass

# Serial Settings
SERIAL_BAUDRATE = 9600
SERIAL_TIMEOUT_S = 2.0   # Response assembly timeout, reset on every partial read
POLL_INTERVAL_S = 0.005  # Sleep between in_waiting polls

# Framing
TERMINATOR = 0x0D  # CR, appended to commands and ends responses
ECHO_LENGTH = 2    # Response echoes the command code, byte order swapped

# Focus drive
STEP_SIZE_UM = 0.050  # Micrometers per focus motor step

# Command Codes
CMD_FIRMWARE = "HPTv0"
CMD_TURRET_GET = "HPCr"
CMD_TURRET_SET = "HPCR"
CMD_APERTURE_GET = "HPCs"
CMD_APERTURE_SET = "HPCS"
CMD_FOCUS_GET = "FPZp"
CMD_FOCUS_SET = "FPZT"
CMD_FOCUS_LIMIT_UPPER = "FPZu"
CMD_FOCUS_LIMIT_LOWER = "FPZl"

LIGHT_DIAPHRAGM = 4   # Sub-device index of the light diaphragm on HPCs/HPCS
FIRMWARE_SEPARATOR = "_"
MAX_U8 = 255


@dataclass
class ScopeConfig:
    baud_rate: int = SERIAL_BAUDRATE
    timeout_s: float = SERIAL_TIMEOUT_S
    poll_interval_s: float = POLL_INTERVAL_S
    step_size_um: float = STEP_SIZE_UM
