"""
Payload codecs for the stand's two numeric encodings.

ASCII decimal: plain base-10 text, used for turret positions and the
light diaphragm.

Zeiss 24-bit hex: six ASCII hex digits holding a 3-byte value. Values at or
above 0x800000 are negative, but not in two's complement:

    decode: v >= 0x800000 -> -(0xFFFFFF - v)
    encode: n < 0         -> 0xFFFFFF - -(n | 0xF00000)

The pair is reproduced exactly as the stand firmware expects it. It is not
an inverse over the whole range: negatives below -0xFFFFF do not survive the
OR with 0xF00000.
"""
from .errors import InvalidNumber, InvalidResponse, InvalidUTF8, OutOfRange

ZEISS_MAX = 0xFFFFFF
ZEISS_SIGN = 0x800000
ZEISS_NEG_MASK = 0xF00000
ZEISS_BYTES = 3


def decode_decimal(payload, max_value=None):
    """
    Decode an unsigned ASCII decimal payload.
    max_value: optional upper bound (e.g. 255 for 8-bit fields).
    """
    try:
        text = bytes(payload).decode('utf-8')
    except UnicodeDecodeError as e:
        raise InvalidUTF8(f"the response was not valid UTF-8: {bytes(payload)!r}") from e

    if not text.isascii() or not text.isdigit():
        raise InvalidNumber(f"the response contained an unparseable number: {text!r}")

    try:
        value = int(text, 10)
    except ValueError as e:
        raise InvalidNumber(f"the response contained an unparseable number: {len(text)} digits") from e
    if max_value is not None and value > max_value:
        raise InvalidNumber(f"the response contained an unparseable number: {value} > {max_value}")
    return value


def zeiss_to_int(value):
    if value >= ZEISS_SIGN:
        return -(ZEISS_MAX - value)
    return value


def int_to_zeiss(value):
    if value < 0:
        return ZEISS_MAX - -(value | ZEISS_NEG_MASK)
    return value


def decode_zeiss(payload):
    """Decode a 6-hex-digit Zeiss payload into a signed step count."""
    try:
        raw = bytes.fromhex(bytes(payload).decode('ascii'))
    except (UnicodeDecodeError, ValueError) as e:
        raise InvalidNumber(f"the response contained an unparseable number: {bytes(payload)!r}") from e

    if len(raw) != ZEISS_BYTES:
        raise InvalidResponse(f"expected {ZEISS_BYTES} bytes of hex, got {len(raw)}")

    # Left-pad to a 32-bit big-endian word; the top byte is always zero
    value = int.from_bytes(b"\x00" + raw, "big", signed=True)
    return zeiss_to_int(value)


def encode_zeiss(value):
    """Encode a signed step count as six uppercase hex digits."""
    wire = int_to_zeiss(int(value))
    if not 0 <= wire <= ZEISS_MAX:
        raise OutOfRange(value, ZEISS_MAX)
    return f"{wire:06X}"


def steps_to_um(steps, step_size):
    return steps * step_size


def um_to_steps(um, step_size):
    # int() truncates toward zero
    return int(um / step_size)
