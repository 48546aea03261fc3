from . import config


def format_command(code, *params):
    """
    Format an ASCII command string.
    code: str, command code (e.g. 'HPCR')
    params: ints, joined with commas
    format_command('HPCR', 2, 3) returns 'HPCR2,3'
    """
    return code + ",".join(str(int(p)) for p in params)


def frame_command(command):
    """Encode a command string and append the CR terminator."""
    return command.encode('ascii') + bytes([config.TERMINATOR])


def echo_of(command):
    """The two bytes the stand echoes back for this command (code reversed)."""
    return command.encode('ascii')[:config.ECHO_LENGTH][::-1]
