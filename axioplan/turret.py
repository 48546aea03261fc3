from enum import IntEnum


class Turret(IntEnum):
    """Motorized assemblies addressed by the HPCr/HPCR commands."""
    UNKNOWN = 0
    REFLECTOR = 1
    OBJECTIVE = 2
    DENSITY_FILTER_1 = 3
    DENSITY_FILTER_2 = 4
    CONDENSER = 5

    @property
    def positions(self):
        return TURRET_POSITIONS[self]

    def accepts(self, position):
        """True if position is a valid 1-based index for this turret."""
        return 0 < position <= self.positions


# Non-indexed assemblies report 0 positions
TURRET_POSITIONS = {
    Turret.UNKNOWN: 0,
    Turret.REFLECTOR: 0,
    Turret.OBJECTIVE: 6,
    Turret.DENSITY_FILTER_1: 4,
    Turret.DENSITY_FILTER_2: 4,
    Turret.CONDENSER: 0,
}
