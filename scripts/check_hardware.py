import sys
import logging
# Add project root to path
sys.path.append(".")

from axioplan.errors import ScopeError
from axioplan.scope import Scope
from axioplan.turret import Turret


def read_int(prompt):
    try:
        return int(input(prompt))
    except ValueError:
        print("Invalid integer")
        return None


def choose_turret():
    for t in Turret:
        if t is not Turret.UNKNOWN:
            print(f"  [{t.value}] {t.name} ({t.positions} positions)")
    code = read_int("Turret: ")
    if code is None:
        return None
    try:
        return Turret(code)
    except ValueError:
        print("Unknown turret")
        return None


def run_choice(scope, choice):
    """Run one menu entry. Returns False when the user quits."""
    if choice == 'q':
        return False

    elif choice == '1':
        stand, controller = scope.firmware_version()
        print(f">> Firmware: {stand} / {controller}")

    elif choice == '2':
        turret = choose_turret()
        if turret is not None:
            print(f">> {turret.name} at position {scope.turret_position(turret)}")

    elif choice == '3':
        turret = choose_turret()
        if turret is not None:
            pos = read_int(f"Position (1-{turret.positions}): ")
            if pos is not None:
                scope.set_turret_position(turret, pos)
                print(">> SENT")

    elif choice == '4':
        print(f">> Aperture: {scope.light_diaphragm_aperture()}")

    elif choice == '5':
        level = read_int("Aperture (0-255): ")
        if level is not None:
            scope.set_light_diaphragm_aperture(level)
            print(">> SENT")

    elif choice == '6':
        print(f">> Focus: {scope.focus_distance()} steps ({scope.focus_distance_um():.3f} um)")

    elif choice == '7':
        steps = read_int("Focus (steps): ")
        if steps is not None:
            scope.set_focus_distance(steps)
            print(">> SENT")

    elif choice == 'u':
        try:
            um = float(input("Focus (um): "))
        except ValueError:
            print("Invalid number")
        else:
            scope.set_focus_distance_um(um)
            print(">> SENT")

    elif choice == '8':
        print(f">> Focus limits: {scope.focus_limit_lower()} .. {scope.focus_limit_upper()}")

    elif choice == 'r':
        cmd = input("Raw command: ").strip()
        if cmd:
            print(f">> {scope.raw_query(cmd)!r}")

    else:
        print("Unknown command")

    return True


def main():
    logging.basicConfig(level=logging.INFO)
    print("=== Axioplan Hardware Check ===")
    port = input("Enter serial port (e.g. /dev/ttyUSB0): ").strip()
    if not port:
        print("No port entered. Exiting.")
        return

    print(f"Connecting to {port}...")
    try:
        scope = Scope(port)
    except ScopeError as e:
        print(f"Connection Failed: {e}")
        return

    with scope:
        while True:
            print("\n--- MENU ---")
            print("[1] Firmware version")
            print("[2] Get turret position")
            print("[3] Set turret position")
            print("[4] Get light diaphragm aperture")
            print("[5] Set light diaphragm aperture")
            print("[6] Get focus")
            print("[7] Set focus (steps)")
            print("[u] Set focus (um)")
            print("[8] Focus limits")
            print("[r] Raw query")
            print("[q] Quit")

            choice = input("Select: ").strip().lower()
            try:
                if not run_choice(scope, choice):
                    break
            except ScopeError as e:
                print(f">> FAILED: {e}")


if __name__ == "__main__":
    main()
