"""
herd.py

Try:
    python herd.py --ponies 3 gallop --tired trot "mode bullet" "mode rocket"
    python herd.py -vv gallop + trot "mode bullet" "mode rocket"
    python herd.py trot --help
"""
import logging

from stampede import Stampede, ValidationResult
from stampede.hook_manager import HookType
from stampede.utils import setup_logging

setup_logging(log_filename=None, console_log_level=logging.DEBUG)
logging.getLogger("stampede").setLevel(logging.WARNING)

herd = Stampede(
    program="herd",
    banner="🐎 Herd",
    version="1.0.0",
    delimiters=["+"],
    description="Move a herd of ponies through a sequence of gaits.",
)


def at_most_ten(value: int) -> ValidationResult:
    if value > 10:
        return ValidationResult.reject("at most 10 ponies fit in the stable")
    return ValidationResult.accept()


def gallop(args: list[str]) -> int:
    ponies = herd.get_flag("ponies", expected=int)
    pace = "slowly" if herd.get_flag("tired", scope="gallop") else "fast"
    print(f"🐎 {ponies} ponies gallop {pace}")
    return 0


def trot(args: list[str]) -> int:
    for mode in args:
        print(f"🐴 trotting in {mode}")
    return 0


def check_modes(args: list[str]) -> ValidationResult:
    if len(set(args)) != len(args):
        return ValidationResult.reject("trot modes must be distinct")
    return ValidationResult.accept()


herd.add_flag(("-p", "--ponies"), "Number of ponies", default=1, validator=at_most_ten)
herd.add_action("gallop", gallop, description="Run as fast as possible")
herd.add_flag(("--tired",), "Gallop a little slower", type=bool, scope="gallop")
herd.add_action(
    "trot",
    trot,
    arity=-2,
    description="Trot through two or more modes",
    validator=check_modes,
)
herd.register_hook(HookType.AFTER, lambda context: print(f"  ⏱ {context.duration:.3f}s"))

if __name__ == "__main__":
    herd.run(summary=True)
