"""herd_tasks.py"""


def gallop(args):
    print("🐎 galloping")
    return 0


def trot(args):
    for mode in args:
        print(f"🐴 trotting in {mode}")
    return 0


def rest(args):
    print("💤 resting")
    return 0
