import argparse
import sys

from sortviz.placement import PLACEMENTS
from sortviz.sorters import algorithm_keys

# ============================================================
# ===================== USER SETTINGS ========================
# ============================================================
#
# Defaults for one run. Everything here can be overridden on the command
# line; out of range values are clamped and malformed ones fall back to
# the default, a bad setting never stops the program.

ALGORITHM     = "bubble"
ARRAY_SIZE    = 100
DELAY_MS      = 10          # milliseconds between steps
WINDOW_WIDTH  = 800
WINDOW_HEIGHT = 600
PLACEMENT     = "right"
FREQ_LOW      = 200.0
FREQ_HIGH     = 2000.0
TONE_MS       = 50
INTRO_MS      = 1000        # pause on the shuffled array before sorting
OUTRO_MS      = 2000        # pause on the sorted array before exiting

AUDIO_FAILURE_POLICIES = ("abort", "mute")

SIZE_RANGE   = (1, 10000)
DELAY_RANGE  = (0, 1000)
WIDTH_RANGE  = (200, 7680)
HEIGHT_RANGE = (150, 4320)
FREQ_RANGE   = (20.0, 20000.0)
TONE_RANGE   = (5, 1000)

# const for an option given without a value, e.g. a trailing "--size"
MISSING = ""


class RunConfig:
    """Everything a run needs, passed explicitly into the application loop."""
    __slots__ = ('algorithm', 'size', 'delay_ms', 'width', 'height', 'placement',
                 'freq_lo', 'freq_hi', 'tone_ms', 'sound', 'on_audio_failure',
                 'seed', 'intro_ms', 'outro_ms')

    def __init__(self, algorithm=ALGORITHM, size=ARRAY_SIZE, delay_ms=DELAY_MS,
                 width=WINDOW_WIDTH, height=WINDOW_HEIGHT, placement=PLACEMENT,
                 freq_lo=FREQ_LOW, freq_hi=FREQ_HIGH, tone_ms=TONE_MS, sound=True,
                 on_audio_failure="abort", seed=None, intro_ms=INTRO_MS,
                 outro_ms=OUTRO_MS):
        self.algorithm        = algorithm
        self.size             = size
        self.delay_ms         = delay_ms
        self.width            = width
        self.height           = height
        self.placement        = placement
        self.freq_lo          = freq_lo
        self.freq_hi          = freq_hi
        self.tone_ms          = tone_ms
        self.sound            = sound
        self.on_audio_failure = on_audio_failure
        self.seed             = seed
        self.intro_ms         = intro_ms
        self.outro_ms         = outro_ms

    def __repr__(self):
        fields = ", ".join(f"{k}={getattr(self, k)!r}" for k in self.__slots__)
        return f"RunConfig({fields})"


def clamp(value, bounds):
    lo, hi = bounds
    return max(lo, min(hi, value))


def _note(msg):
    print(f"Note: {msg}", file=sys.stderr)


def _number(text, default, flag, cast=int):
    if text is None:
        return default
    if text == MISSING:
        _note(f"{flag} given without a value, using {default}")
        return default
    try:
        return cast(text)
    except ValueError:
        _note(f"ignoring invalid {flag} value {text!r}, using {default}")
        return default


def _choice(text, choices, default, what):
    if text is None:
        return default
    if text == MISSING:
        _note(f"no {what} given, using {default!r}")
        return default
    token = text.lower()
    if token in choices:
        return token
    _note(f"unknown {what} {text!r}, using {default!r}")
    return default


def _pick_algorithm(first, extra):
    """
    The algorithm token may sit anywhere among the positionals. Use the
    first known token; stray words are left in `extra` to be reported.
    """
    keys = algorithm_keys()
    if first is not None and first.lower() in keys:
        return first.lower()
    for token in extra:
        if token.lower() in keys:
            extra.remove(token)
            if first is not None:
                _note(f"unknown algorithm {first!r} ignored")
            return token.lower()
    return _choice(first, keys, ALGORITHM, "algorithm")


def build_parser():
    p = argparse.ArgumentParser(
        prog="sortviz",
        description="Watch and hear comparison sorts step by step.")
    p.add_argument("algorithm", nargs="?", default=None,
                   help=f"one of: {', '.join(algorithm_keys())} (default: {ALGORITHM})")

    # Values are read as text and a bare flag yields MISSING, so a typo or a
    # dangling option falls back to the default instead of exiting.
    def value(flag, metavar, help):
        p.add_argument(flag, nargs="?", const=MISSING, metavar=metavar, help=help)

    value("--size", "N",
          f"number of bars, {SIZE_RANGE[0]}-{SIZE_RANGE[1]} (default: {ARRAY_SIZE})")
    value("--delay", "MS",
          f"pause between steps, {DELAY_RANGE[0]}-{DELAY_RANGE[1]} ms (default: {DELAY_MS})")
    value("--width", "PX", f"window width (default: {WINDOW_WIDTH})")
    value("--height", "PX", f"window height (default: {WINDOW_HEIGHT})")
    value("--place", "WHERE", f"window placement: {', '.join(PLACEMENTS)} (default: {PLACEMENT})")
    value("--freq-min", "HZ", f"pitch of the smallest bar (default: {FREQ_LOW:.0f})")
    value("--freq-max", "HZ", f"pitch of the largest bar (default: {FREQ_HIGH:.0f})")
    value("--tone", "MS", f"tone length (default: {TONE_MS})")
    p.add_argument("--mute", action="store_true", help="run without sound")
    value("--on-audio-failure", "POLICY",
          "abort (default) or mute when no audio device is available")
    value("--seed", "INT", "seed for a reproducible shuffle")
    return p


def parse_config(argv=None) -> RunConfig:
    args, extra = build_parser().parse_known_args(argv)
    algorithm = _pick_algorithm(args.algorithm, extra)
    if extra:
        _note(f"ignoring unrecognized arguments: {' '.join(extra)}")

    freq_lo = clamp(_number(args.freq_min, FREQ_LOW, "--freq-min", float), FREQ_RANGE)
    freq_hi = clamp(_number(args.freq_max, FREQ_HIGH, "--freq-max", float), FREQ_RANGE)
    if freq_lo >= freq_hi:
        _note(f"--freq-min must be below --freq-max, using {FREQ_LOW:.0f}-{FREQ_HIGH:.0f} Hz")
        freq_lo, freq_hi = FREQ_LOW, FREQ_HIGH

    return RunConfig(
        algorithm=algorithm,
        size=clamp(_number(args.size, ARRAY_SIZE, "--size"), SIZE_RANGE),
        delay_ms=clamp(_number(args.delay, DELAY_MS, "--delay"), DELAY_RANGE),
        width=clamp(_number(args.width, WINDOW_WIDTH, "--width"), WIDTH_RANGE),
        height=clamp(_number(args.height, WINDOW_HEIGHT, "--height"), HEIGHT_RANGE),
        placement=_choice(args.place, PLACEMENTS, PLACEMENT, "placement"),
        freq_lo=freq_lo,
        freq_hi=freq_hi,
        tone_ms=clamp(_number(args.tone, TONE_MS, "--tone"), TONE_RANGE),
        sound=not args.mute,
        on_audio_failure=_choice(args.on_audio_failure, AUDIO_FAILURE_POLICIES,
                                 "abort", "audio failure policy"),
        seed=_number(args.seed, None, "--seed"),
    )
