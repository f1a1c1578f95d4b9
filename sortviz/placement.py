import os
import sys

import pygame

try:
    import ctypes
    HAS_CTYPES = True
except ImportError:
    HAS_CTYPES = False

# ============================================================
# ===================== WINDOW PLACEMENT =====================
# ============================================================
#
# A placer runs twice around window creation:
#   prepare(size): before pygame.display.set_mode
#   place(size)  : after the window exists
# The base class places nothing and tells the user so; OS specific
# subclasses are picked once at startup by select_placer().

PLACEMENTS = ("right", "left", "none")

SWP_NOSIZE   = 0x0001
SWP_NOZORDER = 0x0004


def placement_origin(hint, desktop, size):
    """Top-left corner for `hint` on a desktop of `desktop` (w, h), or None."""
    if desktop is None:
        return None
    if hint == "right":
        return (desktop[0] // 2, 0)
    if hint == "left":
        return (0, 0)
    return None


def desktop_size():
    try:
        sizes = pygame.display.get_desktop_sizes()
    except (pygame.error, AttributeError):
        return None
    return tuple(sizes[0]) if sizes else None


class WindowPlacer:
    def __init__(self, hint="right"):
        self.hint = hint

    def prepare(self, size):
        pass

    def place(self, size):
        self._advise()

    def _advise(self):
        if self.hint == "none":
            return
        print("Note: Window positioning is not supported here.", file=sys.stderr)
        print(f"Please move this window to the {self.hint} half of your screen manually.",
              file=sys.stderr)


class SdlEnvPlacer(WindowPlacer):
    """Positions the window through SDL_VIDEO_WINDOW_POS, read when the window is created."""

    def __init__(self, hint="right"):
        super().__init__(hint)
        self._placed = False

    def prepare(self, size):
        origin = placement_origin(self.hint, desktop_size(), size)
        if origin is not None:
            os.environ["SDL_VIDEO_WINDOW_POS"] = f"{origin[0]},{origin[1]}"
            self._placed = True

    def place(self, size):
        if not self._placed:
            self._advise()


class Win32Placer(WindowPlacer):
    """Moves the created window with user32.SetWindowPos."""

    def place(self, size):
        origin = placement_origin(self.hint, desktop_size(), size)
        if origin is None:
            self._advise(); return
        try:
            hwnd = pygame.display.get_wm_info()['window']
            ok = ctypes.windll.user32.SetWindowPos(hwnd, 0, origin[0], origin[1], 0, 0,
                                                   SWP_NOSIZE | SWP_NOZORDER)
        except (KeyError, AttributeError, OSError, pygame.error):
            ok = False
        if not ok:
            self._advise()


def select_placer(hint, platform=None, environ=None):
    platform = sys.platform if platform is None else platform
    environ  = os.environ if environ is None else environ
    if hint not in ("right", "left"):
        return WindowPlacer("none")
    if platform == "win32" and HAS_CTYPES:
        return Win32Placer(hint)
    driver = environ.get("SDL_VIDEODRIVER", "")
    if driver in ("dummy", "offscreen"):
        return WindowPlacer(hint)
    # Wayland compositors ignore client-requested positions
    if driver == "wayland" or (environ.get("WAYLAND_DISPLAY") and not environ.get("DISPLAY")):
        return WindowPlacer(hint)
    return SdlEnvPlacer(hint)
