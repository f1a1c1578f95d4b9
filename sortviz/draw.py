import pygame

from sortviz.sorters import algorithm_info

# ============================================================
# ======================= COLOR / DRAW =======================
# ============================================================

BACKGROUND_COLOR = (20, 20, 30)
SORTED_COLOR     = (0, 255, 0)
ACTIVE_COLOR     = (255, 50, 50)
TEXT_COLOR       = (255, 255, 255)
BAR_SPACING      = 1

# Rainbow: value 1 sits near red, the largest value near violet (280 deg).
HUE_SPAN   = 280.0
SATURATION = 80
BRIGHTNESS = 90

TEXT_X      = 10
TEXT_Y      = 10
LINE_HEIGHT = 25


def value_to_color(value, max_value):
    hue = (value * HUE_SPAN) / max(1, max_value)
    c = pygame.Color(0, 0, 0)
    c.hsva = (min(max(hue, 0.0), 360.0), SATURATION, BRIGHTNESS, 100)
    return (c.r, c.g, c.b)


def bar_color(index, value, max_value, pair, sorted_mask):
    """Sorted beats highlighted beats rainbow."""
    if sorted_mask and sorted_mask[index]:
        return SORTED_COLOR
    if pair and index in pair:
        return ACTIVE_COLOR
    return value_to_color(value, max_value)


def overlay_lines(key, size, delay_ms, stats=None, status=""):
    name, _, time_c, space_c = algorithm_info(key)
    title = f"Algorithm: {name}"
    if status:
        title += f"  {status}"
    lines = [
        title,
        f"Time Complexity: {time_c}",
        f"Space Complexity: {space_c}",
        f"Array Size: {size}",
        f"Delay: {delay_ms}ms",
    ]
    if stats is not None:
        lines.append(f"Comparisons: {stats.comparisons}   Swaps: {stats.swaps}")
    return lines


def draw_bars(screen, array, pair, sorted_mask, lines=(), font=None):
    """
    Paint one frame onto `screen`. Nothing is kept between calls.
    Presenting the frame (pygame.display.flip) is left to the caller.
    """
    screen.fill(BACKGROUND_COLOR)
    width, height = screen.get_size()
    n = len(array)
    if n:
        bw = width / n
        for i, v in enumerate(array):
            # snap edges to whole pixels so every bar touches the bottom row
            # and neighbouring columns tile without drift
            left  = round(i * bw)
            right = round((i + 1) * bw)
            top   = round(height - (v / n) * height)
            c = bar_color(i, v, n, pair, sorted_mask)
            pygame.draw.rect(screen, c, (left, top, max(1, right - left - BAR_SPACING), height - top))
    if font is not None:
        for row, text in enumerate(lines):
            screen.blit(font.render(text, True, TEXT_COLOR),
                        (TEXT_X, TEXT_Y + row * LINE_HEIGHT))


def build_font(size=18):
    # SysFont takes a comma separated preference list and falls back to the default font
    return pygame.font.SysFont("consolas,dejavusansmono,couriernew,lucidaconsole", size)
