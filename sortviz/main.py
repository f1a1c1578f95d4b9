import random
import sys

import pygame

from sortviz.draw import build_font, draw_bars, overlay_lines
from sortviz.placement import select_placer
from sortviz.settings import RunConfig, parse_config
from sortviz.sorters import CASES, DONE, algorithm_info, get_generator
from sortviz.sound import AudioUnavailable, open_player

# ============================================================
# ========================= MAIN =============================
# ============================================================

RULE = "=" * 40

# longest stretch without checking for ESC or window close
WAIT_SLICE_MS = 50


def _quit(player):
    if player: player.stop()
    pygame.quit(); sys.exit()


def pump_events(player=None):
    """Exit the whole process on window close or ESC; there is no mid-run cancel."""
    for ev in pygame.event.get():
        if ev.type == pygame.QUIT: _quit(player)
        if ev.type == pygame.KEYDOWN and ev.key == pygame.K_ESCAPE: _quit(player)


def wait(ms, player=None):
    """pygame.time.wait in short slices, staying responsive to quit events."""
    while ms > 0:
        pump_events(player)
        s = min(WAIT_SLICE_MS, ms)
        pygame.time.wait(s); ms -= s


def print_banner(cfg):
    name = algorithm_info(cfg.algorithm)[0]
    best, worst = CASES[cfg.algorithm]
    n = cfg.size
    print(f"\n{RULE}\nStarting {name}\n{RULE}")
    print(f"Array size: {n} elements")
    print(f"Delay: {cfg.delay_ms} ms")
    print(f"Worst case: {worst}")
    print(f"Best case: {best}")
    print(f"{RULE}\n")


def print_report(cfg, stats):
    name, _, time_c, space_c = algorithm_info(cfg.algorithm)
    print(f"\n{RULE}\n{name} Complete!\n{RULE}")
    if stats.early_exit:
        print("Array was sorted early, remaining passes skipped")
    print(f"Total comparisons: {stats.comparisons}")
    print(f"Total swaps: {stats.swaps}")
    print(f"Time elapsed: {stats.elapsed_ms()}ms")
    print(f"Time complexity: {time_c}")
    print(f"Space complexity: {space_c}")
    print(RULE)


def run_sort(screen, font, cfg: RunConfig, player=None):
    """
    Shuffle 1..N, then replay the chosen sorter one step per frame:
    draw -> present -> tone -> wait -> let the sorter take its next step.
    Returns the final "done" step.
    """
    if cfg.seed is not None:
        random.seed(cfg.seed)
    arr = list(range(1, cfg.size + 1)); random.shuffle(arr)
    print_banner(cfg)

    draw_bars(screen, arr, None, [False] * len(arr),
              overlay_lines(cfg.algorithm, cfg.size, cfg.delay_ms), font)
    pygame.display.flip()
    wait(cfg.intro_ms, player)

    last = None
    for step in get_generator(cfg.algorithm, arr):
        pump_events(player)
        if step.kind == DONE:
            lines = overlay_lines(cfg.algorithm, cfg.size, cfg.delay_ms, step.stats, "[SORTED]")
            draw_bars(screen, step.array, None, step.sorted, lines, font)
            pygame.display.flip()
            last = step
            continue
        lines = overlay_lines(cfg.algorithm, cfg.size, cfg.delay_ms, step.stats)
        draw_bars(screen, step.array, step.pair, step.sorted, lines, font)
        pygame.display.flip()
        if player and step.focus is not None:
            player.play(step.array[step.focus])
        wait(cfg.delay_ms, player)

    if player: player.stop()
    print_report(cfg, last.stats)
    wait(cfg.outro_ms, player)
    return last


def main(argv=None):
    cfg = parse_config(argv)
    name = algorithm_info(cfg.algorithm)[0]

    pygame.init()
    size = (cfg.width, cfg.height)
    placer = select_placer(cfg.placement)
    placer.prepare(size)
    screen = pygame.display.set_mode(size)
    pygame.display.set_caption(f"{name} - Sorting Visualizer")
    placer.place(size)
    print("Window created successfully")
    print("Press ESC to quit anytime")

    try:
        player = open_player(cfg)
    except AudioUnavailable:
        pygame.quit()
        sys.exit("Audio initialization failed")

    try:
        run_sort(screen, build_font(), cfg, player)
    finally:
        if player: player.stop()
        pygame.quit()


if __name__ == "__main__":
    main()
