import time

# ============================================================
# ===================== SORTING ALGORITHMS ===================
# ============================================================
#
# Every sorter is a generator: sort(arr) mutates `arr` in place and yields a
# Step after each comparison and each swap. The caller owns frames, tones
# and delays; a sorter never touches pygame or sleeps.
#
# Contract:
#   - a "compare" step is yielded for every comparison performed
#   - a "swap" step is yielded right after every swap
#   - exactly one "done" step ends the run, with every position sorted

COMPARE = "compare"
SWAP    = "swap"
DONE    = "done"

# (display name, key, time complexity, space complexity)
ALGORITHMS = [
    ("Bubble Sort",    "bubble",    "O(n^2)", "O(1)"),
    ("Selection Sort", "selection", "O(n^2)", "O(1)"),
]

# (best case, worst case) comparison growth, for the run banner
CASES = {
    "bubble":    ("O(n)",   "O(n^2)"),
    "selection": ("O(n^2)", "O(n^2)"),
}


class RunStats:
    """
    Counters for one run.

    Attributes
    ----------
    comparisons : int     comparisons performed so far
    swaps       : int     swaps performed so far
    started     : float   time.monotonic() when the run began
    finished    : float   time.monotonic() when the run ended (None while running)
    early_exit  : bool    True when a sorted pass let bubble sort skip passes
    """
    __slots__ = ('comparisons', 'swaps', 'started', 'finished', 'early_exit')

    def __init__(self):
        self.comparisons = 0
        self.swaps       = 0
        self.started     = time.monotonic()
        self.finished    = None
        self.early_exit  = False

    def copy(self):
        c = RunStats.__new__(RunStats)
        for name in RunStats.__slots__:
            setattr(c, name, getattr(self, name))
        return c

    def elapsed_ms(self) -> int:
        end = self.finished if self.finished is not None else time.monotonic()
        return int((end - self.started) * 1000)


class Step:
    """One observable step of a sorter, with snapshots of the state after it."""
    __slots__ = ('kind', 'pair', 'focus', 'array', 'sorted', 'stats')

    def __init__(self, kind, pair, focus, array, sorted_mask, stats):
        self.kind   = kind
        self.pair   = pair
        self.focus  = focus
        self.array  = list(array)
        self.sorted = list(sorted_mask)
        self.stats  = stats.copy()

    def __repr__(self):
        return f"Step({self.kind!r}, pair={self.pair}, focus={self.focus})"


def _finish(arr, done, st):
    done[:] = [True] * len(arr)
    st.finished = time.monotonic()
    return Step(DONE, None, None, arr, done, st)


def bubble_sort(arr):
    """
    Bubble Sort - O(n^2) time, O(1) space.

    Compares neighbours and swaps them when out of order; the largest
    unsorted value sinks to the end of every pass. A pass without swaps
    means the rest is already in order and ends the run.
    """
    n = len(arr); done = [False] * n; st = RunStats()
    for i in range(n - 1):
        swapped = False
        for j in range(n - 1 - i):
            st.comparisons += 1
            yield Step(COMPARE, (j, j+1), j, arr, done, st)
            if arr[j] > arr[j+1]:
                arr[j], arr[j+1] = arr[j+1], arr[j]; st.swaps += 1; swapped = True
                yield Step(SWAP, (j, j+1), j+1, arr, done, st)
        done[n-1-i] = True
        if not swapped:
            for k in range(n - 1 - i): done[k] = True
            # only counts as early when passes were actually skipped
            st.early_exit = i < n - 2
            break
    yield _finish(arr, done, st)


def selection_sort(arr):
    """
    Selection Sort - O(n^2) time, O(1) space.

    Scans the unsorted tail for its smallest value and swaps it to the
    front of the tail. Always performs n(n-1)/2 comparisons.
    """
    n = len(arr); done = [False] * n; st = RunStats()
    for i in range(n - 1):
        mi = i
        for j in range(i + 1, n):
            st.comparisons += 1
            yield Step(COMPARE, (mi, j), j, arr, done, st)
            if arr[j] < arr[mi]: mi = j
        if mi != i:
            arr[i], arr[mi] = arr[mi], arr[i]; st.swaps += 1
            yield Step(SWAP, (i, mi), i, arr, done, st)
        done[i] = True
    yield _finish(arr, done, st)


def get_generator(key, arr):
    builtins = {
        "bubble":    lambda: bubble_sort(arr),
        "selection": lambda: selection_sort(arr),
    }
    if key in builtins: return builtins[key]()
    raise KeyError(f"Unknown key: {key}")


def algorithm_info(key):
    """Return the (name, key, time, space) registry entry for `key`."""
    for entry in ALGORITHMS:
        if entry[1] == key:
            return entry
    raise KeyError(f"Unknown key: {key}")


def algorithm_keys():
    return [k for _, k, _, _ in ALGORITHMS]
