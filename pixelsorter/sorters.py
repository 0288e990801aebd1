"""
Sorting algorithms that narrate themselves.

Every algorithm is a plain function sort(arr, sink): it sorts `arr` in
place, to completion, and hands an Action to `sink` for every comparison,
pivot choice and swap it makes. `sink` is any callable, usually the
engine's ActionQueue.
"""
import importlib.util
import logging
import os

from .actions import Action

logger = logging.getLogger(__name__)

ALGORITHMS = [
    ("Quick Sort",     "quick"),
    ("Bubble Sort",    "bubble"),
    ("Selection Sort", "selection"),
    ("Insertion Sort", "insertion"),
]

_custom_sorters: dict = {}


def swap(arr, i, j, sink):
    """Record a swap, then perform it on the logical array."""
    sink(Action.swap(i, j))
    arr[i], arr[j] = arr[j], arr[i]


# ============================================================
# ===================== SORTING ALGORITHMS ===================
# ============================================================

def quick_sort(arr, sink):
    def _q(lo, hi):
        # recurse into the smaller side, loop on the larger one
        while lo < hi:
            pivot = arr[hi]
            sink(Action.pivot(hi))
            i, j = lo, hi - 1
            while i <= j:
                # left pointer stops on something bigger than the pivot
                while i <= j:
                    sink(Action.compare(i, hi))
                    if arr[i] > pivot: break
                    i += 1
                # right pointer stops on something no bigger than the pivot
                while i <= j:
                    sink(Action.compare(j, hi))
                    if arr[j] <= pivot: break
                    j -= 1
                if i < j:
                    swap(arr, i, j, sink)
                    i += 1; j -= 1
            if i != hi and arr[i] > pivot:
                swap(arr, i, hi, sink)
            if i - lo <= hi - i:
                _q(lo, i - 1)
                lo = i + 1
            else:
                _q(i + 1, hi)
                hi = i - 1
    _q(0, len(arr) - 1)


def bubble_sort(arr, sink):
    for i in range(len(arr) - 1, 0, -1):
        # position i is final once this pass is done
        sink(Action.pivot(i))
        swapped = False
        for j in range(i):
            sink(Action.compare(j, j + 1))
            if arr[j] > arr[j + 1]:
                swap(arr, j, j + 1, sink)
                swapped = True
        if not swapped:
            break


def selection_sort(arr, sink):
    n = len(arr)
    for i in range(n - 1):
        sink(Action.pivot(i))
        mi = i
        for j in range(i + 1, n):
            sink(Action.compare(j, mi))
            if arr[j] < arr[mi]: mi = j
        if mi != i:
            swap(arr, i, mi, sink)


def insertion_sort(arr, sink):
    for i in range(1, len(arr)):
        sink(Action.pivot(i))
        j = i
        while j > 0:
            sink(Action.compare(j, j - 1))
            if arr[j] >= arr[j - 1]:
                break
            swap(arr, j, j - 1, sink)
            j -= 1


_BUILTINS = {
    "quick":     quick_sort,
    "bubble":    bubble_sort,
    "selection": selection_sort,
    "insertion": insertion_sort,
}


def get_sorter(key):
    if key in _BUILTINS:
        return _BUILTINS[key]
    if key in _custom_sorters:
        return _custom_sorters[key]["fn"]
    raise KeyError(f"Unknown algorithm: {key}")


def algorithm_name(key):
    for name, k in ALGORITHMS:
        if k == key:
            return name
    return key


# ============================================================
# ==================== CUSTOM SORTER LOADER ==================
# ============================================================

def load_custom_sorter(filepath: str):
    """
    Load a .py file as a custom sorter.
    Must define: NAME (str, optional) and sort(arr, sink).
    Returns ((display_name, key), None) on success, (None, error_str) on failure.
    """
    try:
        filepath = os.path.abspath(filepath)
        spec   = importlib.util.spec_from_file_location("_cs", filepath)
        if spec is None:
            return None, f"Not a Python module: {filepath}"
        module = importlib.util.module_from_spec(spec)
        spec.loader.exec_module(module)
    except Exception as e:
        return None, str(e)
    if not callable(getattr(module, "sort", None)):
        return None, "No sort(arr, sink) function found"
    name = getattr(module, "NAME", os.path.splitext(os.path.basename(filepath))[0])
    key  = f"custom_{len(_custom_sorters)}"
    _custom_sorters[key] = {"fn": module.sort, "path": filepath}
    ALGORITHMS.append((name, key))
    return (name, key), None


def load_custom_sorters(paths):
    """Load every path, logging and skipping the ones that fail."""
    loaded = []
    for path in paths:
        result, err = load_custom_sorter(path)
        if err:
            logger.warning("Skipping custom sorter %s: %s", path, err)
            continue
        loaded.append(result)
    return loaded
