# ============================================================
# PixelSorter - Custom Sorter Template
# ============================================================
#
# Rules:
#   1. Define a function called  sort(arr, sink)
#   2. Sort `arr` in-place, all at once - do NOT return a new list.
#   3. Hand every step to `sink`:
#        sink(Action.compare(i, j))   before comparing arr[i] and arr[j]
#        sink(Action.pivot(i))        when position i becomes the pivot
#        swap(arr, i, j, sink)        records AND performs a swap
#      Only swaps may move values, otherwise the animation and the
#      array drift apart.
#   4. Optionally set NAME = "My Algorithm"  (used as display name)
#
# Load it with:  python -m pixelsorter --sorter example_custom_sorter.py
# ============================================================

from pixelsorter.actions import Action
from pixelsorter.sorters import swap

NAME = "Stooge Sort"   # <-- change this to whatever you like


def sort(arr, sink):
    """Stooge Sort - O(n^2.7) - famously terrible, famously entertaining."""

    def stooge(lo, hi):
        sink(Action.compare(lo, hi))
        if arr[lo] > arr[hi]:
            swap(arr, lo, hi, sink)

        if hi - lo + 1 > 2:
            t = (hi - lo + 1) // 3
            stooge(lo, hi - t)
            stooge(lo + t, hi)
            stooge(lo, hi - t)

    if len(arr) > 1:
        stooge(0, len(arr) - 1)
