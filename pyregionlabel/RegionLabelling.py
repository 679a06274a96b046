"""
Region Labelling module
=======================

Connected-component labelling assigns every foreground pixel of a 2-D grid an
integer id so that two pixels share an id exactly when they can be joined by a
path of adjacent pixels with the same value. A pixel belongs to the background
iff it equals a caller-supplied background value; adjacency is either the four
axis-aligned neighbours or all eight surrounding pixels.

The labelling is computed in two raster passes:

* a *causal scan* that gives each foreground pixel a provisional label, taken
  from its already-visited equal-valued neighbours where possible, and records
  every pair of provisional labels found to touch in a
  :class:`~pyregionlabel.DisjointSetForest`; and
* a *compaction* pass that replaces each provisional label by a dense id
  ``1..K`` numbered in order of first appearance.

Both passes are linear in the number of pixels. The result does not depend on
which representative the forest picks for a class, so any forest with
``union`` and ``root`` can be substituted through ``forest_factory``.
"""

import logging
import numbers
from enum import Enum
from typing import Any, Callable, Union

import numpy as np

from pyregionlabel.DisjointSetForest import DisjointSetForest
from pyregionlabel.grid_utils import as_background, as_pixel_rows


class Connectivity(Enum):
    """Which neighbours of a pixel are considered adjacent to it."""

    FOUR = 4  # N, S, E and W neighbours
    EIGHT = 8  # all surrounding neighbours

    @classmethod
    def coerce(cls, value: Union["Connectivity", str, int]) -> "Connectivity":
        """Accept a ``Connectivity``, ``"four"``/``"eight"`` or an integer ``4``/``8``
        (numpy integers included)."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls[value.upper()]
            except KeyError:
                pass
        elif isinstance(value, numbers.Integral) and not isinstance(value, bool):
            try:
                return cls(int(value))
            except ValueError:
                pass
        raise ValueError(f"connectivity must be 'four' or 'eight', got {value!r}")


def connected_components(
    image: Any,
    connectivity: Union[Connectivity, str, int] = Connectivity.EIGHT,
    background: Any = 0,
    forest_factory: Callable[[int], Any] = DisjointSetForest,
) -> np.ndarray:
    """Label the connected foreground components of a 2-D grid.

    Parameters
    ----------
    image : array_like
        A (height, width) grid of scalar pixels or a (height, width, channels)
        grid of multi-channel pixels.
    connectivity : Connectivity, str or int, optional
        ``Connectivity.FOUR`` or ``Connectivity.EIGHT``. Default is EIGHT.
    background : scalar or sequence, optional
        Pixels equal to this value are background. Default is 0.
    forest_factory : callable, optional
        Builds the disjoint-set forest from a universe size. The returned
        object must provide ``union(a, b)`` and ``root(a)``.

    Returns
    -------
    np.ndarray
        A (height, width) ``uint32`` array: 0 for background pixels and
        ``1..K`` for the K components, numbered in raster order of their
        first pixel.

    Notes
    -----
    Pixels are compared by value. NaN pixels in a float grid compare equal to
    each other, so adjacent NaNs form one component and ``background=np.nan``
    marks them as background.

    """
    conn = Connectivity.coerce(connectivity)
    rows, width, height, channels = as_pixel_rows(image)
    bg = as_background(background, channels)

    out = np.zeros((height, width), dtype=np.uint32)
    if width == 0 or height == 0:
        logging.debug("Empty %dx%d grid, nothing to label", width, height)
        return out

    image_size = width * height
    # labels run 1..image_size, so the forest needs one extra slot
    forest = forest_factory(image_size + 1)
    labels = [0] * image_size
    next_label = 1
    num_background = 0
    eight = conn is Connectivity.EIGHT

    # ---------- 1.  causal scan -------------------------------------------
    for y in range(height):
        row = rows[y]
        above = rows[y - 1] if y > 0 else None
        offset = y * width
        for x in range(width):
            current = row[x]
            if current == bg:
                num_background += 1
                continue

            i = offset + x
            adjacent = []
            if x > 0 and row[x - 1] == current:
                # West
                adjacent.append(labels[i - 1])
            if above is not None:
                if above[x] == current:
                    # North
                    adjacent.append(labels[i - width])
                if eight:
                    if x > 0 and above[x - 1] == current:
                        # North West
                        adjacent.append(labels[i - width - 1])
                    if x < width - 1 and above[x + 1] == current:
                        # North East
                        adjacent.append(labels[i - width + 1])

            if not adjacent:
                labels[i] = next_label
                next_label += 1
            else:
                min_label = min(adjacent)
                labels[i] = min_label
                for label in adjacent:
                    forest.union(min_label, label)

    if num_background == 0:
        logging.warning(
            "Background value %r does not occur in the image; "
            "every pixel is foreground.",
            background,
        )

    # ---------- 2.  compaction --------------------------------------------
    output_labels = [0] * next_label
    count = 0
    flat = out.reshape(-1)
    for i, label in enumerate(labels):
        if label == 0:
            continue
        root = forest.root(label)
        output_label = output_labels[root]
        if output_label == 0:
            count += 1
            output_label = count
            output_labels[root] = output_label
        flat[i] = output_label

    logging.debug(
        "Labelled %dx%d grid: %d provisional labels, %d components",
        width,
        height,
        next_label - 1,
        count,
    )
    return out


def label_count(labels: np.ndarray) -> int:
    """Return the number of components in a grid produced by
    :func:`connected_components`."""
    labels = np.asarray(labels)
    if labels.size == 0:
        return 0
    return int(labels.max())
