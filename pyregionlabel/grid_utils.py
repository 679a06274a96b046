import numpy as np
from typing import Any, Hashable, List, Optional, Tuple


class _NaNPixel:
    """Stand-in for a NaN pixel value; equal only to itself."""

    def __repr__(self) -> str:
        return "nan"


NAN_PIXEL = _NaNPixel()


def _canonical(value: Any) -> Any:
    # NaN != NaN, so map every NaN onto one shared value
    if isinstance(value, (float, complex)) and value != value:
        return NAN_PIXEL
    return value


def as_pixel_rows(image: Any) -> Tuple[List[List[Hashable]], int, int, Optional[int]]:
    """
    Normalise a grid into row-major lists of comparable pixel values.

    Parameters
    ----------
    image : array_like
        Either a (height, width) grid of scalar pixels or a
        (height, width, channels) grid of multi-channel pixels.

    Returns
    -------
    Tuple[List[List[Hashable]], int, int, Optional[int]]
        ``(rows, width, height, channels)`` where ``rows[y][x]`` is the pixel
        at ``(x, y)`` and ``channels`` is None for a scalar-pixel grid.
        Multi-channel pixels are returned as tuples so that two pixels compare
        equal iff every channel matches. NaN values are replaced by
        ``NAN_PIXEL`` so that they compare equal to each other.
    """

    arr = np.asarray(image)
    if arr.ndim not in (2, 3):
        raise ValueError(
            f"image must be 2-D (height, width) or 3-D (height, width, channels), "
            f"got {arr.ndim}-D"
        )

    height, width = arr.shape[:2]
    channels = arr.shape[2] if arr.ndim == 3 else None
    has_nan = arr.dtype.kind in "fc" and bool(np.isnan(arr).any())

    if arr.ndim == 2:
        rows = arr.tolist()
        if has_nan:
            rows = [[_canonical(px) for px in row] for row in rows]
    elif has_nan:
        rows = [[tuple(_canonical(c) for c in px) for px in row] for row in arr.tolist()]
    else:
        rows = [[tuple(px) for px in row] for row in arr.tolist()]
    return rows, width, height, channels


def as_background(background: Any, channels: Optional[int]) -> Hashable:
    """
    Normalise the background pixel to match the output of ``as_pixel_rows``.

    Parameters
    ----------
    background : scalar or sequence
        The background pixel value.
    channels : int or None
        Number of channels per pixel, or None for a scalar-pixel grid.

    Returns
    -------
    Hashable
        A scalar for scalar grids, a tuple of length ``channels`` otherwise.
    """

    bg = np.asarray(background)
    if channels is None:
        if bg.ndim != 0:
            raise ValueError("background must be a scalar for a 2-D image")
        return _canonical(bg.item())

    if bg.ndim == 0:
        return tuple([_canonical(bg.item())] * channels)
    if bg.shape != (channels,):
        raise ValueError(
            f"background must have {channels} channels, got shape {bg.shape}"
        )
    return tuple(_canonical(c) for c in bg.tolist())


def chessboard(width: int, height: int, on: int = 255, off: int = 0) -> np.ndarray:
    """
    Build a (height, width) chessboard grid: ``on`` where ``x + y`` is even,
    ``off`` elsewhere.

    Under 8-connectivity the ``on`` cells form a single component, under
    4-connectivity each one is isolated.
    """

    ys, xs = np.indices((height, width))
    return np.where((xs + ys) % 2 == 0, on, off)
