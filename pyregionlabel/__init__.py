from pyregionlabel.DisjointSetForest import DisjointSetForest
from pyregionlabel.RegionLabelling import (
    Connectivity,
    connected_components,
    label_count
)
from pyregionlabel.grid_utils import chessboard
from pyregionlabel.plotting import (
    plot_labels,
    plot_labels_plotly
)

__all__ = [
    "DisjointSetForest",
    "Connectivity",
    "connected_components",
    "label_count",
    "chessboard",
    "plot_labels",
    "plot_labels_plotly",
]
