import matplotlib.pyplot as plt
from typing import Optional
from matplotlib.axes import Axes
import numpy as np
import plotly.graph_objects as go


def plot_labels(
    labels: np.ndarray,
    ax: Optional[Axes] = None,
    cmap: str = "nipy_spectral",
    title: str = "Connected Components",
    show_background: bool = False,
):
    """
    Plot a label grid produced by ``connected_components`` using Matplotlib.

    Parameters
    ----------
    labels : np.ndarray
        A (height, width) array of component ids, 0 for background.
    ax : matplotlib.axes.Axes, optional
        An optional Matplotlib axis to plot on. A new figure is created if None.
    cmap : str, optional
        Colormap used for the component ids, by default 'nipy_spectral'.
    title : str, optional
        Title of the plot.
    show_background : bool, optional
        If False (default), background pixels are left transparent.

    Returns
    -------
    matplotlib.axes.Axes
        The axis used for plotting.
    """

    labels = np.asarray(labels)
    if ax is None:
        fig, ax = plt.subplots()

    data = labels if show_background else np.ma.masked_equal(labels, 0)
    vmax = max(int(labels.max()) if labels.size else 0, 1)
    ax.imshow(data, cmap=cmap, vmin=0, vmax=vmax, interpolation="nearest")
    ax.set_title(title)
    ax.set_xticks([])
    ax.set_yticks([])
    return ax


def plot_labels_plotly(
    labels: np.ndarray,
    fig: Optional[go.Figure] = None,
    colorscale: str = "Turbo",
    title: str = "Connected Components",
):
    """
    Plot a label grid using a Plotly heatmap. Background pixels are left blank.

    Parameters
    ----------
    labels : np.ndarray
        A (height, width) array of component ids, 0 for background.
    fig : plotly.graph_objects.Figure, optional
        Existing figure to add to, or None to create a new one.
    colorscale : str, optional
        Plotly colorscale name. Default is "Turbo".
    title : str, optional
        Title of the plot.

    Returns
    -------
    plotly.graph_objects.Figure
        The updated or newly created Plotly figure.
    """

    labels = np.asarray(labels)
    if fig is None:
        fig = go.Figure()

    z = np.where(labels == 0, np.nan, labels.astype(float))
    fig.add_trace(go.Heatmap(
        z=z,
        colorscale=colorscale,
        hovertemplate="x=%{x}<br>y=%{y}<br>label=%{z}<extra></extra>",
        name="Labels"
    ))

    fig.update_layout(
        title=title,
        yaxis=dict(autorange="reversed", scaleanchor="x"),
        margin=dict(l=0, r=0, b=0, t=30)
    )
    return fig
