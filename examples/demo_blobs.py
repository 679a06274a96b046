import numpy as np
from scipy import ndimage
from pyregionlabel import Connectivity, connected_components, plot_labels_plotly, label_count

rng = np.random.default_rng(0)
noise = ndimage.gaussian_filter(rng.random((120, 160)), sigma=4)

# quantise into three levels; level 0 is background
image = np.digitize(noise, np.quantile(noise, [0.5, 0.75]))

labels = connected_components(image, Connectivity.EIGHT, background=0)
fig = plot_labels_plotly(labels, title=f"{label_count(labels)} regions")
fig.show()
