import matplotlib.pyplot as plt
from pyregionlabel import Connectivity, connected_components, chessboard, plot_labels, label_count

image = chessboard(30, 30)

fig, (ax4, ax8) = plt.subplots(1, 2)
four = connected_components(image, Connectivity.FOUR, background=0)
eight = connected_components(image, Connectivity.EIGHT, background=0)

plot_labels(four, ax4, title=f"4-connectivity: {label_count(four)} components")
plot_labels(eight, ax8, title=f"8-connectivity: {label_count(eight)} components")

plt.show()
