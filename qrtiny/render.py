import matplotlib.pyplot as plt
import numpy as np


def paint(QRmatrix, set_module, origin=(0, 0), cell=1, border=0):
    # Drive a renderer that can only set one module at a time.
    # INPUT:
    #  -QRmatrix: square array of module states, indexed [y, x]
    #  -set_module: callable set_module(px, py, cell, dark) painting one cell
    #  -origin: (px, py) of the top left corner of the quiet zone
    #  -cell: side length of one module in renderer units
    #  -border: quiet zone width in modules, painted light
    QRmatrix = np.asarray(QRmatrix)
    size = QRmatrix.shape[0]
    ox, oy = origin
    for y in range(-border, size + border):
        for x in range(-border, size + border):
            dark = 0 <= x < size and 0 <= y < size and bool(QRmatrix[y, x])
            set_module(ox + (x + border)*cell, oy + (y + border)*cell, cell, dark)


def to_text(QRmatrix, border=2):
    """Render the matrix with block characters, two per module."""
    QRmatrix = np.asarray(QRmatrix)
    size = QRmatrix.shape[0]
    lines = []
    blank = "  " * (size + 2*border)
    lines.extend([blank] * border)
    for row in QRmatrix:
        line = "  " * border
        line += "".join("██" if cell else "  " for cell in row)
        line += "  " * border
        lines.append(line)
    lines.extend([blank] * border)
    return "\n".join(lines)


def show(QRmatrix, ax=None):
    QRmatrix = np.asarray(QRmatrix, dtype=int)
    # with no axes given, open a figure and show it
    if ax is None:
        image = plt.matshow(QRmatrix, cmap='Greys')
        plt.show()
        return image
    return ax.matshow(QRmatrix, cmap='Greys')
