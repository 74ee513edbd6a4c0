"""
Plain-text rendering of a board observation.
"""
import numpy as np

from .cell import FLAGGED_VALUE, HIDDEN_VALUE, MINE_VALUE


def render_observation(obs: np.ndarray) -> str:
    """
    Render an observation array as rows of single-character cells.

    Hidden cells show ``.``, flags ``F``, mines ``*``, empty cells a
    blank and numbered cells their count.
    """
    lines = []
    for row in obs:
        row_str = ""
        for val in row:
            if val == HIDDEN_VALUE:
                row_str += "."
            elif val == FLAGGED_VALUE:
                row_str += "F"
            elif val == MINE_VALUE:
                row_str += "*"
            elif val == 0:
                row_str += " "
            else:
                row_str += str(val)
            row_str += " "
        lines.append(row_str)

    return "\n".join(lines)
