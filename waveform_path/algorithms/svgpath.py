""" SVG Path Generator

Convert a list of heights into a smooth svg path description. Each pair of
neighbouring points is connected by a cubic bezier curve with horizontal
tangents at both points:

.. code-block:: text

    M0 <y0> C<cx1> <cy1> <cx2> <cy2> <x1> <y1> ... [L<w> <h> L0 <h> Z]

The heights are given in percent of the svg height (0 = bottom, 100 = top).
"""

import math
import numpy as np
import waveform_path.utils.logging as logging

from xml.sax.saxutils import escape, quoteattr
from waveform_path.algorithms.signalprocessing import normalize_signal
from waveform_path.utils.config import HYPERPARAMETER, SETTINGS

LOGGER = logging.getLogger(__name__)


def format_number(value) -> str:
    """ Serialize a number like a javascript number to string conversion

    Args:
        value (float): the number

    Returns:
        str: number string e.g. '100', '33.5', '1e-7', 'NaN'
    """
    value = float(value)
    if math.isnan(value): return "NaN"
    if math.isinf(value): return "Infinity" if value > 0 else "-Infinity"
    if value == 0: return "0"
    if 1e-6 <= abs(value) < 1e21:
        return np.format_float_positional(value, trim='-')
    return np.format_float_scientific(value, trim='-', exp_digits=1)


def build_path(heights: list, width: float, height: float, closed: bool = False) -> str:
    """ Generate the svg path for given heights

    Args:
        heights (list): heights in percent for each point along the path
        width (float): width of the svg container
        height (float): height of the svg container
        closed (bool): close the path to a filled area along the bottom edge

    Returns:
        str: svg path description, empty string for less than 2 points
    """
    if len(heights) < 2:
        return ""

    num_points = len(heights)
    step = width / (num_points - 1)
    to_y = lambda h: height * (1 - float(h) / 100)

    segments = ["M0 {}".format(format_number(to_y(heights[0])))]
    for i in range(num_points - 1):
        x1 = i * step
        y1 = to_y(heights[i])
        x2 = (i + 1) * step
        y2 = to_y(heights[i+1])

        cx1 = x1 + (x2 - x1) / 2
        cy1 = y1
        cx2 = x2 - (x2 - x1) / 2
        cy2 = y2

        segments.append("C" + " ".join(format_number(v) for v in (cx1, cy1, cx2, cy2, x2, y2)))

    if closed:
        segments.append("L{} {}".format(format_number(width), format_number(height))) # bottom right
        segments.append("L0 {}".format(format_number(height))) # bottom left
        segments.append("Z")

    return " ".join(segments)


def generate_normalized_path(
        heights: list,
        width: float,
        height: float,
        closed: bool = False,
        lower: float = float(HYPERPARAMETER['path']['lower']),
        upper: float = float(HYPERPARAMETER['path']['upper'])) -> str:
    """ Generate the svg path with heights scaled to [lower, upper]

    Note:
        The default range [2, 99] keeps the curve away from the svg edges.

    Args:
        heights (list): raw heights for each point along the path
        width (float): width of the svg container
        height (float): height of the svg container
        closed (bool): close the path to a filled area along the bottom edge
        lower (float): lower bound for the normalized heights in percent
        upper (float): upper bound for the normalized heights in percent

    Returns:
        str: svg path description
    """
    normalized_heights = normalize_signal(heights, lower, upper)
    path = build_path(normalized_heights, width, height, closed)
    LOGGER.debug("Generate path with %d points (closed=%s)", len(heights), str(closed))
    return path


def paths_to_svg(
        path: str,
        width: float,
        height: float,
        closed: bool = False,
        stroke: str = SETTINGS['svg']['stroke'],
        fill: str = SETTINGS['svg']['fill']) -> bytes:
    """ Wrap a path description into a svg document

    Args:
        path (str): svg path description
        width (float): width of the svg container
        height (float): height of the svg container
        closed (bool): fill the path, otherwise draw only the stroke
        stroke (str): stroke color
        fill (str): fill color for closed paths

    Returns:
        bytes: utf-8 encoded svg document
    """
    w, h = format_number(width), format_number(height)
    header = f'<svg xmlns="http://www.w3.org/2000/svg" width="{w}" height="{h}" viewBox="0 0 {w} {h}">'
    body = f'<path d="{escape(path)}" fill={quoteattr(fill if closed else "none")} stroke={quoteattr(stroke)} stroke-width="1" />'
    footer = "</svg>"
    return (header + body + footer).encode("utf-8")
