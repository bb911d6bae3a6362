""" Public entry points """

from typing import Callable

import waveform_path.utils.logging as logging

from waveform_path.algorithms import signalprocessing, simplify, svgpath


def generate_normalized_path(
        heights: list,
        svg_width: float,
        svg_height: float,
        closed: bool = False) -> str:
    """ Generate a smooth svg path for the heights scaled to the range 2 to 99

    Args:
        heights (list): raw heights for each point along the path
        svg_width (float): width of the svg container
        svg_height (float): height of the svg container
        closed (bool): close the path to a filled area along the bottom edge

    Returns:
        str: svg path description
    """
    return svgpath.generate_normalized_path(heights, svg_width, svg_height, closed)


def simplify_data(points: list, epsilon: float) -> list:
    """ Reduce the points with the Douglas-Peucker algorithm

    Args:
        points (list): signal values
        epsilon (float): tolerance

    Returns:
        list: simplified signal values
    """
    return simplify.simplify_signal(points, epsilon)


def process_array_in_batches(arr: list, batch_size: int, callback: Callable[[list], None]) -> None:
    """ Call the callback with consecutive slices of batch_size values

    Args:
        arr (list): values to process
        batch_size (int): number of values per batch
        callback (Callable[[list], None]): batch handler
    """
    signalprocessing.process_in_batches(arr, batch_size, callback)


def render_svg(
        heights: list,
        svg_width: float,
        svg_height: float,
        closed: bool = False,
        epsilon: float = None) -> bytes:
    """ Render the heights to a svg document

    Args:
        heights (list): raw heights for each point along the path
        svg_width (float): width of the svg container
        svg_height (float): height of the svg container
        closed (bool): close the path to a filled area along the bottom edge
        epsilon (float): simplify the heights with this tolerance before (default is None = no simplification)

    Returns:
        bytes: utf-8 encoded svg document
    """
    logger = logging.getLogger(__name__)
    if epsilon is not None:
        heights = simplify_data(heights, epsilon)

    path = generate_normalized_path(heights, svg_width, svg_height, closed)
    if path == "":
        logger.warning("Not enough points to draw a path")

    return svgpath.paths_to_svg(path, svg_width, svg_height, closed)
