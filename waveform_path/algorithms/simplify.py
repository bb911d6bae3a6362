""" Douglas-Peucker simplification for 1D signals """

import numpy as np
import waveform_path.utils.logging as logging

LOGGER = logging.getLogger(__name__)


def perpendicular_distance(point, start: float, end: float):
    """ Distance from point to the line through start and end

    Note:
        All values lie on the x axis (y=0). The projection parameter is not
        clamped to [0,1], we measure against the infinite line and not the
        segment. A zero length line (start == end) results in nan.

    Args:
        point (float or np.ndarray): point value or array of point values
        start (float): line start value
        end (float): line end value

    Returns:
        float or np.ndarray: perpendicular distance for each point
    """
    px, py = np.asarray(point, dtype=float), 0.0
    sx, sy = float(start), 0.0
    ex, ey = float(end), 0.0
    dx, dy = ex - sx, ey - sy
    length = np.float64(dx * dx + dy * dy)
    with np.errstate(divide='ignore', invalid='ignore'):
        u = ((px - sx) * dx + (py - sy) * dy) / length
        x, y = sx + u * dx, sy + u * dy
        return np.hypot(x - px, y - py)


def simplify_signal(points: list, epsilon: float) -> list:
    """ Ramer-Douglas-Peucker reduction of a signal

    We process the index ranges with an explicit stack so large inputs can
    not exceed the recursion limit.

    Args:
        points (list): signal values
        epsilon (float): max allowed distance of a removed point

    Returns:
        list: the remaining signal values, first and last value are always included
    """
    if epsilon < 0:
        raise ValueError("epsilon must not be negative, got {}".format(epsilon))

    points = list(points)
    if len(points) <= 2:
        return points

    x = np.asarray(points, dtype=float)
    keep = np.zeros(len(x), dtype=bool)
    keep[0], keep[-1] = True, True
    stack = [(0, len(x) - 1)]
    while stack:
        first, last = stack.pop()
        if last - first < 2:
            continue

        distances = perpendicular_distance(x[first+1:last], x[first], x[last])
        distances = np.where(np.isnan(distances), 0.0, distances)
        idx = int(np.argmax(distances))
        if distances[idx] > epsilon:
            split = first + 1 + idx
            keep[split] = True
            stack.append((split, last))
            stack.append((first, split))

    result = [points[i] for i in np.flatnonzero(keep)]
    LOGGER.debug("Simplify signal from %d to %d points (epsilon=%s)", len(points), len(result), str(epsilon))
    return result
