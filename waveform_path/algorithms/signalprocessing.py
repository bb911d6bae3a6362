""" Signal Processing Algorithms """

import numpy as np
import waveform_path.utils.logging as logging

from typing import Callable, Iterator

LOGGER = logging.getLogger(__name__)


def normalize_signal(signal :list, lower: float, upper: float) -> list:
    """ Scale an signal (list of float or int) linear between given lower and upper value

    Note:
        A constant signal has no range to scale. In this case every value in
        the result is nan.

    Args:
        signal (list): list with float or int signal values to scale
        lower (float): lower scale value
        upper (float): upper scale value

    Returns:
        list: list with scaled signal
    """
    if len(signal) == 0: return []
    x = np.asarray(signal, dtype=float)
    signal_min = x.min()
    signal_max = x.max()
    if signal_max == signal_min:
        LOGGER.warning("Normalize constant signal with %d values, result is nan", len(x))

    with np.errstate(divide='ignore', invalid='ignore'):
        scaled = float(lower) + ((x - signal_min) / (signal_max - signal_min)) * (float(upper) - float(lower))

    return scaled.tolist()


def iterate_batches(signal :list, batch_size: int) -> Iterator[list]:
    """ Iterate over consecutive slices of a signal

    Args:
        signal (list): the signal to split
        batch_size (int): number of values per batch, the last batch can be smaller

    Returns:
        Iterator[list]: the batches in signal order
    """
    if batch_size <= 0:
        raise ValueError("batch size must be positive, got {}".format(batch_size))

    for i in range(0, len(signal), batch_size):
        yield signal[i:i+batch_size]


def process_in_batches(signal :list, batch_size: int, callback: Callable[[list], None]) -> None:
    """ Call the callback for each batch of the signal

    Args:
        signal (list): the signal to process
        batch_size (int): number of values per batch
        callback (Callable[[list], None]): batch handler
    """
    counter = 0
    for batch in iterate_batches(signal, batch_size):
        callback(batch)
        counter += 1

    LOGGER.debug("Processed %d values in %d batches", len(signal), counter)
