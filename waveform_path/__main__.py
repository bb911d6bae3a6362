#!/bin/env python3

import sys
import json
import argparse

import waveform_path.utils.logging as logging

from waveform_path.api import generate_normalized_path, simplify_data, render_svg
from waveform_path.utils.config import HYPERPARAMETER, SETTINGS, VERSION


def read_values(input_file: str) -> list:
    """ Read the heights from a json file or stdin

    Args:
        input_file (str): path to the json file, None to read stdin

    Returns:
        list: the heights
    """
    if input_file is None:
        data = json.load(sys.stdin)
    else:
        with open(input_file, 'r') as f:
            data = json.load(f)

    if not isinstance(data, list) or not all(isinstance(x, (int, float)) and not isinstance(x, bool) for x in data):
        raise ValueError("input must be a json list of numbers")

    return data


def main(argv: list = None):
    """ CLI Main Function """
    parser = argparse.ArgumentParser(prog="waveform-path", description="Generate a smooth svg path from a list of heights")
    parser.add_argument("-i", "--input", type = str, default = None, help = "JSON file with a list of numbers (default: stdin)")
    parser.add_argument("-o", "--output", type = str, default = None, help = "Output Path (default: stdout)")
    parser.add_argument("-W", "--width", type = float, default = float(SETTINGS['svg']['width']), help = "SVG Width")
    parser.add_argument("-H", "--height", type = float, default = float(SETTINGS['svg']['height']), help = "SVG Height")
    parser.add_argument("-e", "--epsilon", type = float, nargs = "?", default = None, const = float(HYPERPARAMETER["simplify"]["epsilon"]), help = "Simplify the data with given tolerance")
    parser.add_argument("--closed", action = 'store_true', default = bool(SETTINGS['svg']['closed']), help = "Close the path to a filled area")
    parser.add_argument("--svg", action = 'store_true', help = "Output a svg document instead of the path description")
    parser.add_argument("--logs", action = 'store_true', help = "Enable logging")
    parser.add_argument("--version", action = 'version', version = VERSION)
    args = parser.parse_args(argv)

    if args.logs:
        logging.setup_logging(silent=args.output is None)
    else:
        logging.disable_logging()

    logger = logging.getLogger(__name__)
    logger.info("Waveform Path %s", VERSION)
    logger.info("Args: input=%s, output=%s, width=%s, height=%s, epsilon=%s, closed=%s", \
            str(args.input), str(args.output), str(args.width), str(args.height), str(args.epsilon), str(args.closed))

    try:
        heights = read_values(args.input)
        if args.svg:
            result = render_svg(heights, args.width, args.height, args.closed, args.epsilon).decode('utf-8')
        else:
            if args.epsilon is not None:
                heights = simplify_data(heights, args.epsilon)
            result = generate_normalized_path(heights, args.width, args.height, args.closed)
    except (ValueError, OSError) as e:
        logger.error("%s", str(e))
        print("error: {}".format(e), file=sys.stderr)
        return 1

    if args.output is None:
        print(result)
    else:
        with open(args.output, 'w') as f:
            f.write(result)
        logger.info("Write result to %s", args.output)

    return 0


if __name__ == '__main__':
    sys.exit(main())
