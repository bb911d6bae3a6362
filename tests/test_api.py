import numpy as np
import pytest

from waveform_path.api import generate_normalized_path, simplify_data, process_array_in_batches, render_svg


def test_generate_normalized_path_edge_cases():
    assert generate_normalized_path([], 100, 100) == ""
    assert generate_normalized_path([3], 100, 100) == ""
    assert generate_normalized_path([50, 50], 100, 100) == "M0 NaN C50 NaN 50 NaN 100 NaN"


def test_generate_normalized_path_open_and_closed():
    open_path = generate_normalized_path([1, 4, 2], 200, 80)
    closed_path = generate_normalized_path([1, 4, 2], 200, 80, closed=True)
    assert open_path.startswith("M0 ")
    assert open_path.count("C") == 2
    assert "L" not in open_path
    assert closed_path == open_path + " L200 80 L0 80 Z"


def test_simplify_data():
    points = [3, 9, 1, 7, 5]
    result = simplify_data(points, 1.0)
    assert result[0] == 3
    assert result[-1] == 5
    assert simplify_data(result, 1.0) == result
    assert points == [3, 9, 1, 7, 5]


def test_simplify_data_negative_epsilon():
    with pytest.raises(ValueError):
        simplify_data([1, 2, 3], -0.1)


def test_process_array_in_batches():
    batches = []
    process_array_in_batches(list(range(1, 11)), 3, lambda batch: batches.append(batch))
    assert [len(b) for b in batches] == [3, 3, 3, 1]
    assert sum(batches, []) == list(range(1, 11))


def test_process_array_in_batches_invalid_size():
    with pytest.raises(ValueError):
        process_array_in_batches([1, 2, 3], 0, lambda batch: None)


def test_render_svg():
    svg = render_svg([1, 4, 2], 200, 80).decode("utf-8")
    assert svg.startswith("<svg ")
    assert 'viewBox="0 0 200 80"' in svg
    assert 'd="M0 ' in svg
    assert 'fill="none"' in svg


def test_render_svg_closed_and_simplified():
    svg = render_svg(np.linspace(0, 10, 50), 100, 100, closed=True, epsilon=0.5).decode("utf-8")
    path = svg.split('d="')[1].split('"')[0]
    assert path.count("C") == 1
    assert path.endswith("L100 100 L0 100 Z")
    assert 'fill="none"' not in svg


def test_render_svg_not_enough_points(caplog):
    svg = render_svg([1], 100, 100).decode("utf-8")
    assert 'd=""' in svg
    assert "Not enough points" in caplog.text
