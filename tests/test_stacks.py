import pytest

from puzzlekit.stacks import largest_rectangle_area, max_width_ramp, maximal_rectangle


def test_largest_rectangle_example():
    assert largest_rectangle_area([2, 1, 5, 6, 2, 3]) == 10


@pytest.mark.parametrize("height, count", [(3, 4), (1, 1), (0, 5), (7, 2)])
def test_largest_rectangle_uniform(height, count):
    assert largest_rectangle_area([height] * count) == height * count


def test_largest_rectangle_empty():
    assert largest_rectangle_area([]) == 0


@pytest.mark.parametrize("heights", [[2, 4], [6, 2, 5, 4, 5, 1, 6], [1, 2, 3, 4, 5]])
def test_largest_rectangle_bounds(heights):
    area = largest_rectangle_area(heights)
    assert area >= max(heights)
    assert area >= min(heights) * len(heights)
    assert area <= max(heights) * len(heights)


def test_maximal_rectangle_example():
    matrix = [
        ["1", "0", "1", "0", "0"],
        ["1", "0", "1", "1", "1"],
        ["1", "1", "1", "1", "1"],
        ["1", "0", "0", "1", "0"],
    ]
    assert maximal_rectangle(matrix) == 6


@pytest.mark.parametrize("rows, cols", [(1, 1), (3, 4), (2, 5)])
def test_maximal_rectangle_all_ones(rows, cols):
    matrix = ["1" * cols for _ in range(rows)]
    assert maximal_rectangle(matrix) == rows * cols


@pytest.mark.parametrize("matrix", [[], [["0"]], ["000", "000"]])
def test_maximal_rectangle_no_ones(matrix):
    assert maximal_rectangle(matrix) == 0


def test_max_width_ramp_example():
    assert max_width_ramp([6, 0, 8, 2, 1, 5]) == 4


@pytest.mark.parametrize("nums", [[5, 4, 3, 2, 1], [1], []])
def test_max_width_ramp_no_ramp(nums):
    assert max_width_ramp(nums) == 0


@pytest.mark.parametrize("nums", [[1, 2, 3], [2, 2, 2, 2], [0, 9, 1, 4]])
def test_max_width_ramp_full_width(nums):
    assert max_width_ramp(nums) == len(nums) - 1


@pytest.mark.parametrize("nums", [[9, 8, 1, 0, 1, 9, 4, 0, 4, 1], [3, 1, 2, 0, 2]])
def test_max_width_ramp_is_valid(nums):
    width = max_width_ramp(nums)
    assert any(nums[i] <= nums[i + width] for i in range(len(nums) - width))
    assert not any(
        nums[i] <= nums[j]
        for i in range(len(nums))
        for j in range(i + width + 1, len(nums))
    )