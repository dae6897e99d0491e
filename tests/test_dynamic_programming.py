import pytest

from algopatterns.dynamic_programming import (
    climb_stairs,
    longest_common_subsequence,
    longest_palindrome_subseq,
    min_cost_climbing_stairs,
    min_distance,
    min_path_sum,
    unique_paths_with_obstacles,
)


def test_climb_stairs_base_cases():
    assert climb_stairs(0) == 0
    assert climb_stairs(1) == 1


@pytest.mark.parametrize("n", range(4, 60))
def test_climb_stairs_recurrence(n):
    assert climb_stairs(n) == climb_stairs(n - 1) + climb_stairs(n - 2)


def test_climb_stairs_two_steps():
    assert climb_stairs(3) == climb_stairs(2) + 1


def test_climb_stairs_negative_raises():
    with pytest.raises(ValueError):
        climb_stairs(-1)


def test_min_cost_worked_example():
    assert min_cost_climbing_stairs([10, 15, 20]) == 15


def test_min_cost_two_steps_takes_cheaper():
    assert min_cost_climbing_stairs([7, 3]) == 3
    assert min_cost_climbing_stairs([2, 9]) == 2


def test_min_cost_all_free():
    assert min_cost_climbing_stairs([0] * 8) == 0


def test_min_cost_too_short_raises():
    with pytest.raises(ValueError):
        min_cost_climbing_stairs([5])


def test_min_path_sum_worked_example():
    assert min_path_sum([[1, 3, 1], [1, 5, 1], [4, 2, 1]]) == 7


def test_min_path_sum_single_row_and_column():
    row = [4, 1, 7, 2]
    assert min_path_sum([row]) == sum(row)
    assert min_path_sum([[value] for value in row]) == sum(row)


def test_min_path_sum_transpose_invariant():
    grid = [[3, 8, 1, 4], [2, 2, 9, 1], [6, 1, 1, 5]]
    transposed = [list(column) for column in zip(*grid)]
    assert min_path_sum(grid) == min_path_sum(transposed)


def test_min_path_sum_empty_raises():
    with pytest.raises(ValueError):
        min_path_sum([])
    with pytest.raises(ValueError):
        min_path_sum([[]])


def test_unique_paths_center_obstacle():
    assert unique_paths_with_obstacles([[0, 0, 0], [0, 1, 0], [0, 0, 0]]) == 2


def test_unique_paths_single_row():
    assert unique_paths_with_obstacles([[0, 0, 0, 0]]) == 1
    assert unique_paths_with_obstacles([[0, 1, 0, 0]]) == 0


def test_unique_paths_blocked_ends():
    assert unique_paths_with_obstacles([[1, 0], [0, 0]]) == 0
    assert unique_paths_with_obstacles([[0, 0], [0, 1]]) == 0


def test_unique_paths_transpose_invariant():
    grid = [[0, 0, 0, 0], [0, 1, 0, 0], [0, 0, 0, 1], [0, 0, 0, 0]]
    transposed = [list(column) for column in zip(*grid)]
    assert unique_paths_with_obstacles(grid) == unique_paths_with_obstacles(transposed)


def test_unique_paths_free_grid_matches_climb_of_ones_row():
    assert unique_paths_with_obstacles([[0] * 5, [0] * 5]) == 5


def test_unique_paths_empty_raises():
    with pytest.raises(ValueError):
        unique_paths_with_obstacles([])


@pytest.mark.parametrize("word", ["", "a", "horse", "intention"])
def test_min_distance_identity_and_empty(word):
    assert min_distance(word, word) == 0
    assert min_distance(word, "") == len(word)
    assert min_distance("", word) == len(word)


@pytest.mark.parametrize(
    "a,b,c", [("horse", "ros", "rose"), ("kitten", "sitting", "mitten"), ("abc", "", "cab")]
)
def test_min_distance_metric_properties(a, b, c):
    assert min_distance(a, b) == min_distance(b, a)
    assert min_distance(a, c) <= min_distance(a, b) + min_distance(b, c)
    assert min_distance(a, b) <= max(len(a), len(b))


def test_min_distance_single_edit():
    assert min_distance("intention", "intenton") == 1
    assert min_distance("cat", "cut") == 1


@pytest.mark.parametrize("text", ["", "abcde", "aaa", "abracadabra"])
def test_lcs_with_itself_and_empty(text):
    assert longest_common_subsequence(text, text) == len(text)
    assert longest_common_subsequence(text, "") == 0


def test_lcs_symmetric_and_bounded():
    a, b = "abcde", "ace"
    result = longest_common_subsequence(a, b)
    assert result == longest_common_subsequence(b, a)
    assert result == len(b)
    assert longest_common_subsequence("abc", "def") == 0


@pytest.mark.parametrize("text", ["a", "racecar", "abba", "noon"])
def test_lps_of_palindrome_is_whole_length(text):
    assert longest_palindrome_subseq(text) == len(text)


def test_lps_bounds():
    text = "bbbab"
    result = longest_palindrome_subseq(text)
    assert 1 <= result <= len(text)
    assert longest_palindrome_subseq(text) == longest_palindrome_subseq(text[::-1])
    assert longest_palindrome_subseq("") == 0