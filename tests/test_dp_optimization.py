import pytest

from cpsolver.dp_optimization import (
    MaxFenwickTree,
    edit_distance,
    elevator_rides,
    longest_increasing_subsequence,
    max_project_reward,
    rectangle_cuts,
    removal_game,
    removing_digits,
)


def test_fenwick_prefix_maxima():
    tree = MaxFenwickTree(8)
    tree.update(3, 5)
    tree.update(6, 2)
    tree.update(1, 4)
    assert tree.query(0) == 0
    assert tree.query(1) == 4
    assert tree.query(3) == 5
    assert tree.query(7) == 5
    answers = [tree.query(i) for i in range(8)]
    assert answers == sorted(answers)


def test_fenwick_update_never_lowers():
    tree = MaxFenwickTree(4)
    tree.update(2, 9)
    tree.update(2, 1)
    assert tree.query(3) == 9
    assert len(tree) == 4


def test_fenwick_rejects_out_of_range():
    tree = MaxFenwickTree(3)
    with pytest.raises(IndexError):
        tree.query(3)
    with pytest.raises(IndexError):
        tree.update(-1, 1)


def test_edit_distance_example():
    assert edit_distance("LOVE", "MOVIE") == 2


@pytest.mark.parametrize("s,t", [("kitten", "sitting"), ("", "abc"), ("abc", "abc"), ("ab", "")])
def test_edit_distance_properties(s, t):
    d = edit_distance(s, t)
    assert d == edit_distance(t, s)
    assert abs(len(s) - len(t)) <= d <= max(len(s), len(t))
    assert edit_distance(s, s) == 0


def test_edit_distance_triangle_inequality():
    a, b, c = "sunday", "saturday", "monday"
    assert edit_distance(a, c) <= edit_distance(a, b) + edit_distance(b, c)


def test_elevator_rides_example():
    assert elevator_rides([4, 8, 6, 1], 10) == 2


def test_elevator_rides_bounds():
    assert elevator_rides([], 10) == 0
    weights = [3, 3, 3]
    assert elevator_rides(weights, sum(weights)) == 1
    assert elevator_rides(weights, 3) == len(weights)


def test_lis_example():
    assert longest_increasing_subsequence([7, 3, 5, 3, 6, 2, 9, 8]) == 4


@pytest.mark.parametrize("values", [[1, 2, 3, 4, 5], [10, 20, 30]])
def test_lis_of_increasing_list_is_its_length(values):
    assert longest_increasing_subsequence(values) == len(values)


@pytest.mark.parametrize("values", [[5, 4, 3, 2], [2, 2, 2], [9]])
def test_lis_of_non_increasing_list_is_one(values):
    assert longest_increasing_subsequence(values) == 1


def test_lis_empty_and_bounded():
    assert longest_increasing_subsequence([]) == 0
    values = [3, 1, 4, 1, 5, 9, 2, 6]
    assert 1 <= longest_increasing_subsequence(values) <= len(values)


def test_max_project_reward_example():
    projects = [(2, 4, 4), (3, 6, 6), (6, 8, 2), (5, 7, 3)]
    assert max_project_reward(projects) == 7


def test_max_project_reward_disjoint_and_touching():
    disjoint = [(1, 2, 5), (3, 4, 6), (5, 9, 7)]
    assert max_project_reward(disjoint) == sum(r for _, _, r in disjoint)
    touching = [(1, 3, 5), (3, 4, 6)]
    assert max_project_reward(touching) == max(r for _, _, r in touching)
    assert max_project_reward([(1, 1, 9)]) == 9
    assert max_project_reward([]) == 0


def test_rectangle_cuts_example():
    assert rectangle_cuts(3, 5) == 3


@pytest.mark.parametrize("a,b", [(2, 7), (4, 6), (5, 9)])
def test_rectangle_cuts_symmetry(a, b):
    assert rectangle_cuts(a, b) == rectangle_cuts(b, a)


@pytest.mark.parametrize("n", [1, 2, 6])
def test_rectangle_cuts_squares_and_strips(n):
    assert rectangle_cuts(n, n) == 0
    assert rectangle_cuts(1, n) == n - 1


def test_rectangle_cuts_rejects_zero():
    with pytest.raises(ValueError):
        rectangle_cuts(0, 3)


def test_removal_game_example():
    assert removal_game([4, 5, 1, 3]) == 8


@pytest.mark.parametrize("values", [[1, 100], [3, 9, 1, 2, 7, 5], [2, 2, 2, 2]])
def test_removal_game_first_player_gets_half_on_even_length(values):
    score = removal_game(values)
    assert 2 * score >= sum(values)
    assert score <= sum(values)


def test_removal_game_single_and_empty():
    assert removal_game([42]) == 42
    assert removal_game([]) == 0


def test_removing_digits_example():
    assert removing_digits(27) == 5


@pytest.mark.parametrize("n", range(1, 10))
def test_removing_digits_single_digit_takes_one_step(n):
    assert removing_digits(n) == 1


def test_removing_digits_zero_and_negative():
    assert removing_digits(0) == 0
    with pytest.raises(ValueError):
        removing_digits(-1)