import pytest

from cpsolver.shortest_paths import (
    all_pairs_shortest,
    flight_discount,
    game_routes,
    high_score,
    investigation,
    k_cheapest_routes,
    longest_flight_route,
    negative_cycle,
    shortest_routes,
)


def test_shortest_routes_chain_beats_direct():
    result = shortest_routes(3, [(1, 2, 5), (2, 3, 7), (1, 3, 20)])
    assert result == [0, 5, 5 + 7]


def test_shortest_routes_unreachable_is_none():
    assert shortest_routes(3, [(1, 2, 4)]) == [0, 4, None]


def test_shortest_routes_directed():
    assert shortest_routes(2, [(2, 1, 3)]) == [0, None]


def test_shortest_routes_rejects_bad_node():
    with pytest.raises(ValueError):
        shortest_routes(2, [(1, 3, 1)])


def test_all_pairs_symmetric_and_zero_diagonal():
    roads = [(1, 2, 5), (1, 3, 9), (2, 3, 3)]
    result = all_pairs_shortest(4, roads, [(1, 1), (1, 3), (3, 1), (2, 3), (1, 4)])
    assert result[0] == 0
    assert result[1] == result[2] == 5 + 3
    assert result[3] == 3
    assert result[4] is None


def test_all_pairs_uses_cheapest_parallel_road():
    assert all_pairs_shortest(2, [(1, 2, 9), (2, 1, 4)], [(1, 2)]) == [4]


def test_flight_discount_single_flight_halved():
    assert flight_discount(2, [(1, 2, 9)]) == 9 // 2


def test_flight_discount_not_above_plain_shortest():
    flights = [(1, 2, 3), (2, 3, 1), (1, 3, 7), (2, 1, 5)]
    discounted = flight_discount(3, flights)
    plain = shortest_routes(3, flights)[2]
    assert discounted <= plain


def test_flight_discount_unreachable():
    assert flight_discount(3, [(1, 2, 4)]) is None


def test_k_cheapest_routes_sorted_prices():
    flights = [(1, 2, 1), (1, 2, 4), (2, 3, 1), (1, 3, 3)]
    prices = k_cheapest_routes(3, flights, 3)
    assert prices == sorted(prices)
    assert prices == [2, 3, 5]


def test_k_cheapest_first_is_shortest():
    flights = [(1, 2, 2), (2, 4, 6), (1, 3, 4), (3, 4, 1)]
    prices = k_cheapest_routes(4, flights, 2)
    assert prices[0] == shortest_routes(4, flights)[3]
    assert len(prices) == 2


def test_k_cheapest_fewer_routes_than_k():
    assert k_cheapest_routes(2, [(1, 2, 7)], 3) == [7]


def test_k_cheapest_rejects_zero_k():
    with pytest.raises(ValueError):
        k_cheapest_routes(2, [(1, 2, 1)], 0)


def test_negative_cycle_found_and_closed():
    edges = [(1, 2, 1), (2, 3, 1), (3, 1, -3), (3, 4, 5)]
    cycle = negative_cycle(4, edges)
    assert cycle[0] == cycle[-1]
    assert set(cycle) == {1, 2, 3}
    weights = {(a, b): w for a, b, w in edges}
    assert sum(weights[(a, b)] for a, b in zip(cycle, cycle[1:])) < 0


def test_negative_cycle_absent():
    assert negative_cycle(3, [(1, 2, -1), (2, 3, -1), (3, 1, 5)]) is None


def test_high_score_picks_best_route():
    tunnels = [(1, 2, 3), (2, 4, -1), (1, 3, -2), (3, 4, 7)]
    assert high_score(4, tunnels) == -2 + 7


def test_high_score_positive_cycle_to_target():
    assert high_score(3, [(1, 2, 1), (2, 1, 1), (2, 3, 1)]) is None


def test_high_score_positive_cycle_off_route_ignored():
    tunnels = [(1, 3, 5), (1, 2, 1), (2, 2, 1)]
    assert high_score(3, tunnels) == 5


def test_high_score_unreachable_raises():
    with pytest.raises(ValueError):
        high_score(3, [(1, 2, 1)])


def test_investigation_counts_ties():
    flights = [(1, 2, 1), (1, 3, 1), (2, 4, 1), (3, 4, 1), (1, 4, 2)]
    price, count, fewest, most = investigation(4, flights)
    assert price == 2
    assert count == 3
    assert fewest == 1
    assert most == 2


def test_investigation_agrees_with_shortest_routes():
    flights = [(1, 2, 4), (2, 3, 2), (1, 3, 9), (3, 4, 1)]
    price, count, fewest, most = investigation(4, flights)
    assert price == shortest_routes(4, flights)[3]
    assert count == 1
    assert fewest == most


def test_investigation_unreachable():
    assert investigation(2, []) is None


def test_game_routes_diamond():
    assert game_routes(4, [(1, 2), (1, 3), (2, 4), (3, 4)]) == 2


def test_game_routes_no_route():
    assert game_routes(3, [(1, 2)]) == 0


def test_game_routes_rejects_cycle():
    with pytest.raises(ValueError):
        game_routes(3, [(1, 2), (2, 1), (2, 3)])


def test_longest_flight_route_is_valid_and_longest():
    flights = [(1, 2), (2, 5), (1, 3), (3, 4), (4, 5)]
    route = longest_flight_route(5, flights)
    assert route[0] == 1 and route[-1] == 5
    assert all(edge in flights for edge in zip(route, route[1:]))
    assert route == [1, 3, 4, 5]


def test_longest_flight_route_none_when_unreachable():
    assert longest_flight_route(3, [(2, 3)]) is None


def test_longest_flight_route_single_city():
    assert longest_flight_route(1, []) == [1]