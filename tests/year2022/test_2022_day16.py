from aoc.year2022 import day16

EXAMPLE = """\
Valve AA has flow rate=0; tunnels lead to valves DD, II, BB
Valve BB has flow rate=13; tunnels lead to valves CC, AA
Valve CC has flow rate=2; tunnels lead to valves DD, BB
Valve DD has flow rate=20; tunnels lead to valves CC, AA, EE
Valve EE has flow rate=3; tunnels lead to valves FF, DD
Valve FF has flow rate=0; tunnels lead to valves EE, GG
Valve GG has flow rate=0; tunnels lead to valves FF, HH
Valve HH has flow rate=22; tunnel leads to valve GG
Valve II has flow rate=0; tunnels lead to valves AA, JJ
Valve JJ has flow rate=21; tunnel leads to valve II
"""


def test_part1_example():
    assert day16.part1(EXAMPLE) == 1651


def test_part2_example():
    assert day16.part2(EXAMPLE) == 1707


def test_distances():
    _, tunnels = day16.parse(EXAMPLE)
    distances = day16.distances_from("AA", tunnels)
    assert distances["HH"] == 5
    assert distances["JJ"] == 2
