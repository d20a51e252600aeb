from aoc.year2022 import day19

EXAMPLE = (
    "Blueprint 1: Each ore robot costs 4 ore. Each clay robot costs 2 ore. "
    "Each obsidian robot costs 3 ore and 14 clay. Each geode robot costs 2 ore and 7 obsidian.\n"
    "Blueprint 2: Each ore robot costs 2 ore. Each clay robot costs 3 ore. "
    "Each obsidian robot costs 3 ore and 8 clay. Each geode robot costs 3 ore and 12 obsidian.\n"
)


def test_parse():
    first, second = day19.parse(EXAMPLE)
    assert first.number == 1
    assert first.obsidian_robot_clay == 14
    assert second.geode_robot_obsidian == 12


def test_max_geodes_24_minutes():
    first, second = day19.parse(EXAMPLE)
    assert day19.max_geodes(first, 24) == 9
    assert day19.max_geodes(second, 24) == 12


def test_part1_example():
    assert day19.part1(EXAMPLE) == 33


def test_part2_example():
    assert day19.part2(EXAMPLE) == 56 * 62
