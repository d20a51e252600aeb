from aoc.cli import main

main()
