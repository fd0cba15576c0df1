# hike_lab/problems/sample.py
# Small mazes with known answers, used by the tests and the CLI's --sample flag.
from __future__ import annotations

# 23x23 maze with one-way slopes. Longest hike: 94 directed, 154 undirected.
SAMPLE_MAZE = """\
#.#####################
#.......#########...###
#######.#########.#.###
###.....#.>.>.###.#.###
###v#####.#v#.###.#.###
###.>...#.#.#.....#...#
###v###.#.#.#########.#
###...#.#.#.......#...#
#####.#.#.#######.#.###
#.....#.#.#.......#...#
#.#####.#.#.#########v#
#.#...#...#...###...>.#
#.#.#v#######v###.###v#
#...#.>.#...>.>.#.###.#
#####v#.#.###v#.#.###.#
#.....#...#...#.#.#...#
#.#########.###.#.#.###
#...###...#...#...#.###
###.###.#.###v#####v###
#...#...#.#.>.>.#.>.###
#.###.###.#.###.#.#v###
#.....###...###...#...#
#####################.#
"""

SAMPLE_EXPECTED = {"directed": 94, "undirected": 154}

# Entrance and exit joined by one bending corridor of 6 steps, no junctions.
STRAIGHT_CORRIDOR = """\
#.###
#.###
#...#
###.#
###.#
"""

# The entrance only leads into a closed pocket; the exit is unreachable.
ISOLATED_POCKET = """\
#.###
#...#
#####
#...#
###.#
"""

# Two corridors join the same pair of junctions. The long eastern one has a
# slope pointing north, so directed walkers can only use it going back up from
# the lower junction: 9 directed, 15 undirected.
ONE_WAY_LOOP = """\
#.#######
#.......#
#.#####.#
#.#####^#
#.#####.#
#.......#
####.####
"""

ONE_WAY_LOOP_EXPECTED = {"directed": 9, "undirected": 15}
