# pylint: disable=invalid-name
"""Line-profile A* and the all-optimal-paths search on a large open grid."""

from line_profiler import LineProfiler

from pathsearch.algorithms.astar import search_all_optimal, search_single_optimal

GOAL = (150, 120)


def successors(pos):
    x, y = pos
    return [((x + 1, y), 1), ((x - 1, y), 1), ((x, y + 1), 1), ((x, y - 1), 1)]


def heuristic(pos):
    # Half the Manhattan distance keeps the search wide enough to be interesting
    return (abs(pos[0] - GOAL[0]) + abs(pos[1] - GOAL[1])) // 2


def goal(pos):
    return pos == GOAL


lp = LineProfiler()
lp_wrapper = lp(search_single_optimal)
lp_wrapper((0, 0), successors, heuristic, goal)
lp.print_stats()

lp = LineProfiler()
lp_wrapper = lp(search_all_optimal)
paths, cost = lp_wrapper((0, 0), successors, heuristic, goal)
lp.print_stats()
print("cost:", cost, "first path length:", len(next(paths)))
