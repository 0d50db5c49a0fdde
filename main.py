#!/usr/bin/env python3
"""
Connect-four solver matches and timing runs.
Main entry point for pitting sequential and parallel solvers against each other.
"""

import argparse
import logging
import sys
import time
from dataclasses import dataclass

from connect4.ai.parallel import DEFAULT_NUM_THREADS
from connect4.ai.solver import Solver
from connect4.game import RED, opposite

logger = logging.getLogger('connect4')

MATCHES = {
    'seq-vs-seq': (False, False),
    'seq-vs-par': (False, True),
    'par-vs-par': (True, True),
}


@dataclass
class MatchResult:
    """Aggregate statistics of a match between two solvers."""
    games: int = 0
    avg_time: float = 0.0
    avg_nodes_first: float = 0.0
    avg_nodes_second: float = 0.0
    first_wins: int = 0
    second_wins: int = 0
    draws: int = 0


def play_match(first: Solver, second: Solver, first_color: int = RED,
               max_depth: int = Solver.DEFAULT_MAX_DEPTH,
               time_limit: float = Solver.DEFAULT_TIME_LIMIT,
               num_games: int = 1) -> MatchResult:
    """
    Play `num_games` games, `first` always moving first.

    Each solver keeps its own board. After a solver picks a column, it is
    mirrored onto the other solver's board as a 1-indexed column. A game ends
    when a solver has no move, and both solvers are reset between games.
    """
    second_color = opposite(first_color)
    result = MatchResult(games=num_games)
    total_nodes_first = 0
    total_nodes_second = 0

    start = time.time()
    for game in range(num_games):
        while True:
            column = first.solve(first_color, max_depth, time_limit)
            if column == -1:
                break
            second.play_move(column + 1, first_color)

            column = second.solve(second_color, max_depth, time_limit)
            if column == -1:
                break
            first.play_move(column + 1, second_color)

        winner = first.winner
        if winner == first_color:
            result.first_wins += 1
        elif winner == second_color:
            result.second_wins += 1
        else:
            result.draws += 1
        logger.debug("Game %d finished:\n%s", game + 1, first.board.render())

        total_nodes_first += first.get_total_nodes_traversed()
        total_nodes_second += second.get_total_nodes_traversed()
        first.reset_solver()
        second.reset_solver()

    if num_games > 0:
        result.avg_time = (time.time() - start) / num_games
        result.avg_nodes_first = total_nodes_first / num_games
        result.avg_nodes_second = total_nodes_second / num_games

    return result


def time_depths(solver: Solver, depths, color: int = RED) -> list:
    """
    Time a single fixed-depth solve from the empty board at each depth.
    Returns a list of (depth, seconds).
    """
    timings = []
    for depth in depths:
        start = time.time()
        solver.solve(color, depth, -1)
        elapsed = time.time() - start
        timings.append((depth, elapsed))
        solver.reset_solver()
    return timings


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='Connect-four minimax solver')
    parser.add_argument('--match', choices=sorted(MATCHES), help='Play solvers against each other')
    parser.add_argument('--time', choices=['seq', 'par'], help='Time one solve per search depth')
    parser.add_argument('--search-depth', type=int, default=Solver.DEFAULT_MAX_DEPTH,
                        help='Search depth without a time limit, max depth for --time')
    parser.add_argument('--time-limit', type=float, default=Solver.DEFAULT_TIME_LIMIT,
                        help='Seconds per move for iterative deepening')
    parser.add_argument('--no-time-limit', action='store_true',
                        help='Search --search-depth plies on every move')
    parser.add_argument('--width', type=int, default=7, help='Board width')
    parser.add_argument('--height', type=int, default=6, help='Board height')
    parser.add_argument('--winning-streak', type=int, default=4, help='Pieces in a row to win')
    parser.add_argument('--num-games', type=int, default=1, help='Games per match')
    parser.add_argument('--num-threads', type=int, default=DEFAULT_NUM_THREADS,
                        help='Worker threads for parallel solvers')
    parser.add_argument('--verbose', action='store_true', help='Enable debug logging')
    return parser


def run_match(args) -> MatchResult:
    first_parallel, second_parallel = MATCHES[args.match]
    time_limit = -1 if args.no_time_limit else args.time_limit
    size = (args.width, args.height, args.winning_streak)

    with Solver(*size, parallel=first_parallel, num_threads=args.num_threads) as first, \
            Solver(*size, parallel=second_parallel, num_threads=args.num_threads) as second:
        result = play_match(first, second, RED, args.search_depth, time_limit, args.num_games)

    print(f"[{args.match}] AvgTime = {result.avg_time:.4f}s")
    print(f"[{args.match}] First.AvgNodesTraversed = {result.avg_nodes_first:.0f}")
    print(f"[{args.match}] Second.AvgNodesTraversed = {result.avg_nodes_second:.0f}")
    print(f"[{args.match}] Wins: first {result.first_wins}, "
          f"second {result.second_wins}, draws {result.draws}")
    return result


def run_timing(args) -> list:
    depths = range(2, args.search_depth + 1, 2)
    with Solver(args.width, args.height, args.winning_streak,
                parallel=args.time == 'par', num_threads=args.num_threads) as solver:
        timings = time_depths(solver, depths)

    for depth, elapsed in timings:
        print(f"depth {depth} took {elapsed:.4f}s")
    return timings


def main(argv=None) -> int:
    """Entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(asctime)s %(levelname)s %(name)s: %(message)s',
    )

    if args.match is None and args.time is None:
        parser.print_help()
        return 0

    try:
        if args.match is not None:
            run_match(args)
        if args.time is not None:
            run_timing(args)
    except KeyboardInterrupt:
        print("\nInterrupted.")
        return 0
    except ValueError as e:
        logger.error("%s", e)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
