"""Command line front-end: ``gcdlab <command> [options] a b``."""

import argparse
import logging
import shlex
import sys
from typing import Optional, Sequence

from .algorithms import ALL_ALGORITHMS, Algorithm
from .analyzer import (
    ExecutionStats,
    Measurement,
    benchmark,
    compare,
    execute,
    execute_extended,
    find_fastest,
)
from .int64 import GcdError
from .validation import run_self_test

logger = logging.getLogger(__name__)

DEFAULT_ITERATIONS = 1000


def _print_algorithms() -> None:
    print("Available algorithms:")
    for alg in ALL_ALGORITHMS:
        print(f"  {alg.value:<22} {alg.display_name:<22} {alg.description}")


def _print_measurement(m: Measurement) -> None:
    if m.ok:
        print(f"{m.algorithm.display_name:<22}: GCD = {m.value} | "
              f"Time: {m.elapsed_ms:.6f} ms")
    else:
        print(f"{m.algorithm.display_name:<22}: ERROR ({m.error})")


def _cmd_list(args, stats) -> int:
    _print_algorithms()
    return 0


def _cmd_execute(args, stats) -> int:
    m = execute(args.algorithm, args.a, args.b, stats)
    _print_measurement(m)
    return 0 if m.ok else 1


def _cmd_compare(args, stats) -> int:
    result = compare(args.a, args.b, stats)
    print("=== GCD Algorithm Comparison ===")
    print(f"Input: gcd({args.a}, {args.b})\n")
    for m in result.measurements:
        _print_measurement(m)
    print()
    print(f"Consistent: {'yes' if result.consistent else 'NO'}")
    print(f"Valid:      {'yes' if result.valid else 'NO'}")
    return 0 if result.valid else 1


def _cmd_benchmark(args, stats) -> int:
    algorithms = [args.algorithm] if args.algorithm else None
    results = benchmark(args.a, args.b, args.iterations, algorithms, stats)
    print(f"=== Benchmark: gcd({args.a}, {args.b}), "
          f"{args.iterations} iterations ===")
    for r in results:
        if r.error is not None:
            print(f"{r.algorithm.display_name:<22}: ERROR ({r.error})")
            continue
        print(f"{r.algorithm.display_name:<22}: mean {r.mean_ms:.6f} ms "
              f"(min {r.minimum * 1000.0:.6f}, max {r.maximum * 1000.0:.6f}, "
              f"std {r.std * 1000.0:.6f})")
    return 0


def _cmd_extended(args, stats) -> int:
    try:
        ext, ok = execute_extended(args.a, args.b)
    except GcdError as exc:
        print(f"Extended GCD: ERROR ({exc})")
        return 1
    print("=== Extended Euclidean Algorithm ===")
    print(f"Input: gcd({args.a}, {args.b})")
    print(f"GCD: {ext.gcd}")
    print(f"Coefficients: x = {ext.x}, y = {ext.y}")
    print(f"Verification: {args.a}*({ext.x}) + {args.b}*({ext.y}) = "
          f"{args.a * ext.x + args.b * ext.y} "
          f"[{'OK' if ok else 'FAILED'}]")
    return 0 if ok else 1


def _cmd_fastest(args, stats) -> int:
    best = find_fastest(args.a, args.b, stats, iterations=args.iterations)
    if best is None:
        print("No algorithm could compute this input")
        return 1
    alg, seconds = best
    print(f"Fastest for gcd({args.a}, {args.b}): {alg.display_name} "
          f"({seconds * 1000.0:.6f} ms)")
    return 0


def _cmd_test(args, stats) -> int:
    ok = run_self_test()
    print(f"Self-test: {'PASSED' if ok else 'FAILED'}")
    return 0 if ok else 1


def _print_status(stats: ExecutionStats) -> None:
    print("=== Session Status ===")
    print(f"Executions: {stats.runs} ({stats.successes} ok, {stats.failures} failed)")
    print(f"Total time: {stats.total_time * 1000.0:.6f} ms")
    print(f"Average:    {stats.average_time * 1000.0:.6f} ms")
    for alg, count in stats.per_algorithm.most_common():
        print(f"  {alg.display_name:<22} {count}")


_INTERACTIVE_HELP = """\
  help                     Show this help
  list                     List algorithms
  <algorithm> <a> <b>      Execute algorithm
  compare <a> <b>          Compare all algorithms
  extended <a> <b>         Extended Euclidean
  status                   Show session status
  quit, exit               Exit interactive mode"""


def _interactive_line(line: str, stats: ExecutionStats) -> bool:
    """Handle one REPL line; False once the user asks to leave."""
    try:
        words = shlex.split(line)
    except ValueError as exc:
        print(f"Error: {exc}")
        return True
    if not words:
        return True
    command = words[0].lower()

    if command in ("quit", "exit"):
        return False
    if command == "help":
        print(_INTERACTIVE_HELP)
        return True
    if command == "list":
        _print_algorithms()
        return True
    if command == "status":
        _print_status(stats)
        return True

    if len(words) != 3:
        print("Expected: <command> <a> <b> (type 'help')")
        return True
    try:
        a, b = int(words[1]), int(words[2])
    except ValueError:
        print("Operands must be integers")
        return True

    args = argparse.Namespace(a=a, b=b)
    try:
        if command == "compare":
            _cmd_compare(args, stats)
        elif command == "extended":
            _cmd_extended(args, stats)
        else:
            args.algorithm = Algorithm.from_name(command)
            _cmd_execute(args, stats)
    except (GcdError, ValueError) as exc:
        print(f"Error: {exc}")
    return True


def _cmd_interactive(args, stats) -> int:
    print("GCD interactive mode. Type 'help' for commands.")
    while True:
        try:
            line = input("gcd> ")
        except EOFError:
            print()
            break
        if not _interactive_line(line, stats):
            break
    _print_status(stats)
    return 0


def _algorithm(value: str) -> Algorithm:
    try:
        return Algorithm.from_name(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc))


def _add_operands(p: argparse.ArgumentParser) -> None:
    p.add_argument("a", type=int, help="First operand (signed 64-bit)")
    p.add_argument("b", type=int, help="Second operand (signed 64-bit)")


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="gcdlab",
        description="Compute, compare and benchmark GCD algorithms.",
    )
    p.add_argument("-v", "--verbose", action="store_true", help="Verbose (debug) logging")
    sub = p.add_subparsers(dest="command", required=True)

    s = sub.add_parser("list", aliases=["ls"], help="List all available algorithms")
    s.set_defaults(func=_cmd_list)

    s = sub.add_parser("execute", aliases=["exec", "run"], help="Execute a specific algorithm")
    s.add_argument("-a", "--algorithm", type=_algorithm, default=Algorithm.EUCLID_MOD,
                   help="Algorithm name or alias (modulo, sub, div, rec_mod, rec_sub, ext, stein)")
    _add_operands(s)
    s.set_defaults(func=_cmd_execute)

    s = sub.add_parser("compare", aliases=["comp"], help="Compare all algorithms")
    _add_operands(s)
    s.set_defaults(func=_cmd_compare)

    s = sub.add_parser("benchmark", aliases=["bench"], help="Run a performance benchmark")
    s.add_argument("-i", "--iterations", type=int, default=DEFAULT_ITERATIONS,
                   help=f"Runs per algorithm (default {DEFAULT_ITERATIONS})")
    s.add_argument("-a", "--algorithm", type=_algorithm, default=None,
                   help="Benchmark only this algorithm")
    _add_operands(s)
    s.set_defaults(func=_cmd_benchmark)

    s = sub.add_parser("extended", aliases=["ext"], help="Extended Euclidean algorithm")
    _add_operands(s)
    s.set_defaults(func=_cmd_extended)

    s = sub.add_parser("fastest", aliases=["fast"], help="Find the fastest algorithm for an input")
    s.add_argument("-i", "--iterations", type=int, default=10,
                   help="Runs per algorithm before comparing means (default 10)")
    _add_operands(s)
    s.set_defaults(func=_cmd_fastest)

    s = sub.add_parser("test", aliases=["selftest"], help="Run the built-in self-test")
    s.set_defaults(func=_cmd_test)

    s = sub.add_parser("interactive", aliases=["i"], help="Enter interactive mode")
    s.set_defaults(func=_cmd_interactive)

    return p


def main(argv: Optional[Sequence[str]] = None) -> int:
    p = build_parser()
    ns = p.parse_args(list(argv) if argv is not None else None)

    logging.basicConfig(
        format="%(asctime)s [%(levelname)s] %(message)s",
        level=logging.DEBUG if ns.verbose else logging.INFO,
        datefmt="%H:%M:%S",
    )

    stats = ExecutionStats()
    try:
        return ns.func(ns, stats)
    except (GcdError, ValueError) as exc:
        logger.error("%s", exc)
        return 2


if __name__ == "__main__":
    sys.exit(main())
