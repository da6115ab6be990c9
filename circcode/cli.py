#!/usr/bin/env python3
"""
circcode — circular code analysis

Command-line interface over the property layer.

Usage:
    circcode check <word>...               All properties of a code
    circcode ambiguous <word>...           Ambiguous sequences (if not a code)
    circcode graph <word>...               Vertices and edges of G(X)
    circcode cycles <word>...              Every cycle of G(X)
    circcode paths <word>...               Every longest path of G(X)
    circcode shift <word>... --by N        Rotate every word by N symbols

Every command also accepts a sequence instead of words:
    circcode check --sequence ACGTTGCA --tuple-length 3
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
import textwrap
from typing import Any, Optional, Sequence

from circcode import properties
from circcode.code import Code
from circcode.errors import CircCodeError


# ============================================================================
# Formatting helpers
# ============================================================================

class C:
    """ANSI colors."""
    BOLD = "\033[1m"
    DIM = "\033[2m"
    RED = "\033[31m"
    GREEN = "\033[32m"
    YELLOW = "\033[33m"
    CYAN = "\033[36m"
    RESET = "\033[0m"

    @staticmethod
    def off():
        C.BOLD = C.DIM = C.RED = C.GREEN = C.YELLOW = C.CYAN = C.RESET = ""


def header(text: str) -> str:
    return f"\n{C.BOLD}{C.CYAN}{'─' * 60}{C.RESET}\n{C.BOLD}  {text}{C.RESET}\n{C.BOLD}{C.CYAN}{'─' * 60}{C.RESET}"


def ok(text: str) -> str:
    return f"  {C.GREEN}✓{C.RESET} {text}"


def warn(text: str) -> str:
    return f"  {C.YELLOW}⚠{C.RESET} {text}"


def fail(text: str) -> str:
    return f"  {C.RED}✗{C.RESET} {text}"


def flag(name: str, value: bool) -> str:
    return ok(name) if value else fail(name)


def pairs(flat: list[str]) -> list[str]:
    return [f"{a} → {b}" for a, b in zip(flat[::2], flat[1::2])]


def emit_json(payload: Any) -> None:
    print(json.dumps(payload, indent=2))


# ============================================================================
# Input
# ============================================================================

def load_code(args) -> Code:
    """Build the Code named on the command line."""
    if args.sequence is not None:
        if args.words:
            raise SystemExit("give either words or --sequence, not both")
        return Code.from_sequence(args.sequence, args.tuple_length, id=args.id)
    return Code(args.words, id=args.id)


# ============================================================================
# Commands
# ============================================================================

def cmd_check(args):
    """Show every property of a code."""
    code = load_code(args)
    info = properties.summary(code)
    if args.json:
        emit_json(info)
        return

    print(header(f"CHECK: {code}"))
    print(f"  {C.DIM}Tuple lengths: {info['tuple_lengths']}  |  Words: {len(code)}{C.RESET}")
    print(flag("code (uniquely decodable)", info["is_code"]))
    print(flag("circular", info["is_circular"]))
    print(flag("Cn-circular", info["is_cn_circular"]))
    print(flag("comma-free", info["is_comma_free"]))
    print(flag("strong comma-free", info["is_strong_comma_free"]))
    k = info["exact_k_circular"]
    if k is None:
        print(ok("k-circular for every k"))
    else:
        print(warn(f"exactly {k}-circular"))


def cmd_ambiguous(args):
    """List the ambiguous sequences of a word set."""
    code = load_code(args)
    sequences = properties.ambiguous_sequences(code)
    if args.json:
        emit_json({"is_code": not sequences, "ambiguous_sequences": sequences})
        return

    print(header(f"AMBIGUOUS: {code}"))
    if not sequences:
        print(ok("Uniquely decodable: no ambiguous sequence"))
        return
    print(fail(f"Not a code: {len(sequences)} ambiguous sequence(s)"))
    for seq in sequences:
        print(f"    {C.CYAN}{seq}{C.RESET}")


def cmd_graph(args):
    """Show vertices and edges of the representing graph."""
    code = load_code(args)
    if args.component is not None:
        edges = properties.component_edges(code, args.component)
        cyclic = properties.component_cyclic_edges(code, args.component) if args.cycles else None
        longest = properties.component_longest_path_edges(code, args.component) if args.longest else None
        vertices = list(dict.fromkeys(edges))
        obj = {
            "vertices": vertices,
            "edges": edges,
            "circular_path_edges": cyclic,
            "longest_path_edges": longest,
        }
    else:
        obj = properties.representing_graph_obj(code, args.cycles, args.longest)

    if args.json:
        emit_json(obj)
        return

    title = f"GRAPH: {code}"
    if args.component is not None:
        title += f"  [component {args.component}]"
    print(header(title))
    print(f"  {C.BOLD}Vertices{C.RESET} ({len(obj['vertices'])}): {', '.join(obj['vertices'])}")
    print(f"  {C.BOLD}Edges{C.RESET} ({len(obj['edges']) // 2}):")
    for line in pairs(obj["edges"]):
        print(f"    {line}")
    if obj["circular_path_edges"] is not None:
        print(f"\n  {C.RED}On a cycle{C.RESET} ({len(obj['circular_path_edges']) // 2}):")
        for line in pairs(obj["circular_path_edges"]):
            print(f"    {line}")
    if obj["longest_path_edges"] is not None:
        print(f"\n  {C.GREEN}On a longest path{C.RESET} ({len(obj['longest_path_edges']) // 2}):")
        for line in pairs(obj["longest_path_edges"]):
            print(f"    {line}")


def cmd_cycles(args):
    """Show every cycle of the representing graph."""
    code = load_code(args)
    cycles = properties.all_cyclic_paths(code)
    if args.json:
        emit_json({"is_cyclic": bool(cycles), "cycles": cycles})
        return

    print(header(f"CYCLES: {code}"))
    if not cycles:
        print(ok("Acyclic: the code is circular"))
        return
    print(fail(f"{len(cycles)} cycle(s), the code is not circular"))
    limit = args.limit
    for cycle in cycles[:limit]:
        print(f"    {' → '.join(cycle)}")
    if len(cycles) > limit:
        print(f"    {C.DIM}...and {len(cycles) - limit} more{C.RESET}")


def cmd_paths(args):
    """Show every longest path of the representing graph."""
    code = load_code(args)
    if not properties.is_circular(code):
        if args.json:
            emit_json({"is_cyclic": True, "paths": None})
        else:
            print(header(f"PATHS: {code}"))
            print(fail("Graph is cyclic: longest paths are unbounded"))
        return

    paths = properties.all_longest_paths(code)
    if args.json:
        emit_json({"is_cyclic": False, "paths": paths})
        return

    print(header(f"PATHS: {code}"))
    length = len(paths[0]) - 1 if paths else 0
    print(f"  {len(paths)} longest path(s) of {length} edge(s)")
    limit = args.limit
    for path in paths[:limit]:
        print(f"    {' → '.join(path)}")
    if len(paths) > limit:
        print(f"    {C.DIM}...and {len(paths) - limit} more{C.RESET}")


def cmd_shift(args):
    """Rotate every word of a code."""
    code = load_code(args)
    rotated = properties.shift(code, args.by)
    if args.json:
        emit_json({"id": rotated.id, "shift": args.by, "words": rotated.words})
        return

    print(header(f"SHIFT by {args.by}"))
    for before, after in zip(code.words, rotated.words):
        print(f"    {before} → {C.CYAN}{after}{C.RESET}")


# ============================================================================
# CLI setup
# ============================================================================

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="circcode",
        description="circcode — circular code analysis",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=textwrap.dedent("""
        examples:
          circcode check ACG CGG AC
          circcode ambiguous BDADCC AD BD CC ADCC
          circcode graph ADB BA AAD DAA --cycles
          circcode graph ADBD BADD AAAD --component 1
          circcode cycles 1100 0022 2233 3311
          circcode paths ABC BCD DEF EFG
          circcode shift BDC CA DB --by -1
          circcode check --sequence ABCCDE --tuple-length 2 --json
        """),
    )
    parser.add_argument("--no-color", action="store_true", help="Disable colored output")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    code_args = argparse.ArgumentParser(add_help=False)
    code_args.add_argument("words", nargs="*", help="Words of the code")
    code_args.add_argument("-s", "--sequence", help="Sequence to cut into tuples instead of words")
    code_args.add_argument("-t", "--tuple-length", type=int, default=3,
                           help="Tuple length for --sequence (default: 3)")
    code_args.add_argument("--id", default="unknown", help="Name of the code")
    code_args.add_argument("--json", action="store_true", help="Print machine-readable JSON")

    sub = parser.add_subparsers(dest="command", help="Command to run")

    sub.add_parser("check", parents=[code_args], help="Show every property of a code")
    sub.add_parser("ambiguous", aliases=["amb"], parents=[code_args],
                   help="List ambiguous sequences")

    p = sub.add_parser("graph", parents=[code_args], help="Show the representing graph")
    p.add_argument("-c", "--component", type=int, help="Only splits touching a vertex of this length")
    p.add_argument("--cycles", action="store_true", help="Also list edges lying on a cycle")
    p.add_argument("--longest", action="store_true", help="Also list edges lying on a longest path")

    p = sub.add_parser("cycles", parents=[code_args], help="Show every cycle")
    p.add_argument("-n", "--limit", type=int, default=50, help="Max cycles to display")

    p = sub.add_parser("paths", parents=[code_args], help="Show every longest path")
    p.add_argument("-n", "--limit", type=int, default=50, help="Max paths to display")

    p = sub.add_parser("shift", parents=[code_args], help="Rotate every word")
    p.add_argument("--by", type=int, default=1, help="Rotation amount (default: 1)")

    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.no_color or getattr(args, "json", False):
        C.off()
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    if not args.command:
        parser.print_help()
        return 0

    # Dispatch
    commands = {
        "check": cmd_check,
        "ambiguous": cmd_ambiguous, "amb": cmd_ambiguous,
        "graph": cmd_graph,
        "cycles": cmd_cycles,
        "paths": cmd_paths,
        "shift": cmd_shift,
    }

    handler = commands[args.command]
    try:
        handler(args)
    except CircCodeError as e:
        print(fail(f"Error: {e}"))
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
