"""Generate a command script that exercises every gate of a circuit."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

DEFAULT_AAG = "tests.fraig/ISCAS85/C499_r.aag"
DEFAULT_LEVEL = 100


def _header_counts(aag_path: str) -> tuple[int, int]:
    with open(aag_path, encoding="utf-8") as handle:
        tokens = handle.read().split()
    if len(tokens) < 5:
        raise ValueError(f"incomplete header in {aag_path!r}")
    max_var = int(tokens[1])
    n_outputs = int(tokens[4])
    return max_var, n_outputs


def dofile_lines(aag_path: str, level: int = DEFAULT_LEVEL) -> list[str]:
    """Return the commands that read, print and query every gate of a circuit."""
    max_var, n_outputs = _header_counts(aag_path)
    lines = [
        f"cirr -r {aag_path}",
        "cirp",
        "cirp -n",
        "cirp -pi",
        "cirp -po",
        "cirp -fl",
    ]
    for gate_id in range(max_var + n_outputs + 1):
        lines.append(f"cirg {gate_id}")
        lines.append(f"cirg {gate_id} -fani {level}")
    lines.append("cirw")
    lines.append("q -f")
    return lines


def write_dofile(aag_path: str, output_path: str, level: int = DEFAULT_LEVEL) -> None:
    """Write the command script for ``aag_path`` to ``output_path``."""
    lines = dofile_lines(aag_path, level)
    with open(output_path, "w", encoding="utf-8") as handle:
        handle.writelines(line + "\n" for line in lines)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("aag", nargs="?", default=DEFAULT_AAG, help="circuit file")
    parser.add_argument("-o", "--output", help="script to write (default: do<name>)")
    parser.add_argument("-l", "--level", type=int, default=DEFAULT_LEVEL,
                        help="fanin depth for gate reports")
    args = parser.parse_args(argv)
    output = args.output or f"do{Path(args.aag).stem}"
    try:
        write_dofile(args.aag, output, args.level)
    except (OSError, ValueError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())