"""cProfile wrapper for calclex tokenizing.

Run with:
    python benchmarks/profile_lexer.py
"""

from __future__ import annotations

import cProfile
import pstats


def build_corpus(statements: int = 2000) -> str:
    """Generate a program of assignments and expressions."""
    lines = []
    for i in range(statements):
        lines.append(f"x{i} = (y{i} + {i}.5) ** 2 / z - {i % 7} * w{i}")
        lines.append(f"  total = total + x{i}")
    return "\n".join(lines)


def main() -> None:
    from calclex import tokenize

    source = build_corpus()
    with cProfile.Profile() as profiler:
        count = sum(1 for _ in tokenize(source))

    print(f"{len(source):,} characters, {count:,} tokens")
    pstats.Stats(profiler).sort_stats(pstats.SortKey.TIME).print_stats(15)


if __name__ == "__main__":
    main()
