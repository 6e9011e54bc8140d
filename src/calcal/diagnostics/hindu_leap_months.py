#!/usr/bin/env python3
from __future__ import annotations

import argparse
from typing import List, Optional, Set, Tuple

import calcal
from calcal.engines.gregorian import gregorian_year_bounds
from calcal.engines.names import HINDU_LUNAR_MONTHS

# shorter than any lunar month, so every month gets sampled at least once
_STEP = 15


def _need_numpy():
    try:
        import numpy as np
        return np
    except ImportError as e:
        raise RuntimeError('Need numpy. Install: pip install "calcal[diagnostics]"') from e


def _need_matplotlib():
    try:
        import matplotlib.pyplot as plt
        return plt
    except ImportError as e:
        raise RuntimeError('Need matplotlib. Install: pip install "calcal[diagnostics]"') from e


def leap_months(start_year: int, end_year: int) -> List[Tuple[int, int]]:
    """(Gregorian year, lunar month) of every adhika month sampled in [start_year, end_year]."""
    lunar = calcal.get_calendar("oldHinduLunar")
    seen: Set[Tuple[int, int]] = set()
    out: List[Tuple[int, int]] = []
    first, _ = gregorian_year_bounds(start_year)
    _, last = gregorian_year_bounds(end_year)
    for rd in range(first, last + 1, _STEP):
        d = lunar.from_rd(rd)
        if d.leap_month and (d.year, d.month) not in seen:
            seen.add((d.year, d.month))
            out.append((calcal.from_rd(rd, "gregorian").year, d.month))
    return out


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(
        description="Leap-month barcode diagram of the Old Hindu lunisolar calendar."
    )
    p.add_argument("--start-year", type=int, default=1960)
    p.add_argument("--end-year", type=int, default=2030)
    p.add_argument("--out", default="hindu_leap_months.png")
    p.add_argument("--title", default="Old Hindu adhika (leap) months")
    p.add_argument("--list", action="store_true", help="Print the leap months instead of plotting.")
    p.add_argument("--cell-edge", default="0.88", help="Cell border color (matplotlib gray string).")
    p.add_argument("--cell-lw", type=float, default=0.6, help="Cell border line width.")
    args = p.parse_args(argv)

    start_year, end_year = args.start_year, args.end_year
    if end_year < start_year:
        raise SystemExit("--end-year must be >= --start-year")

    points = leap_months(start_year, end_year)

    if args.list:
        for y, m in points:
            print(f"{y}  Adhika {HINDU_LUNAR_MONTHS[m - 1]}")
        return 0

    np = _need_numpy()
    plt = _need_matplotlib()
    from matplotlib.colors import ListedColormap

    fig, ax = plt.subplots(figsize=(16, 3.6))

    x_edges = np.arange(start_year - 0.5, end_year + 1.5, 1.0)
    y_edges = np.arange(0.5, 13.5, 1.0)
    Z = np.zeros((12, end_year - start_year + 1), dtype=float)
    ax.pcolormesh(
        x_edges,
        y_edges,
        Z,
        shading="flat",
        cmap=ListedColormap(["white"]),
        vmin=0, vmax=1,
        edgecolors=args.cell_edge,
        linewidth=float(args.cell_lw),
        antialiased=True,
        zorder=0,
    )

    ax.set_xlim(start_year - 0.5, end_year + 0.5)
    ax.set_ylim(0.5, 12.5)
    ax.grid(False)
    ax.tick_params(axis="both", which="both", length=0)
    ax.set_yticks(list(range(1, 13)))
    ax.set_yticklabels(list(HINDU_LUNAR_MONTHS))
    ax.set_xlabel("Gregorian year")

    xs = np.array([y for y, _ in points], dtype=int)
    ms = np.array([m for _, m in points], dtype=int)
    ax.scatter(xs, ms, s=22, marker="o", c="0.15", linewidths=0.0, zorder=5)

    ax.set_title(args.title)
    fig.tight_layout()
    fig.savefig(args.out, dpi=250)
    print(f"Saved: {args.out}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
