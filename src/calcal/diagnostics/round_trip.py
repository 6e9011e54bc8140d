from __future__ import annotations

import argparse
import random
from typing import List

import calcal
from calcal.core.errors import NoSolutionError


def parse_calendars(s: str) -> List[str]:
    # "hebrew,islamic" -> ["hebrew", "islamic"]
    return [x.strip() for x in s.split(",") if x.strip()]


def roundtrip_test(
    calendar: str,
    N: int,
    start: int,
    end: int,
    seed: int,
    *,
    max_failures: int,
) -> int:
    """RD -> calendar date -> RD on N random days in [start, end]."""
    random.seed(seed)
    eng = calcal.get_calendar(calendar)
    failures = 0

    for _ in range(N):
        rd0 = random.randint(start, end)
        d = eng.from_rd(rd0)
        try:
            back = eng.to_rd(d)
        except NoSolutionError as e:
            back = None
            err = str(e)
        else:
            err = ""

        if back != rd0:
            failures += 1
            print("\nFAIL")
            print("calendar:", calendar)
            print("rd0:", rd0)
            print("date:", d, f"({eng.format(d)})")
            print("back:", back, err)
            if failures >= max_failures:
                return failures

    return failures


def main(argv: list[str] | None = None) -> int:
    invertible = [n for n in calcal.list_calendars() if not calcal.calendar_info(n)["cyclic"]]

    p = argparse.ArgumentParser(description="Random round-trip tests: RD -> calendar date -> RD.")
    p.add_argument("--calendars", type=str, default=",".join(invertible),
                   help="Comma-separated calendar list.")
    p.add_argument("--N", type=int, default=2000, help="Trials per calendar.")
    p.add_argument("--start", type=int, default=654415, help="First RD (default: French epoch, 1792-09-22).")
    p.add_argument("--end", type=int, default=800000, help="Last RD.")
    p.add_argument("--seed", type=int, default=123, help="RNG seed.")
    p.add_argument("--max-failures", type=int, default=5, help="Stop after this many failures per calendar.")
    args = p.parse_args(argv)

    calendars = parse_calendars(args.calendars)
    if args.end < args.start:
        raise SystemExit("--end must be >= --start")

    total_fail = 0
    for cal in calendars:
        print(f"Testing {cal} ...")
        total_fail += roundtrip_test(cal, N=args.N, start=args.start, end=args.end, seed=args.seed,
                                     max_failures=args.max_failures)

    if total_fail == 0:
        print("All round-trip tests passed.")
        return 0

    print(f"Round-trip failures: {total_fail}")
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
