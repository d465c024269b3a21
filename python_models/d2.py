import sys
from tqdm import tqdm
from util import *
from parsing_util import *

hc_min_step = 1
hc_max_step = 3

def is_safe(levels):
    """A report is safe when it moves in one direction only, by 1-3 each step."""
    direction = 0

    for last, value in zip(levels, levels[1:]):
        diff = value - last
        step = 1 if diff > 0 else -1

        if direction != 0 and step != direction:
            return False
        direction = step

        if not (hc_min_step <= abs(diff) <= hc_max_step):
            return False

    return True

def is_safe_dampened(levels):
    if is_safe(levels):
        return True

    # Problem dampener: try again with each single level skipped
    for skip in range(len(levels)):
        if is_safe(levels[:skip] + levels[skip+1:]):
            return True

    return False

def count_safe(reports, dampened=False):
    check = is_safe_dampened if dampened else is_safe

    h_count = 0
    for levels in tqdm(reports, desc="reports", disable=None):
        h_count += check(levels)

    return h_count

def solve(dat):
    # Data parsing into a list of lists
    reports = intsall(dat)
    print(len(reports), file=sys.stderr)

    return count_safe(reports), count_safe(reports, dampened=True)

def main(argv=None):
    return run(solve, argv)

if __name__ == "__main__":
    sys.exit(main())
