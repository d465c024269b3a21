import sys
from collections import Counter
from util import *
from parsing_util import *

# Data parsing into two lists
def parse_lists(dat):
    list1 = []
    list2 = []

    for row in intsall(dat):
        if len(row) < 2:
            raise AocError("parse", "Invalid number of columns in input text")
        list1.append(row[0])
        list2.append(row[1])

    return list1, list2

def total_distance(list1, list2):
    if len(list1) != len(list2):
        raise AocError("parse", "Lists are not the same length in input text!")

    h_accumulator = 0
    for a, b in zip(sorted(list1), sorted(list2)):
        h_accumulator += abs(a - b)
        checkaccum(h_accumulator, W_ACCUM)

    return h_accumulator

def total_similarity(list1, list2):
    freq = Counter(list2)

    h_accumulator = 0
    for value in list1:
        h_accumulator += value * freq[value]
        checkaccum(h_accumulator, W_ACCUM)

    return h_accumulator

def solve(dat):
    list1, list2 = parse_lists(dat)
    print(len(list1), len(list2), file=sys.stderr)

    return total_distance(list1, list2), total_similarity(list1, list2)

def main(argv=None):
    return run(solve, argv)

if __name__ == "__main__":
    sys.exit(main())
