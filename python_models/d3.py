import enum
import re
import sys
from util import *
from parsing_util import *

# Input is a single opaque string; only three literal tokens matter
TOK_MUL = "mul("
TOK_DO = "do()"
TOK_DONT = "don't("

hc_max_operand = 1000
hc_max_digits = 3

# No token can start inside another, so the leftmost match is unambiguous
RE_MUL = re.compile(re.escape(TOK_MUL))
RE_ANY = re.compile("|".join(re.escape(t) for t in [TOK_MUL, TOK_DO, TOK_DONT]))

class ScanState(enum.Enum):
    ENABLED = 1
    DISABLED = 2

def multiply_candidate(text, start=0):
    """Parse `text[start:]` as `A,B)...` and return A * B, or None.

    A runs up to the first comma, B from there to the first closing paren.
    Both must be plain decimal digits worth less than 1000.
    """
    comma = text.find(",", start)
    if comma < 0:
        return None

    paren = text.find(")", comma + 1)
    if paren < 0:
        return None

    a = text[start:comma]
    b = text[comma + 1:paren]
    if not (is_digits(a) and is_digits(b)):
        return None

    # Leading zeros are fine, anything past 3 significant digits is too big
    if len(a.lstrip("0")) > hc_max_digits or len(b.lstrip("0")) > hc_max_digits:
        return None

    a = int(a)
    b = int(b)
    if a >= hc_max_operand or b >= hc_max_operand:
        return None

    return a * b

def scan_unconditional(buffer):
    h_accum = 0
    pos = 0

    while True:
        m = RE_MUL.search(buffer, pos)
        if m is None:
            break
        pos = m.end()

        prod = multiply_candidate(buffer, pos)
        if prod is not None:
            h_accum += prod
            checkwidth(h_accum, W_ACCUM)

    return h_accum

def scan(buffer):
    h_accum = 0
    h_state = ScanState.ENABLED
    pos = 0

    while True:
        m = RE_ANY.search(buffer, pos)
        if m is None:
            break
        # Always step past the whole token, don't( included
        pos = m.end()

        tok = m.group()
        if tok == TOK_DO:
            h_state = ScanState.ENABLED
        elif tok == TOK_DONT:
            h_state = ScanState.DISABLED
        elif h_state == ScanState.ENABLED:
            prod = multiply_candidate(buffer, pos)
            if prod is not None:
                h_accum += prod
                checkwidth(h_accum, W_ACCUM)

    return h_accum

def solve(dat):
    return scan_unconditional(dat), scan(dat)

def main(argv=None):
    return run(solve, argv, raw=True)

if __name__ == "__main__":
    sys.exit(main())
