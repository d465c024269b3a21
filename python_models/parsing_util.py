import util

def readinputs(fn, raw=False):
    try:
        with open(fn, "r", encoding="utf-8") as f:
            if raw:
                return f.read()
            else:
                return [x.strip() for x in f.readlines()]
    except (OSError, UnicodeDecodeError) as e:
        raise util.AocError("io", f"Could not read input file! {e}") from e

def is_numeric(x):
    return x >= "0" and x <= "9"

def is_digits(s):
    return len(s) > 0 and all(is_numeric(x) for x in s)

# Inputs are unsigned 32-bit values
hc_max_int_digits = 10
w_int = 32

# Strict: every whitespace separated token must be an unsigned decimal number
def ints(s):
    out = []
    for tok in s.split():
        if not is_digits(tok) or len(tok.lstrip("0")) > hc_max_int_digits \
                or int(tok) >= (1 << w_int):
            raise util.AocError("parse", f"Couldn't parse into number: {tok}")
        out.append(int(tok))
    return out

def intsall(a):
    return [ints(x) for x in a if x.strip()]
