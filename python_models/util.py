import argparse
import sys

import parsing_util

W_ACCUM = 64

ERROR_PREFIXES = {
    "config": "Problem getting arguments",
    "io": "Error reading input",
    "parse": "Error parsing input text",
    "overflow": "Answer out of range",
}

class AocError(Exception):
    """A failure while setting up or solving a day, tagged with its kind."""

    def __init__(self, kind, message):
        if kind not in ERROR_PREFIXES:
            raise ValueError(f"unknown error kind: {kind}")
        super().__init__(message)
        self.kind = kind
        self.message = message

    def __str__(self):
        return f"{ERROR_PREFIXES[self.kind]}, {self.message}"

class Config:
    def __init__(self, file_path):
        self.file_path = file_path

    @classmethod
    def build(cls, argv):
        p = argparse.ArgumentParser(add_help=False)
        p.add_argument("file_path", nargs="?")
        args, extra = p.parse_known_args(argv[1:])

        if args.file_path is None:
            raise AocError("config", "Filepath Missing from Arguments!")
        if extra:
            raise AocError("config", f"Unexpected arguments: {' '.join(extra)}")

        return cls(args.file_path)

def checkwidth(x, bits):
    assert x >= 0 and x < (1 << bits)

# Like checkwidth, for totals that large valid input can push past the width
def checkaccum(x, bits):
    if x < 0 or x >= (1 << bits):
        raise AocError("overflow", f"total does not fit in {bits} bits")

def run(solve, argv=None, raw=False):
    """Read the file named on the command line and print the answers from
    `solve`, one `Part N = ...` line each. Returns the exit status."""
    if argv is None:
        argv = sys.argv

    try:
        config = Config.build(argv)
        print(f"Reading input from: {config.file_path}", file=sys.stderr)
        dat = parsing_util.readinputs(config.file_path, raw=raw)
        answers = solve(dat)
    except AocError as e:
        print(e)
        return 1

    for part, answer in enumerate(answers, start=1):
        print(f"Part {part} = {answer}")

    return 0
