#!/usr/bin/env python3

r"""
usage: alfz.py [-h] [WORD ...]

sort words by the alphabet index of their first letter

positional arguments:
  WORD        a word to sort

options:
  -h, --help  show this help message and exit

quirks:
  sorts "a" to "z" by first letter only, and sorts "A" to "Z" in among them
  sorts words led by anything but a letter to the end, empty words too
  keeps the input order of words led by the same letter, unlike C "qsort"
  takes every word led by "-" as a word to sort, except "-h" or "--help" alone
  prints errors to stdout, not to stderr, and exits 1 after them
  prints each word back as the bytes it came in as, even when not utf-8

examples:
  alfz.py Banana apple  # apple, then Banana
  alfz.py 3x cat Bee  # Bee, then cat, then 3x
  alfz.py $(ls)
"""

# code reviewed by people, and by Black and Flake8 bots


import argparse
import difflib
import functools
import os
import sys


_89_COLUMNS = 89  # the Black app for styling Python promotes 89 columns per line

EXECUTION_ERROR_ABORT = 1  # exit 1 after an error, no matter which error

ALF_S = 26  # letters in the alphabet


class AlfzError(Exception):
    """Stop the run, print a line of error, and exit nonzero"""

    exit_status = EXECUTION_ERROR_ABORT


class NoArgumentsError(AlfzError):
    """Stop before sorting, for want of words to sort"""

    def __init__(self):
        super().__init__("no arguments passed")


class AllocationError(AlfzError):
    """Stop before sorting, for want of memory to copy the words"""

    def __init__(self, index):
        super().__init__("memory allocation failure at word {}".format(index))
        self.index = index


def main(argv):
    """Run from the command line"""

    run_self_tests()

    prog = os.path.basename(argv[0])

    try:
        args = parse_alfz_args(argv)
        words = copy_words(args.words)
    except AlfzError as exc:
        print("{}: error: {}".format(prog, exc))
        sys.exit(exc.exit_status)

    for (index, word) in enumerate(fchar_sorted(words)):
        stdout_print_fs("[{}][{}]: {} ".format(index, word[:1], word))


def stdout_print_fs(line):
    """Print a line of Stdout, giving back the bytes of surrogate-escaped args"""

    sys.stdout.flush()
    sys.stdout.buffer.write(os.fsencode(line) + b"\n")
    sys.stdout.buffer.flush()


def run():
    """Run from the "alfz" console script"""

    main(sys.argv)


def parse_alfz_args(argv):
    """Print help and exit zero if asked, else take all the words as words to sort"""

    parser = compile_argdoc(__doc__, epi="quirks:")
    parser.add_argument("words", metavar="WORD", nargs="*", help="a word to sort")

    exit_unless_doc_eq(parser, doc=__doc__)

    argv_tail = argv[1:]
    if argv_tail in (["-h"], ["--help"]):
        parser.parse_args(argv_tail)  # exits zero after printing help

    args = parser.parse_args(["--"] + argv_tail)
    if not args.words:
        raise NoArgumentsError()

    return args


def copy_words(words):
    """Copy every word, before sorting any of them"""

    copies = list()
    for (index, word) in enumerate(words):
        try:
            copies.append(copy_word(word))
        except MemoryError as exc:
            raise AllocationError(index) from exc

    return copies


def copy_word(word):
    """Copy one word"""

    return str(word)


#
# Sort words by first letter
#


def alf_index(char):
    """Say which letter of the alphabet a char is, from 0 to 25, else None"""

    if not char or len(char) != 1:
        return None

    code = ord(char)
    if ord("A") <= code <= ord("Z"):
        code += ord("a") - ord("A")

    index = code - ord("a")
    if 0 <= index < ALF_S:
        return index

    return None


def word_key(word):
    """Say which letter of the alphabet a word begins with, else None"""

    return alf_index(word[:1])


def fchar_compare(a, b):
    """Compare two words by first letter, sorting words led by non-letters last"""

    i1 = word_key(a)
    i2 = word_key(b)

    if (i1 is None) and (i2 is None):
        return 0
    if i1 is None:
        return 1
    if i2 is None:
        return -1

    return i1 - i2


def fchar_sorted(words):
    """Sort words by first letter, keeping the input order of ties"""

    return sorted(words, key=functools.cmp_to_key(fchar_compare))


#
# Self test
#


def run_self_tests():
    """Run some Self Tests, as part of every Launch"""

    _alf_index_test()
    _fchar_compare_test()


def _alf_index_test():
    """Agree with a scan of a lowercase and an uppercase alphabet, across 256 chars"""

    lowers = "abcdefghijklmnopqrstuvwxyz"
    uppers = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"

    for code in range(0x100):
        char = chr(code)

        want = None
        for (index, (lower, upper)) in enumerate(zip(lowers, uppers)):
            if char in (lower, upper):
                want = index
                break

        got = alf_index(char)
        assert got == want, (char, got, want)

    assert alf_index("") is None
    assert alf_index(None) is None


def _fchar_compare_test():
    """Sort valid keys up, invalid keys down, and call invalid keys equal"""

    assert fchar_compare("apple", "Banana") < 0
    assert fchar_compare("Banana", "apple") > 0
    assert fchar_compare("Apple", "avocado") == 0
    assert fchar_compare("3x", "cat") > 0
    assert fchar_compare("cat", "") < 0
    assert fchar_compare("3x", "") == 0


#
# Git-track some Python idioms here
#


# deffed in many files  # missing from docs.python.org
def compile_argdoc(doc, epi):
    """Declare how to parse the command line, as the doc of help lines says"""

    prog = doc.strip().splitlines()[0].split()[1]
    description = list(_ for _ in doc.strip().splitlines() if _)[1]
    epilog_at = doc.index(epi)
    epilog = doc[epilog_at:]

    kwargs = dict()
    if sys.version_info >= (3, 14):
        kwargs["color"] = False  # no KwArgs for color till later Python

    parser = argparse.ArgumentParser(
        prog=prog,
        description=description,
        add_help=True,
        formatter_class=functools.partial(
            argparse.RawTextHelpFormatter, width=_89_COLUMNS
        ),
        epilog=epilog,
        **kwargs,
    )

    return parser


# deffed in many files  # missing from docs.python.org
def exit_unless_doc_eq(parser, doc):
    """Exit nonzero, unless the doc equals "parser.format_help()" """

    file_filename = os.path.split(__file__)[-1]

    got = doc.strip()
    got_filename = "./{} --help".format(file_filename)
    want = parser.format_help()
    want_filename = "argparse.ArgumentParser(..."

    diff_lines = list(
        difflib.unified_diff(
            a=got.splitlines(),
            b=want.splitlines(),
            fromfile=got_filename,
            tofile=want_filename,
        )
    )

    if diff_lines:

        lines = list((_.rstrip() if _.endswith("\n") else _) for _ in diff_lines)
        stderr_print("\n".join(lines))

        stderr_print(
            "{}: error: update the doc to match help, or vice versa".format(
                file_filename
            )
        )

        sys.exit(1)


# deffed in many files  # missing from docs.python.org
def stderr_print(*args, **kwargs):
    sys.stdout.flush()
    print(*args, **kwargs, file=sys.stderr)
    sys.stderr.flush()  # esp. when kwargs["end"] != "\n"


if __name__ == "__main__":
    main(sys.argv)
