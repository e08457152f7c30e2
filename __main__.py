#!/usr/bin/env python3

"""
usage:  python3 ../alfz/ WORD [WORD ...]
"""

import os
import subprocess
import sys


def main(argv):
    """
    Run "bin/alfz.py"
    """

    # Find the colocated "bin/" dir

    file_dir = os.path.split(os.path.realpath(__file__))[0]
    bin_alfz_py = os.path.join(file_dir, "bin", "alfz.py")

    # Call Alfz Py, and exit with its exit status

    ran = subprocess.run([sys.executable, bin_alfz_py] + argv[1:])
    sys.exit(ran.returncode)


if __name__ == "__main__":
    main(sys.argv)
