"""CLI entry point: python -m ff7r_text [--data DIR] [--out DIR]"""

import sys

from ff7r_text.cli import main


if __name__ == "__main__":
    sys.exit(main())
