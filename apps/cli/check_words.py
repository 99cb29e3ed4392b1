# apps/cli/check_words.py
"""
Validate a vocabulary before playing with it.

Prints a one-line summary (counts, invalid lines, SHA) followed by any
issues, and exits non-zero when the list would not pass.
"""

from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from wordletui.config import WORD_LENGTH
from wordletui.datasets import default_words_path, pretty_summary, validate_wordlist


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(description="wordletui — check word lists")
    ap.add_argument("--words", default=str(default_words_path()),
                    help="answers word list (default: bundled list)")
    ap.add_argument("--allowed", help="extra accepted guesses, one per line")
    ap.add_argument("--N", type=int, default=WORD_LENGTH, help="word length")
    args = ap.parse_args(argv)

    rep = validate_wordlist(args.N, args.words, args.allowed)
    print(pretty_summary(rep))
    for issue in rep["issues"]:
        print(f"  - {issue}")
    return 0 if rep["passed"] else 1


if __name__ == "__main__":
    sys.exit(main())
