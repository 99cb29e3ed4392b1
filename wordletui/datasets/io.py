from __future__ import annotations
from pathlib import Path
from typing import List


def read_lines(p: Path | str) -> List[str]:
    """
    Read a UTF-8 word list into raw lines, stripping trailing CR/LF.
    Normalisation (case, blanks, length) is left to the caller.
    Raises FileNotFoundError if the path doesn't exist.
    """
    p = Path(p)
    if not p.exists():
        raise FileNotFoundError(p)
    return [ln.rstrip("\r\n") for ln in p.read_text(encoding="utf-8").splitlines()]
