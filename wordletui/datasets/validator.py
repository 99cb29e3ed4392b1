"""
Vocabulary integrity checks for wordletui.

What this module does:
- Validate the answers word list and, when given, the extra allowed-guesses list.
- Enforce formatting rules (a–z only, exact length N, one per line).
- Detect duplicates and invalid lines; compute SHA-256 of the raw files.
- Return a machine-readable dict and provide a pretty one-line summary.

The game itself tolerates a messy list (bad lines are dropped on load), so
this is a diagnostic for whoever maintains the word files.

Typical use:
    from wordletui.datasets import validate_wordlist, pretty_summary
    rep = validate_wordlist(5, "wordletui/datasets/data/fiveletterwords.txt")
    print(pretty_summary(rep))
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Dict, List, Optional, Tuple
import hashlib


# -----------------------------
# Dataclasses for structured reports
# -----------------------------

@dataclass
class FileReport:
    """Per-file diagnostics and metadata."""
    path: str            # file path (as given)
    exists: bool         # did the file exist on disk?
    count: int           # number of VALID words after cleaning
    sha256: str          # SHA-256 of raw file bytes (empty string if missing)
    unique_count: int    # unique valid words (after dedupe)
    invalid_lines: int   # number of invalid lines encountered


@dataclass
class ValidationReport:
    """Top-level validation result for one vocabulary."""
    N: int
    answers: FileReport
    allowed: Optional[FileReport]
    passed: bool
    issues: List[str]    # human-friendly list of problems (if any)


# -----------------------------
# Helpers
# -----------------------------

def _sha256_file(path: Path) -> str:
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def _load_and_check(path: Path, N: int) -> Tuple[List[str], int]:
    """
    Load words from a text file and count the lines the game would drop.

    Rules:
      - one token per line, surrounding whitespace ignored
      - alphabetic, exact length N (case is normalised on load, so 'CRANE' is fine)
      - blank lines are skipped without being counted as invalid

    Returns:
      (valid_words, invalid_count)
    """
    valid: List[str] = []
    invalid = 0

    with path.open("r", encoding="utf-8") as f:
        for raw in f:
            w = raw.strip().lower()
            if not w:
                continue
            if w.isalpha() and len(w) == N:
                valid.append(w)
            else:
                invalid += 1

    return valid, invalid


def _check_file(label: str, path_str: str, N: int, issues: List[str]) -> Tuple[FileReport, List[str]]:
    p = Path(path_str)
    if not p.exists():
        issues.append(f"{label} file not found: {path_str}")
        return FileReport(path_str, False, 0, "", 0, 0), []

    words, invalid = _load_and_check(p, N)
    report = FileReport(
        path=str(p),
        exists=True,
        count=len(words),
        sha256=_sha256_file(p),
        unique_count=len(set(words)),
        invalid_lines=invalid,
    )

    if report.count == 0:
        issues.append(f"{label} file contains 0 valid words")
    if invalid:
        issues.append(f"{label} has {invalid} invalid line(s)")
    if report.count != report.unique_count:
        issues.append(f"{label} contains duplicate lines")
    return report, words


# -----------------------------
# Public API
# -----------------------------

def validate_wordlist(N: int, answers_path: str, allowed_path: str | None = None) -> Dict:
    """
    Validate the vocabulary for word length N.

    Parameters
    ----------
    N : int
        Word length (5 for the standard game).
    answers_path : str
        Path to the list targets are drawn from (one word per line).
    allowed_path : str, optional
        Path to extra accepted guesses.

    Returns
    -------
    Dict
        A JSON-serializable dictionary (see ValidationReport schema).
        `passed` requires existing files, at least one valid answer, and no
        invalid lines. Duplicates are reported but do not fail the check,
        since the loader dedupes them.
    """
    issues: List[str] = []

    ans_report, _ = _check_file("answers", answers_path, N, issues)
    all_report = None
    if allowed_path:
        all_report, _ = _check_file("allowed", allowed_path, N, issues)

    reports = [r for r in (ans_report, all_report) if r is not None]
    passed = (
            all(r.exists and r.invalid_lines == 0 for r in reports)
            and ans_report.count > 0
    )

    rep = ValidationReport(
        N=N,
        answers=ans_report,
        allowed=all_report,
        passed=passed,
        issues=issues,
    )
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Produce a compact, human-friendly one-liner for console output.

    Example:
        N=5 | answers=612 (uniq=612, invalid=0, sha=abc123...) | OK
    """
    def _part(label: str, r: Dict) -> str:
        sha = (r.get("sha256") or "")[:12]
        return (f"{label}={r['count']} (uniq={r['unique_count']}, "
                f"invalid={r['invalid_lines']}, sha={sha})")

    parts = [f"N={report['N']}", _part("answers", report["answers"])]
    if report.get("allowed"):
        parts.append(_part("allowed", report["allowed"]))
    parts.append("OK" if report["passed"] else "FAIL")
    return " | ".join(parts)
