from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable

from forestledger.repositories.forest import Forest

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SkippedLine:
    line_no: int
    line: str
    reason: str


@dataclass
class LoadReport:
    loaded: list[str] = field(default_factory=list)
    skipped: list[SkippedLine] = field(default_factory=list)
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def load_accounts_from_lines(forest: Forest, lines: Iterable[str]) -> LoadReport:
    """
    Format attendu : "<numéro> <description>" (un compte par ligne).
    Lignes vides ignorées ; lignes invalides / doublons signalés puis ignorés.
    """
    report = LoadReport()

    for idx, raw in enumerate(lines, start=1):
        line = raw.rstrip("\r\n").strip(" \t")
        if not line:
            continue

        space = line.find(" ")
        if space == -1:
            report.skipped.append(SkippedLine(idx, line, "invalid line format"))
            logger.warning("Invalid line format (line %d): %s", idx, line)
            continue

        number = line[:space].strip(" \t")
        description = line[space + 1:].strip(" \t")
        logger.debug("%s -> Account number: %s, Description: %s", line, number, description)

        if not forest.is_valid_account_number(number):
            report.skipped.append(SkippedLine(idx, line, "invalid account number"))
            logger.warning("Invalid account number found: %s - Skipping.", number)
            continue

        if forest.search_account(number) is not None:
            report.skipped.append(SkippedLine(idx, line, "duplicate account"))
            logger.warning("Duplicate account found: %s - Skipping.", number)
            continue

        result = forest.add_account(number, description)
        if result.ok:
            report.loaded.append(number)
        else:
            report.skipped.append(SkippedLine(idx, line, str(result.error)))

    return report


def load_accounts_from_file(forest: Forest, path: Path) -> LoadReport:
    if not path.exists():
        logger.error("Could not open file %s", path)
        return LoadReport(error=f"Could not open file {path}")

    logger.info("Loading accounts from file: %s", path)
    try:
        with path.open("r", encoding="utf-8") as fh:
            report = load_accounts_from_lines(forest, fh)
    except OSError as e:
        logger.exception("Failed to read accounts file %s", path)
        return LoadReport(error=f"Could not open file {path} ({e})")

    logger.info(
        "Loaded %d account(s) from %s, skipped %d line(s)",
        len(report.loaded),
        path,
        len(report.skipped),
    )
    return report
