from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, TextIO

from forestledger.domain.errors import NotFoundError, ReportIOError, ValidationError

logger = logging.getLogger(__name__)

INVALID_FILENAME_CHARS = '\\/:?"<>|'


def is_valid_filename(filename: object) -> bool:
    if not isinstance(filename, str) or filename == "":
        return False
    return not any(c in INVALID_FILENAME_CHARS for c in filename)


def resolve_destination(filename: str, base_dir: Path | None = None) -> Path:
    """
    Valide le nom de fichier et retourne le chemin de destination.
    - ValidationError si le nom est vide / contient un caractère interdit
    - NotFoundError si le dossier cible n'existe pas
    """
    if not is_valid_filename(filename):
        raise ValidationError(
            "Invalid filename. Please avoid special characters and empty input."
        )

    path = Path(filename)
    if base_dir is not None:
        path = base_dir / path

    has_directory = base_dir is not None or path.parent != Path(".")
    if has_directory and not path.parent.is_dir():
        raise NotFoundError(
            "The directory does not exist. Please provide a valid filename."
        )
    return path


def write_report(path: Path, render: Callable[[TextIO], None]) -> None:
    # "w" tronque le contenu existant ; le with ferme le fichier sur tous les chemins
    try:
        with path.open("w", encoding="utf-8") as fh:
            render(fh)
    except OSError as e:
        logger.exception("Failed to write report %s", path)
        raise ReportIOError(f'Could not open file "{path}" for writing.') from e
