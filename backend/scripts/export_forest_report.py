from __future__ import annotations

import logging
import sys

from forestledger.repositories.forest import Forest
from forestledger.services.account_loader import load_accounts_from_file
from forestledger.settings import get_settings


def main(argv: list[str] | None = None) -> int:
    """Charge le fichier de comptes puis écrit l'arbre complet dans un fichier."""
    argv = sys.argv[1:] if argv is None else argv
    filename = argv[0] if argv else "forest_tree.txt"

    settings = get_settings()
    logging.basicConfig(level=settings.log_level)

    forest = Forest(reports_dir=settings.reports_dir)
    loaded = load_accounts_from_file(forest, settings.accounts_file)
    if not loaded.ok:
        print(loaded.error)
        return 1

    res = forest.print_forest_tree(filename)
    print(res.message)
    return 0 if res.ok else 1


if __name__ == "__main__":
    raise SystemExit(main())
