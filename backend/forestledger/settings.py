from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

DEFAULT_ACCOUNTS_FILE = "accountswithspace.txt"


@dataclass(frozen=True)
class Settings:
    reports_dir: Path | None
    accounts_file: Path
    log_level: str


def get_settings() -> Settings:
    # 1) dossier des rapports : env var, sinon chemins relatifs au cwd
    env = os.getenv("FORESTLEDGER_REPORTS_DIR")
    reports_dir = Path(env.strip()).expanduser() if env and env.strip() else None

    # 2) fichier de comptes chargé au démarrage (optionnel)
    env = os.getenv("FORESTLEDGER_ACCOUNTS_FILE")
    accounts_file = Path(env.strip()).expanduser() if env and env.strip() else Path(DEFAULT_ACCOUNTS_FILE)

    log_level = (os.getenv("FORESTLEDGER_LOG_LEVEL") or "INFO").strip().upper()

    # pas de mkdir ici : un dossier de rapports absent est une erreur visible
    return Settings(reports_dir=reports_dir, accounts_file=accounts_file, log_level=log_level)
