from __future__ import annotations

import threading
from functools import lru_cache

from forestledger.repositories.forest import Forest
from forestledger.services.account_loader import load_accounts_from_file
from forestledger.settings import get_settings

# une seule Forest par process, partagée entre les threads du serveur :
# tout accès passe par ce verrou
_forest_lock = threading.RLock()


@lru_cache
def get_forest() -> Forest:
    settings = get_settings()
    forest = Forest(reports_dir=settings.reports_dir)
    if settings.accounts_file.exists():
        load_accounts_from_file(forest, settings.accounts_file)
    return forest


def forest_lock() -> threading.RLock:
    return _forest_lock
