# tasque/core/utils.py
# Fonctions temporelles basiques.

import datetime as dt


def utcnow():
    """Date/heure UTC (timezone-aware).

    Description:
        Retourne `datetime.now(timezone.utc)` avec timezone UTC attachée. Utilisé
        pour l'expiration des jetons JWT et les horodatages du health check.

    Returns:
        datetime.datetime: Timestamp UTC (aware).
    """
    return dt.datetime.now(dt.timezone.utc)
