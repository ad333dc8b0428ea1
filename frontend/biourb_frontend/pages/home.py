from __future__ import annotations

import logging
from typing import Dict

from ..api_client import ApiClient, ApiError


logger = logging.getLogger(__name__)

STAT_KEYS = ("totalArvores", "totalAreas", "totalUsuarios", "arvoresSaudaveis")


class HomePage:
    """Landing page: the four registry counters."""

    def __init__(self, api: ApiClient):
        self.api = api
        self.stats: Dict[str, int] = dict.fromkeys(STAT_KEYS, 0)
        self.loading = True

    def load(self) -> Dict[str, int]:
        try:
            data = self.api.get_stats()
            self.stats = {k: int(data.get(k) or 0) for k in STAT_KEYS}
        except ApiError as e:
            # counters stay at zero; the page still renders
            logger.error("Erro ao buscar estatísticas: %s", e)
        finally:
            self.loading = False
        return self.stats

    def display(self) -> Dict[str, str]:
        return {k: ("..." if self.loading else str(v)) for k, v in self.stats.items()}
