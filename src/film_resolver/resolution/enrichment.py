"""
Per-candidate full record fetching with failure isolation.
"""
import logging
from typing import Optional
from ..catalog import CatalogClient
from ..models import Candidate, FullRecord

logger = logging.getLogger(__name__)


async def fetch_full_record(catalog: CatalogClient, candidate: Candidate) -> Optional[FullRecord]:
    """
    Fetch a candidate's full record, turning any failure into None.

    A failed fetch only removes one candidate from consideration, so it is
    logged and reported as inconclusive instead of raised. Cancellation is
    not an Exception and still propagates.

    :param catalog: Catalog client
    :param candidate: Search candidate to enrich
    :return: FullRecord, or None if the fetch failed
    """
    try:
        return await catalog.get_single_film(candidate.film_id)
    except Exception:
        logger.error(f"Error while retrieving film {candidate.film_id}", exc_info=True)
        return None
