"""
Suggested topics endpoint.

Always answers 200 with a JSON array: cached, freshly generated, or the
fallback list when generation fails.
"""

from typing import List

from fastapi import APIRouter, Depends

from api.dependencies import get_suggestions_service
from topics import SuggestionsService

router = APIRouter(prefix="/api", tags=["suggestions"])


@router.get("/suggested-topics", response_model=List[str])
async def suggested_topics(
    service: SuggestionsService = Depends(get_suggestions_service),
) -> List[str]:
    return await service.get_topics()
