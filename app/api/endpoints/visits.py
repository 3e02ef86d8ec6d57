"""
本文件用于提供访问统计 API。
"""

from typing import Dict

from fastapi import APIRouter, Depends

from app.api.deps import get_visit_counter
from app.services import VisitCounterService

router = APIRouter(prefix="/api/number-of-requests", tags=["visits"])


@router.get("")
async def get_visit_counts(counter: VisitCounterService = Depends(get_visit_counter)) -> Dict[str, int]:
    return dict(counter.get_all())
