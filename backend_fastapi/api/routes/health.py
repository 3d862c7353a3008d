from typing import Any

from fastapi import APIRouter, Depends

from backend_fastapi.api.deps import check_health_use_case
from core.application.check_health import CheckHealthUseCase

router = APIRouter(tags=["health"])


@router.get("/health", summary="Liveness and storage status")
def health(
    use_case: CheckHealthUseCase = Depends(check_health_use_case),
) -> dict[str, Any]:
    return use_case.execute()
