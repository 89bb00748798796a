"""Solution catalog API endpoints (read-only).

GET /api/solutions      - List solutions
GET /api/solutions/{id} - Get one solution
"""

from fastapi import APIRouter, Depends, HTTPException

from impactmap.api.deps import get_repository
from impactmap.db.repository import InMemoryRepository
from impactmap.schemas.solutions import SolutionSchema

router = APIRouter()


@router.get("", response_model=list[SolutionSchema])
async def list_solutions(
    repository: InMemoryRepository = Depends(get_repository),
) -> list[SolutionSchema]:
    return repository.list_solutions()


@router.get("/{solution_id}", response_model=SolutionSchema)
async def get_solution(
    solution_id: str,
    repository: InMemoryRepository = Depends(get_repository),
) -> SolutionSchema:
    solution = repository.get_solution(solution_id)
    if solution is None:
        raise HTTPException(status_code=404, detail="Solution not found")
    return solution
