from fastapi import APIRouter

from pattern_cipher.dependencies import EngineDep
from pattern_cipher.models.schemas import SchemeResponse

router = APIRouter()


@router.get(
    "",
    response_model=SchemeResponse,
    summary="Describe the cipher scheme",
    description="Show the configured scheme, how it transforms text, and its public parameters.",
)
async def describe_scheme(engine: EngineDep) -> SchemeResponse:
    """
    Describe the application's cipher scheme.

    Only public parameters are returned; the description is the same for
    every request because the engine never changes after startup.
    """
    return SchemeResponse(**engine.describe())
