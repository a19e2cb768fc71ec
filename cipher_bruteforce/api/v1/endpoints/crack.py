from fastapi import APIRouter, HTTPException, status

from cipher_bruteforce.core.exceptions import EngineNotFoundError, ValidationError
from cipher_bruteforce.dependencies import OrchestratorDep
from cipher_bruteforce.models.schemas import CrackRequest, CrackResponse, ErrorResponse

router = APIRouter()


@router.post(
    "",
    response_model=CrackResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Invalid input"},
        404: {"model": ErrorResponse, "description": "Cipher type not supported"},
    },
    summary="Brute-force ciphertext",
    description=(
        "Try one cipher family, or all of them, across their full key spaces "
        "and return the best-scoring plaintext candidates."
    ),
)
def crack_ciphertext(
    request: CrackRequest,
    orchestrator: OrchestratorDep,
) -> CrackResponse:
    """
    Run the brute-force search.

    Without a ciphertext in the request the configured ciphertext is attacked.
    The search is CPU-bound, so this runs in the threadpool.
    """
    try:
        result = orchestrator.crack(request.ciphertext, request.cipher_type, request.top_k)
    except ValidationError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=e.message,
        )
    except EngineNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=e.message,
        )

    return CrackResponse(
        candidates=result.candidates,
        cipher_types=result.cipher_types,
        keys_tried=result.keys_tried,
    )
