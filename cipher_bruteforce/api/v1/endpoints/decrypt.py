from fastapi import APIRouter, HTTPException, status

from cipher_bruteforce.core.exceptions import EngineNotFoundError, ValidationError
from cipher_bruteforce.dependencies import OrchestratorDep
from cipher_bruteforce.models.schemas import Candidate, DecryptRequest, ErrorResponse

router = APIRouter()


@router.post(
    "",
    response_model=Candidate,
    responses={
        400: {"model": ErrorResponse, "description": "Invalid input or key"},
        404: {"model": ErrorResponse, "description": "Cipher type not supported"},
    },
    summary="Decrypt ciphertext",
    description="Decrypt ciphertext using a specified cipher type and key, and score the result.",
)
def decrypt_ciphertext(
    request: DecryptRequest,
    orchestrator: OrchestratorDep,
) -> Candidate:
    """
    Decrypt ciphertext with a forced cipher type and a known key.

    Ciphers without a key ignore the ``key`` field.
    """
    try:
        return orchestrator.decrypt_with_key(request.ciphertext, request.cipher_type, request.key)
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
