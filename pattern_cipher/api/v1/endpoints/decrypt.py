import logging

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from pattern_cipher.api.v1.errors import cipher_error_response, error_response
from pattern_cipher.core.exceptions import InputError, TextTooLongError
from pattern_cipher.dependencies import EngineDep, SettingsDep
from pattern_cipher.models.schemas import CipherOperation, CipherRequest, CipherResponse, ErrorResponse

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "",
    response_model=CipherResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Invalid input"},
        500: {"model": ErrorResponse, "description": "Decryption failed"},
    },
    summary="Decrypt ciphertext",
    description="Decrypt ciphertext with the configured cipher scheme.",
)
async def decrypt_ciphertext(
    request: CipherRequest,
    engine: EngineDep,
    settings: SettingsDep,
) -> CipherResponse | JSONResponse:
    """Decrypt ciphertext with the application's engine."""
    try:
        # Validate ciphertext length
        if request.text is not None and len(request.text) > settings.max_text_length:
            raise TextTooLongError(len(request.text), settings.max_text_length)

        plaintext = engine.decrypt(request.text)

        return CipherResponse(
            result=plaintext,
            operation=CipherOperation.DECRYPT,
            scheme=engine.scheme,
            length=len(plaintext),
        )

    except InputError as e:
        return cipher_error_response(status.HTTP_400_BAD_REQUEST, e)
    except Exception as e:
        logger.exception("Decryption failed")
        return error_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            "DecryptionFailed",
            f"Decryption failed: {str(e)}",
        )
