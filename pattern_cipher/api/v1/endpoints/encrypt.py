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
        500: {"model": ErrorResponse, "description": "Encryption failed"},
    },
    summary="Encrypt plaintext",
    description="Encrypt plaintext with the configured cipher scheme.",
)
async def encrypt_plaintext(
    request: CipherRequest,
    engine: EngineDep,
    settings: SettingsDep,
) -> CipherResponse | JSONResponse:
    """
    Encrypt plaintext with the application's engine.

    Letters are transformed, everything else keeps its position, and the
    result has the same length as the uppercased input.
    """
    try:
        # Validate plaintext length
        if request.text is not None and len(request.text) > settings.max_text_length:
            raise TextTooLongError(len(request.text), settings.max_text_length)

        ciphertext = engine.encrypt(request.text)

        return CipherResponse(
            result=ciphertext,
            operation=CipherOperation.ENCRYPT,
            scheme=engine.scheme,
            length=len(ciphertext),
        )

    except InputError as e:
        return cipher_error_response(status.HTTP_400_BAD_REQUEST, e)
    except Exception as e:
        logger.exception("Encryption failed")
        return error_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            "EncryptionFailed",
            f"Encryption failed: {str(e)}",
        )
