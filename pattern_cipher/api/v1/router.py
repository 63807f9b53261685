from fastapi import APIRouter

from pattern_cipher.api.v1.endpoints import decrypt, encrypt, scheme

api_router = APIRouter()

api_router.include_router(
    encrypt.router,
    prefix="/encrypt",
    tags=["Encryption"],
)

api_router.include_router(
    decrypt.router,
    prefix="/decrypt",
    tags=["Decryption"],
)

api_router.include_router(
    scheme.router,
    prefix="/scheme",
    tags=["Scheme"],
)
