from fastapi import APIRouter

from cipher_bruteforce.api.v1.endpoints import ciphers, crack, decrypt

api_router = APIRouter()

api_router.include_router(
    crack.router,
    prefix="/crack",
    tags=["Brute Force"],
)

api_router.include_router(
    decrypt.router,
    prefix="/decrypt",
    tags=["Decryption"],
)

api_router.include_router(
    ciphers.router,
    prefix="/ciphers",
    tags=["Catalog"],
)
