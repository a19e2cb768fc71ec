from fastapi import APIRouter

from cipher_bruteforce.models.schemas import CipherFamily, CipherInfo
from cipher_bruteforce.services.engines.registry import EngineRegistry

router = APIRouter()


@router.get(
    "",
    response_model=list[CipherInfo],
    summary="List ciphers",
    description="List the cipher catalog, optionally restricted to one family.",
)
async def list_ciphers(family: CipherFamily | None = None) -> list[CipherInfo]:
    registry = EngineRegistry()
    engines = registry.get_engines_by_family(family) if family else registry.get_all_engines()

    return [
        CipherInfo(
            cipher_type=engine.cipher_type,
            name=engine.name,
            family=engine.family,
            description=engine.description,
            keyed=engine.keyed,
        )
        for engine in engines
    ]
