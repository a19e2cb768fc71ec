from cipher_bruteforce.core.exceptions import EngineNotFoundError
from cipher_bruteforce.models.schemas import CipherFamily, CipherType
from cipher_bruteforce.services.engines.base import CipherEngine


class EngineRegistry:
    """
    Registry for cipher engines.

    Holds the closed cipher catalog and provides lookup by type or family.
    Engines are listed in ``CipherType`` declaration order.
    """

    _engines: dict[CipherType, CipherEngine] = {}

    @classmethod
    def register(cls, engine: CipherEngine) -> CipherEngine:
        """
        Register a cipher engine.

        Args:
            engine: The engine descriptor to register

        Returns:
            The engine, unchanged
        """
        cls._engines[engine.cipher_type] = engine
        return engine

    def get_engine(self, cipher_type: CipherType) -> CipherEngine | None:
        """
        Get the engine for the specified cipher type.

        Args:
            cipher_type: The type of cipher

        Returns:
            Engine or None if not found
        """
        return self._engines.get(cipher_type)

    def require(self, cipher_type: CipherType | str) -> CipherEngine:
        """
        Get the engine for a cipher type or label.

        Raises:
            EngineNotFoundError: If no engine is registered under that name
        """
        try:
            cipher_type = CipherType(cipher_type)
        except ValueError:
            raise EngineNotFoundError(str(cipher_type)) from None

        engine = self.get_engine(cipher_type)
        if engine is None:
            raise EngineNotFoundError(cipher_type.value)
        return engine

    def get_engines_by_family(self, family: CipherFamily) -> list[CipherEngine]:
        """
        Get all engines belonging to a cipher family.

        Args:
            family: The cipher family

        Returns:
            List of engines
        """
        return [engine for engine in self.get_all_engines() if engine.family == family]

    def get_all_engines(self) -> list[CipherEngine]:
        """
        Get all registered engines.

        Returns:
            List of all engines in catalog order
        """
        return [self._engines[cipher_type] for cipher_type in CipherType if cipher_type in self._engines]

    @classmethod
    def list_registered(cls) -> list[CipherType]:
        """
        List all registered cipher types.

        Returns:
            List of registered cipher types
        """
        return [cipher_type for cipher_type in CipherType if cipher_type in cls._engines]

    @classmethod
    def is_registered(cls, cipher_type: CipherType) -> bool:
        """
        Check if a cipher type is registered.

        Args:
            cipher_type: The cipher type to check

        Returns:
            True if registered
        """
        return cipher_type in cls._engines


def _load_engines() -> None:
    """Import all engine modules and register their engines."""
    from cipher_bruteforce.services.engines.encoding.bacon import BACON_ENGINE
    from cipher_bruteforce.services.engines.encoding.polybius import POLYBIUS_ENGINE
    from cipher_bruteforce.services.engines.monoalphabetic.affine import AFFINE_ENGINE
    from cipher_bruteforce.services.engines.monoalphabetic.atbash import ATBASH_ENGINE
    from cipher_bruteforce.services.engines.monoalphabetic.caesar import CAESAR_ENGINE
    from cipher_bruteforce.services.engines.monoalphabetic.rot13 import ROT13_ENGINE
    from cipher_bruteforce.services.engines.polyalphabetic.atbash_vigenere import ATBASH_VIGENERE_ENGINE
    from cipher_bruteforce.services.engines.polyalphabetic.beaufort import BEAUFORT_ENGINE
    from cipher_bruteforce.services.engines.polyalphabetic.vigenere import VIGENERE_ENGINE
    from cipher_bruteforce.services.engines.polygraphic.playfair import PLAYFAIR_ENGINE
    from cipher_bruteforce.services.engines.transposition.columnar import COLUMNAR_ENGINE
    from cipher_bruteforce.services.engines.transposition.rail_fence import RAIL_FENCE_ENGINE
    from cipher_bruteforce.services.engines.transposition.reverse import REVERSE_ENGINE

    for engine in (
        CAESAR_ENGINE,
        ROT13_ENGINE,
        ATBASH_ENGINE,
        VIGENERE_ENGINE,
        RAIL_FENCE_ENGINE,
        AFFINE_ENGINE,
        BEAUFORT_ENGINE,
        COLUMNAR_ENGINE,
        PLAYFAIR_ENGINE,
        POLYBIUS_ENGINE,
        BACON_ENGINE,
        REVERSE_ENGINE,
        ATBASH_VIGENERE_ENGINE,
    ):
        EngineRegistry.register(engine)


# Load engines when module is imported
_load_engines()
