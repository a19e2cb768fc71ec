from functools import lru_cache
from typing import Annotated

from fastapi import Depends

from cipher_bruteforce.core.config import Settings, get_settings
from cipher_bruteforce.data.english import ReferenceData, default_reference
from cipher_bruteforce.services.pipeline.orchestrator import BruteForceOrchestrator
from cipher_bruteforce.services.pipeline.scorer import EnglishScorer


# Settings dependency
SettingsDep = Annotated[Settings, Depends(get_settings)]


@lru_cache
def get_reference_data() -> ReferenceData:
    """Shared, read-only English reference data."""
    return default_reference()


def get_scorer(settings: SettingsDep) -> EnglishScorer:
    return EnglishScorer(get_reference_data(), settings.scoring_weights)

ScorerDep = Annotated[EnglishScorer, Depends(get_scorer)]


def get_orchestrator(settings: SettingsDep, scorer: ScorerDep) -> BruteForceOrchestrator:
    return BruteForceOrchestrator(scorer, settings)

OrchestratorDep = Annotated[BruteForceOrchestrator, Depends(get_orchestrator)]
