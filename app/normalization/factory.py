from app.config.settings import Settings
from app.extraction.models import Modality
from app.normalization.base import BaseNormalizer
from app.normalization.normalizer import TextNormalizer
from app.normalization.rules import PROFILES


class NormalizerFactory:
    """Creates the text normalizer configured for each modality."""

    @classmethod
    def create(cls, profile: str) -> BaseNormalizer:
        name = profile.lower()
        rules = PROFILES.get(name)
        if rules is None:
            raise ValueError(
                f"Unknown normalization profile '{name}'. Choose from: {sorted(PROFILES)}"
            )
        return TextNormalizer(rules)

    @classmethod
    def for_modalities(cls, settings: Settings) -> dict[Modality, BaseNormalizer]:
        return {
            Modality.PDF: cls.create(settings.pdf_normalization_profile),
            Modality.IMAGE: cls.create(settings.image_normalization_profile),
        }
