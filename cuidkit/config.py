"""Generation constants and deployment settings."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, field_validator

DEFAULT_LENGTH = 24
MAXIMUM_LENGTH = 98
INITIAL_COUNT_MAX = 476782367
FINGERPRINT_LENGTH = 32
DEFAULT_ENTROPY_LENGTH = 4

# Both variants produce 512-bit digests. The choice is fixed per deployment
# because switching changes every generated ID.
HASH_ALGORITHM = "sha3_512"
FALLBACK_HASH_ALGORITHM = "sha512"
SUPPORTED_HASH_ALGORITHMS = frozenset({HASH_ALGORITHM, FALLBACK_HASH_ALGORITHM})


class CuidSettings(BaseModel):
    """Deployment settings for a generator.

    Parameters:
        default_length: Length used when a call does not request one.
        hash_algorithm: 512-bit hashlib algorithm name used for every ID.

    Raises:
        pydantic.ValidationError: If a field is outside its supported range.
    """

    model_config = ConfigDict(frozen=True)

    default_length: int = DEFAULT_LENGTH
    hash_algorithm: str = HASH_ALGORITHM

    @field_validator("default_length")
    @classmethod
    def _validate_default_length(cls, value: int) -> int:
        if not 1 <= value <= MAXIMUM_LENGTH:
            raise ValueError(f"default_length must be between 1 and {MAXIMUM_LENGTH}.")
        return value

    @field_validator("hash_algorithm")
    @classmethod
    def _validate_hash_algorithm(cls, value: str) -> str:
        normalized = value.strip().lower()
        if normalized not in SUPPORTED_HASH_ALGORITHMS:
            raise ValueError(
                f"Unsupported hash algorithm '{value}'. "
                f"Expected one of {sorted(SUPPORTED_HASH_ALGORITHMS)}."
            )
        return normalized


DEFAULT_SETTINGS = CuidSettings()
