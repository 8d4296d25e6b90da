# Test fixtures
from .sample_env import (
    SAMPLE_APP_ENV,
    SAMPLE_APP_PAIRS,
    SAMPLE_CRLF_ENV,
    SAMPLE_DUPLICATE_ENV,
    SAMPLE_COMMENTS_ONLY_ENV,
    FOO_BAZ_PAIRS,
)

__all__ = [
    "SAMPLE_APP_ENV",
    "SAMPLE_APP_PAIRS",
    "SAMPLE_CRLF_ENV",
    "SAMPLE_DUPLICATE_ENV",
    "SAMPLE_COMMENTS_ONLY_ENV",
    "FOO_BAZ_PAIRS",
]
