from .prompts import (
    MODE_ANALYZE,
    MODE_BUILD,
    build_prompt,
    build_chat_prompt
)
from .normalizer import (
    KIND_ANALYSIS,
    KIND_BUILD,
    DEFAULT_ANALYSIS,
    DEFAULT_BUILD,
    extract_json,
    normalize,
    normalize_analysis,
    normalize_build
)
from .text_extractor import extract_text_from_file
from .blob_store import S3BlobStore, get_blob_store
from .gemini import GeminiModel, get_model_client
from .analysis_store import AnalysisStore, get_analysis_store

__all__ = [
    # Prompts
    "MODE_ANALYZE",
    "MODE_BUILD",
    "build_prompt",
    "build_chat_prompt",
    # Normalization
    "KIND_ANALYSIS",
    "KIND_BUILD",
    "DEFAULT_ANALYSIS",
    "DEFAULT_BUILD",
    "extract_json",
    "normalize",
    "normalize_analysis",
    "normalize_build",
    # Extraction
    "extract_text_from_file",
    # Collaborators
    "S3BlobStore",
    "get_blob_store",
    "GeminiModel",
    "get_model_client",
    "AnalysisStore",
    "get_analysis_store"
]
