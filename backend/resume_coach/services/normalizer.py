"""
Response normalizer for Gemini replies.

The model is asked for bare JSON but may wrap it in a ```json fence, surround
it with prose, or return something unparseable. normalize() always returns a
complete record: the parsed object is shallow-merged over a default record and
the list/dict/scalar fields the frontend depends on are reset when mistyped.
"""
import copy
import json
import logging
import math
import re
from typing import Any

logger = logging.getLogger(__name__)

KIND_ANALYSIS = "analysis"
KIND_BUILD = "build"

_FENCED_JSON = re.compile(r"```json\s*(.*?)```", re.IGNORECASE | re.DOTALL)
_BARE_OBJECT = re.compile(r"(\{.*\})", re.DOTALL)


# ============================================================================
# Default Records
# ============================================================================

DEFAULT_ANALYSIS = {
    "overallScore": 0,
    "skills": [],
    "experienceLevel": "",
    "strengths": [],
    "weaknesses": [],
    "suggestions": [],
    "job_roles": [],
    "keywordDensity": {},
    "atsCompatibility": 0,
}

DEFAULT_BUILD = {
    "name": "",
    "title": "",
    "contact": "",
    "summary": "",
    "skills": [],
    "experience": [],
    "education": [],
    "projects": [],
    "certifications": [],
    "suggestions": [],
    "atsScore": 0,
}

ANALYSIS_LIST_FIELDS = ("suggestions", "job_roles", "skills", "strengths", "weaknesses")
ANALYSIS_DICT_FIELDS = ("keywordDensity",)

BUILD_LIST_FIELDS = ("suggestions", "skills", "experience", "education", "projects", "certifications")
BUILD_STRING_FIELDS = ("name", "title", "contact", "summary")
BUILD_NUMBER_FIELDS = ("atsScore",)


# ============================================================================
# JSON Extraction
# ============================================================================

def _reject_constant(name: str):
    # NaN/Infinity are not JSON and cannot be serialized back out
    raise ValueError(f"Invalid JSON constant: {name}")


def _finite_float(literal: str) -> float:
    # 1e400 overflows to inf, which cannot be serialized back out either
    value = float(literal)
    if not math.isfinite(value):
        raise ValueError(f"Out of range JSON number: {literal}")
    return value


def extract_json(text: str) -> dict:
    """
    Pull a JSON object out of free-form model text.

    Tries a ```json fenced block first, then the greedy span from the first
    '{' to the last '}', then the whole text. Returns {} when nothing parses
    or the parsed value is not an object.
    """
    text = text or ""
    match = _FENCED_JSON.search(text) or _BARE_OBJECT.search(text)
    candidate = match.group(1) if match else text

    try:
        parsed = json.loads(candidate, parse_constant=_reject_constant, parse_float=_finite_float)
    except (ValueError, TypeError, RecursionError) as e:
        logger.debug(f"Model reply is not valid JSON, using defaults: {e}")
        return {}

    if not isinstance(parsed, dict):
        logger.debug(f"Model reply JSON is a {type(parsed).__name__}, using defaults")
        return {}
    return parsed


# ============================================================================
# Type Guards
# ============================================================================

def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _is_valid_build_skill(skill: Any) -> bool:
    return (
        isinstance(skill, dict)
        and isinstance(skill.get("name"), str)
        and isinstance(skill.get("category"), str)
    )


def _merge_defaults(defaults: dict, data: dict) -> dict:
    result = copy.deepcopy(defaults)
    result.update(data)
    return result


# ============================================================================
# Normalizers
# ============================================================================

def normalize_analysis(data: dict) -> dict:
    """Backfill an AnalysisRecord. Only list and mapping fields are type-checked."""
    result = _merge_defaults(DEFAULT_ANALYSIS, data)

    for field in ANALYSIS_LIST_FIELDS:
        if not isinstance(result[field], list):
            result[field] = []
    for field in ANALYSIS_DICT_FIELDS:
        if not isinstance(result[field], dict):
            result[field] = {}

    return result


def normalize_build(data: dict) -> dict:
    """Backfill a BuildRecord, coercing scalars and dropping malformed skills."""
    result = _merge_defaults(DEFAULT_BUILD, data)

    for field in BUILD_LIST_FIELDS:
        if not isinstance(result[field], list):
            result[field] = []
    for field in BUILD_NUMBER_FIELDS:
        if not _is_number(result[field]):
            result[field] = 0
    for field in BUILD_STRING_FIELDS:
        if not isinstance(result[field], str):
            result[field] = ""

    result["skills"] = [skill for skill in result["skills"] if _is_valid_build_skill(skill)]
    return result


_NORMALIZERS = {
    KIND_ANALYSIS: normalize_analysis,
    KIND_BUILD: normalize_build,
}


def normalize(reply_text: str, kind: str) -> dict:
    """
    Turn a raw Gemini reply into a fully populated record.

    Args:
        reply_text: Model output, possibly fenced, wrapped in prose, or garbage
        kind: "analysis" or "build"

    Returns:
        Record dict with every declared field present
    """
    try:
        normalizer = _NORMALIZERS[kind]
    except KeyError:
        raise ValueError(f"Unknown record kind: {kind!r}")
    return normalizer(extract_json(reply_text))
