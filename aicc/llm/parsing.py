"""Extraction of commit plans from raw model output."""

import json
import re

from pydantic import ValidationError

from aicc.compose.models import CommitPlan
from aicc.llm.exceptions import InvalidJSONError, NoJSONFoundError, SchemaValidationError

# From the first "{" to the last "}" that ends a line
_EMBEDDED_JSON_RE = re.compile(r"\{[\s\S]*\}$", re.MULTILINE)


def extract_json_text(raw: str) -> str:
    """Locate the JSON object inside a model response.

    Surrounding prose and markdown fences are tolerated as long as the
    object's closing brace ends a line.

    Args:
        raw: Raw model output.

    Returns:
        The JSON object text.

    Raises:
        NoJSONFoundError: If no object can be located.
    """
    text = raw.strip()
    if text.startswith("{") and text.endswith("}"):
        return text

    match = _EMBEDDED_JSON_RE.search(text)
    if not match:
        raise NoJSONFoundError("No JSON object detected.")
    return match.group(0)


def extract_commit_plan(raw: str) -> CommitPlan:
    """Parse and validate a commit plan from raw model output.

    Args:
        raw: Raw model output.

    Returns:
        The validated CommitPlan.

    Raises:
        NoJSONFoundError: If the output contains no JSON object.
        InvalidJSONError: If the located text is not valid JSON.
        SchemaValidationError: If the JSON does not match the plan schema.
    """
    text = extract_json_text(raw)

    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise InvalidJSONError(f"Invalid JSON parse: {e}")

    try:
        return CommitPlan.model_validate(data)
    except ValidationError as e:
        raise SchemaValidationError(f"Response does not match the commit plan schema:\n{e}")
