"""Persisting recorded outcomes as JSON so reports can be rendered later."""

import json
from pathlib import Path
from typing import Any, Dict, Union
from jsonschema import validate, ValidationError

from .collectors import OutcomeCollectors
from .errors import OutcomeFileError
from .logging_config import get_logger

logger = get_logger(__name__)

SCHEMA_PATH = Path(__file__).parent / "outcome_schema.json"

FAILED_KEY = "failed"
SKIPPED_KEY = "skipped"
ERROR_KIND_KEY = "errorKind"


def _load_schema() -> Dict[str, Any]:
    """Load the outcome file JSON schema."""
    with open(SCHEMA_PATH, 'r', encoding='utf-8') as f:
        return json.load(f)


def validate_outcomes(document: Any) -> None:
    """
    Check an outcome document against the schema.

    Raises:
        OutcomeFileError: If the document does not match
    """
    try:
        validate(instance=document, schema=_load_schema())
    except ValidationError as e:
        path = " → ".join(str(p) for p in e.absolute_path) if e.absolute_path else "root"
        raise OutcomeFileError(f"Outcome validation failed at {path}: {e.message}") from e


def collectors_from_document(document: Dict[str, Any]) -> OutcomeCollectors:
    """Validate a parsed outcome document and replay it into fresh collectors."""
    validate_outcomes(document)
    collectors = OutcomeCollectors()
    for outcome in document.get(FAILED_KEY, []):
        collectors.failures.record(outcome)
    for outcome in document.get(SKIPPED_KEY, []):
        collectors.skips.record(outcome)
    for outcome in document.get(ERROR_KIND_KEY, []):
        collectors.error_kinds.record(outcome)
    return collectors


def load_outcomes(file_path: Union[str, Path]) -> OutcomeCollectors:
    """
    Load recorded outcomes from a JSON file.

    Args:
        file_path: Path to the outcome file

    Returns:
        Collectors holding the file's outcomes in file order

    Raises:
        OutcomeFileError: If the file is missing, not JSON, or invalid
    """
    file_path = Path(file_path)
    try:
        with open(file_path, 'r', encoding='utf-8') as f:
            document = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise OutcomeFileError(f"Failed to load outcome file {file_path}: {e}", path=file_path) from e

    try:
        collectors = collectors_from_document(document)
    except OutcomeFileError as e:
        raise OutcomeFileError(f"{file_path}: {e}", path=file_path) from e

    logger.info(
        f"Loaded {len(collectors.failures)} failed, {len(collectors.skips)} skipped and "
        f"{len(collectors.error_kinds)} error-kind outcomes from {file_path}"
    )
    return collectors


def dump_outcomes(collectors: OutcomeCollectors, file_path: Union[str, Path]) -> Path:
    """Write collectors to a JSON outcome file that load_outcomes can read back."""
    file_path = Path(file_path)
    document = {
        FAILED_KEY: [record.to_dict() for record in collectors.failures.all()],
        SKIPPED_KEY: [record.to_dict() for record in collectors.skips.all()],
        ERROR_KIND_KEY: [record.to_dict() for record in collectors.error_kinds.all()],
    }
    try:
        with open(file_path, 'w', encoding='utf-8') as f:
            json.dump(document, f, indent=2)
    except OSError as e:
        raise OutcomeFileError(f"Failed to write outcome file {file_path}: {e}", path=file_path) from e
    return file_path
