import json
from dataclasses import dataclass
from typing import Any, Literal, TypeAlias

from loguru import logger


@dataclass(frozen=True)
class LabeledRecord:
    item_description: str  # free text describing the item, not used for scoring
    actual_label: str  # ground truth label
    predicted_label: str  # label assigned by the model


# Shape of the JSON document: a bare array of records, or an object wrapping the array
RecordShape: TypeAlias = Literal["auto", "array", "wrapped"]

# wire name -> LabeledRecord field
FIELD_NAMES = {
    "ItemDescription": "item_description",
    "ActualLabel": "actual_label",
    "PredictedLabel": "predicted_label",
}

DEFAULT_WRAPPER_KEY = "TrainingData"


class RecordLoadError(ValueError):
    """Raised when a labeled records document cannot be turned into records."""


def _unwrap(document: Any, shape: RecordShape, wrapper_key: str) -> list[Any]:
    """
    Return the list of raw record objects held by document.
    """
    if shape == "auto":
        shape = "array" if isinstance(document, list) else "wrapped"

    if shape == "array":
        if not isinstance(document, list):
            raise RecordLoadError(f"expected a top-level array of records, got {type(document).__name__}")
        return document

    if shape == "wrapped":
        if not isinstance(document, dict):
            raise RecordLoadError(f"expected a top-level object, got {type(document).__name__}")
        if wrapper_key not in document:
            raise RecordLoadError(f"missing wrapper field {wrapper_key!r}")
        items = document[wrapper_key]
        if not isinstance(items, list):
            raise RecordLoadError(f"wrapper field {wrapper_key!r} must hold an array, got {type(items).__name__}")
        return items

    raise RecordLoadError(f"unknown record shape {shape!r}")


def _parse_record(ix: int, item: Any) -> LabeledRecord:
    if not isinstance(item, dict):
        raise RecordLoadError(f"record {ix} must be an object, got {type(item).__name__}")
    values = {}
    for wire_name, field_name in FIELD_NAMES.items():
        if wire_name not in item:
            raise RecordLoadError(f"record {ix} is missing field {wire_name!r}")
        value = item[wire_name]
        if not isinstance(value, str):
            raise RecordLoadError(f"record {ix} field {wire_name!r} must be a string, got {type(value).__name__}")
        values[field_name] = value
    return LabeledRecord(**values)


def parse_labeled_records(
    document: Any, shape: RecordShape = "auto", wrapper_key: str = DEFAULT_WRAPPER_KEY
) -> list[LabeledRecord]:
    """
    Parse labeled records from an already decoded JSON document.

    Args:
        document: decoded JSON, either an array of record objects or an object wrapping one
        shape: "array", "wrapped", or "auto" to pick based on the document type
        wrapper_key: name of the field holding the array in the wrapped shape

    Raises:
        RecordLoadError: if the document or any record in it is malformed
    """
    return [_parse_record(ix, item) for ix, item in enumerate(_unwrap(document, shape, wrapper_key))]


def read_labeled_records(
    path: str, shape: RecordShape = "auto", wrapper_key: str = DEFAULT_WRAPPER_KEY
) -> list[LabeledRecord]:
    """
    Read labeled records from a JSON file.

    A missing file raises FileNotFoundError; anything else that keeps the file from
    being read as records raises RecordLoadError. No partial dataset is ever returned.
    """
    # utf-8-sig accepts files with or without a byte order mark
    with open(path, encoding="utf-8-sig") as f:
        try:
            document = json.load(f)
        except UnicodeDecodeError as e:
            raise RecordLoadError(f"{path} is not valid UTF-8: {e}") from e
        except json.JSONDecodeError as e:
            raise RecordLoadError(f"{path} is not valid JSON: {e}") from e

    try:
        records = parse_labeled_records(document, shape=shape, wrapper_key=wrapper_key)
    except RecordLoadError as e:
        raise RecordLoadError(f"{path}: {e}") from e

    logger.info(f"Read {len(records)} labeled records from {path}")
    return records
