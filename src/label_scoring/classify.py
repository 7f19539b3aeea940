from enum import Enum

from label_scoring.records import LabeledRecord


class OutcomeClass(Enum):
    """Confusion matrix category of a single record relative to the target label."""

    TRUE_POSITIVE = ("TP", "True Positive")
    FALSE_POSITIVE = ("FP", "False Positive")
    FALSE_NEGATIVE = ("FN", "False Negative")
    TRUE_NEGATIVE = ("TN", "True Negative")

    def __init__(self, code: str, title: str) -> None:
        self.code = code
        self.title = title

    @property
    def display_name(self) -> str:
        return f"{self.title} ({self.code})"


def classify(record: LabeledRecord, target_label: str) -> OutcomeClass:
    """Classify a record as TP, FP, FN or TN for target_label (exact, case-sensitive match)."""
    actual_is_target = record.actual_label == target_label
    predicted_is_target = record.predicted_label == target_label

    if predicted_is_target:
        return OutcomeClass.TRUE_POSITIVE if actual_is_target else OutcomeClass.FALSE_POSITIVE
    return OutcomeClass.FALSE_NEGATIVE if actual_is_target else OutcomeClass.TRUE_NEGATIVE
