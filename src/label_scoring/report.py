"""
Plain text rendering of scoring results. Every function returns a string and leaves
printing to the caller.
"""

import math
from collections.abc import Sequence

from label_scoring.classify import classify
from label_scoring.metrics import ConfusionCounts, Metrics
from label_scoring.records import LabeledRecord


def format_confusion_matrix(counts: ConfusionCounts, target_label: str) -> str:
    """
    Render the confusion matrix with actual labels as rows and predicted labels as columns.

    Example for target "cat":

        Confusion Matrix for target label: 'cat'
                         Predicted: cat  Predicted: Not cat
        Actual: cat      TP: 1           FN: 1
        Actual: Not cat  FP: 1           TN: 1
    """
    rows = [
        ("", f"Predicted: {target_label}", f"Predicted: Not {target_label}"),
        (f"Actual: {target_label}", f"TP: {counts.tp}", f"FN: {counts.fn}"),
        (f"Actual: Not {target_label}", f"FP: {counts.fp}", f"TN: {counts.tn}"),
    ]
    # pad every column but the last to its widest cell plus two spaces
    widths = [max(len(row[col]) for row in rows) + 2 for col in range(2)]
    lines = [f"Confusion Matrix for target label: '{target_label}'"]
    for label, first, second in rows:
        lines.append(f"{label:<{widths[0]}}{first:<{widths[1]}}{second}")
    return "\n".join(lines)


def format_metric(value: float) -> str:
    """Format a metric with two decimals, or "undefined" for nan."""
    return "undefined" if math.isnan(value) else f"{value:.2f}"


def format_metrics(metrics: Metrics) -> str:
    return "\n".join(
        [
            f"Precision: {format_metric(metrics.precision)}",
            f"Recall: {format_metric(metrics.recall)}",
            f"F1 Score: {format_metric(metrics.f1)}",
        ]
    )


def format_record_details(records: Sequence[LabeledRecord], target_label: str) -> str:
    """Describe each record and its outcome class, one blank-line separated block per record."""
    blocks = [
        "\n".join(
            [
                f"Text: {record.item_description}",
                f"Actual Label: {record.actual_label}",
                f"Predicted Label: {record.predicted_label}",
                f"Type: {classify(record, target_label).display_name}",
            ]
        )
        for record in records
    ]
    return "\n\n".join(blocks)
