# test report
import math

from label_scoring.metrics import ConfusionCounts, Metrics
from label_scoring.records import LabeledRecord
from label_scoring.report import (
    format_confusion_matrix,
    format_metric,
    format_metrics,
    format_record_details,
)


def test_format_confusion_matrix() -> None:
    """Test the confusion matrix layout with actual rows and predicted columns."""
    text = format_confusion_matrix(ConfusionCounts(tp=1, fp=2, fn=3, tn=4), "cat")
    assert text.splitlines() == [
        "Confusion Matrix for target label: 'cat'",
        "                 Predicted: cat  Predicted: Not cat",
        "Actual: cat      TP: 1           FN: 3",
        "Actual: Not cat  FP: 2           TN: 4",
    ]


def test_format_confusion_matrix_wide_counts() -> None:
    """Test that columns stay aligned when counts are wider than the headers."""
    text = format_confusion_matrix(ConfusionCounts(tp=12345678901234, fp=0, fn=0, tn=0), "a")
    header, actual_row, _ = text.splitlines()[1:]
    assert actual_row.index("FN:") == header.index("Predicted: Not a")


def test_format_metric() -> None:
    """Test two decimal formatting and the undefined marker for nan."""
    assert format_metric(0.5) == "0.50"
    assert format_metric(1.0) == "1.00"
    assert format_metric(2 / 3) == "0.67"
    assert format_metric(math.nan) == "undefined"


def test_format_metrics() -> None:
    """Test the precision, recall and f1 summary lines."""
    text = format_metrics(Metrics(precision=0.75, recall=math.nan, f1=0.0))
    assert text.splitlines() == ["Precision: 0.75", "Recall: undefined", "F1 Score: 0.00"]


def test_format_record_details() -> None:
    """Test that every record is listed with its outcome class."""
    records = [
        LabeledRecord("Crispy shell", "taco", "taco"),
        LabeledRecord("Flour wrap", "burrito", "taco"),
    ]
    text = format_record_details(records, "taco")
    assert text.split("\n\n") == [
        "Text: Crispy shell\nActual Label: taco\nPredicted Label: taco\nType: True Positive (TP)",
        "Text: Flour wrap\nActual Label: burrito\nPredicted Label: taco\nType: False Positive (FP)",
    ]


def test_format_record_details_empty() -> None:
    """Test that no records render as an empty string."""
    assert format_record_details([], "taco") == ""
