#!/usr/bin/env python
"""
Score predicted labels against actual labels for a single target label.

This script reads labeled records (item description, actual label, predicted label)
from a JSON file and reports the confusion matrix, precision, recall, and F1 score
for the target label, followed by the outcome class of every record.
"""

# %%
import argparse
import sys

from loguru import logger

from label_scoring.metrics import Scorer
from label_scoring.records import DEFAULT_WRAPPER_KEY, RecordLoadError, read_labeled_records
from label_scoring.report import format_confusion_matrix, format_metrics, format_record_details

# %%
# configure the script

in_path = "trainingData.json"
target_label = "taco"
shape = "auto"  # "array", "wrapped", or "auto" to detect from the document
wrapper_key = DEFAULT_WRAPPER_KEY  # field holding the records in the wrapped shape
show_details = True  # print the outcome class of every record

# %%
# parse script arguments from command line

parser = argparse.ArgumentParser(description="Score predicted labels for a single target label.")
parser.add_argument("--f", help="ignore; used by ipykernel_launcher")
parser.add_argument("--input", type=str, default=in_path, help="Path to the JSON file containing labeled records.")
parser.add_argument("--target", type=str, default=target_label, help="Label treated as the positive class.")
parser.add_argument(
    "--shape",
    choices=["auto", "array", "wrapped"],
    default=shape,
    help="Layout of the JSON document: a bare array of records or an object wrapping one.",
)
parser.add_argument("--wrapper-key", type=str, default=wrapper_key, help="Field holding the records when wrapped.")
parser.add_argument(
    "--details", action=argparse.BooleanOptionalAction, default=show_details, help="Print per-record results."
)
args = parser.parse_args()
in_path, target_label, shape = args.input, args.target, args.shape
wrapper_key, show_details = args.wrapper_key, args.details

# %%
#
# LOAD THE DATA
#

try:
    records = read_labeled_records(in_path, shape=shape, wrapper_key=wrapper_key)
except (FileNotFoundError, RecordLoadError) as e:
    logger.error(f"Failed to load labeled records: {e}")
    sys.exit(1)

if not records:
    logger.error(f"No labeled records found in {in_path}")
    sys.exit(1)

# %%
#
# SCORE THE PREDICTIONS
#

scorer = Scorer(records, target_label)
scorer.score()

print()
print(format_confusion_matrix(scorer.counts, scorer.target_label))
print()
print(format_metrics(scorer.metrics))

# %%
# output each record and its outcome class (TP, FP, FN, TN)

if show_details:
    print("\nDetailed Results:")
    print(format_record_details(records, target_label))
