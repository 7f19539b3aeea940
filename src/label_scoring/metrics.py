import math
from collections import Counter
from collections.abc import Sequence
from dataclasses import dataclass

from loguru import logger

from label_scoring.classify import OutcomeClass, classify
from label_scoring.records import LabeledRecord


@dataclass(frozen=True)
class ConfusionCounts:
    tp: int  # true positives
    fp: int  # false positives
    fn: int  # false negatives
    tn: int  # true negatives

    @property
    def total(self) -> int:
        return self.tp + self.fp + self.fn + self.tn

    def count(self, outcome: OutcomeClass) -> int:
        return {
            OutcomeClass.TRUE_POSITIVE: self.tp,
            OutcomeClass.FALSE_POSITIVE: self.fp,
            OutcomeClass.FALSE_NEGATIVE: self.fn,
            OutcomeClass.TRUE_NEGATIVE: self.tn,
        }[outcome]


@dataclass(frozen=True)
class Metrics:
    precision: float  # precision, nan when nothing was predicted as the target
    recall: float  # recall, nan when nothing actually is the target
    f1: float  # f1 score, nan when no record touches the target

    @property
    def precision_defined(self) -> bool:
        return not math.isnan(self.precision)

    @property
    def recall_defined(self) -> bool:
        return not math.isnan(self.recall)

    @property
    def f1_defined(self) -> bool:
        return not math.isnan(self.f1)


class NotScoredError(RuntimeError):
    """Raised when Scorer results are read before Scorer.score() has run."""


def _ratio(numerator: int, denominator: int) -> float:
    return numerator / denominator if denominator else math.nan


def count_outcomes(records: Sequence[LabeledRecord], target_label: str) -> ConfusionCounts:
    """Tally the outcome class of every record in a single pass."""
    tally = Counter(classify(record, target_label) for record in records)
    return ConfusionCounts(
        tp=tally[OutcomeClass.TRUE_POSITIVE],
        fp=tally[OutcomeClass.FALSE_POSITIVE],
        fn=tally[OutcomeClass.FALSE_NEGATIVE],
        tn=tally[OutcomeClass.TRUE_NEGATIVE],
    )


def compute_metrics(counts: ConfusionCounts) -> Metrics:
    """
    Compute precision, recall, and f1 score from confusion counts.

    A metric whose denominator is zero is undefined and comes back as nan rather than
    raising or defaulting to 0. F1 uses 2*TP / (2*TP + FP + FN), the harmonic mean of
    precision and recall written over the counts, so it is 0 whenever TP is 0 and any
    FP or FN exists, and nan only when TP, FP and FN are all 0.
    """
    return Metrics(
        precision=_ratio(counts.tp, counts.tp + counts.fp),
        recall=_ratio(counts.tp, counts.tp + counts.fn),
        f1=_ratio(2 * counts.tp, 2 * counts.tp + counts.fp + counts.fn),
    )


def score(records: Sequence[LabeledRecord], target_label: str) -> tuple[ConfusionCounts, Metrics]:
    """Score records against target_label, returning the confusion counts and the derived metrics."""
    counts = count_outcomes(records, target_label)
    logger.debug(f"Counts for {target_label!r}: tp={counts.tp} fp={counts.fp} fn={counts.fn} tn={counts.tn}")
    return counts, compute_metrics(counts)


class Scorer:
    """
    Scores a dataset against a single target label.

    Results are only available once score() has been called; reading them earlier
    raises NotScoredError.
    """

    def __init__(self, records: Sequence[LabeledRecord], target_label: str) -> None:
        self.records = records
        self.target_label = target_label
        self._counts: ConfusionCounts | None = None
        self._metrics: Metrics | None = None

    def score(self) -> tuple[ConfusionCounts, Metrics]:
        self._counts, self._metrics = score(self.records, self.target_label)
        logger.info(f"Scored {self._counts.total} records against target label {self.target_label!r}")
        return self._counts, self._metrics

    @property
    def counts(self) -> ConfusionCounts:
        if self._counts is None:
            raise NotScoredError("call score() before reading counts")
        return self._counts

    @property
    def metrics(self) -> Metrics:
        if self._metrics is None:
            raise NotScoredError("call score() before reading metrics")
        return self._metrics

    @property
    def precision(self) -> float:
        return self.metrics.precision

    @property
    def recall(self) -> float:
        return self.metrics.recall

    @property
    def f1(self) -> float:
        return self.metrics.f1

    @property
    def tp(self) -> int:
        return self.counts.tp

    @property
    def fp(self) -> int:
        return self.counts.fp

    @property
    def fn(self) -> int:
        return self.counts.fn

    @property
    def tn(self) -> int:
        return self.counts.tn
