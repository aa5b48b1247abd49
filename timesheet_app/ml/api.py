"""Public API for task inference on unlabeled remarks."""
from __future__ import annotations

import logging
from collections import Counter
from typing import Dict, List, Mapping

from timesheet_app.tracker.models import Prediction, TaskCandidate

from .tfidf import Model, train
from .tokenizer import tokenize

LOGGER = logging.getLogger(__name__)

MIN_PROBABILITY = 0.05
MAX_CANDIDATES = 5

__all__ = ["infer", "rank_candidates", "suggest_tasks", "train"]


def infer(model: Model, remark: str) -> Dict[str, float]:
    """Return a task -> probability distribution for ``remark``.

    The distribution is empty when the remark has no words, when none of its
    words were seen in training, or when every matching word has zero IDF.
    """

    words = tokenize(remark or "")
    if not words:
        return {}

    word_counts = Counter(words)
    total_words = len(words)

    task_scores: Dict[str, float] = {}
    for word, count in word_counts.items():
        entry = model.get(word)
        if entry is None:
            continue
        tfidf = (count / total_words) * entry.idf_score
        for task, cooccurrence in entry.task_cooccurrence.items():
            task_scores[task] = task_scores.get(task, 0.0) + tfidf * cooccurrence

    total_score = sum(task_scores.values())
    if total_score <= 0:
        return {}
    return {task: score / total_score for task, score in task_scores.items()}


def rank_candidates(
    distribution: Mapping[str, float],
    min_probability: float = MIN_PROBABILITY,
    limit: int = MAX_CANDIDATES,
) -> List[TaskCandidate]:
    """Sort by probability, drop unlikely tasks and keep the top ``limit``."""

    ranked = sorted(distribution.items(), key=lambda kv: kv[1], reverse=True)
    return [
        TaskCandidate(task, probability)
        for task, probability in ranked
        if probability >= min_probability
    ][:max(limit, 0)]


def suggest_tasks(
    model: Model,
    remark: str,
    min_probability: float = MIN_PROBABILITY,
    limit: int = MAX_CANDIDATES,
) -> Prediction:
    candidates = rank_candidates(infer(model, remark), min_probability, limit)
    LOGGER.debug("%s candidate task(s) for remark %r", len(candidates), remark)
    return Prediction(remark=remark, candidates=candidates)
