"""TF-IDF word statistics trained from labeled timesheet rows.

Each labeled remark is treated as a document. For every word we keep the
number of remarks containing it (document frequency), its raw occurrence
count and how often it appeared under each task. Rare words get a high
inverse document frequency and therefore dominate task scoring, while words
present in every remark score zero.
"""
from __future__ import annotations

import logging
import math
from collections import Counter, defaultdict
from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, Iterable, Mapping

from timesheet_app.tracker.models import Row

from .tokenizer import tokenize

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class WordEntry:
    """Frozen statistics for one vocabulary word."""

    word: str
    total_occurrence: int
    document_frequency: int
    task_cooccurrence: Mapping[str, int]
    idf_score: float


@dataclass(frozen=True)
class Model:
    """Vocabulary statistics of a single training run. Never persisted."""

    total_labeled_remarks: int
    words: Mapping[str, WordEntry]

    def __contains__(self, word: str) -> bool:
        return word in self.words

    def get(self, word: str):
        return self.words.get(word)


def train(rows: Iterable[Row]) -> Model:
    """Build the model from every row that already has a task.

    A labeled row counts as a document even if its remark has no usable
    words. Unlabeled rows are ignored.
    """

    total_remarks = 0
    document_frequency: Counter = Counter()
    total_occurrence: Counter = Counter()
    cooccurrence: Dict[str, Dict[str, int]] = defaultdict(dict)

    for row in rows:
        task = row.task or ""
        if not task:
            continue
        total_remarks += 1
        words = tokenize(row.remark or "")

        # once per remark, however often the word repeats
        for word in dict.fromkeys(words):
            document_frequency[word] += 1

        for word in words:
            total_occurrence[word] += 1
            tasks = cooccurrence[word]
            tasks[task] = tasks.get(task, 0) + 1

    entries = {
        word: WordEntry(
            word=word,
            total_occurrence=total_occurrence[word],
            document_frequency=df,
            task_cooccurrence=MappingProxyType(dict(cooccurrence[word])),
            idf_score=math.log(total_remarks / df),
        )
        for word, df in document_frequency.items()
    }
    LOGGER.debug("Trained on %s labeled remarks, %s distinct words", total_remarks, len(entries))
    return Model(total_labeled_remarks=total_remarks, words=MappingProxyType(entries))
