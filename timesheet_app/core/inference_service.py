"""Task inference orchestration between the log sheet and the TF-IDF core."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional

from timesheet_app.ml import api as ml_api
from timesheet_app.ml.tfidf import Model
from timesheet_app.ml.tokenizer import tokenize
from timesheet_app.tracker.controllers import AppController
from timesheet_app.tracker.models import Prediction

LOGGER = logging.getLogger(__name__)


class InferenceService:
    """Suggest tasks for untagged log rows.

    The model is trained lazily from the controller's labeled rows the first
    time it is needed and reused for every query of the run.
    """

    def __init__(
        self,
        controller: AppController,
        min_probability: Optional[float] = None,
        limit: Optional[int] = None,
    ):
        self.controller = controller
        config = controller.config
        self.min_probability = config.min_probability if min_probability is None else min_probability
        self.limit = config.max_candidates if limit is None else limit
        self._model: Optional[Model] = None

    @property
    def model(self) -> Model:
        if self._model is None:
            self._model = self.controller.train_model()
            LOGGER.info(
                "Task model trained on %s remarks (%s words)",
                self._model.total_labeled_remarks,
                len(self._model.words),
            )
        return self._model

    def suggest(self, remark: str) -> Prediction:
        return ml_api.suggest_tasks(self.model, remark, self.min_probability, self.limit)

    def review(self) -> List[Prediction]:
        """Predict every unlabeled row whose remark has at least one word."""
        predictions = []
        for row in self.controller.unlabeled_rows():
            if not tokenize(row.remark):
                continue
            predictions.append(self.suggest(row.remark))
        return predictions

    def apply(self, path: Optional[Path] = None) -> int:
        """Fill unlabeled rows with their best candidate and save a draft."""
        filled = 0
        for row in self.controller.unlabeled_rows():
            best = self.suggest(row.remark).best
            if best is None:
                continue
            row.task = best.task
            filled += 1
            LOGGER.info("%s <- %s", best.task, row.remark)
        self.controller.save_draft(path)
        return filled

    @staticmethod
    def render(prediction: Prediction) -> str:
        remark = prediction.remark
        rule = "-" * max((len(line) for line in remark.split("\n")), default=0)
        lines = ["Probable tasks for remark:", rule, remark, rule]
        if prediction.candidates:
            lines.extend(f"{c.task}: {c.probability * 100:.2f}%" for c in prediction.candidates)
        else:
            lines.append("No tasks meet the criteria.")
        return "\n".join(lines) + "\n"
