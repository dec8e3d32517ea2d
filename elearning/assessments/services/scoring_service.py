"""
Scoring Service für EduSync

Bewertet die Abgabe eines Assessments und speichert das Ergebnis.

Ablauf einer Abgabe:
1. Aufrufer muss angemeldet sein (AuthenticationException)
2. Mindestens eine Antwort (ValidationException)
3. Gültige Assessment-ID und gültige Antworten (ValidationException),
   Assessment muss existieren (NotFoundException)
4. Jede Frage des Assessments genau einmal beantwortet (ValidationException)
5. Punkte berechnen und Ergebnis per Upsert speichern

Author: EduSync Development Team
Version: 1.0.0
"""

import logging
import uuid
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional

from django.conf import settings
from django.db import transaction
from django.utils import timezone

from ...exceptions import AuthenticationException, NotFoundException, ValidationException
from ..models import Assessment, Question, Result

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SubmittedAnswer:
    """Answer of the caller for one question; the option label is free text."""

    question_id: Any
    selected_option: Optional[str]


@dataclass(frozen=True)
class SubmissionOutcome:
    """
    Result of a scored submission.

    ``score`` is the rounded score before truncation, ``stored_score`` the
    integer that was persisted.
    """

    score: float
    total_questions: int
    correct_answers: int
    max_score: int
    is_update: bool
    stored_score: int
    result_id: uuid.UUID


def calculate_score(correct_answers: int, total_questions: int, max_score: int) -> float:
    """
    Proportional score rounded to two decimals.

    >>> calculate_score(3, 4, 100)
    75.0
    >>> calculate_score(1, 3, 10)
    3.33
    """
    if total_questions <= 0:
        raise ValidationException("Assessment has no questions")
    return round(correct_answers / total_questions * max_score, 2)


def truncate_score(score: float) -> int:
    return int(score)


def is_passed(score, max_score, ratio: Optional[float] = None) -> bool:
    if ratio is None:
        ratio = settings.PASSING_SCORE_RATIO
    return score >= max_score * ratio


def _parse_uuid(value) -> Optional[uuid.UUID]:
    if isinstance(value, uuid.UUID):
        return value
    if value is None:
        return None
    try:
        return uuid.UUID(str(value).strip())
    except ValueError:
        return None


class AssessmentScorer:
    """
    Service für die Bewertung von Assessment-Abgaben.

    Der Aufrufer wird explizit übergeben, der Service liest keinen Request-Kontext.
    """

    def __init__(self):
        self.logger = logger

    def submit(self, assessment_id, answers: Iterable[SubmittedAnswer], user) -> SubmissionOutcome:
        """
        Validiert und bewertet eine Abgabe und speichert das Ergebnis.

        Args:
            assessment_id: ID des Assessments (UUID oder String)
            answers: Abgegebene Antworten
            user: Angemeldeter Aufrufer

        Returns:
            SubmissionOutcome mit Punkten und Upsert-Information

        Raises:
            AuthenticationException: Aufrufer fehlt oder ist nicht angemeldet
            ValidationException: Ungültige oder unvollständige Abgabe
            NotFoundException: Assessment existiert nicht
        """
        if user is None or not user.is_authenticated:
            raise AuthenticationException()

        answers = list(answers or [])
        if not answers:
            raise ValidationException("No answers provided")

        parsed_assessment_id = _parse_uuid(assessment_id)
        if parsed_assessment_id is None:
            raise ValidationException("Invalid assessment ID")

        answer_map = self._parse_answers(answers)

        try:
            assessment = Assessment.objects.get(pk=parsed_assessment_id)
        except Assessment.DoesNotExist:
            raise NotFoundException(
                f"Assessment with ID {parsed_assessment_id} not found", resource="assessment"
            )

        questions = list(assessment.questions.all())
        if not questions:
            raise ValidationException("Assessment has no questions")

        self._check_completeness(questions, answer_map, answers)

        correct_answers = sum(
            1 for question in questions if question.is_correct(answer_map[question.id][0])
        )
        final_score = calculate_score(correct_answers, len(questions), assessment.max_score)
        stored_score = truncate_score(final_score)

        with transaction.atomic():
            result, created = Result.objects.update_or_create(
                assessment=assessment,
                user=user,
                defaults={"score": stored_score, "attempted_at": timezone.now()},
            )

        self.logger.info(
            f"Assessment '{assessment.title}' von {user.username} bewertet: "
            f"{correct_answers}/{len(questions)} richtig, Score {final_score} "
            f"({'aktualisiert' if not created else 'neu'})"
        )

        return SubmissionOutcome(
            score=final_score,
            total_questions=len(questions),
            correct_answers=correct_answers,
            max_score=assessment.max_score,
            is_update=not created,
            stored_score=stored_score,
            result_id=result.id,
        )

    def _parse_answers(self, answers: List[SubmittedAnswer]) -> Dict[uuid.UUID, List[str]]:
        """Gruppiert die Antworten nach Frage-ID, sammelt alle fehlerhaften Einträge."""
        errors = []
        answer_map: Dict[uuid.UUID, List[str]] = {}

        for index, answer in enumerate(answers):
            question_id = _parse_uuid(answer.question_id)
            if question_id is None:
                errors.append(f"Invalid question ID at position {index}: {answer.question_id}")
                continue
            if answer.selected_option is None or not str(answer.selected_option).strip():
                errors.append(f"Selected option missing for question {question_id}")
                continue
            answer_map.setdefault(question_id, []).append(str(answer.selected_option))

        if errors:
            self.logger.warning(f"Abgabe mit {len(errors)} ungültigen Antworten abgelehnt")
            raise ValidationException("Invalid answers", details={"errors": errors})
        return answer_map

    def _check_completeness(
        self,
        questions: List[Question],
        answer_map: Dict[uuid.UUID, List[str]],
        answers: List[SubmittedAnswer],
    ) -> None:
        unanswered = [q for q in questions if q.id not in answer_map]
        duplicated = [q for q in questions if len(answer_map.get(q.id, [])) > 1]
        if not unanswered and not duplicated:
            return

        details: Dict[str, Any] = {
            "receivedAnswers": [
                {"questionId": str(a.question_id), "selectedOption": a.selected_option}
                for a in answers
            ]
        }
        parts = []
        if unanswered:
            details["unansweredQuestions"] = [
                {"questionId": str(q.id), "questionText": q.text} for q in unanswered
            ]
            parts.append(f"{len(unanswered)} question(s) unanswered")
        if duplicated:
            details["duplicatedQuestions"] = [
                {"questionId": str(q.id), "questionText": q.text} for q in duplicated
            ]
            parts.append(f"{len(duplicated)} question(s) answered more than once")
        raise ValidationException(
            f"All questions must be answered exactly once: {', '.join(parts)}",
            details=details,
        )
