"""
Tests für den AssessmentScorer: Prüfreihenfolge, Punkteberechnung und Upsert.
"""

import uuid
from unittest import mock

from django.contrib.auth.models import AnonymousUser
from django.db import IntegrityError, transaction
from django.db.models.query import QuerySet
from django.test import SimpleTestCase, TestCase, override_settings

from elearning.exceptions import (
    AuthenticationException,
    NotFoundException,
    ValidationException,
)
from elearning.models import Result, UserRole
from elearning.assessments.services import (
    AssessmentScorer,
    SubmittedAnswer,
    calculate_score,
    truncate_score,
    is_passed,
)
from elearning.tests.helpers import (
    create_assessment,
    create_course,
    create_user,
    wrong_option,
)


class ScoreCalculationTests(SimpleTestCase):
    def test_three_of_four_correct(self):
        self.assertEqual(calculate_score(3, 4, 100), 75.0)

    def test_one_of_three_correct_is_rounded_to_two_decimals(self):
        self.assertEqual(calculate_score(1, 3, 10), 3.33)
        self.assertEqual(truncate_score(3.33), 3)

    def test_bounds(self):
        self.assertEqual(calculate_score(0, 5, 20), 0)
        self.assertEqual(calculate_score(5, 5, 20), 20)

    def test_no_questions_is_rejected(self):
        with self.assertRaises(ValidationException):
            calculate_score(0, 0, 100)

    def test_is_passed_at_sixty_percent(self):
        self.assertTrue(is_passed(75, 100))
        self.assertTrue(is_passed(60, 100))
        self.assertFalse(is_passed(59, 100))
        self.assertFalse(is_passed(3, 10))

    @override_settings(PASSING_SCORE_RATIO=0.8)
    def test_is_passed_uses_configured_ratio(self):
        self.assertFalse(is_passed(75, 100))
        self.assertTrue(is_passed(75, 100, ratio=0.5))


class AssessmentScorerTests(TestCase):
    @classmethod
    def setUpTestData(cls):
        cls.instructor = create_user("lehrer", role=UserRole.INSTRUCTOR)
        cls.student = create_user("student")
        cls.course = create_course(cls.instructor)
        cls.assessment, cls.questions = create_assessment(
            cls.course, ["A", "B", "C", "D"], max_score=100
        )

    def setUp(self):
        self.scorer = AssessmentScorer()

    def _answers(self, questions, options):
        return [SubmittedAnswer(q.id, option) for q, option in zip(questions, options)]

    def test_fully_correct_submission_scores_max(self):
        outcome = self.scorer.submit(
            self.assessment.id, self._answers(self.questions, ["A", "B", "C", "D"]), self.student
        )
        self.assertEqual(outcome.score, 100)
        self.assertEqual(outcome.correct_answers, 4)
        self.assertEqual(outcome.total_questions, 4)
        self.assertEqual(outcome.max_score, 100)
        self.assertFalse(outcome.is_update)

    def test_fully_incorrect_submission_scores_zero(self):
        options = [wrong_option(q.correct_option) for q in self.questions]
        outcome = self.scorer.submit(
            self.assessment.id, self._answers(self.questions, options), self.student
        )
        self.assertEqual(outcome.score, 0)
        self.assertEqual(outcome.correct_answers, 0)
        self.assertEqual(Result.objects.get(user=self.student).score, 0)

    def test_three_of_four_correct_is_passed(self):
        outcome = self.scorer.submit(
            self.assessment.id, self._answers(self.questions, ["A", "B", "C", "A"]), self.student
        )
        self.assertEqual(outcome.score, 75.0)
        self.assertEqual(outcome.stored_score, 75)
        self.assertTrue(is_passed(outcome.stored_score, outcome.max_score))

    def test_rounded_score_is_truncated_when_stored(self):
        assessment, questions = create_assessment(self.course, ["A", "B", "C"], max_score=10)
        outcome = self.scorer.submit(
            assessment.id, self._answers(questions, ["A", "A", "A"]), self.student
        )
        self.assertEqual(outcome.score, 3.33)
        self.assertEqual(outcome.stored_score, 3)
        result = Result.objects.get(assessment=assessment, user=self.student)
        self.assertEqual(result.score, 3)
        self.assertEqual(result.id, outcome.result_id)
        self.assertFalse(is_passed(result.score, assessment.max_score))

    def test_option_comparison_ignores_case_and_whitespace(self):
        outcome = self.scorer.submit(
            self.assessment.id,
            self._answers(self.questions, ["a", " b ", "c\n", "\td"]),
            self.student,
        )
        self.assertEqual(outcome.correct_answers, 4)

    def test_answer_order_is_irrelevant(self):
        answers = self._answers(self.questions, ["A", "B", "C", "D"])
        outcome = self.scorer.submit(self.assessment.id, reversed(answers), self.student)
        self.assertEqual(outcome.correct_answers, 4)

    def test_string_identifiers_are_accepted(self):
        answers = [SubmittedAnswer(str(q.id), q.correct_option) for q in self.questions]
        outcome = self.scorer.submit(str(self.assessment.id), answers, self.student)
        self.assertEqual(outcome.score, 100)

    def test_second_submission_updates_the_existing_result(self):
        first = self.scorer.submit(
            self.assessment.id, self._answers(self.questions, ["A", "A", "A", "A"]), self.student
        )
        second = self.scorer.submit(
            self.assessment.id, self._answers(self.questions, ["A", "B", "C", "D"]), self.student
        )
        self.assertFalse(first.is_update)
        self.assertTrue(second.is_update)
        self.assertEqual(first.result_id, second.result_id)
        results = Result.objects.filter(assessment=self.assessment, user=self.student)
        self.assertEqual(results.count(), 1)
        self.assertEqual(results.get().score, 100)

    def test_results_are_kept_per_user(self):
        other = create_user("student2")
        answers = self._answers(self.questions, ["A", "B", "C", "D"])
        self.scorer.submit(self.assessment.id, answers, self.student)
        outcome = self.scorer.submit(self.assessment.id, answers, other)
        self.assertFalse(outcome.is_update)
        self.assertEqual(Result.objects.filter(assessment=self.assessment).count(), 2)

    def test_missing_answer_names_the_question(self):
        with self.assertRaises(ValidationException) as ctx:
            self.scorer.submit(
                self.assessment.id,
                self._answers(self.questions[:3], ["A", "B", "C"]),
                self.student,
            )
        unanswered = ctx.exception.details["unansweredQuestions"]
        self.assertEqual(
            unanswered, [{"questionId": str(self.questions[3].id), "questionText": "Frage 4"}]
        )
        self.assertEqual(len(ctx.exception.details["receivedAnswers"]), 3)
        self.assertFalse(Result.objects.exists())

    def test_duplicate_answer_is_rejected(self):
        answers = self._answers(self.questions, ["A", "B", "C", "D"])
        answers.append(SubmittedAnswer(self.questions[0].id, "B"))
        with self.assertRaises(ValidationException) as ctx:
            self.scorer.submit(self.assessment.id, answers, self.student)
        duplicated = ctx.exception.details["duplicatedQuestions"]
        self.assertEqual(duplicated[0]["questionId"], str(self.questions[0].id))
        self.assertNotIn("unansweredQuestions", ctx.exception.details)

    def test_answers_for_foreign_questions_are_ignored(self):
        answers = self._answers(self.questions, ["A", "B", "C", "D"])
        answers.append(SubmittedAnswer(uuid.uuid4(), "A"))
        outcome = self.scorer.submit(self.assessment.id, answers, self.student)
        self.assertEqual(outcome.total_questions, 4)
        self.assertEqual(outcome.score, 100)

    def test_empty_answers_are_rejected(self):
        with self.assertRaises(ValidationException) as ctx:
            self.scorer.submit(self.assessment.id, [], self.student)
        self.assertEqual(ctx.exception.message, "No answers provided")

    def test_empty_answers_win_over_unknown_assessment(self):
        with self.assertRaises(ValidationException):
            self.scorer.submit(uuid.uuid4(), [], self.student)

    def test_malformed_assessment_id_is_a_validation_error(self):
        answers = self._answers(self.questions, ["A", "B", "C", "D"])
        for assessment_id in ("kein-uuid", "", None):
            with self.assertRaises(ValidationException):
                self.scorer.submit(assessment_id, answers, self.student)

    def test_invalid_answers_are_listed(self):
        answers = [
            SubmittedAnswer("kaputt", "A"),
            SubmittedAnswer(self.questions[1].id, "  "),
            SubmittedAnswer(self.questions[2].id, None),
        ]
        with self.assertRaises(ValidationException) as ctx:
            self.scorer.submit(self.assessment.id, answers, self.student)
        self.assertEqual(len(ctx.exception.details["errors"]), 3)

    def test_unknown_assessment_is_not_found(self):
        answers = self._answers(self.questions, ["A", "B", "C", "D"])
        with self.assertRaises(NotFoundException):
            self.scorer.submit(uuid.uuid4(), answers, self.student)

    def test_assessment_without_questions_is_rejected(self):
        assessment, _ = create_assessment(self.course, [], max_score=10)
        with self.assertRaises(ValidationException):
            self.scorer.submit(
                assessment.id, [SubmittedAnswer(self.questions[0].id, "A")], self.student
            )

    def test_caller_is_required(self):
        answers = self._answers(self.questions, ["A", "B", "C", "D"])
        for user in (None, AnonymousUser()):
            with self.assertRaises(AuthenticationException):
                self.scorer.submit(self.assessment.id, answers, user)
        self.assertFalse(Result.objects.exists())


class ResultUniquenessTests(TestCase):
    @classmethod
    def setUpTestData(cls):
        cls.instructor = create_user("lehrer", role=UserRole.INSTRUCTOR)
        cls.student = create_user("student")
        cls.course = create_course(cls.instructor)
        cls.assessment, cls.questions = create_assessment(cls.course, ["A", "B"], max_score=10)

    def test_second_result_for_same_pair_violates_constraint(self):
        Result.objects.create(assessment=self.assessment, user=self.student, score=5)
        with self.assertRaises(IntegrityError), transaction.atomic():
            Result.objects.create(assessment=self.assessment, user=self.student, score=7)
        self.assertEqual(Result.objects.count(), 1)

    def test_concurrent_insert_turns_submission_into_update(self):
        """
        Eine parallele Abgabe legt ihr Ergebnis zwischen Lookup und Insert an.
        Die Abgabe überschreibt dann diese Zeile, statt eine zweite anzulegen.
        """
        original_get = QuerySet.get
        competing = []

        def get_missing_competing_submission(queryset, *args, **kwargs):
            if queryset.model is Result and not competing:
                # Lookup findet nichts, direkt danach schreibt die andere Abgabe
                competing.append(
                    Result.objects.create(
                        assessment=self.assessment, user=self.student, score=0
                    )
                )
                raise Result.DoesNotExist
            return original_get(queryset, *args, **kwargs)

        answers = [SubmittedAnswer(q.id, q.correct_option) for q in self.questions]
        with mock.patch.object(QuerySet, "get", get_missing_competing_submission):
            outcome = AssessmentScorer().submit(self.assessment.id, answers, self.student)

        self.assertEqual(len(competing), 1)
        self.assertTrue(outcome.is_update)
        self.assertEqual(outcome.result_id, competing[0].id)
        result = Result.objects.get(assessment=self.assessment, user=self.student)
        self.assertEqual(result.score, 10)
        self.assertEqual(Result.objects.count(), 1)
