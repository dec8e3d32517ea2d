"""
E-Learning Assessment Models

Models:
- Assessment: Quiz of a course with a maximum score
- Question: Multiple-choice question with the options A-D
- Result: Score of a user for an assessment (one row per user and assessment)

Author: EduSync Development Team
Version: 1.0.0
"""

import uuid

from django.conf import settings
from django.core.validators import MinValueValidator
from django.db import models
from django.utils import timezone
from django.utils.translation import gettext_lazy as _

from ..courses.models import Course

User = settings.AUTH_USER_MODEL


class OptionLabel(models.TextChoices):
    A = "A", "A"
    B = "B", "B"
    C = "C", "C"
    D = "D", "D"


class Assessment(models.Model):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    title = models.CharField(max_length=255, verbose_name=_("Title"))
    max_score = models.PositiveIntegerField(
        validators=[MinValueValidator(1)],
        verbose_name=_("Max Score"),
        help_text=_("Score awarded for a fully correct submission."),
    )
    course = models.ForeignKey(
        Course,
        on_delete=models.CASCADE,
        related_name="assessments",
        verbose_name=_("Course"),
    )
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        verbose_name = _("Assessment")
        verbose_name_plural = _("Assessments")
        ordering = ["title"]
        db_table = "elearning_assessment"

    def __str__(self):
        return self.title


class Question(models.Model):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    assessment = models.ForeignKey(
        Assessment,
        on_delete=models.CASCADE,
        related_name="questions",
        verbose_name=_("Assessment"),
    )
    text = models.TextField(verbose_name=_("Question Text"))
    option_a = models.CharField(max_length=500)
    option_b = models.CharField(max_length=500)
    option_c = models.CharField(max_length=500)
    option_d = models.CharField(max_length=500)
    correct_option = models.CharField(
        max_length=1,
        choices=OptionLabel.choices,
        verbose_name=_("Correct Option"),
    )

    class Meta:
        verbose_name = _("Question")
        verbose_name_plural = _("Questions")
        db_table = "elearning_question"

    def __str__(self):
        return f"{self.assessment.title}: {self.text[:50]}"

    def is_correct(self, selected_option: str) -> bool:
        """Case-insensitive comparison, surrounding whitespace is ignored."""
        if selected_option is None:
            return False
        return selected_option.strip().upper() == self.correct_option.strip().upper()


class Result(models.Model):
    """
    Outcome of a user's submission for an assessment.

    The unique constraint on (assessment, user) keeps exactly one row per pair;
    a new submission overwrites score and attempt date.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    assessment = models.ForeignKey(
        Assessment,
        on_delete=models.CASCADE,
        related_name="results",
        verbose_name=_("Assessment"),
    )
    user = models.ForeignKey(
        User,
        on_delete=models.CASCADE,
        related_name="assessment_results",
        verbose_name=_("User"),
    )
    score = models.IntegerField(verbose_name=_("Score"))
    attempted_at = models.DateTimeField(default=timezone.now, verbose_name=_("Attempt Date"))

    class Meta:
        verbose_name = _("Result")
        verbose_name_plural = _("Results")
        ordering = ["-attempted_at"]
        db_table = "elearning_result"
        constraints = [
            models.UniqueConstraint(
                fields=["assessment", "user"], name="unique_result_per_assessment_user"
            ),
        ]

    def __str__(self):
        return f"{self.user} - {self.assessment.title}: {self.score}"
