"""
E-Learning Course Models

This module defines the course catalogue and the enrollment of students.

Models:
- Course: Learning course owned by an instructor
- Enrollment: Student enrolled in a course (at most once per course)

Author: EduSync Development Team
Version: 1.0.0
"""

import uuid

from django.conf import settings
from django.db import models
from django.utils import timezone
from django.utils.translation import gettext_lazy as _

User = settings.AUTH_USER_MODEL


class Course(models.Model):
    """
    Learning course owned by an instructor.

    Attributes:
        id: UUID identity
        title: Course title
        description: Course description
        media_url: Optional link to a teaser video or image
        instructor: Instructor who created and maintains the course
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    title = models.CharField(max_length=255, verbose_name=_("Title"))
    description = models.TextField(blank=True, verbose_name=_("Description"))
    media_url = models.URLField(
        max_length=500,
        blank=True,
        verbose_name=_("Media URL"),
        help_text=_("Optional link to course media"),
    )
    instructor = models.ForeignKey(
        User,
        on_delete=models.CASCADE,
        related_name="courses",
        verbose_name=_("Instructor"),
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = _("Course")
        verbose_name_plural = _("Courses")
        ordering = ["title"]
        db_table = "elearning_course"

    def __str__(self) -> str:
        return self.title

    def is_enrolled(self, user) -> bool:
        if not user or not user.is_authenticated:
            return False
        return self.enrollments.filter(user=user).exists()


class Enrollment(models.Model):
    """
    Enrollment of a user in a course.

    The unique constraint on (user, course) prevents duplicate enrollments
    even for concurrent requests.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    user = models.ForeignKey(
        User,
        on_delete=models.CASCADE,
        related_name="enrollments",
        verbose_name=_("User"),
    )
    course = models.ForeignKey(
        Course,
        on_delete=models.CASCADE,
        related_name="enrollments",
        verbose_name=_("Course"),
    )
    enrolled_at = models.DateTimeField(default=timezone.now, verbose_name=_("Enrollment Date"))

    class Meta:
        verbose_name = _("Enrollment")
        verbose_name_plural = _("Enrollments")
        ordering = ["-enrolled_at"]
        db_table = "elearning_enrollment"
        constraints = [
            models.UniqueConstraint(
                fields=["user", "course"], name="unique_enrollment_per_user_course"
            ),
        ]

    def __str__(self) -> str:
        return f"{self.user.username} enrolled in {self.course.title}"
