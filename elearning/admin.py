"""
E-Learning Application Django Admin Configuration

This module provides the Django admin interface configuration for all
E-Learning models.

The admin interface is organized into logical sections:
- User Management: Extended user administration with role profile
- Course Management: Courses and enrollments
- Assessment System: Assessments, questions and results

Author: EduSync Development Team
Version: 1.0.0
"""

from typing import Optional
from django.contrib import admin
from django.contrib.auth.admin import UserAdmin as BaseUserAdmin
from django.contrib.auth.models import User
from django.utils.translation import gettext_lazy as _
from django.db.models import Count, QuerySet
from django.http import HttpRequest

# Import all models from the central models registry
from .models import (
    Profile,
    PasswordResetToken,
    Course,
    Enrollment,
    Assessment,
    Question,
    Result,
)
from .assessments.services import is_passed

# --- User Management Administration ---


class ProfileInline(admin.StackedInline):
    """
    Inline admin configuration for user profiles.

    Allows editing the platform role directly within the user admin interface.
    """

    model = Profile
    can_delete = False
    verbose_name_plural = "Profile Information"
    fk_name = "user"
    fields = ("role",)

    def get_extra(
        self, request: HttpRequest, obj: Optional[User] = None, **kwargs
    ) -> int:
        """Return 0 extra forms since profile should exist or be created automatically."""
        return 0


class UserAdmin(BaseUserAdmin):
    """
    Enhanced user administration interface with profile integration.

    Extends Django's default UserAdmin with the platform role.
    """

    inlines = (ProfileInline,)
    list_display = (
        "username",
        "email",
        "first_name",
        "is_staff",
        "is_active",
        "get_role",
    )
    list_select_related = ("profile",)
    list_filter = (
        "is_staff",
        "is_superuser",
        "is_active",
        "profile__role",
        "date_joined",
    )
    search_fields = ("username", "first_name", "last_name", "email")
    ordering = ("username",)

    @admin.display(description=_("Role"))
    def get_role(self, instance: User) -> Optional[str]:
        try:
            return instance.profile.get_role_display()
        except Profile.DoesNotExist:
            return None

    def get_queryset(self, request: HttpRequest) -> QuerySet:
        """Optimize queryset with profile prefetch for better performance."""
        return super().get_queryset(request).select_related("profile")


# Register enhanced user administration
admin.site.unregister(User)
admin.site.register(User, UserAdmin)


@admin.register(PasswordResetToken)
class PasswordResetTokenAdmin(admin.ModelAdmin):
    list_display = ("user", "created_at", "expires_at", "used")
    list_filter = ("used",)
    search_fields = ("user__username", "user__email")
    readonly_fields = ("token", "created_at")


# --- Course Administration ---


class EnrollmentInline(admin.TabularInline):
    model = Enrollment
    extra = 0
    fields = ("user", "enrolled_at")
    readonly_fields = ("enrolled_at",)


@admin.register(Course)
class CourseAdmin(admin.ModelAdmin):
    """Administration interface for courses including their enrollments."""

    list_display = ("title", "instructor", "enrollment_count", "created_at")
    list_filter = ("created_at",)
    search_fields = ("title", "description", "instructor__username")
    inlines = [EnrollmentInline]
    readonly_fields = ("created_at", "updated_at")

    @admin.display(description=_("Enrollments"))
    def enrollment_count(self, obj: Course) -> int:
        return obj.enrollment_count

    def get_queryset(self, request: HttpRequest) -> QuerySet:
        return (
            super()
            .get_queryset(request)
            .select_related("instructor")
            .annotate(enrollment_count=Count("enrollments"))
        )


@admin.register(Enrollment)
class EnrollmentAdmin(admin.ModelAdmin):
    list_display = ("user", "course", "enrolled_at")
    list_filter = ("course",)
    search_fields = ("user__username", "course__title")


# --- Assessment Administration ---


class QuestionInline(admin.StackedInline):
    """Inline admin for the questions of an assessment."""

    model = Question
    extra = 1
    fields = ("text", ("option_a", "option_b"), ("option_c", "option_d"), "correct_option")


@admin.register(Assessment)
class AssessmentAdmin(admin.ModelAdmin):
    """
    Administration interface for assessments.

    Questions are edited inline; the correct option is only visible here,
    never in the public API.
    """

    list_display = ("title", "course", "max_score", "question_count")
    list_filter = ("course",)
    search_fields = ("title", "course__title")
    inlines = [QuestionInline]

    @admin.display(description=_("Questions"))
    def question_count(self, obj: Assessment) -> int:
        return obj.question_count

    def get_queryset(self, request: HttpRequest) -> QuerySet:
        return (
            super()
            .get_queryset(request)
            .select_related("course")
            .annotate(question_count=Count("questions"))
        )


@admin.register(Result)
class ResultAdmin(admin.ModelAdmin):
    list_display = ("user", "assessment", "score", "get_is_passed", "attempted_at")
    list_filter = ("assessment__course", "attempted_at")
    search_fields = ("user__username", "assessment__title")
    readonly_fields = ("attempted_at",)

    @admin.display(boolean=True, description=_("Passed"))
    def get_is_passed(self, obj: Result) -> bool:
        return is_passed(obj.score, obj.assessment.max_score)

    def get_queryset(self, request: HttpRequest) -> QuerySet:
        return super().get_queryset(request).select_related("user", "assessment")
