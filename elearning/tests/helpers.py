"""
Gemeinsame Hilfsfunktionen für die E-Learning Tests.

Legt User mit Rolle, Kurse und Assessments mit Fragen an.
"""

from django.contrib.auth.models import User

from elearning.models import UserRole, Course, Assessment, Question

TEST_PASSWORD = "Musterpasswort-123"


def create_user(username, role=UserRole.STUDENT, password=TEST_PASSWORD, **extra):
    user = User.objects.create_user(
        username=username,
        email=extra.pop("email", username if "@" in username else f"{username}@test.com"),
        password=password,
        **extra,
    )
    user.profile.role = role
    user.profile.save()
    return user


def create_course(instructor, title="Python Grundlagen", **extra):
    return Course.objects.create(title=title, instructor=instructor, **extra)


def create_assessment(course, correct_options, max_score=100, title="Quiz"):
    """
    Assessment mit einer Frage pro Eintrag in ``correct_options``.

    Returns:
        (assessment, [questions]) in der Reihenfolge von ``correct_options``
    """
    assessment = Assessment.objects.create(title=title, max_score=max_score, course=course)
    questions = [
        Question.objects.create(
            assessment=assessment,
            text=f"Frage {index + 1}",
            option_a="Antwort A",
            option_b="Antwort B",
            option_c="Antwort C",
            option_d="Antwort D",
            correct_option=correct,
        )
        for index, correct in enumerate(correct_options)
    ]
    return assessment, questions


def wrong_option(correct):
    return "A" if correct.upper() != "A" else "B"
