import logging
from django.core.management.base import BaseCommand
from django.db import transaction
from django.contrib.auth.models import User

from ...models import (
    UserRole,
    Course,
    Enrollment,
    Assessment,
    Question,
    Result,
)

# Configure logger
logger = logging.getLogger(__name__)

TEST_PASSWORD = "test-Pass-1234"
INSTRUCTOR_EMAIL = "instructor@test.com"
STUDENT_EMAIL = "student@test.com"

# Kurse mit je einem Assessment: (Titel, Beschreibung, Max-Score, Fragen)
# Frage: (Text, A, B, C, D, richtige Option)
COURSE_CATALOGUE = {
    "Python Grundlagen": (
        "Variablen, Datentypen und Kontrollfluss in Python.",
        100,
        [
            ("Welcher Datentyp ist unveränderlich?", "list", "dict", "tuple", "set", "C"),
            ("Wie beginnt eine Funktionsdefinition?", "func", "def", "function", "lambda", "B"),
            ("Was liefert len('abc')?", "2", "3", "4", "Fehler", "B"),
            ("Welches Schlüsselwort beendet eine Schleife?", "stop", "exit", "return", "break", "D"),
        ],
    ),
    "Django REST Framework Basics": (
        "Serializer, Views und Routing mit DRF.",
        10,
        [
            ("Welche Klasse validiert Eingabedaten?", "Serializer", "Router", "Model", "Admin", "A"),
            ("Welcher Status steht für 'Created'?", "200", "201", "204", "400", "B"),
            ("Wo werden Default-Permissions gesetzt?", "urls.py", "models.py", "REST_FRAMEWORK", "wsgi.py", "C"),
        ],
    ),
    "Git Grundlagen": (
        "Commits, Branches und Merges.",
        50,
        [
            ("Welcher Befehl erstellt einen Commit?", "git push", "git commit", "git add", "git pull", "B"),
            ("Welcher Befehl zeigt den Verlauf?", "git log", "git show-all", "git history", "git diff", "A"),
        ],
    ),
}


class Command(BaseCommand):
    help = "Cleans and seeds the database with test users, courses, assessments and an enrollment."

    def _create_user(self, email, name, role, **extra):
        user = User.objects.create_user(
            username=email, email=email, password=TEST_PASSWORD, first_name=name, **extra
        )
        # Profile wird per Signal angelegt
        user.profile.role = role
        user.profile.save()
        return user

    def _create_course(self, title, description, instructor):
        return Course.objects.create(title=title, description=description, instructor=instructor)

    def _create_assessment(self, course, max_score, questions):
        assessment = Assessment.objects.create(
            title=f"{course.title} Quiz", max_score=max_score, course=course
        )
        Question.objects.bulk_create(
            [
                Question(
                    assessment=assessment,
                    text=text,
                    option_a=a,
                    option_b=b,
                    option_c=c,
                    option_d=d,
                    correct_option=correct,
                )
                for text, a, b, c, d, correct in questions
            ]
        )
        return assessment

    @transaction.atomic
    def handle(self, *args, **options):
        self.stdout.write(
            self.style.WARNING("Starting database cleanup before seeding...")
        )

        # --- Cleanup existing data ---
        Result.objects.all().delete()
        Assessment.objects.all().delete()  # Fragen werden mitgelöscht
        Enrollment.objects.all().delete()
        Course.objects.all().delete()
        self.stdout.write("  - Kurs- und Assessment-Daten gelöscht.")

        User.objects.filter(username__in=[INSTRUCTOR_EMAIL, STUDENT_EMAIL]).delete()
        self.stdout.write("  - Test User gelöscht.")
        self.stdout.write(self.style.SUCCESS("Cleanup finished."))

        # --- Create Test Users ---
        self.stdout.write("Erstelle Test User...")
        instructor = self._create_user(
            INSTRUCTOR_EMAIL, "Test Instructor", UserRole.INSTRUCTOR, is_staff=True
        )
        student = self._create_user(STUDENT_EMAIL, "Test Student", UserRole.STUDENT)
        self.stdout.write(
            self.style.SUCCESS(
                f'Test User "{instructor.username}" und "{student.username}" erstellt '
                f'(Passwort: "{TEST_PASSWORD}").'
            )
        )

        # --- Create Courses and Assessments ---
        self.stdout.write(self.style.SUCCESS("Starting database seeding..."))
        courses = []
        for title, (description, max_score, questions) in COURSE_CATALOGUE.items():
            course = self._create_course(title, description, instructor)
            self._create_assessment(course, max_score, questions)
            courses.append(course)
            self.stdout.write(
                f'  - Kurs "{course.title}" mit Assessment ({len(questions)} Fragen) erstellt.'
            )

        # --- Enroll Student ---
        Enrollment.objects.create(user=student, course=courses[0])
        self.stdout.write(f'  - "{student.username}" in "{courses[0].title}" eingeschrieben.')

        logger.info(f"Testdaten erstellt: {len(courses)} Kurse")
        self.stdout.write(self.style.SUCCESS("Database seeding finished."))
