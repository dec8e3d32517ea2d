"""
API-Tests für Kurse und Einschreibungen.
"""

import uuid

from django.urls import reverse
from rest_framework import status
from rest_framework.test import APITestCase

from elearning.models import Course, Enrollment, UserRole
from elearning.tests.helpers import create_course, create_user

COURSES_URL = reverse("elearning:courses:course-list")
MY_COURSES_URL = reverse("elearning:courses:my-courses")


class CourseTests(APITestCase):
    @classmethod
    def setUpTestData(cls):
        cls.instructor = create_user("lehrer", role=UserRole.INSTRUCTOR, first_name="Erika Lehrer")
        cls.other_instructor = create_user("lehrer2", role=UserRole.INSTRUCTOR)
        cls.student = create_user("student")
        cls.course = create_course(cls.instructor, title="Python Grundlagen", description="Basics")

    def _detail_url(self, course_id):
        return reverse("elearning:courses:course-detail", args=[course_id])

    def test_list_requires_login(self):
        response = self.client.get(COURSES_URL)
        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)

    def test_list_with_instructor_name(self):
        self.client.force_authenticate(self.student)
        response = self.client.get(COURSES_URL)
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(len(response.data), 1)
        course = response.data[0]
        self.assertEqual(course["courseId"], str(self.course.id))
        self.assertEqual(course["instructorId"], self.instructor.id)
        self.assertEqual(course["instructorName"], "Erika Lehrer")

    def test_instructor_creates_course(self):
        self.client.force_authenticate(self.other_instructor)
        response = self.client.post(
            COURSES_URL,
            {"title": "Git", "description": "Branches", "mediaUrl": "https://example.com/git.mp4"},
            format="json",
        )
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        course = Course.objects.get(pk=response.data["courseId"])
        self.assertEqual(course.instructor, self.other_instructor)
        self.assertEqual(course.media_url, "https://example.com/git.mp4")

    def test_student_cannot_create_course(self):
        self.client.force_authenticate(self.student)
        response = self.client.post(COURSES_URL, {"title": "Git"}, format="json")
        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)
        self.assertEqual(response.data["title"], "Permission denied")

    def test_retrieve_unknown_course(self):
        self.client.force_authenticate(self.student)
        response = self.client.get(self._detail_url(uuid.uuid4()))
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)

    def test_owner_updates_course(self):
        self.client.force_authenticate(self.instructor)
        response = self.client.patch(
            self._detail_url(self.course.id), {"title": "Python Basics"}, format="json"
        )
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.course.refresh_from_db()
        self.assertEqual(self.course.title, "Python Basics")

    def test_other_instructor_cannot_modify(self):
        self.client.force_authenticate(self.other_instructor)
        url = self._detail_url(self.course.id)
        self.assertEqual(
            self.client.patch(url, {"title": "X"}, format="json").status_code,
            status.HTTP_403_FORBIDDEN,
        )
        self.assertEqual(self.client.delete(url).status_code, status.HTTP_403_FORBIDDEN)
        self.assertTrue(Course.objects.filter(pk=self.course.id).exists())

    def test_owner_deletes_course(self):
        self.client.force_authenticate(self.instructor)
        response = self.client.delete(self._detail_url(self.course.id))
        self.assertEqual(response.status_code, status.HTTP_204_NO_CONTENT)
        self.assertFalse(Course.objects.exists())

    def test_courses_by_instructor(self):
        create_course(self.other_instructor, title="Docker")
        self.client.force_authenticate(self.student)
        url = reverse("elearning:courses:courses-by-instructor", args=[self.instructor.id])
        response = self.client.get(url)
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual([c["title"] for c in response.data], ["Python Grundlagen"])

    def test_courses_by_unknown_instructor(self):
        self.client.force_authenticate(self.student)
        for user_id in (self.student.id, 999999):
            url = reverse("elearning:courses:courses-by-instructor", args=[user_id])
            response = self.client.get(url)
            self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)


class EnrollmentTests(APITestCase):
    @classmethod
    def setUpTestData(cls):
        cls.instructor = create_user("lehrer", role=UserRole.INSTRUCTOR)
        cls.student = create_user("student")
        cls.course = create_course(cls.instructor, title="Python Grundlagen")
        cls.other_course = create_course(cls.instructor, title="Git Grundlagen")

    def setUp(self):
        self.client.force_authenticate(self.student)

    def _enroll(self, course_id):
        return self.client.post(reverse("elearning:courses:enroll", args=[course_id]))

    def _status(self, course_id):
        return self.client.get(reverse("elearning:courses:enrollment-status", args=[course_id]))

    def test_enroll_once(self):
        self.assertFalse(self._status(self.course.id).data["enrolled"])

        response = self._enroll(self.course.id)
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["detail"], "Enrolled successfully!")
        self.assertTrue(self._status(self.course.id).data["enrolled"])

        response = self._enroll(self.course.id)
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["detail"], "You are already enrolled in this course.")
        self.assertEqual(Enrollment.objects.count(), 1)

    def test_enroll_unknown_course(self):
        response = self._enroll(uuid.uuid4())
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(self._status(uuid.uuid4()).status_code, status.HTTP_404_NOT_FOUND)

    def test_instructor_cannot_enroll(self):
        self.client.force_authenticate(self.instructor)
        self.assertEqual(self._enroll(self.course.id).status_code, status.HTTP_403_FORBIDDEN)

    def test_my_courses(self):
        self._enroll(self.course.id)
        response = self.client.get(MY_COURSES_URL)
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(len(response.data), 1)
        entry = response.data[0]
        self.assertEqual(entry["courseId"], str(self.course.id))
        self.assertEqual(entry["title"], "Python Grundlagen")
        self.assertEqual(entry["instructorName"], "lehrer")
        self.assertIn("enrollmentDate", entry)
