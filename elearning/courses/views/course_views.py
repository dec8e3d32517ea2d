import logging

from django.contrib.auth.models import User
from rest_framework import generics
from rest_framework.permissions import SAFE_METHODS

# Angepasste Importe
from ...exceptions import NotFoundException
from ...users.models import UserRole
from ...users.permissions import IsCourseOwner, IsInstructor, IsStudentOrInstructor
from ..models import Course
from ..serializers import CourseSerializer

logger = logging.getLogger(__name__)

__all__ = ["CourseListCreateView", "CourseDetailView", "InstructorCoursesView"]


class CourseListCreateView(generics.ListCreateAPIView):
    serializer_class = CourseSerializer

    def get_permissions(self):
        if self.request.method in SAFE_METHODS:
            return [IsStudentOrInstructor()]
        return [IsInstructor()]

    def get_queryset(self):
        return Course.objects.select_related("instructor").order_by("title")

    def perform_create(self, serializer):
        course = serializer.save(instructor=self.request.user)
        logger.info(f"Kurs '{course.title}' von {self.request.user.username} erstellt")


class CourseDetailView(generics.RetrieveUpdateDestroyAPIView):
    """Handle Course CRUD operations: GET (retrieve), PUT/PATCH (update), DELETE (destroy)."""

    serializer_class = CourseSerializer
    queryset = Course.objects.select_related("instructor")

    def get_permissions(self):
        if self.request.method in SAFE_METHODS:
            return [IsStudentOrInstructor()]
        return [IsInstructor(), IsCourseOwner()]

    def perform_destroy(self, instance):
        logger.info(f"Kurs '{instance.title}' ({instance.id}) wird gelöscht")
        super().perform_destroy(instance)


class InstructorCoursesView(generics.ListAPIView):
    serializer_class = CourseSerializer
    permission_classes = [IsStudentOrInstructor]

    def get_queryset(self):
        instructor_id = self.kwargs["instructor_id"]
        instructor_exists = User.objects.filter(
            pk=instructor_id, profile__role=UserRole.INSTRUCTOR
        ).exists()
        if not instructor_exists:
            raise NotFoundException(
                f"Instructor with ID {instructor_id} not found", resource="instructor"
            )
        return Course.objects.filter(instructor_id=instructor_id).select_related("instructor")
