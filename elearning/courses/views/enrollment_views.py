import logging

from django.db import IntegrityError, transaction
from rest_framework import generics, status
from rest_framework.response import Response
from rest_framework.views import APIView

# Angepasste Importe
from ...exceptions import NotFoundException, ValidationException
from ...users.permissions import IsStudent
from ..models import Course, Enrollment
from ..serializers import EnrolledCourseSerializer

logger = logging.getLogger(__name__)

__all__ = ["EnrollView", "EnrollmentStatusView", "MyCoursesView"]


def _get_course(course_id) -> Course:
    try:
        return Course.objects.get(pk=course_id)
    except Course.DoesNotExist:
        raise NotFoundException("Course not found", resource="course")


class EnrollView(APIView):
    permission_classes = [IsStudent]

    def post(self, request, course_id):
        course = _get_course(course_id)

        if course.is_enrolled(request.user):
            raise ValidationException("You are already enrolled in this course.")

        try:
            with transaction.atomic():
                enrollment = Enrollment.objects.create(user=request.user, course=course)
        except IntegrityError:
            # Parallele Einschreibung hat gewonnen
            raise ValidationException("You are already enrolled in this course.")

        logger.info(f"{request.user.username} hat sich in '{course.title}' eingeschrieben")
        return Response(
            {"detail": "Enrolled successfully!", "enrollmentId": enrollment.id},
            status=status.HTTP_200_OK,
        )


class EnrollmentStatusView(APIView):
    permission_classes = [IsStudent]

    def get(self, request, course_id):
        course = _get_course(course_id)
        return Response({"enrolled": course.is_enrolled(request.user)})


class MyCoursesView(generics.ListAPIView):
    serializer_class = EnrolledCourseSerializer
    permission_classes = [IsStudent]

    def get_queryset(self):
        return (
            Enrollment.objects.filter(user=self.request.user)
            .select_related("course", "course__instructor")
            .order_by("-enrolled_at")
        )
