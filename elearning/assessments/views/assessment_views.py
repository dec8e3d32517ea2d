import logging

from rest_framework import generics
from rest_framework.permissions import AllowAny

# Angepasste Importe
from ...courses.models import Course
from ...exceptions import NotFoundException
from ...users.permissions import IsInstructor
from ..models import Assessment
from ..serializers import AssessmentSerializer, CreateAssessmentSerializer

logger = logging.getLogger(__name__)

__all__ = ["AssessmentListCreateView", "AssessmentDetailView", "CourseAssessmentsView"]


class AssessmentListCreateView(generics.ListCreateAPIView):
    """GET: alle Assessments (öffentlich). POST: neues Assessment mit Fragen (nur Instructor)."""

    def get_permissions(self):
        if self.request.method == "POST":
            return [IsInstructor()]
        return [AllowAny()]

    def get_serializer_class(self):
        if self.request.method == "POST":
            return CreateAssessmentSerializer
        return AssessmentSerializer

    def get_queryset(self):
        return Assessment.objects.prefetch_related("questions")

    def perform_create(self, serializer):
        assessment = serializer.save()
        logger.info(
            f"Assessment '{assessment.title}' mit {assessment.questions.count()} Fragen "
            f"von {self.request.user.username} erstellt"
        )


class AssessmentDetailView(generics.RetrieveDestroyAPIView):
    """GET: ein Assessment (öffentlich). DELETE: Assessment samt Fragen und Ergebnissen (nur Instructor)."""

    serializer_class = AssessmentSerializer
    queryset = Assessment.objects.prefetch_related("questions")

    def get_permissions(self):
        if self.request.method == "DELETE":
            return [IsInstructor()]
        return [AllowAny()]

    def perform_destroy(self, instance):
        logger.info(f"Assessment '{instance.title}' ({instance.id}) wird gelöscht")
        super().perform_destroy(instance)


class CourseAssessmentsView(generics.ListAPIView):
    serializer_class = AssessmentSerializer
    permission_classes = [AllowAny]

    def get_queryset(self):
        course_id = self.kwargs["course_id"]
        if not Course.objects.filter(pk=course_id).exists():
            raise NotFoundException("Course not found", resource="course")
        return Assessment.objects.filter(course_id=course_id).prefetch_related("questions")
