import logging

from rest_framework import generics, status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

# Angepasste Importe
from ...exceptions import ElearningException, InternalServerException
from ...users.permissions import IsStudent
from ..models import Result
from ..serializers import (
    AssessmentResultSerializer,
    SubmissionOutcomeSerializer,
    SubmitAssessmentSerializer,
)
from ..services import AssessmentScorer

logger = logging.getLogger(__name__)

__all__ = ["SubmitAssessmentView", "StudentResultsView"]


class SubmitAssessmentView(APIView):
    """
    Abgabe eines Assessments durch einen Studenten.

    Request Body Example (JSON):
        {
            "assessmentId": "b3c1...",
            "answers": [{"questionId": "9d2e...", "selectedOption": "a"}]
        }

    Antwortet mit 200 und dem Ergebnis, 400/401/404 bei Fehlern der Abgabe,
    500 bei unerwarteten Fehlern.
    """

    permission_classes = [IsStudent]

    def post(self, request: Request) -> Response:
        serializer = SubmitAssessmentSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            outcome = AssessmentScorer().submit(
                serializer.validated_data.get("assessmentId"),
                serializer.get_answers(),
                request.user,
            )
        except ElearningException:
            raise
        except Exception as e:
            logger.error(f"Fehler bei der Abgabe von {request.user.username}: {e}", exc_info=True)
            raise InternalServerException()

        return Response(SubmissionOutcomeSerializer(outcome).data, status=status.HTTP_200_OK)


class StudentResultsView(generics.ListAPIView):
    serializer_class = AssessmentResultSerializer
    permission_classes = [IsStudent]

    def get_queryset(self):
        return (
            Result.objects.filter(user=self.request.user)
            .select_related("assessment", "assessment__course")
            .order_by("-attempted_at")
        )
