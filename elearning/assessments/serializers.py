"""
E-Learning Assessment Serializers

Serializers:
- QuestionSerializer / AssessmentSerializer: Public view, correct option hidden
- CreateQuestionSerializer / CreateAssessmentSerializer: Instructor input
- SubmitAssessmentSerializer: Raw submission, validated by the AssessmentScorer
- SubmissionOutcomeSerializer: Fixed response of a submission
- AssessmentResultSerializer: Result of the current student incl. isPassed

Author: EduSync Development Team
Version: 1.0.0
"""

from typing import Any, Dict, List

from django.db import transaction
from rest_framework import serializers

from ..courses.models import Course
from .models import Assessment, OptionLabel, Question, Result
from .services.scoring_service import SubmittedAnswer, is_passed


class QuestionSerializer(serializers.ModelSerializer):
    questionId = serializers.UUIDField(source="id", read_only=True)
    questionText = serializers.CharField(source="text")
    optionA = serializers.CharField(source="option_a")
    optionB = serializers.CharField(source="option_b")
    optionC = serializers.CharField(source="option_c")
    optionD = serializers.CharField(source="option_d")

    class Meta:
        model = Question
        fields = ["questionId", "questionText", "optionA", "optionB", "optionC", "optionD"]


class AssessmentSerializer(serializers.ModelSerializer):
    """Assessment with its questions. The correct option is never part of the output."""

    assessmentId = serializers.UUIDField(source="id", read_only=True)
    maxScore = serializers.IntegerField(source="max_score")
    courseId = serializers.UUIDField(source="course_id")
    questions = QuestionSerializer(many=True, read_only=True)

    class Meta:
        model = Assessment
        fields = ["assessmentId", "title", "maxScore", "courseId", "questions"]


class CreateQuestionSerializer(QuestionSerializer):
    correctOption = serializers.CharField(source="correct_option", write_only=True)

    class Meta(QuestionSerializer.Meta):
        fields = QuestionSerializer.Meta.fields + ["correctOption"]

    def validate_correctOption(self, value: str) -> str:
        value = value.strip().upper()
        if value not in OptionLabel.values:
            raise serializers.ValidationError("Correct option must be one of A, B, C or D.")
        return value


class CreateAssessmentSerializer(serializers.ModelSerializer):
    """
    Create an assessment together with its questions.

    Request Body Example (JSON):
        {
            "title": "Python Basics Quiz",
            "maxScore": 100,
            "courseId": "6f1c...",
            "questions": [
                {"questionText": "...", "optionA": "...", "optionB": "...",
                 "optionC": "...", "optionD": "...", "correctOption": "B"}
            ]
        }
    """

    assessmentId = serializers.UUIDField(source="id", read_only=True)
    maxScore = serializers.IntegerField(source="max_score", min_value=1)
    courseId = serializers.UUIDField(source="course_id")
    questions = CreateQuestionSerializer(many=True, required=False)

    class Meta:
        model = Assessment
        fields = ["assessmentId", "title", "maxScore", "courseId", "questions"]

    def validate_courseId(self, value):
        if not Course.objects.filter(pk=value).exists():
            raise serializers.ValidationError("CourseId is invalid or does not exist.")
        return value

    def validate_questions(self, value: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
        if not value:
            raise serializers.ValidationError("At least one question is required.")
        return value

    def validate(self, data: Dict[str, Any]) -> Dict[str, Any]:
        if not data.get("questions"):
            raise serializers.ValidationError({"questions": ["At least one question is required."]})
        return data

    @transaction.atomic
    def create(self, validated_data: Dict[str, Any]) -> Assessment:
        questions = validated_data.pop("questions")
        assessment = Assessment.objects.create(**validated_data)
        Question.objects.bulk_create(
            [Question(assessment=assessment, **question) for question in questions]
        )
        return assessment

    def to_representation(self, instance):
        return AssessmentSerializer(instance, context=self.context).data


class SubmittedAnswerSerializer(serializers.Serializer):
    # Feldinhalte prüft der AssessmentScorer, damit die Prüfreihenfolge erhalten bleibt
    questionId = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    selectedOption = serializers.CharField(
        required=False, allow_blank=True, allow_null=True, trim_whitespace=False
    )


class SubmitAssessmentSerializer(serializers.Serializer):
    assessmentId = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    answers = SubmittedAnswerSerializer(many=True, required=False, allow_null=True)

    def get_answers(self) -> List[SubmittedAnswer]:
        return [
            SubmittedAnswer(
                question_id=answer.get("questionId"),
                selected_option=answer.get("selectedOption"),
            )
            for answer in self.validated_data.get("answers") or []
        ]


class SubmissionOutcomeSerializer(serializers.Serializer):
    score = serializers.FloatField()
    totalQuestions = serializers.IntegerField(source="total_questions")
    correctAnswers = serializers.IntegerField(source="correct_answers")
    maxScore = serializers.IntegerField(source="max_score")
    isUpdate = serializers.BooleanField(source="is_update")
    storedScore = serializers.IntegerField(source="stored_score")
    resultId = serializers.UUIDField(source="result_id")


class AssessmentResultSerializer(serializers.ModelSerializer):
    resultId = serializers.UUIDField(source="id")
    assessmentId = serializers.UUIDField(source="assessment_id")
    assessmentTitle = serializers.CharField(source="assessment.title")
    courseName = serializers.CharField(source="assessment.course.title")
    maxScore = serializers.IntegerField(source="assessment.max_score")
    attemptDate = serializers.DateTimeField(source="attempted_at")
    isPassed = serializers.SerializerMethodField()

    class Meta:
        model = Result
        fields = [
            "resultId",
            "assessmentId",
            "assessmentTitle",
            "courseName",
            "score",
            "maxScore",
            "attemptDate",
            "isPassed",
        ]
        read_only_fields = fields

    def get_isPassed(self, obj: Result) -> bool:
        return is_passed(obj.score, obj.assessment.max_score)
