from rest_framework import serializers

from .models import Course, Enrollment


class CourseSerializer(serializers.ModelSerializer):
    """
    Course representation for the frontend (camelCase field names).

    The instructor is always the authenticated caller and therefore read-only.
    """

    courseId = serializers.UUIDField(source="id", read_only=True)
    mediaUrl = serializers.URLField(
        source="media_url", required=False, allow_blank=True, max_length=500
    )
    instructorId = serializers.IntegerField(source="instructor_id", read_only=True)
    instructorName = serializers.SerializerMethodField()

    class Meta:
        model = Course
        fields = [
            "courseId",
            "title",
            "description",
            "mediaUrl",
            "instructorId",
            "instructorName",
        ]

    def get_instructorName(self, obj):
        instructor = obj.instructor
        if instructor is None:
            return None
        return instructor.first_name or instructor.username


class EnrolledCourseSerializer(serializers.ModelSerializer):
    """Course of the current student together with the enrollment date."""

    courseId = serializers.UUIDField(source="course.id", read_only=True)
    title = serializers.CharField(source="course.title", read_only=True)
    description = serializers.CharField(source="course.description", read_only=True)
    mediaUrl = serializers.CharField(source="course.media_url", read_only=True)
    instructorId = serializers.IntegerField(source="course.instructor_id", read_only=True)
    instructorName = serializers.SerializerMethodField()
    enrollmentDate = serializers.DateTimeField(source="enrolled_at", read_only=True)

    class Meta:
        model = Enrollment
        fields = [
            "courseId",
            "title",
            "description",
            "mediaUrl",
            "instructorId",
            "instructorName",
            "enrollmentDate",
        ]

    def get_instructorName(self, obj):
        instructor = obj.course.instructor
        return instructor.first_name or instructor.username
