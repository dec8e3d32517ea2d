from rest_framework.permissions import BasePermission

from .models import UserRole, get_user_role


# ------------------------------------------------------------
# Rollenbasierte Zugriffskontrolle: Die Rolle steht im Profile
# des Users (student / instructor).
# ------------------------------------------------------------


class HasRole(BasePermission):
    """Erlaubt den Zugriff nur für authentifizierte User mit einer der erlaubten Rollen."""

    allowed_roles: tuple = ()
    message = "Your role is not allowed to perform this action."

    def has_permission(self, request, view):
        return get_user_role(request.user) in self.allowed_roles


class IsStudent(HasRole):
    allowed_roles = (UserRole.STUDENT,)
    message = "Only students can perform this action."


class IsInstructor(HasRole):
    allowed_roles = (UserRole.INSTRUCTOR,)
    message = "Only instructors can perform this action."


class IsStudentOrInstructor(HasRole):
    allowed_roles = (UserRole.STUDENT, UserRole.INSTRUCTOR)


class IsCourseOwner(BasePermission):
    """Änderungen an einem Kurs sind nur dem Instructor erlaubt, der ihn angelegt hat."""

    message = "You can only modify your own courses."

    def has_object_permission(self, request, view, obj):
        return obj.instructor_id == request.user.id
