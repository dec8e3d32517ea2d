"""
E-Learning Application URL Configuration

This module defines the complete URL routing structure for the E-Learning application.
Each functional area (users, courses, assessments) has its own URL namespace.

URL Structure (mounted under /api/elearning/):
- token/: Authentication endpoints (JWT token management)
- users/: Registration, logout, password reset and current user
- courses/: Course catalogue, course management and enrollment
- assessments/: Assessments, submissions and student results

Author: EduSync Development Team
Version: 1.0.0
"""

from typing import List
from django.urls import path, include, URLPattern
from rest_framework_simplejwt.views import TokenVerifyView

# Import der Views
from .users import views as user_views
from .courses import views as course_views
from .assessments import views as assessment_views

app_name = 'elearning'

# --- User Management URL Patterns ---

users_urlpatterns: List[URLPattern] = [
    # Public account endpoints (rate limited)
    path('register/', user_views.RegistrationView.as_view(), name='register'),
    path('forgot-password/', user_views.ForgotPasswordView.as_view(), name='forgot_password'),
    path('reset-password/', user_views.ResetPasswordView.as_view(), name='reset_password'),

    # Session endpoints
    path('logout/', user_views.LogoutView.as_view(), name='logout'),
    path('me/', user_views.CurrentUserView.as_view(), name='me'),
]

# --- Courses URL Patterns ---

courses_urlpatterns: List[URLPattern] = [
    # Course catalogue and management
    path('', course_views.CourseListCreateView.as_view(), name='course-list'),
    path('<uuid:pk>/', course_views.CourseDetailView.as_view(), name='course-detail'),
    path('by-instructor/<int:instructor_id>/', course_views.InstructorCoursesView.as_view(), name='courses-by-instructor'),

    # Student enrollment
    path('my-courses/', course_views.MyCoursesView.as_view(), name='my-courses'),
    path('<uuid:course_id>/enroll/', course_views.EnrollView.as_view(), name='enroll'),
    path('<uuid:course_id>/enrollment-status/', course_views.EnrollmentStatusView.as_view(), name='enrollment-status'),
]

# --- Assessments URL Patterns ---

assessments_urlpatterns: List[URLPattern] = [
    # Public assessment endpoints, creation and deletion by instructors
    path('', assessment_views.AssessmentListCreateView.as_view(), name='assessment-list'),
    path('<uuid:pk>/', assessment_views.AssessmentDetailView.as_view(), name='assessment-detail'),
    path('course/<uuid:course_id>/', assessment_views.CourseAssessmentsView.as_view(), name='course-assessments'),

    # Student submission and results
    path('submit/', assessment_views.SubmitAssessmentView.as_view(), name='submit'),
    path('student/results/', assessment_views.StudentResultsView.as_view(), name='student-results'),
]

# --- Main URL Configuration for E-Learning Application ---

urlpatterns: List[URLPattern] = [
    # Authentication endpoints (JWT token management)
    path('token/', user_views.CustomTokenObtainPairView.as_view(), name='token_obtain_pair'),
    path('token/refresh/', user_views.CustomTokenRefreshView.as_view(), name='token_refresh'),
    path('token/verify/', TokenVerifyView.as_view(), name='token_verify'),

    # Functional area URL includes with proper namespacing
    path('users/', include((users_urlpatterns, 'users'))),
    path('courses/', include((courses_urlpatterns, 'courses'))),
    path('assessments/', include((assessments_urlpatterns, 'assessments'))),
]
