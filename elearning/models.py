"""
E-Learning Application Models Registry

This module serves as the central models registry for the E-Learning application.
It imports and exposes all models from the logical submodules (users, courses, assessments)
to ensure they are properly registered with Django's ORM system.

Architecture:
- users/: Role profile and password reset tokens
- courses/: Course catalogue and enrollments
- assessments/: Assessments, questions and results

Author: EduSync Development Team
Version: 1.0.0
"""

# Import all user-related models for registration with Django ORM
from .users.models import *

# Import all course-related models for registration with Django ORM
from .courses.models import *

# Import all assessment-related models for registration with Django ORM
from .assessments.models import *
