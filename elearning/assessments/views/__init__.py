"""
E-Learning Assessments Views Package - EduSync

Views:
- assessment_views: Öffentliche Liste/Details, Anlegen und Löschen durch Instructors
- submission_views: Abgabe durch Studenten und Ergebnisübersicht

Author: EduSync Development Team
Version: 1.0.0
"""

from .assessment_views import *
from .submission_views import *
