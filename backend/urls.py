"""
EduSync Backend URL Configuration

Root routing for the project. All API endpoints of the e-learning app live
below /api/elearning/, the Django admin (Jazzmin theme) below /admin/.
"""

from django.contrib import admin
from django.urls import include, path

urlpatterns = [
    path("admin/", admin.site.urls),
    path("api/elearning/", include("elearning.urls")),
]
