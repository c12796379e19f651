"""
URL Configuration for the FTL calculator service
"""

from django.urls import include, path

urlpatterns = [
    path('api/ftl/', include('ftl.urls')),
]
