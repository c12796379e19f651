"""
URL Configuration for FTL Calculator API
"""

from django.urls import path
from . import views

urlpatterns = [
    path('calculate', views.calculate_fdp, name='calculate-fdp'),
    path('rules', views.ftl_rules, name='ftl-rules'),
]
