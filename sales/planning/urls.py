"""
URL Configuration for Planning API endpoints.
"""
from django.urls import path
from . import views

app_name = 'planning'

urlpatterns = [
    path('', views.planning_list, name='planning-list'),
    path('<int:pk>/', views.planning_detail, name='planning-detail'),
    path('<int:pk>/copy/', views.planning_copy, name='planning-copy'),
]
