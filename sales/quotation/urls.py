"""
URL Configuration for Quotation API endpoints.
"""
from django.urls import path
from . import views

app_name = 'quotation'

urlpatterns = [
    path('', views.quotation_list, name='quotation-list'),
    path('export/', views.quotation_export, name='quotation-export'),
    path('<int:pk>/', views.quotation_detail, name='quotation-detail'),
    path('<int:pk>/sync/', views.quotation_sync, name='quotation-sync'),
]
