"""
URL Configuration for Product catalog endpoints.
"""
from django.urls import path
from . import views

app_name = 'catalog'

urlpatterns = [
    path('', views.product_list, name='product-list'),
    path('names/', views.product_names, name='product-names'),
    path('<int:pk>/', views.product_detail, name='product-detail'),
]
