"""
URL configuration for planning_project.

All business endpoints live under /api/ so ResponseHeadersMiddleware
applies to them.
"""
from django.contrib import admin
from django.urls import path, include
from rest_framework_simplejwt.views import TokenObtainPairView, TokenRefreshView

from sales.core.views import pph_options

urlpatterns = [
    path('admin/', admin.site.urls),

    # Token authentication
    path('api/auth/token/', TokenObtainPairView.as_view(), name='token_obtain_pair'),
    path('api/auth/token/refresh/', TokenRefreshView.as_view(), name='token_refresh'),

    path('api/products/', include('sales.catalog.urls')),
    path('api/planning/', include('sales.planning.urls')),
    path('api/quotation/', include('sales.quotation.urls')),
    path('api/pph-options/', pph_options, name='pph-options'),
]
