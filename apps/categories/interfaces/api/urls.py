"""
Categories API URLs.
"""
from django.urls import path, include

urlpatterns = [
    path('v1/categories/', include('apps.categories.interfaces.api.v1.urls')),
]
