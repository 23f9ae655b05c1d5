"""
URL configuration for crud_project project.

The dashboard lives under /dashboard/:
    /dashboard/navigation/
    /dashboard/resources/<resource>/...
"""
from django.urls import path, include

urlpatterns = [
    path('dashboard/', include('crud.urls')),
]
