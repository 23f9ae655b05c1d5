"""
URL Configuration for the CRUD dashboard.

Include with a namespace of 'crud':
    path('dashboard/', include('crud.urls')),
"""
from django.urls import path
from . import views

app_name = 'crud'

urlpatterns = [
    path('navigation/', views.navigation, name='navigation'),

    # Resource screens
    path('resources/<slug:resource>/', views.resource_list, name='resource-list'),
    path('resources/<slug:resource>/create/', views.resource_create, name='resource-create'),
    path('resources/<slug:resource>/actions/<slug:action>/', views.resource_action, name='resource-action'),
    path('resources/<slug:resource>/<str:pk>/', views.resource_view, name='resource-view'),
    path('resources/<slug:resource>/<str:pk>/edit/', views.resource_edit, name='resource-edit'),
    path('resources/<slug:resource>/<str:pk>/restore/', views.resource_restore, name='resource-restore'),
    path('resources/<slug:resource>/<str:pk>/force-delete/', views.resource_force_delete, name='resource-force-delete'),
]
