"""Root URL configuration for searchengine_tool."""

from django.urls import include, path

urlpatterns = [
    path('', include('searchengine.urls')),
]
