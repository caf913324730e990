"""URL configuration for the searchengine app.

Mutations are POST-only; the table, matrix and search views are GET-only.
"""

from django.urls import path

from . import views

app_name = 'searchengine'

urlpatterns = [
    path('', views.home, name='home'),
    path('matrix/', views.matrix, name='matrix'),
    path('search/', views.search, name='search'),
    path('pages/add/', views.add_page, name='add_page'),
    path('pages/remove/', views.remove_page, name='remove_page'),
    path('links/add/', views.add_link, name='add_link'),
    path('links/remove/', views.remove_link, name='remove_link'),
]
