"""Pastry URL configuration."""

from __future__ import annotations

from django.urls import path

from modules.pastries.views import PastryViewSet

pastry_list = PastryViewSet.as_view(
    {"get": "list", "post": "create", "delete": "destroy_all"}
)
pastry_detail = PastryViewSet.as_view(
    {"get": "retrieve", "put": "update", "delete": "destroy"}
)

urlpatterns = [
    path("pastries/", pastry_list, name="pastry-list"),
    path("pastries/<int:pk>/", pastry_detail, name="pastry-detail"),
]
