"""Order URL configuration."""

from __future__ import annotations

from django.urls import path

from modules.orders.views import OrderViewSet

order_list = OrderViewSet.as_view(
    {"get": "list", "post": "create", "delete": "destroy_all"}
)
order_detail = OrderViewSet.as_view(
    {"get": "retrieve", "put": "update", "delete": "destroy"}
)

urlpatterns = [
    path("orders/", order_list, name="order-list"),
    path("orders/<int:pk>/", order_detail, name="order-detail"),
]
