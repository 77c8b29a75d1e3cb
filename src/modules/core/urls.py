from django.urls import path

from modules.core.views import ShopFrontView, health_check

urlpatterns = [
    path("", ShopFrontView.as_view(), name="shop_front"),
    path("health", health_check, name="health_check"),
]
