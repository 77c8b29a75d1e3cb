"""Order API views.

Exposes the ``OrderService`` via HTTP using a DRF ``GenericViewSet``.
Domain exceptions are caught and translated into HTTP status codes; the
view never swallows generic exceptions.
"""

from __future__ import annotations

from django_filters.rest_framework import DjangoFilterBackend
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.reverse import reverse
from rest_framework.viewsets import GenericViewSet

from modules.orders.dtos import CreateOrderDTO, OrderItemDTO, UpdateOrderDTO
from modules.orders.exceptions import (
    EmptyOrder,
    InvalidOrderStatus,
    ItemQuantityExceeded,
    OrderCreationDisabled,
    OrderNotFound,
    StatusTransitionNotAllowed,
)
from modules.orders.filters import OrderFilter
from modules.orders.repositories.django_repository import OrderDjangoRepository
from modules.orders.serializers import (
    CreateOrderSerializer,
    OrderDetailSerializer,
    OrderSummarySerializer,
    UpdateOrderSerializer,
)
from modules.orders.services import OrderService


def _items(validated_items) -> list[OrderItemDTO]:
    return [
        OrderItemDTO(pastry_id=item["pastry_id"], quantity=item["quantity"])
        for item in validated_items
    ]


class OrderViewSet(GenericViewSet):
    """ViewSet for Order operations.

    Uses ``OrderService`` with ``OrderDjangoRepository`` (DIP).
    Does **not** extend ``ModelViewSet``: all ORM access goes through
    the service/repository layer.
    """

    serializer_class = OrderSummarySerializer
    filterset_class = OrderFilter
    filter_backends = [DjangoFilterBackend]
    pagination_class = None

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = OrderService(repository=OrderDjangoRepository())

    def get_queryset(self):
        return self._service.list_orders()

    # ------------------------------------------------------------------
    # List / Retrieve
    # ------------------------------------------------------------------

    def list(self, request: Request) -> Response:
        """GET /api/v1/orders/

        Filtering by ``status`` (case-insensitive) and ``customer`` is
        handled by ``OrderFilter``.
        """
        queryset = self.filter_queryset(self.get_queryset())
        return Response(OrderSummarySerializer(queryset, many=True).data)

    def retrieve(self, request: Request, pk: int) -> Response:
        """GET /api/v1/orders/{pk}/"""
        try:
            order = self._service.get_order(pk)
        except OrderNotFound as exc:
            return Response({"detail": str(exc)}, status=status.HTTP_404_NOT_FOUND)
        return Response(OrderDetailSerializer(order).data)

    # ------------------------------------------------------------------
    # Create / Update / Destroy
    # ------------------------------------------------------------------

    def create(self, request: Request) -> Response:
        """POST /api/v1/orders/"""
        serializer = CreateOrderSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        data = serializer.validated_data
        dto = CreateOrderDTO(
            customer_id=data["customer_id"],
            items=_items(data["items"]),
            status=data["status"],
        )

        try:
            order = self._service.create_order(dto)
        except OrderCreationDisabled as exc:
            return Response(
                {"detail": str(exc)},
                status=status.HTTP_503_SERVICE_UNAVAILABLE,
            )
        except (EmptyOrder, ItemQuantityExceeded) as exc:
            return Response({"detail": str(exc)}, status=status.HTTP_400_BAD_REQUEST)

        location = reverse("order-detail", args=[order.id], request=request)
        return Response(
            OrderSummarySerializer(order).data,
            status=status.HTTP_201_CREATED,
            headers={"Location": location},
        )

    def update(self, request: Request, pk: int) -> Response:
        """PUT /api/v1/orders/{pk}/"""
        serializer = UpdateOrderSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        data = serializer.validated_data
        dto = UpdateOrderDTO(
            customer_id=data["customer_id"],
            status=data["status"],
            items=_items(data["items"]),
        )

        try:
            self._service.update_order(pk, dto)
        except OrderNotFound as exc:
            return Response({"detail": str(exc)}, status=status.HTTP_404_NOT_FOUND)
        except StatusTransitionNotAllowed as exc:
            return Response({"detail": str(exc)}, status=status.HTTP_409_CONFLICT)
        except (InvalidOrderStatus, EmptyOrder, ItemQuantityExceeded) as exc:
            return Response({"detail": str(exc)}, status=status.HTTP_400_BAD_REQUEST)

        return Response(status=status.HTTP_204_NO_CONTENT)

    def destroy(self, request: Request, pk: int) -> Response:
        """DELETE /api/v1/orders/{pk}/"""
        try:
            self._service.delete_order(pk)
        except OrderNotFound as exc:
            return Response({"detail": str(exc)}, status=status.HTTP_404_NOT_FOUND)
        return Response(status=status.HTTP_204_NO_CONTENT)

    def destroy_all(self, request: Request) -> Response:
        """DELETE /api/v1/orders/"""
        self._service.delete_all_orders()
        return Response({"message": "All orders have been deleted."})
