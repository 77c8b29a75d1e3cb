"""Customer API views.

Exposes the ``CustomerService`` via HTTP using a DRF ``GenericViewSet``.
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

from modules.customers.dtos import CreateCustomerDTO, UpdateCustomerDTO
from modules.customers.exceptions import (
    CustomerAlreadyExists,
    CustomerHasActiveOrders,
    CustomerNotFound,
)
from modules.customers.filters import CustomerFilter
from modules.customers.repositories.django_repository import CustomerDjangoRepository
from modules.customers.serializers import CustomerInputSerializer, CustomerSerializer
from modules.customers.services import CustomerService


class CustomerViewSet(GenericViewSet):
    """ViewSet for Customer CRUD operations.

    Uses ``CustomerService`` with ``CustomerDjangoRepository`` (DIP).
    Does **not** extend ``ModelViewSet``: all ORM access goes through
    the service/repository layer.
    """

    serializer_class = CustomerSerializer
    filterset_class = CustomerFilter
    filter_backends = [DjangoFilterBackend]
    pagination_class = None

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._repository = CustomerDjangoRepository()
        self._service = CustomerService(repository=self._repository)

    def get_queryset(self):
        return self._service.list_customers()

    # ------------------------------------------------------------------
    # List / Retrieve
    # ------------------------------------------------------------------

    def list(self, request: Request) -> Response:
        """GET /api/v1/customers/"""
        queryset = self.filter_queryset(self.get_queryset())
        return Response(CustomerSerializer(queryset, many=True).data)

    def retrieve(self, request: Request, pk: int) -> Response:
        """GET /api/v1/customers/{pk}/"""
        try:
            customer = self._service.get_customer(pk)
        except CustomerNotFound as exc:
            return Response({"detail": str(exc)}, status=status.HTTP_404_NOT_FOUND)
        return Response(CustomerSerializer(customer).data)

    # ------------------------------------------------------------------
    # Create / Update / Destroy
    # ------------------------------------------------------------------

    def create(self, request: Request) -> Response:
        """POST /api/v1/customers/"""
        serializer = CustomerInputSerializer(
            data=request.data, context={"repository": self._repository}
        )
        serializer.is_valid(raise_exception=True)

        try:
            customer = self._service.create_customer(
                CreateCustomerDTO(**serializer.validated_data)
            )
        except CustomerAlreadyExists as exc:
            return Response({"detail": str(exc)}, status=status.HTTP_409_CONFLICT)

        location = reverse("customer-detail", args=[customer.id], request=request)
        return Response(
            CustomerSerializer(customer).data,
            status=status.HTTP_201_CREATED,
            headers={"Location": location},
        )

    def update(self, request: Request, pk: int) -> Response:
        """PUT /api/v1/customers/{pk}/"""
        serializer = CustomerInputSerializer(
            data=request.data,
            context={"repository": self._repository, "customer_id": pk},
        )
        serializer.is_valid(raise_exception=True)

        try:
            self._service.update_customer(
                pk, UpdateCustomerDTO(**serializer.validated_data)
            )
        except CustomerNotFound as exc:
            return Response({"detail": str(exc)}, status=status.HTTP_404_NOT_FOUND)
        except CustomerAlreadyExists as exc:
            return Response({"detail": str(exc)}, status=status.HTTP_409_CONFLICT)

        return Response(status=status.HTTP_204_NO_CONTENT)

    def destroy(self, request: Request, pk: int) -> Response:
        """DELETE /api/v1/customers/{pk}/"""
        try:
            self._service.delete_customer(pk)
        except CustomerHasActiveOrders as exc:
            return Response({"detail": str(exc)}, status=status.HTTP_409_CONFLICT)
        except CustomerNotFound as exc:
            return Response({"detail": str(exc)}, status=status.HTTP_404_NOT_FOUND)
        return Response(status=status.HTTP_204_NO_CONTENT)

    def destroy_all(self, request: Request) -> Response:
        """DELETE /api/v1/customers/"""
        self._service.delete_all_customers()
        return Response({"message": "All customers have been deleted."})
