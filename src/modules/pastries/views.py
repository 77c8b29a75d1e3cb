"""Pastry API views.

Exposes the ``PastryService`` via HTTP using a DRF ``GenericViewSet``.
The list endpoint is served from the catalogue cache; single reads and
writes go straight to the service.
"""

from __future__ import annotations

from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.reverse import reverse
from rest_framework.viewsets import GenericViewSet

from modules.pastries.dtos import CreatePastryDTO, UpdatePastryDTO
from modules.pastries.exceptions import (
    PastryAlreadyExists,
    PastryInUse,
    PastryNotFound,
)
from modules.pastries.repositories.django_repository import PastryDjangoRepository
from modules.pastries.serializers import PastryInputSerializer, PastrySerializer
from modules.pastries.services import PastryService


class PastryViewSet(GenericViewSet):
    """ViewSet for Pastry CRUD operations.

    Uses ``PastryService`` with ``PastryDjangoRepository`` (DIP).
    """

    serializer_class = PastrySerializer
    pagination_class = None

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._repository = PastryDjangoRepository()
        self._service = PastryService(repository=self._repository)

    def get_queryset(self):
        return self._repository.list()

    # ------------------------------------------------------------------
    # List / Retrieve
    # ------------------------------------------------------------------

    def list(self, request: Request) -> Response:
        """GET /api/v1/pastries/"""
        pastries = self._service.list_pastries()
        return Response(PastrySerializer(pastries, many=True).data)

    def retrieve(self, request: Request, pk: int) -> Response:
        """GET /api/v1/pastries/{pk}/"""
        try:
            pastry = self._service.get_pastry(pk)
        except PastryNotFound as exc:
            return Response({"detail": str(exc)}, status=status.HTTP_404_NOT_FOUND)
        return Response(PastrySerializer(pastry).data)

    # ------------------------------------------------------------------
    # Create / Update / Destroy
    # ------------------------------------------------------------------

    def create(self, request: Request) -> Response:
        """POST /api/v1/pastries/"""
        serializer = PastryInputSerializer(
            data=request.data, context={"repository": self._repository}
        )
        serializer.is_valid(raise_exception=True)

        try:
            pastry = self._service.create_pastry(
                CreatePastryDTO(**serializer.validated_data)
            )
        except PastryAlreadyExists as exc:
            return Response({"detail": str(exc)}, status=status.HTTP_409_CONFLICT)

        location = reverse("pastry-detail", args=[pastry.id], request=request)
        return Response(
            PastrySerializer(pastry).data,
            status=status.HTTP_201_CREATED,
            headers={"Location": location},
        )

    def update(self, request: Request, pk: int) -> Response:
        """PUT /api/v1/pastries/{pk}/"""
        serializer = PastryInputSerializer(
            data=request.data,
            context={"repository": self._repository, "pastry_id": pk},
        )
        serializer.is_valid(raise_exception=True)

        try:
            self._service.update_pastry(
                pk, UpdatePastryDTO(**serializer.validated_data)
            )
        except PastryNotFound as exc:
            return Response({"detail": str(exc)}, status=status.HTTP_404_NOT_FOUND)
        except PastryAlreadyExists as exc:
            return Response({"detail": str(exc)}, status=status.HTTP_409_CONFLICT)

        return Response(status=status.HTTP_204_NO_CONTENT)

    def destroy(self, request: Request, pk: int) -> Response:
        """DELETE /api/v1/pastries/{pk}/"""
        try:
            self._service.delete_pastry(pk)
        except PastryNotFound as exc:
            return Response({"detail": str(exc)}, status=status.HTTP_404_NOT_FOUND)
        except PastryInUse as exc:
            return Response({"detail": str(exc)}, status=status.HTTP_409_CONFLICT)
        return Response(status=status.HTTP_204_NO_CONTENT)

    def destroy_all(self, request: Request) -> Response:
        """DELETE /api/v1/pastries/"""
        try:
            self._service.delete_all_pastries()
        except PastryInUse as exc:
            return Response({"detail": str(exc)}, status=status.HTTP_409_CONFLICT)
        return Response({"message": "All pastries have been deleted."})
