"""Customer API views.

Exposes the ``CustomerService`` via HTTP using a DRF ViewSet.
Request bodies are parsed into Pydantic DTOs (malformed → 422) and run
through the validator (invalid → 400) before the service is called.
Domain exceptions are caught and translated into HTTP status codes; the
view never swallows generic exceptions, which reach the project exception
handler as 500s.
"""

from __future__ import annotations

import re
from typing import Any, Type, TypeVar

from drf_spectacular.utils import OpenApiResponse, extend_schema, inline_serializer
from pydantic import ValidationError as PydanticValidationError
from rest_framework import serializers, status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.viewsets import GenericViewSet

from modules.core.exceptions import ValidationError
from modules.core.responses import error_response, no_content_response, success_response
from modules.customers.dtos import CreateCustomerDTO, CustomerRequestDTO, UpdateCustomerDTO
from modules.customers.exceptions import CustomerNotFound, CustomerNumberAlreadyExists
from modules.customers.models import Customer
from modules.customers.repositories.django_repository import CustomerDjangoRepository
from modules.customers.serializers import CustomerSerializer
from modules.customers.services import CustomerService
from modules.customers.validators import validate_customer_request

DTO = TypeVar("DTO", bound=CustomerRequestDTO)

_ID_PATTERN = re.compile(r"[0-9]+")
_MAX_ID = 2**63 - 1

ErrorSerializer = inline_serializer(
    name="ErrorResponse", fields={"message": serializers.CharField()}
)


def parse_customer_id(raw: str | None) -> int:
    """Parse a path ``{id}`` into a positive integer.

    Raises:
        ValidationError: if ``raw`` is not a base-10 unsigned integer or is 0.
    """
    if raw is None or not _ID_PATTERN.fullmatch(raw) or int(raw) > _MAX_ID:
        raise ValidationError("invalid ID provided", field="id")
    customer_id = int(raw)
    if customer_id == 0:
        raise ValidationError(
            "invalid id provided: id must be a positive non-zero number", field="id"
        )
    return customer_id


def _format_pydantic_error(exc: PydanticValidationError) -> str:
    first = exc.errors()[0]
    location = ".".join(str(part) for part in first["loc"])
    if not location:
        return f"invalid request body: {first['msg']}"
    return f"invalid request body: {location}: {first['msg']}"


class CustomerViewSet(GenericViewSet):
    """ViewSet for Customer CRUD operations.

    Uses ``CustomerService`` with ``CustomerDjangoRepository`` (DIP).
    Does **not** extend ``ModelViewSet``: all ORM access goes through
    the service/repository layer.  ``queryset`` is only read by the
    OpenAPI generator.
    """

    queryset = Customer.objects.alive()
    serializer_class = CustomerSerializer
    lookup_value_regex = "[^/]+"

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = CustomerService(repository=CustomerDjangoRepository())

    # ------------------------------------------------------------------
    # Request parsing
    # ------------------------------------------------------------------

    def _parse_body(self, request: Request, dto_class: Type[DTO]) -> DTO | Response:
        """Build a DTO from the JSON body, or a 422 response if malformed.

        ``request.data`` raises ``ParseError`` on invalid JSON; the project
        exception handler renders that as 422 too.  An absent body leaves
        ``request.stream`` unset and parses to ``{}``, so it is checked here.
        """
        data: Any = request.data
        if request.stream is None:
            return error_response(
                "invalid request body: body is empty",
                status.HTTP_422_UNPROCESSABLE_ENTITY,
            )
        if not isinstance(data, dict):
            return error_response(
                "invalid request body: expected a JSON object",
                status.HTTP_422_UNPROCESSABLE_ENTITY,
            )
        try:
            return dto_class.model_validate(data)
        except PydanticValidationError as exc:
            return error_response(
                _format_pydantic_error(exc), status.HTTP_422_UNPROCESSABLE_ENTITY
            )

    # ------------------------------------------------------------------
    # List / Retrieve
    # ------------------------------------------------------------------

    @extend_schema(responses={200: CustomerSerializer(many=True)})
    def list(self, request: Request) -> Response:
        """GET /api/v1/customers"""
        customers = self._service.list_customers()
        return success_response(CustomerSerializer(customers, many=True).data)

    @extend_schema(
        responses={
            200: CustomerSerializer,
            400: OpenApiResponse(ErrorSerializer, description="Bad Request"),
            404: OpenApiResponse(ErrorSerializer, description="Not Found"),
        }
    )
    def retrieve(self, request: Request, pk: str | None = None) -> Response:
        """GET /api/v1/customers/{pk}"""
        try:
            customer = self._service.get_customer(parse_customer_id(pk))
        except ValidationError as exc:
            return error_response(exc.message, status.HTTP_400_BAD_REQUEST)
        except CustomerNotFound as exc:
            return error_response(exc.message, status.HTTP_404_NOT_FOUND)
        return success_response(CustomerSerializer(customer).data)

    # ------------------------------------------------------------------
    # Create / Update / Destroy
    # ------------------------------------------------------------------

    @extend_schema(
        request=CreateCustomerDTO,
        responses={
            201: CustomerSerializer,
            400: OpenApiResponse(ErrorSerializer, description="Bad Request"),
            409: OpenApiResponse(ErrorSerializer, description="Conflict"),
            422: OpenApiResponse(ErrorSerializer, description="Unprocessable Entity"),
        },
    )
    def create(self, request: Request) -> Response:
        """POST /api/v1/customers"""
        dto = self._parse_body(request, CreateCustomerDTO)
        if isinstance(dto, Response):
            return dto

        try:
            validate_customer_request(dto)
        except ValidationError as exc:
            return error_response(exc.message, status.HTTP_400_BAD_REQUEST)

        try:
            customer = self._service.create_customer(dto)
        except CustomerNumberAlreadyExists as exc:
            return error_response(exc.message, status.HTTP_409_CONFLICT)

        return success_response(
            CustomerSerializer(customer).data, status.HTTP_201_CREATED
        )

    @extend_schema(
        request=UpdateCustomerDTO,
        responses={
            200: CustomerSerializer,
            400: OpenApiResponse(ErrorSerializer, description="Bad Request"),
            404: OpenApiResponse(ErrorSerializer, description="Not Found"),
            409: OpenApiResponse(ErrorSerializer, description="Conflict"),
            422: OpenApiResponse(ErrorSerializer, description="Unprocessable Entity"),
        },
    )
    def update(self, request: Request, pk: str | None = None) -> Response:
        """PUT /api/v1/customers/{pk}"""
        try:
            customer_id = parse_customer_id(pk)
        except ValidationError as exc:
            return error_response(exc.message, status.HTTP_400_BAD_REQUEST)

        dto = self._parse_body(request, UpdateCustomerDTO)
        if isinstance(dto, Response):
            return dto

        try:
            validate_customer_request(dto)
        except ValidationError as exc:
            return error_response(exc.message, status.HTTP_400_BAD_REQUEST)

        try:
            customer = self._service.update_customer(customer_id, dto)
        except CustomerNotFound as exc:
            return error_response(exc.message, status.HTTP_404_NOT_FOUND)
        except CustomerNumberAlreadyExists as exc:
            return error_response(exc.message, status.HTTP_409_CONFLICT)

        return success_response(CustomerSerializer(customer).data)

    @extend_schema(
        responses={
            204: None,
            400: OpenApiResponse(ErrorSerializer, description="Bad Request"),
            404: OpenApiResponse(ErrorSerializer, description="Not Found"),
        }
    )
    def destroy(self, request: Request, pk: str | None = None) -> Response:
        """DELETE /api/v1/customers/{pk}"""
        try:
            self._service.delete_customer(parse_customer_id(pk))
        except ValidationError as exc:
            return error_response(exc.message, status.HTTP_400_BAD_REQUEST)
        except CustomerNotFound as exc:
            return error_response(exc.message, status.HTTP_404_NOT_FOUND)
        return no_content_response()
