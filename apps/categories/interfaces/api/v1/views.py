"""
Categories API v1 views.
"""
from uuid import UUID

from drf_spectacular.utils import extend_schema, OpenApiParameter
from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from shared.interfaces.pagination import SearchQuerySerializer, paginated_payload
from ....application.dtos.category_dto import (
    CreateCategoryInput,
    DeleteCategoryInput,
    GetCategoryInput,
    ListCategoriesInput,
    UpdateCategoryInput,
)
from ....application.handlers import build_dispatcher
from ....infrastructure.repositories import DjangoCategoryRepository
from ...serializers.category_serializer import (
    CategorySerializer,
    CategoryListSerializer,
    CategoryCreateSerializer,
    CategoryUpdateSerializer,
)


class CategoryAPIView(APIView):
    """Base view routing category inputs to their use cases."""
    permission_classes = [AllowAny]

    def dispatch_input(self, input_dto):
        return build_dispatcher(DjangoCategoryRepository()).dispatch(input_dto)


@extend_schema(tags=['Categories'])
class CategoryListCreateView(CategoryAPIView):
    """Category list and create endpoint."""

    @extend_schema(
        parameters=[
            OpenApiParameter(name='page', type=int, required=False),
            OpenApiParameter(name='per_page', type=int, required=False),
            OpenApiParameter(name='search', type=str, required=False, description="Name contains"),
            OpenApiParameter(name='sort', type=str, required=False, description="name, id or createdAt"),
            OpenApiParameter(name='dir', type=str, required=False, enum=['asc', 'desc']),
        ],
        responses={200: CategoryListSerializer},
        summary="List categories",
    )
    def get(self, request):
        query = SearchQuerySerializer(data=request.query_params)
        query.is_valid(raise_exception=True)

        output = self.dispatch_input(ListCategoriesInput(**query.validated_data))
        return Response(paginated_payload(output, CategorySerializer))

    @extend_schema(
        request=CategoryCreateSerializer,
        responses={201: CategorySerializer},
        summary="Create a category",
    )
    def post(self, request):
        serializer = CategoryCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        output = self.dispatch_input(CreateCategoryInput(**serializer.validated_data))
        return Response(CategorySerializer(output).data, status=status.HTTP_201_CREATED)


@extend_schema(tags=['Categories'])
class CategoryDetailView(CategoryAPIView):
    """Category detail endpoint."""

    @extend_schema(
        responses={200: CategorySerializer},
        summary="Get category detail",
    )
    def get(self, request, category_id: UUID):
        output = self.dispatch_input(GetCategoryInput(id=category_id))
        return Response(CategorySerializer(output).data)

    @extend_schema(
        request=CategoryUpdateSerializer,
        responses={200: CategorySerializer},
        summary="Update a category",
    )
    def put(self, request, category_id: UUID):
        serializer = CategoryUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        output = self.dispatch_input(UpdateCategoryInput(id=category_id, **serializer.validated_data))
        return Response(CategorySerializer(output).data)

    @extend_schema(summary="Delete a category")
    def delete(self, request, category_id: UUID):
        self.dispatch_input(DeleteCategoryInput(id=category_id))
        return Response(status=status.HTTP_204_NO_CONTENT)
