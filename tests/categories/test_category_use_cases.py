"""
Tests for the category use cases against a mocked repository.
"""
from unittest.mock import create_autospec
from uuid import uuid4

import pytest

from apps.categories.application.dtos import (
    CategoryOutput,
    CreateCategoryInput,
    DeleteCategoryInput,
    GetCategoryInput,
    ListCategoriesInput,
    ListCategoriesOutput,
    UpdateCategoryInput,
)
from apps.categories.application.handlers import build_dispatcher
from apps.categories.application.use_cases import (
    CreateCategoryUseCase,
    DeleteCategoryUseCase,
    GetCategoryUseCase,
    ListCategoriesUseCase,
    UpdateCategoryUseCase,
)
from apps.categories.domain.entities.category import Category
from apps.categories.domain.exceptions import CategoryNotFoundError, InvalidCategoryError
from apps.categories.domain.repositories import CategoryRepository
from shared.application import CancellationToken, OperationCancelledError
from shared.domain import EntityNotFoundError, SearchInput, SearchOrder, SearchOutput, ValidationError


@pytest.fixture
def repository():
    repository = create_autospec(CategoryRepository, instance=True)
    repository.save.side_effect = lambda category, cancellation_token=None: category
    return repository


@pytest.fixture
def cancelled_token():
    token = CancellationToken()
    token.cancel()
    return token


class TestGetCategory:

    def test_get_category(self, repository, category):
        repository.get.return_value = category

        output = GetCategoryUseCase(repository).execute(GetCategoryInput(id=category.id))

        repository.get.assert_called_once_with(category.id, None)
        assert output == CategoryOutput(
            id=category.id,
            name=category.name,
            description=category.description,
            is_active=category.is_active,
            created_at=category.created_at,
        )

    def test_not_found_propagates(self, repository):
        missing_id = uuid4()
        repository.get.side_effect = CategoryNotFoundError(missing_id)

        with pytest.raises(EntityNotFoundError) as exc_info:
            GetCategoryUseCase(repository).execute(GetCategoryInput(id=missing_id))

        assert exc_info.value.entity_id == str(missing_id)
        assert exc_info.value.code == "ENTITY_NOT_FOUND"

    def test_repository_failure_propagates(self, repository):
        repository.get.side_effect = RuntimeError("connection lost")

        with pytest.raises(RuntimeError, match="connection lost"):
            GetCategoryUseCase(repository).execute(GetCategoryInput(id=uuid4()))

    def test_cancelled_before_lookup(self, repository, cancelled_token):
        with pytest.raises(OperationCancelledError):
            GetCategoryUseCase(repository).execute(GetCategoryInput(id=uuid4()), cancelled_token)

        repository.get.assert_not_called()


class TestListCategories:

    def test_list_categories(self, repository):
        categories = [Category.create(f"Category {i}", f"Description {i}") for i in range(5)]
        repository.search.return_value = SearchOutput(
            current_page=2, per_page=5, total=20, items=categories,
        )
        input_dto = ListCategoriesInput(page=2, per_page=5, search="cat", sort="name", dir=SearchOrder.DESC)

        output = ListCategoriesUseCase(repository).execute(input_dto)

        repository.search.assert_called_once_with(
            SearchInput(page=2, per_page=5, search="cat", order_by="name", order=SearchOrder.DESC),
            None,
        )
        assert isinstance(output, ListCategoriesOutput)
        assert (output.current_page, output.per_page, output.total) == (2, 5, 20)
        assert [item.id for item in output.items] == [c.id for c in categories]
        assert all(isinstance(item, CategoryOutput) for item in output.items)

    def test_page_past_the_end_is_empty(self, repository):
        repository.search.return_value = SearchOutput(current_page=5, per_page=5, total=20, items=[])

        output = ListCategoriesUseCase(repository).execute(ListCategoriesInput(page=5, per_page=5))

        assert output.items == []
        assert output.total == 20

    def test_dir_accepts_plain_strings(self, repository):
        repository.search.return_value = SearchOutput(current_page=1, per_page=15, total=0)

        ListCategoriesUseCase(repository).execute(ListCategoriesInput(dir='desc'))

        search_input = repository.search.call_args.args[0]
        assert search_input.order is SearchOrder.DESC

    @pytest.mark.parametrize('direction', [None, ''])
    def test_missing_dir_sorts_ascending(self, repository, direction):
        repository.search.return_value = SearchOutput(current_page=1, per_page=15, total=0)

        ListCategoriesUseCase(repository).execute(ListCategoriesInput(dir=direction))

        search_input = repository.search.call_args.args[0]
        assert search_input.order is SearchOrder.ASC

    def test_invalid_dir_is_a_validation_error(self, repository):
        with pytest.raises(ValidationError) as exc_info:
            ListCategoriesUseCase(repository).execute(ListCategoriesInput(dir='sideways'))

        assert exc_info.value.field == 'dir'
        repository.search.assert_not_called()

    def test_cancelled_after_search_returns_no_partial_result(self, repository):
        token = CancellationToken()

        def search(search_input, cancellation_token=None):
            token.cancel()
            return SearchOutput(current_page=1, per_page=15, total=1, items=[Category.create("Movies", "")])

        repository.search.side_effect = search

        with pytest.raises(OperationCancelledError):
            ListCategoriesUseCase(repository).execute(ListCategoriesInput(), token)


class TestCreateCategory:

    def test_create_category(self, repository):
        output = CreateCategoryUseCase(repository).execute(
            CreateCategoryInput(name="Movies", description="Movie category", is_active=False)
        )

        saved = repository.save.call_args.args[0]
        assert isinstance(saved, Category)
        assert output.id == saved.id
        assert output.name == "Movies"
        assert output.description == "Movie category"
        assert output.is_active is False

    def test_invalid_input_is_not_saved(self, repository):
        with pytest.raises(InvalidCategoryError, match="Name should be at least 3 characters long."):
            CreateCategoryUseCase(repository).execute(CreateCategoryInput(name="ab"))

        repository.save.assert_not_called()


class TestUpdateCategory:

    def test_update_name_and_description(self, repository, category):
        repository.get.return_value = category

        output = UpdateCategoryUseCase(repository).execute(
            UpdateCategoryInput(id=category.id, name="Series", description="Series category")
        )

        repository.save.assert_called_once_with(category, None)
        assert output.name == "Series"
        assert output.description == "Series category"

    def test_update_only_name(self, repository, category):
        repository.get.return_value = category
        description = category.description

        output = UpdateCategoryUseCase(repository).execute(UpdateCategoryInput(id=category.id, name="Series"))

        assert output.description == description

    @pytest.mark.parametrize('is_active', [True, False])
    def test_update_activation(self, repository, valid_category_data, is_active):
        category = Category.create(**valid_category_data, is_active=not is_active)
        repository.get.return_value = category

        output = UpdateCategoryUseCase(repository).execute(
            UpdateCategoryInput(id=category.id, name="Series", is_active=is_active)
        )

        assert output.is_active is is_active

    def test_invalid_update_is_not_saved(self, repository, category):
        repository.get.return_value = category

        with pytest.raises(InvalidCategoryError):
            UpdateCategoryUseCase(repository).execute(UpdateCategoryInput(id=category.id, name=""))

        repository.save.assert_not_called()


class TestDeleteCategory:

    def test_delete_category(self, repository, category):
        repository.get.return_value = category

        assert DeleteCategoryUseCase(repository).execute(DeleteCategoryInput(id=category.id)) is None

        repository.delete.assert_called_once_with(category.id, None)

    def test_delete_missing_category(self, repository):
        missing_id = uuid4()
        repository.get.side_effect = CategoryNotFoundError(missing_id)

        with pytest.raises(CategoryNotFoundError):
            DeleteCategoryUseCase(repository).execute(DeleteCategoryInput(id=missing_id))

        repository.delete.assert_not_called()


def test_dispatcher_routes_inputs_to_use_cases(repository, category):
    repository.get.return_value = category
    dispatcher = build_dispatcher(repository)

    output = dispatcher.dispatch(GetCategoryInput(id=category.id))

    assert output.id == category.id
