"""
Tests for the categories HTTP API.
"""
from uuid import uuid4

import pytest

pytestmark = pytest.mark.django_db

LIST_URL = '/api/v1/categories/'


def detail_url(category_id):
    return f'{LIST_URL}{category_id}/'


class TestCategoryList:

    def test_paginated_list(self, api_client, stored_categories):
        response = api_client.get(LIST_URL, {'page': 2, 'per_page': 5})

        assert response.status_code == 200
        assert response.data['current_page'] == 2
        assert response.data['per_page'] == 5
        assert response.data['total'] == 20
        assert len(response.data['items']) == 5

    def test_page_past_the_end(self, api_client, stored_categories):
        response = api_client.get(LIST_URL, {'page': 5, 'per_page': 5})

        assert response.status_code == 200
        assert response.data['items'] == []
        assert response.data['total'] == 20

    def test_default_page_size(self, api_client, stored_categories):
        response = api_client.get(LIST_URL)

        assert response.data['per_page'] == 15
        assert len(response.data['items']) == 15

    def test_search_and_sort(self, api_client, stored_categories):
        response = api_client.get(LIST_URL, {'search': 'Category 0', 'sort': 'name', 'dir': 'desc'})

        names = [item['name'] for item in response.data['items']]
        assert names == [f"Category {i:02d}" for i in range(9, 0, -1)]

    @pytest.mark.parametrize('params', [{'page': 0}, {'per_page': 101}, {'dir': 'sideways'}])
    def test_invalid_query(self, api_client, params):
        response = api_client.get(LIST_URL, params)

        assert response.status_code == 400


class TestCategoryCreate:

    def test_create(self, api_client):
        response = api_client.post(LIST_URL, {'name': 'Movies', 'description': 'Movie category'}, format='json')

        assert response.status_code == 201
        assert response.data['name'] == 'Movies'
        assert response.data['is_active'] is True
        assert api_client.get(detail_url(response.data['id'])).status_code == 200

    @pytest.mark.parametrize('name, message', [
        ('   ', "Name should not be empty or null."),
        ('ab', "Name should be at least 3 characters long."),
        ('a' * 256, "Name should be less or equal 255 characters long."),
        ('a' * 257, "Name should be less or equal 255 characters long."),
        ('a' * 1_000, "Name should be less or equal 255 characters long."),
    ])
    def test_create_invalid_name(self, api_client, name, message):
        response = api_client.post(LIST_URL, {'name': name}, format='json')

        assert response.status_code == 400
        assert response.data == {'error': message, 'code': 'VALIDATION_ERROR', 'field': 'name'}

    def test_create_description_too_long(self, api_client):
        response = api_client.post(LIST_URL, {'name': 'Movies', 'description': 'a' * 10_002}, format='json')

        assert response.status_code == 400
        assert response.data == {
            'error': "Description should be less or equal 10.000 characters long.",
            'code': 'VALIDATION_ERROR',
            'field': 'description',
        }


class TestCategoryDetail:

    def test_get(self, api_client, category_repository, category):
        category_repository.save(category)

        response = api_client.get(detail_url(category.id))

        assert response.status_code == 200
        assert response.data['id'] == str(category.id)
        assert response.data['description'] == category.description

    def test_get_missing(self, api_client):
        missing_id = uuid4()

        response = api_client.get(detail_url(missing_id))

        assert response.status_code == 404
        assert response.data['code'] == 'ENTITY_NOT_FOUND'
        assert response.data['entity'] == 'Category'
        assert response.data['entity_id'] == str(missing_id)

    def test_update(self, api_client, category_repository, category):
        category_repository.save(category)

        response = api_client.put(detail_url(category.id), {'name': 'Series', 'is_active': False}, format='json')

        assert response.status_code == 200
        assert response.data['name'] == 'Series'
        assert response.data['description'] == category.description
        assert response.data['is_active'] is False

    @pytest.mark.parametrize('length', [10_001, 10_002])
    def test_update_invalid_description(self, api_client, category_repository, category, length):
        category_repository.save(category)

        response = api_client.put(
            detail_url(category.id), {'name': 'Series', 'description': 'a' * length}, format='json'
        )

        assert response.status_code == 400
        assert response.data['error'] == "Description should be less or equal 10.000 characters long."
        assert category_repository.get(category.id).name == category.name

    def test_delete(self, api_client, category_repository, category):
        category_repository.save(category)

        response = api_client.delete(detail_url(category.id))

        assert response.status_code == 204
        assert api_client.get(detail_url(category.id)).status_code == 404

    def test_delete_missing(self, api_client):
        assert api_client.delete(detail_url(uuid4())).status_code == 404


def test_health(api_client):
    assert api_client.get('/health/').data == {'status': 'healthy'}
    assert api_client.get('/health/ready/').status_code == 200
