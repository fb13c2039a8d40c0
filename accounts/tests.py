"""
Tests for accounts - sign-in, sign-up and the current-user endpoint.
"""
import pytest
from django.contrib.auth import get_user_model
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken

from accounts.serializers import split_name

LOGIN_URL = '/api/v1/auth/login/'
REGISTER_URL = '/api/v1/auth/register/'


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def user_model():
    return get_user_model()


@pytest.fixture
def create_user(user_model):
    def _create_user(email="owner@example.com", password="testpass123", role="homeowner", **extra):
        return user_model.objects.create_user(
            email=email, username=email, password=password, role=role, **extra
        )
    return _create_user


@pytest.fixture
def authenticated_client(api_client, create_user):
    user = create_user()
    token = RefreshToken.for_user(user).access_token
    api_client.credentials(HTTP_AUTHORIZATION=f'Bearer {token}')
    return api_client, user


def test_split_name():
    assert split_name('New User') == ('New', 'User')
    assert split_name('  Ada  Lovelace King ') == ('Ada', 'Lovelace King')
    assert split_name('') == ('', '')
    assert split_name(None) == ('', '')


@pytest.mark.django_db
class TestLogin:

    def test_returns_token_pair_and_user(self, api_client, create_user):
        user = create_user(role='provider', business_name='Acme Plumbing')
        response = api_client.post(LOGIN_URL, {'email': user.email, 'password': 'testpass123'}, format='json')
        assert response.status_code == 200
        assert response.data['message'] == 'Login successful'
        assert response.data['token'] and response.data['refresh_token']
        assert response.data['user']['role'] == 'provider'
        assert response.data['user']['business_name'] == 'Acme Plumbing'

    def test_wrong_password(self, api_client, create_user, caplog):
        create_user()
        with caplog.at_level('WARNING', logger='accounts.auth'):
            response = api_client.post(LOGIN_URL, {
                'email': 'owner@example.com', 'password': 'wrongpassword',
            }, format='json')
        assert response.status_code == 400
        assert 'Rejected login attempt' in caplog.text

    def test_password_required(self, api_client):
        response = api_client.post(LOGIN_URL, {'email': 'owner@example.com'}, format='json')
        assert response.status_code == 400
        assert 'password' in response.data

    def test_token_authenticates_me(self, api_client, create_user):
        create_user()
        login = api_client.post(LOGIN_URL, {'email': 'owner@example.com', 'password': 'testpass123'}, format='json')
        api_client.credentials(HTTP_AUTHORIZATION=f"Bearer {login.data['token']}")
        response = api_client.get('/api/v1/auth/me/')
        assert response.status_code == 200
        assert response.data['user']['email'] == 'owner@example.com'


@pytest.mark.django_db
class TestRegister:

    def test_homeowner_by_default(self, api_client, user_model):
        response = api_client.post(REGISTER_URL, {
            'email': 'newuser@example.com', 'password': 'securepass123', 'name': 'New User',
        }, format='json')
        assert response.status_code == 201
        assert response.data['message'] == 'Registration successful'
        assert 'token' in response.data
        user = user_model.objects.get(email='newuser@example.com')
        assert (user.first_name, user.last_name, user.role) == ('New', 'User', 'homeowner')

    def test_provider_requires_business_name(self, api_client):
        response = api_client.post(REGISTER_URL, {
            'email': 'pro@example.com', 'password': 'securepass123', 'role': 'provider',
        }, format='json')
        assert response.status_code == 400
        assert 'business_name' in response.data

    def test_provider(self, api_client, user_model):
        response = api_client.post(REGISTER_URL, {
            'email': 'pro@example.com',
            'password': 'securepass123',
            'role': 'provider',
            'business_name': '  Acme Plumbing ',
        }, format='json')
        assert response.status_code == 201
        assert user_model.objects.get(email='pro@example.com').display_name == 'Acme Plumbing'

    def test_duplicate_email(self, api_client, create_user):
        create_user(email='taken@example.com')
        response = api_client.post(REGISTER_URL, {
            'email': 'taken@example.com', 'password': 'securepass123',
        }, format='json')
        assert response.status_code == 400
        assert 'email' in response.data

    @pytest.mark.parametrize('password', ['short1', 'lettersonly', '12345678'])
    def test_weak_password(self, api_client, password):
        response = api_client.post(REGISTER_URL, {
            'email': 'new@example.com', 'password': password,
        }, format='json')
        assert response.status_code == 400
        assert 'password' in response.data

    def test_invalid_phone(self, api_client):
        response = api_client.post(REGISTER_URL, {
            'email': 'new@example.com', 'password': 'securepass123', 'phone': '12345',
        }, format='json')
        assert response.status_code == 400
        assert 'phone' in response.data

    def test_admin_role_not_self_service(self, api_client):
        response = api_client.post(REGISTER_URL, {
            'email': 'new@example.com', 'password': 'securepass123', 'role': 'admin',
        }, format='json')
        assert response.status_code == 400
        assert 'role' in response.data


@pytest.mark.django_db
class TestMe:

    def test_returns_signed_in_user(self, authenticated_client):
        client, user = authenticated_client
        response = client.get('/api/v1/auth/me/')
        assert response.status_code == 200
        assert response.data['user']['id'] == user.id

    def test_requires_token(self, api_client):
        assert api_client.get('/api/v1/auth/me/').status_code == 401


@pytest.mark.django_db
def test_health_check(api_client):
    response = api_client.get('/api/v1/health/')
    assert response.status_code == 200
    assert response.json()['status'] == 'ok'


@pytest.mark.django_db
def test_unknown_api_path_answers_json(api_client):
    response = api_client.get('/api/v1/nothing-here/')
    assert response.status_code == 404
    assert response.json()['error']['code'] == 'NOT_FOUND'


@pytest.mark.django_db
def test_api_path_without_slash_is_not_redirected(api_client):
    response = api_client.post('/api/v1/auth/login', {'email': 'a@example.com'}, format='json')
    assert response.status_code == 404
