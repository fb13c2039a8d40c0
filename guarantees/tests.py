"""
Tests for guarantees app - claims list state, cards and endpoints.
"""
from datetime import datetime, timezone as dt_timezone
from decimal import Decimal

import pytest
from django.contrib.auth import get_user_model
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken

from guarantees.claims_list import STATUS_BADGES, ClaimsList, claim_card, status_badge
from guarantees.models import ClaimStatus, GuaranteeClaim


class FailingClaimStore:
    def claims_for(self, user, role):
        raise ConnectionError('backend unreachable')

    def create_claim(self, **kwargs):
        raise ConnectionError('backend unreachable')


class StaticClaimStore:
    """Serves whatever claims the test put in ``claims``."""
    claims = []

    def claims_for(self, user, role):
        self.last_query = (user, role)
        return list(self.claims)


class _User:
    def __init__(self, id=1, is_authenticated=True, first_name='Jane', last_name='Doe', business_name=''):
        self.id = id
        self.is_authenticated = is_authenticated
        self.first_name = first_name
        self.last_name = last_name
        self.business_name = business_name


def _claim(**overrides):
    claim = GuaranteeClaim(
        id=7,
        status='pending',
        claim_amount=Decimal('1250.5'),
        claim_reason='Leaking pipe after repair',
        created_at=datetime(2025, 3, 4, 15, 30, tzinfo=dt_timezone.utc),
    )
    for name, value in overrides.items():
        setattr(claim, name, value)
    return claim


class TestStatusBadge:

    def test_every_status_has_a_badge(self):
        assert {status.value for status in STATUS_BADGES} == set(ClaimStatus.values)

    def test_known_statuses(self):
        assert status_badge('pending').to_dict() == {'label': 'Pending', 'tone': 'yellow'}
        assert status_badge('approved').tone == 'green'
        assert status_badge('rejected').tone == 'red'
        assert status_badge('resolved').tone == 'blue'

    def test_unknown_status_falls_back_to_gray_raw_label(self):
        assert status_badge('escalated').to_dict() == {'label': 'escalated', 'tone': 'gray'}


class TestClaimCard:

    def test_card_fields(self):
        card = claim_card(_claim())
        assert card['project_title'] == 'Unnamed Project'
        assert card['submitted_on'] == 'Submitted on Mar 4, 2025'
        assert card['amount'] == '$1,250.50'
        assert card['reason'] == 'Leaking pipe after repair'
        assert card['resolution'] is None

    def test_homeowner_sees_provider_or_placeholder(self):
        assert claim_card(_claim())['counterpart'] == {
            'label': 'Provider', 'id': None, 'name': 'Unknown Provider',
        }

    def test_provider_sees_homeowner_name(self):
        claim = _claim()
        claim.homeowner = get_user_model()(id=3, first_name='Jane', last_name='Doe')
        assert claim_card(claim, 'provider')['counterpart']['name'] == 'Jane Doe'

    def test_resolution_details(self):
        claim = _claim(
            status='resolved',
            resolution_notes='Refunded half',
            resolution_date=datetime(2025, 4, 1, tzinfo=dt_timezone.utc),
        )
        assert claim_card(claim)['resolution'] == {
            'notes': 'Refunded half', 'resolved_on': 'Resolved on Apr 1, 2025',
        }

    def test_resolution_date_without_notes_is_hidden(self):
        claim = _claim(resolution_date=datetime(2025, 4, 1, tzinfo=dt_timezone.utc))
        assert claim_card(claim)['resolution'] is None


class TestClaimsListState:

    def test_starts_loading(self):
        assert ClaimsList().to_dict() == {'state': 'loading', 'role': 'homeowner', 'placeholders': 3}

    def test_unauthenticated(self):
        data = ClaimsList().load(_User(is_authenticated=False), StaticClaimStore()).to_dict()
        assert data['state'] == 'unauthenticated'
        assert data['title'] == 'Authentication Required'
        assert data['message'] == 'Please log in to view your guarantee claims.'

    def test_store_failure_shows_generic_banner(self):
        data = ClaimsList().load(_User(), FailingClaimStore()).to_dict()
        assert data['state'] == 'error'
        assert data['message'] == 'Failed to load guarantee claims'
        assert 'unreachable' not in str(data)

    def test_empty_message_differs_by_role(self):
        store = StaticClaimStore()
        homeowner = ClaimsList(role='homeowner').load(_User(), store).to_dict()
        provider = ClaimsList(role='provider').load(_User(), store).to_dict()
        assert homeowner['state'] == provider['state'] == 'empty'
        assert homeowner['message'] == "You haven't submitted any guarantee claims yet."
        assert provider['message'] == "You don't have any guarantee claims against your services."

    def test_populated(self):
        store = StaticClaimStore()
        store.claims = [_claim()]
        user = _User()
        data = ClaimsList(role='provider').load(user, store).to_dict()
        assert store.last_query == (user, 'provider')
        assert data['state'] == 'populated'
        assert data['subtitle'] == 'Claims submitted against your services under our satisfaction guarantee.'
        assert len(data['claims']) == 1

    def test_reload_clears_previous_error(self):
        listing = ClaimsList()
        listing.load(_User(), FailingClaimStore())
        listing.load(_User(), StaticClaimStore())
        assert listing.state == 'empty'
        assert listing.error == ''


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def create_user():
    def _create_user(email="owner@example.com", role="homeowner", **extra):
        return get_user_model().objects.create_user(
            email=email, username=email, password="testpass123", role=role, **extra
        )
    return _create_user


@pytest.fixture
def authenticated_client(api_client, create_user):
    user = create_user(first_name='Jane', last_name='Doe')
    refresh = RefreshToken.for_user(user)
    api_client.credentials(HTTP_AUTHORIZATION=f'Bearer {str(refresh.access_token)}')
    return api_client, user


@pytest.fixture
def provider(create_user):
    return create_user(email='pro@example.com', role='provider', business_name='Acme Plumbing')


@pytest.fixture
def project(authenticated_client, provider):
    from projects.models import Project
    _, user = authenticated_client
    return Project.objects.create(homeowner=user, provider=provider, title='Bathroom remodel')


@pytest.mark.django_db
class TestClaimsEndpoint:

    def test_unauthenticated_list(self, api_client):
        response = api_client.get('/api/v1/guarantees/claims/')
        assert response.status_code == 401
        assert response.data['state'] == 'unauthenticated'

    def test_empty_list(self, authenticated_client):
        client, _ = authenticated_client
        response = client.get('/api/v1/guarantees/claims/')
        assert response.status_code == 200
        assert response.data['state'] == 'empty'
        assert response.data['message'] == "You haven't submitted any guarantee claims yet."

    def test_lists_own_claims_newest_first(self, authenticated_client, provider, project, create_user):
        client, user = authenticated_client
        first = GuaranteeClaim.objects.create(
            homeowner=user, provider=provider, project=project,
            claim_amount=Decimal('100'), claim_reason='First',
        )
        second = GuaranteeClaim.objects.create(
            homeowner=user, provider=provider, project=project,
            claim_amount=Decimal('200'), claim_reason='Second', status='approved',
        )
        GuaranteeClaim.objects.create(
            homeowner=create_user(email='other@example.com'), provider=provider,
            claim_amount=Decimal('300'), claim_reason='Not mine',
        )
        GuaranteeClaim.objects.filter(id=first.id).update(created_at=datetime(2025, 1, 1, tzinfo=dt_timezone.utc))
        GuaranteeClaim.objects.filter(id=second.id).update(created_at=datetime(2025, 2, 1, tzinfo=dt_timezone.utc))

        response = client.get('/api/v1/guarantees/claims/')
        assert response.status_code == 200
        assert response.data['state'] == 'populated'
        cards = response.data['claims']
        assert [card['reason'] for card in cards] == ['Second', 'First']
        assert cards[0]['project_title'] == 'Bathroom remodel'
        assert cards[0]['counterpart']['name'] == 'Acme Plumbing'
        assert cards[0]['badge'] == {'label': 'Approved', 'tone': 'green'}
        assert cards[1]['submitted_on'] == 'Submitted on Jan 1, 2025'

    def test_provider_role_lists_claims_against_provider(self, api_client, authenticated_client, provider, project):
        _, user = authenticated_client
        GuaranteeClaim.objects.create(
            homeowner=user, provider=provider, project=project,
            claim_amount=Decimal('80'), claim_reason='Scratched floor',
        )
        api_client.credentials()
        api_client.force_authenticate(user=provider)
        response = api_client.get('/api/v1/guarantees/claims/')
        assert response.data['role'] == 'provider'
        assert response.data['claims'][0]['counterpart'] == {'label': 'Homeowner', 'id': user.id, 'name': 'Jane Doe'}

    def test_unknown_role_rejected(self, authenticated_client):
        client, _ = authenticated_client
        response = client.get('/api/v1/guarantees/claims/?role=landlord')
        assert response.status_code == 400
        assert response.data['error']['code'] == 'INVALID_ROLE'

    def test_admin_role_requires_admin(self, authenticated_client):
        client, _ = authenticated_client
        response = client.get('/api/v1/guarantees/claims/?role=admin')
        assert response.status_code == 403

    def test_store_failure_returns_banner(self, authenticated_client, settings):
        settings.HOMESWERV_CLAIM_STORE = 'guarantees.tests.FailingClaimStore'
        client, _ = authenticated_client
        response = client.get('/api/v1/guarantees/claims/')
        assert response.status_code == 500
        assert response.data == {
            'state': 'error', 'role': 'homeowner',
            'title': 'Error', 'message': 'Failed to load guarantee claims',
        }

    def test_submit_claim(self, authenticated_client, provider, project):
        client, user = authenticated_client
        response = client.post('/api/v1/guarantees/claims/', {
            'project': project.id,
            'claim_reason': '  Leak came back  ',
            'claim_amount': '150.00',
        }, format='json')
        assert response.status_code == 201
        claim = GuaranteeClaim.objects.get(id=response.data['id'])
        assert claim.homeowner == user
        assert claim.provider == provider
        assert claim.status == 'pending'
        assert claim.claim_reason == 'Leak came back'
        assert response.data['amount'] == '$150.00'
        assert response.data['badge'] == {'label': 'Pending', 'tone': 'yellow'}

    def test_submit_requires_reason(self, authenticated_client, project):
        client, _ = authenticated_client
        response = client.post('/api/v1/guarantees/claims/', {
            'project': project.id, 'claim_reason': '   ', 'claim_amount': '10',
        }, format='json')
        assert response.status_code == 400
        assert response.data['claim_reason'] == ['Please provide a reason for your claim']

    @pytest.mark.parametrize('amount', ['0', '-5', 'abc', ''])
    def test_submit_requires_positive_amount(self, authenticated_client, project, amount):
        client, _ = authenticated_client
        response = client.post('/api/v1/guarantees/claims/', {
            'project': project.id, 'claim_reason': 'Broken', 'claim_amount': amount,
        }, format='json')
        assert response.status_code == 400
        assert response.data['claim_amount'] == ['Please enter a valid claim amount']

    def test_submit_for_someone_elses_project(self, authenticated_client, create_user):
        from projects.models import Project
        client, _ = authenticated_client
        other = Project.objects.create(homeowner=create_user(email='other@example.com'), title='Theirs')
        response = client.post('/api/v1/guarantees/claims/', {
            'project': other.id, 'claim_reason': 'Broken', 'claim_amount': '10',
        }, format='json')
        assert response.status_code == 400
        assert 'project' in response.data

    def test_submit_rejects_other_provider(self, authenticated_client, create_user, project):
        client, _ = authenticated_client
        stranger = create_user(email='rival@example.com', role='provider', business_name='Rival Co')
        response = client.post('/api/v1/guarantees/claims/', {
            'project': project.id, 'provider': stranger.id,
            'claim_reason': 'Broken', 'claim_amount': '10',
        }, format='json')
        assert response.status_code == 400
        assert 'provider' in response.data
        assert not GuaranteeClaim.objects.filter(provider=stranger).exists()

    def test_submit_accepts_matching_provider(self, authenticated_client, provider, project):
        client, _ = authenticated_client
        response = client.post('/api/v1/guarantees/claims/', {
            'project': project.id, 'provider': provider.id,
            'claim_reason': 'Broken', 'claim_amount': '10',
        }, format='json')
        assert response.status_code == 201
        assert GuaranteeClaim.objects.get(id=response.data['id']).provider == provider

    def test_submit_store_failure(self, authenticated_client, project, settings):
        settings.HOMESWERV_CLAIM_STORE = 'guarantees.tests.FailingClaimStore'
        client, _ = authenticated_client
        response = client.post('/api/v1/guarantees/claims/', {
            'project': project.id, 'claim_reason': 'Broken', 'claim_amount': '10',
        }, format='json')
        assert response.status_code == 500
        assert response.data['error']['message'] == 'Failed to submit claim. Please try again.'

    def test_submit_requires_login(self, api_client):
        response = api_client.post('/api/v1/guarantees/claims/', {}, format='json')
        assert response.status_code == 401


class _FakeResponse:
    def __init__(self, payload, status_code=200):
        self.payload = payload
        self.status_code = status_code

    def json(self):
        return self.payload

    def raise_for_status(self):
        if self.status_code >= 400:
            import requests
            raise requests.HTTPError(f"{self.status_code} Error")


class TestRestClaimStore:

    ROW = {
        'id': 11,
        'status': 'approved',
        'claim_amount': 89.5,
        'claim_reason': 'Paint peeling',
        'created_at': '2025-05-02T09:00:00+00:00',
        'resolution_notes': None,
        'resolution_date': None,
        'homeowner': {'id': 1, 'first_name': 'Jane', 'last_name': 'Doe', 'email': 'jane@example.com'},
        'provider': {'id': 2, 'business_name': 'Acme Painting', 'contact_name': 'Al', 'email': 'al@example.com'},
        'project': None,
    }

    def test_query_filters_by_role_side(self, monkeypatch):
        from guarantees import remote
        calls = []

        def fake_get(url, headers, params, timeout):
            calls.append((url, headers, params, timeout))
            return _FakeResponse([self.ROW])

        monkeypatch.setattr(remote.requests, 'get', fake_get)
        store = remote.RestClaimStore(base_url='https://backend.example.com/', api_key='anon')
        claims = store.claims_for(_User(id=2), 'provider')

        url, headers, params, _ = calls[0]
        assert url == 'https://backend.example.com/rest/v1/guarantees'
        assert headers['apikey'] == 'anon'
        assert params['provider_id'] == 'eq.2'
        assert 'homeowner_id' not in params
        assert params['order'] == 'created_at.desc'
        assert 'provider:provider_id(' in params['select']

        card = claim_card(claims[0], 'homeowner')
        assert card['project_title'] == 'Unnamed Project'
        assert card['counterpart']['name'] == 'Acme Painting'
        assert card['amount'] == '$89.50'
        assert card['submitted_on'] == 'Submitted on May 2, 2025'

    def test_other_roles_are_not_filtered(self, monkeypatch):
        from guarantees import remote
        seen = {}

        def fake_get(url, headers, params, timeout):
            seen.update(params)
            return _FakeResponse([])

        monkeypatch.setattr(remote.requests, 'get', fake_get)
        remote.RestClaimStore(base_url='https://backend.example.com').claims_for(_User(), 'admin')
        assert 'homeowner_id' not in seen
        assert 'provider_id' not in seen

    def test_backend_failure_becomes_error_state(self, monkeypatch):
        from guarantees import remote
        monkeypatch.setattr(remote.requests, 'get', lambda *args, **kwargs: _FakeResponse({}, status_code=503))
        store = remote.RestClaimStore(base_url='https://backend.example.com')
        data = ClaimsList().load(_User(), store).to_dict()
        assert data['state'] == 'error'
        assert data['message'] == 'Failed to load guarantee claims'

    def test_requires_backend_url(self, settings):
        from django.core.exceptions import ImproperlyConfigured
        from guarantees import remote
        settings.HOMESWERV_BACKEND_URL = ''
        with pytest.raises(ImproperlyConfigured):
            remote.RestClaimStore()
