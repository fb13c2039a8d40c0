"""
Tests for projects app - kanban board state and endpoints.
"""
from datetime import date
from decimal import Decimal

import pytest
from django.contrib.auth import get_user_model
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken

from projects.kanban import COLUMN_STYLES, KanbanBoard, KanbanError, card_display
from projects.models import ProjectStatus


def _cards():
    return [
        {'id': 1, 'title': 'Kitchen remodel', 'status': 'planning'},
        {'id': 2, 'title': 'Fence repair', 'status': 'planning'},
        {'id': 3, 'title': 'Roof inspection', 'status': 'scheduled', 'start_date': '2025-03-04'},
        {'id': 4, 'title': 'Deck stain', 'status': 'in_progress', 'progress': 45},
        {'id': 5, 'title': 'Mystery job', 'status': 'archived'},
    ]


def _ids(board, column_id):
    return [item['id'] for item in board.columns[column_id].items]


class TestKanbanBoard:

    def test_partitions_by_status_in_fixed_column_order(self):
        board = KanbanBoard.from_projects(_cards())
        assert list(board.columns) == ['planning', 'scheduled', 'in_progress', 'on_hold', 'completed']
        assert _ids(board, 'planning') == [1, 2]
        assert _ids(board, 'scheduled') == [3]
        assert _ids(board, 'on_hold') == []
        assert board.columns['in_progress'].title == 'In Progress'

    def test_unknown_status_is_left_off_the_board(self):
        board = KanbanBoard.from_projects(_cards())
        assert board.find(5) == (None, None)

    def test_move_across_columns_updates_status(self):
        board = KanbanBoard.from_projects(_cards())
        moved = board.on_drag_end({
            'source': {'droppableId': 'planning', 'index': 0},
            'destination': {'droppableId': 'completed', 'index': 0},
        })
        assert moved['id'] == 1
        assert moved['status'] == 'completed'
        assert _ids(board, 'planning') == [2]
        assert _ids(board, 'completed') == [1]
        assert board.columns['completed'].items[0]['status'] == 'completed'

    def test_move_across_columns_does_not_mutate_input(self):
        cards = _cards()
        board = KanbanBoard.from_projects(cards)
        board.on_drag_end({
            'source': {'droppableId': 'planning', 'index': 0},
            'destination': {'droppableId': 'on_hold', 'index': 0},
        })
        assert cards[0]['status'] == 'planning'

    def test_reorder_within_column(self):
        board = KanbanBoard.from_projects(_cards())
        moved = board.on_drag_end({
            'source': {'droppableId': 'planning', 'index': 0},
            'destination': {'droppableId': 'planning', 'index': 1},
        })
        assert moved['status'] == 'planning'
        assert _ids(board, 'planning') == [2, 1]

    def test_insert_position_in_destination(self):
        board = KanbanBoard.from_projects(_cards())
        board.on_drag_end({
            'source': {'droppableId': 'planning', 'index': 1},
            'destination': {'droppableId': 'scheduled', 'index': 0},
        })
        assert _ids(board, 'scheduled') == [2, 3]

    def test_drop_outside_board_is_noop(self):
        board = KanbanBoard.from_projects(_cards())
        before = board.to_dict()
        assert board.on_drag_end({'source': {'droppableId': 'planning', 'index': 0}, 'destination': None}) is None
        assert board.to_dict() == before

    def test_unknown_column_rejected(self):
        board = KanbanBoard.from_projects(_cards())
        with pytest.raises(KanbanError):
            board.on_drag_end({
                'source': {'droppableId': 'planning', 'index': 0},
                'destination': {'droppableId': 'backlog', 'index': 0},
            })

    def test_source_index_out_of_range_rejected(self):
        board = KanbanBoard.from_projects(_cards())
        with pytest.raises(KanbanError):
            board.on_drag_end({
                'source': {'droppableId': 'on_hold', 'index': 0},
                'destination': {'droppableId': 'planning', 'index': 0},
            })

    def test_stale_draggable_id_rejected(self):
        board = KanbanBoard.from_projects(_cards())
        with pytest.raises(KanbanError):
            board.on_drag_end({
                'draggableId': '2',
                'source': {'droppableId': 'planning', 'index': 0},
                'destination': {'droppableId': 'completed', 'index': 0},
            })

    def test_round_trips_through_session_dict(self):
        board = KanbanBoard.from_projects(_cards())
        restored = KanbanBoard.from_dict(board.to_dict())
        assert restored.to_dict() == board.to_dict()

    def test_empty_column_placeholder(self):
        data = KanbanBoard.from_projects(_cards()).to_dict(with_display=True)
        on_hold = next(c for c in data['columns'] if c['id'] == 'on_hold')
        assert on_hold['empty'] == {'title': 'No projects', 'hint': 'Drag projects here'}
        assert on_hold['tone'] == 'orange'

    def test_column_styles_cover_every_status(self):
        assert {status.value for status in COLUMN_STYLES} == set(ProjectStatus.values)


class TestCardDisplay:

    def test_progress_only_when_in_progress_and_started(self):
        assert card_display({'status': 'in_progress', 'progress': 45})['detail']['text'] == '45%'
        assert card_display({'status': 'in_progress', 'progress': 0})['detail'] is None
        assert card_display({'status': 'planning', 'progress': 45})['detail'] is None

    def test_scheduled_start_date(self):
        display = card_display({'status': 'scheduled', 'start_date': '2025-03-04'})
        assert display['detail']['text'] == 'Starts: Mar 4'

    def test_on_hold_reason(self):
        display = card_display({'status': 'on_hold', 'hold_reason': 'Waiting on permits'})
        assert display['detail'] == {'kind': 'hold', 'text': 'Waiting on permits'}

    def test_completed_date(self):
        display = card_display({'status': 'completed', 'completed_date': '2024-11-20'})
        assert display['detail']['text'] == 'Completed: Nov 20'

    def test_budget_is_whole_dollars_and_hidden_when_zero(self):
        assert card_display({'status': 'planning', 'budget': '12500.00'})['budget'] == 'Budget: $12,500'
        assert card_display({'status': 'planning', 'budget': '0'})['budget'] is None
        assert card_display({'status': 'planning'})['budget'] is None

    def test_optional_fields_fall_back_to_none(self):
        display = card_display({'status': 'planning'})
        assert display['provider'] is None
        assert display['location'] is None


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
    user = create_user()
    refresh = RefreshToken.for_user(user)
    api_client.credentials(HTTP_AUTHORIZATION=f'Bearer {str(refresh.access_token)}')
    return api_client, user


@pytest.fixture
def create_project():
    def _create_project(homeowner, title="Kitchen remodel", status="planning", **extra):
        from projects.models import Project
        return Project.objects.create(homeowner=homeowner, title=title, status=status, **extra)
    return _create_project


def _column(data, column_id):
    return next(c for c in data['columns'] if c['id'] == column_id)


@pytest.mark.django_db
class TestKanbanEndpoints:

    def test_board_lists_own_projects(self, authenticated_client, create_user, create_project):
        client, user = authenticated_client
        provider = create_user(email='pro@example.com', role='provider', business_name='Acme Builders')
        create_project(user, provider=provider, budget=Decimal('12500'), location='Portland, OR')
        create_project(user, title='Deck stain', status='scheduled', start_date=date(2025, 3, 4))
        create_project(create_user(email='other@example.com'), title='Not mine')

        response = client.get('/api/v1/projects/kanban/')
        assert response.status_code == 200
        planning = _column(response.data, 'planning')
        assert [item['title'] for item in planning['items']] == ['Kitchen remodel']
        assert planning['items'][0]['display']['provider'] == 'Provider: Acme Builders'
        assert planning['items'][0]['display']['budget'] == 'Budget: $12,500'
        scheduled = _column(response.data, 'scheduled')
        assert scheduled['items'][0]['display']['detail']['text'] == 'Starts: Mar 4'

    def test_move_updates_session_board_only(self, authenticated_client, create_project):
        from projects.models import Project
        client, user = authenticated_client
        project = create_project(user)
        client.get('/api/v1/projects/kanban/')

        response = client.post('/api/v1/projects/kanban/move/', {
            'draggableId': str(project.id),
            'source': {'droppableId': 'planning', 'index': 0},
            'destination': {'droppableId': 'completed', 'index': 0},
        }, format='json')
        assert response.status_code == 200
        assert response.data['moved']['status'] == 'completed'
        assert _column(response.data['board'], 'planning')['items'] == []
        assert _column(response.data['board'], 'completed')['count'] == 1

        project.refresh_from_db()
        assert project.status == 'planning'

    def test_moves_accumulate_within_session(self, authenticated_client, create_project):
        client, user = authenticated_client
        create_project(user, title='First')
        client.get('/api/v1/projects/kanban/')
        move = {
            'source': {'droppableId': 'planning', 'index': 0},
            'destination': {'droppableId': 'on_hold', 'index': 0},
        }
        client.post('/api/v1/projects/kanban/move/', move, format='json')
        response = client.post('/api/v1/projects/kanban/move/', {
            'source': {'droppableId': 'on_hold', 'index': 0},
            'destination': {'droppableId': 'completed', 'index': 0},
        }, format='json')
        assert response.status_code == 200
        assert _column(response.data['board'], 'completed')['items'][0]['title'] == 'First'

    def test_reload_resets_board(self, authenticated_client, create_project):
        client, user = authenticated_client
        create_project(user)
        client.get('/api/v1/projects/kanban/')
        client.post('/api/v1/projects/kanban/move/', {
            'source': {'droppableId': 'planning', 'index': 0},
            'destination': {'droppableId': 'completed', 'index': 0},
        }, format='json')
        response = client.get('/api/v1/projects/kanban/')
        assert _column(response.data, 'planning')['count'] == 1

    def test_invalid_move_returns_400(self, authenticated_client, create_project):
        client, user = authenticated_client
        create_project(user)
        response = client.post('/api/v1/projects/kanban/move/', {
            'source': {'droppableId': 'planning', 'index': 3},
            'destination': {'droppableId': 'completed', 'index': 0},
        }, format='json')
        assert response.status_code == 400
        assert response.data['error']['code'] == 'INVALID_MOVE'

    def test_malformed_move_returns_400(self, authenticated_client):
        client, _ = authenticated_client
        response = client.post('/api/v1/projects/kanban/move/', {'destination': None}, format='json')
        assert response.status_code == 400
        assert 'source' in response.data

    def test_requires_authentication(self, api_client):
        response = api_client.get('/api/v1/projects/kanban/')
        assert response.status_code == 401

    def test_board_not_shared_when_token_changes(self, authenticated_client, create_user, create_project):
        client, alice = authenticated_client
        create_project(alice, title='Alice reno')
        client.get('/api/v1/projects/kanban/')

        bob = create_user(email='bob@example.com')
        create_project(bob, title='Bob fence')
        client.credentials(HTTP_AUTHORIZATION=f'Bearer {RefreshToken.for_user(bob).access_token}')
        response = client.post('/api/v1/projects/kanban/move/', {
            'source': {'droppableId': 'planning', 'index': 0},
            'destination': {'droppableId': 'completed', 'index': 0},
        }, format='json')
        assert response.status_code == 200
        assert response.data['moved']['title'] == 'Bob fence'
        titles = [item['title'] for column in response.data['board']['columns'] for item in column['items']]
        assert titles == ['Bob fence']
