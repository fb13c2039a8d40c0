"""
Kanban board endpoints.

The board is per-session UI state: GET rebuilds it from the user's projects,
POST move/ rearranges the session copy. Project rows are never written here.
"""
import logging

from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from .kanban import KanbanBoard, KanbanError
from .models import Project
from .serializers import DragResultSerializer

logger = logging.getLogger(__name__)

SESSION_KEY = 'kanban_board'


def _user_projects(user):
    qs = Project.objects.select_related('provider')
    if user.is_provider:
        return qs.filter(provider=user)
    return qs.filter(homeowner=user)


def _session_board(request):
    data = request.session.get(SESSION_KEY)
    # The session outlives the bearer token, so a board saved for another user is rebuilt
    if data and data.get('user_id') == request.user.id:
        return KanbanBoard.from_dict(data['board'])
    return KanbanBoard.from_projects(_user_projects(request.user))


def _save_board(request, board):
    request.session[SESSION_KEY] = {'user_id': request.user.id, 'board': board.to_dict()}


@api_view(['GET'])
@permission_classes([IsAuthenticated])
def kanban_board(request):
    """
    GET /api/v1/projects/kanban/ - Board built from the current user's projects.
    Resets any moves made earlier in the session.
    """
    board = KanbanBoard.from_projects(_user_projects(request.user))
    _save_board(request, board)
    return Response(board.to_dict(with_display=True))


@api_view(['POST'])
@permission_classes([IsAuthenticated])
def kanban_move(request):
    """
    POST /api/v1/projects/kanban/move/ - Apply a drag-end result to the session board.
    Body: { "draggableId": "12", "source": {"droppableId": "planning", "index": 0},
            "destination": {"droppableId": "completed", "index": 0} }
    """
    serializer = DragResultSerializer(data=request.data)
    if not serializer.is_valid():
        return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

    board = _session_board(request)
    try:
        moved = board.on_drag_end(serializer.validated_data)
    except KanbanError as e:
        logger.warning(f"Rejected kanban move for user {request.user.id}: {e}")
        return Response(
            {'error': {'code': 'INVALID_MOVE', 'message': str(e), 'status': 400}},
            status=status.HTTP_400_BAD_REQUEST,
        )

    _save_board(request, board)
    return Response({
        'moved': moved,
        'board': board.to_dict(with_display=True),
    })
