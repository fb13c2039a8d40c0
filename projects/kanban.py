"""
Kanban board for homeowner projects.

The board partitions projects into one column per status. Drag-and-drop
results either reorder a column or move a card to another column, which
rewrites the card's ``status`` to the destination column id. Moves only
change the board itself; project rows are left untouched.
"""
import logging
from dataclasses import dataclass, field

from common.enums import ensure_exhaustive
from common.formatting import format_currency, format_date
from .models import ProjectStatus

logger = logging.getLogger(__name__)


class KanbanError(ValueError):
    """A drag result that does not fit the current board."""


@dataclass(frozen=True)
class ColumnStyle:
    tone: str
    icon: str


COLUMN_STYLES = ensure_exhaustive({
    ProjectStatus.PLANNING: ColumnStyle(tone='gray', icon='calendar'),
    ProjectStatus.SCHEDULED: ColumnStyle(tone='yellow', icon='calendar'),
    ProjectStatus.IN_PROGRESS: ColumnStyle(tone='blue', icon='clock'),
    ProjectStatus.ON_HOLD: ColumnStyle(tone='orange', icon='exclamation-triangle'),
    ProjectStatus.COMPLETED: ColumnStyle(tone='green', icon='check-circle'),
}, ProjectStatus, 'COLUMN_STYLES')

EMPTY_COLUMN = {'title': 'No projects', 'hint': 'Drag projects here'}


def project_card(project):
    """Flatten a Project (or an already-flat mapping) into board card data."""
    if isinstance(project, dict):
        return dict(project)
    provider = project.provider
    return {
        'id': project.id,
        'title': project.title,
        'status': project.status,
        'description': project.description or None,
        'provider': {'id': provider.id, 'name': provider.display_name} if provider else None,
        'location': project.location or None,
        'budget': str(project.budget) if project.budget is not None else None,
        'progress': project.progress or 0,
        'start_date': project.start_date.isoformat() if project.start_date else None,
        'hold_reason': project.hold_reason or None,
        'completed_date': project.completed_date.isoformat() if project.completed_date else None,
    }


def card_detail(card):
    """Status-specific footer line for a card, or None."""
    status = card.get('status')
    if status == ProjectStatus.IN_PROGRESS and (card.get('progress') or 0) > 0:
        return {'kind': 'progress', 'value': card['progress'], 'text': f"{card['progress']}%"}
    if status == ProjectStatus.SCHEDULED and card.get('start_date'):
        return {'kind': 'start', 'text': f"Starts: {format_date(card['start_date'], with_year=False)}"}
    if status == ProjectStatus.ON_HOLD and card.get('hold_reason'):
        return {'kind': 'hold', 'text': card['hold_reason']}
    if status == ProjectStatus.COMPLETED and card.get('completed_date'):
        return {'kind': 'completed', 'text': f"Completed: {format_date(card['completed_date'], with_year=False)}"}
    return None


def card_display(card):
    provider = card.get('provider')
    budget = format_currency(card.get('budget'), cents=False, blank_zero=True)
    return {
        'provider': f"Provider: {provider['name']}" if provider else None,
        'location': f"Location: {card['location']}" if card.get('location') else None,
        'budget': f"Budget: {budget}" if budget else None,
        'detail': card_detail(card),
    }


@dataclass
class Column:
    id: str
    title: str
    items: list = field(default_factory=list)

    def to_dict(self, with_display=False):
        data = {'id': self.id, 'title': self.title, 'count': len(self.items)}
        if with_display:
            style = COLUMN_STYLES[ProjectStatus(self.id)]
            data['tone'] = style.tone
            data['icon'] = style.icon
            data['items'] = [{**item, 'display': card_display(item)} for item in self.items]
            if not self.items:
                data['empty'] = EMPTY_COLUMN
        else:
            data['items'] = [dict(item) for item in self.items]
        return data


class KanbanBoard:
    """Five fixed status columns holding card mappings."""

    def __init__(self, columns=None):
        self.columns = {
            status.value: Column(id=status.value, title=status.label)
            for status in ProjectStatus
        }
        for column_id, items in (columns or {}).items():
            self.column(column_id).items = [dict(item) for item in items]

    @classmethod
    def from_projects(cls, projects):
        """Partition projects by status, keeping input order within each column."""
        board = cls()
        for project in projects:
            card = project_card(project)
            column = board.columns.get(card.get('status'))
            if column is not None:
                column.items.append(card)
        return board

    @classmethod
    def from_dict(cls, data):
        return cls({column['id']: column['items'] for column in data.get('columns', [])})

    def to_dict(self, with_display=False):
        return {'columns': [column.to_dict(with_display) for column in self.columns.values()]}

    def column(self, column_id):
        try:
            return self.columns[column_id]
        except KeyError:
            raise KanbanError(f"Unknown column: {column_id}")

    def find(self, project_id):
        """Return (column_id, index) of a card, or (None, None)."""
        for column in self.columns.values():
            for index, item in enumerate(column.items):
                if str(item.get('id')) == str(project_id):
                    return column.id, index
        return None, None

    def on_drag_end(self, result):
        """
        Apply a drag-and-drop result:

            {"source": {"droppableId": "planning", "index": 0},
             "destination": {"droppableId": "completed", "index": 0} | None,
             "draggableId": "12"}

        A missing destination (drop outside any column) changes nothing.
        Returns the moved card, or None for a no-op.
        """
        destination = result.get('destination')
        if not destination:
            return None
        source = result.get('source') or {}

        source_column = self.column(source.get('droppableId'))
        dest_column = self.column(destination.get('droppableId'))
        source_index = self._index(source.get('index'), len(source_column.items), 'source')
        dest_index = self._index(destination.get('index'), None, 'destination')

        draggable_id = result.get('draggableId')
        moving = source_column.items[source_index]
        if draggable_id is not None and str(moving.get('id')) != str(draggable_id):
            raise KanbanError(f"Card {draggable_id} is not at {source_column.id}[{source_index}]")

        removed = source_column.items.pop(source_index)
        if source_column is dest_column:
            dest_column.items.insert(dest_index, removed)
            return removed

        updated = {**removed, 'status': dest_column.id}
        dest_column.items.insert(dest_index, updated)
        logger.debug(f"Moved project {updated.get('id')} from {source_column.id} to {dest_column.id}")
        return updated

    @staticmethod
    def _index(value, size, which):
        if isinstance(value, bool) or not isinstance(value, int) or value < 0:
            raise KanbanError(f"Invalid {which} index: {value!r}")
        if size is not None and value >= size:
            raise KanbanError(f"{which.capitalize()} index {value} out of range")
        return value
