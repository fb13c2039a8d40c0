"""
Guarantee claims list: view state and card formatting.

A list starts out ``loading`` and settles into exactly one of
``unauthenticated``, ``error``, ``empty`` or ``populated`` after ``load``.
"""
from dataclasses import dataclass, field

from common.enums import ensure_exhaustive
from common.errors import log_error
from common.formatting import format_currency, format_date
from .models import ClaimStatus

LOADING = 'loading'
UNAUTHENTICATED = 'unauthenticated'
ERROR = 'error'
EMPTY = 'empty'
POPULATED = 'populated'

HOMEOWNER = 'homeowner'
PROVIDER = 'provider'

LOAD_ERROR = 'Failed to load guarantee claims'
LOADING_PLACEHOLDERS = 3

EMPTY_MESSAGES = {
    HOMEOWNER: "You haven't submitted any guarantee claims yet.",
    PROVIDER: "You don't have any guarantee claims against your services.",
}

SUBTITLES = {
    HOMEOWNER: "Claims you've submitted under our satisfaction guarantee.",
    PROVIDER: "Claims submitted against your services under our satisfaction guarantee.",
}


@dataclass(frozen=True)
class Badge:
    label: str
    tone: str

    def to_dict(self):
        return {'label': self.label, 'tone': self.tone}


STATUS_BADGES = ensure_exhaustive({
    ClaimStatus.PENDING: Badge('Pending', 'yellow'),
    ClaimStatus.APPROVED: Badge('Approved', 'green'),
    ClaimStatus.REJECTED: Badge('Rejected', 'red'),
    ClaimStatus.RESOLVED: Badge('Resolved', 'blue'),
}, ClaimStatus, 'STATUS_BADGES')


def status_badge(status):
    """Badge for a claim status; unknown statuses get a gray badge showing the raw value."""
    try:
        return STATUS_BADGES[ClaimStatus(status)]
    except ValueError:
        return Badge(str(status), 'gray')


def _by_role(messages, role):
    # Only homeowners get the homeowner wording.
    return messages[HOMEOWNER] if role == HOMEOWNER else messages[PROVIDER]


def _counterpart(claim, role):
    if role == HOMEOWNER:
        provider = claim.provider
        return {
            'label': 'Provider',
            'id': provider.id if provider else None,
            'name': (provider.business_name if provider else '') or 'Unknown Provider',
        }
    homeowner = claim.homeowner
    name = f"{homeowner.first_name} {homeowner.last_name}".strip() if homeowner else ''
    return {'label': 'Homeowner', 'id': homeowner.id if homeowner else None, 'name': name}


def claim_card(claim, role=HOMEOWNER):
    project = claim.project
    resolution = None
    if claim.resolution_notes:
        resolution = {
            'notes': claim.resolution_notes,
            'resolved_on': (
                f"Resolved on {format_date(claim.resolution_date)}" if claim.resolution_date else None
            ),
        }
    return {
        'id': claim.id,
        'project_title': (project.title if project else '') or 'Unnamed Project',
        'status': claim.status,
        'badge': status_badge(claim.status).to_dict(),
        'submitted_on': f"Submitted on {format_date(claim.created_at)}",
        'amount': format_currency(claim.claim_amount),
        'reason': claim.claim_reason,
        'counterpart': _counterpart(claim, role),
        'resolution': resolution,
    }


@dataclass
class ClaimsList:
    role: str = HOMEOWNER
    state: str = LOADING
    claims: list = field(default_factory=list)
    error: str = ''

    def load(self, user, store):
        """Resolve the user, then fetch their claims from ``store``."""
        self.state = LOADING
        self.error = ''
        self.claims = []
        if user is None or not user.is_authenticated:
            self.state = UNAUTHENTICATED
            return self
        try:
            self.claims = list(store.claims_for(user, self.role))
        except Exception as e:
            log_error(e, location='guarantee claims fetch', user_id=user.id, role=self.role)
            self.error = LOAD_ERROR
            self.state = ERROR
            return self
        self.state = POPULATED if self.claims else EMPTY
        return self

    def to_dict(self):
        data = {'state': self.state, 'role': self.role}
        if self.state == LOADING:
            data['placeholders'] = LOADING_PLACEHOLDERS
        elif self.state == UNAUTHENTICATED:
            data['title'] = 'Authentication Required'
            data['message'] = 'Please log in to view your guarantee claims.'
        elif self.state == ERROR:
            data['title'] = 'Error'
            data['message'] = self.error
        elif self.state == EMPTY:
            data['title'] = 'No guarantee claims'
            data['message'] = _by_role(EMPTY_MESSAGES, self.role)
        else:
            data['title'] = 'Guarantee Claims'
            data['subtitle'] = _by_role(SUBTITLES, self.role)
            data['claims'] = [claim_card(claim, self.role) for claim in self.claims]
        return data
