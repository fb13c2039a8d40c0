"""
Claim store backed by a hosted REST row-store (PostgREST-style API).

Select it with HOMESWERV_CLAIM_STORE=guarantees.remote.RestClaimStore and point
HOMESWERV_BACKEND_URL / HOMESWERV_BACKEND_KEY at the service.
"""
import logging
from types import SimpleNamespace
from typing import Any, Dict, List

import requests
from django.conf import settings
from django.core.exceptions import ImproperlyConfigured

from .models import ClaimStatus

logger = logging.getLogger(__name__)

CLAIMS_TABLE = 'guarantees'

# One request: claims plus the homeowner, provider and project rows they point at
CLAIM_SELECT = (
    '*,'
    'homeowner:homeowner_id(id,first_name,last_name,email),'
    'provider:provider_id(id,business_name,contact_name,email),'
    'project:project_id(id,title)'
)

_RELATION_FIELDS = {
    'homeowner': ('id', 'first_name', 'last_name', 'email'),
    'provider': ('id', 'business_name', 'contact_name', 'email'),
    'project': ('id', 'title'),
}
_CLAIM_FIELDS = (
    'id', 'status', 'claim_amount', 'claim_reason', 'created_at',
    'resolution_notes', 'resolution_date',
)


def claim_from_row(row: Dict[str, Any]) -> SimpleNamespace:
    """Attribute access over an API row, with missing fields set to None."""
    claim = SimpleNamespace(**{name: row.get(name) for name in _CLAIM_FIELDS})
    for relation, fields in _RELATION_FIELDS.items():
        related = row.get(relation)
        setattr(claim, relation, SimpleNamespace(**{f: related.get(f) for f in fields}) if related else None)
    return claim


class RestClaimStore:

    def __init__(self, base_url: str = None, api_key: str = None, timeout: float = None):
        self.base_url = (base_url or getattr(settings, 'HOMESWERV_BACKEND_URL', '')).rstrip('/')
        self.api_key = api_key or getattr(settings, 'HOMESWERV_BACKEND_KEY', '')
        self.timeout = timeout or getattr(settings, 'HOMESWERV_BACKEND_TIMEOUT', 10)
        if not self.base_url:
            raise ImproperlyConfigured('HOMESWERV_BACKEND_URL must be set to use RestClaimStore')

    @property
    def table_url(self) -> str:
        return f"{self.base_url}/rest/v1/{CLAIMS_TABLE}"

    def _headers(self) -> Dict[str, str]:
        return {
            'apikey': self.api_key,
            'Authorization': f'Bearer {self.api_key}',
            'Accept': 'application/json',
        }

    def claims_for(self, user, role) -> List[SimpleNamespace]:
        params = {'select': CLAIM_SELECT, 'order': 'created_at.desc'}
        if role == 'homeowner':
            params['homeowner_id'] = f'eq.{user.id}'
        elif role == 'provider':
            params['provider_id'] = f'eq.{user.id}'

        response = requests.get(self.table_url, headers=self._headers(), params=params, timeout=self.timeout)
        response.raise_for_status()
        rows = response.json() or []
        return [claim_from_row(row) for row in rows]

    def create_claim(self, homeowner, project, provider, claim_reason, claim_amount) -> SimpleNamespace:
        payload = {
            'project_id': project.id,
            'homeowner_id': homeowner.id,
            'provider_id': provider.id if provider else None,
            'claim_reason': claim_reason,
            'claim_amount': str(claim_amount),
            'status': ClaimStatus.PENDING.value,
        }
        headers = {**self._headers(), 'Prefer': 'return=representation'}
        response = requests.post(self.table_url, headers=headers, json=payload, timeout=self.timeout)
        response.raise_for_status()
        rows = response.json() or [payload]
        row = rows[0] if isinstance(rows, list) else rows
        logger.info(f"Guarantee claim submitted to backend by user {homeowner.id} for project {project.id}")
        return claim_from_row({
            **row,
            'project': {'id': project.id, 'title': project.title},
            'provider': {'id': provider.id, 'business_name': provider.business_name} if provider else None,
        })
