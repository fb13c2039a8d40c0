"""
Claim storage backend.

Views never talk to the ORM directly: they ask ``get_claim_store()`` for the
store configured in ``settings.HOMESWERV_CLAIM_STORE`` and go through it, so a
different backend can be swapped in per deployment (or per test).
"""
import logging

from django.conf import settings
from django.utils.module_loading import import_string

from .models import ClaimStatus, GuaranteeClaim

logger = logging.getLogger(__name__)


class ClaimStore:
    """Claims stored in the project database."""

    def claims_for(self, user, role):
        """
        Claims where ``user`` is on the ``role`` side, newest first, with
        homeowner, provider and project loaded in the same query.
        Any other role gets every claim.
        """
        qs = GuaranteeClaim.objects.select_related('homeowner', 'provider', 'project')
        if role == 'homeowner':
            qs = qs.filter(homeowner=user)
        elif role == 'provider':
            qs = qs.filter(provider=user)
        return list(qs.order_by('-created_at'))

    def create_claim(self, homeowner, project, provider, claim_reason, claim_amount):
        claim = GuaranteeClaim.objects.create(
            homeowner=homeowner,
            project=project,
            provider=provider,
            claim_reason=claim_reason,
            claim_amount=claim_amount,
            status=ClaimStatus.PENDING,
        )
        logger.info(f"Guarantee claim {claim.id} submitted by user {homeowner.id} for project {project.id}")
        return claim


def get_claim_store():
    """New instance of the configured store class."""
    store_class = import_string(settings.HOMESWERV_CLAIM_STORE)
    return store_class()
