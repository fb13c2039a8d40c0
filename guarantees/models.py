"""
Satisfaction guarantee claims.
"""
from django.conf import settings
from django.db import models


class ClaimStatus(models.TextChoices):
    PENDING = 'pending', 'Pending'
    APPROVED = 'approved', 'Approved'
    REJECTED = 'rejected', 'Rejected'
    RESOLVED = 'resolved', 'Resolved'


class GuaranteeClaim(models.Model):
    """
    A homeowner's claim against a provider under the satisfaction guarantee.
    Status is not restricted to ClaimStatus; rows written by other tools may
    carry statuses this app does not know about.
    """
    homeowner = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='guarantee_claims',
    )
    provider = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='claims_against',
    )
    project = models.ForeignKey(
        'projects.Project',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='guarantee_claims',
    )
    status = models.CharField(max_length=20, default=ClaimStatus.PENDING)
    claim_amount = models.DecimalField(max_digits=12, decimal_places=2)
    claim_reason = models.TextField()
    resolution_notes = models.TextField(blank=True)
    resolution_date = models.DateTimeField(null=True, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'guarantees'
        ordering = ['-created_at']
        indexes = [
            models.Index(fields=['homeowner', '-created_at'], name='guarantees_owner_idx'),
            models.Index(fields=['provider', '-created_at'], name='guarantees_provider_idx'),
        ]

    def __str__(self):
        return f"Claim {self.id} ({self.status})"
