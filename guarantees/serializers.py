"""
Serializers for guarantee claims.
"""
from decimal import Decimal

from django.contrib.auth import get_user_model
from rest_framework import serializers

from projects.models import Project

REASON_REQUIRED = 'Please provide a reason for your claim'
INVALID_AMOUNT = 'Please enter a valid claim amount'

_AMOUNT_ERRORS = {
    key: INVALID_AMOUNT
    for key in ('required', 'null', 'invalid', 'max_digits', 'max_decimal_places', 'max_whole_digits')
}


class GuaranteeClaimCreateSerializer(serializers.Serializer):
    """
    Claim form submission. The homeowner is always the requesting user and the
    provider is always the project's provider; `provider` may only repeat it.
    """
    project = serializers.PrimaryKeyRelatedField(queryset=Project.objects.select_related('provider'))
    provider = serializers.PrimaryKeyRelatedField(
        queryset=get_user_model().objects.all(), required=False, allow_null=True
    )
    claim_reason = serializers.CharField(
        error_messages={'required': REASON_REQUIRED, 'blank': REASON_REQUIRED, 'null': REASON_REQUIRED}
    )
    claim_amount = serializers.DecimalField(max_digits=12, decimal_places=2, error_messages=_AMOUNT_ERRORS)

    def validate_claim_amount(self, value):
        if value <= Decimal('0'):
            raise serializers.ValidationError(INVALID_AMOUNT)
        return value

    def validate(self, attrs):
        request = self.context.get('request')
        project = attrs['project']
        if request is not None and project.homeowner_id != request.user.id:
            raise serializers.ValidationError({'project': 'You can only submit claims for your own projects'})
        provider = attrs.get('provider')
        if provider is not None and provider.id != project.provider_id:
            raise serializers.ValidationError({'provider': "Claims go to the project's provider"})
        attrs['provider'] = project.provider
        return attrs
