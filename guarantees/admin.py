from django.contrib import admin
from .models import GuaranteeClaim


@admin.register(GuaranteeClaim)
class GuaranteeClaimAdmin(admin.ModelAdmin):
    list_display = ('id', 'project', 'homeowner', 'provider', 'status', 'claim_amount', 'created_at')
    list_filter = ('status', 'created_at')
    search_fields = ('claim_reason', 'homeowner__email', 'provider__business_name', 'project__title')
    readonly_fields = ('created_at', 'updated_at')
