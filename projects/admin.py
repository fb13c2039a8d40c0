from django.contrib import admin
from .models import Project


@admin.register(Project)
class ProjectAdmin(admin.ModelAdmin):
    list_display = ('title', 'homeowner', 'provider', 'status', 'progress', 'start_date', 'created_at')
    list_filter = ('status', 'created_at')
    search_fields = ('title', 'location', 'homeowner__email', 'provider__business_name')
    readonly_fields = ('created_at', 'updated_at')
