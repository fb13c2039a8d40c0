from django.contrib import admin
from .models import Page, Section


class SectionInline(admin.StackedInline):
    model = Section
    extra = 0


@admin.register(Page)
class PageAdmin(admin.ModelAdmin):
    list_display = ('title', 'slug', 'layout', 'is_published', 'updated_at')
    list_filter = ('is_published', 'layout')
    search_fields = ('title', 'slug', 'meta_title')
    prepopulated_fields = {'slug': ('title',)}
    readonly_fields = ('created_at', 'updated_at')
    inlines = [SectionInline]
