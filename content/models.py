"""
Content pages managed from the admin page editor.

Page bodies, custom CSS/JS and tracking snippets are stored and rendered
verbatim; editors are trusted.
"""
from django.db import models


class Page(models.Model):
    LAYOUT_CHOICES = [
        ('default', 'Default'),
        ('full-width', 'Full Width'),
        ('sidebar-right', 'Sidebar Right'),
        ('sidebar-left', 'Sidebar Left'),
        ('landing', 'Landing Page'),
    ]

    title = models.CharField(max_length=255)
    slug = models.SlugField(max_length=255, unique=True)
    content = models.TextField(blank=True)
    layout = models.CharField(max_length=20, choices=LAYOUT_CHOICES, default='default')
    is_published = models.BooleanField(default=False)

    meta_title = models.CharField(max_length=255, blank=True)
    meta_description = models.TextField(blank=True)
    meta_keywords = models.CharField(max_length=500, blank=True)
    og_image = models.URLField(max_length=1000, blank=True)

    custom_css = models.TextField(blank=True)
    custom_js = models.TextField(blank=True)
    tracking_code = models.TextField(blank=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'content_pages'
        ordering = ['title']

    def __str__(self):
        return self.title


class Section(models.Model):
    TYPE_CHOICES = [
        ('text', 'Text'),
        ('hero', 'Hero'),
        ('gallery', 'Gallery'),
        ('features', 'Features'),
        ('cta', 'Call to Action'),
        ('testimonials', 'Testimonials'),
        ('custom', 'Custom HTML'),
    ]

    page = models.ForeignKey(Page, on_delete=models.CASCADE, related_name='sections')
    title = models.CharField(max_length=255, blank=True)
    type = models.CharField(max_length=20, choices=TYPE_CHOICES, default='text')
    content = models.TextField(blank=True)
    custom_css = models.TextField(blank=True)
    order = models.PositiveIntegerField(default=0)

    class Meta:
        db_table = 'content_sections'
        ordering = ['order', 'id']

    def __str__(self):
        return f"{self.page.title}: {self.title or self.get_type_display()}"
