"""
Content page views: metadata editor API, admin preview and public pages.
"""
import logging

from django.contrib.auth.decorators import login_required
from django.http import Http404, HttpResponseForbidden
from django.shortcuts import get_object_or_404, render
from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from .models import Page
from .permissions import IsContentAdmin
from .preview import page_context
from .serializers import PageMetadataSerializer

logger = logging.getLogger(__name__)


@api_view(['GET', 'PATCH'])
@permission_classes([IsAuthenticated, IsContentAdmin])
def page_metadata(request, page_id):
    """
    GET   /api/v1/content/pages/{id}/metadata/ - Current SEO fields plus editor descriptors.
    PATCH /api/v1/content/pages/{id}/metadata/ - Update any of meta_title, meta_description,
                                                  meta_keywords, og_image.
    """
    page = get_object_or_404(Page, id=page_id)

    if request.method == 'GET':
        return Response(PageMetadataSerializer(page).data)

    serializer = PageMetadataSerializer(page, data=request.data, partial=True)
    if not serializer.is_valid():
        return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)
    serializer.save()
    logger.info(f"Updated metadata for page {page.id} ({', '.join(sorted(serializer.validated_data))})")
    return Response(serializer.data)


@login_required
def page_preview(request, page_id):
    """GET /content/preview/{id}/ - Admin preview, drafts included."""
    if not request.user.is_content_admin:
        return HttpResponseForbidden('Only content administrators can preview pages.')
    page = Page.objects.prefetch_related('sections').filter(id=page_id).first()
    context = page_context(page, preview=True)
    return render(request, 'content/preview.html', context, status=200 if page else 404)


def content_page(request, slug):
    """GET /p/{slug}/ - Published content page."""
    page = Page.objects.prefetch_related('sections').filter(slug=slug, is_published=True).first()
    if page is None:
        raise Http404(f"No published page '{slug}'")
    return render(request, 'content/page.html', page_context(page))
