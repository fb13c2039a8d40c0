"""
Tests for content app - metadata editor, preview and public pages.
"""
import pytest
from django.contrib.auth import get_user_model
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken

from content.editor import (
    METADATA_FIELD_NAMES, apply_metadata_change, editor_fields, length_hint, validate_metadata,
)
from content.preview import build_head, page_context


class TestMetadataEditor:

    def test_change_returns_new_mapping(self):
        page = {'title': 'About', 'meta_title': ''}
        updated = apply_metadata_change(page, 'meta_title', 'About Home Swerv')
        assert updated == {'title': 'About', 'meta_title': 'About Home Swerv'}
        assert page['meta_title'] == ''

    def test_change_rejects_non_metadata_field(self):
        with pytest.raises(ValueError):
            apply_metadata_change({'title': 'About'}, 'custom_js', 'alert(1)')

    def test_fields_in_editor_order(self):
        assert METADATA_FIELD_NAMES == ('meta_title', 'meta_description', 'meta_keywords', 'og_image')

    def test_meta_title_placeholder_is_page_title(self):
        fields = editor_fields({'title': 'Pricing'})
        assert fields[0]['placeholder'] == 'Pricing'
        assert fields[0]['value'] == ''
        assert fields[1]['widget'] == 'textarea'
        assert 'Recommended length: 150-160 characters.' in fields[1]['help_text']
        assert '1200x630' in fields[3]['help_text']

    def test_length_hint(self):
        assert length_hint('meta_title', 'x' * 55) == 'ok'
        assert length_hint('meta_title', 'short') == 'short'
        assert length_hint('meta_description', 'x' * 200) == 'long'
        assert length_hint('meta_keywords', 'a, b') is None

    def test_og_image_must_be_url(self):
        result = validate_metadata({'og_image': 'not a url'})
        assert result.errors == {'og_image': 'Enter a valid image URL'}
        assert validate_metadata({'og_image': 'https://example.com/a.jpg'}).is_valid

    def test_blank_og_image_allowed(self):
        assert validate_metadata({'og_image': ''}).is_valid


class TestPreview:

    def test_head_prefers_meta_title(self):
        head = build_head({'title': 'About', 'meta_title': 'About Us | Home Swerv'})
        assert head['title'] == 'About Us | Home Swerv'

    def test_head_falls_back_to_title_and_skips_missing_tags(self):
        head = build_head({'title': 'About'})
        assert head == {'title': 'About', 'meta': []}

    def test_head_includes_keywords_and_og_image(self):
        head = build_head({
            'title': 'About', 'meta_description': 'Who we are',
            'meta_keywords': 'home, repair', 'og_image': 'https://example.com/og.jpg',
        })
        assert {'property': 'og:image', 'content': 'https://example.com/og.jpg'} in head['meta']
        assert {'name': 'keywords', 'content': 'home, repair'} in head['meta']

    def test_missing_page(self):
        assert page_context(None) == {'page': None}

    def test_section_css_only_for_custom_sections_in_preview(self):
        page = {
            'title': 'Landing',
            'sections': [
                {'id': 1, 'type': 'text', 'content': '<p>a</p>', 'custom_css': '.a{}'},
                {'id': 2, 'type': 'custom', 'content': '<p>b</p>', 'custom_css': '.b{}'},
            ],
        }
        preview = page_context(page, preview=True)['page']['sections']
        assert [s['custom_css'] for s in preview] == ['', '.b{}']
        public = page_context(page)['page']['sections']
        assert [s['custom_css'] for s in public] == ['.a{}', '.b{}']


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def create_user():
    def _create_user(email="admin@example.com", role="admin"):
        return get_user_model().objects.create_user(
            email=email, username=email, password="testpass123", role=role
        )
    return _create_user


@pytest.fixture
def admin_client(api_client, create_user):
    user = create_user()
    refresh = RefreshToken.for_user(user)
    api_client.credentials(HTTP_AUTHORIZATION=f'Bearer {str(refresh.access_token)}')
    return api_client, user


@pytest.fixture
def create_page():
    def _create_page(title="About", slug="about", **extra):
        from content.models import Page
        return Page.objects.create(title=title, slug=slug, content='<p>Hello <b>world</b></p>', **extra)
    return _create_page


@pytest.mark.django_db
class TestMetadataEndpoint:

    def test_get_metadata(self, admin_client, create_page):
        client, _ = admin_client
        page = create_page(meta_title='About Home Swerv')
        response = client.get(f'/api/v1/content/pages/{page.id}/metadata/')
        assert response.status_code == 200
        assert response.data['meta_title'] == 'About Home Swerv'
        assert response.data['fields_meta'][0]['placeholder'] == 'About'

    def test_patch_metadata(self, admin_client, create_page):
        client, _ = admin_client
        page = create_page()
        response = client.patch(f'/api/v1/content/pages/{page.id}/metadata/', {
            'meta_description': 'Who we are',
            'og_image': 'https://example.com/og.jpg',
        }, format='json')
        assert response.status_code == 200
        page.refresh_from_db()
        assert page.meta_description == 'Who we are'
        assert page.og_image == 'https://example.com/og.jpg'

    def test_patch_ignores_other_fields(self, admin_client, create_page):
        client, _ = admin_client
        page = create_page()
        client.patch(f'/api/v1/content/pages/{page.id}/metadata/', {
            'title': 'Hacked', 'meta_keywords': 'home',
        }, format='json')
        page.refresh_from_db()
        assert page.title == 'About'
        assert page.meta_keywords == 'home'

    def test_patch_invalid_image_url(self, admin_client, create_page):
        client, _ = admin_client
        page = create_page()
        response = client.patch(f'/api/v1/content/pages/{page.id}/metadata/', {
            'og_image': 'not a url',
        }, format='json')
        assert response.status_code == 400
        assert 'og_image' in response.data

    def test_homeowner_cannot_edit(self, api_client, create_user, create_page):
        user = create_user(email='owner@example.com', role='homeowner')
        api_client.force_authenticate(user=user)
        page = create_page()
        response = api_client.patch(f'/api/v1/content/pages/{page.id}/metadata/', {
            'meta_title': 'x',
        }, format='json')
        assert response.status_code == 403

    def test_missing_page(self, admin_client):
        client, _ = admin_client
        response = client.get('/api/v1/content/pages/999/metadata/')
        assert response.status_code == 404


@pytest.mark.django_db
class TestPageRendering:

    def test_published_page_renders_trusted_html(self, client, create_page):
        page = create_page(is_published=True, meta_title='About Us', custom_js='console.log(1)')
        from content.models import Section
        Section.objects.create(page=page, title='Team', type='text', content='<ul><li>Dave</li></ul>')
        response = client.get('/p/about/')
        assert response.status_code == 200
        html = response.content.decode()
        assert '<title>About Us</title>' in html
        assert '<p>Hello <b>world</b></p>' in html
        assert '<ul><li>Dave</li></ul>' in html
        assert '<script>console.log(1)</script>' in html

    def test_unpublished_page_is_404(self, client, create_page):
        create_page(is_published=False)
        response = client.get('/p/about/')
        assert response.status_code == 404

    def test_preview_includes_drafts(self, client, create_user, create_page):
        client.force_login(create_user())
        page = create_page(is_published=False, tracking_code='<img src="t.gif">')
        response = client.get(f'/content/preview/{page.id}/')
        assert response.status_code == 200
        html = response.content.decode()
        assert '<h1>About</h1>' in html
        assert '<div class="tracking"><img src="t.gif"></div>' in html

    def test_preview_missing_page(self, client, create_user):
        client.force_login(create_user())
        response = client.get('/content/preview/999/')
        assert response.status_code == 404
        assert 'No page to preview' in response.content.decode()

    def test_preview_requires_admin(self, client, create_user, create_page):
        client.force_login(create_user(email='owner@example.com', role='homeowner'))
        page = create_page()
        response = client.get(f'/content/preview/{page.id}/')
        assert response.status_code == 403

    def test_preview_requires_login(self, client, create_page):
        page = create_page()
        response = client.get(f'/content/preview/{page.id}/')
        assert response.status_code == 302

    def test_preview_login_redirect_goes_to_site_sign_in(self, client, create_page):
        page = create_page()
        response = client.get(f'/content/preview/{page.id}/')
        assert response['Location'].startswith('/accounts/login/?next=')

    def test_non_staff_admin_signs_in_and_previews(self, client, create_user, create_page):
        user = create_user()
        assert not user.is_staff
        page = create_page(is_published=False)
        preview_url = f'/content/preview/{page.id}/'
        response = client.post('/accounts/login/', {
            'username': user.email, 'password': 'testpass123', 'next': preview_url,
        })
        assert response.status_code == 302
        assert response['Location'] == preview_url
        assert client.get(preview_url).status_code == 200
