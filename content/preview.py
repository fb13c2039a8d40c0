"""
Page preview and public page rendering context.
"""


def _get(page, name, default=''):
    if isinstance(page, dict):
        return page.get(name) or default
    return getattr(page, name, None) or default


def build_head(page):
    """Document title and meta tags for a page; absent metadata is left out."""
    meta = []
    description = _get(page, 'meta_description')
    keywords = _get(page, 'meta_keywords')
    og_image = _get(page, 'og_image')
    if description:
        meta.append({'name': 'description', 'content': description})
    if keywords:
        meta.append({'name': 'keywords', 'content': keywords})
    if og_image:
        meta.append({'property': 'og:image', 'content': og_image})
    return {
        'title': _get(page, 'meta_title') or _get(page, 'title'),
        'meta': meta,
    }


def _sections(page):
    if isinstance(page, dict):
        return page.get('sections') or []
    return list(page.sections.all())


def section_context(section, preview):
    css = _get(section, 'custom_css')
    # The editor preview only injects CSS for custom HTML sections
    if preview and _get(section, 'type') != 'custom':
        css = ''
    return {
        'id': _get(section, 'id', None),
        'title': _get(section, 'title'),
        'type': _get(section, 'type', 'text'),
        'content': _get(section, 'content'),
        'custom_css': css,
    }


def page_context(page, preview=False):
    """Template context for rendering ``page``; ``None`` yields an empty preview."""
    if page is None:
        return {'page': None}
    return {
        'page': {
            'title': _get(page, 'title'),
            'layout': _get(page, 'layout', 'default'),
            'content': _get(page, 'content'),
            'custom_css': _get(page, 'custom_css'),
            'custom_js': _get(page, 'custom_js'),
            'tracking_code': _get(page, 'tracking_code'),
            'sections': [section_context(s, preview) for s in _sections(page)],
        },
        'head': build_head(page),
        'preview': preview,
    }
