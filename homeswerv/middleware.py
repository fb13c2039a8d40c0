"""
Middleware for homeswerv.
"""
from django.middleware.common import CommonMiddleware


class APICommonMiddleware(CommonMiddleware):
    """
    APPEND_SLASH for HTML pages only. A POST to /api/v1/auth/login (no slash)
    must reach the URLconf and 404 rather than be redirected without its body.
    """
    def should_redirect_with_slash(self, request):
        return not request.path.startswith('/api/') and super().should_redirect_with_slash(request)
