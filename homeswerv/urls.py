"""
Root URLconf.

HTML pages (marketing site, published content pages, admin preview) live at
the root; the JSON API is mounted under /api/v1/.
"""
from django.contrib import admin
from django.contrib.auth import views as auth_views
from django.urls import path, include

from .views import not_found, server_error

urlpatterns = [
    path('admin/', admin.site.urls),
    path('api/v1/', include('homeswerv.api_urls')),
    # Session sign-in for HTML pages; any active account, not just is_staff
    path('accounts/login/', auth_views.LoginView.as_view(), name='site-login'),
    path('accounts/logout/', auth_views.LogoutView.as_view(), name='site-logout'),
    path('content/', include('content.urls')),
    path('p/', include('content.page_urls')),
    path('', include('marketing.urls')),
]

handler404 = not_found
handler500 = server_error
