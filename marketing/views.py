"""
Public marketing pages. Static content only; nothing here touches the database.
"""
from django.shortcuts import render
from django.views.decorators.http import require_GET

from . import content


@require_GET
def home(request):
    return render(request, 'marketing/home.html', {
        'hero': content.HERO,
        'features': content.HOME_FEATURES,
        'steps': content.HOW_IT_WORKS,
        'projects': content.FEATURED_PROJECTS,
        'testimonials': content.HOME_TESTIMONIALS,
    })


@require_GET
def pricing(request):
    """
    GET /pricing/?for=homeowner|business&billing=monthly|yearly
    Unknown values fall back to homeowner plans billed monthly.
    """
    audience = request.GET.get('for')
    if audience not in content.PLANS:
        audience = content.HOMEOWNER
    billing = request.GET.get('billing')
    if billing not in (content.MONTHLY, content.YEARLY):
        billing = content.MONTHLY

    return render(request, 'marketing/pricing.html', {
        'audience': audience,
        'billing': billing,
        'plans': content.pricing_plans(audience, billing),
        'referral': content.REFERRALS[audience],
        'commission': content.COMMISSION_OPTION if audience == content.BUSINESS else None,
        'faqs': content.FAQS[audience],
    })


@require_GET
def features(request):
    return render(request, 'marketing/features.html', {
        'features': content.PLATFORM_FEATURES,
        'audiences': content.AUDIENCES,
    })


@require_GET
def provider_features(request):
    plan = content.PROVIDER_PLAN
    return render(request, 'marketing/provider_features.html', {
        'features': content.PROVIDER_FEATURES,
        'steps': content.PROVIDER_STEPS,
        'benefits': content.PROVIDER_BENEFITS,
        'plan': plan,
        'monthly_price': content.plan_price(plan, content.MONTHLY),
        'yearly_price': content.plan_price(plan, content.YEARLY),
        'testimonials': content.PROVIDER_TESTIMONIALS,
    })


@require_GET
def testimonials(request):
    return render(request, 'marketing/testimonials.html', {
        'featured': content.with_stars(content.FEATURED_TESTIMONIALS),
        'testimonials': content.with_stars(content.TESTIMONIALS),
        'stats': content.STATS,
    })


@require_GET
def sitemap(request):
    return render(request, 'marketing/sitemap.html', {'sections': content.SITE_MAP})
