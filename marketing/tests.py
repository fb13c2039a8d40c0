"""
Tests for marketing app - public pages and pricing data.
"""
import pytest

from marketing import content


class TestPricingData:

    def test_monthly_prices(self):
        plans = content.pricing_plans(content.HOMEOWNER, content.MONTHLY)
        assert [p['price']['amount'] for p in plans] == ['$0', '$9.99']
        assert plans[1]['price']['period'] == '/mo'
        assert [p['highlighted'] for p in plans] == [False, True]

    def test_yearly_prices(self):
        plans = content.pricing_plans(content.BUSINESS, content.YEARLY)
        assert [p['price']['amount'] for p in plans] == ['$290', '$990', 'Custom Pricing']
        assert plans[0]['price']['period'] == '/year'
        assert plans[2]['price']['period'] == ''
        assert plans[2]['cta_path'] == '/contact'

    def test_provider_plan_keeps_cents(self):
        assert content.plan_price(content.PROVIDER_PLAN, content.YEARLY)['amount'] == '$287.90'

    def test_star_row(self):
        assert content.star_row(4) == [True, True, True, True, False]
        assert content.star_row(None) == [False] * 5
        assert content.star_row(9) == [True] * 5

    def test_testimonials_cover_both_roles(self):
        roles = {t['role'] for t in content.FEATURED_TESTIMONIALS + content.TESTIMONIALS}
        assert 'Homeowner' in roles
        assert len(content.TESTIMONIALS) == 8


@pytest.mark.django_db
class TestMarketingPages:

    @pytest.mark.parametrize('path, text', [
        ('/', 'Your Community Hub'),
        ('/features/', 'Everything You Need in One Place'),
        ('/features/providers/', 'Tools to Grow Your Business'),
        ('/features/testimonials/', 'Featured Success Stories'),
        ('/sitemap/', 'Service Provider Area'),
        ('/pricing/', 'Pricing Plans'),
    ])
    def test_page_renders(self, client, path, text):
        response = client.get(path)
        assert response.status_code == 200
        assert text in response.content.decode()

    def test_pricing_defaults_to_homeowner_monthly(self, client):
        html = client.get('/pricing/').content.decode()
        assert 'Free Forever' in html
        assert '$9.99' in html
        assert 'Most Popular' in html
        assert 'Commission Option' not in html

    def test_pricing_business_yearly(self, client):
        html = client.get('/pricing/?for=business&billing=yearly').content.decode()
        assert 'Enterprise' in html
        assert '$990' in html
        assert 'Commission Option' in html
        assert 'How does the commission option work?' in html

    def test_pricing_unknown_params_fall_back(self, client):
        html = client.get('/pricing/?for=landlord&billing=weekly').content.decode()
        assert 'Free Forever' in html
        assert '/mo' in html

    def test_testimonials_show_ratings(self, client):
        html = client.get('/features/testimonials/').content.decode()
        assert html.count('star star-filled') == sum(t['rating'] for t in content.FEATURED_TESTIMONIALS + content.TESTIMONIALS)
        assert 'Chicago, IL' in html

    def test_post_not_allowed(self, client):
        assert client.post('/pricing/').status_code == 405
