"""
Copy and data for the public marketing pages.
"""
from decimal import Decimal

from common.formatting import format_currency

HOMEOWNER = 'homeowner'
BUSINESS = 'business'
MONTHLY = 'monthly'
YEARLY = 'yearly'

STAR_COUNT = 5

HERO = {
    'title': 'Home Swerv',
    'tagline': 'Your Community Hub',
    'description': 'Find qualified professionals for your home projects and manage everything in one place.',
    'trust_line': 'Trusted by homeowners and service providers across the country',
}

HOME_FEATURES = [
    {
        'name': 'Find Trusted Providers',
        'description': (
            "Browse verified service providers with ratings and reviews from homeowners in your area. "
            "Our verification process ensures you're working with qualified professionals."
        ),
    },
    {
        'name': 'Project Management',
        'description': (
            'Create and manage projects, track progress, and communicate with providers all in one place. '
            'Set milestones, share documents, and keep everything organized.'
        ),
    },
    {
        'name': 'Smart Scheduling',
        'description': (
            'Book appointments and manage your calendar to keep your projects on track. '
            'Receive reminders and sync with your favorite calendar apps for seamless planning.'
        ),
    },
    {
        'name': 'Secure Messaging',
        'description': (
            'Communicate directly with service providers through our secure messaging system. '
            'Share photos, documents, and project details in a centralized conversation.'
        ),
    },
]

HOW_IT_WORKS = [
    {'title': 'Create Your Project',
     'description': 'Describe what you need done and provide details about your home project.'},
    {'title': 'Match with Providers',
     'description': 'Get matched with qualified service providers in your area who can help.'},
    {'title': 'Compare & Select',
     'description': 'Review profiles, compare quotes, and select the best provider for your needs.'},
    {'title': 'Complete Your Project',
     'description': 'Work with your provider through our platform and enjoy your completed project.'},
]

FEATURED_PROJECTS = [
    {
        'category': 'Kitchen Renovation',
        'title': 'Modern Kitchen Transformation',
        'description': 'Complete kitchen remodel with custom cabinets, quartz countertops, and new appliances.',
        'owner': 'John D.',
        'image': 'https://images.pexels.com/photos/1643383/pexels-photo-1643383.jpeg?auto=compress&cs=tinysrgb&w=1260&h=750&dpr=1',
    },
    {
        'category': 'Bathroom Remodel',
        'title': 'Luxury Bathroom Upgrade',
        'description': 'Complete bathroom renovation with walk-in shower, freestanding tub, and heated floors.',
        'owner': 'Sarah M.',
        'image': 'https://images.pexels.com/photos/1571460/pexels-photo-1571460.jpeg?auto=compress&cs=tinysrgb&w=1260&h=750&dpr=1',
    },
    {
        'category': 'Landscaping',
        'title': 'Backyard Oasis Creation',
        'description': 'Complete backyard transformation with patio, fire pit, and professional landscaping.',
        'owner': 'Robert J.',
        'image': 'https://images.pexels.com/photos/1080721/pexels-photo-1080721.jpeg?auto=compress&cs=tinysrgb&w=1260&h=750&dpr=1',
    },
]

HOME_TESTIMONIALS = [
    {
        'author': 'John Doe',
        'role': 'Homeowner',
        'content': (
            'I found a great plumber through Home Swerv. The whole process was smooth, and I could track '
            'the project from start to finish. The platform made communication easy and stress-free.'
        ),
    },
    {
        'author': 'Jane Smith',
        'role': 'Service Provider',
        'content': (
            'As an electrician, this platform has helped me find new clients and grow my business. The '
            'scheduling tools save me hours every week, and the payment system is reliable and fast.'
        ),
    },
    {
        'author': 'Robert Johnson',
        'role': 'Homeowner',
        'content': (
            'The community inspiration hub gave me great ideas for my kitchen renovation. I found a '
            "contractor through the platform and couldn't be happier with the results."
        ),
    },
]

PLATFORM_FEATURES = [
    {'name': 'Verified Providers',
     'description': ('All service providers undergo thorough background checks and credential '
                     'verification before joining our platform.')},
    {'name': 'Secure Payments',
     'description': ('Our secure payment system protects both homeowners and service providers, '
                     'releasing funds only when jobs are completed satisfactorily.')},
    {'name': 'Service Guarantee',
     'description': ("If you're not satisfied with the service, we'll work with you to make it right "
                     'or provide a refund.')},
    {'name': 'Transparent Pricing',
     'description': 'Get upfront quotes from multiple providers before booking, with no hidden fees or surprises.'},
    {'name': 'Scheduling & Reminders',
     'description': 'Easily schedule appointments and receive automated reminders to keep your projects on track.'},
    {'name': 'Verified Reviews',
     'description': ('Read authentic reviews from real customers to help you choose the right service '
                     'provider for your needs.')},
    {'name': 'Project Management',
     'description': ('Track the progress of your projects from start to finish with our intuitive '
                     'project management tools.')},
    {'name': 'Messaging System',
     'description': 'Communicate directly with service providers through our secure in-app messaging system.'},
]

AUDIENCES = [
    {
        'title': 'For Homeowners',
        'description': ('Find reliable service providers, manage your home projects, and get the quality '
                        'service you deserve.'),
        'points': [
            'Access a network of verified, background-checked service providers',
            'Compare quotes from multiple providers before making a decision',
            'Schedule appointments that fit your busy lifestyle',
            'Pay securely through our platform with satisfaction guarantee',
        ],
        'url_name': None,
    },
    {
        'title': 'For Service Providers',
        'description': ('Grow your business, find new clients, and streamline your operations with our '
                        'powerful platform.'),
        'points': [
            'Connect with homeowners actively seeking your services',
            'Manage your schedule, quotes, and client communications in one place',
            'Receive secure, timely payments for completed jobs',
            'Build your reputation through verified reviews from satisfied customers',
        ],
        'url_name': 'provider-features',
    },
]

PROVIDER_FEATURES = [
    {'name': 'Business Profile',
     'description': ('Create a comprehensive profile showcasing your services, expertise, credentials, '
                     'and past work to attract potential clients.')},
    {'name': 'Lead Generation',
     'description': 'Receive qualified leads from homeowners actively seeking your specific services in your service area.'},
    {'name': 'Quote Management',
     'description': ('Create and send professional quotes to potential clients, with the ability to '
                     'customize details and pricing.')},
    {'name': 'Scheduling Tools',
     'description': ('Manage your appointments, availability, and job calendar all in one place to '
                     'optimize your workflow.')},
    {'name': 'Secure Payments',
     'description': ('Receive payments promptly and securely through our platform, with transparent '
                     'processing fees and quick transfers.')},
    {'name': 'Review Management',
     'description': ('Build your reputation with verified reviews from clients, and respond to feedback '
                     'to showcase your customer service.')},
]

PROVIDER_STEPS = [
    {'title': 'Create Your Profile',
     'description': ('Sign up and build your professional profile, showcasing your services, experience, '
                     'credentials, and past work. Add photos of completed projects to highlight your quality.')},
    {'title': 'Set Your Service Area',
     'description': ('Define your service area by zip codes or radius to ensure you only receive leads '
                     'from clients in locations you serve.')},
    {'title': 'Receive and Respond to Leads',
     'description': ('Get notified of new project requests that match your services and location. '
                     'Review project details and submit quotes to interested homeowners.')},
    {'title': 'Manage Jobs and Schedule',
     'description': ('When your quote is accepted, use our tools to schedule the job, communicate with '
                     'the client, and manage project details all in one place.')},
    {'title': 'Complete Jobs and Get Paid',
     'description': ('Mark jobs as complete in the system, and receive secure payments through our '
                     'platform. Build your reputation with reviews from satisfied clients.')},
]

PROVIDER_BENEFITS = [
    {'title': 'Grow Your Business',
     'description': ('Access a steady stream of qualified leads without the high cost of traditional '
                     'advertising or lead generation services.')},
    {'title': 'Save Time',
     'description': ('Streamline your operations with integrated tools for quoting, scheduling, client '
                     'communication, and payment processing.')},
    {'title': 'Build Your Reputation',
     'description': ('Establish credibility and trust with verified reviews from real clients, helping '
                     'you stand out in a competitive market.')},
]

PROVIDER_PLAN = {
    'name': 'Provider Plan',
    'description': ('Everything you need to grow your service business and manage your operations '
                    'efficiently.'),
    'monthly_price': Decimal('29.99'),
    'yearly_price': Decimal('287.90'),
    'yearly_saving': '20%',
    'trial': '14-day free trial, no credit card required',
    'features': [
        'Business profile listing',
        'Unlimited leads in your service area',
        'Quote management system',
        'Client communication tools',
        'Job scheduling calendar',
        'Payment processing (2% fee)',
        'Review management',
        'Analytics dashboard',
        'Marketing tools',
    ],
}

PROVIDER_TESTIMONIALS = [
    {
        'author': 'Robert Johnson',
        'business': 'Johnson Plumbing Services',
        'content': (
            'Since joining Home Swerv, my plumbing business has grown by 35%. The platform connects me '
            'with serious clients who are ready to hire, and the scheduling and payment tools have '
            'streamlined my operations.'
        ),
    },
    {
        'author': 'David Chen',
        'business': 'Chen Electrical Solutions',
        'content': (
            'As an electrician, I was spending too much time on paperwork and chasing payments. Home '
            'Swerv has simplified everything from quoting to getting paid, allowing me to focus on '
            'what I do best.'
        ),
    },
    {
        'author': 'Maria Rodriguez',
        'business': 'Rodriguez Home Cleaning',
        'content': (
            'The quality of leads on Home Swerv is exceptional. Homeowners come to the platform with '
            'specific needs and are ready to hire, which has significantly increased my conversion rate '
            'compared to other lead sources.'
        ),
    },
]

# Prices are whole-period amounts; ``None`` means the plan is quoted on request.
PLANS = {
    HOMEOWNER: [
        {
            'name': 'Free Forever',
            'description': 'Perfect for homeowners with occasional projects',
            'monthly_price': Decimal('0'),
            'yearly_price': Decimal('0'),
            'features': [
                'Basic vision board',
                'Project planning tools',
                'Provider directory',
                'Local deals and offers',
                'Community forum access',
                'Email support',
            ],
            'cta': 'Get Started',
            'highlighted': False,
        },
        {
            'name': 'Premium',
            'description': 'For homeowners with multiple renovation needs',
            'monthly_price': Decimal('9.99'),
            'yearly_price': Decimal('99'),
            'features': [
                'Everything in Free plan',
                'AI-powered cost estimates',
                'Advanced project tracking',
                'Priority matching with providers',
                'Document storage',
                'Priority support',
                'Exclusive premium deals',
            ],
            'cta': 'Start Free Trial',
            'highlighted': True,
        },
    ],
    BUSINESS: [
        {
            'name': 'Basic',
            'description': 'For small service providers looking to grow',
            'monthly_price': Decimal('29'),
            'yearly_price': Decimal('290'),
            'features': [
                'Business profile listing',
                'Up to 10 project bids per month',
                'Basic analytics dashboard',
                'Client management tools',
                'Email support',
                '30-day free trial',
            ],
            'cta': 'Start Free Trial',
            'highlighted': False,
        },
        {
            'name': 'Pro',
            'description': 'For established service providers',
            'monthly_price': Decimal('99'),
            'yearly_price': Decimal('990'),
            'features': [
                'Everything in Basic plan',
                'Featured provider listing',
                'Unlimited project bidding',
                'Advanced analytics dashboard',
                'Marketing tools',
                'Priority support',
                'Client relationship management',
                'Payment processing',
            ],
            'cta': 'Start Free Trial',
            'highlighted': True,
        },
        {
            'name': 'Enterprise',
            'description': 'For large service companies with custom needs',
            'monthly_price': None,
            'yearly_price': None,
            'custom_price': 'Custom Pricing',
            'features': [
                'Everything in Pro plan',
                'Dedicated account manager',
                'Custom integrations',
                'Team collaboration tools',
                'Advanced reporting',
                'API access',
                'White-label options',
                'Volume discounts',
            ],
            'cta': 'Contact Sales',
            'highlighted': False,
        },
    ],
}

REFERRALS = {
    HOMEOWNER: {
        'description': 'Earn $10 credit for every 3 new customers or business owners you refer to Home Swerv.',
        'reward': '$10 credit per referral (for every 3 new users)',
    },
    BUSINESS: {
        'description': 'Get one month free for each business owner you refer who subscribes to any paid plan.',
        'reward': 'One month free per business referral',
    },
}

COMMISSION_OPTION = {
    'description': ('Prefer to pay based on results? Our commission option allows you to pay just 5% per '
                    'project won, with reduced subscription fees.'),
    'points': [
        '5% commission on projects won through our platform',
        'Reduced monthly subscription fees',
        'Pay only when you succeed',
    ],
}

_SHARED_FAQS = [
    ('Can I cancel my subscription at any time?',
     'Yes, you can cancel your subscription at any time. Your plan will remain active until the end of '
     'your current billing period.'),
    ('What payment methods do you accept?',
     'We accept all major credit cards, PayPal, and bank transfers for annual plans.'),
    ('Do you offer discounts for non-profits or educational institutions?',
     'Yes, we offer special pricing for non-profits, educational institutions, and community '
     'organizations. Please contact our sales team for more information.'),
    ('Can I upgrade or downgrade my plan later?',
     'Absolutely! You can upgrade your plan at any time and the new features will be immediately '
     'available. If you downgrade, the changes will take effect at the start of your next billing cycle.'),
]

FAQS = {
    HOMEOWNER: _SHARED_FAQS + [
        ('Is there a limit to how many projects I can create?',
         'The Free plan allows basic project planning. Premium plans offer unlimited project creation '
         'with advanced features.'),
        ('How does the referral program work?',
         "For every 3 new users (homeowners or service providers) you refer who sign up, you'll receive "
         'a $10 credit toward your subscription or services.'),
    ],
    BUSINESS: _SHARED_FAQS + [
        ('How does the commission option work?',
         'With our commission option, you pay a reduced monthly subscription fee plus 5% of the project '
         'value for jobs you win through our platform. This option is great for businesses that want to '
         'minimize upfront costs.'),
        ('How does the referral program work?',
         "For each business owner you refer who subscribes to a paid plan, you'll receive one month of "
         'your current subscription for free.'),
    ],
}

FEATURED_TESTIMONIALS = [
    {
        'author': 'Sarah Johnson', 'role': 'Homeowner', 'location': 'Chicago, IL', 'rating': 5,
        'content': (
            'Home Swerv completely transformed how I find home services. Their platform connected me with '
            'a top-notch plumber who fixed my emergency leak within hours. The transparent pricing and '
            'secure payment system gave me peace of mind throughout the process.'
        ),
    },
    {
        'author': 'Michael Rodriguez', 'role': 'Electrician', 'location': 'Miami, FL', 'rating': 5,
        'content': (
            "As an electrician, joining Home Swerv has been game-changing for my business. I've seen a 40% "
            'increase in new clients, and the scheduling system has eliminated the back-and-forth that used '
            'to eat up my time. The platform handles payments seamlessly, letting me focus on my craft.'
        ),
    },
]

TESTIMONIALS = [
    {
        'author': 'Jennifer Lee', 'role': 'Homeowner', 'location': 'Austin, TX', 'rating': 5,
        'content': (
            'I needed my entire house painted before a family reunion, and Home Swerv delivered beyond my '
            'expectations. The painter I found through the platform was professional, punctual, and did '
            'exceptional work. The price was exactly as quoted with no surprises.'
        ),
    },
    {
        'author': 'David Thompson', 'role': 'Landscaper', 'location': 'Portland, OR', 'rating': 5,
        'content': (
            'Home Swerv has revolutionized how I run my landscaping business. The platform handles all my '
            'scheduling, client communications, and payments, allowing me to grow my team and take on more '
            'projects. The review system has helped me build credibility in my community.'
        ),
    },
    {
        'author': 'Emily Wilson', 'role': 'Homeowner', 'location': 'Denver, CO', 'rating': 4,
        'content': (
            'After a terrible experience with a contractor I found through a classified ad, I turned to Home '
            "Swerv for my kitchen renovation. The difference was night and day! The platform's verification "
            'process ensured I got a qualified professional, and the project management tools kept '
            'everything on track.'
        ),
    },
    {
        'author': 'Robert Garcia', 'role': 'HVAC Specialist', 'location': 'Phoenix, AZ', 'rating': 5,
        'content': (
            'As a small HVAC business owner, marketing was always my biggest challenge. Since joining Home '
            "Swerv, I've been able to connect with homeowners in my area who need exactly the services I "
            "provide. The platform's reputation system has helped me stand out from larger competitors."
        ),
    },
    {
        'author': 'Michelle Parker', 'role': 'Homeowner', 'location': 'Seattle, WA', 'rating': 5,
        'content': (
            "I've used Home Swerv for everything from regular house cleaning to emergency plumbing repairs. "
            'The consistency in quality across different service categories is impressive. I especially '
            'appreciate being able to schedule recurring services with providers I trust.'
        ),
    },
    {
        'author': 'Lisa Chen', 'role': 'Cleaning Service Owner', 'location': 'Boston, MA', 'rating': 5,
        'content': (
            "My cleaning business has thrived since I joined Home Swerv. The platform's fair pricing "
            'structure means I can offer competitive rates while still making a good living. The secure '
            'payment system ensures I get paid promptly for every job.'
        ),
    },
    {
        'author': 'James Wilson', 'role': 'Homeowner', 'location': 'Atlanta, GA', 'rating': 4,
        'content': (
            'When a storm damaged our roof, we needed help fast. Home Swerv connected us with a roofing '
            'contractor who came out the same day for an assessment. The entire repair process was smooth, '
            'and we appreciated being able to track progress through the platform.'
        ),
    },
    {
        'author': 'Thomas Brown', 'role': 'Handyman', 'location': 'Nashville, TN', 'rating': 5,
        'content': (
            "As a handyman offering multiple services, I was struggling to market myself effectively. Home "
            "Swerv's platform allows me to showcase my diverse skills and connect with homeowners needing "
            'exactly what I offer. My calendar is now consistently full.'
        ),
    },
]

STATS = [
    {'label': 'Satisfied Customers', 'value': '10,000+'},
    {'label': 'Service Providers', 'value': '2,500+'},
    {'label': 'Average Rating', 'value': '4.8/5'},
]

SITE_MAP = [
    {'title': 'Public Pages', 'links': [
        ('Home', '/'), ('About', '/about'), ('Contact', '/contact'), ('Features', '/features'),
        ('Homeowner Features', '/features/homeowners'), ('Provider Features', '/features/providers'),
        ('Testimonials', '/features/testimonials'), ('Pricing', '/pricing'),
    ]},
    {'title': 'Authentication', 'links': [
        ('Login', '/login'), ('Register', '/register'),
        ('Forgot Password', '/forgot-password'), ('Reset Password', '/reset-password'),
    ]},
    {'title': 'Homeowner Area', 'links': [
        ('Dashboard', '/homeowner/dashboard'), ('Profile', '/homeowner/profile'),
        ('Projects', '/homeowner/projects'), ('Messages', '/homeowner/messages'),
        ('Settings', '/homeowner/settings'),
    ]},
    {'title': 'Service Provider Area', 'links': [
        ('Dashboard', '/provider/dashboard'), ('Profile', '/provider/profile'),
        ('Jobs', '/provider/jobs'), ('Messages', '/provider/messages'),
        ('Settings', '/provider/settings'),
    ]},
    {'title': 'Onboarding', 'links': [
        ('User Type Selection', '/user-type-selection'),
        ('Homeowner Profile Setup', '/homeowner-profile-setup'),
        ('Provider Profile Setup', '/provider-profile-setup'),
    ]},
]


def star_row(rating):
    """Five flags, True for each filled star."""
    filled = max(0, min(STAR_COUNT, int(rating or 0)))
    return [index < filled for index in range(STAR_COUNT)]


def with_stars(testimonials):
    return [{**testimonial, 'stars': star_row(testimonial.get('rating'))} for testimonial in testimonials]


def plan_price(plan, billing=MONTHLY):
    """
    Display price for a plan under the chosen billing period, e.g.
    {'amount': '$9.99', 'period': '/mo'}. Custom-priced plans return their label.
    """
    if plan.get('custom_price'):
        return {'amount': plan['custom_price'], 'period': ''}
    if billing == YEARLY:
        return {'amount': _dollars(plan['yearly_price']), 'period': '/year'}
    return {'amount': _dollars(plan['monthly_price']), 'period': '/mo'}


def _dollars(amount):
    # Whole-dollar prices drop the cents: $0, $99, but $9.99.
    return format_currency(amount, cents=amount != amount.to_integral_value())


def pricing_plans(audience=HOMEOWNER, billing=MONTHLY):
    return [
        {
            **plan,
            'price': plan_price(plan, billing),
            'cta_path': '/contact' if plan.get('custom_price') else '/register',
        }
        for plan in PLANS[audience]
    ]
