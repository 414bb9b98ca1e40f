# apps/website/context_processors.py
from django.conf import settings
from django.utils import timezone


def brand(request):
    """Academy name, tagline and footer year for the shared layout"""
    return {
        'brand': {
            'name': settings.ACADEMY_NAME,
            'tagline': settings.ACADEMY_TAGLINE,
        },
        'current_year': timezone.now().year,
    }
