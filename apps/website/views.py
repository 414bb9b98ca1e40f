# apps/website/views.py
import re
from urllib.parse import quote

from django.conf import settings
from django.shortcuts import render
from django.views.generic import TemplateView

FEATURES = [
    {'title': 'Admissions', 'text': 'Apply online for the new academic year.'},
    {'title': 'Courses', 'text': '1st–10th standards for SSC & CBSE.'},
    {'title': 'Study Materials', 'text': 'Access PDFs, videos, and notes.'},
    {'title': 'Announcements', 'text': 'Stay updated with schedules and events.'},
]


class HomeView(TemplateView):
    template_name = 'landing_page.html'

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        context['features'] = FEATURES
        context['spline_scene_url'] = settings.SPLINE_SCENE_URL
        return context


class ContactView(TemplateView):
    template_name = 'contact.html'

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        phone = settings.ACADEMY_PHONE
        context['contact'] = {
            'address': settings.ACADEMY_ADDRESS,
            'phone': phone,
            'whatsapp_url': f"https://wa.me/{re.sub(r'[^0-9]', '', phone)}",
            'map_url': f"https://maps.google.com/?q={quote(settings.ACADEMY_ADDRESS)}",
        }
        return context


def page_not_found(request, exception):
    """Unknown paths keep the layout and leave the main area empty"""
    return render(request, '404.html', status=404)
