# academy_site/urls.py
from django.urls import path, include

urlpatterns = [
    # Public pages
    path('', include('apps.website.urls')),
    path('', include('apps.admissions.urls')),
    path('', include('apps.content.urls')),
]

handler404 = 'apps.website.views.page_not_found'
