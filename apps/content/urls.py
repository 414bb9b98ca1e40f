# apps/content/urls.py
from django.urls import path
from . import views

urlpatterns = [
    path('courses', views.CoursesView.as_view(), name='courses'),
    path('materials', views.MaterialsView.as_view(), name='materials'),
    path('announcements', views.AnnouncementsView.as_view(), name='announcements'),
]
