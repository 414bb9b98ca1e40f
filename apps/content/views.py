# apps/content/views.py
import logging

from django.views.generic import TemplateView

from apps.core.backend_client import BackendClient, BackendError
from .serializers import CourseSerializer, MaterialSerializer, AnnouncementSerializer

logger = logging.getLogger(__name__)


class CollectionView(TemplateView):
    """
    Render one read-only collection fetched from the backend.

    A failed fetch is not an error for the visitor: the page renders with
    an empty list, exactly like an empty collection.
    """
    endpoint = None
    serializer_class = None

    def get_items(self):
        client = BackendClient.for_request(self.request)

        try:
            payload = client.get(self.endpoint)
        except BackendError as e:
            logger.warning("Could not load %s: %s", self.endpoint, e)
            return []

        if not isinstance(payload, list):
            logger.warning("Expected a list from %s, got %s", self.endpoint, type(payload).__name__)
            return []

        return self.serializer_class(payload, many=True).data

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        context['items'] = self.get_items()
        return context


class CoursesView(CollectionView):
    template_name = 'courses.html'
    endpoint = '/api/courses'
    serializer_class = CourseSerializer


class MaterialsView(CollectionView):
    template_name = 'materials.html'
    endpoint = '/api/materials'
    serializer_class = MaterialSerializer


class AnnouncementsView(CollectionView):
    template_name = 'announcements.html'
    endpoint = '/api/announcements'
    serializer_class = AnnouncementSerializer
