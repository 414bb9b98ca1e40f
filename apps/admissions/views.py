# apps/admissions/views.py
import logging

from django.contrib import messages
from django.views.generic import FormView

from apps.core.backend_client import BackendClient, BackendError
from .forms import AdmissionForm
from .serializers import AdmissionApplicationSerializer

logger = logging.getLogger(__name__)

ADMISSIONS_ENDPOINT = '/api/admissions'
SUBMISSION_FAILED = 'Submission failed. Please try again.'


class AdmissionState:
    EDITING = 'editing'
    SUBMITTING = 'submitting'
    SUBMITTED = 'submitted'


class AdmissionView(FormView):
    """
    Admission intake form.

    editing -> submitting -> submitted on success, back to editing with the
    draft intact when the backend rejects or cannot be reached.
    """
    template_name = 'admission_form.html'
    success_template_name = 'admission_thank_you.html'
    form_class = AdmissionForm

    def setup(self, request, *args, **kwargs):
        super().setup(request, *args, **kwargs)
        self.state = AdmissionState.EDITING

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        context['state'] = self.state
        return context

    def form_valid(self, form):
        self.state = AdmissionState.SUBMITTING
        body = AdmissionApplicationSerializer(form.cleaned_data).data

        client = BackendClient.for_request(self.request)
        try:
            client.post(ADMISSIONS_ENDPOINT, dict(body))
        except BackendError as e:
            logger.warning("Admission submission failed: %s", e)
            messages.error(self.request, SUBMISSION_FAILED)
            self.state = AdmissionState.EDITING
            return self.render_to_response(self.get_context_data(form=form))

        logger.info('Admission submitted (standard %s, %s)', body['standard'], body['board'])
        self.state = AdmissionState.SUBMITTED
        return self.response_class(
            request=self.request,
            template=[self.success_template_name],
            context=self.get_context_data(form=form),
            using=self.template_engine,
        )
