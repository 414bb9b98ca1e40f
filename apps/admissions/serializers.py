# apps/admissions/serializers.py
from rest_framework import serializers

from .forms import BOARD_CHOICES


class AdmissionApplicationSerializer(serializers.Serializer):
    """Wire format of an admission application sent to the backend"""

    student_name = serializers.CharField()
    standard = serializers.CharField()
    board = serializers.ChoiceField(choices=BOARD_CHOICES)
    dob = serializers.DateField()
    parent_name = serializers.CharField()
    mobile = serializers.CharField()
    address = serializers.CharField()
    previous_school = serializers.CharField(allow_blank=True, default='')
    photo_url = serializers.CharField(allow_blank=True, default='')
