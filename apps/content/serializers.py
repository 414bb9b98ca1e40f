# apps/content/serializers.py
from rest_framework import serializers


class RecordSerializer(serializers.Serializer):
    """Backend nulls in text fields render as empty text"""

    def to_representation(self, instance):
        data = super().to_representation(instance)
        for name, field in self.fields.items():
            if data.get(name) is None and isinstance(field, serializers.CharField) and not field.allow_null:
                data[name] = ''
        return data


class CourseSerializer(RecordSerializer):
    """Read-only shape of a course card fetched from the backend"""

    id = serializers.CharField(source='_id', default='')
    class_level = serializers.CharField(default='')
    board = serializers.CharField(default='')
    teacher_name = serializers.CharField(default='')
    schedule = serializers.CharField(default='')
    subjects = serializers.ListField(child=serializers.CharField(), default=list)


class MaterialSerializer(RecordSerializer):
    """Study material link; description is optional"""

    id = serializers.CharField(source='_id', default='')
    title = serializers.CharField(default='')
    class_level = serializers.CharField(default='')
    subject = serializers.CharField(default='')
    kind = serializers.CharField(default='')
    url = serializers.CharField(default='')
    description = serializers.CharField(default='')


class AnnouncementSerializer(RecordSerializer):
    id = serializers.CharField(source='_id', default='')
    title = serializers.CharField(default='')
    message = serializers.CharField(default='')
    date = serializers.CharField(default=None, allow_null=True)
    pinned = serializers.BooleanField(default=False)
