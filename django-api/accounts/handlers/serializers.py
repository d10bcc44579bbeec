"""Serializers for notification inbox requests and responses."""

from rest_framework import serializers


class NotificationSerializer(serializers.Serializer):
    """Serializer for Notification domain model."""

    id = serializers.CharField()
    title = serializers.CharField()
    message = serializers.CharField()
    type = serializers.CharField()
    read = serializers.BooleanField()
    created_at = serializers.DateTimeField()
    related_entity_id = serializers.CharField(allow_null=True)


class NotificationRequestSerializer(serializers.Serializer):
    title = serializers.CharField(max_length=255)
    message = serializers.CharField()
    type = serializers.CharField(max_length=64)
    related_entity_id = serializers.CharField(required=False, allow_null=True, default=None)
