"""Serializers describing shared API payloads for the OpenAPI schema."""

from __future__ import annotations

from rest_framework import serializers


class ApiErrorSerializer(serializers.Serializer):
    """Shape of every error response produced by ``map_exception``."""

    code = serializers.CharField()
    message = serializers.CharField()
    status = serializers.IntegerField()
    path = serializers.CharField()
    timestamp = serializers.DateTimeField()
