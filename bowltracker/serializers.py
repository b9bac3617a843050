"""Encapsulates the serialisers of a game's scorecard."""
from rest_framework import serializers


class ThrowSerializer(serializers.Serializer):
    """Representation of a single throw."""
    pins_knocked = serializers.IntegerField(read_only=True)
    is_strike = serializers.BooleanField(read_only=True)
    is_spare = serializers.BooleanField(read_only=True)


class FrameSerializer(serializers.Serializer):
    """Representation of a frame, its throws and its cumulative score."""
    frame = serializers.IntegerField(source='number', read_only=True)
    throws = ThrowSerializer(many=True, read_only=True)
    total_pins_knocked = serializers.IntegerField(read_only=True)
    frame_score = serializers.IntegerField(read_only=True)
    is_strike = serializers.BooleanField(read_only=True)
    is_spare = serializers.BooleanField(read_only=True)
    is_resolved = serializers.BooleanField(read_only=True)


class GameSerializer(serializers.Serializer):
    """Representation of all the frames in addition to the score."""
    frames = FrameSerializer(many=True, read_only=True)
    score = serializers.IntegerField(read_only=True)
    is_complete = serializers.BooleanField(read_only=True)
