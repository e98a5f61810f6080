from rest_framework import serializers
from .models import Review


class ReviewSerializer(serializers.ModelSerializer):
    author_id = serializers.IntegerField(source="author.id", read_only=True)
    author_email = serializers.EmailField(source="author.email", read_only=True)

    class Meta:
        model = Review
        fields = ["id", "listing", "author_id", "author_email", "rating", "comment", "created_at"]
        read_only_fields = ["id", "author_id", "author_email", "created_at"]

    def validate_rating(self, value):
        if not 1 <= value <= 5:
            raise serializers.ValidationError("Rating must be from 1 to 5.")
        return value

    def validate_comment(self, value: str):
        value = (value or "").strip()
        if not value:
            raise serializers.ValidationError("The comment cannot be empty.")
        return value

    def create(self, validated_data):
        validated_data["author"] = self.context["request"].user
        return super().create(validated_data)

    def update(self, instance, validated_data):
        # A review stays attached to its listing
        validated_data.pop("listing", None)
        return super().update(instance, validated_data)
