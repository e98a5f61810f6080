from rest_framework import serializers

from reviews.serializers import ReviewSerializer
from .assets import upload_image, delete_image
from .likes import is_liked
from .models import Listing
from .ratings import annotate_rating


class ListingSerializer(serializers.ModelSerializer):
    owner_id = serializers.IntegerField(source="owner.id", read_only=True, allow_null=True)
    image_url = serializers.SerializerMethodField()
    avg_rating = serializers.DecimalField(max_digits=2, decimal_places=1, read_only=True, allow_null=True)
    review_count = serializers.IntegerField(read_only=True)
    is_liked = serializers.BooleanField(read_only=True)

    # Required on create, optional on update (replaces the current image)
    image = serializers.ImageField(required=False, write_only=True)

    class Meta:
        model = Listing
        fields = [
            "id", "title", "description", "location", "country",
            "price", "category", "owner_id",
            "image", "image_url", "image_filename",
            "avg_rating", "review_count", "is_liked",
            "created_at", "updated_at",
        ]
        read_only_fields = [
            "id", "owner_id", "image_url", "image_filename",
            "avg_rating", "review_count", "is_liked",
            "created_at", "updated_at",
        ]

    def to_representation(self, instance):
        # Listings coming from the query service are already annotated
        if not hasattr(instance, "avg_rating"):
            annotate_rating(instance)
        if not hasattr(instance, "is_liked"):
            request = self.context.get("request")
            instance.is_liked = is_liked(getattr(request, "user", None), instance)
        return super().to_representation(instance)

    def get_image_url(self, obj):
        url = obj.image_url
        if not url:
            return None
        request = self.context.get("request")
        if request and not url.startswith(("http://", "https://")):
            return request.build_absolute_uri(url)
        return url

    def validate_price(self, value):
        if value < 0:
            raise serializers.ValidationError("The price cannot be negative.")
        return value

    def validate(self, attrs):
        if self.instance is None and not attrs.get("image"):
            raise serializers.ValidationError({"image": "An image is required to create a listing."})
        return attrs

    def create(self, validated_data):
        image = validated_data.pop("image")
        asset = upload_image(image)
        return Listing.objects.create(
            owner=self.context["request"].user,
            image_url=asset["secure_url"],
            image_filename=asset["public_id"],
            **validated_data,
        )

    def update(self, instance, validated_data):
        image = validated_data.pop("image", None)
        old_filename = instance.image_filename
        if image is not None:
            asset = upload_image(image)
            validated_data["image_url"] = asset["secure_url"]
            validated_data["image_filename"] = asset["public_id"]
        listing = super().update(instance, validated_data)
        if image is not None and old_filename:
            delete_image(old_filename)
        return listing


class ListingDetailSerializer(ListingSerializer):
    owner_email = serializers.EmailField(source="owner.email", read_only=True, allow_null=True)
    reviews = ReviewSerializer(many=True, read_only=True)

    class Meta(ListingSerializer.Meta):
        fields = ListingSerializer.Meta.fields + ["owner_email", "reviews"]
        read_only_fields = ListingSerializer.Meta.read_only_fields + ["owner_email", "reviews"]
