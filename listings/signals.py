from django.db.models.signals import post_delete
from django.dispatch import receiver

from .assets import delete_image
from .models import Listing


@receiver(post_delete, sender=Listing)
def remove_listing_image(sender, instance: Listing, **kwargs):
    """
    Reviews go away with the FK cascade; the stored image lives outside the
    database, so it is removed here on a best-effort basis.
    """
    if instance.image_filename:
        delete_image(instance.image_filename)
