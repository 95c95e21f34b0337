from django.db import models
import uuid


class Platform(models.TextChoices):
    IOS = 'ios', 'iOS'
    ANDROID = 'android', 'Android'
    WEB = 'web', 'Web'


class PushToken(models.Model):
    """Device token for list reminders and price notifications."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    user = models.ForeignKey(
        'accounts.User',
        on_delete=models.CASCADE,
        related_name='push_tokens'
    )
    # A device token belongs to whoever registered it last
    token = models.CharField(max_length=512, unique=True)
    platform = models.CharField(
        max_length=10,
        choices=Platform.choices,
        default=Platform.WEB
    )
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'push_tokens'
        ordering = ['-created_at']

    def __str__(self):
        return f"{self.platform} token for {self.user_id}"
