"""
The host's discussion model, reduced to what the prefixes app touches.
"""
from django.db import models

from prefix_discussion.core.prefixes.models import PrefixedDiscussionMixin


class Discussion(PrefixedDiscussionMixin, models.Model):
    """
    A forum discussion thread.
    """

    id = models.BigAutoField(primary_key=True)
    name = models.CharField(max_length=100)

    def __str__(self):
        return self.name
