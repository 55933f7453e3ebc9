import uuid

from django.db import models


class SetUpModel(models.Model):
    """Base for configuration rows: UUID key plus creation/update stamps."""

    id = models.UUIDField(
        primary_key=True,
        default=uuid.uuid4,
        editable=False,
    )

    created_at = models.DateTimeField(
        verbose_name='Criado em',
        auto_now_add=True,
        blank=True,
    )
    updated_at = models.DateTimeField(
        verbose_name='Atualizado em',
        auto_now=True,
        blank=True,
    )

    @classmethod
    def ultima_atualizacao(cls):
        """Most recent update among the rows, or None for an empty table."""
        return cls.objects.aggregate(ultima=models.Max('updated_at'))['ultima']

    class Meta:
        abstract = True
