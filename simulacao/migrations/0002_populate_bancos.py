from decimal import Decimal

from django.db import migrations

BANCOS = (
    ('348', 'Banco XP', '1.80', '1.50', '1.50'),
    ('329', 'QI Sociedade de Crédito Direto', '1.80', '1.50', '1.50'),
    ('623', 'Banco Pan', '1.85', '1.55', '1.55'),
    ('626', 'Banco C6 Consignado', '1.79', '1.49', '1.49'),
)


def populate_bancos(apps, schema_editor):
    Banco = apps.get_model('simulacao', 'Banco')

    for codigo, nome, taxa_novo, taxa_refin, taxa_portabilidade in BANCOS:
        Banco.objects.get_or_create(
            codigo=codigo,
            defaults={
                'nome': nome,
                'taxa_novo': Decimal(taxa_novo),
                'taxa_refin': Decimal(taxa_refin),
                'taxa_portabilidade': Decimal(taxa_portabilidade),
            },
        )


class Migration(migrations.Migration):

    dependencies = [
        ('simulacao', '0001_initial'),
    ]

    operations = [
        migrations.RunPython(populate_bancos, migrations.RunPython.noop),
    ]
