import uuid

from django.db import migrations, models

import simulacao.models.banco


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='Banco',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('codigo', models.CharField(max_length=10, unique=True, verbose_name='Código do banco')),
                ('nome', models.CharField(max_length=100, verbose_name='Nome do banco')),
                ('taxa_novo', models.DecimalField(decimal_places=2, default=simulacao.models.banco.taxa_novo_padrao, max_digits=5, verbose_name='Taxa operação nova (% a.m.)')),
                ('taxa_refin', models.DecimalField(decimal_places=2, default=simulacao.models.banco.taxa_refin_padrao, max_digits=5, verbose_name='Taxa refinanciamento (% a.m.)')),
                ('taxa_portabilidade', models.DecimalField(decimal_places=2, default=simulacao.models.banco.taxa_portabilidade_padrao, max_digits=5, verbose_name='Taxa portabilidade (% a.m.)')),
                ('ativo', models.BooleanField(default=True, verbose_name='Banco ativo?')),
            ],
            options={
                'verbose_name': 'Banco destino',
                'verbose_name_plural': '1. Bancos destino',
                'ordering': ('codigo',),
            },
        ),
        migrations.CreateModel(
            name='ParametroTaxa',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('created_at', models.DateTimeField(auto_now_add=True, blank=True, verbose_name='Criado em')),
                ('updated_at', models.DateTimeField(auto_now=True, blank=True, verbose_name='Atualizado em')),
                ('chave', models.CharField(choices=[('rateNew', 'Taxa operação nova'), ('rateRefin', 'Taxa refinanciamento'), ('ratePortability', 'Taxa portabilidade')], max_length=30, unique=True, verbose_name='Chave')),
                ('valor', models.DecimalField(decimal_places=2, max_digits=5, verbose_name='Valor (% a.m.)')),
            ],
            options={
                'verbose_name': 'Taxa do operador',
                'verbose_name_plural': '2. Taxas do operador',
            },
        ),
    ]
