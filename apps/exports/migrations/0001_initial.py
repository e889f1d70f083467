import uuid
from decimal import Decimal

import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models

import core.validators


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('clients', '0001_initial'),
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='DeclarationExport',
            fields=[
                ('created_at', models.DateTimeField(auto_now_add=True, db_index=True, verbose_name='Créé le')),
                ('updated_at', models.DateTimeField(auto_now=True, verbose_name='Modifié le')),
                ('is_deleted', models.BooleanField(db_index=True, default=False, verbose_name='Supprimé')),
                ('deleted_at', models.DateTimeField(blank=True, null=True, verbose_name='Supprimé le')),
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False, verbose_name='Identifiant')),
                ('client_name', models.CharField(blank=True, default='', max_length=255, verbose_name='Nom du client')),
                ('numero', models.CharField(blank=True, default='', max_length=100, verbose_name='Numéro')),
                ('date_export', models.DateField(blank=True, null=True, verbose_name="Date d'export")),
                ('lot', models.CharField(blank=True, default='', max_length=100, verbose_name='Lot')),
                ('notes', models.TextField(blank=True, default='', verbose_name='Notes')),
                ('client', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='exports', to='clients.client', verbose_name='Client')),
                ('created_by', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='declarationexport_created', to=settings.AUTH_USER_MODEL, verbose_name='Créé par')),
                ('updated_by', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='declarationexport_updated', to=settings.AUTH_USER_MODEL, verbose_name='Modifié par')),
            ],
            options={
                'verbose_name': "Déclaration d'export",
                'verbose_name_plural': "Déclarations d'export",
                'ordering': ['-created_at'],
                'abstract': False,
            },
        ),
        migrations.CreateModel(
            name='ExportLine',
            fields=[
                ('created_at', models.DateTimeField(auto_now_add=True, db_index=True, verbose_name='Créé le')),
                ('updated_at', models.DateTimeField(auto_now=True, verbose_name='Modifié le')),
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False, verbose_name='Identifiant')),
                ('position', models.PositiveIntegerField(db_index=True, default=0, verbose_name='Position')),
                ('commande', models.CharField(blank=True, default='', max_length=255, verbose_name='Commande')),
                ('modele', models.CharField(blank=True, default='', max_length=255, verbose_name='Modèle')),
                ('description', models.TextField(blank=True, default='', verbose_name='Description')),
                ('quantity', models.PositiveIntegerField(default=1, verbose_name='Quantité')),
                ('unit_price', models.DecimalField(decimal_places=4, default=Decimal('0'), max_digits=14, validators=[core.validators.validate_price], verbose_name='Prix unitaire')),
                ('is_excluded', models.BooleanField(default=False, verbose_name='Exclue du total')),
                ('declaration', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='lines', to='exports.declarationexport', verbose_name='Déclaration')),
            ],
            options={
                'verbose_name': "Ligne d'export",
                'verbose_name_plural': "Lignes d'export",
                'ordering': ['position'],
                'abstract': False,
            },
        ),
    ]
