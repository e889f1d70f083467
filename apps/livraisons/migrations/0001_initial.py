import uuid

import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('clients', '0001_initial'),
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='Livraison',
            fields=[
                ('created_at', models.DateTimeField(auto_now_add=True, db_index=True, verbose_name='Créé le')),
                ('updated_at', models.DateTimeField(auto_now=True, verbose_name='Modifié le')),
                ('is_deleted', models.BooleanField(db_index=True, default=False, verbose_name='Supprimé')),
                ('deleted_at', models.DateTimeField(blank=True, null=True, verbose_name='Supprimé le')),
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False, verbose_name='Identifiant')),
                ('client_name', models.CharField(blank=True, default='', max_length=255, verbose_name='Nom du client')),
                ('numero', models.CharField(blank=True, default='', max_length=100, verbose_name='Numéro')),
                ('date_livraison', models.DateField(blank=True, null=True, verbose_name='Date de livraison')),
                ('adresse', models.TextField(blank=True, default='', verbose_name='Adresse de livraison')),
                ('notes', models.TextField(blank=True, default='', verbose_name='Notes')),
                ('client', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='livraisons', to='clients.client', verbose_name='Client')),
                ('created_by', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='livraison_created', to=settings.AUTH_USER_MODEL, verbose_name='Créé par')),
                ('updated_by', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='livraison_updated', to=settings.AUTH_USER_MODEL, verbose_name='Modifié par')),
            ],
            options={
                'verbose_name': 'Livraison',
                'verbose_name_plural': 'Livraisons',
                'ordering': ['-created_at'],
                'abstract': False,
            },
        ),
        migrations.CreateModel(
            name='LivraisonLine',
            fields=[
                ('created_at', models.DateTimeField(auto_now_add=True, db_index=True, verbose_name='Créé le')),
                ('updated_at', models.DateTimeField(auto_now=True, verbose_name='Modifié le')),
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False, verbose_name='Identifiant')),
                ('position', models.PositiveIntegerField(db_index=True, default=0, verbose_name='Position')),
                ('commande', models.CharField(blank=True, default='', max_length=255, verbose_name='Commande')),
                ('modele', models.CharField(blank=True, default='', max_length=255, verbose_name='Modèle')),
                ('description', models.TextField(blank=True, default='', verbose_name='Description')),
                ('quantity', models.PositiveIntegerField(default=1, verbose_name='Quantité')),
                ('livraison', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='lines', to='livraisons.livraison', verbose_name='Livraison')),
            ],
            options={
                'verbose_name': 'Ligne de livraison',
                'verbose_name_plural': 'Lignes de livraison',
                'ordering': ['position'],
                'abstract': False,
            },
        ),
    ]
