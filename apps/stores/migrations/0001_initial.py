import uuid

from django.conf import settings
from django.db import migrations, models
import django.db.models.deletion

import apps.common.ids


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='Store',
            fields=[
                ('id', models.CharField(default=apps.common.ids.generate_id, max_length=64, primary_key=True, serialize=False)),
                ('external_id', models.CharField(blank=True, max_length=100)),
                ('name', models.CharField(max_length=200)),
                ('address_line', models.CharField(blank=True, max_length=255, null=True)),
                ('city', models.CharField(blank=True, max_length=100, null=True)),
                ('state', models.CharField(blank=True, max_length=50, null=True)),
                ('zip_code', models.CharField(blank=True, max_length=20, null=True)),
                ('chain', models.CharField(blank=True, max_length=100)),
                ('source', models.CharField(default='manual', max_length=40)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
            ],
            options={
                'db_table': 'stores',
                'ordering': ['chain', 'name'],
            },
        ),
        migrations.CreateModel(
            name='UserFavoriteStore',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('store', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='favorited_by', to='stores.store')),
                ('user', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='favorite_stores', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'db_table': 'user_favorite_stores',
                'ordering': ['created_at'],
            },
        ),
        migrations.AddConstraint(
            model_name='userfavoritestore',
            constraint=models.UniqueConstraint(fields=('user', 'store'), name='unique_user_favorite_store'),
        ),
    ]
