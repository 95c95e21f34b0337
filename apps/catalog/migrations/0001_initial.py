from django.db import migrations, models

import apps.common.ids


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='CanonicalProduct',
            fields=[
                ('id', models.CharField(default=apps.common.ids.generate_id, editable=False, max_length=64, primary_key=True, serialize=False)),
                ('display_name', models.CharField(db_index=True, max_length=255)),
                ('brand', models.CharField(blank=True, max_length=120, null=True)),
                ('category', models.CharField(blank=True, max_length=120, null=True)),
                ('size_description', models.CharField(blank=True, max_length=120, null=True)),
                ('sold_by', models.CharField(choices=[('unit', 'Unit'), ('weight', 'Weight')], default='unit', max_length=10)),
                ('image_url', models.URLField(blank=True, max_length=500, null=True)),
                ('upc', models.CharField(blank=True, db_index=True, max_length=32, null=True)),
                ('source', models.CharField(default='manual', max_length=40)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
            ],
            options={
                'db_table': 'canonical_products',
                'ordering': ['display_name'],
            },
        ),
    ]
