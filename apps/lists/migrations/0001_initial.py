import uuid

from django.conf import settings
from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
        ('catalog', '0001_initial'),
        ('stores', '0001_initial'),
    ]

    operations = [
        migrations.CreateModel(
            name='GroceryList',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('name', models.CharField(default='New list', max_length=200)),
                ('list_type', models.CharField(choices=[('current_week', 'Current week'), ('next_order', 'Next order'), ('custom', 'Custom')], default='custom', max_length=20)),
                ('week_start', models.CharField(blank=True, max_length=32, null=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('user', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='grocery_lists', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'db_table': 'lists',
                'ordering': ['-updated_at'],
            },
        ),
        migrations.CreateModel(
            name='ListItem',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('free_text', models.CharField(blank=True, max_length=500, null=True)),
                ('quantity', models.FloatField(default=1.0)),
                ('estimated_weight_override', models.CharField(blank=True, max_length=50, null=True)),
                ('sort_order', models.PositiveIntegerField(default=0)),
                ('checked', models.BooleanField(default=False)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('canonical_product', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.PROTECT, related_name='list_items', to='catalog.canonicalproduct')),
                ('grocery_list', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='items', to='lists.grocerylist')),
            ],
            options={
                'db_table': 'list_items',
                'ordering': ['sort_order', 'created_at'],
            },
        ),
        migrations.CreateModel(
            name='ListStore',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('position', models.PositiveIntegerField(default=0)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('grocery_list', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='store_links', to='lists.grocerylist')),
                ('store', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='list_links', to='stores.store')),
            ],
            options={
                'db_table': 'list_stores',
                'ordering': ['position'],
            },
        ),
        migrations.AddField(
            model_name='grocerylist',
            name='stores',
            field=models.ManyToManyField(blank=True, related_name='grocery_lists', through='lists.ListStore', to='stores.store'),
        ),
        migrations.AddIndex(
            model_name='grocerylist',
            index=models.Index(fields=['user', 'updated_at'], name='lists_user_updated_idx'),
        ),
        migrations.AddIndex(
            model_name='listitem',
            index=models.Index(fields=['grocery_list', 'sort_order'], name='list_items_order_idx'),
        ),
        migrations.AddConstraint(
            model_name='listitem',
            constraint=models.CheckConstraint(condition=models.Q(('canonical_product__isnull', False), ('free_text__isnull', False), _connector='OR'), name='list_item_product_or_free_text'),
        ),
        migrations.AddConstraint(
            model_name='listitem',
            constraint=models.CheckConstraint(condition=models.Q(('quantity__gt', 0)), name='list_item_quantity_positive'),
        ),
        migrations.AddConstraint(
            model_name='liststore',
            constraint=models.UniqueConstraint(fields=('grocery_list', 'store'), name='unique_list_store'),
        ),
    ]
