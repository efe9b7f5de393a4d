"""
Initial migration for Depot models.
"""

import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):
    """Create Depot models: Deletion, Item, Shipment, ItemAssignment, ShipmentAssignment."""

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='Deletion',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('comment', models.TextField(blank=True, verbose_name='Comment')),
                ('created_at', models.DateTimeField(auto_now_add=True, verbose_name='Created at')),
                ('updated_at', models.DateTimeField(auto_now=True, verbose_name='Updated at')),
            ],
            options={
                'verbose_name': 'Deletion',
                'verbose_name_plural': 'Deletions',
                'db_table': 'deletions',
                'ordering': ['id'],
            },
        ),
        migrations.CreateModel(
            name='Item',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(max_length=255, verbose_name='Name')),
                ('deletion', models.OneToOneField(blank=True, null=True, on_delete=django.db.models.deletion.PROTECT, related_name='item', to='depot.deletion', verbose_name='Deletion')),
            ],
            options={
                'verbose_name': 'Item',
                'verbose_name_plural': 'Items',
                'db_table': 'items',
                'ordering': ['id'],
            },
        ),
        migrations.CreateModel(
            name='Shipment',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(max_length=255, verbose_name='Name')),
                ('destination', models.CharField(max_length=255, verbose_name='Destination')),
            ],
            options={
                'verbose_name': 'Shipment',
                'verbose_name_plural': 'Shipments',
                'db_table': 'shipments',
                'ordering': ['id'],
            },
        ),
        migrations.CreateModel(
            name='ItemAssignment',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('assigned_count', models.IntegerField(help_text='Positive = inbound, negative = outbound', verbose_name='Assigned count')),
                ('external_assignment_id', models.PositiveBigIntegerField(blank=True, null=True, verbose_name='External assignment ID')),
                ('created_at', models.DateTimeField(auto_now_add=True, verbose_name='Created at')),
                ('updated_at', models.DateTimeField(auto_now=True, verbose_name='Updated at')),
                ('item', models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name='assignments', to='depot.item', verbose_name='Item')),
                ('shipment', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.PROTECT, related_name='entries', to='depot.shipment', verbose_name='Shipment')),
            ],
            options={
                'verbose_name': 'Assignment',
                'verbose_name_plural': 'Assignments',
                'db_table': 'item_assignments',
                'ordering': ['id'],
            },
        ),
        migrations.CreateModel(
            name='ShipmentAssignment',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('assignment', models.OneToOneField(on_delete=django.db.models.deletion.PROTECT, related_name='shipment_link', to='depot.itemassignment', verbose_name='Assignment')),
                ('shipment', models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name='links', to='depot.shipment', verbose_name='Shipment')),
            ],
            options={
                'verbose_name': 'Shipment assignment',
                'verbose_name_plural': 'Shipment assignments',
                'db_table': 'shipments_to_assignments',
                'ordering': ['assignment_id'],
            },
        ),
    ]
