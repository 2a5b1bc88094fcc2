import django.core.validators
import django.db.models.deletion
import uuid
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('products', '0001_initial'),
    ]

    operations = [
        migrations.CreateModel(
            name='ProductQuantityLimit',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False, verbose_name='ID')),
                ('created_at', models.DateTimeField(auto_now_add=True, verbose_name='Created At')),
                ('updated_at', models.DateTimeField(auto_now=True, verbose_name='Updated At')),
                ('max_quantity', models.PositiveIntegerField(validators=[django.core.validators.MinValueValidator(1)], verbose_name='Maximum Quantity in Basket')),
                ('product', models.OneToOneField(on_delete=django.db.models.deletion.CASCADE, related_name='quantity_limit', to='products.product', verbose_name='Product')),
            ],
            options={
                'verbose_name': 'Product Quantity Limit',
                'verbose_name_plural': 'Product Quantity Limits',
            },
        ),
    ]
