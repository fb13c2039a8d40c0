# Initial migration for GuaranteeClaim

from django.conf import settings
from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('projects', '0001_initial'),
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='GuaranteeClaim',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('status', models.CharField(default='pending', max_length=20)),
                ('claim_amount', models.DecimalField(decimal_places=2, max_digits=12)),
                ('claim_reason', models.TextField()),
                ('resolution_notes', models.TextField(blank=True)),
                ('resolution_date', models.DateTimeField(blank=True, null=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('homeowner', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='guarantee_claims', to=settings.AUTH_USER_MODEL)),
                ('provider', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='claims_against', to=settings.AUTH_USER_MODEL)),
                ('project', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='guarantee_claims', to='projects.project')),
            ],
            options={
                'db_table': 'guarantees',
                'ordering': ['-created_at'],
                'indexes': [
                    models.Index(fields=['homeowner', '-created_at'], name='guarantees_owner_idx'),
                    models.Index(fields=['provider', '-created_at'], name='guarantees_provider_idx'),
                ],
            },
        ),
    ]
