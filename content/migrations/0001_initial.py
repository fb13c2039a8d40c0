# Initial migration for content pages and sections

from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='Page',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('title', models.CharField(max_length=255)),
                ('slug', models.SlugField(max_length=255, unique=True)),
                ('content', models.TextField(blank=True)),
                ('layout', models.CharField(choices=[('default', 'Default'), ('full-width', 'Full Width'), ('sidebar-right', 'Sidebar Right'), ('sidebar-left', 'Sidebar Left'), ('landing', 'Landing Page')], default='default', max_length=20)),
                ('is_published', models.BooleanField(default=False)),
                ('meta_title', models.CharField(blank=True, max_length=255)),
                ('meta_description', models.TextField(blank=True)),
                ('meta_keywords', models.CharField(blank=True, max_length=500)),
                ('og_image', models.URLField(blank=True, max_length=1000)),
                ('custom_css', models.TextField(blank=True)),
                ('custom_js', models.TextField(blank=True)),
                ('tracking_code', models.TextField(blank=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
            ],
            options={
                'db_table': 'content_pages',
                'ordering': ['title'],
            },
        ),
        migrations.CreateModel(
            name='Section',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('title', models.CharField(blank=True, max_length=255)),
                ('type', models.CharField(choices=[('text', 'Text'), ('hero', 'Hero'), ('gallery', 'Gallery'), ('features', 'Features'), ('cta', 'Call to Action'), ('testimonials', 'Testimonials'), ('custom', 'Custom HTML')], default='text', max_length=20)),
                ('content', models.TextField(blank=True)),
                ('custom_css', models.TextField(blank=True)),
                ('order', models.PositiveIntegerField(default=0)),
                ('page', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='sections', to='content.page')),
            ],
            options={
                'db_table': 'content_sections',
                'ordering': ['order', 'id'],
            },
        ),
    ]
