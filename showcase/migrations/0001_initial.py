import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('experience', '0001_initial'),
    ]

    operations = [
        migrations.CreateModel(
            name='Highlight',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('title', models.CharField(max_length=255)),
                ('title_fr', models.CharField(blank=True, max_length=255)),
                ('description', models.TextField(blank=True)),
                ('description_fr', models.TextField(blank=True)),
                ('start_date', models.DateTimeField()),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('company', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='highlights', to='experience.company')),
            ],
            options={
                'verbose_name': 'Highlight',
                'verbose_name_plural': 'Highlights',
                'ordering': ['-start_date'],
            },
        ),
        migrations.CreateModel(
            name='Contribution',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('title', models.CharField(max_length=255)),
                ('title_fr', models.CharField(max_length=255)),
                ('type', models.CharField(choices=[('OPEN_SOURCE', 'Open Source'), ('CORPORATE', 'Corporate'), ('COMMUNITY', 'Community'), ('RESEARCH', 'Research'), ('THOUGHT_LEADERSHIP', 'Thought Leadership')], default='OPEN_SOURCE', max_length=30)),
                ('organization', models.CharField(blank=True, max_length=255, null=True)),
                ('organization_fr', models.CharField(blank=True, max_length=255, null=True)),
                ('role', models.CharField(blank=True, max_length=255, null=True)),
                ('role_fr', models.CharField(blank=True, max_length=255, null=True)),
                ('description', models.TextField()),
                ('description_fr', models.TextField()),
                ('impact', models.TextField(blank=True, null=True)),
                ('impact_fr', models.TextField(blank=True, null=True)),
                ('start_date', models.DateTimeField(blank=True, null=True)),
                ('end_date', models.DateTimeField(blank=True, null=True)),
                ('is_current', models.BooleanField(default=False)),
                ('url', models.CharField(blank=True, max_length=500, null=True)),
                ('download_url', models.CharField(blank=True, max_length=500, null=True)),
                ('thumbnail_url', models.CharField(blank=True, max_length=500, null=True)),
                ('display_order', models.IntegerField(default=0)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
            ],
            options={
                'verbose_name': 'Contribution',
                'verbose_name_plural': 'Contributions',
                'ordering': ['display_order', '-start_date', '-created_at'],
            },
        ),
        migrations.CreateModel(
            name='RecommendedBook',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('title', models.CharField(max_length=255)),
                ('title_fr', models.CharField(max_length=255)),
                ('author', models.CharField(max_length=255)),
                ('author_fr', models.CharField(blank=True, max_length=255, null=True)),
                ('recommended_reason', models.TextField()),
                ('recommended_reason_fr', models.TextField()),
                ('summary', models.TextField(blank=True, null=True)),
                ('summary_fr', models.TextField(blank=True, null=True)),
                ('purchase_url', models.CharField(blank=True, max_length=500, null=True)),
                ('cover_image_url', models.CharField(blank=True, max_length=500, null=True)),
                ('priority', models.IntegerField(default=0)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
            ],
            options={
                'verbose_name': 'Recommended Book',
                'verbose_name_plural': 'Recommended Books',
                'ordering': ['priority', 'title'],
            },
        ),
    ]
