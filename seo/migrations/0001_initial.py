from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='SEOConfig',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('site_name', models.CharField(max_length=255)),
                ('site_name_fr', models.CharField(max_length=255)),
                ('default_title', models.CharField(max_length=255)),
                ('default_title_fr', models.CharField(max_length=255)),
                ('default_description', models.TextField()),
                ('default_description_fr', models.TextField()),
                ('default_keywords', models.TextField(blank=True)),
                ('default_keywords_fr', models.TextField(blank=True)),
                ('canonical_url', models.CharField(max_length=500)),
                ('robots_content', models.TextField(blank=True, null=True)),
                ('favicon_url', models.CharField(blank=True, max_length=500, null=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
            ],
            options={
                'verbose_name': 'SEO Configuration',
                'verbose_name_plural': 'SEO Configuration',
            },
        ),
        migrations.CreateModel(
            name='SEOMetaTag',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('page', models.CharField(max_length=255, unique=True)),
                ('title', models.CharField(max_length=255)),
                ('title_fr', models.CharField(max_length=255)),
                ('description', models.TextField()),
                ('description_fr', models.TextField()),
                ('keywords', models.TextField(blank=True, null=True)),
                ('keywords_fr', models.TextField(blank=True, null=True)),
                ('og_title', models.CharField(blank=True, max_length=255, null=True)),
                ('og_title_fr', models.CharField(blank=True, max_length=255, null=True)),
                ('og_description', models.TextField(blank=True, null=True)),
                ('og_description_fr', models.TextField(blank=True, null=True)),
                ('og_image', models.CharField(blank=True, max_length=500, null=True)),
                ('og_type', models.CharField(default='website', max_length=50)),
                ('twitter_card', models.CharField(choices=[('summary', 'Summary'), ('summary_large_image', 'Summary with large image'), ('app', 'App'), ('player', 'Player')], default='summary_large_image', max_length=30)),
                ('twitter_title', models.CharField(blank=True, max_length=255, null=True)),
                ('twitter_title_fr', models.CharField(blank=True, max_length=255, null=True)),
                ('twitter_description', models.TextField(blank=True, null=True)),
                ('twitter_description_fr', models.TextField(blank=True, null=True)),
                ('twitter_image', models.CharField(blank=True, max_length=500, null=True)),
                ('canonical_url', models.CharField(blank=True, max_length=500, null=True)),
                ('no_index', models.BooleanField(default=False)),
                ('no_follow', models.BooleanField(default=False)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
            ],
            options={
                'verbose_name': 'SEO Meta Tag',
                'verbose_name_plural': 'SEO Meta Tags',
                'ordering': ['page'],
            },
        ),
        migrations.CreateModel(
            name='StructuredData',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('type', models.CharField(max_length=100)),
                ('page', models.CharField(db_index=True, max_length=255)),
                ('json_data', models.JSONField()),
                ('is_active', models.BooleanField(default=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
            ],
            options={
                'verbose_name': 'Structured Data',
                'verbose_name_plural': 'Structured Data',
                'ordering': ['page', 'type'],
            },
        ),
    ]
