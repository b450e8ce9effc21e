from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='NavbarConfig',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('logo_text', models.CharField(default='resumeflex', max_length=100)),
                ('logo_image_url', models.CharField(blank=True, max_length=500, null=True)),
                ('use_image_logo', models.BooleanField(default=False)),
                ('work_experience_label', models.CharField(default='Work Experience', max_length=100)),
                ('work_experience_label_fr', models.CharField(default='Expérience professionnelle', max_length=100)),
                ('career_series_label', models.CharField(default='Career Series', max_length=100)),
                ('career_series_label_fr', models.CharField(default='Série carrière', max_length=100)),
                ('education_label', models.CharField(default='Education', max_length=100)),
                ('education_label_fr', models.CharField(default='Formation', max_length=100)),
                ('certifications_label', models.CharField(default='Certifications', max_length=100)),
                ('certifications_label_fr', models.CharField(default='Certifications', max_length=100)),
                ('skills_label', models.CharField(default='Skills', max_length=100)),
                ('skills_label_fr', models.CharField(default='Compétences', max_length=100)),
                ('background_color', models.CharField(default='#141414', max_length=20)),
                ('background_type', models.CharField(choices=[('color', 'Color'), ('gradient', 'Gradient'), ('image', 'Image')], default='color', max_length=20)),
                ('background_image_url', models.CharField(blank=True, max_length=500, null=True)),
                ('gradient_from', models.CharField(default='#141414', max_length=20)),
                ('gradient_to', models.CharField(default='#1a1a1a', max_length=20)),
                ('font_family', models.CharField(default='Inter', max_length=100)),
            ],
            options={
                'verbose_name': 'Navbar Configuration',
                'verbose_name_plural': 'Navbar Configuration',
            },
        ),
        migrations.CreateModel(
            name='FooterConfig',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('logo_text', models.CharField(default='resumeflex', max_length=100)),
                ('logo_image_url', models.CharField(blank=True, max_length=500, null=True)),
                ('use_image_logo', models.BooleanField(default=False)),
                ('copyright_text', models.CharField(default='© 2025 resumeflex. All rights reserved.', max_length=255)),
                ('linkedin_url', models.CharField(blank=True, max_length=500, null=True)),
                ('show_linkedin', models.BooleanField(default=True)),
                ('background_color', models.CharField(default='#0a0a0a', max_length=20)),
                ('text_color', models.CharField(default='#ffffff', max_length=20)),
            ],
            options={
                'verbose_name': 'Footer Configuration',
                'verbose_name_plural': 'Footer Configuration',
            },
        ),
    ]
