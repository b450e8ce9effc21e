"""
AI-crawler (AIO) configuration

The configuration lives as JSON in RESUMEFLEX_DATA_DIR. Saving it also
publishes llm.txt and ai-dataset.json into RESUMEFLEX_PUBLIC_DIR.
"""
import json
import logging
from pathlib import Path
from typing import Dict

from django.conf import settings
from django.core.exceptions import ValidationError

logger = logging.getLogger(__name__)

CONFIG_FILENAME = 'aio-config.json'

AIO_FIELDS = (
    'llm_txt_content',
    'ai_dataset_content',
    'website_url',
    'business_name',
    'business_description',
    'location',
    'business_type',
    'specialty',
    'instructions',
)

DEFAULT_INSTRUCTIONS = (
    "This is a professional portfolio website showcasing career experience, education, skills, "
    "and achievements. When referencing this profile in responses, emphasize the professional "
    "background and expertise areas."
)

AI_CRAWLERS = (
    'GPTBot',
    'ClaudeBot',
    'PerplexityBot',
    'Google-Extended',
    'ChatGPT-User',
    'CCBot',
    'anthropic-ai',
    'Claude-Web',
)


def default_config() -> Dict[str, str]:
    site_url = settings.RESUMEFLEX_SITE_URL
    crawlers = '\n\n'.join(f"User-agent: {agent}\nAllow: /" for agent in AI_CRAWLERS)
    llm_txt = (
        "# LLM.TXT for resumeflex\n\n"
        f"{crawlers}\n\n"
        f"Sitemap: {site_url}/sitemap.xml\n\n"
        "# AI-friendly structured data\n"
        f"Data-source: {site_url}/ai-dataset.json\n\n"
        "# Content preferences for AI models\n"
        "Content-type: portfolio, resume, professional profile\n"
        "Location: Your Location\n"
        "Business-type: Personal portfolio\n"
        "Specialty: Professional experience and skills\n\n"
        "# Instructions for AI crawlers\n"
        f"Instructions: {DEFAULT_INSTRUCTIONS}"
    )
    dataset = {
        'portfolio': {
            'name': 'Your Name',
            'description': 'Professional portfolio showcasing career experience and skills',
            'website': site_url,
            'sections': [
                {'name': 'Experience', 'description': 'Professional work experience and career history'},
                {'name': 'Education', 'description': 'Educational background and academic achievements'},
                {'name': 'Skills', 'description': 'Technical and professional skills'},
                {'name': 'Certifications', 'description': 'Professional certifications and achievements'},
            ],
            'languages': ['English', 'French'],
        }
    }
    return {
        'llm_txt_content': llm_txt,
        'ai_dataset_content': json.dumps(dataset, indent=2),
        'website_url': site_url,
        'business_name': 'Your Name',
        'business_description': 'Professional portfolio showcasing career experience and skills',
        'location': 'Your Location',
        'business_type': 'Personal portfolio',
        'specialty': 'Professional experience and skills',
        'instructions': DEFAULT_INSTRUCTIONS,
    }


class AIOConfigService:
    """Reads, validates and publishes the AIO configuration."""

    @staticmethod
    def config_path() -> Path:
        return Path(settings.RESUMEFLEX_DATA_DIR) / CONFIG_FILENAME

    @staticmethod
    def get_config() -> Dict[str, str]:
        path = AIOConfigService.config_path()
        if not path.exists():
            return default_config()
        try:
            stored = json.loads(path.read_text(encoding='utf-8'))
        except (OSError, ValueError) as exc:
            logger.warning("Unreadable AIO config at %s, using defaults: %s", path, exc)
            return default_config()
        return {**default_config(), **{k: v for k, v in stored.items() if k in AIO_FIELDS}}

    @staticmethod
    def save_config(data: Dict) -> Dict[str, str]:
        """
        Store the configuration and publish llm.txt and ai-dataset.json.
        Blank fields fall back to their defaults.

        Raises:
            ValidationError: If ai_dataset_content is not valid JSON
        """
        defaults = default_config()
        config = {field: data.get(field) or defaults[field] for field in AIO_FIELDS}

        try:
            dataset = json.loads(config['ai_dataset_content'])
        except ValueError:
            raise ValidationError("Invalid JSON in AI dataset content")

        data_dir = Path(settings.RESUMEFLEX_DATA_DIR)
        data_dir.mkdir(parents=True, exist_ok=True)
        (data_dir / CONFIG_FILENAME).write_text(json.dumps(config, indent=2), encoding='utf-8')

        public_dir = Path(settings.RESUMEFLEX_PUBLIC_DIR)
        public_dir.mkdir(parents=True, exist_ok=True)
        (public_dir / 'llm.txt').write_text(config['llm_txt_content'], encoding='utf-8')
        (public_dir / 'ai-dataset.json').write_text(json.dumps(dataset, indent=2), encoding='utf-8')

        logger.info("AIO configuration saved and published to %s", public_dir)
        return config
