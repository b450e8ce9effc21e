"""
JSON-LD structured data

Validation of stored or submitted JSON-LD blocks, and generation of new ones
from portfolio entities, templates or page paths.
"""
import json
import logging
import re
from typing import Any, Dict, List, Optional, Tuple

from django.core.exceptions import ValidationError

from experience.models import Experience
from knowledge.models import Certification, Education
from showcase.models import Highlight

from .models import SEOConfig, StructuredData
from .services import is_valid_url

logger = logging.getLogger(__name__)

SCHEMA_CONTEXT = 'https://schema.org'
SUPPORTED_ENTITY_TYPES = ['experience', 'highlight', 'education', 'certification']
SUPPORTED_TEMPLATE_TYPES = ['Person', 'WebSite', 'BreadcrumbList', 'JobPosting', 'Article']

ISO_DURATION = re.compile(r'^PT(?:\d+H)?(?:\d+M)?(?:\d+(?:\.\d+)?S)?$')
QUOTED_URL = re.compile(r'"(https?://[^"]+)"')
SCRIPT_MARKERS = ('<script', 'javascript:')
XSS_MARKERS = ('<script', 'javascript:', 'onclick', 'onerror')


def parse_json_ld(value) -> Dict:
    """
    Accept a dict or a JSON string.

    Raises:
        ValidationError: If the value does not parse to a JSON object
    """
    if isinstance(value, str):
        try:
            value = json.loads(value)
        except json.JSONDecodeError:
            raise ValidationError("Invalid JSON format")
    if not isinstance(value, dict):
        raise ValidationError("Structured data must be a JSON object")
    return value


def check_json_ld(data: Dict) -> Dict:
    """
    Minimal checks applied before storing a block.

    Raises:
        ValidationError: If @context/@type are missing or script content is found
    """
    errors = []
    context = data.get('@context')
    if not isinstance(context, str) or 'schema.org' not in context:
        errors.append("@context must reference schema.org")
    if not isinstance(data.get('@type'), str) or not data['@type']:
        errors.append("@type is required")
    serialized = json.dumps(data).lower()
    if any(marker in serialized for marker in SCRIPT_MARKERS):
        errors.append("Structured data contains potentially malicious content")
    if errors:
        raise ValidationError(errors)
    return data


def _depth(value, depth: int = 0) -> int:
    if isinstance(value, dict):
        return max([_depth(v, depth + 1) for v in value.values()], default=depth)
    if isinstance(value, list):
        return max([_depth(v, depth + 1) for v in value], default=depth)
    return depth


def _empty_fields(value, path: str = '') -> List[str]:
    if isinstance(value, dict):
        found = []
        for key, nested in value.items():
            found.extend(_empty_fields(nested, f"{path}.{key}" if path else key))
        return found
    if isinstance(value, list):
        found = []
        for index, nested in enumerate(value):
            found.extend(_empty_fields(nested, f"{path}[{index}]"))
        return found
    if value == '' or value is None:
        return [path]
    return []


def _count_properties(value) -> int:
    if isinstance(value, dict):
        return sum(1 + _count_properties(v) for v in value.values())
    if isinstance(value, list):
        return sum(_count_properties(v) for v in value)
    return 0


def _is_text(value) -> bool:
    return isinstance(value, str) and len(value) > 0


class StructuredDataValidator:
    """
    Full report used by the validate endpoint.

    Errors make a block invalid; warnings point at missing recommended
    properties.
    """

    def __init__(self, data: Dict, expected_type: Optional[str] = None):
        self.data = data
        self.expected_type = expected_type
        self.errors: List[str] = []
        self.warnings: List[str] = []
        self.details: Dict[str, Any] = {}

    def validate(self) -> Dict:
        data = self.data
        context = data.get('@context')
        if not isinstance(context, str):
            self.errors.append("Missing required @context property")
        elif 'schema.org' not in context:
            self.errors.append("@context should reference schema.org")

        type_value = data.get('@type')
        if not _is_text(type_value):
            self.errors.append("Missing required @type property")
        else:
            self.details['detected_type'] = type_value
            if self.expected_type and type_value != self.expected_type:
                self.warnings.append(f"Type mismatch: expected {self.expected_type}, got {type_value}")
            check = getattr(self, f'_check_{type_value.lower()}', None)
            if check:
                check()

        self._check_security()
        self._check_structure()
        return {
            'is_valid': not self.errors,
            'errors': self.errors,
            'warnings': self.warnings,
            'details': self.details,
        }

    def _require_name(self, label: str) -> None:
        if not _is_text(self.data.get('name')):
            self.errors.append(f"{label} schema requires a name property")

    def _check_person(self) -> None:
        data = self.data
        self._require_name('Person')
        if isinstance(data.get('url'), str) and not is_valid_url(data['url']):
            self.errors.append("Invalid URL format for person URL")
        if 'sameAs' in data:
            same_as = data['sameAs']
            if not isinstance(same_as, list):
                self.warnings.append("sameAs property should be an array")
            else:
                invalid = [u for u in same_as if isinstance(u, str) and not is_valid_url(u)]
                if any(not isinstance(u, str) for u in same_as):
                    self.warnings.append("sameAs entries should be strings")
                if invalid:
                    self.warnings.append(f"Invalid URLs in sameAs: {', '.join(invalid)}")
        self.details['has_job_title'] = isinstance(data.get('jobTitle'), str)
        self.details['has_works_for'] = 'worksFor' in data

    def _check_organization(self) -> None:
        data = self.data
        self._require_name('Organization')
        if isinstance(data.get('url'), str) and not is_valid_url(data['url']):
            self.errors.append("Invalid URL format for organization URL")
        if isinstance(data.get('logo'), str) and not is_valid_url(data['logo']):
            self.warnings.append("Invalid URL format for organization logo")
        self.details['has_logo'] = isinstance(data.get('logo'), str)

    def _check_website(self) -> None:
        data = self.data
        self._require_name('WebSite')
        if not isinstance(data.get('url'), str):
            self.errors.append("WebSite schema requires a url property")
        elif not is_valid_url(data['url']):
            self.errors.append("Invalid URL format for website URL")
        action = data.get('potentialAction')
        self.details['has_search_action'] = isinstance(action, dict) and action.get('@type') == 'SearchAction'

    def _check_breadcrumblist(self) -> None:
        items = self.data.get('itemListElement')
        if items is None:
            self.errors.append("BreadcrumbList requires itemListElement property")
        elif not isinstance(items, list):
            self.errors.append("itemListElement must be an array")
        else:
            for index, item in enumerate(items, start=1):
                if not isinstance(item, dict):
                    self.errors.append(f"Breadcrumb item {index} must be an object")
                    continue
                if item.get('@type') != 'ListItem':
                    self.errors.append(f"Breadcrumb item {index} must have @type: ListItem")
                if 'position' not in item:
                    self.errors.append(f"Breadcrumb item {index} must have a position")
                if not _is_text(item.get('name')):
                    self.errors.append(f"Breadcrumb item {index} must have a name")
        self.details['breadcrumb_count'] = len(items) if isinstance(items, list) else 0

    def _check_jobposting(self) -> None:
        data = self.data
        if not _is_text(data.get('title')):
            self.errors.append("JobPosting requires a title property")
        if not isinstance(data.get('hiringOrganization'), dict):
            self.errors.append("JobPosting requires hiringOrganization property")
        if 'jobLocation' not in data:
            self.warnings.append("JobPosting should include jobLocation for better SEO")
        if 'datePosted' not in data:
            self.warnings.append("JobPosting should include datePosted")
        self.details['has_base_salary'] = 'baseSalary' in data
        self.details['employment_type'] = data.get('employmentType') or 'Not specified'

    def _check_article(self) -> None:
        data = self.data
        if not _is_text(data.get('headline')):
            self.errors.append("Article requires a headline property")
        if 'author' not in data:
            self.warnings.append("Article should include author information")
        if 'datePublished' not in data:
            self.warnings.append("Article should include datePublished")
        if 'publisher' not in data:
            self.warnings.append("Article should include publisher information for rich snippets")
        self.details['has_main_entity'] = 'mainEntityOfPage' in data

    def _check_videoobject(self) -> None:
        data = self.data
        self._require_name('VideoObject')
        if 'contentUrl' not in data and 'embedUrl' not in data:
            self.errors.append("VideoObject requires either contentUrl or embedUrl")
        if 'thumbnailUrl' not in data:
            self.warnings.append("VideoObject should include thumbnailUrl for better display")
        duration = data.get('duration')
        if duration is not None and not (isinstance(duration, str) and ISO_DURATION.match(duration)):
            self.warnings.append("Duration should be in ISO 8601 format (e.g., PT5M30S)")
        self.details['has_thumbnail'] = 'thumbnailUrl' in data
        self.details['has_duration'] = 'duration' in data

    def _check_imageobject(self) -> None:
        data = self.data
        content_url = data.get('contentUrl')
        if not _is_text(content_url):
            self.errors.append("ImageObject requires a contentUrl property")
        elif not is_valid_url(content_url):
            self.errors.append("Invalid URL format for image contentUrl")
        if 'license' not in data:
            self.warnings.append("ImageObject should include license information")
        self.details['has_license'] = 'license' in data
        self.details['has_creator'] = 'creator' in data

    def _check_security(self) -> None:
        serialized = json.dumps(self.data)
        lowered = serialized.lower()
        if any(marker in lowered for marker in XSS_MARKERS):
            self.errors.append("Potentially malicious content detected")
        suspicious = [
            url for url in QUOTED_URL.findall(serialized)
            if any(scheme in url for scheme in ('javascript:', 'data:', 'vbscript:'))
        ]
        if suspicious:
            self.errors.append(f"Suspicious URLs detected: {', '.join(suspicious)}")

    def _check_structure(self) -> None:
        depth = _depth(self.data)
        if depth > 10:
            self.warnings.append(f"Very deep nesting detected ({depth} levels). Consider simplifying.")
        empty = _empty_fields(self.data)
        if empty:
            self.warnings.append(f"Empty fields detected: {', '.join(empty)}")
        self.details['object_depth'] = depth
        self.details['total_properties'] = _count_properties(self.data)


def _iso_date(value) -> str:
    return value.date().isoformat()


def breadcrumb_for_page(page: str, base_url: str) -> Tuple[str, Dict]:
    items = [{'@type': 'ListItem', 'position': 1, 'name': 'Home', 'item': base_url}]
    current = ''
    for index, segment in enumerate([s for s in page.split('/') if s], start=2):
        current += f"/{segment}"
        name = {
            'experiences': 'Work Experience',
            'certifications': 'Certifications',
        }.get(segment, segment[:1].upper() + segment[1:])
        items.append({'@type': 'ListItem', 'position': index, 'name': name, 'item': base_url + current})
    return 'BreadcrumbList', {
        '@context': SCHEMA_CONTEXT,
        '@type': 'BreadcrumbList',
        'itemListElement': items,
    }


class StructuredDataGenerator:
    """Builds JSON-LD from portfolio entities, templates or page paths."""

    def __init__(self):
        self.config = SEOConfig.objects.order_by('pk').first()
        self.base_url = SEOConfig.base_url()

    @property
    def site_name(self) -> str:
        return self.config.site_name if self.config else 'Professional Portfolio'

    @property
    def site_description(self) -> str:
        if self.config:
            return self.config.default_description
        return 'Professional portfolio showcasing experience, skills, and achievements.'

    def from_entity(self, entity_type: str, entity_id, template_type: Optional[str] = None):
        """
        Returns:
            (schema type, JSON-LD dict), or None when the entity is unknown

        Raises:
            ObjectDoesNotExist: If no entity has that id
        """
        builders = {
            'experience': self._experience,
            'highlight': self._highlight,
            'education': self._education,
            'certification': self._certification,
        }
        builder = builders.get(entity_type)
        if builder is None:
            return None
        return builder(entity_id, template_type)

    def from_template(self, template_type: str, page: str):
        if template_type == 'Person':
            return 'Person', {
                '@context': SCHEMA_CONTEXT,
                '@type': 'Person',
                'name': 'Your Full Name',
                'jobTitle': 'Your Job Title',
                'url': self.base_url,
                'sameAs': ['https://linkedin.com/in/yourprofile'],
            }
        if template_type == 'WebSite':
            return 'WebSite', {
                '@context': SCHEMA_CONTEXT,
                '@type': 'WebSite',
                'name': self.site_name,
                'url': self.base_url,
                'description': self.site_description,
                'potentialAction': {
                    '@type': 'SearchAction',
                    'target': f"{self.base_url}/search?q={{search_term_string}}",
                    'query-input': 'required name=search_term_string',
                },
            }
        if template_type == 'BreadcrumbList':
            return breadcrumb_for_page(page, self.base_url)
        return None

    def from_page(self, page: str):
        if page == '/':
            return 'WebSite', {
                '@context': SCHEMA_CONTEXT,
                '@type': 'WebSite',
                'name': self.site_name,
                'url': self.base_url,
                'description': self.site_description,
            }
        if page.startswith('/experiences'):
            return breadcrumb_for_page(page, self.base_url)
        return None

    def _experience(self, entity_id, template_type):
        experience = Experience.objects.select_related('company').get(pk=entity_id)
        url = f"{self.base_url}/experiences/{experience.pk}"
        if template_type == 'JobPosting':
            return 'JobPosting', {
                '@context': SCHEMA_CONTEXT,
                '@type': 'JobPosting',
                'title': experience.title,
                'description': experience.description,
                'hiringOrganization': {'@type': 'Organization', 'name': experience.company.name},
                'datePosted': _iso_date(experience.start_date),
                'employmentType': 'CONTRACTOR' if experience.end_date else 'FULL_TIME',
                'url': url,
            }
        return 'Person', {
            '@context': SCHEMA_CONTEXT,
            '@type': 'Person',
            'name': 'Professional',
            'jobTitle': experience.title,
            'worksFor': {'@type': 'Organization', 'name': experience.company.name},
            'description': experience.description,
            'url': url,
        }

    def _highlight(self, entity_id, template_type):
        highlight = Highlight.objects.select_related('company').get(pk=entity_id)
        url = f"{self.base_url}/highlights/{highlight.pk}"
        return 'Article', {
            '@context': SCHEMA_CONTEXT,
            '@type': 'Article',
            'headline': highlight.title,
            'description': highlight.description or f"Professional highlight at {highlight.company.name}",
            'author': {'@type': 'Person', 'name': 'Professional'},
            'publisher': {'@type': 'Organization', 'name': highlight.company.name},
            'datePublished': _iso_date(highlight.created_at),
            'url': url,
            'mainEntityOfPage': {'@type': 'WebPage', '@id': url},
        }

    def _education(self, entity_id, template_type):
        education = Education.objects.get(pk=entity_id)
        return 'EducationalOccupationalCredential', {
            '@context': SCHEMA_CONTEXT,
            '@type': 'EducationalOccupationalCredential',
            'name': f"{education.degree} in {education.field}",
            'description': f"{education.degree} degree in {education.field} from {education.institution}",
            'credentialCategory': 'Degree',
            'recognizedBy': {'@type': 'Organization', 'name': education.institution},
            'dateCreated': _iso_date(education.end_date or education.start_date),
            'url': f"{self.base_url}/education",
        }

    def _certification(self, entity_id, template_type):
        certification = Certification.objects.get(pk=entity_id)
        return 'EducationalOccupationalCredential', {
            '@context': SCHEMA_CONTEXT,
            '@type': 'EducationalOccupationalCredential',
            'name': certification.name,
            'description': f"Professional certification: {certification.name}",
            'credentialCategory': 'Certification',
            'recognizedBy': {'@type': 'Organization', 'name': certification.issuer},
            'dateCreated': _iso_date(certification.issue_date),
            'url': f"{self.base_url}/certifications",
        }


class StructuredDataService:
    """Generation with optional merge and upsert."""

    @staticmethod
    def generate(
        page: str,
        entity_type: Optional[str] = None,
        entity_id=None,
        template_type: Optional[str] = None,
        custom_data: Optional[Dict] = None,
        auto_apply: bool = False,
    ) -> Tuple[str, Dict, Optional[StructuredData]]:
        """
        Build JSON-LD for a page: from an entity when one is named, else from a
        template, else from the page path.

        Raises:
            ValidationError: If nothing could be generated
            ObjectDoesNotExist: If the named entity is missing
        """
        if not page:
            raise ValidationError("Page is required")

        generator = StructuredDataGenerator()
        if entity_type and entity_id:
            generated = generator.from_entity(entity_type, entity_id, template_type)
        elif template_type:
            generated = generator.from_template(template_type, page)
        else:
            generated = generator.from_page(page)
        if generated is None:
            raise ValidationError("Could not generate structured data")

        schema_type, data = generated
        if custom_data:
            data = {**data, **custom_data}

        record = None
        if auto_apply:
            record = StructuredData.objects.filter(page=page, type=schema_type, is_active=True).first()
            if record:
                record.json_data = data
                record.save(update_fields=['json_data', 'updated_at'])
            else:
                record = StructuredData.objects.create(type=schema_type, page=page, json_data=data, is_active=True)
            logger.info("Applied %s structured data to %s", schema_type, page)
        return schema_type, data, record
