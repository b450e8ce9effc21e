"""
Experience Service Layer
Handles validation, persistence and timeline aggregation for companies and
experiences.
"""
import logging
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from django.core.exceptions import ValidationError
from django.db import transaction
from django.db.models import Prefetch

from .models import Company, Experience, ExperienceDateRange
from .timeline import (
    CompanyRecord,
    DateRange,
    ExperienceRecord,
    MediaRef,
    MultiPeriodExperience,
    convert_companies_to_multi_period_experiences,
    sort_experiences,
)

logger = logging.getLogger(__name__)


class CompanyService:
    """Validation and guarded deletion for companies."""

    @staticmethod
    def validate_company(data: Dict, partial: bool = False) -> Dict:
        """
        Trim and validate company names.

        Raises:
            ValidationError: If the English or French name is missing
        """
        errors = []
        cleaned = {}

        for field, label in (('name', 'English'), ('name_fr', 'French')):
            if field not in data and partial:
                continue
            value = (data.get(field) or '').strip()
            if not value:
                errors.append(f"Company name ({label}) is required")
            cleaned[field] = value

        if 'logo_url' in data or not partial:
            cleaned['logo_url'] = data.get('logo_url') or None

        if errors:
            raise ValidationError(errors)
        return cleaned

    @staticmethod
    def delete_company(company: Company) -> None:
        """
        Delete a company that no experience references.

        Raises:
            ValidationError: If experiences still point at the company
        """
        experience_count = company.experiences.count()
        if experience_count > 0:
            raise ValidationError(
                f"Cannot delete company. It is being used by {experience_count} experience(s)."
            )
        company.delete()


class ExperienceService:
    """Service for experiences, their date ranges and the portfolio timeline."""

    @staticmethod
    def validate_date_ranges(ranges: Sequence[Dict]) -> List[Dict]:
        """
        Check that every range has a start and does not end before it starts.

        Returns the ranges sorted by start date.

        Raises:
            ValidationError: If any range is invalid
        """
        errors = []
        for index, date_range in enumerate(ranges, start=1):
            start = date_range.get('start_date')
            end = date_range.get('end_date')
            if not start:
                errors.append(f"date range {index}: start_date is required")
            elif end and end < start:
                errors.append(f"date range {index}: end_date must be after start_date")
        if errors:
            raise ValidationError(errors)
        return sorted(ranges, key=lambda r: r['start_date'])

    @staticmethod
    def legacy_bounds(ranges: Sequence[Dict]) -> Tuple:
        """
        Compute the legacy start/end pair mirrored onto Experience.

        Start is the earliest range start; end is None while any range is
        ongoing, otherwise the latest range end.
        """
        start = min(r['start_date'] for r in ranges)
        if any(r.get('end_date') is None for r in ranges):
            return start, None
        return start, max(r['end_date'] for r in ranges)

    @staticmethod
    def _write_date_ranges(experience: Experience, ranges: Iterable[Dict]) -> None:
        ExperienceDateRange.objects.bulk_create([
            ExperienceDateRange(
                experience=experience,
                start_date=r['start_date'],
                end_date=r.get('end_date'),
            )
            for r in ranges
        ])

    @staticmethod
    def create_experience(data: Dict, date_ranges: Optional[Sequence[Dict]] = None) -> Experience:
        """
        Create an experience together with its date ranges.

        When no ranges are given, one range is created from the legacy
        start_date/end_date fields.
        """
        if not date_ranges:
            date_ranges = [{'start_date': data.get('start_date'), 'end_date': data.get('end_date')}]
        ranges = ExperienceService.validate_date_ranges(date_ranges)
        data['start_date'], data['end_date'] = ExperienceService.legacy_bounds(ranges)

        with transaction.atomic():
            experience = Experience.objects.create(**data)
            ExperienceService._write_date_ranges(experience, ranges)

        logger.info("Created experience %s with %d date range(s)", experience.pk, len(ranges))
        return experience

    @staticmethod
    def update_experience(
        experience: Experience,
        data: Dict,
        date_ranges: Optional[Sequence[Dict]] = None,
    ) -> Experience:
        """
        Update an experience. Supplied date ranges replace the existing ones.
        """
        with transaction.atomic():
            if date_ranges is not None:
                if not date_ranges:
                    raise ValidationError("At least one date range is required")
                ranges = ExperienceService.validate_date_ranges(date_ranges)
                data['start_date'], data['end_date'] = ExperienceService.legacy_bounds(ranges)
                experience.date_ranges.all().delete()
                ExperienceService._write_date_ranges(experience, ranges)
            elif 'start_date' in data or 'end_date' in data:
                start = data.get('start_date', experience.start_date)
                end = data.get('end_date', experience.end_date)
                ExperienceService.validate_date_ranges([{'start_date': start, 'end_date': end}])
                if experience.date_ranges.count() > 1:
                    if (start, end) != (experience.start_date, experience.end_date):
                        raise ValidationError(
                            "This experience has several date ranges. "
                            "Edit date_ranges instead of start_date/end_date."
                        )
                else:
                    # Single-period edit from the legacy form keeps one range in sync.
                    experience.date_ranges.all().delete()
                    ExperienceService._write_date_ranges(
                        experience, [{'start_date': start, 'end_date': end}]
                    )

            for attr, value in data.items():
                setattr(experience, attr, value)
            experience.save()
        return experience

    @staticmethod
    def backfill_date_ranges() -> int:
        """
        Give every experience without date ranges a range built from its
        legacy fields. Returns the number of experiences migrated.
        """
        migrated = 0
        pending = Experience.objects.filter(date_ranges__isnull=True).select_related('company')
        for experience in pending:
            ExperienceDateRange.objects.create(
                experience=experience,
                start_date=experience.start_date,
                end_date=experience.end_date,
            )
            logger.info("Migrated experience: %s at %s", experience.title, experience.pk)
            migrated += 1
        return migrated

    @staticmethod
    def companies_with_experiences():
        """Companies with experiences (most recent start first) and everything the timeline needs."""
        experiences = Experience.objects.order_by('-start_date', '-id').prefetch_related(
            Prefetch('date_ranges', queryset=ExperienceDateRange.objects.order_by('start_date')),
            'media',
            'homepage_media',
            'card_media',
        )
        return Company.objects.prefetch_related(Prefetch('experiences', queryset=experiences))

    @staticmethod
    def _media_refs(items) -> Tuple[MediaRef, ...]:
        return tuple(MediaRef(id=m.pk, url=m.url, type=m.type) for m in items)

    @staticmethod
    def build_experience_record(experience: Experience) -> ExperienceRecord:
        return ExperienceRecord(
            id=experience.pk,
            title=experience.title,
            title_fr=experience.title_fr,
            description=experience.description,
            description_fr=experience.description_fr,
            company_id=experience.company_id,
            start_date=experience.start_date,
            end_date=experience.end_date,
            media=ExperienceService._media_refs(experience.media.all()),
            homepage_media=ExperienceService._media_refs(experience.homepage_media.all()),
            card_media=ExperienceService._media_refs(experience.card_media.all()),
            date_ranges=tuple(
                DateRange(start_date=r.start_date, end_date=r.end_date, id=r.pk)
                for r in experience.date_ranges.all()
            ),
        )

    @staticmethod
    def build_company_records(companies: Iterable[Company]) -> List[CompanyRecord]:
        """Turn ORM companies (with prefetched experiences) into timeline values."""
        return [
            CompanyRecord(
                id=company.pk,
                name=company.name,
                name_fr=company.name_fr,
                logo_url=company.logo_url,
                experiences=tuple(
                    ExperienceService.build_experience_record(e)
                    for e in company.experiences.all()
                ),
            )
            for company in companies
        ]

    @staticmethod
    def get_portfolio_experiences(sort: Optional[str] = None) -> List[MultiPeriodExperience]:
        """
        Build the portfolio timeline: one aggregate per company, most recent
        first, optionally re-ordered by a named sort strategy.
        """
        records = ExperienceService.build_company_records(ExperienceService.companies_with_experiences())
        aggregates = convert_companies_to_multi_period_experiences(records)
        if sort:
            aggregates = sort_experiences(aggregates, sort)
        return aggregates
