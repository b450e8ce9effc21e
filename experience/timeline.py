"""
Experience timeline aggregation

Folds a company's experience rows (each with one or more date ranges) into a
single display-ready MultiPeriodExperience, and sorts/summarizes lists of
those aggregates.

Everything in this module is pure: values come in as frozen dataclasses built
once at the boundary (see ``ExperienceRecord.from_dict`` and
``ExperienceService.build_company_records``) and nothing here touches the
database or the filesystem.
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, time, timezone
from typing import Any, Callable, Dict, Iterable, List, Optional, Sequence, Tuple

from django.utils.dateparse import parse_date, parse_datetime


SECONDS_PER_YEAR = 365.25 * 24 * 60 * 60

LATEST_END = 'latest_end'
CURRENT_FIRST = 'current_first'
MULTI_PERIOD_FIRST = 'multi_period_first'


class TimelineDataError(ValueError):
    """Raised when a payload cannot be turned into timeline values."""


def parse_timestamp(value: Any, field_name: str = 'date') -> Optional[datetime]:
    """
    Coerce an ISO-8601 string, date or datetime into an aware UTC datetime.

    ``None`` and empty strings stay ``None``. Anything else that does not parse
    raises TimelineDataError.
    """
    if value is None or value == '':
        return None
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, date):
        parsed = datetime.combine(value, time.min)
    elif isinstance(value, str):
        text = value.strip()
        if text.endswith('Z'):
            text = text[:-1] + '+00:00'
        try:
            parsed = parse_datetime(text)
            if parsed is None:
                day = parse_date(text)
                parsed = datetime.combine(day, time.min) if day else None
        except ValueError:
            parsed = None
        if parsed is None:
            raise TimelineDataError(f"{field_name} is not a valid ISO-8601 date: {value!r}")
    else:
        raise TimelineDataError(f"{field_name} must be a date string, got {type(value).__name__}")

    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)


@dataclass(frozen=True)
class MediaRef:
    id: Any
    url: str
    type: str = 'image'

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'MediaRef':
        return cls(id=data.get('id'), url=data.get('url', ''), type=data.get('type') or 'image')


@dataclass(frozen=True)
class DateRange:
    """One contiguous period of work. ``end_date is None`` means ongoing."""

    start_date: datetime
    end_date: Optional[datetime] = None
    id: Any = None

    @property
    def is_ongoing(self) -> bool:
        return self.end_date is None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'DateRange':
        start = parse_timestamp(data.get('start_date'), 'start_date')
        if start is None:
            raise TimelineDataError('start_date is required for a date range')
        return cls(
            start_date=start,
            end_date=parse_timestamp(data.get('end_date'), 'end_date'),
            id=data.get('id'),
        )


@dataclass(frozen=True)
class CompanyRef:
    id: Any
    name: str
    name_fr: str = ''
    logo_url: Optional[str] = None


@dataclass(frozen=True)
class ExperienceRecord:
    """
    Typed view of one Experience row.

    ``date_ranges`` is ``None`` when the source carried no ranges at all; the
    legacy ``start_date``/``end_date`` pair is then used instead.
    """

    id: Any
    title: str
    start_date: Optional[datetime]
    company_id: Any = None
    title_fr: str = ''
    description: str = ''
    description_fr: str = ''
    end_date: Optional[datetime] = None
    media: Tuple[MediaRef, ...] = ()
    homepage_media: Tuple[MediaRef, ...] = ()
    card_media: Tuple[MediaRef, ...] = ()
    date_ranges: Optional[Tuple[DateRange, ...]] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ExperienceRecord':
        raw_ranges = data.get('date_ranges')
        return cls(
            id=data.get('id'),
            title=data.get('title', ''),
            title_fr=data.get('title_fr') or '',
            description=data.get('description') or '',
            description_fr=data.get('description_fr') or '',
            company_id=data.get('company_id'),
            start_date=parse_timestamp(data.get('start_date'), 'start_date'),
            end_date=parse_timestamp(data.get('end_date'), 'end_date'),
            media=tuple(MediaRef.from_dict(m) for m in data.get('media') or []),
            homepage_media=tuple(MediaRef.from_dict(m) for m in data.get('homepage_media') or []),
            card_media=tuple(MediaRef.from_dict(m) for m in data.get('card_media') or []),
            date_ranges=(
                None if raw_ranges is None
                else tuple(DateRange.from_dict(r) for r in raw_ranges)
            ),
        )


@dataclass(frozen=True)
class CompanyRecord:
    id: Any
    name: str
    name_fr: str = ''
    logo_url: Optional[str] = None
    experiences: Tuple[ExperienceRecord, ...] = ()

    @property
    def ref(self) -> CompanyRef:
        return CompanyRef(id=self.id, name=self.name, name_fr=self.name_fr, logo_url=self.logo_url)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'CompanyRecord':
        return cls(
            id=data.get('id'),
            name=data.get('name', ''),
            name_fr=data.get('name_fr') or '',
            logo_url=data.get('logo_url'),
            experiences=tuple(ExperienceRecord.from_dict(e) for e in data.get('experiences') or []),
        )


@dataclass(frozen=True)
class MultiPeriodExperience:
    """Derived, non-persisted summary of a company's whole tenure."""

    id: Any
    company: CompanyRef
    title: str
    title_fr: str
    description: str
    description_fr: str
    media: Tuple[MediaRef, ...]
    homepage_media: Tuple[MediaRef, ...]
    card_media: Tuple[MediaRef, ...]
    date_ranges: Tuple[DateRange, ...]
    is_current_position: bool
    earliest_start_date: datetime
    latest_end_date: Optional[datetime]
    formatted_periods: str

    @property
    def is_multi_period(self) -> bool:
        return len(self.date_ranges) > 1


@dataclass(frozen=True)
class ExperienceStats:
    total_experiences: int
    current_positions: int
    multi_period_experiences: int
    total_years_experience: float
    average_experience_length: float


def _by_start(date_range: DateRange) -> datetime:
    return date_range.start_date


def normalize_date_ranges(record: ExperienceRecord) -> List[DateRange]:
    """
    Return the record's date ranges ordered by start date.

    Records that predate multi-period support have no ranges; their legacy
    start/end pair becomes a single synthetic range.
    """
    if record.date_ranges:
        return sorted(record.date_ranges, key=_by_start)
    if record.start_date is not None:
        return [DateRange(start_date=record.start_date, end_date=record.end_date)]
    return []


def format_periods(date_ranges: Iterable[DateRange]) -> str:
    """Join the start year of each range, e.g. ``"2019 - 2020"``. End years are not shown."""
    ordered = sorted(date_ranges, key=_by_start)
    return ' - '.join(str(r.start_date.year) for r in ordered)


def convert_to_multi_period_experience(company: CompanyRecord) -> MultiPeriodExperience:
    """
    Fold all of a company's experiences into one aggregate.

    Title and description come from the first experience in the company's
    list, not the earliest one. Callers filter out companies without
    experiences; passing one raises ValueError.
    """
    if not company.experiences:
        raise ValueError(f"Company {company.id!r} has no experiences to aggregate")

    date_ranges: List[DateRange] = []
    media: List[MediaRef] = []
    homepage_media: List[MediaRef] = []
    card_media: List[MediaRef] = []
    for experience in company.experiences:
        date_ranges.extend(normalize_date_ranges(experience))
        media.extend(experience.media)
        homepage_media.extend(experience.homepage_media)
        card_media.extend(experience.card_media)

    if not date_ranges:
        raise TimelineDataError(f"Company {company.id!r} has no dated experiences")

    date_ranges.sort(key=_by_start)
    is_current = any(r.is_ongoing for r in date_ranges)
    latest_end = None if is_current else max(r.end_date for r in date_ranges)

    first = company.experiences[0]
    return MultiPeriodExperience(
        id=first.id,
        company=company.ref,
        title=first.title,
        title_fr=first.title_fr,
        description=first.description,
        description_fr=first.description_fr,
        media=tuple(media),
        homepage_media=tuple(homepage_media),
        card_media=tuple(card_media),
        date_ranges=tuple(date_ranges),
        is_current_position=is_current,
        earliest_start_date=date_ranges[0].start_date,
        latest_end_date=latest_end,
        formatted_periods=format_periods(date_ranges),
    )


def convert_companies_to_multi_period_experiences(
    companies: Iterable[CompanyRecord],
) -> List[MultiPeriodExperience]:
    """
    Aggregate every company with at least one dated experience, most recent
    start first. Companies sharing a start keep their input order.
    """
    aggregates = [
        convert_to_multi_period_experience(company)
        for company in companies
        if has_dated_experience(company)
    ]
    return sorted(aggregates, key=lambda exp: exp.earliest_start_date, reverse=True)


def has_dated_experience(company: CompanyRecord) -> bool:
    return any(normalize_date_ranges(experience) for experience in company.experiences)


def _latest_end_key(experience: MultiPeriodExperience) -> Tuple[int, float]:
    # Ongoing first, then later end dates first.
    if experience.latest_end_date is None:
        return (0, 0.0)
    return (1, -experience.latest_end_date.timestamp())


SORT_STRATEGIES: Dict[str, Callable[[MultiPeriodExperience], Any]] = {
    LATEST_END: _latest_end_key,
    CURRENT_FIRST: lambda exp: 0 if exp.is_current_position else 1,
    MULTI_PERIOD_FIRST: lambda exp: 0 if exp.is_multi_period else 1,
}


def sort_experiences(
    experiences: Sequence[MultiPeriodExperience],
    strategy: str,
) -> List[MultiPeriodExperience]:
    """
    Return a re-ordered copy of ``experiences``.

    Strategies:
        latest_end: ongoing positions first, then by latest end date descending
        current_first: current positions first, original order kept otherwise
        multi_period_first: aggregates with more than one range first
    """
    try:
        key = SORT_STRATEGIES[strategy]
    except KeyError:
        raise ValueError(
            f"Unknown sort strategy '{strategy}'. Expected one of: {', '.join(SORT_STRATEGIES)}"
        ) from None
    return sorted(experiences, key=key)


def get_experience_stats(
    experiences: Sequence[MultiPeriodExperience],
    now: Optional[datetime] = None,
) -> ExperienceStats:
    """Summarize a list of aggregates. Ongoing positions are measured up to ``now``."""
    now = now or datetime.now(timezone.utc)
    total = len(experiences)

    total_years = 0.0
    for experience in experiences:
        end = now if experience.is_current_position else experience.latest_end_date
        total_years += (end - experience.earliest_start_date).total_seconds() / SECONDS_PER_YEAR

    return ExperienceStats(
        total_experiences=total,
        current_positions=sum(1 for exp in experiences if exp.is_current_position),
        multi_period_experiences=sum(1 for exp in experiences if exp.is_multi_period),
        total_years_experience=total_years,
        average_experience_length=total_years / total if total else 0.0,
    )
