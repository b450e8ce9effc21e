from datetime import datetime, timezone

from django.test import SimpleTestCase

from experience.timeline import (
    CURRENT_FIRST,
    LATEST_END,
    MULTI_PERIOD_FIRST,
    SECONDS_PER_YEAR,
    CompanyRecord,
    DateRange,
    ExperienceRecord,
    ExperienceStats,
    MediaRef,
    TimelineDataError,
    convert_companies_to_multi_period_experiences,
    convert_to_multi_period_experience,
    format_periods,
    get_experience_stats,
    normalize_date_ranges,
    parse_timestamp,
    sort_experiences,
)


def utc(year, month=1, day=1):
    return datetime(year, month, day, tzinfo=timezone.utc)


def experience(exp_id, title, ranges=None, start=None, end=None, **extra):
    return ExperienceRecord(
        id=exp_id,
        title=title,
        start_date=start if start is not None else (ranges[0].start_date if ranges else None),
        end_date=end,
        date_ranges=tuple(ranges) if ranges is not None else None,
        **extra,
    )


def company(company_id, name, experiences=()):
    return CompanyRecord(id=company_id, name=name, name_fr=name, experiences=tuple(experiences))


class ParseTimestampTests(SimpleTestCase):
    def test_parses_zulu_suffix_as_utc(self) -> None:
        self.assertEqual(parse_timestamp("2020-01-01T00:00:00.000Z"), utc(2020))

    def test_plain_date_becomes_midnight_utc(self) -> None:
        self.assertEqual(parse_timestamp("2019-06-01"), utc(2019, 6, 1))

    def test_empty_values_stay_none(self) -> None:
        self.assertIsNone(parse_timestamp(None))
        self.assertIsNone(parse_timestamp(""))

    def test_unparseable_string_is_rejected(self) -> None:
        with self.assertRaises(TimelineDataError):
            parse_timestamp("last spring", "start_date")

    def test_offset_is_normalized_to_utc(self) -> None:
        parsed = parse_timestamp("2020-01-01T02:00:00+02:00")
        self.assertEqual(parsed, utc(2020))
        self.assertEqual(parsed.tzinfo, timezone.utc)


class RecordFromDictTests(SimpleTestCase):
    def test_missing_date_ranges_key_keeps_none(self) -> None:
        record = ExperienceRecord.from_dict({"id": 1, "title": "Dev", "start_date": "2020-01-01"})
        self.assertIsNone(record.date_ranges)
        self.assertEqual(record.start_date, utc(2020))

    def test_nested_company_payload(self) -> None:
        record = CompanyRecord.from_dict({
            "id": 7,
            "name": "Tech Corp",
            "experiences": [{
                "id": 1,
                "title": "Engineer",
                "start_date": "2020-01-01T00:00:00Z",
                "media": [{"id": 3, "url": "/media/a.png", "type": "image"}],
                "date_ranges": [{"start_date": "2020-01-01", "end_date": None}],
            }],
        })
        self.assertEqual(record.experiences[0].media, (MediaRef(id=3, url="/media/a.png", type="image"),))
        self.assertTrue(record.experiences[0].date_ranges[0].is_ongoing)

    def test_range_without_start_is_rejected(self) -> None:
        with self.assertRaises(TimelineDataError):
            DateRange.from_dict({"end_date": "2020-01-01"})


class NormalizeDateRangesTests(SimpleTestCase):
    def test_sorts_explicit_ranges(self) -> None:
        later = DateRange(utc(2021), None)
        earlier = DateRange(utc(2019), utc(2020))
        record = experience(1, "Dev", ranges=[later, earlier])
        self.assertEqual(normalize_date_ranges(record), [earlier, later])

    def test_legacy_fields_become_single_range(self) -> None:
        record = experience(1, "Dev", start=utc(2018), end=utc(2019))
        self.assertEqual(normalize_date_ranges(record), [DateRange(utc(2018), utc(2019))])

    def test_empty_ranges_fall_back_to_legacy_fields(self) -> None:
        record = experience(1, "Dev", ranges=[], start=utc(2018), end=None)
        self.assertEqual(normalize_date_ranges(record), [DateRange(utc(2018), None)])


class FormatPeriodsTests(SimpleTestCase):
    def test_only_start_years_are_shown(self) -> None:
        ranges = [
            DateRange(utc(2019, 6, 1), utc(2019, 12, 31)),
            DateRange(utc(2020, 3, 1), None),
        ]
        self.assertEqual(format_periods(ranges), "2019 - 2020")

    def test_single_range(self) -> None:
        self.assertEqual(format_periods([DateRange(utc(2015), utc(2018))]), "2015")


class ConvertToMultiPeriodExperienceTests(SimpleTestCase):
    def setUp(self) -> None:
        self.tech_corp = company(1, "Tech Corp", [
            experience(10, "Senior Engineer", ranges=[DateRange(utc(2021, 1, 1), None)],
                       media=(MediaRef(1, "/media/a.png"),)),
            experience(11, "Engineer", ranges=[DateRange(utc(2020, 1, 1), utc(2020, 12, 31))],
                       media=(MediaRef(2, "/media/b.png"),)),
        ])

    def test_tech_corp_scenario(self) -> None:
        aggregate = convert_to_multi_period_experience(self.tech_corp)

        self.assertEqual(len(aggregate.date_ranges), 2)
        self.assertTrue(aggregate.is_current_position)
        self.assertEqual(aggregate.earliest_start_date, utc(2020, 1, 1))
        self.assertIsNone(aggregate.latest_end_date)
        self.assertEqual(aggregate.formatted_periods, "2020 - 2021")

    def test_title_comes_from_first_listed_experience(self) -> None:
        aggregate = convert_to_multi_period_experience(self.tech_corp)
        self.assertEqual(aggregate.id, 10)
        self.assertEqual(aggregate.title, "Senior Engineer")
        self.assertEqual(aggregate.company.name, "Tech Corp")

    def test_media_is_concatenated_in_encounter_order(self) -> None:
        aggregate = convert_to_multi_period_experience(self.tech_corp)
        self.assertEqual([m.id for m in aggregate.media], [1, 2])

    def test_conversion_is_idempotent(self) -> None:
        first = convert_to_multi_period_experience(self.tech_corp)
        second = convert_to_multi_period_experience(self.tech_corp)
        self.assertEqual(first, second)
        self.assertEqual(self.tech_corp.experiences[0].date_ranges, (DateRange(utc(2021, 1, 1), None),))

    def test_latest_end_is_max_end_when_all_closed(self) -> None:
        closed = company(2, "Old Co", [
            experience(1, "Dev", ranges=[
                DateRange(utc(2015), utc(2016)),
                DateRange(utc(2017), utc(2018, 6, 1)),
            ]),
        ])
        aggregate = convert_to_multi_period_experience(closed)
        self.assertFalse(aggregate.is_current_position)
        self.assertEqual(aggregate.latest_end_date, utc(2018, 6, 1))
        self.assertTrue(aggregate.is_multi_period)

    def test_current_position_iff_some_range_is_open(self) -> None:
        for ranges, expected in (
            ([DateRange(utc(2015), utc(2016))], False),
            ([DateRange(utc(2015), utc(2016)), DateRange(utc(2017), None)], True),
        ):
            aggregate = convert_to_multi_period_experience(company(3, "X", [experience(1, "Dev", ranges=ranges)]))
            self.assertEqual(aggregate.is_current_position, expected)

    def test_company_without_experiences_is_rejected(self) -> None:
        with self.assertRaises(ValueError):
            convert_to_multi_period_experience(company(4, "Empty"))

    def test_company_without_dated_experiences_is_rejected(self) -> None:
        with self.assertRaises(TimelineDataError):
            convert_to_multi_period_experience(company(5, "Draft", [experience(1, "Draft")]))


class CollectionConversionTests(SimpleTestCase):
    def test_filters_empty_companies_and_orders_by_start_descending(self) -> None:
        companies = [
            company("A", "A", [experience(1, "Dev", ranges=[DateRange(utc(2018), utc(2019))])]),
            company("B", "B"),
            company("C", "C", [experience(2, "Lead", ranges=[DateRange(utc(2021), None)])]),
        ]
        result = convert_companies_to_multi_period_experiences(companies)
        self.assertEqual([agg.company.id for agg in result], ["C", "A"])

    def test_empty_input(self) -> None:
        self.assertEqual(convert_companies_to_multi_period_experiences([]), [])

    def test_skips_company_whose_experiences_have_no_dates(self) -> None:
        dated = company("A", "A", [experience(1, "Dev", ranges=[DateRange(utc(2020), None)])])
        undated = CompanyRecord.from_dict({
            "id": 2,
            "name": "Draft Co",
            "experiences": [{"id": 2, "title": "Draft"}],
        })

        result = convert_companies_to_multi_period_experiences([dated, undated])

        self.assertEqual([agg.company.id for agg in result], ["A"])

    def test_same_start_keeps_input_order(self) -> None:
        companies = [
            company("First", "First", [experience(1, "Dev", ranges=[DateRange(utc(2020), utc(2021))])]),
            company("Second", "Second", [experience(2, "Dev", ranges=[DateRange(utc(2020), None)])]),
            company("Older", "Older", [experience(3, "Dev", ranges=[DateRange(utc(2015), utc(2016))])]),
        ]
        result = convert_companies_to_multi_period_experiences(companies)
        self.assertEqual([agg.company.id for agg in result], ["First", "Second", "Older"])

        result = convert_companies_to_multi_period_experiences([companies[1], companies[0]])
        self.assertEqual([agg.company.id for agg in result], ["Second", "First"])


class SortExperiencesTests(SimpleTestCase):
    def setUp(self) -> None:
        self.past = convert_to_multi_period_experience(
            company(1, "Past", [experience(1, "Dev", ranges=[DateRange(utc(2010), utc(2012))])])
        )
        self.recent_past = convert_to_multi_period_experience(
            company(2, "Recent", [experience(2, "Dev", ranges=[DateRange(utc(2013), utc(2019))])])
        )
        self.current = convert_to_multi_period_experience(
            company(3, "Current", [experience(3, "Dev", ranges=[
                DateRange(utc(2016), utc(2017)),
                DateRange(utc(2020), None),
            ])])
        )

    def test_latest_end_puts_open_positions_first(self) -> None:
        ordered = sort_experiences([self.past, self.recent_past, self.current], LATEST_END)
        self.assertEqual(ordered, [self.current, self.recent_past, self.past])

    def test_current_first_keeps_relative_order(self) -> None:
        ordered = sort_experiences([self.past, self.current, self.recent_past], CURRENT_FIRST)
        self.assertEqual(ordered, [self.current, self.past, self.recent_past])

    def test_multi_period_first(self) -> None:
        ordered = sort_experiences([self.past, self.current], MULTI_PERIOD_FIRST)
        self.assertEqual(ordered[0], self.current)

    def test_returns_new_list(self) -> None:
        original = [self.past, self.current]
        ordered = sort_experiences(original, LATEST_END)
        self.assertIsNot(ordered, original)
        self.assertEqual(original, [self.past, self.current])

    def test_unknown_strategy(self) -> None:
        with self.assertRaises(ValueError):
            sort_experiences([self.past], "alphabetical")


class ExperienceStatsTests(SimpleTestCase):
    def test_one_current_and_one_past(self) -> None:
        now = utc(2022)
        current = convert_to_multi_period_experience(
            company(1, "Now", [experience(1, "Dev", ranges=[
                DateRange(utc(2019), utc(2020)),
                DateRange(utc(2021), None),
            ])])
        )
        past = convert_to_multi_period_experience(
            company(2, "Then", [experience(2, "Dev", ranges=[DateRange(utc(2015), utc(2017))])])
        )

        stats = get_experience_stats([current, past], now=now)

        self.assertEqual(stats.total_experiences, 2)
        self.assertEqual(stats.current_positions, 1)
        self.assertEqual(stats.multi_period_experiences, 1)
        expected_years = (
            (now - utc(2019)).total_seconds() + (utc(2017) - utc(2015)).total_seconds()
        ) / SECONDS_PER_YEAR
        self.assertAlmostEqual(stats.total_years_experience, expected_years)
        self.assertAlmostEqual(stats.average_experience_length, expected_years / 2)

    def test_empty_list(self) -> None:
        stats = get_experience_stats([])
        self.assertEqual(stats, ExperienceStats(0, 0, 0, 0.0, 0.0))
