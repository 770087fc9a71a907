import calendar
import pytest
from datetime import date

from config import Config
from core.services.month_grid_builder import MonthGridBuilder
from infra.adapters.date.native_date_adapter import NativeDateAdapter


def make_builder(first_day_of_week: int) -> MonthGridBuilder:
    return MonthGridBuilder(
        NativeDateAdapter(first_day_of_week=first_day_of_week),
        Config().get_date_formats()
    )


class TestMonthGridBuilder:
    @pytest.fixture
    def builder(self):
        # 월요일 시작
        return make_builder(1)

    def test_march_2021_monday_start(self, builder):
        # Given: 2021-03-01 은 월요일
        active = date(2021, 3, 15)

        # When
        grid = builder.build(active)

        # Then
        assert grid.first_week_offset == 0
        assert [len(week) for week in grid.weeks] == [7, 7, 7, 7, 3]
        assert grid.days == list(range(1, 32))
        assert grid.month_label == "MAR"

    def test_march_2021_sunday_start(self):
        grid = make_builder(0).build(date(2021, 3, 1))

        assert grid.first_week_offset == 1
        assert [len(week) for week in grid.weeks] == [6, 7, 7, 7, 4]

    def test_may_2021_needs_six_rows(self):
        # 2021-05-01 은 토요일
        grid = make_builder(0).build(date(2021, 5, 1))

        assert grid.first_week_offset == 6
        assert [len(week) for week in grid.weeks] == [1, 7, 7, 7, 7, 2]

    def test_february_2021_exact_four_weeks(self, builder):
        grid = builder.build(date(2021, 2, 10))

        assert grid.first_week_offset == 0
        assert len(grid.weeks) == 4
        assert len(grid.cells) == 28

    @pytest.mark.parametrize("first_day_of_week", range(7))
    def test_matches_calendar_module(self, first_day_of_week):
        """calendar 모듈의 월 배치와 동일한 주 구성"""
        builder = make_builder(first_day_of_week)
        # calendar 모듈은 0=월요일
        reference = calendar.Calendar(firstweekday=(first_day_of_week + 6) % 7)

        for year in (2020, 2021, 2024):
            for month in range(1, 13):
                grid = builder.build(date(year, month, 1))
                expected_weeks = [
                    [day for day in week if day]
                    for week in reference.monthdayscalendar(year, month)
                ]

                assert [[cell.value for cell in week] for week in grid.weeks] == expected_weeks
                assert 0 <= grid.first_week_offset <= 6
                assert reference.monthdayscalendar(year, month)[0].index(1) == grid.first_week_offset

    def test_cell_contents(self, builder):
        grid = builder.build(date(2021, 3, 1))
        cell = grid.cells[14]

        assert cell.value == 15
        assert cell.display_value == "15"
        assert cell.aria_label == "15 March 2021"
        assert cell.enabled is True

    def test_date_filter(self, builder):
        grid = builder.build(date(2021, 3, 1), date_filter=lambda d: d.day % 2 == 0)

        enabled = [cell.value for cell in grid.cells if cell.enabled]
        assert enabled == list(range(2, 32, 2))

    def test_weekdays_rotated_to_first_day(self, builder):
        weekdays = builder.weekdays()

        assert [w.long for w in weekdays] == [
            "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"
        ]
        assert weekdays[0].narrow == "M"

    def test_weekdays_sunday_start(self):
        weekdays = make_builder(0).weekdays()

        assert weekdays[0].long == "Sunday"
        assert weekdays[-1].long == "Saturday"
