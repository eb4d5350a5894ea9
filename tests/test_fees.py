# tests/test_fees.py
"""
Unit tests for single-passage fees: time bands, vehicle exemptions and
toll-free dates.
"""

import datetime

from tollcalc.core.models import Vehicle
from tollcalc.core.toll import (
    FEE_BANDS,
    TOLL_FREE_VEHICLE_TYPES,
    TollFreeVehicle,
    calculate_passage_fee,
    fee_for_time,
    get_vehicle_type,
    is_toll_free_vehicle,
)


def reference_fee(hour: int, minute: int) -> int:
    """Fee schedule written out hour by hour."""
    if hour == 6:
        return 8 if minute <= 29 else 13
    if hour == 7:
        return 18
    if hour == 8:
        return 13 if minute <= 29 else 8
    if 9 <= hour <= 14:
        return 8
    if hour == 15:
        return 13 if minute <= 29 else 18
    if hour == 16:
        return 18
    if hour == 17:
        return 13
    if hour == 18 and minute <= 29:
        return 8
    return 0


class TestFeeForTime:
    """Time band lookup."""

    def test_band_boundaries(self):
        expected = {
            (5, 59): 0,
            (6, 0): 8,
            (6, 29): 8,
            (6, 30): 13,
            (6, 59): 13,
            (7, 0): 18,
            (7, 59): 18,
            (8, 0): 13,
            (8, 29): 13,
            (8, 30): 8,
            (14, 59): 8,
            (15, 0): 13,
            (15, 29): 13,
            (15, 30): 18,
            (16, 59): 18,
            (17, 0): 13,
            (17, 59): 13,
            (18, 0): 8,
            (18, 29): 8,
            (18, 30): 0,
            (0, 0): 0,
            (23, 59): 0,
        }
        for (hour, minute), fee in expected.items():
            got = fee_for_time(datetime.time(hour, minute))
            assert got == fee, f"{hour:02d}:{minute:02d}: expected {fee}, got {got}"

    def test_every_minute_matches_schedule(self):
        for hour in range(24):
            for minute in range(60):
                got = fee_for_time(datetime.time(hour, minute))
                assert got in {0, 8, 13, 18}
                assert got == reference_fee(hour, minute), f"{hour:02d}:{minute:02d}"

    def test_seconds_are_ignored(self):
        assert fee_for_time(datetime.time(6, 29, 59, 999999)) == 8
        assert fee_for_time(datetime.time(18, 29, 59)) == 8

    def test_bands_are_contiguous_and_ordered(self):
        for previous, band in zip(FEE_BANDS, FEE_BANDS[1:]):
            end = datetime.datetime.combine(datetime.date.min, previous.end_time)
            start = datetime.datetime.combine(datetime.date.min, band.start_time)
            assert start - end == datetime.timedelta(minutes=1)


class TestTollFreeVehicle:
    """Exact, case-sensitive matching against the six exempt types."""

    def test_exempt_types(self):
        assert TOLL_FREE_VEHICLE_TYPES == {"Motorbike", "Tractor", "Emergency", "Diplomat", "Foreign", "Military"}
        for member in TollFreeVehicle:
            assert is_toll_free_vehicle(Vehicle(type=member.value)), member

    def test_enum_member_as_type(self):
        class Tractor:
            type = TollFreeVehicle.TRACTOR

        assert is_toll_free_vehicle(Tractor())
        assert get_vehicle_type(Tractor()) == "Tractor"

    def test_regular_and_near_miss_types(self):
        for vehicle_type in ("Car", "motorbike", "MILITARY", "Motorbike ", ""):
            assert not is_toll_free_vehicle(Vehicle(type=vehicle_type)), vehicle_type

    def test_missing_vehicle_is_not_exempt(self):
        assert not is_toll_free_vehicle(None)
        assert not is_toll_free_vehicle(object())
        assert get_vehicle_type(None) is None

    def test_duck_typed_vehicle(self):
        class Ambulance:
            type = "Emergency"

        assert is_toll_free_vehicle(Ambulance())


class TestCalculatePassageFee:
    def test_regular_weekday(self, car, at):
        assert calculate_passage_fee(at(6, 15), car) == 8
        assert calculate_passage_fee(at(7, 30), car) == 18
        assert calculate_passage_fee(at(19, 0), car) == 0

    def test_exempt_vehicle_always_free(self, motorbike, at):
        for hour in range(24):
            assert calculate_passage_fee(at(hour, 0), motorbike) == 0

    def test_none_vehicle_pays(self, at):
        assert calculate_passage_fee(at(7, 0), None) == 18

    def test_toll_free_dates(self, car):
        assert calculate_passage_fee(datetime.datetime(2024, 3, 9, 7, 30), car) == 0  # Saturday
        assert calculate_passage_fee(datetime.datetime(2024, 3, 29, 7, 30), car) == 0  # Good Friday
        assert calculate_passage_fee(datetime.datetime(2024, 7, 15, 7, 30), car) == 0  # July
        assert calculate_passage_fee(datetime.datetime(2024, 6, 21, 7, 30), car) == 0  # Midsummer Eve

    def test_aware_instant_converted_to_zone(self, car):
        utc = datetime.timezone.utc
        # 05:15 UTC is 06:15 in Stockholm (CET)
        instant = datetime.datetime(2024, 3, 5, 5, 15, tzinfo=utc)
        assert calculate_passage_fee(instant, car) == 8
        assert calculate_passage_fee(instant, car, tz="UTC") == 0

    def test_aware_instant_on_local_holiday(self, car):
        # 06:30 UTC is 07:30 in Stockholm: free on Good Friday, peak fee the day before
        instant = datetime.datetime(2024, 3, 29, 6, 30, tzinfo=datetime.timezone.utc)
        assert calculate_passage_fee(instant, car) == 0
        assert calculate_passage_fee(datetime.datetime(2024, 3, 28, 6, 30, tzinfo=datetime.timezone.utc), car) == 18

    def test_explicit_zone_for_naive_instant(self, car, stockholm, at):
        assert calculate_passage_fee(at(8, 15), car, tz=stockholm) == 13
        assert calculate_passage_fee(at(8, 15), car, tz="Europe/Stockholm") == 13
