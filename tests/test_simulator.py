from datetime import time

import numpy as np
import pytest

from transit_hub.models.domain import RouteDefinition, ScheduleEntry, Stop
from transit_hub.services.geospatial import interpolate, to_linestring, to_point
from transit_hub.services.simulation.models import Telemetry
from transit_hub.services.simulation.simulator import (
    compute_active_vehicles,
    effective_frequency,
    locate_segment,
    minutes_to_next_stop,
    vehicle_count,
    vehicle_offset,
)
from transit_hub.services.simulation.telemetry import TelemetrySource, occupancy_level


class FixedTelemetry:
    def sample(self, capacity: int) -> Telemetry:
        return Telemetry(occupancy_count=0, occupancy_level="low", delay_minutes=0)


def _route(offsets, first_departure="06:00", frequency=30, route_id="r-1") -> RouteDefinition:
    stops = tuple(
        Stop(name=f"S{index}", latitude=42.0 + index * 0.1, longitude=21.0 - index * 0.1, time_offset_minutes=offset)
        for index, offset in enumerate(offsets)
    )
    return RouteDefinition(
        id=route_id,
        name="Test",
        kind="intercity",
        stops=stops,
        schedule=(ScheduleEntry(first_departure_time=first_departure, frequency_minutes=frequency),),
        duration_minutes=offsets[-1],
        price_units=1.0,
        vehicle_number="7",
        capacity=40,
    )


def _bus3() -> RouteDefinition:
    return RouteDefinition(
        id="bus-3",
        name="Pristina - Mitrovica",
        kind="intercity",
        stops=(
            Stop("Pristina Bus Station", 42.6629, 21.1655, 0),
            Stop("Vushtrri", 42.8273, 20.9675, 20),
            Stop("Mitrovica Bus Station", 42.8914, 20.8660, 40),
        ),
        schedule=(
            ScheduleEntry("06:15", 30, "22:15"),
            ScheduleEntry("06:45", 30, "22:45"),
        ),
        duration_minutes=40,
        price_units=2.5,
        vehicle_number="103",
        capacity=45,
    )


def test_vehicle_count_formula():
    assert vehicle_count(60, 30) == 3
    assert vehicle_count(40, 30) == 2
    assert vehicle_count(15, 10) == 2


@pytest.mark.parametrize("elapsed", [-1500, -400, -61, -1, 0, 1, 59, 60, 125, 2000])
def test_offset_is_normalized_into_route_duration(elapsed):
    duration, frequency = 60, 25
    for index in range(vehicle_count(duration, frequency)):
        offset = vehicle_offset(elapsed, index, frequency, duration)
        assert 0 <= offset < duration


def test_segment_lookup_between_stops():
    stops = _route([0, 15, 25, 40, 60]).stops

    segment = locate_segment(stops, 30)

    assert segment.current_index == 2
    assert segment.next_index == 3
    assert segment.progress == pytest.approx(1 / 3)


def test_segment_lookup_at_exact_stop_offset():
    stops = _route([0, 15, 25, 40, 60]).stops

    segment = locate_segment(stops, 25)

    assert (segment.current_index, segment.next_index, segment.progress) == (2, 2, 0.0)


def test_segment_lookup_past_last_stop():
    stops = _route([0, 15, 25, 40, 60]).stops

    segment = locate_segment(stops, 75)

    assert (segment.current_index, segment.next_index, segment.progress) == (4, 4, 0.0)


def test_zero_length_segment_progress_is_zero():
    stops = _route([0, 10, 10, 20]).stops

    segment = locate_segment(stops, 10)

    assert segment.progress == 0.0
    assert minutes_to_next_stop(stops, segment, 10) == 1


@pytest.mark.parametrize("progress", [0.0, 0.25, 0.5, 0.9, 1.0])
def test_interpolated_position_lies_on_segment(progress):
    start, end = (42.6629, 21.1655), (42.8273, 20.9675)

    position = interpolate(start, end, progress)

    assert to_linestring([start, end]).distance(to_point(*position)) < 1e-9
    if progress == 0.0:
        assert position == start
    if progress == 1.0:
        assert position == pytest.approx(end)


def test_minutes_to_next_stop_rounds_up_and_floors_at_one():
    stops = _route([0, 15, 25, 40, 60]).stops

    assert minutes_to_next_stop(stops, locate_segment(stops, 30), 30) == 10
    assert minutes_to_next_stop(stops, locate_segment(stops, 39.5), 39.5) == 1
    assert minutes_to_next_stop(stops, locate_segment(stops, 15), 15) == 1


def test_bus3_vehicle_at_vushtrri_at_0635():
    vehicles = compute_active_vehicles([_bus3()], time(6, 35), FixedTelemetry())

    assert len(vehicles) == 2
    first = vehicles[0]
    assert first.id == "bus-3-bus-1"
    assert first.current_stop_name == "Vushtrri"
    assert first.next_stop_name == "Vushtrri"
    assert first.segment_progress == 0.0
    assert first.position == (42.8273, 20.9675)

    second = vehicles[1]
    assert second.current_stop_name == "Pristina Bus Station"
    assert second.next_stop_name == "Vushtrri"
    assert second.segment_progress == pytest.approx(0.5)
    assert second.minutes_to_next_stop == 10


def test_only_first_schedule_entry_drives_positions():
    route = _bus3()

    vehicles = compute_active_vehicles([route], "06:15", FixedTelemetry())

    assert vehicles[0].current_stop_name == "Pristina Bus Station"
    assert effective_frequency(route) == 30


def test_before_first_departure_uses_negative_offset_without_day_wrap():
    route = _route([0, 15, 25, 40, 60], first_departure="06:00", frequency=30)

    vehicles = compute_active_vehicles([route], "05:50", FixedTelemetry())

    # -10 mod 60 = 50: between S3 (40) and S4 (60)
    assert vehicles[0].current_stop_name == "S3"
    assert vehicles[0].next_stop_name == "S4"
    assert vehicles[0].segment_progress == pytest.approx(0.5)


def test_non_positive_frequency_uses_default():
    route = _route([0, 30, 60], frequency=0)

    vehicles = compute_active_vehicles([route], "07:00", FixedTelemetry(), default_frequency=30)

    assert len(vehicles) == 3


def test_occupancy_level_buckets():
    assert occupancy_level(13, 45) == "low"
    assert occupancy_level(14, 45) == "medium"
    assert occupancy_level(31, 45) == "medium"
    assert occupancy_level(32, 45) == "high"


def test_seeded_telemetry_is_reproducible():
    route = _bus3()

    first = compute_active_vehicles([route], "08:00", TelemetrySource(seed=42))
    second = compute_active_vehicles([route], "08:00", TelemetrySource(seed=42))

    assert [(v.occupancy_count, v.delay_minutes) for v in first] == [
        (v.occupancy_count, v.delay_minutes) for v in second
    ]


def test_telemetry_distribution_shape():
    source = TelemetrySource(np.random.default_rng(1234), delay_probability=0.2, max_delay_minutes=10)
    samples = [source.sample(45) for _ in range(5000)]

    counts = [sample.occupancy_count for sample in samples]
    delays = [sample.delay_minutes for sample in samples]
    assert min(counts) >= 0 and max(counts) < 45
    assert min(delays) >= 0 and max(delays) < 10
    delayed_share = sum(1 for delay in delays if delay > 0) / len(delays)
    # P(delay > 0) = 0.2 * 9/10
    assert 0.14 < delayed_share < 0.22
    assert all(sample.occupancy_level == occupancy_level(sample.occupancy_count, 45) for sample in samples)
