from datetime import time

import pytest

from transit_hub.models.domain import Place
from transit_hub.schemas.planner import EndpointModel, TripPlanRequest
from transit_hub.services.planner.base import validate_itinerary
from transit_hub.services.planner.dispatcher import get_strategy
from transit_hub.services.planner.models import ItineraryOption, Leg
from transit_hub.services.planner.service import plan_itineraries, plan_trip
from transit_hub.services.planner.templates import TemplatePlanner

ORIGIN = Place(name="Pristina", latitude=42.6629, longitude=21.1655)
DESTINATION = Place(name="Peja", latitude=42.6598, longitude=20.2888)


def test_plan_trip_returns_three_options():
    options = plan_trip(ORIGIN, DESTINATION, time(9, 0))

    assert [option.id for option in options] == ["option-1", "option-2", "option-3"]


def test_single_leg_option_at_0900():
    option = plan_trip(ORIGIN, DESTINATION, "09:00")[1]

    assert option.departure_time == "09:00"
    assert option.arrival_time == "09:55"
    assert option.transfer_count == 0
    assert option.price_units == 1.5
    assert option.total_duration_minutes == 55
    assert len(option.legs) == 1
    leg = option.legs[0]
    assert leg.from_name == "Pristina"
    assert leg.to_name == "Peja"
    assert leg.mode == "transit"
    assert leg.line_label == "2"


@pytest.mark.parametrize("now", ["00:00", "09:00", "17:42", "23:40", "23:59"])
def test_legs_chain_without_gaps(now):
    for option in plan_trip(ORIGIN, DESTINATION, now):
        for previous, following in zip(option.legs, option.legs[1:]):
            assert previous.arrival_time == following.departure_time
        assert option.transfer_count == len(option.legs) - 1
        assert sum(leg.leg_duration_minutes for leg in option.legs) == option.total_duration_minutes
        assert option.legs[0].departure_time == option.departure_time
        assert option.legs[-1].arrival_time == option.arrival_time


def test_template_aggregates():
    options = plan_trip(ORIGIN, DESTINATION, "09:00")

    summary = [
        (o.total_duration_minutes, o.total_distance_km, o.price_units, o.transfer_count, o.co2_saved_kg)
        for o in options
    ]
    assert summary == [
        (45, 12, 2.0, 1, 2.4),
        (55, 10, 1.5, 0, 2.0),
        (40, 15, 3.0, 1, 3.0),
    ]
    assert (options[2].departure_time, options[2].arrival_time) == ("09:10", "09:50")


def test_transfer_wait_is_reported_on_the_boarding_leg():
    first = plan_trip(ORIGIN, DESTINATION, "09:00")[0]

    assert first.legs[1].from_name == "City Center"
    assert first.legs[1].departure_time == "09:15"
    assert first.legs[1].wait_minutes == 5


def test_walk_leg_has_no_line_label():
    walk = plan_trip(ORIGIN, DESTINATION, "09:00")[2].legs[0]

    assert walk.mode == "walk"
    assert walk.line_label is None
    assert walk.color is None
    assert walk.to_name == "Main Station"


def test_times_wrap_past_midnight():
    option = plan_trip(ORIGIN, DESTINATION, "23:40")[0]

    assert option.departure_time == "23:40"
    assert option.arrival_time == "00:25"


def test_empty_endpoint_names_still_return_templates():
    options = plan_trip(Place("", 0.0, 0.0), Place("", 0.0, 0.0), "12:00")

    assert len(options) == 3
    assert options[1].legs[0].from_name == ""


def test_unknown_strategy_raises():
    with pytest.raises(ValueError, match="Unknown planner strategy"):
        get_strategy("dijkstra")


def test_broken_strategy_output_is_rejected():
    class GappyPlanner(TemplatePlanner):
        def plan(self, *, origin, destination, now):
            legs = [
                Leg("a", "transit", "Line", "A", "B", "10:00", "10:15", 15),
                Leg("b", "transit", "Line", "B", "C", "10:20", "10:45", 25),
            ]
            return [ItineraryOption("gap", 40, 5.0, "10:00", "10:45", 1.0, 1, 0.5, legs)]

    with pytest.raises(ValueError, match="arrives 10:15"):
        plan_trip(ORIGIN, DESTINATION, "10:00", GappyPlanner())


def test_validate_itinerary_checks_totals():
    leg = Leg("a", "walk", "Walk", "A", "B", "10:00", "10:05", 5)
    with pytest.raises(ValueError, match="sum to 5"):
        validate_itinerary(ItineraryOption("x", 6, 0.4, "10:00", "10:05", 0.0, 0, 0.0, [leg]))


def test_plan_itineraries_resolves_city_names():
    request = TripPlanRequest(
        origin=EndpointModel(name="Pristina"),
        destination=EndpointModel(name="peja"),
        at="09:00",
    )

    response = plan_itineraries(request)

    assert response.origin.coordinates == (42.6629, 21.1655)
    assert response.destination.coordinates == (42.6598, 20.2888)
    assert response.metadata["anchor_time"] == "09:00"
    assert response.metadata["straight_line_km"] > 50
    assert len(response.options) == 3


def test_plan_itineraries_requires_coordinates_for_unknown_places():
    request = TripPlanRequest(
        origin=EndpointModel(name="Somewhere"),
        destination=EndpointModel(name="Peja"),
        at="09:00",
    )

    with pytest.raises(ValueError, match="not a known city"):
        plan_itineraries(request)
