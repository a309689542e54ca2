from __future__ import annotations

from ferry_gtfs.models.entities import CalendarDateRow, CalendarRow, Trip
from ferry_gtfs.policy.base import AgencyPolicy
from ferry_gtfs.policy.service_ids import (
    NO_RESTRICTION,
    ServiceIdFilter,
    compute_useful_service_ids,
)


def test_useful_service_ids_follow_kept_trips(feed, policy):
    assert compute_useful_service_ids(feed, policy) == frozenset({"1", "2"})


def test_base_policy_keeps_every_service(feed):
    assert compute_useful_service_ids(feed, AgencyPolicy()) == frozenset({"1", "2", "3"})


def test_computation_ignores_a_bound_filter(feed, policy):
    bound = policy.with_service_ids(ServiceIdFilter(frozenset()))
    assert compute_useful_service_ids(feed, bound) == frozenset({"1", "2"})


class TestServiceIdFilter:
    def test_no_restriction(self):
        assert NO_RESTRICTION.restricts is False
        assert NO_RESTRICTION.excludes_all is False
        assert NO_RESTRICTION.excludes("anything") is False

    def test_restricted(self):
        f = ServiceIdFilter(frozenset({"1"}))
        assert f.excludes("1") is False
        assert f.excludes("3") is True
        assert f.excludes_all is False


class TestPolicyBinding:
    def test_with_service_ids_returns_a_copy(self, policy):
        bound = policy.with_service_ids(ServiceIdFilter(frozenset({"1"})))
        assert bound is not policy
        assert policy.service_ids is NO_RESTRICTION
        assert bound.config is policy.config

    def test_filters_rows(self, policy):
        bound = policy.with_service_ids(ServiceIdFilter(frozenset({"1"})))
        assert bound.excluding_all() is False
        assert bound.exclude_calendar(CalendarRow(service_id="1")) is False
        assert bound.exclude_calendar(CalendarRow(service_id="3")) is True
        assert bound.exclude_calendar_date(CalendarDateRow(service_id="3")) is True
        assert bound.exclude_trip(Trip(trip_id="T1", route_id="6771", service_id="1")) is False
        assert bound.exclude_trip(Trip(trip_id="T4", route_id="6612", service_id="3")) is True

    def test_empty_set_excludes_everything(self, policy):
        bound = policy.with_service_ids(ServiceIdFilter(frozenset()))
        assert bound.excluding_all() is True
        assert bound.exclude_calendar(CalendarRow(service_id="1")) is True
        assert bound.exclude_calendar_date(CalendarDateRow(service_id="1")) is True
        assert bound.exclude_trip(Trip(trip_id="T1", route_id="6771", service_id="1")) is True
