"""Tests for role assignment by criticality and method."""

import pytest

from pmcreator.catalog.models import CriticalityTier, Method, Role
from pmcreator.planning.roles import assign_role


class TestAssignRole:
    @pytest.mark.parametrize("method", [Method.MEASUREMENT, Method.FUNCTIONAL_TEST, Method.ADJUSTMENT])
    def test_tier_a_technical_methods_go_to_supervisor(self, method):
        assert assign_role(CriticalityTier.A, method) is Role.SUPERVISOR

    @pytest.mark.parametrize("method", [Method.VISUAL, Method.CLEANING, Method.LUBRICATION])
    def test_tier_a_other_methods_go_to_team_lead(self, method):
        assert assign_role(CriticalityTier.A, method) is Role.TEAM_LEAD

    @pytest.mark.parametrize("method", [Method.MEASUREMENT, Method.FUNCTIONAL_TEST])
    def test_tier_b_measurement_and_tests_go_to_team_lead(self, method):
        assert assign_role(CriticalityTier.B, method) is Role.TEAM_LEAD

    @pytest.mark.parametrize("method", [Method.ADJUSTMENT, Method.VISUAL, Method.CLEANING, Method.LUBRICATION])
    def test_tier_b_other_methods_go_to_technician(self, method):
        assert assign_role(CriticalityTier.B, method) is Role.TECHNICIAN

    @pytest.mark.parametrize("method", list(Method))
    def test_tier_c_is_always_technician(self, method):
        assert assign_role(CriticalityTier.C, method) is Role.TECHNICIAN

    def test_accepts_raw_tier_value(self):
        assert assign_role("A", Method.MEASUREMENT) is Role.SUPERVISOR

    def test_total_over_all_inputs(self):
        for tier in CriticalityTier:
            for method in Method:
                assert assign_role(tier, method) in set(Role)
