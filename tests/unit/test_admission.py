"""Unit tests for the admission decision."""

import pytest

from spendwarden.budgeting.admission import AdmissionOutcome, decide_admission


class TestUnboundedCategory:
    @pytest.mark.parametrize("amount", [1, 500, 10**12])
    def test_no_cap_always_admits(self, amount):
        decision = decide_admission(prior_spend=999_999, cap=None, amount=amount)

        assert decision.outcome is AdmissionOutcome.admit
        assert decision.admitted is True
        assert decision.exceeded_limit is False
        assert decision.remaining is None
        assert decision.remaining_after is None

    def test_no_cap_ignores_bypass(self):
        decision = decide_admission(prior_spend=0, cap=None, amount=100, bypass=True)

        assert decision.outcome is AdmissionOutcome.admit


class TestWithinCap:
    def test_under_cap_admits_without_flag(self):
        decision = decide_admission(prior_spend=100, cap=500, amount=200)

        assert decision.outcome is AdmissionOutcome.admit
        assert decision.exceeded_limit is False
        assert decision.remaining_after == 200

    def test_exactly_reaching_cap_is_admitted(self):
        """Boundary is inclusive: prior + amount == cap."""
        decision = decide_admission(prior_spend=300, cap=500, amount=200)

        assert decision.outcome is AdmissionOutcome.admit
        assert decision.remaining_after == 0

    def test_bypass_has_no_effect_within_cap(self):
        decision = decide_admission(prior_spend=0, cap=500, amount=100, bypass=True)

        assert decision.outcome is AdmissionOutcome.admit
        assert decision.exceeded_limit is False


class TestOverCap:
    def test_rejects_without_bypass(self):
        decision = decide_admission(prior_spend=200, cap=500, amount=350)

        assert decision.outcome is AdmissionOutcome.reject_over_limit
        assert decision.admitted is False
        assert decision.remaining == 300
        assert decision.exceed_amount == 50

    def test_override_with_bypass(self):
        decision = decide_admission(prior_spend=200, cap=500, amount=350, bypass=True)

        assert decision.outcome is AdmissionOutcome.admit_override
        assert decision.admitted is True
        assert decision.exceeded_limit is True
        assert decision.remaining == 300
        assert decision.exceed_amount == 50

    def test_one_unit_over_is_rejected(self):
        decision = decide_admission(prior_spend=300, cap=500, amount=201)

        assert decision.outcome is AdmissionOutcome.reject_over_limit
        assert decision.exceed_amount == 1

    def test_zero_cap_rejects_any_positive_amount(self):
        decision = decide_admission(prior_spend=0, cap=0, amount=1)

        assert decision.outcome is AdmissionOutcome.reject_over_limit
        assert decision.remaining == 0
        assert decision.exceed_amount == 1

    def test_zero_cap_with_bypass_overrides(self):
        decision = decide_admission(prior_spend=0, cap=0, amount=75, bypass=True)

        assert decision.outcome is AdmissionOutcome.admit_override
        assert decision.exceed_amount == 75

    def test_remaining_is_negative_when_already_over(self):
        decision = decide_admission(prior_spend=550, cap=500, amount=20, bypass=True)

        assert decision.remaining == -50
        assert decision.exceed_amount == 70
        assert decision.exceed_amount == decision.amount - (decision.cap - decision.prior_spend)


class TestDeterminism:
    def test_same_inputs_same_decision(self):
        decisions = {decide_admission(120, 300, 200, bypass=False) for _ in range(5)}

        assert len(decisions) == 1

    def test_concurrent_admissions_reading_same_prior_spend_both_admit(self):
        """Known gap: two callers that read the same prior spend both fit.

        Without a row lock on the cap (e.g. SQLite), both would be recorded and
        the month total (400 + 400) would end up above the cap of 500.
        """
        first = decide_admission(prior_spend=0, cap=500, amount=400)
        second = decide_admission(prior_spend=0, cap=500, amount=400)

        assert first.outcome is AdmissionOutcome.admit
        assert second.outcome is AdmissionOutcome.admit
        assert first.amount + second.amount > 500


def test_as_details_keys():
    details = decide_admission(200, 500, 350).as_details()

    assert details == {
        "cap": 500,
        "prior_spend": 200,
        "amount": 350,
        "remaining": 300,
        "exceed_amount": 50,
        "remaining_after": -50,
    }
