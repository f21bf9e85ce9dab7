"""Tests for the pricing wizard step sequencer."""

import pytest
from pydantic import ValidationError

from shoreagents.wizard.events import (
    AnswerEvent,
    CloseEvent,
    ConfirmEvent,
    EditEvent,
    FetchCandidates,
    SavePricingInfo,
)
from shoreagents.wizard.fields import InvalidAnswer
from shoreagents.wizard.machine import new_state, recommendation_level, transition
from shoreagents.wizard.prompts import summarize
from shoreagents.wizard.state import WizardState
from shoreagents.wizard.steps import Step


def answer(state: WizardState, *values: str) -> tuple[WizardState, list[Step], list]:
    """Apply answers in order; returns final state, steps visited, and all effects."""
    visited = [state.current_step]
    effects = []
    for value in values:
        result = transition(state, AnswerEvent(value=value))
        state = result.state
        effects.extend(result.effects)
        visited.append(state.current_step)
    return state, visited, effects


SINGLE_HIRE = ["1", "Technology", "Software Developer", "mid", "", "hybrid"]
TEAM_OF_THREE = ["3", "same", "Finance", "Accountant", "no", "entry", "mid", "senior"]


@pytest.mark.unit
class TestSingleHire:

    def test_single_hire_reaches_summary(self):
        state, visited, effects = answer(new_state(), *SINGLE_HIRE)

        assert visited == [
            Step.TEAM_SIZE,
            Step.INDUSTRY,
            Step.INDIVIDUAL_ROLES,
            Step.EXPERIENCE,
            Step.DESCRIPTION,
            Step.WORKPLACE_TYPE,
            Step.SUMMARY,
        ]
        assert effects == []

    def test_single_hire_skips_branch_questions(self):
        _, visited, _ = answer(new_state(), *SINGLE_HIRE)

        assert Step.ROLE_TYPE not in visited
        assert Step.EXPERIENCE_SETUP not in visited
        assert Step.WORKPLACE_SETUP not in visited

    def test_confirm_saves_exact_form_data(self):
        state, _, _ = answer(new_state(user_id="user-7"), *SINGLE_HIRE)

        result = transition(state, ConfirmEvent())

        assert result.state.current_step == Step.CANDIDATE_RECOMMENDATION
        assert result.effects == [
            SavePricingInfo(
                user_id="user-7",
                form_data={
                    "teamSize": "1",
                    "industry": "Technology",
                    "member1Role": "Software Developer",
                    "experience": "mid",
                    "member1Experience": "mid",
                    "description": "Not provided",
                    "workplaceSetup": "yes",
                    "workplaceType": "hybrid",
                },
            )
        ]

    def test_confirm_without_user_uses_anonymous_id(self):
        state, _, _ = answer(new_state(), *SINGLE_HIRE)

        save = transition(state, ConfirmEvent()).effects[0]

        assert save.user_id.startswith("anonymous_")


@pytest.mark.unit
class TestTeamRoles:

    def test_same_role_asked_once_and_copied(self):
        state, visited, _ = answer(new_state(), "3", "same", "Finance", "Accountant")

        assert visited.count(Step.INDIVIDUAL_ROLES) == 1
        assert [m.role for m in state.members] == ["Accountant"] * 3
        assert state.current_step == Step.EXPERIENCE_SETUP
        data = state.form_data()
        assert data["member1Role"] == data["member2Role"] == data["member3Role"] == "Accountant"

    def test_different_roles_asked_per_member(self):
        state = new_state()
        state, _, _ = answer(state, "3", "different", "Marketing")

        cursors = []
        for role in ["Designer", "Copywriter", "SEO Specialist"]:
            assert state.current_step == Step.INDIVIDUAL_ROLES
            cursors.append(state.current_member)
            state, _, _ = answer(state, role)

        assert cursors == [1, 2, 3]
        assert state.roles() == ["Designer", "Copywriter", "SEO Specialist"]
        assert state.current_step == Step.EXPERIENCE_SETUP

    def test_per_member_answers_are_labelled_in_transcript(self):
        state, _, _ = answer(new_state(), "2", "different", "Retail", "Cashier", "Stock Clerk")

        user_lines = [m.content for m in state.transcript if m.role == "user"]
        assert "Role (member 1): Cashier" in user_lines
        assert "Role (member 2): Stock Clerk" in user_lines


@pytest.mark.unit
class TestExperience:

    def test_shared_experience_copied_to_every_member(self):
        state, _, _ = answer(new_state(), "3", "same", "Finance", "Accountant", "yes", "senior")

        assert state.current_step == Step.DESCRIPTION
        data = state.form_data()
        for n in (1, 2, 3):
            assert data[f"member{n}Experience"] == data["experience"] == "senior"

    def test_individual_experience_maps_to_members(self):
        state, visited, _ = answer(new_state(), *TEAM_OF_THREE)

        assert visited.count(Step.EXPERIENCE_INDIVIDUAL) == 3
        assert state.current_step == Step.DESCRIPTION
        data = state.form_data()
        assert data["member1Experience"] == "entry"
        assert data["member2Experience"] == "mid"
        assert data["member3Experience"] == "senior"
        assert "experience" not in data

    def test_invalid_level_is_rejected(self):
        state, _, _ = answer(new_state(), *SINGLE_HIRE[:3])

        with pytest.raises(InvalidAnswer):
            transition(state, AnswerEvent(value="expert"))


@pytest.mark.unit
class TestWorkplace:

    def test_shared_workplace(self):
        state, _, _ = answer(new_state(), *TEAM_OF_THREE, "Bookkeeping", "yes", "full-office")

        assert state.current_step == Step.SUMMARY
        assert state.workplace_type == "full-office"
        assert all(m.workplace is None for m in state.members)

    def test_individual_workplaces(self):
        state, visited, _ = answer(
            new_state(), *TEAM_OF_THREE, "", "no", "hybrid", "work-from-home", "full-office"
        )

        assert visited.count(Step.WORKPLACE_INDIVIDUAL) == 3
        assert state.current_step == Step.SUMMARY
        assert [m.workplace for m in state.members] == ["hybrid", "work-from-home", "full-office"]
        assert "workplaceType" not in state.form_data()


@pytest.mark.unit
class TestRejectedEvents:

    def test_invalid_team_size_leaves_state_untouched(self):
        state = new_state()

        with pytest.raises(InvalidAnswer) as exc_info:
            transition(state, AnswerEvent(value="abc"))

        assert exc_info.value.step == "teamSize"
        assert state.current_step == Step.TEAM_SIZE
        assert state.team_size is None
        assert len(state.transcript) == 1

    def test_transition_does_not_modify_input(self):
        state = new_state()
        result = transition(state, AnswerEvent(value="2"))

        assert result.state.current_step == Step.ROLE_TYPE
        assert state.current_step == Step.TEAM_SIZE
        assert state.members == []

    def test_stale_step_is_rejected(self):
        state, _, _ = answer(new_state(), "2")

        with pytest.raises(InvalidAnswer):
            transition(state, AnswerEvent(value="3", step=Step.TEAM_SIZE))

    def test_matching_step_is_accepted(self):
        state, _, _ = answer(new_state(), "2")

        result = transition(state, AnswerEvent(value="same", step=Step.ROLE_TYPE))

        assert result.state.current_step == Step.INDUSTRY

    def test_confirm_and_edit_only_from_summary(self):
        state = new_state()

        with pytest.raises(InvalidAnswer):
            transition(state, ConfirmEvent())
        with pytest.raises(InvalidAnswer):
            transition(state, EditEvent(field="industry"))

    def test_summary_takes_no_answer(self):
        state, _, _ = answer(new_state(), *SINGLE_HIRE)

        with pytest.raises(InvalidAnswer):
            transition(state, AnswerEvent(value="yes"))


@pytest.mark.unit
class TestCloseAndFinish:

    def test_close_from_any_step(self):
        state, _, _ = answer(new_state(), "2", "same")

        closed = transition(state, CloseEvent()).state

        assert closed.current_step == Step.NONE
        with pytest.raises(InvalidAnswer):
            transition(closed, AnswerEvent(value="Tech"))

    def test_declining_candidates_closes(self):
        state, _, _ = answer(new_state(), *SINGLE_HIRE)
        state = transition(state, ConfirmEvent()).state

        result = transition(state, AnswerEvent(value="no"))

        assert result.state.current_step == Step.NONE
        assert result.effects == []

    def test_accepting_candidates_requests_fetch(self):
        state, _, _ = answer(new_state(), *TEAM_OF_THREE, "", "yes", "hybrid")
        state = transition(state, ConfirmEvent()).state

        result = transition(state, AnswerEvent(value="yes"))

        assert result.state.current_step == Step.SHOW_CANDIDATES
        assert result.effects == [
            FetchCandidates(role="Accountant", experience_level="entry", industry="Finance")
        ]

    def test_recommendation_level_for_mixed_team(self):
        state, _, _ = answer(new_state(), *SINGLE_HIRE[:3], "mixed")

        assert recommendation_level(state) == "mid"


@pytest.mark.unit
class TestEditFromSummary:

    def test_edit_industry_reasks_only_what_follows(self):
        state, _, _ = answer(new_state(), *SINGLE_HIRE)

        state = transition(state, EditEvent(field="industry")).state
        assert state.current_step == Step.INDUSTRY

        state, _, _ = answer(state, "Healthcare", "Nurse", "senior", "Triage calls", "work-from-home")

        assert state.current_step == Step.SUMMARY
        assert state.industry == "Healthcare"
        assert state.primary_role == "Nurse"

    def test_edit_description_replays_workplace_setup(self):
        state, _, _ = answer(new_state(), *TEAM_OF_THREE, "", "yes", "hybrid")

        state = transition(state, EditEvent(field="description")).state
        state, visited, _ = answer(state, "Month-end close")

        assert visited[-1] == Step.WORKPLACE_TYPE
        assert Step.WORKPLACE_SETUP not in visited
        assert state.description == "Month-end close"

    def test_edit_experience_opens_individual_step(self):
        state, _, _ = answer(new_state(), *TEAM_OF_THREE, "", "yes", "hybrid")

        state = transition(state, EditEvent(field="experience")).state

        assert state.current_step == Step.EXPERIENCE_INDIVIDUAL
        assert state.current_member == 1

    @pytest.mark.parametrize("field", ["teamSize", "roleType", "unknown"])
    def test_fixed_fields_cannot_be_edited(self, field):
        state, _, _ = answer(new_state(), *SINGLE_HIRE)

        with pytest.raises(InvalidAnswer):
            transition(state, EditEvent(field=field))


@pytest.mark.unit
class TestSummary:

    def test_summary_rows(self):
        state, _, _ = answer(new_state(), "1", "real estate", "virtual assistant", "entry", "", "hybrid")

        rows = {row["field"]: row["value"] for row in summarize(state)}

        assert rows["teamSize"] == "1"
        assert rows["industry"] == "Real Estate"
        assert rows["roles"] == "Virtual Assistant"
        assert rows["experience"] == "Entry level (0-2 years of experience)"
        assert rows["description"] == "Not provided"
        assert rows["workplace"] == "Hybrid"

    def test_summary_lists_members_when_roles_differ(self):
        state, _, _ = answer(
            new_state(), "2", "different", "Tech", "designer", "developer", "yes", "mid", "", "no",
            "hybrid", "full-office",
        )

        rows = {row["field"]: row["value"] for row in summarize(state)}

        assert rows["roles"] == "Member 1: Designer, Member 2: Developer"
        assert rows["workplace"] == "Member 1: Hybrid, Member 2: Full office"


@pytest.mark.unit
class TestStateValidation:

    def test_round_trip_of_valid_state(self):
        state, _, _ = answer(new_state(), "3", "different", "Marketing", "Designer")

        restored = WizardState.model_validate(state.model_dump(mode="json", by_alias=True))

        assert restored.current_member == 2
        assert len(restored.members) == 3

    def test_member_count_must_match_team_size(self):
        with pytest.raises(ValidationError):
            WizardState.model_validate({
                "currentStep": "individualRoles",
                "teamSize": 3,
                "members": [],
            })

    @pytest.mark.parametrize("current_member", [0, 4])
    def test_member_cursor_must_be_in_range(self, current_member):
        with pytest.raises(ValidationError):
            WizardState.model_validate({
                "currentStep": "individualRoles",
                "teamSize": 3,
                "members": [{}, {}, {}],
                "currentMember": current_member,
            })

    def test_cursor_ignored_outside_member_steps(self):
        state = WizardState.model_validate({
            "currentStep": "description",
            "teamSize": 1,
            "members": [{"role": "Bookkeeper"}],
            "currentMember": 5,
        })

        assert state.current_step == Step.DESCRIPTION
