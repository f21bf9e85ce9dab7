"""What Maya says at each step, and how answers and the summary read."""

from shoreagents.wizard.fields import title_case
from shoreagents.wizard.state import WizardState
from shoreagents.wizard.steps import EXPERIENCE_LABELS, WORKPLACE_LABELS, Step

STEP_TITLES = {
    Step.TEAM_SIZE: "Team size",
    Step.ROLE_TYPE: "Role type",
    Step.INDUSTRY: "Industry",
    Step.INDIVIDUAL_ROLES: "Role",
    Step.EXPERIENCE_SETUP: "Same experience level",
    Step.EXPERIENCE: "Experience level",
    Step.EXPERIENCE_INDIVIDUAL: "Experience level",
    Step.DESCRIPTION: "Job description",
    Step.WORKPLACE_SETUP: "Same workplace setup",
    Step.WORKPLACE_TYPE: "Workplace",
    Step.WORKPLACE_INDIVIDUAL: "Workplace",
    Step.CANDIDATE_RECOMMENDATION: "See candidates",
}


def question(state: WizardState, step: Step) -> str:
    """Assistant prompt shown when `step` becomes active."""
    n = state.current_member
    if step == Step.TEAM_SIZE:
        return "Hi, I'm Maya! How many team members are you looking to hire?"
    if step == Step.ROLE_TYPE:
        return (
            f"Will all {state.team_size} team members have the same role, "
            "or different roles?"
        )
    if step == Step.INDUSTRY:
        return "What industry is your business in?"
    if step == Step.INDIVIDUAL_ROLES:
        if state.role_type == "same":
            return f"What role will all {state.team_size} team members fill?"
        if state.team_size == 1:
            return "What role are you hiring for?"
        return f"What role should team member {n} fill?"
    if step == Step.EXPERIENCE_SETUP:
        return "Should every team member have the same experience level?"
    if step == Step.EXPERIENCE:
        return "What experience level are you looking for?"
    if step == Step.EXPERIENCE_INDIVIDUAL:
        return f"What experience level do you need for team member {n}?"
    if step == Step.DESCRIPTION:
        return (
            "Tell me a bit about the work, or let me generate a job "
            "description for you. You can also skip this step."
        )
    if step == Step.WORKPLACE_SETUP:
        return "Will every team member share the same workplace setup?"
    if step == Step.WORKPLACE_TYPE:
        return "Where will your team work: from home, hybrid, or full office?"
    if step == Step.WORKPLACE_INDIVIDUAL:
        return f"Where will team member {n} work?"
    if step == Step.SUMMARY:
        return "Here is a summary of your team requirements. Does everything look right?"
    if step == Step.CANDIDATE_RECOMMENDATION:
        return (
            "Thanks! I've saved your requirements. Would you like to see "
            "candidates that match what you need?"
        )
    if step == Step.SHOW_CANDIDATES:
        return "Here are the candidates that best match your requirements."
    return "No problem! Let me know whenever you're ready to build your team."


def echo(step: Step, value: str, member: int | None = None) -> str:
    """User-side transcript line, e.g. "Industry: Technology"."""
    title = STEP_TITLES.get(step, step.value)
    if member is not None:
        title = f"{title} (member {member})"
    return f"{title}: {value}"


def summarize(state: WizardState) -> list[dict[str, str]]:
    """Rows of the summary card. `field` is what an edit event sends back."""
    rows = [{"field": "teamSize", "label": "Team size", "value": str(state.team_size)}]
    if state.role_type:
        rows.append({"field": "roleType", "label": "Role type", "value": state.role_type.capitalize()})
    if state.industry:
        rows.append({"field": "industry", "label": "Industry", "value": title_case(state.industry)})

    if state.role_type == "same" or state.team_size == 1:
        roles = title_case(state.primary_role or "")
    else:
        roles = ", ".join(
            f"Member {i}: {title_case(m.role or '')}" for i, m in enumerate(state.members, start=1)
        )
    rows.append({"field": "roles", "label": "Roles", "value": roles})

    if state.experience_setup == "no":
        experience = ", ".join(
            f"Member {i}: {EXPERIENCE_LABELS.get(m.experience or '', m.experience or '')}"
            for i, m in enumerate(state.members, start=1)
        )
    else:
        experience = EXPERIENCE_LABELS.get(state.experience or "", state.experience or "")
    rows.append({"field": "experience", "label": "Experience", "value": experience})

    rows.append({"field": "description", "label": "Description", "value": state.description or ""})

    if state.workplace_setup == "no":
        workplace = ", ".join(
            f"Member {i}: {WORKPLACE_LABELS.get(m.workplace or '', m.workplace or '')}"
            for i, m in enumerate(state.members, start=1)
        )
    else:
        workplace = WORKPLACE_LABELS.get(state.workplace_type or "", state.workplace_type or "")
    rows.append({"field": "workplace", "label": "Workplace", "value": workplace})
    return rows
