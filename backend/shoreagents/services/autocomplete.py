"""Role and industry suggestions for the wizard's free-text steps.

Suggestions come from a fixed catalogue keyed by words in the query.
"""

from shoreagents.schemas.autocomplete import AutocompleteRequest, Suggestion

MIN_QUERY_LENGTH = 2

INDUSTRIES = [
    Suggestion(title="Technology", description="Software development, IT services, and technology solutions", level="Industry"),
    Suggestion(title="Healthcare", description="Healthcare services, medical practices, and wellness", level="Industry"),
    Suggestion(title="Finance", description="Banking, accounting, and financial advisory services", level="Industry"),
    Suggestion(title="Real Estate", description="Property management, real estate services, and construction", level="Industry"),
    Suggestion(title="Marketing", description="Digital marketing, advertising, and brand management", level="Industry"),
]

DEFAULT_ROLES = [
    Suggestion(title="Software Developer", description="Develops software applications and systems", level="mid"),
    Suggestion(title="Marketing Manager", description="Develops and executes marketing strategies", level="senior"),
    Suggestion(title="Customer Service Representative", description="Provides customer support and assistance", level="entry"),
]

# (keywords, suggestions); first group with a keyword in the query wins
ROLE_GROUPS: list[tuple[tuple[str, ...], list[Suggestion]]] = [
    (("dev", "software", "program"), [
        Suggestion(title="Software Developer", description="Develops software applications and systems", level="mid"),
        Suggestion(title="Frontend Developer", description="Creates user interfaces and client-side applications", level="mid"),
        Suggestion(title="Backend Developer", description="Develops server-side applications and APIs", level="mid"),
    ]),
    (("market", "social", "content"), [
        Suggestion(title="Marketing Manager", description="Develops and executes marketing strategies", level="senior"),
        Suggestion(title="Content Writer", description="Creates engaging content for various platforms", level="mid"),
        Suggestion(title="Social Media Specialist", description="Manages social media presence and campaigns", level="mid"),
    ]),
    (("customer", "service", "support"), [
        Suggestion(title="Customer Service Representative", description="Provides customer support and assistance", level="entry"),
        Suggestion(title="Support Specialist", description="Handles technical support and troubleshooting", level="mid"),
        Suggestion(title="Client Success Manager", description="Ensures client satisfaction and retention", level="senior"),
    ]),
    (("admin", "assistant", "virtual"), [
        Suggestion(title="Virtual Assistant", description="Provides administrative and support services", level="entry"),
        Suggestion(title="Administrative Assistant", description="Handles administrative tasks and coordination", level="entry"),
        Suggestion(title="Executive Assistant", description="Supports senior executives with various tasks", level="mid"),
    ]),
    (("account", "finance", "book"), [
        Suggestion(title="Accountant", description="Manages financial records and reporting", level="mid"),
        Suggestion(title="Bookkeeper", description="Maintains financial records and transactions", level="entry"),
        Suggestion(title="Financial Analyst", description="Analyzes financial data and market trends", level="mid"),
    ]),
]


def suggest_roles(query: str) -> list[Suggestion]:
    lowered = query.lower()
    for keywords, suggestions in ROLE_GROUPS:
        if any(k in lowered for k in keywords):
            return suggestions
    return DEFAULT_ROLES


def describe_role(role_title: str | None, industry: str | None) -> str:
    where = f" in the {industry} industry" if industry else ""
    return (
        f"We are looking for a {role_title or 'professional'}{where} to join our team. "
        "This role involves various responsibilities and requires relevant "
        "experience in the field."
    )


def autocomplete(request: AutocompleteRequest) -> list[Suggestion] | str:
    if request.type == "description":
        return describe_role(request.role_title, request.industry)
    if len(request.query.strip()) < MIN_QUERY_LENGTH:
        return []
    if request.type == "industry":
        return INDUSTRIES
    return suggest_roles(request.query)
