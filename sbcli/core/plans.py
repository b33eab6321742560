"""Plan selection."""

from ..bundle.models import EMPTY_PLAN, BundleTemplate, Plan


def select_plan(template: BundleTemplate, prompt, reporter) -> Plan:
    """Pick one plan from the template.

    A single plan is returned without asking. Otherwise the plan names are
    listed and one line is read; an exact name match wins. No input, no match,
    or no plans at all give ``EMPTY_PLAN``, which callers must treat as a
    failure.
    """
    if not template.plans:
        return EMPTY_PLAN
    if len(template.plans) == 1:
        return template.plans[0]

    reporter.print("List of available plans:")
    for plan in template.plans:
        reporter.print(f"name: {plan.name}")

    plan_name = prompt.ask("Enter name of plan you'd like to deploy: ")
    for plan in template.plans:
        if plan.name == plan_name:
            return plan
    return EMPTY_PLAN
