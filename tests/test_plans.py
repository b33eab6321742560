"""Tests for plan selection."""
from sbcli.bundle.models import EMPTY_PLAN, BundleTemplate
from sbcli.core.plans import select_plan
from sbcli.core.prompts import ScriptedPrompt


def test_single_plan_is_returned_without_prompting(single_plan_template, reporter):
    """
    Test that a one-plan bundle never reads input.
    Expected: plan P returned, no prompt asked, scripted input untouched.
    """
    # Arrange
    prompt = ScriptedPrompt(["something-else"])

    # Act
    plan = select_plan(single_plan_template, prompt, reporter)

    # Assert
    assert plan.name == "P"
    assert prompt.asked == []
    assert prompt.remaining == 1


def test_plan_selected_by_exact_name(multi_plan_template, reporter):
    """
    Test that the typed name selects the matching plan.
    Expected: 'prod' selected and plan names listed first.
    """
    # Arrange
    prompt = ScriptedPrompt(["prod"])

    # Act
    plan = select_plan(multi_plan_template, prompt, reporter)

    # Assert
    assert plan.name == "prod"
    printed = reporter.text("print")
    assert "name: dev" in printed
    assert "name: prod" in printed


def test_unknown_plan_returns_empty_plan(multi_plan_template, reporter):
    """
    Test that a non-matching name gives the empty sentinel plan.
    Expected: EMPTY_PLAN, no re-prompt.
    """
    prompt = ScriptedPrompt(["Prod", "prod"])

    plan = select_plan(multi_plan_template, prompt, reporter)

    assert plan is EMPTY_PLAN
    assert plan.name == ""
    assert len(prompt.asked) == 1


def test_empty_input_returns_empty_plan(multi_plan_template, reporter):
    plan = select_plan(multi_plan_template, ScriptedPrompt([""]), reporter)

    assert plan.name == ""


def test_bundle_without_plans(reporter):
    template = BundleTemplate(fq_name="a", image="img")

    assert select_plan(template, ScriptedPrompt([]), reporter) is EMPTY_PLAN
