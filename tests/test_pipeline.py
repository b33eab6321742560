"""Tests for the bundle run pipeline."""
import json

from sbcli.bundle.catalog import Catalog
from sbcli.core import RunContext, RunOptions, ScriptedPrompt, run_pipeline
from sbcli.core.actions import default_actions
from sbcli.launcher import LaunchResult


def _context(templates, lines, launcher, reporter, **opts):
    opts.setdefault("bundle_name", "T")
    opts.setdefault("namespace", "demo")
    return RunContext(
        catalog=Catalog(templates),
        opts=RunOptions(**opts),
        prompt=ScriptedPrompt(lines),
        launcher=launcher,
        reporter=reporter,
    )


def test_end_to_end_provision(single_plan_template, mock_launcher, reporter):
    """
    Test the full run for a one-plan bundle.
    Expected: parameters collected, payload carries reserved keys, pod launched.
    """
    # Arrange
    ctx = _context([single_plan_template], ["foo"], mock_launcher, reporter, action="provision")

    # Act
    completed = run_pipeline(ctx, default_actions())

    # Assert
    assert completed
    assert ctx.params == {"name": "foo"}
    payload = json.loads(ctx.extra_vars)
    assert payload["name"] == "foo"
    assert payload["namespace"] == "demo"
    assert payload["cluster"] == "openshift"
    assert payload["_apb_plan_id"] == "P"
    assert payload["in_cluster"] is False
    assert ctx.request.action == "provision"
    assert ctx.request.image == single_plan_template.image
    mock_launcher.launch.assert_called_once_with(ctx.request)
    assert ctx.launched
    assert "Successfully created pod" in reporter.text("success")


def test_unknown_bundle_stops_before_launch(single_plan_template, mock_launcher, reporter):
    ctx = _context([single_plan_template], ["foo"], mock_launcher, reporter, bundle_name="missing")

    assert run_pipeline(ctx, default_actions()) is False
    assert "Didn't find supplied APB: missing" in reporter.text("error")
    mock_launcher.launch.assert_not_called()


def test_unresolved_plan_is_fatal(multi_plan_template, mock_launcher, reporter):
    """
    Test that an unmatched plan name aborts the run.
    Expected: error reported, no parameters collected, no launch.
    """
    ctx = _context([multi_plan_template], ["staging", "x"], mock_launcher, reporter,
                   bundle_name="dh-postgresql-apb")

    assert run_pipeline(ctx, default_actions()) is False
    assert "Did not find a selected plan" in reporter.text("error")
    assert ctx.params is None
    mock_launcher.launch.assert_not_called()


def test_multi_plan_run(multi_plan_template, mock_launcher, reporter):
    ctx = _context([multi_plan_template], ["prod", "9.5", ""], mock_launcher, reporter,
                   bundle_name="dh-postgresql-apb", action="deprovision")

    assert run_pipeline(ctx, default_actions())
    assert ctx.params == {"postgresql_version": "9.5", "replicas": 2}
    assert json.loads(ctx.extra_vars)["_apb_plan_id"] == "prod"
    assert ctx.request.metadata["bundle-action"] == "deprovision"


def test_input_ending_early_stops_before_launch(single_plan_template, mock_launcher, reporter):
    ctx = _context([single_plan_template], [""], mock_launcher, reporter)

    assert run_pipeline(ctx, default_actions()) is False
    assert "Input ended" in reporter.text("error")
    mock_launcher.launch.assert_not_called()


def test_launcher_rejection_is_reported(single_plan_template, mock_launcher, reporter):
    """
    Test that a failed launch is reported without a success message.
    Expected: error with launcher detail, launched stays False.
    """
    mock_launcher.launch.return_value = LaunchResult(ok=False, error="forbidden")
    ctx = _context([single_plan_template], ["foo"], mock_launcher, reporter)

    assert run_pipeline(ctx, default_actions()) is False
    assert "Failed to create pod: forbidden" in reporter.text("error")
    assert not ctx.launched
    assert reporter.text("success") == ""


def test_dry_run_skips_launch(single_plan_template, mock_launcher, reporter):
    ctx = _context([single_plan_template], ["foo"], mock_launcher, reporter, dry_run=True)

    assert run_pipeline(ctx, default_actions())
    assert ctx.request is not None
    mock_launcher.launch.assert_not_called()
