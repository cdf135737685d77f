"""
Command-line reporting surface.

Exit codes: 0 when every required rule passed, 1 when the gate fails,
2 for configuration faults (bad rules, unknown checklist, malformed signal).
"""

import logging
from pathlib import Path

import click
import structlog

from checkgate.core.config import config
from checkgate.core.errors import ConfigurationError
from checkgate.core.utils.logging import configure_logging
from checkgate.presentation.formatter import (
    EXIT_CONFIGURATION_ERROR,
    EXIT_FAIL,
    exit_code_for,
    format_configuration_error,
    format_evaluation_output,
)
from checkgate.rules.checklists import CHECKLISTS, get_checklist
from checkgate.rules.evaluator import compliance_evaluator
from checkgate.rules.loaders import checklist_rule_loader, yaml_rule_loader
from checkgate.rules.models import RuleSet
from checkgate.rules.utils.validation import validate_rules_file
from checkgate.signals import load_signal_file, merge_signals, parse_signal_pairs

logger = structlog.get_logger(__name__)


def _report_configuration_error(ctx: click.Context, error: ConfigurationError) -> None:
    output = format_configuration_error(error)
    click.echo(f"{output['summary']}\n\n{output['text']}", err=True)
    ctx.exit(EXIT_CONFIGURATION_ERROR)


def _resolve_rule_set(rules_file: Path | None, checklist: str | None) -> RuleSet:
    if rules_file is not None:
        return yaml_rule_loader.get_rules(rules_file)
    if checklist is not None:
        return checklist_rule_loader.get_rules(checklist)
    if config.repo_config.rules_path.is_file():
        return yaml_rule_loader.get_rules(config.repo_config.rules_path)
    return checklist_rule_loader.get_rules(config.default_checklist)


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Log progress to stderr.")
def cli(verbose: bool) -> None:
    """Gate a change on required and advisory checklist rules."""
    level = logging.DEBUG if config.debug else (logging.INFO if verbose else logging.WARNING)
    configure_logging(config.logging, level=level)


@cli.command()
@click.option(
    "--rules",
    "rules_file",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Rules YAML file (defaults to the configured rules file, then the default checklist).",
)
@click.option("--checklist", help="Built-in checklist to evaluate against.")
@click.option("-s", "--signal", "signal_pairs", multiple=True, metavar="ID=BOOL", help="Observed outcome of a rule.")
@click.option(
    "--signal-file",
    type=click.Path(dir_okay=False, path_type=Path),
    help="YAML or JSON mapping of rule id to true/false. --signal entries override it.",
)
@click.option("--json", "as_json", is_flag=True, help="Print the evaluation result as JSON.")
@click.pass_context
def evaluate(
    ctx: click.Context,
    rules_file: Path | None,
    checklist: str | None,
    signal_pairs: tuple[str, ...],
    signal_file: Path | None,
    as_json: bool,
) -> None:
    """Evaluate observed signals against a rule set."""
    if rules_file is not None and checklist is not None:
        raise click.UsageError("Use either --rules or --checklist, not both.")

    try:
        rule_set = _resolve_rule_set(rules_file, checklist)
        file_signal = load_signal_file(signal_file) if signal_file is not None else {}
        signal = merge_signals(file_signal, parse_signal_pairs(signal_pairs))
        result = compliance_evaluator.evaluate(rule_set, signal)
    except ConfigurationError as e:
        logger.warning("evaluation_rejected", code=e.code, rule_id=e.rule_id)
        _report_configuration_error(ctx, e)

    logger.info("evaluation_completed", rule_set=result.rule_set, status=result.status.value)

    if as_json:
        click.echo(result.model_dump_json(indent=2))
    else:
        output = format_evaluation_output(result)
        click.echo(f"{output['summary']}\n\n{output['text']}")

    ctx.exit(exit_code_for(result))


@cli.command()
@click.argument("rules_file", required=False, type=click.Path(dir_okay=False, path_type=Path))
@click.pass_context
def validate(ctx: click.Context, rules_file: Path | None) -> None:
    """Validate a rules file (defaults to the configured rules file)."""
    validation = validate_rules_file(rules_file or config.repo_config.rules_path)
    click.echo(validation["message"])
    if not validation["success"]:
        ctx.exit(EXIT_FAIL)


@cli.command()
@click.argument("name", required=False)
@click.pass_context
def checklists(ctx: click.Context, name: str | None) -> None:
    """List built-in checklists, or show the rules of one."""
    if name is None:
        for checklist, rule_set in CHECKLISTS.items():
            click.echo(f"{checklist.value}\t{len(rule_set.rules)} rules")
        return

    try:
        rule_set = get_checklist(name)
    except ConfigurationError as e:
        _report_configuration_error(ctx, e)

    for rule in rule_set.rules:
        weight = "required" if rule.required else "optional"
        click.echo(f"{rule.id}\t{rule.category.value}\t{weight}\t{rule.description}")
