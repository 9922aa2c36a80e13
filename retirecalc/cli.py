"""Typer-based command line interface for one-off projections."""

import logging
from typing import Any, Dict, List, Optional

import typer

from retirecalc.core.analysis import build_report
from retirecalc.core.config import Settings, load_settings
from retirecalc.core.logging import setup_logging
from retirecalc.core.projection import project
from retirecalc.core.validation import validate
from retirecalc.presentation import currency_symbol, get_renderer

logger = logging.getLogger(__name__)

app = typer.Typer(help="Retirement savings projection calculator")

EXAMPLES: List[Dict[str, Any]] = [
    {
        "title": "USD Example with ±1% Rate Variation",
        "params": {
            "currentAge": 25,
            "retirementAge": 65,
            "monthlyContribution": 500,
            "initialBalance": 1000,
            "goalAmount": 500000,
            "annualRate": 0.07,
            "currencyLabel": "USD",
            "rateVariationBand": 0.01,
            "compoundingFrequency": "daily",
        },
    },
    {
        "title": "EUR Example with ±2% Rate Variation",
        "params": {
            "currentAge": 30,
            "retirementAge": 60,
            "monthlyContribution": 300,
            "initialBalance": 5000,
            "goalAmount": 200000,
            "annualRate": 0.05,
            "currencyLabel": "EUR",
            "rateVariationBand": 0.02,
        },
    },
    {
        "title": "GBP Example with No Variation",
        "params": {
            "currentAge": 20,
            "retirementAge": 60,
            "monthlyContribution": 50,
            "initialBalance": 100,
            "goalAmount": 50000,
            "annualRate": 0.03,
            "currencyLabel": "GBP",
            "rateVariationBand": 0,
        },
    },
    {
        "title": "GBP Example with ±0.5% Rate Variation",
        "params": {
            "currentAge": 20,
            "retirementAge": 60,
            "monthlyContribution": 50,
            "initialBalance": 100,
            "goalAmount": 50000,
            "annualRate": 0.03,
            "currencyLabel": "GBP",
            "rateVariationBand": 0.005,
        },
    },
]


def _configure(config_path: str) -> Settings:
    settings = load_settings(config_path)
    setup_logging(settings.log_level)
    return settings


def _run(params: Dict[str, Any], output_format: str, settings: Settings) -> int:
    params = {"currencyLabel": settings.default_currency, **params}

    outcome = validate(params)
    if not outcome.ok:
        logger.info("projection rejected: %s", outcome.error.reason)
        typer.echo(f"Error: {outcome.error.reason}", err=True)
        return 1

    report = build_report(project(outcome.request))
    renderer = get_renderer(output_format)
    symbol = currency_symbol(report.result.currencyLabel, settings.currency_symbols)
    typer.echo(renderer.render(report, symbol), nl=False)
    return 0


@app.command("project")
def project_command(
    current_age: int = typer.Option(..., "--current-age", help="Age today, in years"),
    retirement_age: int = typer.Option(..., "--retirement-age", help="Planned retirement age"),
    monthly_contribution: float = typer.Option(..., "--monthly", help="Amount invested every month"),
    initial_balance: float = typer.Option(0.0, "--initial", help="Balance invested today"),
    goal_amount: float = typer.Option(..., "--goal", help="Target balance at retirement"),
    annual_rate: float = typer.Option(..., "--rate", help="Annual rate as a decimal, e.g. 0.07"),
    rate_variation: float = typer.Option(0.0, "--variation", help="Sensitivity band as a decimal, e.g. 0.01"),
    frequency: str = typer.Option("monthly", "--frequency", help="daily, monthly, quarterly or yearly"),
    currency: Optional[str] = typer.Option(None, "--currency", help="Currency code, e.g. GBP"),
    output_format: str = typer.Option("text", "--format", help="text or html"),
    config_path: str = typer.Option("config.yaml", "--config", help="Path to config.yaml"),
) -> None:
    """Project savings at retirement and print the report."""
    if output_format.lower() not in ("text", "html"):
        raise typer.BadParameter("format must be text or html", param_hint="--format")

    params: Dict[str, Any] = {
        "currentAge": current_age,
        "retirementAge": retirement_age,
        "monthlyContribution": monthly_contribution,
        "initialBalance": initial_balance,
        "goalAmount": goal_amount,
        "annualRate": annual_rate,
        "rateVariationBand": rate_variation,
        "compoundingFrequency": frequency,
    }
    if currency:
        params["currencyLabel"] = currency.upper()

    code = _run(params, output_format, _configure(config_path))
    if code:
        raise typer.Exit(code=code)


@app.command("examples")
def examples_command(
    output_format: str = typer.Option("text", "--format", help="text or html"),
    config_path: str = typer.Option("config.yaml", "--config", help="Path to config.yaml"),
) -> None:
    """Run the bundled example projections."""
    settings = _configure(config_path)
    for index, example in enumerate(EXAMPLES):
        if index:
            typer.echo("")
        typer.echo(f"=== {example['title']} ===")
        code = _run(example["params"], output_format, settings)
        if code:
            raise typer.Exit(code=code)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
