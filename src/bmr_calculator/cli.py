import json

import typer

from .app_logging import configure_logging
from .config import load_settings
from .form import CalculatorForm
from .models import ACTIVITY_LEVELS, ActivityLevel, InputFields, MetabolicResult, Sex

app = typer.Typer(help="BMR and TDEE utilities")


class EchoNotifier:
    """Print results as JSON on stdout and validation errors on stderr."""

    def __init__(self, activity: ActivityLevel) -> None:
        self.activity = activity

    def error(self, message: str) -> None:
        typer.echo(message, err=True)

    def success(self, result: MetabolicResult) -> None:
        typer.echo(
            json.dumps(
                {
                    "bmr": result.bmr,
                    "tdee": result.tdee,
                    "activity": self.activity,
                    "activity_label": result.activity_label,
                    "multiplier": ACTIVITY_LEVELS[self.activity].multiplier,
                    "weight_loss_target": result.weight_loss_target,
                    "maintenance_target": result.maintenance_target,
                    "muscle_gain_target": result.muscle_gain_target,
                },
                ensure_ascii=False,
            )
        )


@app.command()
def calc(
    weight: str = typer.Option("", help="Body weight in kg"),
    height: str = typer.Option("", help="Height in cm"),
    age: str = typer.Option("", help="Age in years"),
    sex: Sex | None = typer.Option(
        None,
        help="Sex: male, female",
        case_sensitive=False,
    ),
    activity: ActivityLevel | None = typer.Option(
        None,
        help="Activity level: sedentary, light, moderate, active, extreme",
        case_sensitive=False,
    ),
) -> None:
    """Compute BMR and TDEE with the Mifflin-St Jeor equation."""
    try:
        settings = load_settings()
    except ValueError as exc:
        typer.echo(f"Configuration error: {exc}", err=True)
        raise typer.Exit(code=2) from exc
    configure_logging(settings.log_level)

    sex = sex or settings.default_sex
    activity = activity or settings.default_activity
    form = CalculatorForm(
        notifier=EchoNotifier(activity),
        fields=InputFields(weight_kg=weight, height_cm=height, age_years=age, sex=sex, activity_level=activity),
    )
    outcome = form.submit()
    if not outcome.ok:
        raise typer.Exit(code=1)


@app.command()
def levels() -> None:
    """List the activity levels with their multipliers."""
    typer.echo(
        json.dumps(
            [
                {"activity": key, "multiplier": factor.multiplier, "label": factor.label}
                for key, factor in ACTIVITY_LEVELS.items()
            ],
            ensure_ascii=False,
        )
    )


if __name__ == "__main__":
    app()
