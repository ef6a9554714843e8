import typer

from cpf_document.application.dtos.cpf_report_dto import CPFReportDTO
from cpf_document.application.use_cases.generate_cpf import GenerateCPFUseCase
from cpf_document.application.use_cases.validate_cpf import ValidateCPFUseCase
from cpf_document.config import settings
from cpf_document.domain.value_objects.cpf import CPF
from cpf_document.infrastructure.serialization.json_codec import dumps
from cpf_document.logging_config import configure_logging

app = typer.Typer(help="CPF document CLI")


def _reason(report: CPFReportDTO) -> str:
    if report.value_missing:
        return "no digits found"
    if report.too_short:
        return f"too short ({len(report.digits)} of 11 digits)"
    return "check digits do not match"


@app.callback()
def main(log_level: str = typer.Option(settings.log_level, "--log-level", "-l")) -> None:
    configure_logging(log_level)


@app.command()
def validate(
    text: str = typer.Argument(..., help="CPF, formatted or not"),
    as_json: bool = typer.Option(False, "--json", "-j"),
) -> None:
    report = ValidateCPFUseCase().execute(text)
    if as_json:
        typer.echo(dumps(report.as_dict()))
    elif report.valid:
        typer.echo(f"{report.formatted}: valid")
    else:
        typer.echo(f"{report.formatted}: invalid, {_reason(report)}")
    if not report.valid:
        raise typer.Exit(code=1)


@app.command("format")
def format_(text: str = typer.Argument(..., help="CPF, formatted or not")) -> None:
    typer.echo(CPF.from_string(text).format())


@app.command()
def generate(
    count: int = typer.Option(1, "--count", "-n", min=1),
    formatted: bool = typer.Option(False, "--formatted", "-f"),
) -> None:
    for cpf in GenerateCPFUseCase().execute(count):
        typer.echo(cpf.format() if formatted else cpf.to_json())


if __name__ == "__main__":
    app()
