"""
Month View CLI - 단일 진입점
"""
import typer
from interface.cli.commands.show_month import show_month
from interface.cli.commands.pick_date import pick_date

app = typer.Typer(help="월 달력 뷰 CLI")

app.command("show")(show_month)
app.command("pick")(pick_date)

if __name__ == "__main__":
    app()
