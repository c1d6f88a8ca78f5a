"""Typer CLI application for taking quizzes generated from documents."""

import logging
from pathlib import Path
from typing import NamedTuple, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich.table import Table

from src.api.client import QuizServiceClient
from src.config.settings import get_settings
from src.errors import (
    DocumentRejectedError,
    GenerationFailedError,
    IncompleteQuizError,
    QuizSessionError,
)
from src.export.docx_generator import export_score_report
from src.models.quiz import QuizData, ScoreBand, ScoreReport
from src.session.controller import QuestionStatus, QuizSessionController
from src.session.flow import generate_quiz, restart_quiz, score_session, summarize_document
from src.session.scoring import score_band, score_message
from src.session.store import SessionStore

app = typer.Typer(
    name="quiz-client",
    help="Summarize a PDF and take a generated multiple-choice quiz",
    add_completion=False,
)

console = Console()

BAND_STYLES = {
    ScoreBand.EXCELLENT: "green",
    ScoreBand.FAIR: "yellow",
    ScoreBand.POOR: "red",
}

QUIZ_HELP = (
    "[dim]1-9 select answer · n next · p previous · g N go to question · "
    "o overview · s submit · q quit[/dim]"
)


class Command(NamedTuple):
    """A parsed quiz-loop command."""

    action: str
    argument: Optional[int] = None


def parse_command(raw: str) -> Command:
    """
    Parse one line of user input from the quiz loop.

    Args:
        raw: Text typed by the user

    Returns:
        Command with action one of select, next, previous, goto, overview,
        submit, quit, help or invalid. Numbers are returned 1-based as typed.
    """
    text = raw.strip().lower()
    if not text:
        return Command("invalid")

    if text.isdigit():
        return Command("select", int(text))

    parts = text.split()
    keyword = parts[0]

    if keyword in ("g", "goto") and len(parts) == 2 and parts[1].isdigit():
        return Command("goto", int(parts[1]))

    if len(parts) == 1:
        simple = {
            "n": "next",
            "next": "next",
            "p": "previous",
            "prev": "previous",
            "previous": "previous",
            "o": "overview",
            "overview": "overview",
            "s": "submit",
            "submit": "submit",
            "q": "quit",
            "quit": "quit",
            "h": "help",
            "?": "help",
        }
        if keyword in simple:
            return Command(simple[keyword])

    return Command("invalid")


def configure_logging(level: str) -> None:
    """Route log records through rich."""
    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, rich_tracebacks=True)],
        force=True,
    )


@app.command()
def run(
    document: Path = typer.Argument(
        ...,
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
        help="PDF document to summarize and quiz on",
    ),
    export: bool = typer.Option(
        False,
        "--export/--no-export",
        help="Export the score report to DOCX after submission",
    ),
    output: str = typer.Option(
        "quiz_results",
        "--output",
        "-o",
        help="Base name of the exported report (without extension)",
    ),
    output_dir: Optional[str] = typer.Option(
        None,
        "--output-dir",
        help="Directory for exported reports (default from settings)",
    ),
) -> None:
    """
    Upload a document, read its summary and take the generated quiz.

    Example:
        quiz-client run lecture_notes.pdf --export -o lecture_quiz
    """
    settings = get_settings()
    store = SessionStore()

    with QuizServiceClient(settings) as client:
        try:
            with spinner("Uploading and summarizing document..."):
                summary = summarize_document(store, client, document)
        except DocumentRejectedError as e:
            console.print(f"[red]Invalid document:[/red] {e}", style="bold")
            raise typer.Exit(code=1)
        except GenerationFailedError as e:
            console.print(f"[red]Upload failed:[/red] {e.message}", style="bold")
            raise typer.Exit(code=1)

        console.print()
        console.print(Panel(summary, title="Document Summary", border_style="cyan"))

        if not typer.confirm("\nGenerate an interactive quiz from this summary?", default=True):
            store.reset()
            raise typer.Exit()

        try:
            with spinner("Generating quiz..."):
                controller = generate_quiz(store, client)
        except GenerationFailedError as e:
            console.print(f"[red]Quiz generation failed:[/red] {e.message}", style="bold")
            raise typer.Exit(code=1)

    while True:
        if not take_quiz(controller):
            console.print("\n[yellow]Quiz abandoned.[/yellow]")
            store.reset()
            raise typer.Exit()

        report = score_session(store)
        display_score_report(store.quiz_data, report)

        if export:
            export_report(
                store.quiz_data, report, output, output_dir or settings.default_output_dir
            )

        if not typer.confirm("\nRetake this quiz?", default=False):
            break
        controller = restart_quiz(store)

    store.reset()
    console.print("\n[green bold]Thanks for studying![/green bold]")


def take_quiz(controller: QuizSessionController) -> bool:
    """
    Run the interactive question loop until submission.

    Returns:
        True when the quiz was submitted, False when the user quit
    """
    console.print(f"\n[bold cyan]Quiz Time![/bold cyan] {QUIZ_HELP}")

    while True:
        display_question(controller)
        command = parse_command(typer.prompt("Your choice", default="", show_default=False))

        try:
            if command.action == "select":
                controller.select_answer(
                    controller.current_question.id, command.argument - 1
                )
                # Move on automatically once the current question is answered
                if not controller.is_last:
                    controller.next()
            elif command.action == "next":
                if not controller.can_advance():
                    console.print("[yellow]Please select an answer first.[/yellow]")
                elif not controller.next():
                    console.print("[yellow]This is the last question.[/yellow]")
            elif command.action == "previous":
                if not controller.previous():
                    console.print("[yellow]This is the first question.[/yellow]")
            elif command.action == "goto":
                controller.go_to_question(command.argument - 1)
            elif command.action == "overview":
                display_overview(controller)
            elif command.action == "submit":
                try:
                    controller.submit()
                except IncompleteQuizError as e:
                    console.print(f"[yellow]{e}. Jumping to the first one.[/yellow]")
                    controller.go_to_question(
                        controller.question_index(e.missing_question_ids[0])
                    )
                    continue
                return True
            elif command.action == "quit":
                if typer.confirm("Quit without submitting?", default=False):
                    return False
            elif command.action == "help":
                console.print(QUIZ_HELP)
            else:
                console.print(f"[red]Unrecognized input.[/red] {QUIZ_HELP}")
        except QuizSessionError as e:
            console.print(f"[red]{e}[/red]")


def display_question(controller: QuizSessionController) -> None:
    """Display the current question with its options."""
    question = controller.current_question
    selected = controller.selected_option(question.id)

    lines = []
    for index, option in enumerate(question.options):
        marker = "[green]●[/green]" if index == selected else "○"
        lines.append(f" {marker} {index + 1}. {option}")

    status = (
        "[green]Answer selected[/green]"
        if controller.can_advance()
        else "[yellow]Please select an answer[/yellow]"
    )
    body = f"[bold]{question.text}[/bold]\n\n" + "\n".join(lines) + f"\n\n{status}"
    subtitle = (
        f"Progress: {round(controller.progress)}% · "
        f"{controller.remaining_count} questions remaining"
    )

    console.print()
    console.print(
        Panel(
            body,
            title=f"Question {controller.current_index + 1} of {controller.question_count}",
            subtitle=subtitle,
            border_style="cyan",
        )
    )


def display_overview(controller: QuizSessionController) -> None:
    """Display the status of every question."""
    styles = {
        QuestionStatus.CURRENT: "bold reverse cyan",
        QuestionStatus.ANSWERED: "green",
        QuestionStatus.UNANSWERED: "dim",
    }
    cells = [
        f"[{styles[status]}] {number:>2} [/{styles[status]}]"
        for number, status in enumerate(controller.overview(), 1)
    ]
    rows = [" ".join(cells[i : i + 10]) for i in range(0, len(cells), 10)]
    console.print(
        Panel("\n".join(rows), title="Question Overview", border_style="cyan")
    )


def display_score_report(quiz_data: QuizData, report: ScoreReport) -> None:
    """Display the final score and the per-question results."""
    style = BAND_STYLES[score_band(report.percentage)]

    console.print("\n[bold green]Quiz Complete![/bold green]")

    table = Table(title="Your Score", border_style=style)
    table.add_column("Metric", style="cyan")
    table.add_column("Value", style="white")
    table.add_row("Score", f"[{style}]{report.percentage}%[/{style}]")
    table.add_row("Correct Answers", str(report.correct_count))
    table.add_row("Incorrect Answers", str(report.incorrect_count))
    table.add_row("Total Questions", str(report.total_count))

    console.print()
    console.print(table)
    console.print(f"[{style}]{score_message(report.percentage)}[/{style}]")

    details = Table(title="Detailed Results", border_style="cyan", show_lines=True)
    details.add_column("#", style="cyan")
    details.add_column("Question", style="white")
    details.add_column("Your Answer", style="white")
    details.add_column("Correct Answer", style="white")

    for i, (question, result) in enumerate(
        zip(quiz_data.questions, report.per_question), 1
    ):
        if result.selected_option is None:
            your_answer = "[dim]No answer[/dim]"
        elif result.is_correct:
            your_answer = f"[green]✓ {question.options[result.selected_option]}[/green]"
        else:
            your_answer = f"[red]✗ {question.options[result.selected_option]}[/red]"
        correct = "" if result.is_correct else question.options[question.correct_option_index]
        details.add_row(str(i), question.text, your_answer, correct)

    console.print()
    console.print(details)


def export_report(
    quiz_data: QuizData, report: ScoreReport, output: str, output_dir: str
) -> None:
    """Export the report to DOCX and print where it went."""
    console.print("\n[cyan]Exporting to DOCX...[/cyan]")
    try:
        output_file = export_score_report(
            quiz_data, report, output, output_dir=output_dir
        )
    except OSError as e:
        console.print(f"\n[red]Error during export:[/red] {e}", style="bold")
        return
    console.print(f"[green]✓[/green] Report exported to: {output_file}")


def spinner(description: str) -> Progress:
    """Transient spinner shown while waiting on the quiz service."""
    progress = Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        console=console,
        transient=True,
    )
    progress.add_task(f"[cyan]{description}", total=None)
    return progress


@app.command()
def info() -> None:
    """Display information about the quiz client."""
    settings = get_settings()
    info_text = f"""
[bold cyan]PDF Quiz Client[/bold cyan]
Version: 0.1.0

[bold]Flow:[/bold]
  • Upload a PDF (up to {settings.max_upload_mb} MB) for summarization
  • Read the generated summary
  • Take a generated multiple-choice quiz
  • Review your score and every answer

[bold]Quiz service:[/bold] {settings.api_base_url}
    """
    console.print(Panel(info_text, title="Quiz Client Info", border_style="cyan"))


@app.callback()
def callback(
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Show debug logging"
    ),
) -> None:
    """
    PDF Quiz Client - Turn documents into interactive quizzes.
    """
    configure_logging("DEBUG" if verbose else get_settings().log_level)


if __name__ == "__main__":
    app()
