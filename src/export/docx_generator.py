"""DOCX document generator for score report export."""

from datetime import datetime
from pathlib import Path

from docx import Document
from docx.enum.text import WD_ALIGN_PARAGRAPH
from docx.shared import Inches, Pt, RGBColor

from src.models.quiz import QuizData, ScoreBand, ScoreReport
from src.session.scoring import score_band, score_message

GREEN = RGBColor(0, 128, 0)
ORANGE = RGBColor(255, 140, 0)
RED = RGBColor(192, 0, 0)
GREY = RGBColor(128, 128, 128)

BAND_COLORS = {
    ScoreBand.EXCELLENT: GREEN,
    ScoreBand.FAIR: ORANGE,
    ScoreBand.POOR: RED,
}


def ensure_output_directory(output_dir: str = "output") -> Path:
    """
    Ensure the output directory exists.

    Args:
        output_dir: Directory path to create

    Returns:
        Path object for the output directory
    """
    output_path = Path(output_dir)
    output_path.mkdir(parents=True, exist_ok=True)
    return output_path


def generate_timestamped_filename(base_name: str, extension: str = "docx") -> str:
    """
    Generate a filename with timestamp.

    Args:
        base_name: Base name for the file; any directory part is dropped
        extension: File extension (without dot)

    Returns:
        Filename with timestamp
    """
    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    base_name = Path(base_name).stem
    return f"{base_name}_{timestamp}.{extension}"


def export_score_report(
    quiz_data: QuizData,
    report: ScoreReport,
    output_path: str,
    use_output_dir: bool = True,
    output_dir: str = "output",
) -> str:
    """
    Export a scored quiz attempt to a formatted DOCX file.

    Args:
        quiz_data: Quiz the report was computed for
        report: Score report of the attempt
        output_path: Path where the DOCX file should be saved
        use_output_dir: If True, saves to output_dir with a timestamped name
        output_dir: Directory to save files in (default: "output")

    Returns:
        Path to the created DOCX file
    """
    if use_output_dir:
        output_dir_path = ensure_output_directory(output_dir)
        output_path = str(output_dir_path / generate_timestamped_filename(output_path))

    doc = Document()
    setup_document_styles(doc)

    title = doc.add_heading("Quiz Results", level=0)
    title.alignment = WD_ALIGN_PARAGRAPH.CENTER

    add_score_section(doc, report)

    if quiz_data.summary:
        doc.add_heading("Document Summary", level=1)
        summary_para = doc.add_paragraph(quiz_data.summary)
        summary_para.runs[0].italic = True

    doc.add_page_break()
    add_results_table(doc, quiz_data, report)
    add_question_details(doc, quiz_data, report)

    doc.save(output_path)

    return output_path


def setup_document_styles(doc: Document) -> None:
    """Set the default font and page margins."""
    font = doc.styles["Normal"].font
    font.name = "Calibri"
    font.size = Pt(11)

    for section in doc.sections:
        section.top_margin = Inches(1)
        section.bottom_margin = Inches(1)
        section.left_margin = Inches(1)
        section.right_margin = Inches(1)


def add_score_section(doc: Document, report: ScoreReport) -> None:
    """
    Add the headline score, the counts and the encouragement message.

    Args:
        doc: Document to add to
        report: Score report of the attempt
    """
    score_para = doc.add_paragraph()
    score_para.alignment = WD_ALIGN_PARAGRAPH.CENTER
    score_run = score_para.add_run(f"{report.percentage}%")
    score_run.bold = True
    score_run.font.size = Pt(36)
    score_run.font.color.rgb = BAND_COLORS[score_band(report.percentage)]

    counts_para = doc.add_paragraph(
        f"{report.correct_count} out of {report.total_count} questions correct"
    )
    counts_para.alignment = WD_ALIGN_PARAGRAPH.CENTER

    message_para = doc.add_paragraph(score_message(report.percentage))
    message_para.alignment = WD_ALIGN_PARAGRAPH.CENTER
    message_para.runs[0].italic = True

    date_para = doc.add_paragraph(
        f"Completed: {datetime.now().strftime('%Y-%m-%d %H:%M')}"
    )
    date_para.alignment = WD_ALIGN_PARAGRAPH.CENTER
    date_para.runs[0].font.size = Pt(9)
    date_para.runs[0].font.color.rgb = GREY


def add_results_table(doc: Document, quiz_data: QuizData, report: ScoreReport) -> None:
    """Add a one-row-per-question overview table."""
    header = doc.add_heading("Results Overview", level=1)
    header.runs[0].font.color.rgb = RGBColor(0, 51, 102)

    table = doc.add_table(rows=1, cols=3)
    table.style = "Light Grid Accent 1"

    header_cells = table.rows[0].cells
    header_cells[0].text = "Q#"
    header_cells[1].text = "Question"
    header_cells[2].text = "Result"

    for cell in header_cells:
        for paragraph in cell.paragraphs:
            for run in paragraph.runs:
                run.bold = True

    for i, (question, result) in enumerate(
        zip(quiz_data.questions, report.per_question), 1
    ):
        row_cells = table.add_row().cells
        row_cells[0].text = str(i)
        row_cells[1].text = question.text
        row_cells[2].text = "Correct" if result.is_correct else "Incorrect"

    doc.add_paragraph()


def add_question_details(
    doc: Document, quiz_data: QuizData, report: ScoreReport
) -> None:
    """
    Add each question with the chosen and the correct answer.

    Args:
        doc: Document to add to
        quiz_data: Quiz the report was computed for
        report: Score report of the attempt
    """
    header = doc.add_heading("Detailed Results", level=1)
    header.runs[0].font.color.rgb = RGBColor(0, 51, 102)

    for i, (question, result) in enumerate(
        zip(quiz_data.questions, report.per_question), 1
    ):
        q_para = doc.add_paragraph()
        q_run = q_para.add_run(f"Q{i}. ")
        q_run.bold = True
        q_run.font.size = Pt(12)
        q_para.add_run(question.text)

        if result.selected_option is None:
            your_answer = "No answer"
        else:
            your_answer = question.options[result.selected_option]

        answer_para = doc.add_paragraph()
        answer_para.paragraph_format.left_indent = Inches(0.5)
        answer_para.add_run("Your answer: ").bold = True
        answer_run = answer_para.add_run(your_answer)
        answer_run.font.color.rgb = GREEN if result.is_correct else RED

        if not result.is_correct:
            correct_para = doc.add_paragraph()
            correct_para.paragraph_format.left_indent = Inches(0.5)
            correct_para.add_run("Correct answer: ").bold = True
            correct_run = correct_para.add_run(
                question.options[question.correct_option_index]
            )
            correct_run.font.color.rgb = GREEN

        doc.add_paragraph()
