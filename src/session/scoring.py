"""Score Report derivation for submitted quizzes."""

from src.errors import EmptyQuizScoringError
from src.models.quiz import AnswerMap, QuestionResult, QuizData, ScoreBand, ScoreReport


def compute_score_report(quiz_data: QuizData, answers: AnswerMap) -> ScoreReport:
    """
    Score the answers against the quiz, question by question.

    Unanswered questions count as incorrect. The percentage is rounded half up.

    Args:
        quiz_data: Quiz holding the questions in presentation order
        answers: Committed mapping of question id to chosen option index

    Returns:
        ScoreReport for the quiz

    Raises:
        EmptyQuizScoringError: If the quiz has no questions
    """
    total_count = quiz_data.question_count
    if total_count == 0:
        raise EmptyQuizScoringError("Cannot score a quiz without questions")

    per_question = []
    correct_count = 0
    for question in quiz_data.questions:
        selected = answers.get(question.id)
        is_correct = selected is not None and selected == question.correct_option_index
        if is_correct:
            correct_count += 1
        per_question.append(
            QuestionResult(
                question_id=question.id,
                selected_option=selected,
                correct_option_index=question.correct_option_index,
                is_correct=is_correct,
            )
        )

    return ScoreReport(
        correct_count=correct_count,
        total_count=total_count,
        percentage=round_half_up_percentage(correct_count, total_count),
        per_question=per_question,
    )


def round_half_up_percentage(part: int, whole: int) -> int:
    """Integer percentage of part/whole, exact halves rounded up."""
    # floor(100 * part / whole + 0.5) without float error
    return (200 * part + whole) // (2 * whole)


def score_band(percentage: int) -> ScoreBand:
    if percentage >= 80:
        return ScoreBand.EXCELLENT
    if percentage >= 60:
        return ScoreBand.FAIR
    return ScoreBand.POOR


def score_message(percentage: int) -> str:
    """Encouragement shown next to the final score."""
    if percentage >= 90:
        return "Outstanding! You have mastered this content."
    if percentage >= 80:
        return "Great job! You have a solid understanding."
    if percentage >= 70:
        return "Good work! You got most of it right."
    if percentage >= 60:
        return "Not bad! Consider reviewing the material."
    return "Keep studying! Practice makes perfect."
