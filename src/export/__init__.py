"""Export functionality for score reports."""

from .docx_generator import export_score_report

__all__ = ["export_score_report"]
