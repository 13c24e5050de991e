"""Result rendering for terminal output."""

from timi.output.report import render_report, result_path

__all__ = ["render_report", "result_path"]
