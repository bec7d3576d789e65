from .text_report import render, render_table, report_payload

__all__ = ["render", "render_table", "report_payload"]
