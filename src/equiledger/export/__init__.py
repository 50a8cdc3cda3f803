"""Report renderers: printable HTML and Brazilian-locale CSV."""

from equiledger.export.csv_export import render_period_csv, render_report_csv
from equiledger.export.html_export import build_report_html

__all__ = ["render_period_csv", "render_report_csv", "build_report_html"]
