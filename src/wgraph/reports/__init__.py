from .json_report import JSONReporter
from .terminal_report import distance_table, print_terminal_summary

__all__ = ["JSONReporter", "distance_table", "print_terminal_summary"]
