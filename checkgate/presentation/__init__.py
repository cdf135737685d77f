from checkgate.presentation.formatter import (
    exit_code_for,
    format_configuration_error,
    format_evaluation_output,
)

__all__ = [
    "exit_code_for",
    "format_configuration_error",
    "format_evaluation_output",
]
