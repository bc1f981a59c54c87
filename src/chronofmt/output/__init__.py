"""Human (Rich) and JSON rendering of FormatResult for the CLI."""
