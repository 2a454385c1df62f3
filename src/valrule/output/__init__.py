"""Output layer — rendering CheckResult for humans or machines."""
