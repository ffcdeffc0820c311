"""Domain models: constraint sets, decision rules and evaluation results."""
