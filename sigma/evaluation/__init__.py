"""Evaluation: eval/apply, special forms."""
