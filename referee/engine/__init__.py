"""Referee evaluation engine.

Matches a frozen constraint set against the rule table and aggregates
per-option strengths, weaknesses and trade-offs with a full rule trace.

Deterministic -- pure functions, no I/O.
"""
