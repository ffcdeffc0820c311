"""API Architecture Referee.

Deterministic comparison of REST, GraphQL and gRPC under declared team,
scale, delivery and risk constraints. Every statement in a result is
traceable to the rule that produced it.

Deterministic -- no scoring, no ranking, no LLM calls.
"""
