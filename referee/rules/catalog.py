"""Baseline rule catalogue for the API architecture referee.

Rules are grouped by the dimension they key on: expertise, scale,
time-to-market, risk tolerance, then compound rules over two dimensions.
Order within the list is the order results are reported in.

Language discipline for every statement and description:
- conditional wording ("may", "can", "under these constraints")
- no absolutes and no recommendations
- no scores, weights or rankings

See ``referee.rules.lint`` for the review-time checks.
"""

from referee.models.evaluation import DecisionRule, OptionImpact, RuleImpacts
from referee.rules.table import RuleTable

DEFAULT_RULES: tuple[DecisionRule, ...] = (
    # -----------------------------------------------------------------------
    # Expertise (single dimension)
    # -----------------------------------------------------------------------
    DecisionRule(
        id="EXP_BEGINNER_REST",
        description="Beginner teams benefit from REST's familiar patterns",
        when={"expertise": "beginner"},
        impacts=RuleImpacts(
            rest=OptionImpact(
                strengths=(
                    "With beginner expertise, REST's familiar HTTP patterns may reduce onboarding friction",
                    "Under limited experience, widespread documentation can accelerate problem resolution",
                ),
            ),
        ),
    ),
    DecisionRule(
        id="EXP_BEGINNER_GRAPHQL",
        description="Beginner teams face GraphQL complexity challenges",
        when={"expertise": "beginner"},
        impacts=RuleImpacts(
            graphql=OptionImpact(
                weaknesses=(
                    "With beginner expertise, schema design complexity may overwhelm the team",
                    "Under limited experience, N+1 query problems often go undetected until production",
                ),
            ),
        ),
    ),
    DecisionRule(
        id="EXP_BEGINNER_GRPC",
        description="Beginner teams face gRPC tooling barriers",
        when={"expertise": "beginner"},
        impacts=RuleImpacts(
            grpc=OptionImpact(
                weaknesses=(
                    "With beginner expertise, Protocol Buffer syntax creates steep learning barriers",
                    "Under limited experience, binary debugging requires specialized tools the team may lack",
                ),
            ),
        ),
    ),
    DecisionRule(
        id="EXP_INTERMEDIATE_ALL",
        description="Intermediate teams can leverage moderate complexity",
        when={"expertise": "intermediate"},
        impacts=RuleImpacts(
            rest=OptionImpact(
                strengths=(
                    "For intermediate teams, REST allows focus on business logic over protocol complexity",
                ),
            ),
            graphql=OptionImpact(
                strengths=(
                    "For intermediate teams, GraphQL's type system can catch errors before runtime",
                ),
                weaknesses=(
                    "At intermediate level, query cost analysis may require additional learning investment",
                ),
            ),
            grpc=OptionImpact(
                strengths=(
                    "For intermediate teams, code generation can reduce manual serialization errors",
                ),
            ),
        ),
    ),
    DecisionRule(
        id="EXP_EXPERT_REST",
        description="Expert teams may find REST limiting",
        when={"expertise": "expert"},
        impacts=RuleImpacts(
            rest=OptionImpact(
                weaknesses=(
                    "For expert teams, REST's simplicity may limit fine-grained optimization opportunities",
                ),
            ),
        ),
    ),
    DecisionRule(
        id="EXP_EXPERT_GRAPHQL",
        description="Expert teams can leverage advanced GraphQL patterns",
        when={"expertise": "expert"},
        impacts=RuleImpacts(
            graphql=OptionImpact(
                strengths=(
                    "With expert teams, federation patterns enable sophisticated service composition",
                    "Under expert guidance, query complexity controls can be tuned precisely",
                ),
            ),
        ),
    ),
    DecisionRule(
        id="EXP_EXPERT_GRPC",
        description="Expert teams can maximize gRPC performance",
        when={"expertise": "expert"},
        impacts=RuleImpacts(
            grpc=OptionImpact(
                strengths=(
                    "With expert teams, bidirectional streaming unlocks real-time communication patterns",
                    "Under expert operation, binary protocol efficiency can be maximized",
                ),
            ),
        ),
    ),
    # -----------------------------------------------------------------------
    # Scale (single dimension)
    # -----------------------------------------------------------------------
    DecisionRule(
        id="SCALE_SMALL_REST",
        description="Small scale favors REST's minimal overhead",
        when={"scale": "small"},
        impacts=RuleImpacts(
            rest=OptionImpact(
                strengths=(
                    "At small scale, REST's minimal infrastructure overhead keeps operational costs low",
                ),
            ),
        ),
    ),
    DecisionRule(
        id="SCALE_SMALL_GRAPHQL",
        description="Small scale may not justify GraphQL overhead",
        when={"scale": "small"},
        impacts=RuleImpacts(
            graphql=OptionImpact(
                weaknesses=(
                    "At small scale, schema overhead may not justify the flexibility benefits",
                ),
            ),
        ),
    ),
    DecisionRule(
        id="SCALE_SMALL_GRPC",
        description="Small scale may not justify gRPC investment",
        when={"scale": "small"},
        impacts=RuleImpacts(
            grpc=OptionImpact(
                weaknesses=(
                    "At small scale, infrastructure investment may exceed performance benefits",
                ),
            ),
        ),
    ),
    DecisionRule(
        id="SCALE_MEDIUM_ALL",
        description="Medium scale allows balanced trade-offs",
        when={"scale": "medium"},
        impacts=RuleImpacts(
            rest=OptionImpact(
                strengths=(
                    "At medium scale, REST's caching layers can provide effective performance gains",
                ),
            ),
            graphql=OptionImpact(
                strengths=(
                    "At medium scale, reduced over-fetching can provide measurable bandwidth savings",
                ),
            ),
            grpc=OptionImpact(
                strengths=(
                    "At medium scale, strong typing can prevent contract drift between services",
                ),
            ),
        ),
    ),
    DecisionRule(
        id="SCALE_LARGE_REST",
        description="Large scale exposes REST inefficiencies",
        when={"scale": "large"},
        impacts=RuleImpacts(
            rest=OptionImpact(
                weaknesses=(
                    "At large scale, multiple round-trips may create network bottlenecks",
                    "Under high throughput, over-fetching can compound bandwidth costs",
                ),
            ),
        ),
    ),
    DecisionRule(
        id="SCALE_LARGE_GRAPHQL",
        description="Large scale amplifies GraphQL benefits and risks",
        when={"scale": "large"},
        impacts=RuleImpacts(
            graphql=OptionImpact(
                strengths=(
                    "At large scale, client-specified queries can reduce payload sizes significantly",
                ),
                weaknesses=(
                    "Under high load, unbounded query depth can trigger cascading failures",
                ),
            ),
        ),
    ),
    DecisionRule(
        id="SCALE_LARGE_GRPC",
        description="Large scale favors gRPC performance",
        when={"scale": "large"},
        impacts=RuleImpacts(
            grpc=OptionImpact(
                strengths=(
                    "At large scale, binary serialization can dramatically reduce latency",
                    "Under high throughput, HTTP/2 multiplexing eliminates connection overhead",
                ),
            ),
        ),
    ),
    # -----------------------------------------------------------------------
    # Time-to-market (single dimension)
    # -----------------------------------------------------------------------
    DecisionRule(
        id="TIME_FAST_REST",
        description="Fast delivery favors REST's rapid prototyping",
        when={"timeToMarket": "fast"},
        impacts=RuleImpacts(
            rest=OptionImpact(
                strengths=(
                    "Under fast delivery pressure, REST enables rapid prototyping with familiar tooling",
                    "With tight timelines, no schema setup can accelerate initial deployment",
                ),
            ),
        ),
    ),
    DecisionRule(
        id="TIME_FAST_GRAPHQL",
        description="Fast delivery conflicts with GraphQL setup",
        when={"timeToMarket": "fast"},
        impacts=RuleImpacts(
            graphql=OptionImpact(
                weaknesses=(
                    "Under fast delivery pressure, upfront schema design may delay initial release",
                    "With tight timelines, schema iteration costs can compound quickly",
                ),
            ),
        ),
    ),
    DecisionRule(
        id="TIME_FAST_GRPC",
        description="Fast delivery conflicts with gRPC setup",
        when={"timeToMarket": "fast"},
        impacts=RuleImpacts(
            grpc=OptionImpact(
                weaknesses=(
                    "Under fast delivery pressure, toolchain setup may delay initial deployment",
                    "With tight timelines, proto file iteration can slow development cycles",
                ),
            ),
        ),
    ),
    DecisionRule(
        id="TIME_BALANCED_ALL",
        description="Balanced timelines allow schema-first benefits",
        when={"timeToMarket": "balanced"},
        impacts=RuleImpacts(
            rest=OptionImpact(
                weaknesses=(
                    "With balanced timelines, lack of schema may create integration debt later",
                ),
            ),
            graphql=OptionImpact(
                strengths=(
                    "With balanced timelines, schema-first design can prevent downstream integration issues",
                ),
            ),
            grpc=OptionImpact(
                strengths=(
                    "With balanced timelines, contract-first design can ensure stable service boundaries",
                ),
            ),
        ),
    ),
    # -----------------------------------------------------------------------
    # Risk tolerance (single dimension)
    # -----------------------------------------------------------------------
    DecisionRule(
        id="RISK_LOW_REST",
        description="Low risk tolerance favors REST's maturity",
        when={"riskTolerance": "low"},
        impacts=RuleImpacts(
            rest=OptionImpact(
                strengths=(
                    "With low risk tolerance, REST's mature ecosystem can minimize operational surprises",
                ),
            ),
        ),
    ),
    DecisionRule(
        id="RISK_LOW_GRAPHQL",
        description="Low risk tolerance conflicts with GraphQL's newer patterns",
        when={"riskTolerance": "low"},
        impacts=RuleImpacts(
            graphql=OptionImpact(
                weaknesses=(
                    "With low risk tolerance, newer operational patterns may introduce uncertainty",
                ),
            ),
        ),
    ),
    DecisionRule(
        id="RISK_LOW_GRPC",
        description="Low risk tolerance has mixed gRPC implications",
        when={"riskTolerance": "low"},
        impacts=RuleImpacts(
            grpc=OptionImpact(
                strengths=(
                    "With low risk tolerance, strong typing can catch errors at compile time",
                ),
                weaknesses=(
                    "Under low risk appetite, limited browser support may narrow deployment options",
                ),
            ),
        ),
    ),
    DecisionRule(
        id="RISK_HIGH_ALL",
        description="High risk tolerance enables aggressive optimization",
        when={"riskTolerance": "high"},
        impacts=RuleImpacts(
            rest=OptionImpact(
                weaknesses=(
                    "With high risk tolerance, REST's conservative patterns may miss optimization potential",
                ),
            ),
            graphql=OptionImpact(
                strengths=(
                    "With high risk tolerance, rapid schema evolution can enable aggressive iteration",
                ),
            ),
            grpc=OptionImpact(
                strengths=(
                    "With high risk tolerance, performance gains may justify infrastructure complexity",
                ),
            ),
        ),
    ),
    # -----------------------------------------------------------------------
    # Compound (two dimensions)
    # -----------------------------------------------------------------------
    DecisionRule(
        id="COMPOUND_FAST_LOW_RISK",
        description="Fast delivery with low risk tolerance favors mature tooling",
        when={"timeToMarket": "fast", "riskTolerance": "low"},
        impacts=RuleImpacts(
            rest=OptionImpact(
                strengths=(
                    "Under fast delivery with low risk, REST's predictability can reduce delivery uncertainty",
                ),
                tradeoffs=(
                    "Delivery speed and risk mitigation achieved, but data fetching flexibility constrained",
                ),
            ),
        ),
    ),
    DecisionRule(
        id="COMPOUND_LARGE_BEGINNER",
        description="Large scale with beginner expertise increases operational risk",
        when={"scale": "large", "expertise": "beginner"},
        impacts=RuleImpacts(
            graphql=OptionImpact(
                weaknesses=(
                    "At large scale with beginner teams, query optimization complexity becomes high-risk",
                ),
                tradeoffs=(
                    "Flexibility potential exists, but team capability gap creates significant delivery risk",
                ),
            ),
            grpc=OptionImpact(
                weaknesses=(
                    "At large scale with beginner teams, operational complexity may overwhelm the team",
                ),
                tradeoffs=(
                    "Performance potential exists, but expertise gap creates operational risk",
                ),
            ),
        ),
    ),
    DecisionRule(
        id="COMPOUND_LARGE_EXPERT",
        description="Large scale with expert expertise enables advanced patterns",
        when={"scale": "large", "expertise": "expert"},
        impacts=RuleImpacts(
            graphql=OptionImpact(
                strengths=(
                    "At large scale with expert teams, query cost analysis can be implemented effectively",
                ),
                tradeoffs=(
                    "Maximum flexibility achieved, but requires sustained investment in query governance",
                ),
            ),
            grpc=OptionImpact(
                strengths=(
                    "At large scale with expert teams, streaming patterns can maximize throughput",
                ),
                tradeoffs=(
                    "Maximum performance achieved, but ecosystem accessibility permanently constrained",
                ),
            ),
        ),
    ),
    DecisionRule(
        id="COMPOUND_BEGINNER_FAST",
        description="Beginner team with fast delivery needs simplicity",
        when={"expertise": "beginner", "timeToMarket": "fast"},
        impacts=RuleImpacts(
            rest=OptionImpact(
                strengths=(
                    "For beginner teams under time pressure, REST's familiarity can accelerate delivery",
                ),
            ),
            graphql=OptionImpact(
                tradeoffs=(
                    "Long-term flexibility traded against immediate delivery capability",
                ),
            ),
            grpc=OptionImpact(
                tradeoffs=(
                    "Performance potential sacrificed for achievable delivery timeline",
                ),
            ),
        ),
    ),
)


def build_default_rule_table() -> RuleTable:
    """Build the baseline 26-rule table. Call once at startup."""
    return RuleTable(DEFAULT_RULES)
