"""
Prompt construction for slide and executive-summary generation.

Every function here is pure: the same idea, kind and persona always produce
the same instruction string.
"""

from pitchcraft.schemas.deck_content import SlideKind
from pitchcraft.schemas.idea import InvestorPersona, StartupIdeaBase


SLIDE_SYSTEM_PROMPT = (
    "You are an expert startup pitch consultant. Create compelling, "
    "investor-ready slide content that is concise, impactful, and tailored "
    "to the specific audience."
)

SUMMARY_SYSTEM_PROMPT = (
    "You are an expert business consultant specializing in executive "
    "summaries for startups. Create professional, compelling summaries that "
    "capture investor attention."
)


SLIDE_CHECKLISTS: dict[SlideKind, str] = {
    SlideKind.title: """\
Create a compelling title slide with:
- Company name and tagline
- Brief value proposition (1 sentence)
- Key metrics or traction if applicable""",
    SlideKind.problem: """\
Create a problem slide that:
- Clearly defines the pain point
- Shows market validation
- Demonstrates urgency and scale
- Uses specific examples or statistics""",
    SlideKind.solution: """\
Create a solution slide that:
- Clearly explains how you solve the problem
- Highlights unique value proposition
- Shows product/service benefits
- Includes key features or differentiators""",
    SlideKind.market: """\
Create a market opportunity slide that:
- Defines Total Addressable Market (TAM)
- Shows market growth trends
- Identifies target segments
- Demonstrates market timing""",
    SlideKind.business_model: """\
Create a business model slide that:
- Explains revenue streams
- Shows pricing strategy
- Demonstrates unit economics
- Highlights scalability""",
    SlideKind.go_to_market: """\
Create a go-to-market slide that:
- Outlines customer acquisition strategy
- Shows sales and marketing channels
- Demonstrates traction or early results
- Includes partnership opportunities""",
    SlideKind.competitive_advantage: """\
Create a competitive advantage slide that:
- Maps competitive landscape
- Highlights unique differentiators
- Shows barriers to entry
- Demonstrates sustainable advantages""",
    SlideKind.team: """\
Create a team slide that:
- Introduces key team members
- Highlights relevant experience
- Shows complementary skills
- Demonstrates execution capability""",
    SlideKind.financials: """\
Create a financials slide that:
- Shows revenue projections (3-5 years)
- Highlights key metrics and KPIs
- Demonstrates path to profitability
- Includes funding history if applicable""",
    SlideKind.ask: """\
Create an ask slide that:
- States funding amount needed
- Explains use of funds breakdown
- Shows expected milestones
- Highlights investor benefits and returns""",
}

_OUTPUT_FORMAT = """\
Format the response as:
# Slide Title
Slide content here (use bullet points, short paragraphs, and compelling language)"""

_SUMMARY_SECTIONS = """\
Create a 1-page executive summary that includes:
1. Company overview and mission
2. Problem and solution
3. Market opportunity
4. Business model and revenue streams
5. Competitive advantage
6. Team highlights
7. Financial projections summary
8. Funding requirements and use of funds

Format it professionally for investors, incubators, and grant applications."""


def idea_context(idea: StartupIdeaBase) -> str:
    """Serialize the idea's fields, one ``Label: value`` line each.

    Optional fields that are empty are left out entirely, label included.
    """
    lines = [
        f"Startup: {idea.startup_name}",
        f"Industry: {idea.industry.value}",
        f"Problem: {idea.problem_statement}",
        f"Solution: {idea.solution}",
        f"Target Audience: {idea.target_audience}",
        f"Business Model: {idea.monetization_plan}",
        f"Competitors: {idea.competitors}",
    ]
    if idea.market_size:
        lines.append(f"Market Size: {idea.market_size}")
    if idea.team_overview:
        lines.append(f"Team Overview: {idea.team_overview}")
    return "\n".join(lines)


def persona_context(persona: InvestorPersona) -> str:
    lines = [
        f"Investor Type: {persona.type.value}",
        f"Region: {persona.region.value}",
    ]
    if persona.focus_areas:
        lines.append(f"Focus Areas: {', '.join(persona.focus_areas)}")
    if persona.investment_range:
        lines.append(f"Investment Range: {persona.investment_range}")
    return "\n".join(lines)


def build_slide_prompt(
    idea: StartupIdeaBase,
    kind: SlideKind,
    persona: InvestorPersona | None = None,
) -> str:
    """Return the user instruction for generating one slide of *kind*."""
    sections = [idea_context(idea)]
    if persona is not None:
        sections.append(persona_context(persona))
    sections.append(SLIDE_CHECKLISTS[kind])
    sections.append(_OUTPUT_FORMAT)
    return "\n\n".join(sections)


def build_summary_prompt(idea: StartupIdeaBase) -> str:
    """Return the user instruction for the one-page executive summary."""
    return "\n\n".join([
        "Create a comprehensive executive summary for the following startup:",
        idea_context(idea),
        _SUMMARY_SECTIONS,
    ])
