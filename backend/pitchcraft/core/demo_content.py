"""
Deterministic demo content for pitch decks and executive summaries.

Used whenever the generative backend is not configured, and as the per-slide
fallback when a backend call fails.  Everything is derived from the idea's own
fields, so the same idea always yields byte-identical output.
"""

from collections.abc import Callable

from pitchcraft.schemas.deck_content import PitchSlide, SlideKind
from pitchcraft.schemas.idea import StartupIdeaBase


def _title(idea: StartupIdeaBase) -> tuple[str, str]:
    return idea.startup_name, (
        f"**{idea.startup_name}** — {idea.industry.value} innovation for {idea.target_audience}\n\n"
        f"• {idea.solution}\n"
        f"• Built for {idea.target_audience}\n"
        f"• Revenue from day one: {idea.monetization_plan}"
    )


def _problem(idea: StartupIdeaBase) -> tuple[str, str]:
    return "The Problem", (
        f"{idea.problem_statement}\n\n"
        f"• {idea.target_audience} face this every day\n"
        f"• Existing options such as {idea.competitors} leave the core need unmet\n"
        f"• The cost of inaction keeps growing across the {idea.industry.value} space"
    )


def _solution(idea: StartupIdeaBase) -> tuple[str, str]:
    return f"{idea.startup_name}: Our Solution", (
        f"{idea.solution}\n\n"
        f"• Designed specifically for {idea.target_audience}\n"
        f"• Removes the pain at its source instead of working around it\n"
        f"• Simple to adopt, fast to show value"
    )


def _market(idea: StartupIdeaBase) -> tuple[str, str]:
    size = idea.market_size or f"A large and growing {idea.industry.value} market"
    return "Market Opportunity", (
        f"{size}\n\n"
        f"• Primary segment: {idea.target_audience}\n"
        f"• Demand is shifting toward solutions like {idea.startup_name}\n"
        f"• The timing is right to capture early share"
    )


def _business_model(idea: StartupIdeaBase) -> tuple[str, str]:
    return "Business Model", (
        f"{idea.monetization_plan}\n\n"
        f"• Recurring relationships with {idea.target_audience}\n"
        f"• Margins improve as {idea.startup_name} scales\n"
        f"• Clear expansion paths into adjacent {idea.industry.value} segments"
    )


def _go_to_market(idea: StartupIdeaBase) -> tuple[str, str]:
    return "Go-to-Market Strategy", (
        f"Reaching {idea.target_audience} where they already are.\n\n"
        f"• Phase 1: direct outreach and design partners\n"
        f"• Phase 2: content, referrals and community\n"
        f"• Phase 3: channel partnerships across the {idea.industry.value} ecosystem"
    )


def _competitive_advantage(idea: StartupIdeaBase) -> tuple[str, str]:
    return "Competitive Advantage", (
        f"Competitive landscape: {idea.competitors}\n\n"
        f"• {idea.startup_name} is purpose-built for {idea.target_audience}\n"
        f"• Differentiated approach: {idea.solution}\n"
        f"• Compounding advantage from customer insight and data"
    )


def _team(idea: StartupIdeaBase) -> tuple[str, str]:
    team = idea.team_overview or f"A founding team committed to solving this problem for {idea.target_audience}."
    return "Our Team", (
        f"{team}\n\n"
        f"• Deep understanding of the {idea.industry.value} space\n"
        f"• Complementary product, technical and commercial skills\n"
        f"• Focused on execution and learning fast"
    )


def _financials(idea: StartupIdeaBase) -> tuple[str, str]:
    return "Financial Projections", (
        f"Revenue model: {idea.monetization_plan}\n\n"
        f"• Year 1: validate pricing with early {idea.target_audience}\n"
        f"• Year 2: scale acquisition channels and expand the customer base\n"
        f"• Year 3: reach profitability with improving unit economics"
    )


def _ask(idea: StartupIdeaBase) -> tuple[str, str]:
    return "The Ask", (
        f"Join {idea.startup_name} in transforming the {idea.industry.value} market.\n\n"
        f"• 40% product development\n"
        f"• 35% sales and marketing\n"
        f"• 25% operations and team growth\n\n"
        f"Milestone: become the go-to choice for {idea.target_audience}"
    )


_DEMO_BUILDERS: dict[SlideKind, Callable[[StartupIdeaBase], tuple[str, str]]] = {
    SlideKind.title: _title,
    SlideKind.problem: _problem,
    SlideKind.solution: _solution,
    SlideKind.market: _market,
    SlideKind.business_model: _business_model,
    SlideKind.go_to_market: _go_to_market,
    SlideKind.competitive_advantage: _competitive_advantage,
    SlideKind.team: _team,
    SlideKind.financials: _financials,
    SlideKind.ask: _ask,
}


def demo_slide(idea: StartupIdeaBase, kind: SlideKind) -> PitchSlide:
    """Return the demo slide for a single *kind*."""
    title, body = _DEMO_BUILDERS[kind](idea)
    return PitchSlide.for_kind(kind, title, body)


def demo_pitch_deck(idea: StartupIdeaBase) -> list[PitchSlide]:
    """Return the full demo deck, one slide per kind in deck order."""
    return [demo_slide(idea, kind) for kind in SlideKind]


def demo_executive_summary(idea: StartupIdeaBase) -> str:
    market = idea.market_size or f"The {idea.industry.value} market offers substantial room for a focused entrant."
    team = idea.team_overview or "The founding team combines domain knowledge with a track record of execution."
    return f"""\
# {idea.startup_name} — Executive Summary

## Company Overview
{idea.startup_name} is a {idea.industry.value} company serving {idea.target_audience}. \
Our mission is to solve a problem that our customers face every day.

## Problem
{idea.problem_statement}

## Solution
{idea.solution}

## Market Opportunity
{market}

## Business Model
{idea.monetization_plan}

## Competitive Landscape
Current alternatives include {idea.competitors}. {idea.startup_name} differentiates by focusing \
on the specific needs of {idea.target_audience}.

## Team
{team}

## Financial Outlook
We expect to validate pricing in year one, scale acquisition in year two, and reach \
profitability in year three.

## Funding Requirements
{idea.startup_name} is raising capital to fund product development (40%), sales and \
marketing (35%), and operations (25%).
"""
