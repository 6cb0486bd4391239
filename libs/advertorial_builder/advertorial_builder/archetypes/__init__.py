"""
Registre des archétypes : squelettes de slots + tables de copy par angle.
"""
from .common import ANGLES, LONG_DISCLAIMER, SHORT_DISCLAIMER
from . import basic, before_after, editorial, five_reasons, listicle, personal_story, research_report, story

ARCHETYPES: dict = {
    a["id"]: a
    for a in (
        story.ARCHETYPE,
        listicle.ARCHETYPE,
        basic.STORY_CLASSIC,
        basic.STORY_UVP_SIDEBAR,
        basic.STORY_PROBLEM_SOLUTION,
        basic.LISTICLE_COMPARISON,
        editorial.ARCHETYPE,
        personal_story.ARCHETYPE,
        five_reasons.ARCHETYPE,
        research_report.ARCHETYPE,
        before_after.ARCHETYPE,
        basic.MINIMAL,
    )
}

__all__ = ["ARCHETYPES", "ANGLES", "LONG_DISCLAIMER", "SHORT_DISCLAIMER"]
