"""Hand-written templates for fallback meta generation.

Templates are ``str.format`` strings.  Available placeholders:

``{keyword}``  the keyword assigned to the variant
``{topic}``    resolved page topic (heading, title, URL path or first keyword)
``{domain}``   bare site domain, descriptions only
``{year}``     current calendar year
``{benefit}``  short phrase for the inferred value proposition

Titles must never reference ``{domain}``.
"""

from typing import Dict, Tuple

TITLE_TEMPLATES: Tuple[str, ...] = (
    "{keyword} - {topic} Guide You Can't Miss",
    "{topic}: {keyword} Secrets Revealed",
    "{keyword}? Here's What Actually Works",
    "{topic} {keyword}: Insider Tips & Tricks",
    "The Truth About {keyword} - {topic} Insights",
    "{keyword} Simplified: {topic} Without Confusion",
    "{topic} {keyword} That Changed Everything",
    "{keyword} in {year}: {topic} Edition",
    "Why Experts Swear By These {keyword} {topic}",
    "{keyword} Mistakes? {topic} Solutions Inside",
)

DESCRIPTION_TEMPLATES: Tuple[str, ...] = (
    "Discover {topic} {keyword} that actually deliver results. We've tested what works "
    "and what doesn't so you don't have to. Visit {domain} for real solutions.",
    '"I finally found {keyword} that work!" See how our {topic} approach has helped '
    "thousands. Check out {domain} for strategies others won't tell you about.",
    "Struggling with {topic} {keyword}? We've been there. Our team created this guide "
    "after years of trial and error. Real solutions at {domain}.",
    "{topic} {keyword} shouldn't be complicated. We've simplified the process into "
    "actionable steps anyone can follow. Find clarity at {domain}.",
    "What if you could master {topic} {keyword} in half the time? Our approach is built "
    "on {benefit}. See how we can help you too.",
    "The {topic} {keyword} landscape changes fast. Stay ahead with our regularly updated "
    "guide. Get what's working right now at {domain}.",
    "We asked {topic} experts about {keyword} - their answers surprised us. Discover the "
    "insider strategies behind {benefit}.",
    "Stop wasting time on {topic} {keyword} that don't deliver. Our no-nonsense guide "
    "cuts through the noise. Straight to what works.",
    "{topic} {keyword} made simple. We've distilled years of experience into {benefit}. "
    "Join thousands who've succeeded with our approach.",
    "Looking for honest {topic} {keyword} advice? No gimmicks, just proven strategies "
    "from our team. See what's possible today.",
)

# Value proposition → phrase used for {benefit}
BENEFIT_PHRASES: Dict[str, str] = {
    "time-saving solutions or efficiency improvements": "saving you time",
    "cost-effective solutions or money-saving strategies": "saving you money",
    "expert insights backed by professional experience": "real professional expertise",
    "practical, actionable guidance with clear steps": "clear, practical steps",
}

DEFAULT_BENEFIT = "proven results"
