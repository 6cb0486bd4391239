"""
Presets de style pour la génération IA — registre de ton, figure d'autorité,
patron de titre. Clés A–D.
"""

STYLE_PRESETS: dict = {
    "A": {
        "name":      "Clinical Editorial",
        "authority": "Dr. Sarah Mitchell, Board-Certified Specialist",
        "tone":      "medical journal article — authoritative, evidence-based, clean. Cite specific studies and percentages. Use clinical language where appropriate but keep it accessible.",
        "headline_pattern": '"The [Adjective] [Category] [Specialists] Are Recommending to Their Own Patients" or "[Number] [Audience] Switched to This After [Doctor/Specialist] Revealed the Truth About [Category]"',
    },
    "B": {
        "name":      "Lifestyle Magazine",
        "authority": "Staff Editor or Beauty/Wellness Contributor",
        "tone":      "Cosmopolitan/GQ feature article — polished, aspirational, editorial. Reads like a magazine recommendation, not an ad. First-person editorial voice, like 'our team tested this'.",
        "headline_pattern": '"[Number] [Audience] Are [Doing Thing] to [Get Result] — And Editors Say It\'s The Real Deal" or "The [Category] Secret [Target Demo] Are Obsessed With Right Now"',
    },
    "C": {
        "name":      "News Exposé",
        "authority": "Investigative reporter or unnamed industry insider",
        "tone":      "Viral news investigation — urgent, revealing, slightly confrontational. Uses 'BREAKING', 'REVEALED', 'Industry insiders say...'. Creates information asymmetry — the reader is learning something others don't want them to know.",
        "headline_pattern": '"BREAKING: The [Category] Industry Has Been Hiding This From You" or "Doctors Are Calling This \'The Most Important [Category] Discovery in a Decade\'"',
    },
    "D": {
        "name":      "Warm & Trustworthy",
        "authority": "Real customer narrator or relatable community member (mom, pet owner, athlete)",
        "tone":      "Recommendation from a trusted friend — personal, conversational, cozy. First-person story. 'I was skeptical at first...' Feels like a text from a friend who found something amazing.",
        "headline_pattern": '"I\'ve Tried Everything for [Pain Point]. Nothing Worked Until I Found This" or "My [Friend/Sister/Doctor] Told Me About This [Product Category] and I Was Skeptical — Until I Tried It"',
    },
}

DEFAULT_PRESET = "A"


def get_preset(key: str = DEFAULT_PRESET) -> dict:
    """Preset par clé. Clé inconnue → ValueError."""
    if key not in STYLE_PRESETS:
        raise ValueError(f"Preset inconnu : {key!r}. Disponibles : {list(STYLE_PRESETS)}")
    return STYLE_PRESETS[key]


def list_presets() -> list:
    return [{"key": k, "name": v["name"]} for k, v in STYLE_PRESETS.items()]
