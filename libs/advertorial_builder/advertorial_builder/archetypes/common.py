"""
Textes et slots partagés entre archétypes.

Langage des slots (résolu par core.copy.resolve) :
  "@path"          valeur brute de la table de copy de l'angle
  "{product}"      placeholder de contexte (titre échappé)
  "{@path}"        référence de copy insérée dans une chaîne
  IfDescription()  branche selon la présence d'une description produit
  "angles": [...]  slot émis uniquement pour ces angles
"""
from typing import Optional

LONG_DISCLAIMER = (
    "THIS IS AN ADVERTISEMENT AND NOT AN ACTUAL NEWS ARTICLE, BLOG, OR CONSUMER PROTECTION UPDATE. "
    "THE STORY DEPICTED ON THIS SITE AND THE PERSON DEPICTED IN THE STORY ARE NOT ACTUAL NEWS. "
    "RATHER, THIS STORY IS BASED ON THE RESULTS THAT SOME PEOPLE WHO HAVE USED THESE PRODUCTS HAVE ACHIEVED. "
    "THE RESULTS PORTRAYED IN THE STORY AND IN THE COMMENTS ARE ILLUSTRATIVE, AND MAY NOT BE THE RESULTS "
    "THAT YOU ACHIEVE WITH THESE PRODUCTS. THIS PAGE COULD RECEIVE COMPENSATION FOR CLICKS ON OR PURCHASE "
    "OF PRODUCTS FEATURED ON THIS SITE. MARKETING DISCLOSURE: This website is a marketplace. The owner has "
    "a monetary connection to the products and services advertised on the site."
)

SHORT_DISCLAIMER = (
    "THIS IS AN ADVERTISEMENT AND NOT AN ACTUAL NEWS ARTICLE, BLOG, OR CONSUMER PROTECTION UPDATE. "
    "MARKETING DISCLOSURE: This website is a marketplace. The owner has a monetary connection to the "
    "products and services advertised on this site."
)

ANGLES = ("Pain", "Desire", "Comparison")

# Variante des templates premade : "on this site." en fin de mention
PREMADE_DISCLAIMER = LONG_DISCLAIMER.replace("advertised on the site.", "advertised on this site.")


def numbered(index: int, source: str, label: Optional[str] = None) -> dict:
    """Slot numberedSection alimenté par la table `source` (benefits, reasons…)."""
    ref = f"@{source}.{index}"
    return {
        "type":       "numberedSection",
        "number":     f"{index + 1:02d}",
        "label":      label if label is not None else f"{ref}.label",
        "headline":   f"{ref}.headline",
        "body":       f"{ref}.body",
        "imageLabel": f"{ref}.imgLabel",
        "imageHint":  f"{ref}.imgHint",
    }


def inline_cta(button_text: str) -> dict:
    return {"type": "cta", "headline": "", "subtext": "", "buttonText": button_text, "style": "inline"}
