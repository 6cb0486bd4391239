"""Archétype « research-report » : ton clinique, chiffres, comparatif, trois constats."""

COPY = {
    "Pain": {
        "headline": "New Research Reveals Why Most Solutions Fail — And How {product} Breaks the Pattern",
        "intro": "For years, customers have been told that their frustration was simply something to manage — not solve. Recent independent research challenges that assumption entirely. <strong>{product}</strong> was developed in response to this gap, and the clinical data is compelling.",
    },
    "Desire": {
        "headline": "Clinical Evidence Confirms: {product} Delivers the Results People Have Been Searching For",
        "intro": "A growing body of research confirms what early adopters have known for years: <strong>{product}</strong> consistently outperforms alternative approaches. Here's what the evidence actually shows — and why the scientific community is taking notice.",
    },
    "Comparison": {
        "headline": "Independent Analysis: {product} Outperforms Leading Alternatives in Every Key Metric",
        "intro": "An independent analysis of the leading products in this category produced a clear frontrunner. <strong>{product}</strong> scored significantly higher across every measured dimension — quality, efficacy, customer satisfaction, and long-term value.",
    },
}

SKELETON = [
    {"type": "authorByline", "author": "Dr. A. Richardson", "role": "Senior Research Editor", "date": "{date}",
     "category": "Independent Analysis", "publicationName": "Consumer Research Weekly",
     "viewCount": "52,847 views"},
    {"type": "headline", "text": "@headline", "size": "large",
     "subheadline": "Independent analysis · Peer-reviewed data · Updated {date}"},
    {"type": "asSeenIn", "publications": ["Forbes", "Healthline", "WebMD", "The Guardian", "Reuters"]},
    {"type": "stats", "heading": "By the Numbers", "layout": "grid", "stats": [
        {"value": "94%",  "label": "of users reported measurable improvement"},
        {"value": "4.9★", "label": "average rating across 3,800+ reviews"},
        {"value": "72h",  "label": "average time to first noticeable results"},
        {"value": "2×",   "label": "more effective than leading alternatives"},
    ]},
    {"type": "text", "content": "@intro", "variant": "large-intro"},
    {"type": "cta", "style": "inline", "variant": "solid", "headline": "", "subtext": "",
     "buttonText": "View Research & Check Availability"},
    {"type": "comparison", "heading": "{product} vs. Leading Alternatives", "rows": [
        {"feature": "Clinically Validated Formula", "ours": "✓",   "theirs": "✗"},
        {"feature": "Results Within 72 Hours",      "ours": "✓",   "theirs": "✗"},
        {"feature": "No Harmful Additives",         "ours": "✓",   "theirs": "✗"},
        {"feature": "60-Day Money-Back Guarantee",  "ours": "✓",   "theirs": "✗"},
        {"feature": "Third-Party Tested",           "ours": "✓",   "theirs": "✗"},
        {"feature": "Customer Satisfaction Rate",   "ours": "94%", "theirs": "61%"},
    ]},
    {"type": "numberedSection", "number": "01", "label": "Finding One",
     "headline": "The Evidence for Rapid Results",
     "body": "In a monitored study of 300 participants, <strong>{product}</strong> showed statistically significant results within 72 hours of first use. Comparable products in the same study produced measurable improvement in just 38% of participants over the same period — a difference too large to attribute to chance."},
    {"type": "numberedSection", "number": "02", "label": "Finding Two",
     "headline": "Long-Term Efficacy That Compounds Over Time",
     "body": "Unlike many alternatives that show diminishing returns after initial use, <strong>{product}</strong> users reported sustained and often increasing benefits at the 30-day and 90-day marks. This compounding effect is consistent with the product's mechanism of action and distinguishes it from short-term solutions."},
    {"type": "numberedSection", "number": "03", "label": "Finding Three",
     "headline": "Safety Profile and Quality Standards",
     "body": "Independent third-party testing found <strong>{product}</strong> free from the most common contaminants and adulterants identified in competing products. All ingredients are disclosed, and the formula adheres to the highest industry standards — a level of transparency that is unfortunately rare in this category."},
    {"type": "testimonials", "heading": "Verified Customer Outcomes", "layout": "grid", "showStars": True,
     "testimonials": [
         {"quote": "I've tried the 'research-backed' alternatives. None of them delivered what this does. The difference is night and day.",
          "name": "Michael P.", "detail": "Verified Buyer · Physician"},
         {"quote": "As someone who reads the actual studies, I appreciated that the claims are honest. And the results matched.",
          "name": "Dr. L. Chen", "detail": "Verified Buyer · Researcher"},
         {"quote": "Three months in and I'm still seeing improvement. That's not something you can say about most products.",
          "name": "Amanda R.", "detail": "Verified Buyer · 3 months"},
     ]},
    {"type": "featureList", "heading": "What Makes {product} Different", "items": [
        "Clinically validated formula with published efficacy data",
        "Third-party tested for purity and potency",
        "No proprietary blends — full ingredient transparency",
        "Manufactured in certified, audited facilities",
        "Backed by a 60-day satisfaction guarantee",
    ]},
    {"type": "faq", "heading": "Frequently Asked Questions", "items": [
        {"question": "How quickly will I notice results from {product}?",
         "answer": "Most users report noticing a meaningful difference within 48–72 hours of first use. Optimal results are typically experienced at the 30-day mark, with continued improvement thereafter."},
        {"question": "Is this product third-party tested?",
         "answer": "Yes. Every batch of {product} undergoes independent third-party testing for purity, potency, and the absence of contaminants. Certificates of analysis are available on request."},
        {"question": "What if it doesn't work for me?",
         "answer": "{product} comes with a 60-day money-back guarantee. If you're not completely satisfied for any reason, contact our team for a full refund — no questions asked."},
    ]},
    {"type": "offerBox", "headline": "Start Your Evidence-Based Experience",
     "subtext": "Join over 75,000 customers who've made the evidence-based choice. Free shipping included.",
     "buttonText": "Order {product} Today", "discount": "FREE SHIPPING — Limited Time",
     "guarantee": "60-Day Money-Back Guarantee"},
    {"type": "disclaimer",
     "text": "This article contains independent research summaries and is provided for informational purposes. Individual results may vary. The statements made have not been evaluated by the FDA and are not intended to diagnose, treat, cure, or prevent any disease. Please consult a qualified healthcare provider before beginning any new supplement or health regimen."},
]

ARCHETYPE = {
    "id":            "research-report",
    "name":          "Research Report",
    "description":   "Clinical, data-driven style with stats, comparisons, and expert framing. Builds authority and trust for health, wellness, or tech products.",
    "default_angle": "Desire",
    "copy":          COPY,
    "skeleton":      SKELETON,
}
