"""Archétype « editorial » : article sobre, trois sous-sections, témoignages, offre."""
from .common import PREMADE_DISCLAIMER
from ..core.copy import IfDescription

_RESULTS = (
    "Here's what customers consistently report after using <strong>{product}</strong>:<br><br>"
    "• <strong>Noticeable improvement within the first week</strong> — most users say they can feel the difference almost immediately.<br><br>"
    "• <strong>Replaces multiple products</strong> — instead of juggling several mediocre options, one solution handles it all.<br><br>"
    "• <strong>Better value over time</strong> — while the upfront price may be comparable, customers spend less in the long run.<br><br>"
    "• <strong>Genuinely enjoyable to use</strong> — this isn't a chore. People actually look forward to using it daily."
)

_WORTH_IT = (
    "If you're tired of products that look great in ads but disappoint in real life, <strong>{product}</strong> is worth a serious look. "
    "The combination of quality, thoughtful design, and genuine customer satisfaction is hard to find — and even harder to fake.<br><br>"
    "Plus, with a money-back guarantee, there's no risk in trying it for yourself."
)

COPY = {
    "Pain": {
        "headline": "Tired of Products That Don't Deliver? Here's Why {product} Is Different",
        "intro": "You've tried the popular options. Spent the money. Read the reviews. And still ended up disappointed. If that sounds familiar, you're not alone — and <strong>{product}</strong> was built specifically for people like you.",
        "headings": ["Why Most Alternatives Fall Short", "How It Actually Solves the Problem", "Is It Worth Trying?"],
        "bodies": [
            "Most products in this space are designed for the average person with the average problem. They look great in ads but fall apart in real life. <strong>{product}</strong> was built differently — engineered to address the specific frustrations that other solutions ignore.<br><br>Every detail, from materials to design, was chosen to deliver results you can actually feel. No more settling for \"good enough.\"",
            _RESULTS,
            _WORTH_IT,
        ],
    },
    "Desire": {
        "headline": "Why {product} Is Becoming the Go-To Choice for Smart Shoppers",
        "intro": "In a market flooded with options that overpromise and underdeliver, <strong>{product}</strong> has quietly built a loyal following. Not through flashy campaigns — but through real results that customers can feel from day one.",
        "headings": ["What Makes It Different", "Real Results, Not Just Marketing Claims", "Is It Worth It?"],
        "bodies": [
            "The first thing customers notice about <strong>{product}</strong> is the quality. While most competitors cut corners to keep costs down, every detail here has been carefully considered — from the materials used to the overall design and performance.<br><br>But quality alone doesn't explain the loyalty. What sets {product} apart is how it fits naturally into your daily routine. It's not something you have to force yourself to use — it's something you genuinely look forward to.",
            _RESULTS,
            _WORTH_IT,
        ],
    },
    "Comparison": {
        "headline": "{product} vs. The Competition: An Honest Side-by-Side Look",
        "intro": "With so many options on the market, it's hard to know which one is actually worth your money. We did a straightforward comparison of <strong>{product}</strong> against the most popular alternatives — here's what we found.",
        "headings": ["Where It Outperforms the Competition", "What Real Customers Say After Switching", "The Verdict"],
        "bodies": [
            "We compared <strong>{product}</strong> against the top alternatives across the factors that matter most: quality, effectiveness, value, and customer satisfaction.<br><br>The differences weren't subtle. While competitors cut corners to maximize margins, {product} invests where it matters — better materials, more thoughtful design, and a relentless focus on real-world results rather than marketing claims.",
            "Here's what customers who switched to <strong>{product}</strong> consistently report:<br><br>• <strong>Noticeably better quality</strong> — the difference is obvious from the first use.<br><br>• <strong>Better results at a comparable price</strong> — when you factor in longevity and performance, {product} wins on value.<br><br>• <strong>Simpler routine</strong> — replaces multiple products with one that actually works.<br><br>• <strong>No looking back</strong> — the vast majority of switchers say they'll never go back to their old solution.",
            "After comparing everything that matters — quality, price, results, and customer satisfaction — <strong>{product}</strong> comes out ahead in every category. It's not the cheapest option, but it's the best value when you factor in what you actually get.<br><br>With a money-back guarantee, there's zero risk in seeing the difference for yourself.",
        ],
    },
}

SKELETON = [
    {"type": "headline", "text": "@headline", "size": "large"},
    {"type": "authorByline", "author": "Dr. Marcus", "role": "Contributing Writer", "date": "{date}",
     "publicationName": "Gemadvertorial"},
    {"type": "image", "label": "Insert hero image — lifestyle or product shot that sets the tone",
     "hint": "High-quality product or lifestyle photo", "src": "{product_image}", "height": "400px"},
    {"type": "text", "content": IfDescription(
        "{description}<br><br>{@intro}",
        "{@intro}<br><br>We took a closer look at what makes this product different — and why thousands of customers are making the switch.",
    )},
    {"type": "headline", "text": "@headings.0", "size": "medium"},
    {"type": "text", "content": "@bodies.0"},
    {"type": "image", "label": "Insert product detail or lifestyle image",
     "hint": "Show the product in use or highlight a key feature", "height": "320px"},
    {"type": "headline", "text": "@headings.1", "size": "medium"},
    {"type": "text", "content": "@bodies.1"},
    {"type": "testimonials", "heading": "What Customers Are Saying", "testimonials": [
        {"quote": "I was skeptical at first, but {product} genuinely delivered. I've already recommended it to three friends.",
         "name": "[Customer Name]", "detail": "Verified Buyer"},
        {"quote": "This replaced two products I was already buying. Better results, simpler routine, and I'm saving money.",
         "name": "[Customer Name]", "detail": "Verified Buyer"},
        {"quote": "The quality is immediately obvious. You can tell this was made by people who actually care.",
         "name": "[Customer Name]", "detail": "Verified Buyer"},
    ]},
    {"type": "headline", "text": "@headings.2", "size": "medium"},
    {"type": "text", "content": "@bodies.2"},
    {"type": "offerBox", "headline": "Special Offer",
     "subtext": "Try {product} today and see why thousands of customers are making the switch.",
     "buttonText": "CHECK AVAILABILITY", "guarantee": "30-Day Money-Back Guarantee"},
    {"type": "faq", "heading": "Frequently Asked Questions", "items": [
        {"question": "How does {product} work?",
         "answer": "{product} is designed to deliver results through consistent daily use. Simply follow the included instructions and you'll begin noticing improvements within the first week."},
        {"question": "How long until I see results?",
         "answer": "Most customers report noticeable improvements within 7–14 days of regular use. Full results typically develop over 4–6 weeks."},
        {"question": "Is there a money-back guarantee?",
         "answer": "Yes. Every purchase is backed by a 30-day money-back guarantee. If you're not satisfied for any reason, contact support for a full refund."},
        {"question": "Where should I buy it?",
         "answer": "We recommend purchasing directly from the official product page to ensure you receive a genuine product with full warranty coverage and the best available pricing."},
    ]},
    {"type": "disclaimer", "text": PREMADE_DISCLAIMER},
]

ARCHETYPE = {
    "id":            "editorial",
    "name":          "Editorial Article",
    "description":   "Clean article-style layout with heading, byline, body sections, testimonials, and CTA. Looks like a real editorial piece.",
    "default_angle": "Desire",
    "copy":          COPY,
    "skeleton":      SKELETON,
}
